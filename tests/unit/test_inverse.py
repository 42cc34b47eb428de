"""
Tests for the inverse problem.
"""
import logging
import math

import numpy as np
import pytest

from geodesic_solver.core.angles import normalize_angle
from geodesic_solver.core.auxiliary import reduced_latitude
from geodesic_solver.core.ellipsoid import EllipsoidModel, make_ellipsoid, wgs84_ellipsoid
from geodesic_solver.core.geodesic import Geodesic, wgs84
from geodesic_solver.core.inverse import (
    InverseCase,
    InverseResult,
    InverseSolution,
    longitude_difference,
    solve_inverse,
)
from geodesic_solver.utils.config import SolverConfig

WGS84_A = 6378137.0
QUARTER_MERIDIAN = 10001965.729230


def angle_diff(a, b):
    return abs(normalize_angle(a - b))


class TestKnownGeodesics:
    """Published WGS84 results."""

    def test_jfk_to_lhr(self):
        s12, azi1, azi2 = wgs84().inverse(40.6, -73.8, 51.6, -0.5)
        assert s12 == pytest.approx(5551759.400319, abs=1e-3)
        assert azi1 == pytest.approx(51.198882845579, abs=1e-7)
        assert azi2 == pytest.approx(107.821776735514, abs=1e-7)

    def test_wellington_to_salamanca(self):
        """Nearly antipodal pair."""
        s12, azi1, azi2 = wgs84().inverse(-41.32, 174.81, 40.96, -5.50)
        assert s12 == pytest.approx(19959679.267353, abs=1e-3)
        assert azi1 == pytest.approx(161.06766998615, abs=1e-6)
        assert azi2 == pytest.approx(18.825195123248, abs=1e-6)

    def test_meridian_arc_to_45(self):
        s12, azi1, azi2 = wgs84().inverse(0.0, 0.0, 45.0, 0.0)
        assert s12 == pytest.approx(4984944.378, abs=1e-3)
        assert azi1 == 0.0
        assert azi2 == 0.0

    def test_quarter_equator(self):
        s12, azi1, azi2 = wgs84().inverse(0.0, 0.0, 0.0, 90.0)
        assert s12 == pytest.approx(WGS84_A * math.pi / 2, rel=1e-15)
        assert azi1 == 90.0
        assert azi2 == 90.0

    def test_westward_equator(self):
        s12, azi1, azi2 = wgs84().inverse(0.0, 10.0, 0.0, -20.0)
        assert s12 == pytest.approx(WGS84_A * math.radians(30.0), rel=1e-14)
        assert azi1 == -90.0
        assert azi2 == -90.0


class TestCaseDispatch:
    """Each canonical pair resolves to exactly one case."""

    @pytest.mark.parametrize("points,case", [
        ((0.0, 0.0, 45.0, 0.0), InverseCase.MERIDIAN),
        ((10.0, 20.0, -30.0, 200.0), InverseCase.MERIDIAN),
        ((-90.0, 0.0, 30.0, 60.0), InverseCase.MERIDIAN),
        ((0.0, 0.0, 0.0, 90.0), InverseCase.EQUATORIAL),
        ((0.0, 0.0, 0.0, 179.5), InverseCase.GENERAL),
        ((40.6, -73.8, 51.6, -0.5), InverseCase.GENERAL),
    ])
    def test_case(self, points, case):
        solution = wgs84().inverse_solution(*points)
        assert solution.case is case

    def test_nearly_same_meridian_is_meridian(self):
        """A longitude difference of 1e-20 degrees rounds to zero."""
        solution = wgs84().inverse_solution(10.0, 1e-20, 20.0, 0.0)
        assert solution.case is InverseCase.MERIDIAN

    def test_closed_form_cases_do_not_iterate(self):
        for points in [(0.0, 0.0, 45.0, 0.0), (0.0, 0.0, 0.0, 90.0)]:
            solution = wgs84().inverse_solution(*points)
            assert solution.iterations == 0
            assert solution.start_iterations == 0
            assert solution.converged

    def test_general_case_iterates(self):
        solution = wgs84().inverse_solution(40.6, -73.8, 51.6, -0.5)
        assert 1 <= solution.iterations <= 50
        assert solution.converged

    def test_solution_result(self):
        solution = solve_inverse(wgs84_ellipsoid(), 40.6, -73.8, 51.6, -0.5)
        assert isinstance(solution, InverseSolution)
        assert isinstance(solution.result, InverseResult)
        assert solution.result == (solution.s12, solution.azi1, solution.azi2)


class TestPoles:
    """Endpoints at a pole."""

    def test_from_south_pole(self):
        """The azimuth at a pole is measured from the meridian of its longitude."""
        geod = wgs84()
        s12, azi1, azi2 = geod.inverse(-90.0, 0.0, 30.0, 60.0)
        expected = geod.inverse(0.0, 0.0, -90.0, 0.0).s12 + geod.inverse(0.0, 0.0, 30.0, 0.0).s12
        assert s12 == pytest.approx(expected, rel=1e-12)
        assert azi1 == pytest.approx(60.0, abs=1e-12)
        assert azi2 == pytest.approx(0.0, abs=1e-12)

        lat2, lon2, _ = geod.direct(-90.0, 0.0, azi1, s12)
        assert lat2 == pytest.approx(30.0, abs=1e-9)
        assert lon2 == pytest.approx(60.0, abs=1e-9)

    def test_pole_to_pole(self):
        geod = wgs84()
        s12, _, _ = geod.inverse(90.0, 0.0, -90.0, 0.0)
        assert s12 == pytest.approx(2 * geod.inverse(0.0, 0.0, 90.0, 0.0).s12, rel=1e-14)
        assert s12 == pytest.approx(2 * QUARTER_MERIDIAN, abs=1e-3)


class TestAntipodal:
    """Antipodal and nearly antipodal pairs."""

    def test_equatorial_antipodes_cross_the_pole(self):
        solution = wgs84().inverse_solution(0.0, 0.0, 0.0, 180.0)
        assert solution.case is InverseCase.MERIDIAN
        assert solution.s12 == pytest.approx(2 * QUARTER_MERIDIAN, abs=1e-3)
        assert solution.azi1 == 0.0
        assert solution.azi2 == 180.0

    def test_continuity_approaching_antipode(self):
        """Nothing jumps as lon12 approaches 180 on the equator."""
        geod = wgs84()
        exact = geod.inverse(0.0, 0.0, 0.0, 180.0).s12
        near = geod.inverse_solution(0.0, 0.0, 0.0, 179.9999)
        assert near.case is InverseCase.GENERAL
        assert near.converged
        assert near.s12 == pytest.approx(exact, abs=0.5)

    def test_just_off_the_antipode(self):
        geod = wgs84()
        solution = geod.inverse_solution(0.0, 0.0, 0.001, 179.999)
        assert solution.case is InverseCase.GENERAL
        assert solution.converged

        lat2, lon2, _ = geod.direct(0.0, 0.0, solution.azi1, solution.s12)
        assert lat2 == pytest.approx(0.001, abs=1e-8)
        assert angle_diff(lon2, 179.999) < 1e-8

    def test_azimuth_continuity_near_antipode(self):
        """Stepping the target by 1e-3 degrees never moves azi1 by a degree or more."""
        geod = wgs84()
        lats = [0.001 * k for k in range(1, 11)]
        lons = [179.999 - 0.001 * k for k in range(10)]
        grid = []
        for lat2 in lats:
            row = []
            for lon2 in lons:
                solution = geod.inverse_solution(0.0, 0.0, lat2, lon2)
                assert solution.converged, (lat2, lon2)
                row.append(solution.azi1)
            grid.append(row)

        for i, row in enumerate(grid):
            for j, azi1 in enumerate(row):
                if j + 1 < len(row):
                    assert angle_diff(azi1, row[j + 1]) < 1.0, (lats[i], lons[j])
                if i + 1 < len(grid):
                    assert angle_diff(azi1, grid[i + 1][j]) < 1.0, (lats[i], lons[j])

    def test_beyond_equatorial_limit(self):
        """Past (1 - f) * 180 the equator is no longer the shortest path."""
        geod = wgs84()
        solution = geod.inverse_solution(0.0, 0.0, 0.0, 179.5)
        assert solution.case is InverseCase.GENERAL
        assert solution.converged
        assert solution.s12 < WGS84_A * math.radians(179.5)

        lat2, lon2, _ = geod.direct(0.0, 0.0, solution.azi1, solution.s12)
        assert lat2 == pytest.approx(0.0, abs=1e-8)
        assert angle_diff(lon2, 179.5) < 1e-8

    def test_cubic_starting_guess(self):
        """Pair close to the singular point of the antipodal problem."""
        geod = wgs84()
        solution = geod.inverse_solution(-30.0, 0.0, 29.99, 179.48)
        assert solution.case is InverseCase.GENERAL
        assert solution.start_iterations > 0
        assert solution.converged

        lat2, lon2, _ = geod.direct(-30.0, 0.0, solution.azi1, solution.s12)
        assert lat2 == pytest.approx(29.99, abs=1e-7)
        assert angle_diff(lon2, 179.48) < 1e-7

    def test_wide_antipodal_start(self):
        geod = wgs84()
        solution = geod.inverse_solution(-30.0, 0.0, 29.9, 179.8)
        assert solution.converged

        lat2, lon2, _ = geod.direct(-30.0, 0.0, solution.azi1, solution.s12)
        assert lat2 == pytest.approx(29.9, abs=1e-7)
        assert angle_diff(lon2, 179.8) < 1e-7


class TestSymmetryAndCoincidence:
    """Swapping the endpoints and identical endpoints."""

    @pytest.mark.parametrize("points", [
        (40.6, -73.8, 51.6, -0.5),
        (-41.32, 174.81, 40.96, -5.50),
        (10.0, 0.0, -10.0, 50.0),
        (0.0, 0.0, 45.0, 0.0),
        (-60.0, 170.0, -20.0, -150.0),
    ])
    def test_swapped_endpoints(self, points):
        lat1, lon1, lat2, lon2 = points
        geod = wgs84()
        s12, azi1, azi2 = geod.inverse(lat1, lon1, lat2, lon2)
        s21, azi1_rev, azi2_rev = geod.inverse(lat2, lon2, lat1, lon1)
        assert s21 == pytest.approx(s12, abs=1e-6)
        assert angle_diff(azi1_rev, azi2 + 180.0) < 1e-8
        assert angle_diff(azi2_rev, azi1 + 180.0) < 1e-8

    @pytest.mark.parametrize("lat,lon", [(0.0, 0.0), (30.0, 40.0), (-75.0, -120.0), (90.0, 10.0)])
    def test_coincident_points(self, lat, lon):
        s12, azi1, azi2 = wgs84().inverse(lat, lon, lat, lon)
        assert s12 == pytest.approx(0.0, abs=1e-9)
        assert azi1 == azi2

    def test_longitude_wrap_is_irrelevant(self):
        geod = wgs84()
        first = geod.inverse(10.0, 170.0, 20.0, -170.0)
        second = geod.inverse(10.0, -190.0, 20.0, 190.0)
        assert second.s12 == pytest.approx(first.s12, rel=1e-14)
        assert second.azi1 == pytest.approx(first.azi1, abs=1e-12)


class TestRoundTrip:
    """Inverse then direct returns to the target point."""

    def test_random_pairs(self):
        rng = np.random.default_rng(20240607)
        geod = wgs84()
        lats = rng.uniform(-89.0, 89.0, size=(100, 2))
        lons = rng.uniform(-180.0, 180.0, size=(100, 2))
        for (lat1, lat2), (lon1, lon2) in zip(lats, lons):
            lat1, lat2, lon1, lon2 = float(lat1), float(lat2), float(lon1), float(lon2)
            s12, azi1, azi2 = geod.inverse(lat1, lon1, lat2, lon2)
            assert 0 <= s12 <= 2 * QUARTER_MERIDIAN + 1e-3
            end = geod.direct(lat1, lon1, azi1, s12)
            assert end.lat2 == pytest.approx(lat2, abs=1e-7)
            assert angle_diff(end.lon2, lon2) < 1e-7
            assert angle_diff(end.azi2, azi2) < 1e-6

    def test_direct_then_inverse(self):
        rng = np.random.default_rng(7)
        geod = wgs84()
        for _ in range(50):
            lat1 = float(rng.uniform(-80.0, 80.0))
            azi1 = float(rng.uniform(-180.0, 180.0))
            s12 = float(rng.uniform(1e3, 1e7))
            lat2, lon2, _ = geod.direct(lat1, 0.0, azi1, s12)
            result = geod.inverse(lat1, 0.0, lat2, lon2)
            assert result.s12 == pytest.approx(s12, abs=1e-6)
            assert angle_diff(result.azi1, azi1) < 1e-8


class TestOtherEllipsoids:
    """Spheres, other flattenings and truncation orders."""

    def test_sphere_matches_great_circle(self):
        radius = 6371000.0
        geod = Geodesic(make_ellipsoid(radius, 0.0))
        lat1, lon1, lat2, lon2 = 40.6, -73.8, 51.6, -0.5
        phi1, phi2 = math.radians(lat1), math.radians(lat2)
        dlon = math.radians(lon2 - lon1)
        central = math.acos(math.sin(phi1) * math.sin(phi2) +
                            math.cos(phi1) * math.cos(phi2) * math.cos(dlon))
        bearing = math.degrees(math.atan2(
            math.sin(dlon) * math.cos(phi2),
            math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlon)))

        s12, azi1, _ = geod.inverse(lat1, lon1, lat2, lon2)
        assert s12 == pytest.approx(radius * central, rel=1e-12)
        assert azi1 == pytest.approx(bearing, abs=1e-9)

    def test_prolate_round_trip(self):
        geod = Geodesic(EllipsoidModel(6378137.0, -1 / 300.0))
        s12, azi1, _ = geod.inverse(40.6, -73.8, 51.6, -0.5)
        lat2, lon2, _ = geod.direct(40.6, -73.8, azi1, s12)
        assert lat2 == pytest.approx(51.6, abs=1e-8)
        assert lon2 == pytest.approx(-0.5, abs=1e-8)

    def test_lower_series_orders(self):
        reference = wgs84().inverse(40.6, -73.8, 51.6, -0.5).s12
        order6 = Geodesic(wgs84_ellipsoid(), SolverConfig(series_order=6))
        order1 = Geodesic(wgs84_ellipsoid(), SolverConfig(series_order=1))
        assert order6.inverse(40.6, -73.8, 51.6, -0.5).s12 == pytest.approx(reference, abs=1e-3)
        assert order1.inverse(40.6, -73.8, 51.6, -0.5).s12 == pytest.approx(reference, abs=1e3)


class TestIterationCap:
    """Running out of Newton iterations is reported, not raised."""

    def test_best_estimate_returned(self):
        geod = Geodesic(wgs84_ellipsoid(), SolverConfig(max_iterations=1))
        solution = geod.inverse_solution(40.6, -73.8, 51.6, -0.5)
        assert solution.converged is False
        assert solution.iterations == 1
        assert math.isfinite(solution.s12)
        assert solution.s12 == pytest.approx(5551759.4, rel=0.05)

    def test_non_convergence_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="geodesic_solver.core.inverse")
        geod = Geodesic(wgs84_ellipsoid(), SolverConfig(max_iterations=1))
        geod.inverse(40.6, -73.8, 51.6, -0.5)
        assert "inverse_not_converged" in caplog.text


class TestLongitudeDifference:
    """Tests for longitude_difference function."""

    def setup_method(self):
        self.ellipsoid = wgs84_ellipsoid()
        self.sbet1, self.cbet1 = reduced_latitude(-51.6, self.ellipsoid.f1)
        self.sbet2, self.cbet2 = reduced_latitude(-40.6, self.ellipsoid.f1)

    def fit(self, alp1, with_derivative=False):
        return longitude_difference(
            self.ellipsoid, self.sbet1, self.cbet1, self.sbet2, self.cbet2,
            math.sin(alp1), math.cos(alp1), with_derivative=with_derivative)

    def test_derivative_only_when_requested(self):
        assert self.fit(0.9).dchi12 is None
        assert self.fit(0.9, with_derivative=True).dchi12 is not None

    def test_derivative_matches_finite_difference(self):
        h = 1e-6
        numeric = (self.fit(0.9 + h).chi12 - self.fit(0.9 - h).chi12) / (2 * h)
        assert self.fit(0.9, with_derivative=True).dchi12 == pytest.approx(numeric, rel=1e-6)

    def test_clairaut_at_end_point(self):
        """sin(alpha2) * cos(beta2) = sin(alpha1) * cos(beta1)."""
        result = self.fit(0.9)
        assert result.salp2 * self.cbet2 == pytest.approx(math.sin(0.9) * self.cbet1, rel=1e-14)
        assert math.hypot(result.salp2, result.calp2) == pytest.approx(1.0, abs=1e-14)
