"""
Geodesic lines: the direct problem.

A GeodesicLine is anchored at a start point and azimuth. Construction
does all the start-point trigonometry and coefficient evaluation once;
position(s12) then finds the point at any signed distance in closed form,
without iteration.
"""
import math
from typing import NamedTuple, Optional

from geodesic_solver.core import coefficients
from geodesic_solver.core.angles import normalize_angle, round_angle, sincos_degrees
from geodesic_solver.core.auxiliary import (
    arc_and_longitude,
    clairaut,
    geographic_latitude,
    reduced_latitude,
)
from geodesic_solver.core.ellipsoid import EllipsoidModel
from geodesic_solver.core.series import sin_series
from geodesic_solver.utils.config import MAX_SERIES_ORDER


class DirectResult(NamedTuple):
    """End point of the direct problem, in degrees."""
    lat2: float
    lon2: float
    azi2: float


class GeodesicLine:
    """
    A geodesic anchored at (lat1, lon1) heading azi1.

    The line is immutable after construction and can be shared between
    threads. Distances are in the ellipsoid's linear unit and may be
    negative or wrap the ellipsoid any number of times.

    Example:
        >>> from geodesic_solver import wgs84
        >>> line = wgs84().line(40.6, -73.8, 45.0)
        >>> points = [line.position(1000.0 * k) for k in range(5)]
    """

    def __init__(self, ellipsoid: EllipsoidModel, lat1: float, lon1: float, azi1: float,
                 order: int = MAX_SERIES_ORDER):
        azi1 = normalize_angle(azi1)
        # Azimuths at the poles are taken as the limit approaching along
        # the meridian lon1, so fold them into the longitude
        if lat1 == 90:
            lon1 -= azi1 - (180 if azi1 >= 0 else -180)
            azi1 = -180.0
        elif lat1 == -90:
            lon1 += azi1
            azi1 = 0.0
        # Guard against underflow in salp0
        azi1 = round_angle(azi1)
        lon1 = normalize_angle(lon1)

        self._bsign = 1 if azi1 >= 0 else -1
        azi1 *= self._bsign
        self._lat1 = lat1
        self._lon1 = lon1
        self._azi1 = normalize_angle(self._bsign * azi1)
        self._f1 = ellipsoid.f1

        # alp1 in [0, pi]; sin(pi) and cos(pi/2) come out exactly zero
        salp1, calp1 = sincos_degrees(azi1)
        sbet1, cbet1 = reduced_latitude(lat1, ellipsoid.f1)

        self._salp0, self._calp0 = clairaut(salp1, calp1, sbet1, cbet1)

        # sig1 = 0 at the northward equator crossing. An equatorial line
        # (sbet1 = calp1 = 0) starts at sig1 = lam1 = 0.
        if sbet1 != 0 or calp1 != 0:
            (self._ssig1, self._csig1), (self._slam1, self._clam1) = arc_and_longitude(
                sbet1, cbet1, self._salp0, calp1)
        else:
            self._ssig1, self._csig1 = 0.0, 1.0
            self._slam1, self._clam1 = 0.0, 1.0

        mu = self._calp0 ** 2
        u2 = mu * ellipsoid.ep2

        self._s_scale = ellipsoid.b * coefficients.tau_scale(u2, order)
        tau_coeff = coefficients.tau_coeff(u2, order)
        # tau1 = sig1 + dtau1
        self._dtau1 = sin_series(self._ssig1, self._csig1, tau_coeff)
        s, c = math.sin(self._dtau1), math.cos(self._dtau1)
        self._stau1 = self._ssig1 * c + self._csig1 * s
        self._ctau1 = self._csig1 * c - self._ssig1 * s
        self._sig_coeff = coefficients.sig_coeff(u2, order)

        self._dlam_scale = self._salp0 * coefficients.dlam_scale(ellipsoid.f, mu, order)
        self._dlam_coeff = coefficients.dlam_coeff(ellipsoid.f, mu, order)
        self._dchi1 = sin_series(self._ssig1, self._csig1, self._dlam_coeff)

    @property
    def latitude(self) -> float:
        """Start latitude in degrees."""
        return self._lat1

    @property
    def longitude(self) -> float:
        """Start longitude in degrees, after folding any polar azimuth into it."""
        return self._lon1

    @property
    def azimuth(self) -> float:
        """Start azimuth in degrees, canonicalized."""
        return self._azi1

    def position(self, s12: float) -> Optional[DirectResult]:
        """
        Point at signed distance s12 along the line.

        Args:
            s12: Distance from the start point; negative goes backwards

        Returns:
            DirectResult(lat2, lon2, azi2) in degrees, or None if the
            line has a zero distance scale and so cannot be advanced
        """
        if self._s_scale == 0:
            return None

        tau12 = s12 / self._s_scale
        s, c = math.sin(tau12), math.cos(tau12)
        # tau2 = tau1 + tau12, then revert to sigma
        sig12 = tau12 + (self._dtau1 +
                         sin_series(self._stau1 * c + self._ctau1 * s,
                                    self._ctau1 * c - self._stau1 * s,
                                    self._sig_coeff))
        s, c = math.sin(sig12), math.cos(sig12)
        # sig2 = sig1 + sig12
        ssig2 = self._ssig1 * c + self._csig1 * s
        csig2 = self._csig1 * c - self._ssig1 * s
        # sin(bet2) = cos(alp0) * sin(sig2)
        sbet2 = self._calp0 * ssig2
        cbet2 = math.hypot(self._salp0, self._calp0 * csig2)
        # tan(lam2) = sin(alp0) * tan(sig2); no need to normalize
        slam2, clam2 = self._salp0 * ssig2, csig2
        # tan(alp0) = cos(sig2) * tan(alp2)
        salp2, calp2 = self._salp0, self._calp0 * csig2

        lam12 = math.atan2(slam2 * self._clam1 - clam2 * self._slam1,
                           clam2 * self._clam1 + slam2 * self._slam1)
        chi12 = lam12 + self._dlam_scale * (
            sig12 + (sin_series(ssig2, csig2, self._dlam_coeff) - self._dchi1))

        # The line may have wrapped several times, so unwind explicitly
        lon12 = self._bsign * math.degrees(chi12)
        lon12 = lon12 - 360 * math.floor(lon12 / 360 + 0.5)

        lat2 = geographic_latitude(sbet2, cbet2, self._f1)
        lon2 = normalize_angle(self._lon1 + lon12)
        azi2 = normalize_angle(math.degrees(math.atan2(self._bsign * salp2, calp2)))
        return DirectResult(lat2, lon2, azi2)
