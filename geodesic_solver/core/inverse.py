"""
The inverse problem: distance and azimuths between two points.

Each call canonicalizes the pair, resolves it once to one of three cases
and solves that case with a pure function:

    MERIDIAN    the points share a meridian (or point 1 is a pole);
                the azimuth is known, only the distance is computed
    EQUATORIAL  both points on the equator and close enough that the
                equator is the shortest path; s12 = a * lon12
    GENERAL     Newton's method on the start azimuth alpha1 until the
                ellipsoidal longitude difference chi12(alpha1) matches
                the target

The general case is seeded by a spherical estimate of alpha1, or, for
nearly antipodal points, by locating the singular point of the problem
through a local cubic and a short spherical Newton pass.
"""
import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from geodesic_solver.core import coefficients
from geodesic_solver.core.angles import atan2_degrees, normalize_angle, round_angle, sincos_degrees, sincos_norm
from geodesic_solver.core.auxiliary import (
    EPS2,
    angle_between,
    arc_and_longitude,
    clairaut,
    reduced_latitude_scaled,
)
from geodesic_solver.core.ellipsoid import EllipsoidModel
from geodesic_solver.core.series import sin_series
from geodesic_solver.utils.config import SolverConfig
from geodesic_solver.utils.logging_config import get_logger

logger = get_logger(__name__)

# Newton tolerances
TOL = 100 * sys.float_info.epsilon
TOL1 = math.sqrt(sys.float_info.epsilon)
XTHRESH = 10 * TOL1

# Bounds of the region around the singular point where the cubic
# estimate of alpha1 is used
CUBIC_Y_MIN = -0.027
CUBIC_X_RANGE = (-1.09, -0.91)


class InverseCase(Enum):
    """Geometric case an inverse problem resolves to."""
    MERIDIAN = "meridian"
    EQUATORIAL = "equatorial"
    GENERAL = "general"


class InverseResult(NamedTuple):
    """Distance and forward azimuths (degrees) at both ends."""
    s12: float
    azi1: float
    azi2: float


@dataclass(frozen=True)
class InverseSolution:
    """
    Inverse result plus how it was obtained.

    Attributes:
        s12: Distance between the points
        azi1: Azimuth at point 1, degrees in (-180, 180]
        azi2: Forward azimuth at point 2, degrees in (-180, 180]
        case: Case the canonicalized pair resolved to
        iterations: Ellipsoidal Newton evaluations (GENERAL only)
        start_iterations: Spherical Newton steps spent on the
            near-antipodal starting guess (GENERAL only)
        converged: False if the Newton cap was hit before the
            residual dropped below tolerance
    """
    s12: float
    azi1: float
    azi2: float
    case: InverseCase
    iterations: int = 0
    start_iterations: int = 0
    converged: bool = True

    @property
    def result(self) -> InverseResult:
        return InverseResult(self.s12, self.azi1, self.azi2)


@dataclass(frozen=True)
class LongitudeFit:
    """
    Geodesic from point 1 at a trial azimuth, evaluated at point 2's latitude.

    chi12 is the ellipsoidal longitude difference reached; dchi12 its
    derivative with respect to alpha1, or None when not requested.
    """
    chi12: float
    dchi12: Optional[float]
    salp2: float
    calp2: float
    sig12: float
    ssig1: float
    csig1: float
    ssig2: float
    csig2: float
    u2: float


@dataclass(frozen=True)
class _CanonicalPair:
    """Pair folded to 0 <= lon12 <= 180, -90 <= lat1 <= 0, lat1 <= lat2 <= -lat1."""
    lat1: float
    chi12: float
    schi12: float
    cchi12: float
    sbet1: float
    cbet1: float
    n1: float
    sbet2: float
    cbet2: float
    lonsign: int
    swapp: int
    latsign: int


class _Arm(NamedTuple):
    salp1: float
    calp1: float
    salp2: float
    calp2: float
    s12: float
    iterations: int = 0
    start_iterations: int = 0
    converged: bool = True


def _canonicalize(ellipsoid: EllipsoidModel, lat1: float, lon1: float,
                  lat2: float, lon2: float) -> _CanonicalPair:
    lon12 = normalize_angle(normalize_angle(lon2) - normalize_angle(lon1))
    # Nearly on the same meridian is taken as on it
    lon12 = round_angle(lon12)
    lonsign = 1 if lon12 >= 0 else -1
    lon12 = lon12 * lonsign + 0.0
    # Nearly on the equator is taken as on it
    lat1 = round_angle(lat1)
    lat2 = round_angle(lat2)
    # Point with the larger |latitude| becomes point 1
    swapp = 1 if abs(lat1) >= abs(lat2) else -1
    if swapp < 0:
        lonsign *= -1
        lat1, lat2 = lat2, lat1
    # Make lat1 <= 0
    latsign = 1 if lat1 < 0 else -1
    lat1 *= latsign
    lat2 *= latsign

    sbet1, cbet1, n1 = reduced_latitude_scaled(lat1, ellipsoid.f1)
    sbet2, cbet2, _ = reduced_latitude_scaled(lat2, ellipsoid.f1)
    schi12, cchi12 = sincos_degrees(lon12)

    return _CanonicalPair(
        lat1=lat1,
        chi12=math.radians(lon12),
        schi12=schi12,
        cchi12=cchi12,
        sbet1=sbet1,
        cbet1=cbet1,
        n1=n1,
        sbet2=sbet2,
        cbet2=cbet2,
        lonsign=lonsign,
        swapp=swapp,
        latsign=latsign,
    )


def _classify(ellipsoid: EllipsoidModel, pair: _CanonicalPair) -> InverseCase:
    if pair.schi12 == 0 or pair.lat1 == -90:
        return InverseCase.MERIDIAN
    # sbet1 == 0 implies sbet2 == 0; the bound mimics longitude_difference
    # with calp1 = 0
    if pair.sbet1 == 0 and pair.chi12 <= math.pi - ellipsoid.f * math.pi:
        return InverseCase.EQUATORIAL
    return InverseCase.GENERAL


def _distance(ellipsoid: EllipsoidModel, u2: float, sig12: float,
              ssig1: float, csig1: float, ssig2: float, csig2: float, order: int) -> float:
    c = coefficients.tau_coeff(u2, order)
    return ellipsoid.b * coefficients.tau_scale(u2, order) * (
        sig12 + (sin_series(ssig2, csig2, c) - sin_series(ssig1, csig1, c)))


def _solve_meridian(ellipsoid: EllipsoidModel, pair: _CanonicalPair, config: SolverConfig) -> _Arm:
    # Head to the target longitude; at the target we are heading north
    salp1, calp1 = pair.schi12, pair.cchi12
    salp2, calp2 = 0.0, 1.0

    # tan(bet) = tan(sig) * cos(alp)
    ssig1, csig1 = sincos_norm(pair.sbet1, calp1 * pair.cbet1)
    ssig2, csig2 = sincos_norm(pair.sbet2, calp2 * pair.cbet2)
    sig12 = angle_between(ssig1, csig1, ssig2, csig2)

    s12 = _distance(ellipsoid, ellipsoid.ep2, sig12, ssig1, csig1, ssig2, csig2,
                    config.series_order)
    return _Arm(salp1, calp1, salp2, calp2, s12)


def _solve_equatorial(ellipsoid: EllipsoidModel, pair: _CanonicalPair, config: SolverConfig) -> _Arm:
    return _Arm(1.0, 0.0, 1.0, 0.0, ellipsoid.a * pair.chi12)


def longitude_difference(ellipsoid: EllipsoidModel,
                         sbet1: float, cbet1: float, sbet2: float, cbet2: float,
                         salp1: float, calp1: float,
                         order: int = 8, with_derivative: bool = False) -> LongitudeFit:
    """
    Longitude difference reached at latitude beta2 when leaving beta1 at alpha1.

    Args:
        ellipsoid: Ellipsoid to solve on
        sbet1, cbet1: Reduced latitude of point 1 (canonical, <= 0)
        sbet2, cbet2: Reduced latitude of point 2 (|beta2| <= |beta1|)
        salp1, calp1: Trial azimuth at point 1, salp1 >= 0
        order: Series truncation order
        with_derivative: Also compute d(chi12)/d(alpha1)

    Returns:
        LongitudeFit with chi12, the optional derivative, the end azimuth
        from Clairaut's relation, the arc lengths and u2 for the distance
    """
    f, e2 = ellipsoid.f, ellipsoid.e2
    if sbet1 == 0 and calp1 == 0:
        # Break the degeneracy of the equatorial line; that case is
        # handled before we get here
        calp1 = -EPS2

    salp0, calp0 = clairaut(salp1, calp1, sbet1, cbet1)  # calp0 > 0
    (ssig1, csig1), (slam1, clam1) = arc_and_longitude(sbet1, cbet1, salp0, calp1)

    # sin(alp2) * cos(bet2) = sin(alp0). When |bet2| = -bet1 the general
    # formulas are 0/0, so use the symmetry directly.
    salp2 = salp0 / cbet2 if cbet2 != cbet1 else salp1
    if cbet2 != cbet1 or abs(sbet2) != -sbet1:
        # calp2 = sqrt(calp0**2 - sbet2**2) / cbet2, rearranged for accuracy
        if cbet1 < -sbet1:
            dbet = (cbet2 - cbet1) * (cbet1 + cbet2)
        else:
            dbet = (sbet1 - sbet2) * (sbet1 + sbet2)
        calp2 = math.sqrt(max((calp1 * cbet1) ** 2 + dbet, 0.0)) / cbet2
    else:
        calp2 = abs(calp1)
    (ssig2, csig2), (slam2, clam2) = arc_and_longitude(sbet2, cbet2, salp0, calp2)

    sig12 = angle_between(ssig1, csig1, ssig2, csig2)
    lam12 = angle_between(slam1, clam1, slam2, clam2)

    mu = calp0 ** 2
    c = coefficients.dlam_coeff(f, mu, order)
    eta12 = sin_series(ssig2, csig2, c) - sin_series(ssig1, csig1, c)
    lamscale = coefficients.dlam_scale(f, mu, order)
    chi12 = lam12 + salp0 * lamscale * (sig12 + eta12)

    dchi12 = None
    if with_derivative:
        # Differentiate sin(alp) * cos(bet) = sin(alp0)
        dalp0 = cbet1 * calp1 / calp0
        if calp2 != 0:
            dalp2 = calp1 * cbet1 / (calp2 * cbet2)
        else:
            dalp2 = 1.0 if calp1 >= 0 else -1.0
        # Differentiate tan(bet) = tan(sig) * cos(alp), clearing calp from
        # the denominator with tan(alp0) = cos(sig) * tan(alp)
        dsig1 = ssig1 * salp0 / calp0
        dsig2 = ssig2 * salp0 / calp0 * dalp2
        # Differentiate tan(lam) = sin(alp0) * tan(sig)
        dlam1 = sbet1 * clam1 ** 2 + slam1 * salp0 / (calp0 * cbet1)
        dlam2 = (sbet2 * clam2 ** 2 + slam2 * salp0 / (calp0 * cbet2)) * dalp2

        c = coefficients.dlam_coeff_mu(f, mu, order)
        dmu = -2 * calp0 * salp0 * dalp0
        deta12 = dmu * (sin_series(ssig2, csig2, c) - sin_series(ssig1, csig1, c))
        dlamscale = coefficients.dlam_scale_mu(f, mu, order) * dmu

        # d/dsig of salp0 * lamscale * (sig + eta), from its integral form
        dchisig = -e2 * salp0 * (
            dsig2 / (math.sqrt(1 - e2 * (1 - mu * ssig2 ** 2)) + 1) -
            dsig1 / (math.sqrt(1 - e2 * (1 - mu * ssig1 ** 2)) + 1))

        dchi12 = ((dlam2 - dlam1) + dchisig +
                  (dalp0 * calp0 * lamscale + salp0 * dlamscale) * (sig12 + eta12) +
                  salp0 * lamscale * deta12)

    return LongitudeFit(
        chi12=chi12,
        dchi12=dchi12,
        salp2=salp2,
        calp2=calp2,
        sig12=sig12,
        ssig1=ssig1,
        csig1=csig1,
        ssig2=ssig2,
        csig2=csig2,
        u2=mu * ellipsoid.ep2,
    )


def _cubic_start(x: float, y: float) -> Tuple[float, float]:
    """
    Start azimuth near the singular point from the root of
    t**3 - 2*a*t - 2 = 0, with a = (x + 1) / |y|**(2/3), t = calp2 / |y|**(1/3).
    """
    a = (x + 1) / math.cbrt(y) ** 2
    if a == 0:
        # Limit a -> 0 of the expression below
        calp1 = math.cbrt(-2 * y)
    else:
        a3 = a ** 3
        disc = 27 - 8 * a3
        v = 1.0
        if disc >= 0:
            s = 4 * a3 - 27
            s += (1 if s > 0 else -1) * 3 * math.sqrt(3.0) * math.sqrt(disc)
            s = math.cbrt(s / (4 * a3))
            v += s + 1 / s
        else:
            ang = math.atan2(3 * math.sqrt(3.0) * math.sqrt(-disc), 4 * a3 - 27) + 2 * math.pi
            v += 2 * math.cos(ang / 3)
        calp1 = math.cbrt(-y) * -3 / a / v
    return math.sqrt(max(1 - calp1 ** 2, 0.0)), calp1


def _start_azimuth(ellipsoid: EllipsoidModel, pair: _CanonicalPair,
                   config: SolverConfig) -> Tuple[float, float, int]:
    """Starting (salp1, calp1) for Newton's method and the spherical steps spent on it."""
    sbet1, cbet1, sbet2, cbet2 = pair.sbet1, pair.cbet1, pair.sbet2, pair.cbet2
    schi12, cchi12 = pair.schi12, pair.cchi12
    # bet2 - bet1 in [0, pi) and bet2 + bet1 in (-pi, 0]
    sbet12 = sbet2 * cbet1 - cbet2 * sbet1
    sbet12a = sbet2 * cbet1 + cbet2 * sbet1

    csig12 = sbet1 * sbet2 + cbet1 * cbet2 * cchi12
    salp1 = cbet2 * schi12
    if cchi12 >= 0:
        # f1 / n1 is an ellipsoidal correction for short distances
        calp1 = sbet12 * ellipsoid.f1 / pair.n1 + cbet2 * sbet1 * schi12 ** 2 / (1 + cchi12)
    else:
        calp1 = sbet12a - cbet2 * sbet1 * schi12 ** 2 / (1 - cchi12)
    ssig12 = math.hypot(salp1, calp1)
    chicrita = -cbet1 * coefficients.dlam_scale(ellipsoid.f, sbet1 ** 2, config.series_order) * math.pi

    if csig12 >= 0 or ssig12 >= 3 * chicrita * cbet1:
        # Zeroth order spherical approximation is good enough
        salp1, calp1 = sincos_norm(salp1, calp1)
        return salp1, calp1, 0

    # Nearly antipodal: scaled coordinates relative to the singular point
    x = (pair.chi12 - math.pi) / chicrita
    y = sbet12a / (chicrita * cbet1)
    if y > -TOL and x > -1 - XTHRESH:
        # Strip near the cut
        salp1 = min(1.0, -x)
        calp1 = -math.sqrt(1 - salp1 ** 2)
        return salp1, calp1, 0

    if y == 0:
        salp1, calp1 = 1.0, 0.0
    elif y > CUBIC_Y_MIN and CUBIC_X_RANGE[0] < x < CUBIC_X_RANGE[1]:
        salp1, calp1 = _cubic_start(x, y)
    else:
        salp1, calp1 = 0.0, 1.0

    steps = 0
    for _ in range(config.start_iterations):
        steps += 1
        v = calp1 * (salp1 + x) - y * salp1
        if v == 0:
            break
        dv = -calp1 * y - salp1 * x + (calp1 - salp1) * (calp1 + salp1)
        if dv == 0:
            break
        da = -v / dv
        sda, cda = math.sin(da), math.cos(da)
        nsalp1 = salp1 * cda + calp1 * sda
        calp1 = max(0.0, calp1 * cda - salp1 * sda)
        salp1 = max(0.0, nsalp1)
        salp1, calp1 = sincos_norm(salp1, calp1)
        if abs(da) < TOL1:
            break

    # Estimate lam12 from the spherical solution; chi12 = pi - chicrita * r
    r = math.hypot(y, salp1 + x) * chicrita * salp1
    schi12, cchi12 = math.sin(r), -math.cos(r)
    salp1 = cbet2 * schi12
    calp1 = sbet12a - cbet2 * sbet1 * schi12 ** 2 / (1 - cchi12)
    salp1, calp1 = sincos_norm(salp1, calp1)
    return salp1, calp1, steps


def _solve_general(ellipsoid: EllipsoidModel, pair: _CanonicalPair, config: SolverConfig) -> _Arm:
    order = config.series_order
    salp1, calp1, start_iterations = _start_azimuth(ellipsoid, pair, config)

    iterations = 0
    trip = 0
    converged = False
    for _ in range(config.max_iterations):
        fit = longitude_difference(ellipsoid, pair.sbet1, pair.cbet1, pair.sbet2, pair.cbet2,
                                   salp1, calp1, order, with_derivative=trip < 1)
        iterations += 1
        v = fit.chi12 - pair.chi12
        if abs(v) <= EPS2 or trip >= 1:
            converged = True
            break
        if fit.dchi12 == 0:
            break
        dalp1 = -v / fit.dchi12
        sdalp1, cdalp1 = math.sin(dalp1), math.cos(dalp1)
        nsalp1 = salp1 * cdalp1 + calp1 * sdalp1
        calp1 = calp1 * cdalp1 - salp1 * sdalp1
        salp1 = max(0.0, nsalp1)
        salp1, calp1 = sincos_norm(salp1, calp1)
        if abs(v) < TOL:
            trip += 1

    if not converged:
        logger.debug(
            "inverse_not_converged",
            iterations=iterations,
            residual=v,
            lat1=pair.lat1,
            lon12=math.degrees(pair.chi12),
        )

    s12 = _distance(ellipsoid, fit.u2, fit.sig12, fit.ssig1, fit.csig1, fit.ssig2, fit.csig2, order)
    return _Arm(salp1, calp1, fit.salp2, fit.calp2, s12,
                iterations=iterations, start_iterations=start_iterations, converged=converged)


_ARMS = {
    InverseCase.MERIDIAN: _solve_meridian,
    InverseCase.EQUATORIAL: _solve_equatorial,
    InverseCase.GENERAL: _solve_general,
}


def solve_inverse(ellipsoid: EllipsoidModel, lat1: float, lon1: float, lat2: float, lon2: float,
                  config: Optional[SolverConfig] = None) -> InverseSolution:
    """
    Solve the inverse problem between (lat1, lon1) and (lat2, lon2).

    Args:
        ellipsoid: Ellipsoid to solve on
        lat1, lon1: Point 1 in degrees, |lat1| <= 90
        lat2, lon2: Point 2 in degrees, |lat2| <= 90
        config: Solver settings; defaults to SolverConfig()

    Returns:
        InverseSolution with s12, azi1, azi2, the case and iteration counts.
        If Newton's method runs out of iterations the best estimate is
        returned with converged=False; nothing is raised.

    Example:
        >>> from geodesic_solver.core.ellipsoid import wgs84_ellipsoid
        >>> sol = solve_inverse(wgs84_ellipsoid(), 0.0, 0.0, 0.0, 90.0)
        >>> sol.case, sol.azi1, sol.azi2
        (<InverseCase.EQUATORIAL: 'equatorial'>, 90.0, 90.0)
    """
    config = config or SolverConfig()
    pair = _canonicalize(ellipsoid, lat1, lon1, lat2, lon2)
    case = _classify(ellipsoid, pair)
    arm = _ARMS[case](ellipsoid, pair, config)

    salp1, calp1, salp2, calp2 = arm.salp1, arm.calp1, arm.salp2, arm.calp2
    if pair.swapp < 0:
        salp1, salp2 = salp2, salp1
        calp1, calp2 = calp2, calp1

    # Undo the canonicalizing sign flips
    sign_s = pair.swapp * pair.lonsign
    sign_c = pair.swapp * pair.latsign
    azi1 = atan2_degrees(sign_s * salp1, sign_c * calp1)
    azi2 = atan2_degrees(sign_s * salp2, sign_c * calp2)

    return InverseSolution(
        s12=arm.s12,
        azi1=azi1,
        azi2=azi2,
        case=case,
        iterations=arm.iterations,
        start_iterations=arm.start_iterations,
        converged=arm.converged,
    )
