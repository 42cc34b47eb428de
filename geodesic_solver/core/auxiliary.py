"""
Mapping between the ellipsoid and the auxiliary sphere.

On the auxiliary sphere a geodesic is a great circle. Geographic latitude
phi maps to reduced latitude beta, and along the great circle

    sin(alpha) * cos(beta) = sin(alpha0)         (Clairaut)
    tan(beta)   = tan(sigma) * cos(alpha)
    tan(lambda) = sin(alpha0) * tan(sigma)

link azimuth alpha, arc length sigma (measured from the northward equator
crossing) and auxiliary longitude lambda. All pairs returned here are
unit-normalized (sin, cos) tuples.
"""
import math
import sys
from typing import Tuple

from geodesic_solver.core.angles import sincos_degrees, sincos_norm

SinCos = Tuple[float, float]

# Underflow guard: positive, yet eps2 + epsilon == epsilon
EPS2 = math.sqrt(sys.float_info.min)


def reduced_latitude_scaled(lat: float, f1: float) -> Tuple[float, float, float]:
    """
    Reduced latitude pair plus the normalization factor it was divided by.

    The factor is n = sqrt(1 - e2 * sin(phi)**2), up to the pole guard; the
    inverse solver uses f1 / n as a short-distance correction.
    """
    sphi, cphi = sincos_degrees(lat)
    sbet = f1 * sphi
    cbet = EPS2 if abs(lat) == 90 else cphi
    n = math.hypot(sbet, cbet)
    return sbet / n, cbet / n, n


def reduced_latitude(lat: float, f1: float) -> SinCos:
    """
    (sin, cos) of the reduced latitude for a geographic latitude in degrees.

    At the poles cos(beta) is EPS2 rather than zero, which keeps every
    later atan2 away from atan2(0, 0) and gives the pole a definite
    azimuth convention.
    """
    sbet, cbet, _ = reduced_latitude_scaled(lat, f1)
    return sbet, cbet


def geographic_latitude(sbet: float, cbet: float, f1: float) -> float:
    """Geographic latitude in degrees from a reduced-latitude pair."""
    return math.degrees(math.atan2(sbet, f1 * cbet))


def clairaut(salp: float, calp: float, sbet: float, cbet: float) -> SinCos:
    """
    (sin, cos) of alpha0, the azimuth at the northward equator crossing.

    cos(alpha0) is formed as hypot(cos(alpha), sin(alpha) * sin(beta)),
    which stays accurate when sin(alpha) vanishes.
    """
    return salp * cbet, math.hypot(calp, salp * sbet)


def arc_and_longitude(sbet: float, cbet: float, salp0: float, calp: float) -> Tuple[SinCos, SinCos]:
    """
    Arc length sigma and auxiliary longitude lambda of a point.

    Args:
        sbet, cbet: Reduced latitude of the point
        salp0: sin(alpha0) of the great circle
        calp: cos(alpha) at the point

    Returns:
        ((sin sigma, cos sigma), (sin lambda, cos lambda)); with alpha0 in
        [0, pi/2] the quadrants of sigma and lambda coincide
    """
    csig = cbet * calp
    return sincos_norm(sbet, csig), sincos_norm(salp0 * sbet, csig)


def angle_between(s1: float, c1: float, s2: float, c2: float) -> float:
    """
    Angle from the first pair to the second, in radians, limited to [0, pi].

    The sine is clamped at zero, so a difference of -0.0 or slightly
    negative from rounding gives 0, and a half turn gives +pi.
    """
    s = max(0.0, c1 * s2 - s1 * c2)
    return math.atan2(s, c1 * c2 + s1 * s2)
