"""
Ellipsoid of revolution parameters.

An EllipsoidModel holds the equatorial radius and flattening together with
the quantities every solver derives from them. It is immutable, so one
instance can be shared by any number of solvers, lines and threads.
"""
import math
from dataclasses import dataclass, field
from functools import lru_cache

from geodesic_solver.utils.config import WGS84_EQUATORIAL_RADIUS, WGS84_INVERSE_FLATTENING
from geodesic_solver.utils.exceptions import EllipsoidError


@dataclass(frozen=True)
class EllipsoidModel:
    """
    Oblate (f > 0), spherical (f = 0) or prolate (f < 0) ellipsoid.

    Attributes:
        a: Equatorial radius, in the caller's linear unit
        f: Flattening, (a - b) / a
        f1: 1 - f
        e2: Eccentricity squared, f * (2 - f)
        ep2: Second eccentricity squared, e2 / f1**2
        b: Polar semi-axis, a * f1

    Example:
        >>> grs80 = EllipsoidModel(6378137.0, 1 / 298.257222101)
        >>> round(grs80.b, 4)
        6356752.3141
    """
    a: float
    f: float
    f1: float = field(init=False)
    e2: float = field(init=False)
    ep2: float = field(init=False)
    b: float = field(init=False)

    def __post_init__(self):
        if not math.isfinite(self.a) or self.a <= 0:
            raise EllipsoidError(f"equatorial radius must be positive and finite, got {self.a}")
        if not math.isfinite(self.f) or self.f >= 1:
            raise EllipsoidError(f"flattening must be finite and below 1, got {self.f}")

        f1 = 1 - self.f
        e2 = self.f * (2 - self.f)
        object.__setattr__(self, 'f1', f1)
        object.__setattr__(self, 'e2', e2)
        object.__setattr__(self, 'ep2', e2 / (f1 * f1))
        object.__setattr__(self, 'b', self.a * f1)


def make_ellipsoid(equatorial_radius: float, inverse_flattening: float) -> EllipsoidModel:
    """
    Build an ellipsoid from its equatorial radius and inverse flattening.

    Args:
        equatorial_radius: Equatorial radius (> 0)
        inverse_flattening: 1 / f; zero or negative gives a sphere

    Returns:
        EllipsoidModel

    Raises:
        EllipsoidError: If the radius is not positive and finite, or if
            0 < inverse_flattening <= 1 (flattening of 1 or more)
    """
    f = 1 / inverse_flattening if inverse_flattening > 0 else 0.0
    return EllipsoidModel(float(equatorial_radius), f)


@lru_cache(maxsize=None)
def wgs84_ellipsoid() -> EllipsoidModel:
    """The WGS84 ellipsoid, built on first use and shared afterwards."""
    return make_ellipsoid(WGS84_EQUATORIAL_RADIUS, WGS84_INVERSE_FLATTENING)
