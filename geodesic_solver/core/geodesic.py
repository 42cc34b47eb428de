"""
Geodesic: direct and inverse problems on one ellipsoid.

The facade binds an EllipsoidModel to solver settings and exposes the
two classical problems plus line construction. It holds no mutable state,
so a single instance serves any number of callers.
"""
from functools import lru_cache
from typing import Optional

from geodesic_solver.core.ellipsoid import EllipsoidModel, wgs84_ellipsoid
from geodesic_solver.core.inverse import InverseResult, InverseSolution, solve_inverse
from geodesic_solver.core.line import DirectResult, GeodesicLine
from geodesic_solver.utils.config import SolverConfig
from geodesic_solver.utils.logging_config import get_logger

logger = get_logger(__name__)


class Geodesic:
    """
    Solver for geodesics on an ellipsoid of revolution.

    Args:
        ellipsoid: Ellipsoid to solve on
        config: Solver settings; defaults to SolverConfig()

    Example:
        >>> geod = Geodesic(make_ellipsoid(6378137.0, 298.257223563))
        >>> s12, azi1, azi2 = geod.inverse(40.6, -73.8, 51.6, -0.5)
        >>> lat2, lon2, azi2 = geod.direct(40.6, -73.8, azi1, s12)
    """

    def __init__(self, ellipsoid: EllipsoidModel, config: Optional[SolverConfig] = None):
        self._ellipsoid = ellipsoid
        self._config = config or SolverConfig()
        logger.debug(
            "geodesic_created",
            equatorial_radius=ellipsoid.a,
            flattening=ellipsoid.f,
            series_order=self._config.series_order,
        )

    @property
    def ellipsoid(self) -> EllipsoidModel:
        return self._ellipsoid

    @property
    def config(self) -> SolverConfig:
        return self._config

    def line(self, lat1: float, lon1: float, azi1: float) -> GeodesicLine:
        """Geodesic line from (lat1, lon1) heading azi1, all in degrees."""
        return GeodesicLine(self._ellipsoid, lat1, lon1, azi1, self._config.series_order)

    def direct(self, lat1: float, lon1: float, azi1: float, s12: float) -> Optional[DirectResult]:
        """
        Point reached after travelling s12 from (lat1, lon1) at azimuth azi1.

        Returns:
            DirectResult(lat2, lon2, azi2), or None if the line cannot be
            advanced (zero distance scale)
        """
        return self.line(lat1, lon1, azi1).position(s12)

    def inverse(self, lat1: float, lon1: float, lat2: float, lon2: float) -> InverseResult:
        """
        Shortest geodesic between two points.

        Returns:
            InverseResult(s12, azi1, azi2); azimuths in (-180, 180]
        """
        return self.inverse_solution(lat1, lon1, lat2, lon2).result

    def inverse_solution(self, lat1: float, lon1: float, lat2: float, lon2: float) -> InverseSolution:
        """Like inverse(), but also reports the case solved and iteration counts."""
        return solve_inverse(self._ellipsoid, lat1, lon1, lat2, lon2, self._config)

    def __repr__(self) -> str:
        return f"Geodesic(a={self._ellipsoid.a!r}, f={self._ellipsoid.f!r})"


@lru_cache(maxsize=None)
def wgs84() -> Geodesic:
    """Geodesic on WGS84 with default settings, built on first use."""
    return Geodesic(wgs84_ellipsoid())
