"""
Exact geodesics on an ellipsoid of revolution.

Solves the direct problem (start point, azimuth and distance to end point)
and the inverse problem (two points to distance and azimuths) to close to
machine precision, including poles, meridians and nearly antipodal points.

Example:
    >>> from geodesic_solver import wgs84
    >>> s12, azi1, azi2 = wgs84().inverse(40.6, -73.8, 51.6, -0.5)
"""
from geodesic_solver.core import (
    DirectResult,
    EllipsoidModel,
    Geodesic,
    GeodesicLine,
    InverseCase,
    InverseResult,
    InverseSolution,
    make_ellipsoid,
    normalize_angle,
    round_angle,
    wgs84,
)
from geodesic_solver.utils.config import (
    EllipsoidConfig,
    GeodesicConfig,
    SolverConfig,
    get_default_config,
    load_config,
)
from geodesic_solver.utils.exceptions import ConfigurationError, EllipsoidError, GeodesicError
from geodesic_solver.utils.logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    'DirectResult',
    'EllipsoidModel',
    'Geodesic',
    'GeodesicLine',
    'InverseCase',
    'InverseResult',
    'InverseSolution',
    'make_ellipsoid',
    'normalize_angle',
    'round_angle',
    'wgs84',
    'EllipsoidConfig',
    'GeodesicConfig',
    'SolverConfig',
    'get_default_config',
    'load_config',
    'ConfigurationError',
    'EllipsoidError',
    'GeodesicError',
    'configure_logging',
]
