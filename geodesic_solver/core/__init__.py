"""
Core geodesic algorithms.

Ellipsoid model, series machinery, auxiliary-sphere mapping, and the
direct and inverse solvers built on them.
"""
from geodesic_solver.core.angles import normalize_angle, round_angle
from geodesic_solver.core.ellipsoid import EllipsoidModel, make_ellipsoid, wgs84_ellipsoid
from geodesic_solver.core.line import DirectResult, GeodesicLine
from geodesic_solver.core.inverse import (
    InverseCase,
    InverseResult,
    InverseSolution,
    solve_inverse,
)
from geodesic_solver.core.geodesic import Geodesic, wgs84

__all__ = [
    'normalize_angle',
    'round_angle',
    'EllipsoidModel',
    'make_ellipsoid',
    'wgs84_ellipsoid',
    'DirectResult',
    'GeodesicLine',
    'InverseCase',
    'InverseResult',
    'InverseSolution',
    'solve_inverse',
    'Geodesic',
    'wgs84',
]
