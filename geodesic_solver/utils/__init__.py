"""
Configuration, logging and exception support for the geodesic solver.
"""
from geodesic_solver.utils.exceptions import GeodesicError, ConfigurationError, EllipsoidError
from geodesic_solver.utils.logging_config import configure_logging, get_logger

__all__ = [
    'GeodesicError',
    'ConfigurationError',
    'EllipsoidError',
    'configure_logging',
    'get_logger',
]
