"""
Custom exception hierarchy for the geodesic solver.

All custom exceptions inherit from GeodesicError for easy catching.
The numeric core itself raises nothing for in-domain inputs; these
cover construction and configuration.
"""


class GeodesicError(Exception):
    """Base exception for all geodesic solver errors."""
    pass


class ConfigurationError(GeodesicError):
    """Configuration-related errors.

    Raised when configuration loading or validation fails.

    Attributes:
        source: Path or name of the offending configuration, if known
        details: Dictionary with validation error details

    Example:
        >>> raise ConfigurationError("series_order must be between 1 and 8")
    """

    def __init__(self, message: str, source: str = None, details: dict = None):
        super().__init__(message)
        self.source = source
        self.details = details or {}

    def __str__(self):
        base = super().__str__()
        if self.source:
            return f"{base} (source={self.source})"
        return base


class EllipsoidError(GeodesicError):
    """Invalid ellipsoid parameters.

    Raised when an ellipsoid is built from a non-positive or non-finite
    equatorial radius, or a flattening that is not finite and below 1.

    Example:
        >>> raise EllipsoidError("equatorial radius must be positive, got -1.0")
    """
    pass
