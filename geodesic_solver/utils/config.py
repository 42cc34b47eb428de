"""
Configuration management using Pydantic for validation.

Solver settings (series truncation order, iteration caps) and the
ellipsoid definition can be built in code or loaded from a YAML file:

    ellipsoid:
      equatorial_radius: 6378137.0
      inverse_flattening: 298.257223563
    solver:
      series_order: 8
      max_iterations: 50
      start_iterations: 30
"""
import math
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from geodesic_solver.utils.exceptions import ConfigurationError
from geodesic_solver.utils.logging_config import get_logger

logger = get_logger(__name__)

WGS84_EQUATORIAL_RADIUS = 6378137.0
WGS84_INVERSE_FLATTENING = 298.257223563

# Highest truncation order with precomputed coefficient tables
MAX_SERIES_ORDER = 8


class SolverConfig(BaseModel):
    """Numerical settings shared by the direct and inverse solvers."""
    series_order: int = Field(
        MAX_SERIES_ORDER, ge=1, le=MAX_SERIES_ORDER,
        description="Truncation order of every series (8 gives full double precision)",
    )
    max_iterations: int = Field(50, ge=1, le=1000, description="Cap on inverse Newton iterations")
    start_iterations: int = Field(
        30, ge=1, le=1000,
        description="Cap on the spherical Newton pass near the antipodal singular point",
    )

    model_config = {
        "frozen": True,
    }


class EllipsoidConfig(BaseModel):
    """Ellipsoid definition by equatorial radius and inverse flattening."""
    equatorial_radius: float = Field(WGS84_EQUATORIAL_RADIUS, gt=0, description="Equatorial radius")
    inverse_flattening: float = Field(
        WGS84_INVERSE_FLATTENING,
        description="Inverse flattening; zero or negative means a sphere",
    )

    @field_validator('equatorial_radius', 'inverse_flattening')
    @classmethod
    def reject_non_finite(cls, v: float) -> float:
        """Reject NaN and infinite values."""
        if not math.isfinite(v):
            raise ValueError(f"value must be finite, got {v}")
        return v

    model_config = {
        "frozen": True,
    }


class GeodesicConfig(BaseModel):
    """Complete configuration: which ellipsoid and how to solve on it."""
    ellipsoid: EllipsoidConfig = Field(default_factory=EllipsoidConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)

    def build(self):
        """
        Build a Geodesic solver from this configuration.

        Returns:
            Geodesic bound to the configured ellipsoid and solver settings
        """
        from geodesic_solver.core.ellipsoid import make_ellipsoid
        from geodesic_solver.core.geodesic import Geodesic

        ellipsoid = make_ellipsoid(
            self.ellipsoid.equatorial_radius,
            self.ellipsoid.inverse_flattening,
        )
        return Geodesic(ellipsoid, self.solver)


def load_config(config_path: Path) -> GeodesicConfig:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Validated GeodesicConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If YAML is malformed or validation fails

    Example:
        >>> config = load_config(Path("config/grs80.yaml"))
        >>> geod = config.build()
        >>> s12, azi1, azi2 = geod.inverse(40.6, -73.8, 51.6, -0.5)
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        try:
            config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML: {e}", source=str(config_path)) from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Expected a mapping at top level, got {type(config_dict).__name__}",
            source=str(config_path),
        )

    try:
        config = GeodesicConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e.error_count()} error(s)",
            source=str(config_path),
            details={'errors': e.errors(include_url=False)},
        ) from e

    logger.debug(
        "config_loaded",
        config_file=str(config_path),
        equatorial_radius=config.ellipsoid.equatorial_radius,
        inverse_flattening=config.ellipsoid.inverse_flattening,
        series_order=config.solver.series_order,
    )
    return config


def get_default_config(solver: Optional[SolverConfig] = None) -> GeodesicConfig:
    """
    Get the default configuration: WGS84 with full-precision series.

    Args:
        solver: Optional solver settings to use instead of the defaults

    Returns:
        Default GeodesicConfig
    """
    return GeodesicConfig(
        ellipsoid=EllipsoidConfig(),
        solver=solver or SolverConfig(),
    )
