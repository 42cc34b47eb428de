"""
Tests for configuration management.
"""
import pytest
from pathlib import Path
from pydantic import ValidationError
from geodesic_solver.core.geodesic import Geodesic
from geodesic_solver.utils.config import (
    load_config,
    EllipsoidConfig,
    GeodesicConfig,
    SolverConfig,
    get_default_config,
    WGS84_EQUATORIAL_RADIUS,
    WGS84_INVERSE_FLATTENING,
)
from geodesic_solver.utils.exceptions import ConfigurationError

CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


def test_load_grs80_config():
    """Test loading the bundled GRS80 configuration."""
    config = load_config(CONFIG_DIR / "grs80.yaml")

    assert config.ellipsoid.equatorial_radius == 6378137.0
    assert config.ellipsoid.inverse_flattening == 298.257222101
    assert config.solver.series_order == 8


def test_config_file_not_found(tmp_path):
    """Test error handling when config file doesn't exist."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nonexistent.yaml")


def test_empty_file_gives_defaults(tmp_path):
    """An empty file is a valid config with every default."""
    path = tmp_path / "empty.yaml"
    path.write_text("")

    config = load_config(path)

    assert config == get_default_config()


def test_partial_config(tmp_path):
    """Missing sections fall back to defaults."""
    path = tmp_path / "partial.yaml"
    path.write_text("solver:\n  series_order: 5\n")

    config = load_config(path)

    assert config.solver.series_order == 5
    assert config.solver.max_iterations == 50
    assert config.ellipsoid.equatorial_radius == WGS84_EQUATORIAL_RADIUS


def test_malformed_yaml(tmp_path):
    """Test malformed YAML is reported as a configuration error."""
    path = tmp_path / "broken.yaml"
    path.write_text("solver: [series_order: 5\n")

    with pytest.raises(ConfigurationError) as exc_info:
        load_config(path)
    assert exc_info.value.source == str(path)


def test_top_level_not_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_invalid_values_collected(tmp_path):
    """Validation errors are wrapped with their details."""
    path = tmp_path / "invalid.yaml"
    path.write_text("ellipsoid:\n  equatorial_radius: -1\nsolver:\n  series_order: 9\n")

    with pytest.raises(ConfigurationError) as exc_info:
        load_config(path)

    errors = exc_info.value.details['errors']
    assert len(errors) == 2
    assert "invalid.yaml" in str(exc_info.value)


def test_solver_config_validation():
    """Test validation of solver parameters."""
    # Valid params
    params = SolverConfig(series_order=3, max_iterations=10)
    assert params.series_order == 3

    # Invalid: order outside 1..8
    with pytest.raises(ValidationError):
        SolverConfig(series_order=0)
    with pytest.raises(ValidationError):
        SolverConfig(series_order=9)

    # Invalid: no iterations
    with pytest.raises(ValidationError):
        SolverConfig(max_iterations=0)


def test_solver_config_frozen():
    params = SolverConfig()
    with pytest.raises(ValidationError):
        params.series_order = 4


def test_ellipsoid_config_validation():
    """Test validation of ellipsoid parameters."""
    assert EllipsoidConfig(equatorial_radius=6371000.0, inverse_flattening=0).inverse_flattening == 0

    with pytest.raises(ValidationError):
        EllipsoidConfig(equatorial_radius=0.0)
    with pytest.raises(ValidationError):
        EllipsoidConfig(inverse_flattening=float('nan'))
    with pytest.raises(ValidationError):
        EllipsoidConfig(equatorial_radius=float('inf'))
    with pytest.raises(ValidationError):
        EllipsoidConfig(inverse_flattening=float('-inf'))


def test_get_default_config():
    """Test default configuration generation."""
    config = get_default_config()

    assert config.ellipsoid.equatorial_radius == WGS84_EQUATORIAL_RADIUS
    assert config.ellipsoid.inverse_flattening == WGS84_INVERSE_FLATTENING
    assert config.solver == SolverConfig()

    custom = get_default_config(SolverConfig(series_order=6))
    assert custom.solver.series_order == 6


def test_build_geodesic():
    """Test that a config builds a working solver."""
    config = GeodesicConfig(
        ellipsoid=EllipsoidConfig(equatorial_radius=6371000.0, inverse_flattening=0),
        solver=SolverConfig(series_order=4),
    )
    geod = config.build()

    assert isinstance(geod, Geodesic)
    assert geod.ellipsoid.f == 0.0
    assert geod.config.series_order == 4
    s12, azi1, azi2 = geod.inverse(0.0, 0.0, 0.0, 90.0)
    assert s12 == pytest.approx(6371000.0 * 3.141592653589793 / 2)
