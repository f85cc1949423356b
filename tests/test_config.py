"""
Unit tests for the configuration system.

Tests cover:
- Default config creation and validation
- JSON load/save roundtrip
- Partial config loading (missing fields use defaults)
- Invalid value detection
- Unknown key warnings
- Dot-notation parameter overrides
"""

import json
import warnings
from pathlib import Path

import pytest

from conway.core.config import (
    LifeConfig,
    load_config,
    save_config,
    check_config,
    get_default_config,
    apply_param_override,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def default_config() -> LifeConfig:
    """Fresh default config."""
    return get_default_config()


@pytest.fixture
def tmp_config_path(tmp_path) -> Path:
    return tmp_path / "test_config.json"


@pytest.fixture
def minimal_config_path(tmp_path) -> Path:
    """Config file with only a few overrides."""
    path = tmp_path / "minimal.json"
    path.write_text(json.dumps({
        "world": {"width": 32, "height": 16},
        "engine": {"variant": "naive"},
    }))
    return path


@pytest.fixture
def invalid_config_path(tmp_path) -> Path:
    """Config file with invalid values."""
    path = tmp_path / "invalid.json"
    path.write_text(json.dumps({
        "world": {"width": 0, "height": -3},
        "seed": {"density": 1.5},
    }))
    return path


# ---------------------------------------------------------------------------
# Default Config Tests
# ---------------------------------------------------------------------------

class TestDefaultConfig:
    def test_default_config_valid(self, default_config: LifeConfig):
        errors = default_config.validate()
        assert errors == [], f"Default config has errors: {errors}"

    def test_default_world_values(self, default_config: LifeConfig):
        assert default_config.world.width == 64
        assert default_config.world.height == 64
        assert default_config.world.seed == 42

    def test_default_engine(self, default_config: LifeConfig):
        assert default_config.engine.variant == "indexed"

    def test_default_run_values(self, default_config: LifeConfig):
        assert default_config.run.max_generations == 200
        assert default_config.run.stop_when_stable is True
        assert default_config.run.output_dir == "runs"

    def test_shipped_config_file_is_valid(self):
        path = Path(__file__).parent.parent / "config" / "default_config.json"
        config = load_config(path)
        assert config.to_dict() == LifeConfig().to_dict()


# ---------------------------------------------------------------------------
# JSON Load / Save Tests
# ---------------------------------------------------------------------------

class TestConfigIO:
    def test_save_and_load_roundtrip(self, default_config: LifeConfig, tmp_config_path: Path):
        default_config.world.width = 80
        default_config.view.colorscale = "Greys"
        save_config(default_config, tmp_config_path)
        loaded = load_config(tmp_config_path)

        assert loaded.world.width == 80
        assert loaded.view.colorscale == "Greys"
        assert loaded.to_dict() == default_config.to_dict()

    def test_save_creates_parent_dirs(self, default_config: LifeConfig, tmp_path: Path):
        deep_path = tmp_path / "a" / "b" / "config.json"
        save_config(default_config, deep_path)
        assert deep_path.exists()

    def test_load_partial_config_uses_defaults(self, minimal_config_path: Path):
        config = load_config(minimal_config_path)

        assert config.world.width == 32
        assert config.world.height == 16
        assert config.engine.variant == "naive"

        assert config.seed.density == 0.25
        assert config.run.max_generations == 200

    def test_load_nonexistent_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent_path/config.json")

    def test_load_malformed_json_raises(self, tmp_path: Path):
        bad_path = tmp_path / "bad.json"
        bad_path.write_text("{invalid json content!!}")
        with pytest.raises(json.JSONDecodeError):
            load_config(bad_path)

    def test_load_invalid_values_raises(self, invalid_config_path: Path):
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(invalid_config_path)


# ---------------------------------------------------------------------------
# Unknown Keys Warning Test
# ---------------------------------------------------------------------------

class TestUnknownKeys:
    def test_unknown_top_level_key_warns(self, tmp_path: Path):
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({
            "world": {"width": 20, "height": 20},
            "patterns": {"glider": True},
        }))
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            config = load_config(path)
            assert any("Unknown config key" in str(warning.message) for warning in w)

        assert config.world.width == 20

    def test_unknown_nested_key_warns(self, tmp_path: Path):
        path = tmp_path / "extra_nested.json"
        path.write_text(json.dumps({
            "world": {"width": 20, "height": 20, "wrap": False}
        }))
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            load_config(path)
            assert any("Unknown config key 'wrap'" in str(warning.message) for warning in w)


# ---------------------------------------------------------------------------
# Validation Tests
# ---------------------------------------------------------------------------

class TestValidation:
    def test_world_width_zero(self):
        config = LifeConfig()
        config.world.width = 0
        assert any("world.width" in e for e in config.validate())

    def test_world_height_negative(self):
        config = LifeConfig()
        config.world.height = -1
        assert any("world.height" in e for e in config.validate())

    def test_world_width_too_large(self):
        config = LifeConfig()
        config.world.width = 20_000
        assert any("world.width" in e for e in config.validate())

    def test_tiny_world_is_valid(self):
        config = LifeConfig()
        config.world.width = 1
        config.world.height = 2
        assert config.validate() == []

    def test_unknown_engine(self):
        config = LifeConfig()
        config.engine.variant = "hashlife"
        assert any("engine.variant" in e for e in config.validate())

    def test_density_out_of_range(self):
        config = LifeConfig()
        config.seed.density = -0.1
        assert any("seed.density" in e for e in config.validate())

    def test_max_generations_zero(self):
        config = LifeConfig()
        config.run.max_generations = 0
        assert any("max_generations" in e for e in config.validate())

    def test_negative_tick_interval(self):
        config = LifeConfig()
        config.view.tick_interval_ms = -5
        assert any("tick_interval_ms" in e for e in config.validate())

    def test_multiple_errors_reported(self):
        config = LifeConfig()
        config.world.width = -1
        config.world.height = -1
        config.engine.variant = "?"
        config.view.cell_size = 0
        assert len(config.validate()) >= 4

    def test_check_config_raises_with_all_errors(self):
        config = LifeConfig()
        config.world.width = 0
        config.seed.density = 2.0
        with pytest.raises(ValueError) as exc_info:
            check_config(config)
        assert "world.width" in str(exc_info.value)
        assert "seed.density" in str(exc_info.value)


# ---------------------------------------------------------------------------
# Parameter Override Tests
# ---------------------------------------------------------------------------

class TestParamOverride:
    def test_override_top_level(self, default_config: LifeConfig):
        apply_param_override(default_config, "world.width", 128)
        assert default_config.world.width == 128

    def test_override_engine(self, default_config: LifeConfig):
        apply_param_override(default_config, "engine.variant", "naive")
        assert default_config.engine.variant == "naive"

    def test_override_invalid_path_raises(self, default_config: LifeConfig):
        with pytest.raises(KeyError):
            apply_param_override(default_config, "world.nonexistent", 42)

    def test_override_invalid_section_raises(self, default_config: LifeConfig):
        with pytest.raises(KeyError):
            apply_param_override(default_config, "nonexistent.width", 42)

    def test_override_preserves_other_values(self, default_config: LifeConfig):
        original_height = default_config.world.height
        apply_param_override(default_config, "world.width", 200)
        assert default_config.world.height == original_height


# ---------------------------------------------------------------------------
# Copy / Serialization Tests
# ---------------------------------------------------------------------------

class TestConfigCopy:
    def test_copy_is_independent(self, default_config: LifeConfig):
        copy = default_config.copy()
        copy.world.width = 999
        assert default_config.world.width == 64

    def test_copy_preserves_values(self, default_config: LifeConfig):
        assert default_config.copy().to_dict() == default_config.to_dict()


class TestSerialization:
    def test_to_dict_sections(self, default_config: LifeConfig):
        d = default_config.to_dict()
        assert set(d) == {"world", "engine", "seed", "run", "view"}

    def test_from_empty_dict_uses_defaults(self):
        config = LifeConfig.from_dict({})
        assert config.world.width == 64
        assert config.engine.variant == "indexed"

    def test_from_dict_with_overrides(self):
        config = LifeConfig.from_dict({
            "world": {"width": 100},
            "run": {"stop_when_stable": False},
        })
        assert config.world.width == 100
        assert config.world.height == 64
        assert config.run.stop_when_stable is False
