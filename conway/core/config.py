"""
Configuration system for the Game of Life engine.

Provides a hierarchical dataclass-based config with JSON serialization,
validation, and sensible defaults for grid size, engine choice, random
seeding, headless runs, and the interactive view.
"""

from __future__ import annotations

import json
import warnings
from copy import deepcopy
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any


ENGINE_NAMES = ("naive", "indexed")


# ---------------------------------------------------------------------------
# Sub-config dataclasses (grouped by domain)
# ---------------------------------------------------------------------------

@dataclass
class WorldConfig:
    """Grid settings. The grid size is fixed for the lifetime of a world."""
    width: int = 64
    height: int = 64
    seed: int = 42

    def validate(self) -> list[str]:
        errors = []
        if self.width < 1:
            errors.append(f"world.width must be >= 1, got {self.width}")
        if self.height < 1:
            errors.append(f"world.height must be >= 1, got {self.height}")
        if self.width > 10_000:
            errors.append(f"world.width must be <= 10000, got {self.width}")
        if self.height > 10_000:
            errors.append(f"world.height must be <= 10000, got {self.height}")
        return errors


@dataclass
class EngineConfig:
    """Which evolution engine backs the world."""
    variant: str = "indexed"  # "naive" or "indexed"

    def validate(self) -> list[str]:
        errors = []
        if self.variant not in ENGINE_NAMES:
            errors.append(
                f"engine.variant must be one of {list(ENGINE_NAMES)}, got '{self.variant}'"
            )
        return errors


@dataclass
class SeedConfig:
    """Random initial soup for headless runs (0 = start all dead)."""
    density: float = 0.25

    def validate(self) -> list[str]:
        errors = []
        if not (0.0 <= self.density <= 1.0):
            errors.append(f"seed.density must be in [0, 1], got {self.density}")
        return errors


@dataclass
class RunConfig:
    """Headless run settings."""
    max_generations: int = 200
    stop_when_stable: bool = True
    output_dir: str = "runs"

    def validate(self) -> list[str]:
        errors = []
        if self.max_generations < 1:
            errors.append(f"run.max_generations must be >= 1, got {self.max_generations}")
        return errors


@dataclass
class ViewConfig:
    """Interactive view settings."""
    cell_size: int = 10                # pixels per cell
    tick_interval_ms: int = 100        # delay between auto-advanced generations
    colorscale: str = "Viridis"
    show_frontier: bool = True         # shade dead cells that have live neighbors

    def validate(self) -> list[str]:
        errors = []
        if self.cell_size < 1:
            errors.append(f"view.cell_size must be >= 1, got {self.cell_size}")
        if self.tick_interval_ms < 0:
            errors.append(f"view.tick_interval_ms must be >= 0, got {self.tick_interval_ms}")
        if not self.colorscale:
            errors.append("view.colorscale must not be empty")
        return errors


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------

@dataclass
class LifeConfig:
    """
    Top-level configuration.

    All parameters are adjustable. Nested dataclasses group related settings.
    Load from JSON with `load_config()`, validate with `validate()`.
    """
    world: WorldConfig = field(default_factory=WorldConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    seed: SeedConfig = field(default_factory=SeedConfig)
    run: RunConfig = field(default_factory=RunConfig)
    view: ViewConfig = field(default_factory=ViewConfig)

    def validate(self) -> list[str]:
        """Validate all config sections. Returns list of error messages (empty = valid)."""
        errors = []
        for f in fields(self):
            sub = getattr(self, f.name)
            if hasattr(sub, "validate"):
                errors.extend(sub.validate())
        return errors

    def to_dict(self) -> dict[str, Any]:
        """Convert to nested dict for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LifeConfig:
        """Create LifeConfig from nested dict, merging with defaults."""
        config = cls()
        _merge_into_dataclass(config, data)
        return config

    def copy(self) -> LifeConfig:
        """Deep copy of this config."""
        return deepcopy(self)


# ---------------------------------------------------------------------------
# JSON I/O helpers
# ---------------------------------------------------------------------------

def _merge_into_dataclass(target: Any, source: dict[str, Any]) -> None:
    """
    Recursively merge a dict into a dataclass instance.
    Unknown keys emit a warning but don't raise.
    """
    if not isinstance(source, dict):
        return

    known_fields = {f.name for f in fields(target)}
    for key, value in source.items():
        if key not in known_fields:
            warnings.warn(
                f"Unknown config key '{key}' in section {type(target).__name__}, ignored.",
                UserWarning,
                stacklevel=3,
            )
            continue

        current = getattr(target, key)

        # If the current field is a dataclass, recurse
        if hasattr(current, "__dataclass_fields__") and isinstance(value, dict):
            _merge_into_dataclass(current, value)
        else:
            setattr(target, key, value)


def load_config(path: str | Path) -> LifeConfig:
    """
    Load config from a JSON file. Missing fields use defaults.

    Args:
        path: Path to JSON config file.

    Returns:
        Validated LifeConfig instance.

    Raises:
        FileNotFoundError: If path doesn't exist.
        json.JSONDecodeError: If JSON is malformed.
        ValueError: If config values are invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    config = LifeConfig.from_dict(data)
    check_config(config)
    return config


def check_config(config: LifeConfig) -> None:
    """
    Raise if the config is invalid.

    Raises:
        ValueError: Listing every validation error.
    """
    errors = config.validate()
    if errors:
        msg = "Invalid configuration:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(msg)


def save_config(config: LifeConfig, path: str | Path) -> None:
    """Save config to JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)


def get_default_config() -> LifeConfig:
    """Return a fresh default config (all defaults, validated)."""
    config = LifeConfig()
    errors = config.validate()
    assert not errors, f"Default config is invalid: {errors}"
    return config


def apply_param_override(config: LifeConfig, dotted_key: str, value: Any) -> None:
    """
    Apply a single parameter override using dot notation.

    Example:
        apply_param_override(config, "world.width", 128)
        apply_param_override(config, "engine.variant", "naive")

    Args:
        config: LifeConfig to modify in-place.
        dotted_key: Dot-separated path like "world.width" or "seed.density".
        value: New value to set.

    Raises:
        KeyError: If the path doesn't exist.
    """
    parts = dotted_key.split(".")
    obj = config
    for part in parts[:-1]:
        if not hasattr(obj, part):
            raise KeyError(f"Config path '{dotted_key}' invalid: '{part}' not found in {type(obj).__name__}")
        obj = getattr(obj, part)

    final_key = parts[-1]
    if not hasattr(obj, final_key):
        raise KeyError(f"Config path '{dotted_key}' invalid: '{final_key}' not found in {type(obj).__name__}")

    setattr(obj, final_key, value)
