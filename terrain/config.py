"""
Terrain generation knobs.

Defaults reproduce the classic look: a 41x41 enumeration square clipped to a
play radius of 16, heights up to 10 units and the stone/dirt/grass/sand/
submerged bands at 80/70/50/30/0 percent of that height.  Configurations can
be built directly or loaded from a dict / JSON file with :func:`load_config`;
either way :func:`validate_config` runs before any tile is generated.
"""
from __future__ import annotations

import copy
import dataclasses
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from .biomes import BiomeBands
from .clouds import CloudRules
from .decorations import DecorationRules
from .errors import ConfigError
from .hexgrid import HORIZONTAL_SPACING, VERTICAL_SPACING, PLAY_RADIUS, MIN_INDEX, MAX_INDEX
from .noise import MAX_HEIGHT, NOISE_FREQUENCY, HEIGHT_EXPONENT
from .safe_parse import to_float, to_int
from .themes import THEMES

logger = logging.getLogger(__name__)

DEFAULT_SEED = 1337
CLOUD_SALT = 0xC10D5EED


@dataclass
class TerrainConfig:
    theme: str = "forest"

    # Grid
    min_index: int = MIN_INDEX
    max_index: int = MAX_INDEX
    play_radius: float = PLAY_RADIUS
    horizontal_spacing: float = HORIZONTAL_SPACING
    vertical_spacing: float = VERTICAL_SPACING

    # Height
    max_height: float = MAX_HEIGHT
    noise_frequency: float = NOISE_FREQUENCY
    height_exponent: float = HEIGHT_EXPONENT
    bands: BiomeBands = field(default_factory=BiomeBands)

    decorations: DecorationRules = field(default_factory=DecorationRules)
    clouds: CloudRules = field(default_factory=CloudRules)

    # Seeds: noise field, per-tile decoration streams and the cloud stream
    noise_seed: int = DEFAULT_SEED
    rng_seed: int = DEFAULT_SEED

    fixtures: bool = True   # sea plane, map rim and floor

    @property
    def cloud_seed(self) -> int:
        return (self.rng_seed ^ CLOUD_SALT) & 0x7FFFFFFF

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)


def validate_config(cfg: TerrainConfig) -> None:
    """Raise :class:`ConfigError` on the first failing check."""
    _require(isinstance(cfg.theme, str) and cfg.theme.lower() in THEMES,
             f"theme must be one of {sorted(THEMES)}, got {cfg.theme!r}")
    _require(cfg.max_height > 0.0, "max_height must be > 0")
    _require(cfg.play_radius >= 0.0, "play_radius must be >= 0")
    _require(cfg.min_index <= cfg.max_index, "min_index must be <= max_index")
    _require(cfg.horizontal_spacing > 0.0 and cfg.vertical_spacing > 0.0,
             "grid spacing must be > 0")
    _require(cfg.noise_frequency > 0.0, "noise_frequency must be > 0")
    _require(cfg.height_exponent > 0.0, "height_exponent must be > 0")

    bands = cfg.bands
    _require(bands.is_descending(),
             "biome bands must be strictly descending (stone > dirt > grass > sand > submerged)")
    _require(bands.submerged >= 0.0 and bands.stone < 1.0,
             "biome bands must lie within [0, 1) of max_height")

    dec = cfg.decorations
    for name in ("stone_rock_threshold", "dirt_tall_threshold", "sand_rock_threshold"):
        value = getattr(dec, name)
        _require(0.0 <= value <= 1.0, f"decorations.{name} must be within [0, 1]")
    _require(dec.rock_radius_min > 0.0 and dec.rock_radius_span >= 0.0,
             "decorations.rock radius range must be positive")
    _require(dec.rock_jitter >= 0.0, "decorations.rock_jitter must be >= 0")
    _require(dec.tree_height_min > 0.0 and dec.tree_height_span >= 0.0,
             "decorations.tree height range must be positive")
    _require(dec.figure_scale > 0.0, "decorations.figure_scale must be > 0")

    clouds = cfg.clouds
    _require(clouds.max_count >= 0, "clouds.max_count must be >= 0")
    _require(clouds.count_exponent > 0.0, "clouds.count_exponent must be > 0")
    _require(all(r > 0.0 for r in clouds.puff_radii), "clouds.puff_radii must be > 0")
    _require(clouds.horizontal_span >= 0.0 and clouds.altitude_span >= 0.0,
             "clouds spans must be >= 0")


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _coerce(template: Any, value: Any, where: str) -> Any:
    if isinstance(template, bool):
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)
    if isinstance(template, int):
        return to_int(value, template)
    if isinstance(template, float):
        return to_float(value, template)
    if isinstance(template, tuple):
        if not isinstance(value, (list, tuple)):
            raise ConfigError(f"{where} must be a list, got {value!r}")
        return tuple(to_float(v) for v in value)
    return value


def _build(cls, data: Mapping[str, Any], where: str):
    defaults = cls()
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown {where} keys: {', '.join(unknown)}")
    kwargs = {}
    for name, value in data.items():
        template = getattr(defaults, name)
        if dataclasses.is_dataclass(template):
            if not isinstance(value, Mapping):
                raise ConfigError(f"{where}.{name} must be an object")
            kwargs[name] = _build(type(template), value, f"{where}.{name}")
        else:
            kwargs[name] = _coerce(template, value, f"{where}.{name}")
    return cls(**kwargs)


def load_config(source: Union[str, Mapping[str, Any], None] = None,
                overrides: Optional[Mapping[str, Any]] = None) -> TerrainConfig:
    """Load a config from a JSON file path or a mapping, apply overrides, validate.

    Missing keys fall back to the :class:`TerrainConfig` defaults.
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, str):
        if not os.path.isfile(source):
            raise ConfigError(f"config file not found: {source}")
        with open(source, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"config file {source} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"config file {source} must hold a JSON object")
    elif isinstance(source, Mapping):
        data = dict(source)
    else:
        raise TypeError("source must be a JSON path or a mapping")

    if overrides:
        data = deep_merge(data, overrides)

    cfg = _build(TerrainConfig, data, "config")
    validate_config(cfg)
    logger.debug("loaded config: %s", cfg)
    return cfg
