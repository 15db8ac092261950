import json
from pathlib import Path

import pytest

from terrain.biomes import BiomeBands
from terrain.config import TerrainConfig, deep_merge, load_config, validate_config
from terrain.errors import ConfigError, TerrainError


def test_defaults_validate():
    cfg = TerrainConfig()
    validate_config(cfg)
    assert cfg.max_height == 10.0
    assert cfg.bands.as_tuple() == (0.8, 0.7, 0.5, 0.3, 0.0)
    assert cfg.cloud_seed != cfg.rng_seed
    assert cfg.cloud_seed == TerrainConfig().cloud_seed


@pytest.mark.parametrize("cfg, match", [
    (TerrainConfig(max_height=0.0), "max_height"),
    (TerrainConfig(min_index=5, max_index=-5), "min_index"),
    (TerrainConfig(noise_frequency=0.0), "noise_frequency"),
    (TerrainConfig(bands=BiomeBands(stone=0.6, dirt=0.7)), "descending"),
    (TerrainConfig(bands=BiomeBands(stone=1.2)), r"\[0, 1\)"),
])
def test_invalid_configs_rejected(cfg, match):
    with pytest.raises(ConfigError, match=match):
        validate_config(cfg)


def test_config_error_is_terrain_error():
    assert issubclass(ConfigError, TerrainError)


def test_load_from_mapping_keeps_defaults():
    cfg = load_config({"theme": "winter", "bands": {"stone": 0.9}})
    assert cfg.theme == "winter"
    assert cfg.bands.stone == 0.9
    assert cfg.bands.dirt == 0.7
    assert cfg.max_height == 10.0


def test_load_from_json_file(tmp_path: Path):
    path = tmp_path / "terrain.json"
    path.write_text(json.dumps({
        "noise_seed": "42",
        "fixtures": "no",
        "clouds": {"puff_radii": [1, 2]},
    }))
    cfg = load_config(str(path), overrides={"rng_seed": 7})
    assert cfg.noise_seed == 42
    assert cfg.rng_seed == 7
    assert cfg.fixtures is False
    assert cfg.clouds.puff_radii == (1.0, 2.0)


def test_load_errors(tmp_path: Path):
    with pytest.raises(ConfigError, match="unknown"):
        load_config({"colour": "red"})
    with pytest.raises(ConfigError, match="not found"):
        load_config(str(tmp_path / "missing.json"))
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ConfigError, match="JSON"):
        load_config(str(bad))
    with pytest.raises(ConfigError):
        load_config({"max_height": -1})
    with pytest.raises(TypeError):
        load_config(42)


def test_deep_merge_is_non_destructive():
    base = {"bands": {"stone": 0.8, "dirt": 0.7}}
    merged = deep_merge(base, {"bands": {"stone": 0.9}})
    assert merged == {"bands": {"stone": 0.9, "dirt": 0.7}}
    assert base["bands"]["stone"] == 0.8


@pytest.mark.parametrize("theme", ["desert", 5, None])
def test_unknown_or_non_string_theme_rejected(theme):
    with pytest.raises(ConfigError, match="theme"):
        load_config({"theme": theme})


def test_scalar_for_list_field_rejected():
    with pytest.raises(ConfigError, match="puff_radii"):
        load_config({"clouds": {"puff_radii": 2}})


def test_to_dict_round_trips_through_loader():
    cfg = TerrainConfig(theme="inferno", noise_seed=9, bands=BiomeBands(stone=0.85))
    data = cfg.to_dict()
    assert data["bands"]["stone"] == 0.85
    assert load_config(data) == cfg
