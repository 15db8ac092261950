# terrain/__init__.py
# Package init for hex terrain generation

from .hexgrid import HexGrid, WorldPosition, hex_corners
from .noise import HeightField, simplex_sampler, MAX_HEIGHT
from .biomes import (
    BiomeKind, BiomeBands, BiomeClassifier, Tile,
    STONE, DIRT, GRASS, SAND, SUBMERGED_DIRT, BONE,
)
from .decorations import (
    DecorationPlacer, DecorationRules, RockCluster, TreeCluster, SkeletalFigure,
)
from .clouds import CloudFieldGenerator, CloudMesh, CloudRules, cloud_count
from .themes import Theme, THEMES, FOREST, WINTER, INFERNO, get_theme
from .errors import TerrainError, ConfigError, ThemeError
from .config import TerrainConfig, load_config, validate_config
from .worldgen import TerrainResult, Fixture, build_tile, build_fixtures, generate_terrain

__all__ = [
    "HexGrid", "WorldPosition", "hex_corners",
    "HeightField", "simplex_sampler", "MAX_HEIGHT",
    "BiomeKind", "BiomeBands", "BiomeClassifier", "Tile",
    "STONE", "DIRT", "GRASS", "SAND", "SUBMERGED_DIRT", "BONE",
    "DecorationPlacer", "DecorationRules", "RockCluster", "TreeCluster", "SkeletalFigure",
    "CloudFieldGenerator", "CloudMesh", "CloudRules", "cloud_count",
    "Theme", "THEMES", "FOREST", "WINTER", "INFERNO", "get_theme",
    "TerrainError", "ConfigError", "ThemeError",
    "TerrainConfig", "load_config", "validate_config",
    "TerrainResult", "Fixture", "build_tile", "build_fixtures", "generate_terrain",
]
