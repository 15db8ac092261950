# worldgen.py - one-shot pipeline: grid -> heights -> biomes -> batched geometry
from __future__ import annotations

import logging
import math
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from mesh.batcher import GeometryBatcher
from mesh.buffer import MeshBuffer
from mesh.primitives import cylinder, hex_column
from .biomes import BiomeClassifier, BiomeKind, Tile, STONE, DIRT, GRASS, SAND, SUBMERGED_DIRT
from .clouds import CloudFieldGenerator, CloudMesh
from .config import TerrainConfig, validate_config
from .decorations import Decoration, DecorationPlacer
from .errors import ThemeError
from .hexgrid import HexGrid, WorldPosition
from .noise import HeightField, NoiseSampler, simplex_sampler
from .stateless_rng import tile_rng
from .themes import Theme, get_theme

logger = logging.getLogger(__name__)

# Scene furniture around the play area, sized against the default radius of 16
SEA_RADIUS = 17.0
RIM_RADIUS = 17.1
FLOOR_RADIUS = 18.5
FIXTURE_SEGMENTS = 50
FIXTURE_YAW = -math.pi * 0.333 * 0.5


@dataclass(frozen=True)
class Fixture:
    name: str
    material_key: str
    geometry: MeshBuffer


@dataclass
class TerrainResult:
    """Everything one generation pass hands to the renderer."""
    theme: Theme
    tiles: List[Tile]
    decorations: List[Decoration]
    batches: Dict[str, MeshBuffer]
    clouds: List[CloudMesh]
    fixtures: List[Fixture] = field(default_factory=list)
    noise_anomalies: int = 0

    def biome_counts(self) -> Dict[BiomeKind, int]:
        return dict(Counter(t.biome for t in self.tiles))

    def decoration_counts(self) -> Dict[str, int]:
        return dict(Counter(type(d).__name__ for d in self.decorations))

    def summary(self) -> str:
        lines = [f"Theme: {self.theme.name}",
                 f"Tiles: {len(self.tiles)}"]
        counts = self.biome_counts()
        for biome in BiomeKind:
            if biome in counts:
                lines.append(f"  {biome.name.lower()}: {counts[biome]}")
        decos = self.decoration_counts()
        lines.append(f"Decorations: {len(self.decorations)}"
                     + (" (" + ", ".join(f"{k} {v}" for k, v in sorted(decos.items())) + ")"
                        if decos else ""))
        lines.append(f"Clouds: {len(self.clouds)}")
        lines.append("Batches:")
        for key, buf in self.batches.items():
            lines.append(f"  {key}: {buf.vertex_count} vertices, {buf.triangle_count} triangles")
        if self.noise_anomalies:
            lines.append(f"Noise anomalies: {self.noise_anomalies}")
        return "\n".join(lines)


def build_tile(column: int, row: int, position: WorldPosition,
               heights: HeightField, classifier: BiomeClassifier) -> Optional[Tile]:
    """Height and biome for one grid cell, or ``None`` when no band matches."""
    height = heights.sample(column, row)
    biome = classifier.classify(height)
    if biome is None:
        logger.debug("no biome for height %.3f at (%d, %d); tile skipped", height, column, row)
        return None
    return Tile(position, height, biome)


def build_fixtures(theme: Theme, max_height: float) -> List[Fixture]:
    """Sea plane, open map rim and floor slab framing the tiles."""
    sea = (cylinder(SEA_RADIUS, SEA_RADIUS, max_height * 0.2, FIXTURE_SEGMENTS)
           .rotated_y(FIXTURE_YAW).translated(0.0, max_height * 0.1, 0.0))
    rim = (cylinder(RIM_RADIUS, RIM_RADIUS, max_height * 0.25, FIXTURE_SEGMENTS, 1, open_ended=True)
           .rotated_y(FIXTURE_YAW).translated(0.0, max_height * 0.125, 0.0))
    floor = (cylinder(FLOOR_RADIUS, FLOOR_RADIUS, max_height * 0.1, FIXTURE_SEGMENTS)
             .translated(0.0, -max_height * 0.05, 0.0))
    return [
        Fixture("sea", theme.sea_material, sea.freeze()),
        Fixture("container", theme.material_for(DIRT), rim.freeze()),
        Fixture("floor", theme.material_for(SUBMERGED_DIRT), floor.freeze()),
    ]


def _check_theme(theme: Theme) -> None:
    for biome in (STONE, DIRT, GRASS, SAND, SUBMERGED_DIRT, theme.tall_decoration.batch_biome):
        if biome not in theme.materials:
            raise ThemeError(f"theme {theme.name!r} needs a material for {biome.name}")


def generate_terrain(config: Optional[TerrainConfig] = None,
                     theme: Union[Theme, str, None] = None,
                     sampler: Optional[NoiseSampler] = None) -> TerrainResult:
    """Run the whole pass and return finalized, per-material geometry.

    ``theme`` defaults to ``config.theme``; ``sampler`` defaults to
    OpenSimplex noise seeded with ``config.noise_seed``.  Every tile gets its
    own decoration stream derived from ``(column, row, config.rng_seed)``, so
    the result depends only on the configuration and the sampler.
    """
    cfg = config or TerrainConfig()
    validate_config(cfg)
    if theme is None:
        theme = cfg.theme
    if isinstance(theme, str):
        theme = get_theme(theme)
    _check_theme(theme)

    grid = HexGrid(cfg.horizontal_spacing, cfg.vertical_spacing, cfg.play_radius,
                   cfg.min_index, cfg.max_index)
    heights = HeightField(sampler or simplex_sampler(cfg.noise_seed), cfg.max_height,
                          cfg.noise_frequency, cfg.height_exponent)
    classifier = BiomeClassifier(cfg.max_height, cfg.bands)
    placer = DecorationPlacer(theme.tall_decoration, cfg.decorations)
    batcher = GeometryBatcher(theme.batch_keys())

    tiles: List[Tile] = []
    decorations: List[Decoration] = []
    for column, row, position in grid.tiles():
        tile = build_tile(column, row, position, heights, classifier)
        if tile is None:
            continue
        tiles.append(tile)
        batcher.append(theme.material_for(tile.biome),
                       hex_column(tile.height, position.x, position.z))

        for deco in placer.place(tile, tile_rng(column, row, cfg.rng_seed)):
            decorations.append(deco)
            batcher.append(theme.material_for(deco.batch_biome), deco.geometry())

    batches = batcher.finalize()

    clouds = CloudFieldGenerator(random.Random(cfg.cloud_seed), cfg.clouds,
                                 theme.cloud_material).generate()
    fixtures = build_fixtures(theme, cfg.max_height) if cfg.fixtures else []

    if heights.anomalies:
        logger.warning("%d noise samples were not finite and fell back to height 0",
                       heights.anomalies)
    logger.info("%s terrain: %d/%d tiles, %d decorations, %d clouds, %d batches",
                theme.name, len(tiles), grid.candidate_count(), len(decorations),
                len(clouds), len(batches))

    return TerrainResult(theme, tiles, decorations, batches, clouds, fixtures,
                         heights.anomalies)
