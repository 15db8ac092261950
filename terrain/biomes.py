from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

from .hexgrid import WorldPosition


class BiomeKind(IntEnum):
    STONE = 0
    DIRT = 1
    GRASS = 2
    SAND = 3
    SUBMERGED_DIRT = 4   # lowest band, under the sea plane
    BONE = 5             # batch for skeletal figures; never a tile biome


STONE, DIRT, GRASS, SAND = BiomeKind.STONE, BiomeKind.DIRT, BiomeKind.GRASS, BiomeKind.SAND
SUBMERGED_DIRT, BONE = BiomeKind.SUBMERGED_DIRT, BiomeKind.BONE


@dataclass(frozen=True)
class Tile:
    position: WorldPosition
    height: float
    biome: BiomeKind


# Order in which bands are tested; the first match wins.
BAND_ORDER = (STONE, DIRT, GRASS, SAND, SUBMERGED_DIRT)


@dataclass(frozen=True)
class BiomeBands:
    """Lower (exclusive) band edges as fractions of the maximum height."""
    stone: float = 0.8
    dirt: float = 0.7
    grass: float = 0.5
    sand: float = 0.3
    submerged: float = 0.0

    def as_tuple(self) -> Tuple[float, ...]:
        return (self.stone, self.dirt, self.grass, self.sand, self.submerged)

    def is_descending(self) -> bool:
        values = self.as_tuple()
        return all(a > b for a, b in zip(values, values[1:]))


class BiomeClassifier:
    """Classify a tile height into one biome using descending half-open bands.

    A height belongs to the first band whose lower edge it strictly exceeds,
    tested stone-first.  Height exactly equal to the bottom edge still counts
    as submerged dirt so the bands cover ``[0, max_height]`` without gaps;
    anything below yields ``None`` and no tile is emitted.
    """

    def __init__(self, max_height: float, bands: BiomeBands = BiomeBands()) -> None:
        self.max_height = max_height
        self.bands = bands
        self._thresholds = [(biome, frac * max_height)
                            for biome, frac in zip(BAND_ORDER, bands.as_tuple())]

    def thresholds(self) -> List[Tuple[BiomeKind, float]]:
        return list(self._thresholds)

    def classify(self, height: float) -> Optional[BiomeKind]:
        for biome, edge in self._thresholds:
            if height > edge:
                return biome
        if height == self._thresholds[-1][1]:
            return SUBMERGED_DIRT
        return None
