# themes.py - material sets, palettes and tall-decoration kind per terrain theme
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .biomes import BiomeKind, STONE, DIRT, GRASS, SAND, SUBMERGED_DIRT, BONE
from .decorations import DecorationKind, SkeletalFigure, TreeCluster
from .errors import ThemeError

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Theme:
    """Everything that distinguishes one terrain look from another.

    ``materials`` maps each biome that can receive geometry to a material
    identifier; biomes sharing an identifier share a batch.  ``palette`` maps
    material identifiers to preview colors.
    """
    name: str
    materials: Dict[BiomeKind, str]
    tall_decoration: DecorationKind
    sea_material: str = "water"
    cloud_material: str = "cloud"
    background: RGB = (255, 203, 142)
    cloud_color: RGB = (255, 255, 255)
    palette: Dict[str, RGB] = field(default_factory=dict)

    def material_for(self, biome: BiomeKind) -> str:
        try:
            return self.materials[biome]
        except KeyError:
            raise ThemeError(f"theme {self.name!r} has no material for {biome.name}") from None

    def batch_keys(self) -> List[str]:
        """Distinct material identifiers in biome order."""
        keys: List[str] = []
        for biome in BiomeKind:
            key = self.materials.get(biome)
            if key is not None and key not in keys:
                keys.append(key)
        return keys

    def color_for(self, material: str) -> RGB:
        return self.palette.get(material, (128, 128, 128))


_EARTH_PALETTE: Dict[str, RGB] = {
    "stone": (128, 128, 128),
    "dirt": (121, 85, 58),
    "dirt2": (92, 70, 50),
    "grass": (70, 140, 60),
    "sand": (220, 200, 140),
    "water": (85, 170, 255),
}

FOREST = Theme(
    name="forest",
    materials={STONE: "stone", DIRT: "dirt", GRASS: "grass", SAND: "sand",
               SUBMERGED_DIRT: "dirt2"},
    tall_decoration=TreeCluster,
    palette=dict(_EARTH_PALETTE),
)

WINTER = Theme(
    name="winter",
    materials={STONE: "stone", DIRT: "dirt", GRASS: "snow", SAND: "more_snow",
               SUBMERGED_DIRT: "dirt2"},
    tall_decoration=TreeCluster,
    palette={**_EARTH_PALETTE, "snow": (240, 244, 250), "more_snow": (222, 230, 240)},
)

INFERNO = Theme(
    name="inferno",
    materials={STONE: "stone", DIRT: "dirt", GRASS: "soul_sand", SAND: "soul_sand",
               SUBMERGED_DIRT: "dirt2", BONE: "bone"},
    tall_decoration=SkeletalFigure,
    sea_material="lava",
    background=(20, 8, 3),
    cloud_color=(15, 14, 13),
    palette={**_EARTH_PALETTE, "soul_sand": (84, 64, 51), "bone": (227, 218, 201),
             "lava": (255, 102, 0)},
)

THEMES: Dict[str, Theme] = {t.name: t for t in (FOREST, WINTER, INFERNO)}


def get_theme(name: str) -> Theme:
    try:
        return THEMES[name.lower()]
    except KeyError:
        raise ThemeError(f"unknown theme {name!r}; choose from {sorted(THEMES)}") from None
