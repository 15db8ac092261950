# decorations.py - rocks, trees and skeletal figures attached to tiles
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import ClassVar, List, Tuple, Type, Union

from mesh.buffer import MeshBuffer, merge_buffers
from mesh.primitives import cone, cylinder, sphere
from .biomes import BiomeKind, Tile, STONE, DIRT, GRASS, SAND, BONE
from .hexgrid import WorldPosition

# Segment counts of the decoration primitives
ROUND_SEGMENTS = 7
TREE_SEGMENTS = 3


@dataclass(frozen=True)
class DecorationRules:
    """Placement and size knobs.

    A decoration appears when the tile's draw is strictly greater than the
    threshold, so the probability is ``1 - threshold``.
    """
    stone_rock_threshold: float = 0.8
    dirt_tall_threshold: float = 0.5
    sand_rock_threshold: float = 0.8

    rock_radius_min: float = 0.1
    rock_radius_span: float = 0.3
    rock_jitter: float = 0.4

    tree_height_min: float = 1.25
    tree_height_span: float = 1.0
    tree_lift: float = 1.0   # keeps the lowest tier clear of the tile top

    figure_scale: float = 2.0


@dataclass(frozen=True)
class RockCluster:
    anchor: WorldPosition
    height: float
    scale: float                     # sphere radius
    jitter: Tuple[float, float] = (0.0, 0.0)

    batch_biome: ClassVar[BiomeKind] = STONE

    @classmethod
    def from_tile(cls, tile: Tile, rng: random.Random, rules: DecorationRules) -> "RockCluster":
        px = rng.random() * rules.rock_jitter
        pz = rng.random() * rules.rock_jitter
        radius = rng.random() * rules.rock_radius_span + rules.rock_radius_min
        return cls(tile.position, tile.height, radius, (px, pz))

    def geometry(self) -> MeshBuffer:
        return sphere(self.scale, ROUND_SEGMENTS, ROUND_SEGMENTS).translated(
            self.anchor.x + self.jitter[0], self.height, self.anchor.z + self.jitter[1])


@dataclass(frozen=True)
class TreeCluster:
    anchor: WorldPosition
    height: float
    scale: float                     # height shared by all three tiers
    lift: float = 1.0

    batch_biome: ClassVar[BiomeKind] = GRASS
    # (base radius, vertical offset as a multiple of the tier height)
    TIERS: ClassVar[Tuple[Tuple[float, float], ...]] = ((1.5, 0.0), (1.15, 0.6), (0.8, 1.25))

    @classmethod
    def from_tile(cls, tile: Tile, rng: random.Random, rules: DecorationRules) -> "TreeCluster":
        tier_height = rng.random() * rules.tree_height_span + rules.tree_height_min
        return cls(tile.position, tile.height, tier_height, rules.tree_lift)

    def geometry(self) -> MeshBuffer:
        x, z = self.anchor
        return merge_buffers(
            cone(radius, self.scale, TREE_SEGMENTS).translated(
                x, self.height + self.scale * k + self.lift, z)
            for radius, k in self.TIERS)


@dataclass(frozen=True)
class SkeletalFigure:
    anchor: WorldPosition
    height: float
    scale: float = 2.0

    batch_biome: ClassVar[BiomeKind] = BONE

    @classmethod
    def from_tile(cls, tile: Tile, rng: random.Random, rules: DecorationRules) -> "SkeletalFigure":
        return cls(tile.position, tile.height, rules.figure_scale)

    def geometry(self) -> MeshBuffer:
        s = self.scale
        bone = 0.2 * s
        head_r = 0.15 * s
        body_r = 0.1 * s
        leg_h, leg_r = 0.6 * s, 0.07 * s
        arm_h, arm_r = 0.4 * s, 0.05 * s
        x, z = self.anchor
        y = self.height

        def limb(radius: float, length: float) -> MeshBuffer:
            return cylinder(radius, radius, length, ROUND_SEGMENTS)

        return merge_buffers([
            sphere(head_r, ROUND_SEGMENTS, ROUND_SEGMENTS).translated(x, y + bone * 3, z),
            limb(body_r, bone).translated(x, y + bone * 2, z),
            limb(leg_r, leg_h).translated(x - body_r * 0.5, y + bone, z),
            limb(leg_r, leg_h).translated(x + body_r * 0.5, y + bone, z),
            limb(arm_r, arm_h).translated(x - body_r * 1.5, y + bone * 2, z),
            limb(arm_r, arm_h).translated(x + body_r * 1.5, y + bone * 2, z),
        ])


Decoration = Union[RockCluster, TreeCluster, SkeletalFigure]
DecorationKind = Type[Union[RockCluster, TreeCluster, SkeletalFigure]]


class DecorationPlacer:
    """Decide which decorations a classified tile receives.

    Stone and sand tiles may get a rock, dirt tiles may get the theme's tall
    decoration.  Grass and submerged dirt stay bare.  The presence draw and
    the shape draws come from the same ``rng``, one draw for presence first.
    """

    def __init__(self, tall_decoration: DecorationKind = TreeCluster,
                 rules: DecorationRules = DecorationRules()) -> None:
        self.tall_decoration = tall_decoration
        self.rules = rules

    def place(self, tile: Tile, rng: random.Random) -> List[Decoration]:
        rules = self.rules
        if tile.biome == STONE:
            if rng.random() > rules.stone_rock_threshold:
                return [RockCluster.from_tile(tile, rng, rules)]
        elif tile.biome == DIRT:
            if rng.random() > rules.dirt_tall_threshold:
                return [self.tall_decoration.from_tile(tile, rng, rules)]
        elif tile.biome == SAND:
            if rng.random() > rules.sand_rock_threshold:
                return [RockCluster.from_tile(tile, rng, rules)]
        return []
