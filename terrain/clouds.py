# clouds.py - a few floating puff clusters, independent of the tile data
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from mesh.buffer import MeshBuffer, merge_buffers
from mesh.primitives import sphere

PUFF_SEGMENTS = 7


@dataclass(frozen=True)
class CloudRules:
    count_exponent: float = 0.45
    max_count: int = 4               # exclusive upper bound of the count
    puff_radii: Tuple[float, ...] = (1.2, 1.5, 0.9)
    puff_spacing: float = 1.85
    puff_jitter: float = 0.3
    horizontal_span: float = 10.0    # clouds land within +/- span on x and z
    altitude_min: float = 7.0
    altitude_span: float = 7.0


def cloud_count(draw: float, rules: CloudRules = CloudRules()) -> int:
    """``floor(draw ** 0.45 * 4)``: mostly zero or one cloud, at most three."""
    return int(math.floor(draw ** rules.count_exponent * rules.max_count))


@dataclass(frozen=True)
class CloudMesh:
    """One cloud: local geometry plus the transform that places it.

    ``yaw`` rotates about the world origin after the offset is applied, so
    spinning a cloud by changing its yaw makes it drift around the map.
    ``spin`` is the suggested spin direction (+1/-1, alternating by index).
    """
    geometry: MeshBuffer
    offset: Tuple[float, float, float]
    yaw: float
    spin: int = 1
    material_key: str = "cloud"

    def world_geometry(self) -> MeshBuffer:
        return self.geometry.translated(*self.offset).rotated_y(self.yaw)


class CloudFieldGenerator:
    def __init__(self, rng: random.Random, rules: CloudRules = CloudRules(),
                 material_key: str = "cloud") -> None:
        self.rng = rng
        self.rules = rules
        self.material_key = material_key

    def generate(self, scene_bounds: Optional[float] = None) -> List[CloudMesh]:
        """Scatter clouds; ``scene_bounds`` overrides the horizontal half-span."""
        rng, rules = self.rng, self.rules
        span = rules.horizontal_span if scene_bounds is None else scene_bounds
        clouds: List[CloudMesh] = []
        for i in range(cloud_count(rng.random(), rules)):
            puffs = []
            count = len(rules.puff_radii)
            for k, radius in enumerate(rules.puff_radii):
                x = (k - (count - 1) / 2.0) * rules.puff_spacing
                puffs.append(sphere(radius, PUFF_SEGMENTS, PUFF_SEGMENTS)
                             .translated(x, rng.random() * rules.puff_jitter, 0.0))
            offset = (rng.random() * span * 2 - span,
                      rng.random() * rules.altitude_span + rules.altitude_min,
                      rng.random() * span * 2 - span)
            yaw = rng.random() * math.pi * 2
            clouds.append(CloudMesh(merge_buffers(puffs), offset, yaw,
                                    spin=1 if i % 2 == 0 else -1,
                                    material_key=self.material_key))
        return clouds
