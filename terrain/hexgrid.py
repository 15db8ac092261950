# hexgrid.py - offset-row hex layout, play-area filter and helpers (Python 3.10+)
from __future__ import annotations
import math
from typing import Iterator, List, NamedTuple, Tuple

# Column/row spacing for unit-radius pointy-top columns so neighbours interlock.
HORIZONTAL_SPACING = 1.77
VERTICAL_SPACING = 1.535
PLAY_RADIUS = 16.0
MIN_INDEX = -20
MAX_INDEX = 20


class WorldPosition(NamedTuple):
    """Planar world coordinate; ``z`` is the renderer's depth axis."""
    x: float
    z: float

    def length(self) -> float:
        return math.hypot(self.x, self.z)


def row_parity(row: int) -> float:
    """Truncated remainder of ``row / 2``: odd negative rows give -1."""
    return math.fmod(row, 2)


class HexGrid:
    """Maps (column, row) indices to world positions inside a circular play area."""

    def __init__(self,
                 horizontal_spacing: float = HORIZONTAL_SPACING,
                 vertical_spacing: float = VERTICAL_SPACING,
                 play_radius: float = PLAY_RADIUS,
                 min_index: int = MIN_INDEX,
                 max_index: int = MAX_INDEX) -> None:
        self.horizontal_spacing = horizontal_spacing
        self.vertical_spacing = vertical_spacing
        self.play_radius = play_radius
        self.min_index = min_index
        self.max_index = max_index

    def position_for(self, column: int, row: int) -> WorldPosition:
        x = (column + row_parity(row) * 0.5) * self.horizontal_spacing
        z = row * self.vertical_spacing
        return WorldPosition(x, z)

    def is_in_bounds(self, position: WorldPosition) -> bool:
        return position.length() <= self.play_radius

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Every index pair of the square enumeration range, columns outermost."""
        for column in range(self.min_index, self.max_index + 1):
            for row in range(self.min_index, self.max_index + 1):
                yield column, row

    def tiles(self) -> Iterator[Tuple[int, int, WorldPosition]]:
        for column, row in self.coordinates():
            pos = self.position_for(column, row)
            if self.is_in_bounds(pos):
                yield column, row, pos

    def candidate_count(self) -> int:
        side = self.max_index - self.min_index + 1
        return side * side


def hex_corners(position: WorldPosition, radius: float = 1.0) -> List[Tuple[float, float]]:
    """Planar corners of a pointy-top hex centered at ``position``.

    Matches the footprint of the six-sided column geometry, whose first
    corner lies on the +z axis.
    """
    points = []
    for i in range(6):
        angle = math.radians(60 * i)
        points.append((position.x + radius * math.sin(angle),
                       position.z + radius * math.cos(angle)))
    return points
