# buffer.py - indexed triangle buffers (positions, normals, indices)
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np


@dataclass
class MeshBuffer:
    """Triangle-list geometry ready to hand to a renderer.

    ``positions`` and ``normals`` are ``(N, 3)`` float32 arrays and
    ``indices`` is a flat uint32 array whose length is a multiple of three.
    Buffers are treated as values: transforms return new buffers.
    """

    positions: np.ndarray
    normals: np.ndarray
    indices: np.ndarray

    def __post_init__(self) -> None:
        self.positions = np.asarray(self.positions, dtype=np.float32).reshape(-1, 3)
        self.normals = np.asarray(self.normals, dtype=np.float32).reshape(-1, 3)
        self.indices = np.asarray(self.indices, dtype=np.uint32).reshape(-1)
        if self.positions.shape != self.normals.shape:
            raise ValueError("positions and normals must have the same shape")
        if self.indices.size % 3:
            raise ValueError("index count must be a multiple of 3")

    @classmethod
    def empty(cls) -> "MeshBuffer":
        return cls(np.zeros((0, 3), np.float32), np.zeros((0, 3), np.float32),
                   np.zeros(0, np.uint32))

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def index_count(self) -> int:
        return int(self.indices.size)

    @property
    def triangle_count(self) -> int:
        return self.index_count // 3

    @property
    def is_empty(self) -> bool:
        return self.index_count == 0

    @property
    def is_frozen(self) -> bool:
        return not (self.positions.flags.writeable or self.normals.flags.writeable
                    or self.indices.flags.writeable)

    def bounds(self) -> Optional[Tuple[np.ndarray, np.ndarray]]:
        """Axis-aligned ``(min, max)`` corners, or ``None`` for an empty buffer."""
        if self.vertex_count == 0:
            return None
        return self.positions.min(axis=0), self.positions.max(axis=0)

    def translated(self, dx: float, dy: float, dz: float) -> "MeshBuffer":
        offset = np.array([dx, dy, dz], dtype=np.float32)
        return MeshBuffer(self.positions + offset, self.normals.copy(), self.indices.copy())

    def rotated_y(self, angle: float) -> "MeshBuffer":
        """Rotate about the world Y axis (right-handed, like a yaw)."""
        c, s = math.cos(angle), math.sin(angle)
        rot = np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]], dtype=np.float32)
        return MeshBuffer(self.positions @ rot.T, self.normals @ rot.T, self.indices.copy())

    def merge(self, *others: "MeshBuffer") -> "MeshBuffer":
        return merge_buffers((self,) + others)

    def freeze(self) -> "MeshBuffer":
        """Mark the arrays read-only; returns ``self`` for chaining."""
        for arr in (self.positions, self.normals, self.indices):
            arr.flags.writeable = False
        return self


def merge_buffers(parts: Iterable[MeshBuffer]) -> MeshBuffer:
    """Concatenate buffers into one, re-basing each part's indices."""
    parts = [p for p in parts if p.vertex_count]
    if not parts:
        return MeshBuffer.empty()
    if len(parts) == 1:
        p = parts[0]
        return MeshBuffer(p.positions.copy(), p.normals.copy(), p.indices.copy())

    offsets = np.cumsum([0] + [p.vertex_count for p in parts[:-1]])
    positions = np.concatenate([p.positions for p in parts])
    normals = np.concatenate([p.normals for p in parts])
    indices = np.concatenate([p.indices + np.uint32(off) for p, off in zip(parts, offsets)])
    return MeshBuffer(positions, normals, indices)
