# batcher.py - per-material geometry accumulation (one draw call per key)
from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, List

from .buffer import MeshBuffer, merge_buffers

logger = logging.getLogger(__name__)


class BatcherFinalizedError(RuntimeError):
    """Raised when a batcher is used after its buffers were handed off."""


class GeometryBatcher:
    """Collects geometry per material key and merges each key exactly once.

    Parts are kept in an append-only list per key and concatenated in
    :meth:`finalize`, so the cost of a merge does not grow with every tile.
    Keys registered up front (or via :meth:`ensure`) that never receive
    geometry come back as empty buffers.
    """

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._parts: Dict[str, List[MeshBuffer]] = {}
        self._lock = threading.Lock()
        self._finalized = False
        for key in keys:
            self.ensure(key)

    def ensure(self, key: str) -> None:
        with self._lock:
            self._check_open()
            self._parts.setdefault(key, [])

    def append(self, key: str, geometry: MeshBuffer) -> None:
        with self._lock:
            self._check_open()
            self._parts.setdefault(key, []).append(geometry)

    def keys(self) -> List[str]:
        return list(self._parts)

    def part_count(self, key: str) -> int:
        return len(self._parts.get(key, ()))

    @property
    def finalized(self) -> bool:
        return self._finalized

    def finalize(self) -> Dict[str, MeshBuffer]:
        """Merge every batch and return read-only buffers keyed by material."""
        with self._lock:
            self._check_open()
            self._finalized = True
            out: Dict[str, MeshBuffer] = {}
            for key, parts in self._parts.items():
                out[key] = merge_buffers(parts).freeze()
                logger.debug("batch %s: %d parts, %d triangles",
                             key, len(parts), out[key].triangle_count)
            self._parts = {}
        return out

    def _check_open(self) -> None:
        if self._finalized:
            raise BatcherFinalizedError("batcher already finalized")
