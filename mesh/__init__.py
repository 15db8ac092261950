# mesh/__init__.py
# Package init for geometry buffers, primitive builders and batching

from .buffer import MeshBuffer, merge_buffers
from .primitives import cylinder, cone, sphere, hex_column
from .batcher import GeometryBatcher, BatcherFinalizedError

__all__ = [
    "MeshBuffer", "merge_buffers",
    "cylinder", "cone", "sphere", "hex_column",
    "GeometryBatcher", "BatcherFinalizedError",
]
