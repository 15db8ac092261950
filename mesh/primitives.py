# primitives.py - cylinder/cone/sphere builders laid out like the usual
# WebGL buffer geometries (seam vertex duplicated, caps fanned from centers)
from __future__ import annotations

import math
from typing import List

import numpy as np

from .buffer import MeshBuffer

TAU = 2.0 * math.pi

HEX_RADIUS = 1.0
HEX_SEGMENTS = 6


def _normalize(v: np.ndarray) -> np.ndarray:
    n = np.linalg.norm(v, axis=-1, keepdims=True)
    n[n == 0.0] = 1.0
    return v / n


def _cap(radius: float, half: float, segments: int, top: bool, start: int):
    sign = 1.0 if top else -1.0
    theta = np.arange(segments + 1) / segments * TAU
    centers = np.zeros((segments, 3), np.float32)
    centers[:, 1] = half * sign
    ring = np.stack([radius * np.sin(theta),
                     np.full_like(theta, half * sign),
                     radius * np.cos(theta)], axis=1)
    pos = np.vstack([centers, ring])
    nrm = np.zeros_like(pos)
    nrm[:, 1] = sign

    idx: List[int] = []
    ring_start = start + segments
    for x in range(segments):
        c = start + x
        i = ring_start + x
        if top:
            idx.extend((i, i + 1, c))
        else:
            idx.extend((i + 1, i, c))
    return pos, nrm, idx


def cylinder(radius_top: float, radius_bottom: float, height: float,
             radial_segments: int = 8, height_segments: int = 1,
             open_ended: bool = False) -> MeshBuffer:
    """Cylinder centered on the origin, axis along +Y.

    A zero ``radius_top`` gives a cone: the degenerate top triangles and the
    top cap are skipped.
    """
    half = height * 0.5
    slope = (radius_bottom - radius_top) / height if height else 0.0

    v = np.arange(height_segments + 1) / height_segments
    u = np.arange(radial_segments + 1) / radial_segments
    theta = u * TAU
    radius = v * (radius_bottom - radius_top) + radius_top

    sin_t = np.sin(theta)[None, :]
    cos_t = np.cos(theta)[None, :]
    px = radius[:, None] * sin_t
    py = np.broadcast_to((-v * height + half)[:, None], px.shape)
    pz = radius[:, None] * cos_t
    positions = [np.stack([px, py, pz], axis=-1).reshape(-1, 3)]

    n = np.stack([np.broadcast_to(sin_t, px.shape),
                  np.full(px.shape, slope),
                  np.broadcast_to(cos_t, px.shape)], axis=-1).reshape(-1, 3)
    normals = [_normalize(n)]

    row = radial_segments + 1
    indices: List[int] = []
    for x in range(radial_segments):
        for y in range(height_segments):
            a = y * row + x
            b = (y + 1) * row + x
            c = (y + 1) * row + x + 1
            d = y * row + x + 1
            if radius_top > 0 or y != 0:
                indices.extend((a, b, d))
            if radius_bottom > 0 or y != height_segments - 1:
                indices.extend((b, c, d))

    count = row * (height_segments + 1)
    if not open_ended:
        for r, top in ((radius_top, True), (radius_bottom, False)):
            if r <= 0:
                continue
            pos, nrm, idx = _cap(r, half, radial_segments, top, count)
            positions.append(pos)
            normals.append(nrm)
            indices.extend(idx)
            count += pos.shape[0]

    return MeshBuffer(np.vstack(positions), np.vstack(normals), np.array(indices, np.uint32))


def cone(radius: float, height: float, radial_segments: int = 8) -> MeshBuffer:
    return cylinder(0.0, radius, height, radial_segments)


def sphere(radius: float, width_segments: int = 32, height_segments: int = 16) -> MeshBuffer:
    """UV sphere centered on the origin; pole rows are collapsed to single triangles."""
    u = np.arange(width_segments + 1) / width_segments
    v = np.arange(height_segments + 1) / height_segments
    phi = (u * TAU)[None, :]
    theta = (v * math.pi)[:, None]

    px = -radius * np.cos(phi) * np.sin(theta)
    py = np.broadcast_to(radius * np.cos(theta), px.shape)
    pz = radius * np.sin(phi) * np.sin(theta)
    positions = np.stack([px, py, pz], axis=-1).reshape(-1, 3)
    normals = _normalize(positions)

    row = width_segments + 1
    indices: List[int] = []
    for iy in range(height_segments):
        for ix in range(width_segments):
            a = iy * row + ix + 1
            b = iy * row + ix
            c = (iy + 1) * row + ix
            d = (iy + 1) * row + ix + 1
            if iy != 0:
                indices.extend((a, b, d))
            if iy != height_segments - 1:
                indices.extend((b, c, d))

    return MeshBuffer(positions, normals, np.array(indices, np.uint32))


def hex_column(height: float, x: float, z: float) -> MeshBuffer:
    """Six-sided column standing on y=0 with its top face at ``height``."""
    return cylinder(HEX_RADIUS, HEX_RADIUS, height, HEX_SEGMENTS).translated(x, height * 0.5, z)
