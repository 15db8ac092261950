# render_topdown.py - simple top-down (2D) hex fill of a generated terrain
from __future__ import annotations
from typing import Tuple

from PIL import Image, ImageDraw

from terrain.hexgrid import WorldPosition, hex_corners
from terrain.worldgen import TerrainResult

DECORATION_COLOR_DARKEN = 0.6


def _shade(color: Tuple[int, int, int], factor: float) -> Tuple[int, int, int]:
    return tuple(max(0, min(255, int(c * factor))) for c in color)


def render_topdown(result: TerrainResult, pixels_per_unit: float = 12.0,
                   shade_by_height: bool = True, show_decorations: bool = True,
                   show_clouds: bool = False) -> Image.Image:
    theme = result.theme
    xs = [t.position.x for t in result.tiles] or [0.0]
    zs = [t.position.z for t in result.tiles] or [0.0]

    # Pad by one hex radius plus a margin so edge tiles are not clipped
    padding = 2.0
    min_x, max_x = min(xs) - padding, max(xs) + padding
    min_z, max_z = min(zs) - padding, max(zs) + padding

    img_w = max(1, int((max_x - min_x) * pixels_per_unit))
    img_h = max(1, int((max_z - min_z) * pixels_per_unit))

    img = Image.new("RGBA", (img_w, img_h), theme.background + (255,))
    draw = ImageDraw.Draw(img)

    def to_px(x: float, z: float) -> Tuple[float, float]:
        return (x - min_x) * pixels_per_unit, (z - min_z) * pixels_per_unit

    max_height = max((t.height for t in result.tiles), default=0.0) or 1.0
    # Paint far rows first so nearer tiles overlap them
    for tile in sorted(result.tiles, key=lambda t: t.position.z):
        color = theme.color_for(theme.material_for(tile.biome))
        if shade_by_height:
            color = _shade(color, 0.7 + 0.3 * tile.height / max_height)
        pts = [to_px(x, z) for x, z in hex_corners(tile.position)]
        draw.polygon(pts, fill=color)

    if show_decorations:
        for deco in result.decorations:
            color = _shade(theme.color_for(theme.material_for(deco.batch_biome)),
                           DECORATION_COLOR_DARKEN)
            cx, cy = to_px(deco.anchor.x, deco.anchor.z)
            r = 0.35 * pixels_per_unit
            draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=color)

    if show_clouds:
        for cloud in result.clouds:
            bounds = cloud.world_geometry().bounds()
            if bounds is None:
                continue
            lo, hi = bounds
            a = to_px(float(lo[0]), float(lo[2]))
            b = to_px(float(hi[0]), float(hi[2]))
            draw.ellipse((min(a[0], b[0]), min(a[1], b[1]), max(a[0], b[0]), max(a[1], b[1])),
                         outline=theme.cloud_color)
    return img


def tile_pixel(result: TerrainResult, position: WorldPosition,
               pixels_per_unit: float = 12.0) -> Tuple[int, int]:
    """Pixel coordinate of a world position in the image :func:`render_topdown` draws."""
    min_x = min((t.position.x for t in result.tiles), default=0.0) - 2.0
    min_z = min((t.position.z for t in result.tiles), default=0.0) - 2.0
    return (int((position.x - min_x) * pixels_per_unit),
            int((position.z - min_z) * pixels_per_unit))
