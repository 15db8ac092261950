# render/__init__.py
# Package init for rendering modules

from .render_topdown import render_topdown, tile_pixel

__all__ = ["render_topdown", "tile_pixel"]
