"""Graphics module for the Pocket Surf rendering pipeline."""

from pocketsurf.graphics.renderer import WaveRenderer
from pocketsurf.graphics.sprites import LoadStatus, SpriteSheet, paint_surfer_sheet
from pocketsurf.graphics.primitives import (
    draw_dashed_polyline,
    draw_image,
    draw_line,
    draw_polyline,
    fill_polygon,
    fill_vertical_gradient,
)

__all__ = [
    # Renderer
    "WaveRenderer",
    # Sprites
    "LoadStatus",
    "SpriteSheet",
    "paint_surfer_sheet",
    # Primitives
    "draw_dashed_polyline",
    "draw_image",
    "draw_line",
    "draw_polyline",
    "fill_polygon",
    "fill_vertical_gradient",
]
