"""Wave and surfer renderer for the playfield buffer."""

from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from pocketsurf.game.levels import LevelSettings
from pocketsurf.game.wave import Playfield, WaveRow
from pocketsurf.graphics.primitives import (
    Color,
    Point,
    draw_dashed_polyline,
    draw_image,
    draw_polyline,
    fill_polygon,
    fill_vertical_gradient,
)
from pocketsurf.graphics.sprites import SpriteSheet


SAMPLE_STEP = 6

SKY_TOP: Color = (18, 52, 86)
SKY_BOTTOM: Color = (8, 28, 54)
BAND_COLOR: Color = (6, 18, 35)
BAND_ALPHA = 0.35
LIP_COLOR: Color = (196, 206, 216)         # white at 0.75 over the band
WHITEWATER_COLOR: Color = (132, 140, 150)  # white at 0.5
CENTER_COLOR: Color = (92, 104, 120)       # white at 0.35


class WaveRenderer:
    """Draws one frame of the ride into an RGB buffer.

    Stateless between frames apart from the sprite sheet reference; the wave
    is resampled from the field on every call.
    """

    def __init__(
        self,
        playfield: Playfield,
        sprite: Optional[SpriteSheet] = None,
        step: int = SAMPLE_STEP,
    ):
        self.playfield = playfield
        self.sprite = sprite
        self.step = step

    def new_buffer(self) -> NDArray[np.uint8]:
        return np.zeros((self.playfield.height, self.playfield.width, 3), dtype=np.uint8)

    def draw(
        self,
        buffer: NDArray[np.uint8],
        scroll: float,
        settings: LevelSettings,
        surfer_position: Tuple[float, float],
        time_ms: float,
    ) -> None:
        fill_vertical_gradient(buffer, SKY_TOP, SKY_BOTTOM)

        row = self.playfield.wave_field.sample_row(
            self.playfield.width, scroll, settings, self.step
        )
        self.draw_wave(buffer, row)
        self.draw_surfer(buffer, surfer_position, time_ms)

    def draw_wave(self, buffer: NDArray[np.uint8], row: WaveRow) -> None:
        upper = _points(row.xs, row.upper)
        lower = _points(row.xs, row.lower)
        center = _points(row.xs, row.center)

        # Band: along the lip, then back along the whitewater
        fill_polygon(buffer, upper + lower[::-1], BAND_COLOR, alpha=BAND_ALPHA)

        draw_polyline(buffer, upper, LIP_COLOR, thickness=2)
        draw_polyline(buffer, lower, WHITEWATER_COLOR, thickness=2)
        draw_dashed_polyline(buffer, center, CENTER_COLOR, dash=4, gap=4)

    def draw_surfer(
        self,
        buffer: NDArray[np.uint8],
        position: Tuple[float, float],
        time_ms: float,
    ) -> bool:
        """Blit the current animation frame; False if the sheet isn't ready."""
        if self.sprite is None:
            return False

        frame = self.sprite.frame_at(time_ms)
        if frame is None:
            return False

        size = frame.shape[0]
        x, y = position
        draw_image(buffer, frame, int(round(x - size / 2)), int(round(y - size / 2)))
        return True


def _points(xs: NDArray[np.float64], ys: NDArray[np.float64]) -> List[Point]:
    return list(zip(xs.tolist(), ys.tolist()))
