"""
Simulated playfield display.

Holds the RGB numpy buffer the renderer writes and turns it into a
pygame surface for the window.
"""

import pygame
import numpy as np
from numpy.typing import NDArray


class PlayfieldDisplay:
    """Numpy-backed drawing surface with scaled pygame output."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer(self) -> NDArray[np.uint8]:
        """Live buffer; draw into it directly."""
        return self._buffer

    def render(self, scale: int = 1) -> pygame.Surface:
        """
        Render buffer to a pygame surface.

        Args:
            scale: Pixel scale factor

        Returns:
            pygame.Surface with rendered display
        """
        # pygame surfaces are indexed (x, y)
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        if scale == 1:
            return surface
        return pygame.transform.scale(surface, (self._width * scale, self._height * scale))
