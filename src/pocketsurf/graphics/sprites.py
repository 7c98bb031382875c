"""Surfer sprite sheet.

The sheet is a horizontal strip of square frames. Loading happens off the
frame loop; the renderer polls :attr:`SpriteSheet.status` and simply skips
the sprite until the frames are ready.
"""

import logging
import math
import threading
from enum import Enum, auto
from pathlib import Path
from typing import List, Optional

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw

logger = logging.getLogger(__name__)


FRAME_SIZE = 64
FRAME_COUNT = 8
DRAW_SIZE = 42
FRAME_MS = 100.0


class LoadStatus(Enum):
    PENDING = auto()
    LOADING = auto()
    LOADED = auto()
    FAILED = auto()


class SpriteSheet:
    """Animation frames cut from a sprite strip image."""

    def __init__(
        self,
        path: Path,
        frame_size: int = FRAME_SIZE,
        frame_count: int = FRAME_COUNT,
        draw_size: int = DRAW_SIZE,
    ):
        self.path = Path(path)
        self.frame_size = frame_size
        self.frame_count = frame_count
        self.draw_size = draw_size

        self._frames: List[NDArray[np.uint8]] = []
        self._status = LoadStatus.PENDING
        self._error: Optional[str] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def is_loaded(self) -> bool:
        return self._status == LoadStatus.LOADED

    @property
    def error(self) -> Optional[str]:
        """Get error message if loading failed."""
        return self._error

    def load(self) -> bool:
        """Load and slice the sheet on the calling thread.

        Returns:
            True if the frames are ready
        """
        self._status = LoadStatus.LOADING
        try:
            with Image.open(self.path) as img:
                sheet = img.convert("RGBA")
            frames = self._slice(sheet)
        except (OSError, ValueError) as e:
            self._error = str(e)
            self._status = LoadStatus.FAILED
            logger.warning(f"Sprite sheet {self.path} failed to load: {e}")
            return False

        # Frames must be in place before the status flips
        self._frames = frames
        self._status = LoadStatus.LOADED
        logger.info(f"Loaded {len(frames)} sprite frames from {self.path}")
        return True

    def load_async(self) -> None:
        """Start loading in a background thread."""
        if self._status in (LoadStatus.LOADING, LoadStatus.LOADED):
            logger.debug("Sprite sheet already loading, skipping")
            return

        self._status = LoadStatus.LOADING
        self._thread = threading.Thread(
            target=self.load,
            daemon=True,
            name="SpriteSheetLoader",
        )
        self._thread.start()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until a background load finishes. Returns True if loaded."""
        if self._thread is not None:
            self._thread.join(timeout)
        return self.is_loaded

    def frame(self, index: int) -> Optional[NDArray[np.uint8]]:
        if not self.is_loaded:
            return None
        return self._frames[index % len(self._frames)]

    def frame_at(self, time_ms: float) -> Optional[NDArray[np.uint8]]:
        """Frame to show at ``time_ms`` (one frame every 100ms)."""
        return self.frame(int(time_ms / FRAME_MS) % self.frame_count)

    def _slice(self, sheet: Image.Image) -> List[NDArray[np.uint8]]:
        needed = self.frame_size * self.frame_count
        if sheet.width < needed or sheet.height < self.frame_size:
            raise ValueError(
                f"sheet is {sheet.width}x{sheet.height}, need at least {needed}x{self.frame_size}"
            )

        frames = []
        for i in range(self.frame_count):
            left = i * self.frame_size
            tile = sheet.crop((left, 0, left + self.frame_size, self.frame_size))
            if self.draw_size != self.frame_size:
                tile = tile.resize((self.draw_size, self.draw_size), Image.Resampling.LANCZOS)
            frames.append(np.array(tile, dtype=np.uint8))
        return frames


def paint_surfer_sheet(
    path: Path,
    frame_size: int = FRAME_SIZE,
    frame_count: int = FRAME_COUNT,
) -> Path:
    """Paint a simple animated surfer strip and save it as PNG.

    Each frame bobs the rider and flexes the knees on a sine cycle so the
    strip loops cleanly.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    sheet = Image.new("RGBA", (frame_size * frame_count, frame_size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(sheet)
    s = frame_size / 64.0

    for i in range(frame_count):
        ox = i * frame_size
        cycle = math.sin(2 * math.pi * i / frame_count)
        bob = cycle * 2 * s
        crouch = (cycle + 1) * 1.5 * s

        # Board
        board_y = 46 * s + bob
        draw.ellipse(
            (ox + 8 * s, board_y - 3 * s, ox + 56 * s, board_y + 3 * s),
            fill=(250, 204, 80, 255),
            outline=(120, 80, 20, 255),
        )

        # Legs
        hip = (ox + 32 * s, 32 * s + bob + crouch)
        draw.line((ox + 24 * s, board_y - 2 * s, hip[0], hip[1]), fill=(30, 30, 40, 255), width=max(1, int(3 * s)))
        draw.line((ox + 40 * s, board_y - 2 * s, hip[0], hip[1]), fill=(30, 30, 40, 255), width=max(1, int(3 * s)))

        # Torso and arms
        shoulder = (ox + 30 * s, 20 * s + bob + crouch)
        draw.line((hip[0], hip[1], shoulder[0], shoulder[1]), fill=(220, 60, 60, 255), width=max(1, int(4 * s)))
        arm = cycle * 4 * s
        draw.line((ox + 16 * s, 24 * s + bob + arm, shoulder[0], shoulder[1]), fill=(240, 190, 150, 255), width=max(1, int(2 * s)))
        draw.line((ox + 46 * s, 22 * s + bob - arm, shoulder[0], shoulder[1]), fill=(240, 190, 150, 255), width=max(1, int(2 * s)))

        # Head
        r = 4 * s
        hx, hy = shoulder[0] + 1 * s, shoulder[1] - 6 * s
        draw.ellipse((hx - r, hy - r, hx + r, hy + r), fill=(240, 190, 150, 255))

    sheet.save(path, format="PNG")
    logger.info(f"Painted {frame_count}-frame surfer sheet at {path}")
    return path
