"""Basic drawing primitives for the playfield buffer."""

import math
from typing import Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Point = Tuple[float, float]
Buffer = NDArray[np.uint8]


def fill_vertical_gradient(buffer: Buffer, top: Color, bottom: Color) -> None:
    """Fill buffer with a top-to-bottom linear gradient."""
    h = buffer.shape[0]
    t = np.linspace(0.0, 1.0, h)[:, None]
    rows = np.asarray(top, dtype=np.float64) * (1 - t) + np.asarray(bottom, dtype=np.float64) * t
    buffer[:, :] = rows[:, None, :].astype(np.uint8)


def _blend(region: NDArray[np.uint8], color: Color, alpha: float) -> NDArray[np.uint8]:
    return (np.asarray(color, dtype=np.float64) * alpha + region * (1 - alpha)).astype(np.uint8)


def draw_line(
    buffer: Buffer,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: Color,
    thickness: int = 1,
) -> None:
    """Draw a line using Bresenham's algorithm.

    Args:
        buffer: Target numpy array (height, width, 3)
        x1, y1: Start point
        x2, y2: End point
        color: RGB color tuple
        thickness: Line thickness in pixels
    """
    h, w = buffer.shape[:2]

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    x, y = x1, y1

    while True:
        for tx in range(-(thickness // 2), thickness - thickness // 2):
            for ty in range(-(thickness // 2), thickness - thickness // 2):
                px, py = x + tx, y + ty
                if 0 <= px < w and 0 <= py < h:
                    buffer[py, px] = color

        if x == x2 and y == y2:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_polyline(
    buffer: Buffer,
    points: Sequence[Point],
    color: Color,
    thickness: int = 1,
) -> None:
    """Stroke an open polyline through ``points``."""
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        draw_line(
            buffer,
            int(round(x1)), int(round(y1)),
            int(round(x2)), int(round(y2)),
            color, thickness,
        )


def draw_dashed_polyline(
    buffer: Buffer,
    points: Sequence[Point],
    color: Color,
    dash: float = 4.0,
    gap: float = 4.0,
    thickness: int = 1,
) -> None:
    """Stroke an open polyline with a dash pattern.

    The pattern is measured along the path, so it carries across vertices
    instead of restarting on every segment.
    """
    period = dash + gap
    travelled = 0.0

    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        length = math.hypot(x2 - x1, y2 - y1)
        if length == 0:
            continue

        pos = 0.0
        while pos < length:
            phase = (travelled + pos) % period
            if phase < dash:
                run = min(dash - phase, length - pos)
                a, b = pos / length, (pos + run) / length
                draw_line(
                    buffer,
                    int(round(x1 + (x2 - x1) * a)), int(round(y1 + (y2 - y1) * a)),
                    int(round(x1 + (x2 - x1) * b)), int(round(y1 + (y2 - y1) * b)),
                    color, thickness,
                )
            else:
                run = min(period - phase, length - pos)
            pos += max(run, 1e-6)

        travelled += length


def fill_polygon(
    buffer: Buffer,
    points: Sequence[Point],
    color: Color,
    alpha: float = 1.0,
) -> None:
    """Fill a simple polygon with even-odd scanlines.

    Args:
        buffer: Target numpy array (height, width, 3)
        points: Polygon vertices in order; the last connects back to the first
        color: RGB color tuple
        alpha: Opacity of the fill (0.0 to 1.0)
    """
    if len(points) < 3:
        return

    h, w = buffer.shape[:2]
    pts = np.asarray(points, dtype=np.float64)
    x0, y0 = pts[:, 0], pts[:, 1]
    x1, y1 = np.roll(x0, -1), np.roll(y0, -1)

    row_start = max(0, int(math.floor(y0.min())))
    row_end = min(h, int(math.ceil(y0.max())) + 1)

    for row in range(row_start, row_end):
        yc = row + 0.5  # sample at pixel centers
        crosses = ((y0 <= yc) & (y1 > yc)) | ((y1 <= yc) & (y0 > yc))
        if not crosses.any():
            continue

        xs = x0[crosses] + (yc - y0[crosses]) * (x1[crosses] - x0[crosses]) / (y1[crosses] - y0[crosses])
        xs.sort()

        for left, right in zip(xs[0::2], xs[1::2]):
            start = max(0, int(math.ceil(left - 0.5)))
            stop = min(w, int(math.floor(right - 0.5)) + 1)
            if stop <= start:
                continue
            if alpha >= 1.0:
                buffer[row, start:stop] = color
            else:
                buffer[row, start:stop] = _blend(buffer[row, start:stop], color, alpha)


def draw_image(
    buffer: Buffer,
    image: Buffer,
    x: int,
    y: int,
    alpha: float = 1.0,
) -> None:
    """Draw an image onto the buffer with optional alpha blending.

    Args:
        buffer: Target numpy array (height, width, 3)
        image: Source image array (height, width, 3 or 4)
        x: Top-left x coordinate
        y: Top-left y coordinate
        alpha: Global alpha multiplier (0.0 to 1.0)
    """
    buf_h, buf_w = buffer.shape[:2]
    img_h, img_w = image.shape[:2]

    # Calculate visible region
    src_x1 = max(0, -x)
    src_y1 = max(0, -y)
    src_x2 = min(img_w, buf_w - x)
    src_y2 = min(img_h, buf_h - y)

    dst_x1 = max(0, x)
    dst_y1 = max(0, y)
    dst_x2 = dst_x1 + (src_x2 - src_x1)
    dst_y2 = dst_y1 + (src_y2 - src_y1)

    if src_x2 <= src_x1 or src_y2 <= src_y1:
        return  # Nothing to draw

    src_region = image[src_y1:src_y2, src_x1:src_x2]

    if alpha >= 1.0 and image.shape[2] == 3:
        buffer[dst_y1:dst_y2, dst_x1:dst_x2] = src_region
        return

    dst_region = buffer[dst_y1:dst_y2, dst_x1:dst_x2]

    if image.shape[2] == 4:
        # RGBA image with per-pixel alpha
        img_alpha = (src_region[:, :, 3:4] / 255.0) * alpha
        src_rgb = src_region[:, :, :3]
    else:
        img_alpha = alpha
        src_rgb = src_region

    blended = (src_rgb * img_alpha + dst_region * (1 - img_alpha)).astype(np.uint8)
    buffer[dst_y1:dst_y2, dst_x1:dst_x2] = blended
