"""Tests for buffer drawing primitives."""
from __future__ import annotations

import numpy as np

from pocketsurf.graphics.primitives import (
    draw_dashed_polyline,
    draw_image,
    draw_line,
    draw_polyline,
    fill_polygon,
    fill_vertical_gradient,
)


def _buffer(w: int = 10, h: int = 10) -> np.ndarray:
    return np.zeros((h, w, 3), dtype=np.uint8)


class TestGradient:
    def test_vertical_gradient_endpoints(self) -> None:
        buf = _buffer(4, 20)
        fill_vertical_gradient(buf, (200, 100, 0), (0, 100, 200))
        assert tuple(buf[0, 0]) == (200, 100, 0)
        assert tuple(buf[-1, 3]) == (0, 100, 200)
        # Each row is uniform
        assert (buf[7] == buf[7, 0]).all()


class TestFillPolygon:
    def test_square(self) -> None:
        buf = _buffer()
        fill_polygon(buf, [(2, 2), (6, 2), (6, 6), (2, 6)], (255, 255, 255))

        expected = np.zeros((10, 10), dtype=bool)
        expected[2:6, 2:6] = True
        assert np.array_equal(buf[:, :, 0] == 255, expected)

    def test_alpha_blends_with_background(self) -> None:
        buf = _buffer()
        buf[:, :] = (200, 100, 0)
        fill_polygon(buf, [(0, 0), (10, 0), (10, 10), (0, 10)], (0, 0, 0), alpha=0.5)
        assert tuple(buf[5, 5]) == (100, 50, 0)

    def test_clipped_to_buffer(self) -> None:
        buf = _buffer()
        fill_polygon(buf, [(-5, -5), (20, -5), (20, 20), (-5, 20)], (9, 9, 9))
        assert (buf == 9).all()

    def test_degenerate_polygon_is_ignored(self) -> None:
        buf = _buffer()
        fill_polygon(buf, [(1, 1), (5, 5)], (9, 9, 9))
        assert not buf.any()


class TestLines:
    def test_horizontal_line(self) -> None:
        buf = _buffer()
        draw_line(buf, 1, 4, 8, 4, (255, 0, 0))
        assert (buf[4, 1:9, 0] == 255).all()
        assert not buf[3].any()

    def test_line_off_buffer_is_clipped(self) -> None:
        buf = _buffer()
        draw_line(buf, -20, -3, 30, 12, (255, 0, 0), thickness=3)
        assert buf.any()

    def test_polyline_joins_points(self) -> None:
        buf = _buffer()
        draw_polyline(buf, [(0.2, 1.0), (4.0, 1.0), (4.0, 6.4)], (0, 255, 0))
        assert buf[1, 0, 1] == 255
        assert buf[1, 4, 1] == 255
        assert buf[6, 4, 1] == 255

    def test_dashed_polyline(self) -> None:
        buf = _buffer(24, 10)
        draw_dashed_polyline(buf, [(0, 5), (10, 5), (20, 5)], (0, 0, 255), dash=4, gap=4)
        lit = buf[5, :, 2] == 255
        assert lit[2]
        assert not lit[6]
        assert lit[10]
        assert not lit[14]
        assert lit[18]


class TestDrawImage:
    def test_rgba_uses_per_pixel_alpha(self) -> None:
        buf = _buffer(4, 4)
        image = np.zeros((2, 2, 4), dtype=np.uint8)
        image[:, :] = (255, 0, 0, 255)
        image[1, 1, 3] = 0

        draw_image(buf, image, 1, 1)

        assert tuple(buf[1, 1]) == (255, 0, 0)
        assert tuple(buf[2, 2]) == (0, 0, 0)
        assert tuple(buf[0, 0]) == (0, 0, 0)

    def test_clipped_at_edges(self) -> None:
        buf = _buffer(4, 4)
        image = np.full((3, 3, 3), 7, dtype=np.uint8)

        draw_image(buf, image, -1, -1)
        assert (buf[0:2, 0:2] == 7).all()
        assert not buf[2:, :].any()

        draw_image(buf, image, 10, 10)
        draw_image(buf, image, -10, 0)
