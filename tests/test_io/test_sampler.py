"""Tests for disc sampling from an RGB raster."""

from __future__ import annotations

import math

import numpy as np
import pytest

from wellquant.core.models import Point
from wellquant.io.sampler import RasterSampler


def _expected_count(cx: float, cy: float, radius: float, width: int, height: int) -> int:
    """Brute-force pixel count for the disc rule, clipped to the image."""
    r = max(1, math.floor(radius + 0.5))
    x0 = math.floor(cx - r + 0.5)
    y0 = math.floor(cy - r + 0.5)
    count = 0
    for py in range(2 * r):
        for px in range(2 * r):
            if math.hypot(px - r, py - r) <= r and 0 <= x0 + px < width and 0 <= y0 + py < height:
                count += 1
    return count


@pytest.fixture
def raster() -> np.ndarray:
    image = np.zeros((50, 80, 3), dtype=np.uint8)
    image[..., 0] = np.arange(80)[None, :]
    image[..., 1] = np.arange(50)[:, None]
    return image


class TestRasterSampler:
    def test_rejects_non_rgb(self):
        with pytest.raises(ValueError, match="RGB"):
            RasterSampler(np.zeros((10, 10), dtype=np.uint8))

    def test_interior_disc_count(self, raster):
        pixels = RasterSampler(raster).sample(Point(40.0, 25.0), 5.0)
        assert pixels.shape == (_expected_count(40.0, 25.0, 5.0, 80, 50), 3)
        assert pixels.dtype == np.uint8

    def test_pixels_lie_within_window(self, raster):
        pixels = RasterSampler(raster).sample(Point(40.0, 25.0), 5.0)
        # red encodes x, green encodes y
        assert pixels[:, 0].min() >= 35 and pixels[:, 0].max() <= 44
        assert pixels[:, 1].min() >= 20 and pixels[:, 1].max() <= 29

    def test_fractional_radius_rounds(self, raster):
        sampler = RasterSampler(raster)
        assert len(sampler.sample(Point(40.0, 25.0), 2.5)) == len(sampler.sample(Point(40.0, 25.0), 3.0))

    def test_small_radius_uses_one_pixel_minimum(self, raster):
        pixels = RasterSampler(raster).sample(Point(40.0, 25.0), 0.2)
        assert len(pixels) == _expected_count(40.0, 25.0, 0.2, 80, 50)
        assert len(pixels) > 0

    def test_zero_radius_is_empty(self, raster):
        assert len(RasterSampler(raster).sample(Point(40.0, 25.0), 0.0)) == 0

    def test_clipped_at_corner(self, raster):
        pixels = RasterSampler(raster).sample(Point(0.0, 0.0), 6.0)
        assert len(pixels) == _expected_count(0.0, 0.0, 6.0, 80, 50)
        assert 0 < len(pixels) < _expected_count(40.0, 25.0, 6.0, 80, 50)

    @pytest.mark.parametrize("center", [
        Point(-100.0, 10.0), Point(10.0, 500.0), Point(1000.0, 1000.0),
    ])
    def test_outside_image_is_empty(self, raster, center):
        assert len(RasterSampler(raster).sample(center, 5.0)) == 0

    def test_read_only(self, raster):
        before = raster.copy()
        pixels = RasterSampler(raster).sample(Point(10.0, 10.0), 4.0)
        pixels[:] = 255
        np.testing.assert_array_equal(raster, before)
