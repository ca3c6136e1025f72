"""Disc-shaped pixel sampling from a decoded RGB raster."""

from __future__ import annotations

import math
from typing import Protocol

import numpy as np

from wellquant.core.models import Point


class PixelSampler(Protocol):
    """Anything that can return the RGB pixels inside a disc."""

    def sample(self, center: Point, radius: float) -> np.ndarray:
        """Return an ``(N, 3)`` uint8 array of pixels inside the disc."""
        ...


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class RasterSampler:
    """Read-only disc sampler over an ``(H, W, 3)`` uint8 array.

    The radius is rounded to a whole number of pixels (minimum 1). A
    ``2r x 2r`` window is anchored at ``(round(x - r), round(y - r))`` and a
    window pixel at offset ``(px, py)`` is kept when its distance from
    ``(r, r)`` is at most ``r``. Pixels falling outside the image are dropped.

    Args:
        image: Decoded RGB raster owned by the caller. It must not be
            mutated while an analysis is running.
    """

    def __init__(self, image: np.ndarray) -> None:
        if image.ndim != 3 or image.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) RGB array, got shape {image.shape}")
        self._image = image

    @property
    def shape(self) -> tuple[int, int]:
        return self._image.shape[0], self._image.shape[1]

    def sample(self, center: Point, radius: float) -> np.ndarray:
        if not radius > 0:
            return np.empty((0, 3), dtype=np.uint8)

        r = max(1, _round_half_up(radius))
        x0 = _round_half_up(center.x - r)
        y0 = _round_half_up(center.y - r)
        size = 2 * r

        py, px = np.ogrid[0:size, 0:size]
        in_disc = np.hypot(px - r, py - r) <= r

        height, width = self.shape
        ys = y0 + np.arange(size)
        xs = x0 + np.arange(size)
        in_rows = (ys >= 0) & (ys < height)
        in_cols = (xs >= 0) & (xs < width)
        if not in_rows.any() or not in_cols.any():
            return np.empty((0, 3), dtype=np.uint8)

        mask = in_disc[in_rows][:, in_cols]
        crop = self._image[ys[in_rows][0] : ys[in_rows][-1] + 1,
                           xs[in_cols][0] : xs[in_cols][-1] + 1]
        return crop[mask]
