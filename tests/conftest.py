"""Shared test fixtures for WellQuant."""

from __future__ import annotations

from typing import Callable

import numpy as np
import pytest

from wellquant.core.models import Point
from wellquant.measure.color_space import lab_to_rgb, rgb_to_lab

# Synthetic plate: A1 at (100, 100), H6 at (600, 800), 100 px pitch.
PLATE_WIDTH = 700
PLATE_HEIGHT = 900
A1 = Point(100.0, 100.0)
H6 = Point(600.0, 800.0)
WELL_PAINT_RADIUS = 40
BACKGROUND = (90, 90, 90)
MIN_RGB = (40, 70, 190)
MAX_RGB = (225, 110, 150)


def paint_disc(image: np.ndarray, cx: float, cy: float, radius: float, color) -> None:
    yy, xx = np.ogrid[: image.shape[0], : image.shape[1]]
    disc = (xx - cx) ** 2 + (yy - cy) ** 2 <= radius**2
    image[disc] = color


def gradient_colors(n: int = 48) -> np.ndarray:
    """``n`` RGB colours evenly spaced in Lab from MIN_RGB to MAX_RGB."""
    lab_min = rgb_to_lab(np.array(MIN_RGB))
    lab_max = rgb_to_lab(np.array(MAX_RGB))
    t = np.linspace(0.0, 1.0, n)[:, None]
    return lab_to_rgb(lab_min + t * (lab_max - lab_min)).astype(np.uint8)


@pytest.fixture
def make_plate() -> Callable[..., np.ndarray]:
    """Factory for synthetic plate rasters.

    ``make_plate(colors)`` paints well ``i`` (row-major) with ``colors[i]``
    on a grey background. Defaults to the Lab gradient from MIN_RGB (A1)
    to MAX_RGB (H6).
    """

    def _make(colors: np.ndarray | None = None) -> np.ndarray:
        if colors is None:
            colors = gradient_colors()
        image = np.empty((PLATE_HEIGHT, PLATE_WIDTH, 3), dtype=np.uint8)
        image[:] = BACKGROUND
        for i, color in enumerate(colors):
            row, col = divmod(i, 6)
            paint_disc(image, A1.x + col * 100, A1.y + row * 100, WELL_PAINT_RADIUS, color)
        return image

    return _make


@pytest.fixture
def plate_image(make_plate) -> np.ndarray:
    """Plate with a min-to-max gradient running from A1 to H6."""
    return make_plate()


@pytest.fixture
def landmarks() -> tuple[Point, Point]:
    """A1 and H6 centres of the synthetic plate."""
    return A1, H6


@pytest.fixture
def gradient() -> np.ndarray:
    """The 48 well colours painted by ``plate_image``."""
    return gradient_colors()
