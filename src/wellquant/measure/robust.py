"""Outlier-resistant colour estimate for a sampling disc."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from wellquant.core.models import RGB
from wellquant.measure.color_space import lab_to_rgb, rgb_to_lab

PixelInput = Union[np.ndarray, Sequence[RGB]]


def as_pixel_array(pixels: PixelInput) -> np.ndarray:
    """Normalize sampled pixels to an ``(N, 3)`` array."""
    if isinstance(pixels, np.ndarray):
        return pixels.reshape(-1, 3)
    return np.array([p.as_tuple() for p in pixels], dtype=np.int64).reshape(-1, 3)


def robust_color(pixels: PixelInput) -> RGB:
    """Representative colour of a pixel set, resistant to glare and shadow.

    Pixels are converted to L*a*b* and the median is taken independently per
    channel (mean of the two middle values for an even count). The median
    colour is converted back to sRGB.

    An empty input returns black. Black is also a legitimate reading, so
    callers must check the pixel count separately before trusting it.

    Args:
        pixels: ``(N, 3)`` array of 8-bit RGB values or a sequence of RGB.

    Returns:
        The robust colour estimate.
    """
    arr = as_pixel_array(pixels)
    if len(arr) == 0:
        return RGB(0, 0, 0)
    if len(arr) == 1:
        r, g, b = arr[0]
        return RGB(int(r), int(g), int(b))

    lab = rgb_to_lab(arr)
    median_lab = np.median(lab, axis=0)
    r, g, b = lab_to_rgb(median_lab)
    return RGB(int(r), int(g), int(b))
