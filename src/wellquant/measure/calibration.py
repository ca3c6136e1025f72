"""Calibration axis from the zero- and full-density reference wells."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wellquant.core.exceptions import CalibrationError
from wellquant.core.models import RGB, CalibrationAxis, Lab, Point
from wellquant.measure.color_space import to_uniform
from wellquant.measure.robust import robust_color

if TYPE_CHECKING:
    from wellquant.io.sampler import PixelSampler

logger = logging.getLogger(__name__)


def build_axis(min_color: Lab, max_color: Lab) -> CalibrationAxis:
    """Build the axis running from ``min_color`` towards ``max_color``."""
    vector = max_color - min_color
    return CalibrationAxis(
        origin=min_color,
        vector=vector,
        magnitude_squared=vector.magnitude_squared(),
    )


@dataclass(frozen=True)
class Calibration:
    """Sampled reference colours and the axis built from them."""

    min_color: RGB
    max_color: RGB
    axis: CalibrationAxis


def _sample_reference(
    sampler: PixelSampler, point: Point, radius: float, reference: str,
) -> RGB:
    pixels = sampler.sample(point, radius)
    if len(pixels) == 0:
        raise CalibrationError(
            f"Could not sample the {reference} reference colour at "
            f"({point.x:g}, {point.y:g}). Ensure calibration points are inside wells.",
            reference=reference,
            point=point,
        )
    return robust_color(pixels)


def calibrate(
    sampler: PixelSampler,
    min_ref: Point,
    max_ref: Point,
    radius: float,
) -> Calibration:
    """Sample both reference wells and build the calibration axis.

    Args:
        sampler: Pixel source for the plate image.
        min_ref: Centre of the zero-density reference well.
        max_ref: Centre of the full-density reference well.
        radius: Sampling radius from the grid geometry.

    Raises:
        CalibrationError: If either reference samples no pixels.
    """
    min_color = _sample_reference(sampler, min_ref, radius, "min")
    max_color = _sample_reference(sampler, max_ref, radius, "max")

    axis = build_axis(to_uniform(min_color), to_uniform(max_color))
    logger.info(
        "Calibration axis %s -> %s, |v|^2=%.4f",
        min_color.to_hex(), max_color.to_hex(), axis.magnitude_squared,
    )
    if axis.is_degenerate:
        logger.warning(
            "Reference colours are indistinguishable; all wells will score 0",
        )
    return Calibration(min_color=min_color, max_color=max_color, axis=axis)
