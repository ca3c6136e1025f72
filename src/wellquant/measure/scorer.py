"""Projection of well colours onto the calibration axis."""

from __future__ import annotations

from wellquant.core.constants import COUNT_CEILING, COUNT_EXPONENT
from wellquant.core.models import CalibrationAxis, Lab, WellScore


def count_from_intensity(intensity: float) -> float:
    """Map a clamped intensity to an estimated cell count.

    Quadratic ease-in: flat near zero so colours close to the zero reference
    read as ~0 cells, reaching ``COUNT_CEILING`` at intensity 1.
    """
    return intensity**COUNT_EXPONENT * COUNT_CEILING


def score_well(color: Lab, axis: CalibrationAxis, had_pixels: bool = True) -> WellScore:
    """Score one well colour against the calibration axis.

    Args:
        color: Lab colour of the well.
        axis: Calibration axis.
        had_pixels: False when the well's sampling disc was empty.

    Returns:
        WellScore with intensity in [0, 1]. Both fields are 0 for an empty
        well or a degenerate axis.
    """
    if not had_pixels or axis.is_degenerate:
        return WellScore(intensity=0.0, cell_count=0.0)

    raw = (color - axis.origin).dot(axis.vector) / axis.magnitude_squared
    intensity = max(0.0, min(1.0, raw))
    return WellScore(intensity=intensity, cell_count=count_from_intensity(intensity))
