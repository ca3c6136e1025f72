"""WellQuant Core — data models, plate constants and exceptions."""

from wellquant.core.exceptions import CalibrationError, SamplingError, WellQuantError
from wellquant.core.models import (
    RGB,
    CalibrationAxis,
    GridGeometry,
    Lab,
    Point,
    WellResult,
    WellScore,
    well_id,
)

__all__ = [
    "Point",
    "RGB",
    "Lab",
    "CalibrationAxis",
    "GridGeometry",
    "WellScore",
    "WellResult",
    "well_id",
    "WellQuantError",
    "CalibrationError",
    "SamplingError",
]
