"""Exception classes for the WellQuant core module."""

from __future__ import annotations

from typing import Any


class WellQuantError(Exception):
    """Base exception for all analysis errors."""


class CalibrationError(WellQuantError):
    """Raised when calibration points cannot produce a usable analysis.

    ``reference`` names the offending input: ``"min"`` or ``"max"`` for a
    reference well that sampled no pixels, ``"grid"`` for landmarks that
    collapse the well grid.
    """

    def __init__(
        self,
        message: str | None = None,
        reference: str | None = None,
        point: Any = None,
    ) -> None:
        if message is None:
            if reference:
                message = f"Could not sample {reference} reference"
            else:
                message = "Calibration failed"
            if point is not None:
                message += f" at ({point.x:g}, {point.y:g})"
        super().__init__(message)
        self.reference = reference
        self.point = point


class SamplingError(WellQuantError):
    """Raised when an image cannot be decoded into a raster."""

    def __init__(self, path: str | None = None, reason: str | None = None) -> None:
        msg = f"Could not read image: {path}" if path else "Could not read image"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
        self.path = path
        self.reason = reason
