"""Data models for the WellQuant core module."""

from __future__ import annotations

import math
from dataclasses import dataclass

from wellquant.core.constants import AXIS_EPSILON, NUM_COLS, NUM_ROWS, ROW_LABELS


@dataclass(frozen=True)
class Point:
    """A position in native image pixel coordinates."""

    x: float
    y: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y})")


def _clamp_channel(value: float) -> int:
    return max(0, min(255, math.floor(value + 0.5)))


@dataclass(frozen=True)
class RGB:
    """An 8-bit sRGB colour. Channels are rounded and clamped to [0, 255]."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _clamp_channel(self.r))
        object.__setattr__(self, "g", _clamp_channel(self.g))
        object.__setattr__(self, "b", _clamp_channel(self.b))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class Lab:
    """A CIE L*a*b* colour. Internal representation only."""

    l: float
    a: float
    b: float

    def __sub__(self, other: Lab) -> Lab:
        return Lab(self.l - other.l, self.a - other.a, self.b - other.b)

    def dot(self, other: Lab) -> float:
        return self.l * other.l + self.a * other.a + self.b * other.b

    def magnitude_squared(self) -> float:
        return self.dot(self)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.l, self.a, self.b)


@dataclass(frozen=True)
class CalibrationAxis:
    """Zero-to-full density axis in Lab space.

    Attributes:
        origin: Lab colour of the zero-density reference well.
        vector: Displacement from ``origin`` to the full-density reference.
        magnitude_squared: Squared length of ``vector``.
    """

    origin: Lab
    vector: Lab
    magnitude_squared: float

    @property
    def is_degenerate(self) -> bool:
        """True when the two references are too close to define a direction."""
        return self.magnitude_squared <= AXIS_EPSILON


def well_id(row: int, col: int) -> str:
    """Label for a well from 0-based indices, e.g. ``well_id(0, 0) == "A1"``."""
    if not (0 <= row < NUM_ROWS and 0 <= col < NUM_COLS):
        raise IndexError(f"Well ({row}, {col}) is outside the {NUM_ROWS}x{NUM_COLS} plate")
    return f"{ROW_LABELS[row]}{col + 1}"


@dataclass(frozen=True)
class GridGeometry:
    """Affine well grid derived from the A1 and H6 landmarks.

    Attributes:
        origin: Centre of well A1.
        column_step: Horizontal distance between adjacent columns (pixels).
        row_step: Vertical distance between adjacent rows (pixels).
        radius: Sampling disc radius shared by every well (pixels).
    """

    origin: Point
    column_step: float
    row_step: float
    radius: float

    def center(self, row: int, col: int) -> Point:
        """Centre of the well at 0-based ``(row, col)``."""
        return Point(
            self.origin.x + col * self.column_step,
            self.origin.y + row * self.row_step,
        )

    @property
    def centers(self) -> dict[str, Point]:
        """Well id -> centre, in row-major order."""
        return {
            well_id(row, col): self.center(row, col)
            for row in range(NUM_ROWS)
            for col in range(NUM_COLS)
        }


@dataclass(frozen=True)
class WellScore:
    """Projection of one well colour onto the calibration axis."""

    intensity: float
    cell_count: float


@dataclass(frozen=True)
class WellResult:
    """Final per-well output of an analysis run."""

    id: str
    row: int
    col: int
    center: Point
    avg_color: RGB
    intensity: float
    cell_count: float
    pixel_count: int = 0
