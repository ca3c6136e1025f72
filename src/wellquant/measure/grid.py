"""Well grid geometry from the A1 and H6 landmarks."""

from __future__ import annotations

from typing import Iterator

from wellquant.core.constants import NUM_COLS, NUM_ROWS, WELL_RADIUS_FACTOR
from wellquant.core.exceptions import CalibrationError
from wellquant.core.models import GridGeometry, Point, well_id


def derive_grid(a1: Point, h6: Point) -> GridGeometry:
    """Derive the affine 8x6 well grid and the shared sampling radius.

    The plate is assumed axis-aligned: columns advance along x and rows
    along y. The radius is ``WELL_RADIUS_FACTOR`` times the smaller pitch.

    Args:
        a1: Centre of well A1 in image pixels.
        h6: Centre of well H6 in image pixels.

    Returns:
        GridGeometry for the plate.

    Raises:
        CalibrationError: If the landmarks give a zero sampling radius.
    """
    column_step = (h6.x - a1.x) / (NUM_COLS - 1)
    row_step = (h6.y - a1.y) / (NUM_ROWS - 1)
    radius = min(abs(column_step), abs(row_step)) * WELL_RADIUS_FACTOR

    if radius <= 0:
        raise CalibrationError(
            f"Landmarks A1 ({a1.x:g}, {a1.y:g}) and H6 ({h6.x:g}, {h6.y:g}) "
            "do not span the plate; place them on opposite corner wells",
            reference="grid",
            point=h6,
        )

    return GridGeometry(
        origin=a1, column_step=column_step, row_step=row_step, radius=radius,
    )


def iter_wells(grid: GridGeometry) -> Iterator[tuple[str, int, int, Point]]:
    """Yield ``(well_id, row, col, center)`` in row-major order."""
    for row in range(NUM_ROWS):
        for col in range(NUM_COLS):
            yield well_id(row, col), row, col, grid.center(row, col)
