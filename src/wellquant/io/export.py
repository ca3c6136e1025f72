"""Tabular views of well results and CSV export via pandas."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
import pandas as pd

from wellquant.core.constants import NUM_COLS, NUM_ROWS, ROW_LABELS
from wellquant.core.models import WellResult

GRID_TITLES = {
    "intensity": "Percentage Cells (%)",
    "cell_count": "Estimated Cell Count (0-10,000)",
}


def results_to_frame(results: Sequence[WellResult]) -> pd.DataFrame:
    """One row per well, in the order given."""
    return pd.DataFrame(
        [
            {
                "well": w.id,
                "row": w.row,
                "col": w.col,
                "center_x": w.center.x,
                "center_y": w.center.y,
                "r": w.avg_color.r,
                "g": w.avg_color.g,
                "b": w.avg_color.b,
                "intensity": w.intensity,
                "cell_count": w.cell_count,
                "pixel_count": w.pixel_count,
            }
            for w in results
        ],
        columns=[
            "well", "row", "col", "center_x", "center_y",
            "r", "g", "b", "intensity", "cell_count", "pixel_count",
        ],
    )


def results_to_grid(results: Sequence[WellResult], value: str) -> pd.DataFrame:
    """Pivot one value onto the plate layout.

    Args:
        results: Well results from an analysis.
        value: ``"intensity"`` (reported as a percentage) or ``"cell_count"``.

    Returns:
        DataFrame indexed by row letter (A-H) with columns 1-6. Wells
        missing from ``results`` are 0.
    """
    if value not in GRID_TITLES:
        raise ValueError(f"Unknown grid value {value!r}, must be one of {sorted(GRID_TITLES)}")

    frame = results_to_frame(results)
    if value == "intensity":
        frame["value"] = frame["intensity"] * 100
    else:
        frame["value"] = frame["cell_count"]

    grid = (
        frame.pivot(index="row", columns="col", values="value")
        .reindex(index=range(NUM_ROWS), columns=range(NUM_COLS))
        .fillna(0.0)
        .astype(float)
    )
    grid.index = list(ROW_LABELS[:NUM_ROWS])
    grid.columns = list(range(1, NUM_COLS + 1))
    return grid


def export_csv(results: Sequence[WellResult], path: Path) -> None:
    """Write the percentage grid and the cell-count grid to one CSV file.

    Each block starts with a title line followed by the column header row.
    Values are rounded half-up to whole numbers.
    """
    blocks = []
    for value, title in GRID_TITLES.items():
        grid = np.floor(results_to_grid(results, value) + 0.5).astype(int)
        blocks.append(title + "\n" + grid.to_csv(lineterminator="\n"))
    Path(path).write_text("\n".join(blocks))
