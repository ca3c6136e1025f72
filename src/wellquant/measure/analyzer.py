"""PlateAnalyzer — calibrate against two reference wells and score the plate."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np

from wellquant.core.constants import NUM_COLS, NUM_ROWS
from wellquant.core.models import CalibrationAxis, GridGeometry, Point, WellResult
from wellquant.io.sampler import PixelSampler, RasterSampler
from wellquant.measure.calibration import Calibration, calibrate
from wellquant.measure.color_space import to_uniform
from wellquant.measure.grid import derive_grid, iter_wells
from wellquant.measure.robust import robust_color
from wellquant.measure.scorer import score_well

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


class AnalysisState(Enum):
    """Lifecycle of a single PlateAnalyzer run."""

    IDLE = "idle"
    GEOMETRY_DERIVED = "geometry-derived"
    AXIS_BUILT = "axis-built"
    SCORING = "scoring"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass(frozen=True)
class AnalysisResult:
    """Output of a successful run.

    Attributes:
        wells: 48 results in row-major order (A1..A6, B1..B6, ..., H6).
        grid: Grid geometry derived from the landmarks.
        calibration: Reference colours and calibration axis.
        elapsed_seconds: Wall-clock time of the run.
    """

    wells: list[WellResult]
    grid: GridGeometry
    calibration: Calibration
    elapsed_seconds: float


class PlateAnalyzer:
    """Runs one calibrated analysis of a plate image.

    Each instance runs at most once. Any error moves it to
    ``AnalysisState.FAILED`` and is re-raised; no partial results are kept.

    Args:
        source: A PixelSampler, or an ``(H, W, 3)`` uint8 array that will be
            wrapped in a RasterSampler.
        max_workers: Thread pool size for per-well scoring. None or 1 scores
            sequentially.
    """

    def __init__(
        self,
        source: PixelSampler | np.ndarray,
        max_workers: int | None = None,
    ) -> None:
        if isinstance(source, np.ndarray):
            source = RasterSampler(source)
        self._sampler = source
        self._max_workers = max_workers
        self._state = AnalysisState.IDLE

    @property
    def state(self) -> AnalysisState:
        return self._state

    def _transition(self, state: AnalysisState) -> None:
        logger.debug("Analysis state %s -> %s", self._state.value, state.value)
        self._state = state

    def run(
        self,
        a1: Point,
        h6: Point,
        min_ref: Point,
        max_ref: Point,
        progress_callback: ProgressCallback | None = None,
    ) -> AnalysisResult:
        """Derive the grid, build the calibration axis and score every well.

        Args:
            a1: Centre of well A1.
            h6: Centre of well H6.
            min_ref: Centre of the zero-density reference well.
            max_ref: Centre of the full-density reference well.
            progress_callback: Optional callback(current, total, well_id).

        Returns:
            AnalysisResult with all 48 wells.

        Raises:
            CalibrationError: If the landmarks collapse the grid or a
                reference well samples no pixels.
            RuntimeError: If this analyzer has already been run.
        """
        if self._state is not AnalysisState.IDLE:
            raise RuntimeError(
                f"PlateAnalyzer already used (state={self._state.value}); "
                "create a new instance for each analysis"
            )

        start = time.monotonic()
        try:
            grid = derive_grid(a1, h6)
            self._transition(AnalysisState.GEOMETRY_DERIVED)

            calibration = calibrate(self._sampler, min_ref, max_ref, grid.radius)
            self._transition(AnalysisState.AXIS_BUILT)

            self._transition(AnalysisState.SCORING)
            wells = self._score_plate(grid, calibration.axis, progress_callback)
        except Exception:
            self._transition(AnalysisState.FAILED)
            raise

        self._transition(AnalysisState.COMPLETE)
        elapsed = time.monotonic() - start
        logger.info("Scored %d wells in %.2fs", len(wells), elapsed)
        return AnalysisResult(
            wells=wells, grid=grid, calibration=calibration, elapsed_seconds=elapsed,
        )

    def _score_plate(
        self,
        grid: GridGeometry,
        axis: CalibrationAxis,
        progress_callback: ProgressCallback | None,
    ) -> list[WellResult]:
        wells = list(iter_wells(grid))
        total = NUM_ROWS * NUM_COLS

        def score(item: tuple[str, int, int, Point]) -> WellResult:
            wid, row, col, center = item
            return self._score_well(wid, row, col, center, grid.radius, axis)

        results: list[WellResult] = []
        if self._max_workers and self._max_workers > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                # map() yields in submission order, so row-major order holds.
                for result in executor.map(score, wells):
                    results.append(result)
                    if progress_callback:
                        progress_callback(len(results), total, result.id)
        else:
            for item in wells:
                result = score(item)
                results.append(result)
                if progress_callback:
                    progress_callback(len(results), total, result.id)
        return results

    def _score_well(
        self,
        wid: str,
        row: int,
        col: int,
        center: Point,
        radius: float,
        axis: CalibrationAxis,
    ) -> WellResult:
        pixels = self._sampler.sample(center, radius)
        had_pixels = len(pixels) > 0
        avg_color = robust_color(pixels)
        if not had_pixels:
            logger.warning(
                "Well %s at (%.1f, %.1f) sampled no pixels; scoring as 0",
                wid, center.x, center.y,
            )
        score = score_well(to_uniform(avg_color), axis, had_pixels)
        return WellResult(
            id=wid,
            row=row,
            col=col,
            center=center,
            avg_color=avg_color,
            intensity=score.intensity,
            cell_count=score.cell_count,
            pixel_count=len(pixels),
        )


def analyze(
    image: PixelSampler | np.ndarray,
    a1: Point,
    h6: Point,
    min_ref: Point,
    max_ref: Point,
    max_workers: int | None = None,
    progress_callback: ProgressCallback | None = None,
) -> list[WellResult]:
    """Analyze a plate image and return the 48 well results in row-major order."""
    analyzer = PlateAnalyzer(image, max_workers=max_workers)
    return analyzer.run(a1, h6, min_ref, max_ref, progress_callback).wells
