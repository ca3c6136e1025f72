"""WellQuant Measure — colour conversion, calibration and well scoring."""

from wellquant.measure.analyzer import AnalysisResult, AnalysisState, PlateAnalyzer, analyze
from wellquant.measure.calibration import Calibration, build_axis, calibrate
from wellquant.measure.color_space import lab_to_rgb, rgb_to_lab, to_tristimulus, to_uniform
from wellquant.measure.grid import derive_grid, iter_wells
from wellquant.measure.robust import robust_color
from wellquant.measure.scorer import count_from_intensity, score_well

__all__ = [
    "AnalysisResult",
    "AnalysisState",
    "Calibration",
    "PlateAnalyzer",
    "analyze",
    "build_axis",
    "calibrate",
    "count_from_intensity",
    "derive_grid",
    "iter_wells",
    "lab_to_rgb",
    "rgb_to_lab",
    "robust_color",
    "score_well",
    "to_tristimulus",
    "to_uniform",
]
