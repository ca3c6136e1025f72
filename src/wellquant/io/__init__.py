"""WellQuant IO — image decoding, pixel sampling and result export."""

from wellquant.io.export import export_csv, results_to_frame, results_to_grid
from wellquant.io.image import load_image, to_rgb8
from wellquant.io.sampler import PixelSampler, RasterSampler

__all__ = [
    "PixelSampler",
    "RasterSampler",
    "export_csv",
    "load_image",
    "results_to_frame",
    "results_to_grid",
    "to_rgb8",
]
