"""Plate format, colour-science and scoring constants."""

from __future__ import annotations

import numpy as np

# Plate format: 8 rows (A-H) x 6 columns (1-6).
NUM_ROWS = 8
NUM_COLS = 6
ROW_LABELS = "ABCDEFGH"

# Fraction of the smaller well pitch used as the sampling radius. Keeps the
# disc clear of well walls and the glare that collects near them.
WELL_RADIUS_FACTOR = 0.30

# Calibration axes with |v|^2 at or below this are treated as degenerate.
AXIS_EPSILON = 1e-6

# cell_count = intensity ** COUNT_EXPONENT * COUNT_CEILING
COUNT_CEILING = 10000
COUNT_EXPONENT = 2

# sRGB companding
SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_INVERSE_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

# CIE L*a*b*, 2 degree observer, D65 illuminant
REFERENCE_WHITE_D65 = np.array([0.95047, 1.00000, 1.08883])
LAB_EPSILON = 0.008856
LAB_KAPPA = 7.787
LAB_INVERSE_THRESHOLD = 0.206897

RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_RGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])
