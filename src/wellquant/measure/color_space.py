"""sRGB <-> CIE L*a*b* conversion (D65 white, 2 degree observer).

The array functions operate on ``(..., 3)`` arrays so a whole sampling disc
converts in one call. ``to_uniform`` / ``to_tristimulus`` wrap them for the
single-colour models in :mod:`wellquant.core.models`.
"""

from __future__ import annotations

import numpy as np

from wellquant.core.constants import (
    LAB_EPSILON,
    LAB_INVERSE_THRESHOLD,
    LAB_KAPPA,
    REFERENCE_WHITE_D65,
    RGB_TO_XYZ,
    SRGB_GAMMA,
    SRGB_INVERSE_THRESHOLD,
    SRGB_LINEAR_THRESHOLD,
    XYZ_TO_RGB,
)
from wellquant.core.models import RGB, Lab

_F_BOUND = 1e3


def _srgb_to_linear(c: np.ndarray) -> np.ndarray:
    return np.where(
        c > SRGB_LINEAR_THRESHOLD,
        np.power((c + 0.055) / 1.055, SRGB_GAMMA),
        c / 12.92,
    )


def _linear_to_srgb(c: np.ndarray) -> np.ndarray:
    # Negative linear values only occur for out-of-gamut Lab; they take the
    # linear branch and are clipped afterwards.
    return np.where(
        c > SRGB_INVERSE_THRESHOLD,
        1.055 * np.power(np.maximum(c, SRGB_INVERSE_THRESHOLD), 1.0 / SRGB_GAMMA) - 0.055,
        12.92 * c,
    )


def _lab_f(t: np.ndarray) -> np.ndarray:
    return np.where(t > LAB_EPSILON, np.cbrt(t), LAB_KAPPA * t + 16.0 / 116.0)


def _lab_f_inv(t: np.ndarray) -> np.ndarray:
    # Bounded so cubing stays finite; anything past the bound is far out of gamut.
    t = np.clip(t, -_F_BOUND, _F_BOUND)
    return np.where(t > LAB_INVERSE_THRESHOLD, t**3, (t - 16.0 / 116.0) / LAB_KAPPA)


def rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert 8-bit sRGB values to L*a*b*.

    Args:
        rgb: Array of shape ``(..., 3)`` with channel values in [0, 255].

    Returns:
        Float64 array of the same shape holding (L*, a*, b*).
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    linear = _srgb_to_linear(rgb / 255.0)
    xyz = linear @ RGB_TO_XYZ.T
    f = _lab_f(xyz / REFERENCE_WHITE_D65)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack(
        [116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)],
        axis=-1,
    )


def lab_to_rgb(lab: np.ndarray) -> np.ndarray:
    """Convert L*a*b* values back to 8-bit sRGB.

    Total for finite input: out-of-gamut colours are clamped to [0, 255]
    and every channel is rounded half-up to an integer.

    Args:
        lab: Array of shape ``(..., 3)``.

    Returns:
        Int64 array of the same shape.
    """
    lab = np.asarray(lab, dtype=np.float64)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = lab[..., 1] / 500.0 + fy
    fz = fy - lab[..., 2] / 200.0
    xyz = _lab_f_inv(np.stack([fx, fy, fz], axis=-1)) * REFERENCE_WHITE_D65
    linear = xyz @ XYZ_TO_RGB.T
    srgb = _linear_to_srgb(linear)
    return np.clip(np.floor(srgb * 255.0 + 0.5), 0, 255).astype(np.int64)


def to_uniform(color: RGB) -> Lab:
    """Convert one :class:`RGB` colour to :class:`Lab`."""
    l, a, b = rgb_to_lab(np.array(color.as_tuple()))
    return Lab(float(l), float(a), float(b))


def to_tristimulus(color: Lab) -> RGB:
    """Convert one :class:`Lab` colour to a clamped :class:`RGB`."""
    r, g, b = lab_to_rgb(np.array(color.as_tuple()))
    return RGB(int(r), int(g), int(b))


def delta_e76(lab1: np.ndarray, lab2: np.ndarray) -> np.ndarray:
    """CIE76 colour difference (Euclidean distance in L*a*b*)."""
    diff = np.asarray(lab1, dtype=np.float64) - np.asarray(lab2, dtype=np.float64)
    return np.sqrt(np.sum(diff**2, axis=-1))
