"""Image decoding into an 8-bit RGB raster."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import tifffile
from skimage import io as skio
from skimage.util import img_as_ubyte

from wellquant.core.exceptions import SamplingError

logger = logging.getLogger(__name__)

_TIFF_SUFFIXES = {".tif", ".tiff"}


def to_rgb8(image: np.ndarray) -> np.ndarray:
    """Coerce a decoded image to an ``(H, W, 3)`` uint8 array.

    Grayscale is broadcast to three channels, alpha is dropped and other
    bit depths are rescaled to 8 bits.

    Raises:
        ValueError: If the array cannot be interpreted as an image.
    """
    if image.ndim == 2:
        image = np.stack([image] * 3, axis=-1)
    elif image.ndim == 3 and image.shape[2] in (3, 4):
        image = image[..., :3]
    elif image.ndim == 3 and image.shape[2] == 1:
        image = np.repeat(image, 3, axis=2)
    else:
        raise ValueError(f"Unsupported image shape {image.shape}")

    if image.dtype != np.uint8:
        image = img_as_ubyte(image)
    return np.ascontiguousarray(image)


def load_image(path: Path | str) -> np.ndarray:
    """Decode an image file into an ``(H, W, 3)`` uint8 RGB raster.

    TIFF files are read with tifffile; everything else goes through
    scikit-image.

    Args:
        path: Image file path.

    Returns:
        RGB raster.

    Raises:
        SamplingError: If the file is missing or cannot be decoded.
    """
    path = Path(path)
    if not path.is_file():
        raise SamplingError(str(path), "file not found")

    try:
        if path.suffix.lower() in _TIFF_SUFFIXES:
            data = tifffile.imread(str(path))
        else:
            data = skio.imread(str(path))
        image = to_rgb8(np.asarray(data))
    except (OSError, ValueError, TypeError) as exc:
        raise SamplingError(str(path), str(exc)) from exc

    logger.debug("Decoded %s: %dx%d", path.name, image.shape[1], image.shape[0])
    return image
