"""Shared fixtures for CLI module tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import tifffile
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def plate_tiff(tmp_path: Path, plate_image: np.ndarray) -> Path:
    """The synthetic gradient plate written as an RGB TIFF."""
    path = tmp_path / "plate.tif"
    tifffile.imwrite(str(path), plate_image, photometric="rgb")
    return path


@pytest.fixture
def point_args() -> list[str]:
    """Landmark and reference options for the synthetic plate."""
    return [
        "--a1", "100,100", "--h6", "600,800",
        "--min-ref", "100,100", "--max-ref", "600,800",
    ]
