"""Pytest configuration and fixtures."""

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def zigzag_points():
    """Five points with alternating y, useful for tangent checks."""
    return [(0.0, 0.0), (10.0, 10.0), (20.0, 0.0), (30.0, 10.0), (40.0, 0.0)]


@pytest.fixture
def square_points():
    """Corners of a 10x10 square, counter-clockwise in y-up terms."""
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


@pytest.fixture
def marked_image():
    """40x20 RGB image, black with a red pixel in the top-left corner."""
    arr = np.zeros((20, 40, 3), dtype=np.uint8)
    arr[0, 0] = [255, 0, 0]
    return Image.fromarray(arr)


@pytest.fixture
def output_dir(tmp_path):
    """Directory for test output files."""
    out_dir = tmp_path / "output"
    out_dir.mkdir()
    return out_dir
