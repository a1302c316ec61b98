"""
Pytest configuration and shared fixtures for Pixel Picker tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest
from PIL import Image

from PP_Libs.PaintCoreLib.pixel_buffer import PixelBuffer


WHITE = (255, 255, 255)


@pytest.fixture
def sample_rgb_colors():
    """
    Provide a list of sample RGB color tuples for testing.

    Returns:
        List of (R, G, B) tuples with common test colors
    """
    return [
        (255, 0, 0),      # Red
        (0, 255, 0),      # Green
        (0, 0, 255),      # Blue
        (255, 255, 255),  # White
        (0, 0, 0),        # Black
        (128, 128, 128),  # Gray
    ]


@pytest.fixture
def white_buffer():
    """A 10 x 10 RGB buffer filled with white."""
    return PixelBuffer.blank(10, 10, color=WHITE)


@pytest.fixture
def rgba_buffer():
    """A 4 x 4 RGBA buffer, opaque white."""
    return PixelBuffer.blank(4, 4, channels=4, color=WHITE)


@pytest.fixture
def sample_png(tmp_path):
    """
    Write a small RGB PNG to a temporary directory.

    The image is 8 x 6 and white, with a red pixel at (1, 2).

    Returns:
        Path of the written PNG
    """
    path = tmp_path / "sample.png"
    img = Image.new("RGB", (8, 6), color="white")
    img.putpixel((1, 2), (255, 0, 0))
    img.save(path)
    return path
