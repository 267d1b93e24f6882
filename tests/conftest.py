"""
Pytest configuration and shared fixtures for Pixel Transforms tests.

This module provides shared test fixtures used across
multiple test modules.
"""

import pytest

from PX_Libs.ImageLib.image_models import RasterImage


@pytest.fixture
def gradient_image():
    """
    Provide a 5x4 image where every pixel has a distinct color.

    Returns:
        RasterImage whose pixel (x, y) is (10 * x, 10 * y, 10 * x + y)
    """
    image = RasterImage.create(5, 4, (0, 0, 0))
    for y in range(image.height):
        for x in range(image.width):
            image.set_pixel(x, y, (10 * x, 10 * y, 10 * x + y))
    return image


@pytest.fixture
def primary_colors():
    """
    Provide the pure primary and secondary colors.

    Returns:
        List of (R, G, B) tuples with full channel spread
    """
    return [
        (255, 0, 0),    # Red
        (0, 255, 0),    # Green
        (0, 0, 255),    # Blue
        (255, 255, 0),  # Yellow
        (255, 0, 255),  # Magenta
        (0, 255, 255),  # Cyan
    ]
