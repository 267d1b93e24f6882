"""
ImageLib - Raster image model

This module provides the RGB color type and the in-memory raster
image that every transformation reads from and writes to.
"""

from PX_Libs.ImageLib.image_models import Color, RasterImage

__all__ = [
    "Color",
    "RasterImage",
]
