"""
Image data models for Pixel Transforms.

This module defines the raster image the transformation functions operate on.

Classes:
    RasterImage: A width x height grid of RGB colors addressed by (x, y)

Type Aliases:
    Color: A tuple of 3 integers representing RGB channel values (0-255)
"""

from typing import Sequence, Tuple

import numpy as np
from PIL import Image

from PX_Libs.constants import (
    CHANNEL_COUNT,
    CHANNEL_MAX,
    CHANNEL_MIN,
    COLOR_WHITE,
    PIL_RGB_MODE,
)

Color = Tuple[int, int, int]


def _clamp_channels(color: Sequence[float]) -> np.ndarray:
    values = np.asarray(color, dtype=np.float64)
    if values.shape != (CHANNEL_COUNT,):
        raise ValueError(f"Color must have {CHANNEL_COUNT} channels, got {tuple(color)}")
    return np.clip(np.rint(values), CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)


class RasterImage:
    """
    In-memory RGB raster image.

    Pixels live in a numpy ``uint8`` array of shape ``(height, width, 3)``.
    Coordinates are zero-based: ``x`` indexes the width and ``y`` the height.
    Stored channels are rounded to the nearest integer and clamped to
    [0, 255]; callers may hand in any numeric triple.

    Example:
        >>> img = RasterImage.create(2, 2, (255, 0, 0))
        >>> img.set_pixel(1, 0, (0, 0, 255))
        >>> img.get_pixel(1, 0)
        (0, 0, 255)
    """

    def __init__(self, width: int, height: int, fill: Sequence[float] = COLOR_WHITE) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Image dimensions must be >= 0, got {width}x{height}")
        self._pixels = np.empty((int(height), int(width), CHANNEL_COUNT), dtype=np.uint8)
        self._pixels[:, :] = _clamp_channels(fill)

    @classmethod
    def create(cls, width: int, height: int, fill: Sequence[float] = COLOR_WHITE) -> "RasterImage":
        """Create a width x height image with every pixel set to ``fill``."""
        return cls(width, height, fill)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "RasterImage":
        """
        Wrap a copy of an ``(height, width, 3)`` array.

        Raises:
            ValueError: If the array does not have three channels
        """
        array = np.asarray(pixels)
        if array.ndim != 3 or array.shape[2] != CHANNEL_COUNT:
            raise ValueError(f"Expected array of shape (height, width, 3), got {array.shape}")
        image = cls(0, 0)
        image._pixels = np.clip(np.rint(array), CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)
        return image

    @classmethod
    def from_pil(cls, pil_image: Image.Image) -> "RasterImage":
        """Build a RasterImage from a PIL Image, converting it to RGB first."""
        if pil_image.mode != PIL_RGB_MODE:
            pil_image = pil_image.convert(PIL_RGB_MODE)
        return cls.from_array(np.asarray(pil_image, dtype=np.uint8))

    def to_pil(self) -> Image.Image:
        """Return an RGB PIL Image holding a copy of the pixels."""
        return Image.fromarray(np.ascontiguousarray(self._pixels))

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def _check_bounds(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) out of bounds for {self.width}x{self.height} image"
            )

    def get_pixel(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return int(r), int(g), int(b)

    def set_pixel(self, x: int, y: int, color: Sequence[float]) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = _clamp_channels(color)

    def copy(self) -> "RasterImage":
        """Return an independent copy; mutating it never affects this image."""
        return RasterImage.from_array(self._pixels.copy())

    def to_array(self) -> np.ndarray:
        """Return a copy of the pixel array, shape ``(height, width, 3)``."""
        return self._pixels.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RasterImage):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._pixels, other._pixels)

    def __repr__(self) -> str:
        return f"RasterImage(width={self.width}, height={self.height})"
