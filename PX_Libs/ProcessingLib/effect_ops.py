"""
Concrete effects built on the traversal and region primitives.

Functions:
    dim_color: Scale every channel of a color and truncate
    average_color: Gray color with the integer mean of the channels
    invert_color: Channel-wise 255 - value
    dim_center: Darken everything but a border band
    is_grayish: Check whether a color's channel spread is small
    make_grayish: Desaturate non-gray pixels to their channel mean
"""

import math

from PX_Libs.constants import CHANNEL_MAX, DIM_FACTOR, GRAYISH_TOLERANCE
from PX_Libs.ImageLib.image_models import Color, RasterImage
from PX_Libs.ProcessingLib.traversal_ops import image_map_if


def dim_color(color: Color, factor: float = DIM_FACTOR) -> Color:
    r, g, b = color
    return math.floor(r * factor), math.floor(g * factor), math.floor(b * factor)


def average_color(color: Color) -> Color:
    # Floored so the result is still an integer color
    average = sum(color) // 3
    return average, average, average


def invert_color(color: Color) -> Color:
    r, g, b = color
    return CHANNEL_MAX - r, CHANNEL_MAX - g, CHANNEL_MAX - b


def dim_center(img: RasterImage, thickness: int, factor: float = DIM_FACTOR) -> RasterImage:
    """
    Darken the interior of an image, leaving a border of ``thickness`` untouched.

    A pixel whose distance to the nearest edge pixel is below ``thickness``
    belongs to the border band and is copied as is. Every other pixel has
    each channel multiplied by ``factor`` and truncated.

    Args:
        img: Image to read from (never mutated)
        thickness: Width of the untouched border band
        factor: Channel multiplier for interior pixels (default 0.8)

    Returns:
        A new image with the same dimensions as ``img``
    """
    def in_interior(source: RasterImage, x: int, y: int) -> bool:
        dist_to_edge = min(x, source.width - 1 - x, y, source.height - 1 - y)
        return dist_to_edge >= thickness

    return image_map_if(img, in_interior, lambda pixel: dim_color(pixel, factor))


def is_grayish(color: Color, tolerance: int = GRAYISH_TOLERANCE) -> bool:
    return max(color) - min(color) <= tolerance


def make_grayish(img: RasterImage, tolerance: int = GRAYISH_TOLERANCE) -> RasterImage:
    """
    Replace every pixel that is not grayish with the mean of its channels.

    Pixels that already pass ``is_grayish`` are left unchanged, so the
    result is a fixed point: applying it twice gives the same image.
    """
    if img.width == 1 and img.height == 1:
        new_img = img.copy()
        pixel = new_img.get_pixel(0, 0)
        if not is_grayish(pixel, tolerance):
            new_img.set_pixel(0, 0, average_color(pixel))
        return new_img

    return image_map_if(
        img,
        lambda source, x, y: not is_grayish(source.get_pixel(x, y), tolerance),
        average_color,
    )
