"""
Traversal primitives for Pixel Transforms.

Generic full- and partial-raster transforms parameterized by a pixel
function or a coordinate-aware function. Every primitive except
``map_line`` works on a copy and leaves its input untouched.

Functions:
    image_map: Apply a color function to every pixel
    map_line: Apply a color function to one row, in place
    image_map_coord: Compute every pixel from the original image and its coordinates
    image_map_if: Apply a color function where a coordinate predicate holds
"""

from typing import Callable

from PX_Libs.ImageLib.image_models import Color, RasterImage

ColorFunction = Callable[[Color], Color]
CoordFunction = Callable[[RasterImage, int, int], Color]
CoordPredicate = Callable[[RasterImage, int, int], bool]


def image_map(img: RasterImage, func: ColorFunction) -> RasterImage:
    """
    Apply ``func`` to every pixel of an image.

    Args:
        img: Image to read from (never mutated)
        func: Pure function mapping a color to a new color

    Returns:
        A new image of the same dimensions where each pixel is ``func(old)``
    """
    new_img = img.copy()

    for y in range(new_img.height):
        for x in range(new_img.width):
            new_img.set_pixel(x, y, func(new_img.get_pixel(x, y)))

    return new_img


def map_line(img: RasterImage, line_no: int, func: ColorFunction) -> None:
    """
    Apply ``func`` to every pixel of row ``line_no``, mutating ``img``.

    A row outside [0, height) is ignored.
    """
    if line_no < 0 or line_no >= img.height:
        return

    for x in range(img.width):
        img.set_pixel(x, line_no, func(img.get_pixel(x, line_no)))


def image_map_coord(img: RasterImage, func: CoordFunction) -> RasterImage:
    """
    Build a new image whose pixel (x, y) is ``func(img, x, y)``.

    ``func`` always receives the original image, so it may read
    neighbouring pixels without seeing values written earlier in the pass.

    Args:
        img: Image to read from (never mutated)
        func: Function of the original image and a coordinate

    Returns:
        A new image of the same dimensions
    """
    new_img = img.copy()

    for y in range(new_img.height):
        for x in range(new_img.width):
            new_img.set_pixel(x, y, func(img, x, y))

    return new_img


def image_map_if(img: RasterImage, cond: CoordPredicate, func: ColorFunction) -> RasterImage:
    """
    Apply ``func`` only to pixels where ``cond(img, x, y)`` is true.

    Pixels failing the predicate are copied unchanged. Both ``cond`` and
    ``func`` see the original image.
    """
    def transform(source: RasterImage, x: int, y: int) -> Color:
        pixel = source.get_pixel(x, y)
        return func(pixel) if cond(source, x, y) else pixel

    return image_map_coord(img, transform)
