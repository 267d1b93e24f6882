"""
Region primitives for Pixel Transforms.

Select pixels by rectangular window or by distance from the image edge
and apply a color function to the selection.
"""

from typing import Sequence

from PX_Libs.ImageLib.image_models import RasterImage
from PX_Libs.ProcessingLib.traversal_ops import ColorFunction, image_map_if


def map_window(
    img: RasterImage,
    x_interval: Sequence[int],
    y_interval: Sequence[int],
    func: ColorFunction,
) -> RasterImage:
    """
    Apply ``func`` to pixels inside an inclusive rectangular window.

    Args:
        img: Image to read from (never mutated)
        x_interval: ``[x_min, x_max]``, both ends inclusive
        y_interval: ``[y_min, y_max]``, both ends inclusive
        func: Color function applied inside the window

    Returns:
        A new image; pixels outside the window are unchanged
    """
    x_min, x_max = x_interval[0], x_interval[1]
    y_min, y_max = y_interval[0], y_interval[1]

    return image_map_if(
        img,
        lambda _img, x, y: x_min <= x <= x_max and y_min <= y <= y_max,
        func,
    )


def make_border(img: RasterImage, thickness: int, func: ColorFunction) -> RasterImage:
    """
    Apply ``func`` to every pixel within ``thickness`` of any edge.

    Interior pixels are copied unchanged. Source values are always read
    from ``img``, which is never mutated.
    """
    new_img = img.copy()

    for y in range(img.height):
        for x in range(img.width):
            if (
                x < thickness
                or y < thickness
                or x >= img.width - thickness
                or y >= img.height - thickness
            ):
                new_img.set_pixel(x, y, func(img.get_pixel(x, y)))

    return new_img
