"""
ProcessingLib - Higher-order pixel transformations

This module provides the traversal primitives, the region primitives
built on them, and the concrete effects built on both.
"""

from PX_Libs.ProcessingLib.traversal_ops import (
    image_map,
    map_line,
    image_map_coord,
    image_map_if,
)
from PX_Libs.ProcessingLib.region_ops import map_window, make_border
from PX_Libs.ProcessingLib.effect_ops import (
    dim_color,
    average_color,
    invert_color,
    dim_center,
    is_grayish,
    make_grayish,
)

__all__ = [
    "image_map",
    "map_line",
    "image_map_coord",
    "image_map_if",
    "map_window",
    "make_border",
    "dim_color",
    "average_color",
    "invert_color",
    "dim_center",
    "is_grayish",
    "make_grayish",
]
