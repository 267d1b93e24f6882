"""
Effect Nodes for Pixel Transforms.

Wraps the effect operations for use as dictionary-described nodes that
an executor registry can run against a list of input images.

Example:
    >>> from PX_Libs.ImageLib import RasterImage
    >>> from PX_Libs.NodesLib.effect_nodes import create_dim_center_node
    >>> from PX_Libs.NodesLib.effect_registry import get_default_registry
    >>>
    >>> node = create_dim_center_node("dim-1", thickness=2)
    >>> registry = get_default_registry()
    >>> image = RasterImage.create(8, 8, (255, 255, 255))
    >>> result = registry.run(node, [image])
"""

from dataclasses import asdict, dataclass, fields
import logging
from typing import Any, Dict, List

from PX_Libs.constants import (
    DEFAULT_THICKNESS,
    DIM_FACTOR,
    FIELD_NODE_ID,
    FIELD_NODE_TYPE,
    GRAYISH_TOLERANCE,
    NODE_TYPE_DIM_CENTER,
    NODE_TYPE_INVERT_BORDER,
    NODE_TYPE_INVERT_WINDOW,
    NODE_TYPE_MAKE_GRAYISH,
)
from PX_Libs.ImageLib.image_models import RasterImage
from PX_Libs.ProcessingLib.effect_ops import dim_center, invert_color, make_grayish
from PX_Libs.ProcessingLib.region_ops import make_border, map_window

logger = logging.getLogger(__name__)


class _NodeConfig:
    """Shared dictionary conversion for node configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Create from a node dictionary, ignoring keys that are not config fields."""
        names = {field.name for field in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


@dataclass
class DimCenterNodeConfig(_NodeConfig):
    """Configuration for the Dim Center node.

    Attributes:
        thickness: Width of the border band left untouched
        factor: Channel multiplier applied to the interior
    """
    thickness: int = DEFAULT_THICKNESS
    factor: float = DIM_FACTOR


@dataclass
class MakeGrayishNodeConfig(_NodeConfig):
    tolerance: int = GRAYISH_TOLERANCE


@dataclass
class InvertBorderNodeConfig(_NodeConfig):
    thickness: int = DEFAULT_THICKNESS


@dataclass
class InvertWindowNodeConfig(_NodeConfig):
    """Inclusive window bounds for the Invert Window node."""
    x_min: int = 0
    x_max: int = 0
    y_min: int = 0
    y_max: int = 0


def _require_image(inputs: List[Any], node_name: str) -> RasterImage:
    if not inputs:
        raise ValueError(f"{node_name} node requires 1 input image")

    image = inputs[0]
    if not hasattr(image, "get_pixel") or not hasattr(image, "copy"):
        raise TypeError(f"{node_name} node error: expected RasterImage, got {type(image)}")
    return image


def execute_dim_center_node(node: Dict[str, Any], inputs: List[Any]) -> RasterImage:
    """
    Pipeline executor for Dim Center nodes.

    Args:
        node: Node dictionary with optional 'thickness' and 'factor'
        inputs: Should contain exactly one element: the input RasterImage

    Returns:
        Image with its interior dimmed

    Raises:
        ValueError: If no input image or a parameter cannot be parsed
        TypeError: If the input is not a RasterImage
    """
    image = _require_image(inputs, NODE_TYPE_DIM_CENTER)
    try:
        config = DimCenterNodeConfig.from_dict(node)
        thickness = int(config.thickness)
        factor = float(config.factor)
    except (ValueError, TypeError) as e:
        raise type(e)(f"Dim Center node error: {e}") from e

    logger.debug(f"Dimming center of {image!r} with thickness={thickness}, factor={factor}")
    return dim_center(image, thickness, factor)


def execute_make_grayish_node(node: Dict[str, Any], inputs: List[Any]) -> RasterImage:
    image = _require_image(inputs, NODE_TYPE_MAKE_GRAYISH)
    try:
        tolerance = int(MakeGrayishNodeConfig.from_dict(node).tolerance)
    except (ValueError, TypeError) as e:
        raise type(e)(f"Make Grayish node error: {e}") from e

    logger.debug(f"Making {image!r} grayish with tolerance={tolerance}")
    return make_grayish(image, tolerance)


def execute_invert_border_node(node: Dict[str, Any], inputs: List[Any]) -> RasterImage:
    image = _require_image(inputs, NODE_TYPE_INVERT_BORDER)
    try:
        thickness = int(InvertBorderNodeConfig.from_dict(node).thickness)
    except (ValueError, TypeError) as e:
        raise type(e)(f"Invert Border node error: {e}") from e

    logger.debug(f"Inverting border of {image!r} with thickness={thickness}")
    return make_border(image, thickness, invert_color)


def execute_invert_window_node(node: Dict[str, Any], inputs: List[Any]) -> RasterImage:
    """
    Pipeline executor for Invert Window nodes.

    Inverts every pixel inside the inclusive window given by the node's
    'x_min', 'x_max', 'y_min' and 'y_max' fields.
    """
    image = _require_image(inputs, NODE_TYPE_INVERT_WINDOW)
    try:
        config = InvertWindowNodeConfig.from_dict(node)
        x_interval = [int(config.x_min), int(config.x_max)]
        y_interval = [int(config.y_min), int(config.y_max)]
    except (ValueError, TypeError) as e:
        raise type(e)(f"Invert Window node error: {e}") from e

    logger.debug(f"Inverting window x={x_interval}, y={y_interval} of {image!r}")
    return map_window(image, x_interval, y_interval, invert_color)


def _make_node(node_id: str, node_type: str, config: _NodeConfig) -> Dict[str, Any]:
    node = {FIELD_NODE_ID: node_id, FIELD_NODE_TYPE: node_type}
    node.update(config.to_dict())
    return node


def create_dim_center_node(
    node_id: str,
    thickness: int = DEFAULT_THICKNESS,
    factor: float = DIM_FACTOR,
) -> Dict[str, Any]:
    """
    Create a Dim Center node for graph building.

    Args:
        node_id: Unique node identifier
        thickness: Border band width left untouched
        factor: Channel multiplier for the interior (0.8 = 20% darker)

    Returns:
        Node dictionary ready for execution
    """
    return _make_node(node_id, NODE_TYPE_DIM_CENTER, DimCenterNodeConfig(thickness, factor))


def create_make_grayish_node(node_id: str, tolerance: int = GRAYISH_TOLERANCE) -> Dict[str, Any]:
    return _make_node(node_id, NODE_TYPE_MAKE_GRAYISH, MakeGrayishNodeConfig(tolerance))


def create_invert_border_node(node_id: str, thickness: int = DEFAULT_THICKNESS) -> Dict[str, Any]:
    return _make_node(node_id, NODE_TYPE_INVERT_BORDER, InvertBorderNodeConfig(thickness))


def create_invert_window_node(
    node_id: str,
    x_interval: List[int],
    y_interval: List[int],
) -> Dict[str, Any]:
    config = InvertWindowNodeConfig(
        x_min=x_interval[0],
        x_max=x_interval[1],
        y_min=y_interval[0],
        y_max=y_interval[1],
    )
    return _make_node(node_id, NODE_TYPE_INVERT_WINDOW, config)
