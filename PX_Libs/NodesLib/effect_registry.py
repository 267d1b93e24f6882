"""
Effect registry.

Looks up the executor for an effect node by the node's own ``type``
field, so a node dictionary built by one of the ``create_*_node``
helpers can be run without naming its executor.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from PX_Libs.constants import (
    FIELD_NODE_ID,
    FIELD_NODE_TYPE,
    NODE_TYPE_DIM_CENTER,
    NODE_TYPE_INVERT_BORDER,
    NODE_TYPE_INVERT_WINDOW,
    NODE_TYPE_MAKE_GRAYISH,
)
from PX_Libs.ImageLib.image_models import RasterImage

logger = logging.getLogger(__name__)

ExecutorFunction = Callable[[Dict[str, Any], List[Any]], RasterImage]


class EffectRegistry:
    """
    Effect node types and their executors.

    Example:
        >>> registry = EffectRegistry()
        >>> registry.add("Dim Center", execute_dim_center_node)
        >>> result = registry.run(create_dim_center_node("dim-1"), [image])
    """

    def __init__(self):
        self._executors: Dict[str, ExecutorFunction] = {}

    def __contains__(self, node_type: str) -> bool:
        return node_type in self._executors

    def add(self, node_type: str, executor: ExecutorFunction) -> None:
        """
        Add the executor for an effect node type.

        Raises:
            ValueError: If executor is not callable
            RuntimeError: If node_type already has an executor
        """
        if not callable(executor):
            raise ValueError(f"Executor for '{node_type}' must be callable, got {type(executor)}")
        if node_type in self._executors:
            raise RuntimeError(f"Effect '{node_type}' already has an executor")

        self._executors[node_type] = executor
        logger.debug(f"Added effect executor: {node_type}")

    def node_types(self) -> List[str]:
        return sorted(self._executors)

    def run(self, node: Dict[str, Any], inputs: List[Any]) -> RasterImage:
        """
        Execute ``node`` with the executor matching its ``type`` field.

        Args:
            node: Node dictionary, as returned by a ``create_*_node`` helper
            inputs: Input images; effect nodes take exactly one

        Returns:
            The transformed image

        Raises:
            KeyError: If the node has no type or the type is unknown
        """
        node_type = node.get(FIELD_NODE_TYPE)
        executor = self._executors.get(node_type)
        if executor is None:
            raise KeyError(
                f"Unknown effect '{node_type}' for node {node.get(FIELD_NODE_ID)!r}. "
                f"Known effects: {', '.join(self.node_types())}"
            )

        logger.debug(f"Running {node_type} node {node.get(FIELD_NODE_ID)!r}")
        return executor(node, inputs)


_default_registry: Optional[EffectRegistry] = None


def get_default_registry() -> EffectRegistry:
    """Return the shared registry holding the built-in effects, building it once."""
    global _default_registry

    if _default_registry is None:
        _default_registry = EffectRegistry()
        register_default_executors(_default_registry)

    return _default_registry


def register_default_executors(registry: EffectRegistry) -> None:
    from PX_Libs.NodesLib.effect_nodes import (
        execute_dim_center_node,
        execute_invert_border_node,
        execute_invert_window_node,
        execute_make_grayish_node,
    )

    registry.add(NODE_TYPE_DIM_CENTER, execute_dim_center_node)
    registry.add(NODE_TYPE_MAKE_GRAYISH, execute_make_grayish_node)
    registry.add(NODE_TYPE_INVERT_BORDER, execute_invert_border_node)
    registry.add(NODE_TYPE_INVERT_WINDOW, execute_invert_window_node)

    logger.info("Registered built-in effect executors")
