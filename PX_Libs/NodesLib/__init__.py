"""
Pixel Transforms Nodes Library.

This module exposes every effect as a node: a dictionary describing the
node type and its parameters, plus an executor that runs it.

Modules:
    effect_nodes: Node configs, executors and creation helpers
    effect_registry: Runs a node with the executor for its type
"""

from PX_Libs.NodesLib.effect_nodes import (
    DimCenterNodeConfig,
    MakeGrayishNodeConfig,
    InvertBorderNodeConfig,
    InvertWindowNodeConfig,
    execute_dim_center_node,
    execute_make_grayish_node,
    execute_invert_border_node,
    execute_invert_window_node,
    create_dim_center_node,
    create_make_grayish_node,
    create_invert_border_node,
    create_invert_window_node,
)
from PX_Libs.NodesLib.effect_registry import (
    EffectRegistry,
    get_default_registry,
    register_default_executors,
)

__all__ = [
    "DimCenterNodeConfig",
    "MakeGrayishNodeConfig",
    "InvertBorderNodeConfig",
    "InvertWindowNodeConfig",
    "execute_dim_center_node",
    "execute_make_grayish_node",
    "execute_invert_border_node",
    "execute_invert_window_node",
    "create_dim_center_node",
    "create_make_grayish_node",
    "create_invert_border_node",
    "create_invert_window_node",
    "EffectRegistry",
    "get_default_registry",
    "register_default_executors",
]
