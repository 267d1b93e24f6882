"""
PX_Libs - Pixel Transforms Library Modules

This package contains the higher-order pixel transformation library,
organized into specialized sub-packages:

- ImageLib: The in-memory RGB raster image and color model
- ProcessingLib: Traversal primitives, region primitives and effects
- NodesLib: Effect nodes and the executor registry that runs them
"""

__version__ = "0.1.0"
