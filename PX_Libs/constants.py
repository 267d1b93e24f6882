"""
Constants and configuration values for Pixel Transforms.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the library.
"""

# Channel bounds
CHANNEL_MIN = 0
CHANNEL_MAX = 255
CHANNEL_COUNT = 3

# Named colors
COLOR_BLACK = (0, 0, 0)
COLOR_WHITE = (255, 255, 255)
COLOR_RED = (255, 0, 0)
COLOR_GREEN = (0, 255, 0)
COLOR_BLUE = (0, 0, 255)
COLOR_YELLOW = (255, 255, 0)
COLOR_MAGENTA = (255, 0, 255)
COLOR_CYAN = (0, 255, 255)
COLOR_GRAY = (127, 127, 127)

# Effect constants
# Channel spread tolerance: one third of 255, rounded
GRAYISH_TOLERANCE = 85
DIM_FACTOR = 0.8

# Pillow conversion mode
PIL_RGB_MODE = "RGB"

# Effect node types
NODE_TYPE_DIM_CENTER = "Dim Center"
NODE_TYPE_MAKE_GRAYISH = "Make Grayish"
NODE_TYPE_INVERT_BORDER = "Invert Border"
NODE_TYPE_INVERT_WINDOW = "Invert Window"

# Default node parameters
DEFAULT_THICKNESS = 1

# Node field names
FIELD_NODE_ID = "id"
FIELD_NODE_TYPE = "type"
