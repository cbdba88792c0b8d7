"""
Constants and configuration values for PNG Colorizer.

This module centralizes all constant values, magic numbers, and
default settings used throughout the colorizer.
"""

# Selection modes
MODE_FLOOD_FILL = "flood_fill"
MODE_GLOBAL = "global"
SUPPORTED_MODES = (MODE_FLOOD_FILL, MODE_GLOBAL)

# Color matching defaults
DEFAULT_TOLERANCE = 65.0
MIN_TOLERANCE = 0.0
MAX_TOLERANCE = 255.0
CHANNEL_MAX = 255

# Posterization applied to the flood-fill scratch copy
DEFAULT_POSTERIZE_LEVELS = 4
MIN_POSTERIZE_LEVELS = 2

# Recently used replacement colors
DEFAULT_RECENT_CAPACITY = 5

# Gaussian blur action
DEFAULT_BLUR_RADIUS = 1.0

# Pixel buffer mode
BUFFER_MODE = "RGBA"

# File naming
OUTPUT_FILE_PREFIX = "image_"
DEFAULT_OUTPUT_FORMAT = "PNG"
DEFAULT_OUTPUT_EXTENSION = ".png"

# Settings file
SCHEMA_VERSION = 1

# Settings field names
FIELD_SCHEMA_VERSION = "schema_version"
FIELD_CONFIG = "config"
FIELD_RECENT_COLORS = "recent_colors"

