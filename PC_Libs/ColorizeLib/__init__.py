"""
ColorizeLib - Core recoloring functionality

This module provides the pixel buffer, color matching, region selection
and recoloring operations for PNG Colorizer.
"""

from PC_Libs.ColorizeLib.color_models import (
    PackedColor,
    PixelCoord,
    RgbaColor,
    SelectionRegion,
    format_hex_color,
    normalize_color,
    pack_argb,
    parse_hex_color,
    unpack_argb,
)
from PC_Libs.ColorizeLib.pixel_buffer import (
    DecodeError,
    PixelBuffer,
    decode_buffer,
    encode_buffer,
    load_buffer,
)
from PC_Libs.ColorizeLib.color_distance import color_distance, colors_match
from PC_Libs.ColorizeLib.posterizer import posterize, posterize_color
from PC_Libs.ColorizeLib.region_selector import (
    ColorSubstitutionTable,
    connected_match,
    global_match,
)
from PC_Libs.ColorizeLib.color_mapper import apply_assignments, apply_region
from PC_Libs.ColorizeLib.coordinate_mapper import map_display_point
from PC_Libs.ColorizeLib.recent_colors import RecentColorCache
from PC_Libs.ColorizeLib.colorizer_session import ColorizerConfig, ColorizerSession

__all__ = [
    "PackedColor",
    "PixelCoord",
    "RgbaColor",
    "SelectionRegion",
    "format_hex_color",
    "normalize_color",
    "pack_argb",
    "parse_hex_color",
    "unpack_argb",
    "DecodeError",
    "PixelBuffer",
    "decode_buffer",
    "encode_buffer",
    "load_buffer",
    "color_distance",
    "colors_match",
    "posterize",
    "posterize_color",
    "ColorSubstitutionTable",
    "connected_match",
    "global_match",
    "apply_assignments",
    "apply_region",
    "map_display_point",
    "RecentColorCache",
    "ColorizerConfig",
    "ColorizerSession",
]
