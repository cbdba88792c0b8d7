"""
Color data models for PNG Colorizer.

This module defines the color types shared by every colorizer component and
the conversions between them.

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
    PackedColor: A 32-bit integer laid out as 0xAARRGGBB
    PixelCoord: An (x, y) pixel coordinate inside a buffer
    SelectionRegion: A set of distinct, in-bounds pixel coordinates

Functions:
    pack_argb: Convert an RgbaColor into a PackedColor
    unpack_argb: Convert a PackedColor into an RgbaColor
    normalize_color: Coerce a color given in either form into an RgbaColor
    parse_hex_color: Parse #RGB, #RRGGBB or #RRGGBBAA into an RgbaColor
    format_hex_color: Format an RgbaColor as #RRGGBBAA
"""

from typing import Set, Tuple, Union

RgbaColor = Tuple[int, int, int, int]
PackedColor = int
PixelCoord = Tuple[int, int]
SelectionRegion = Set[PixelCoord]
ColorInput = Union[RgbaColor, PackedColor]


def pack_argb(color: RgbaColor) -> PackedColor:
    """
    Pack an RGBA tuple into a 32-bit ARGB integer.

    Args:
        color: (r, g, b, a) tuple with channels in 0-255

    Returns:
        Integer laid out as 0xAARRGGBB
    """
    r, g, b, a = color
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def unpack_argb(value: PackedColor) -> RgbaColor:
    """
    Unpack a 32-bit ARGB integer into an RGBA tuple.

    Args:
        value: Integer laid out as 0xAARRGGBB

    Returns:
        (r, g, b, a) tuple
    """
    return (
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
        (value >> 24) & 0xFF,
    )


def normalize_color(color: ColorInput) -> RgbaColor:
    """Return `color` as an RgbaColor, unpacking packed integers."""
    if isinstance(color, int):
        return unpack_argb(color)

    channels = tuple(int(channel) for channel in color)
    if len(channels) == 3:
        return channels[0], channels[1], channels[2], 255
    if len(channels) != 4:
        raise ValueError(f"Expected 3 or 4 color channels, got {len(channels)}")
    return channels


def parse_hex_color(text: str) -> RgbaColor:
    """
    Parse a hex color string.

    Accepts #RGB, #RRGGBB and #RRGGBBAA, with or without the leading '#'.
    Colors without an alpha component are fully opaque.

    Raises:
        ValueError: If the string is not a hex color
    """
    h = text.strip()
    if h.startswith("#"):
        h = h[1:]
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) == 6:
        h += "ff"
    if len(h) != 8:
        raise ValueError(f"Bad hex color: {text}")
    try:
        r, g, b, a = (int(h[i:i + 2], 16) for i in (0, 2, 4, 6))
    except ValueError:
        raise ValueError(f"Bad hex color: {text}") from None
    return r, g, b, a


def format_hex_color(color: RgbaColor) -> str:
    """Format a color as #rrggbbaa."""
    r, g, b, a = color
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"
