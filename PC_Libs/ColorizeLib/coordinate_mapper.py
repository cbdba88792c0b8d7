"""
Display-space to buffer-space coordinate mapping.

Front-ends usually show an image scaled to fit a widget. A pick arrives in
the widget's coordinate space together with the size the image is drawn at;
this module turns it into a pixel index of the underlying buffer.
"""

import logging
import math
from typing import Optional, Tuple

from PC_Libs.ColorizeLib.color_models import PixelCoord

logger = logging.getLogger(__name__)


def map_display_point(
    point: Tuple[float, float],
    display_size: Tuple[float, float],
    buffer_size: Tuple[int, int],
) -> Optional[PixelCoord]:
    """
    Map a display-space point onto a buffer pixel.

    pixel = floor(point * buffer_extent / display_extent), per axis.

    Args:
        point: (x, y) pick position relative to the displayed image's origin
        display_size: (width, height) the image is displayed at
        buffer_size: (width, height) of the buffer in pixels

    Returns:
        (x, y) pixel coordinate, or None when the pick falls outside the
        buffer or the display size is degenerate
    """
    point_x, point_y = point
    display_width, display_height = display_size
    buffer_width, buffer_height = buffer_size

    if display_width <= 0 or display_height <= 0:
        logger.debug(f"Ignoring pick on degenerate display size {display_size}")
        return None

    if not (math.isfinite(point_x) and math.isfinite(point_y)):
        logger.debug(f"Ignoring non-finite pick {point}")
        return None

    pixel_x = math.floor(point_x * buffer_width / display_width)
    pixel_y = math.floor(point_y * buffer_height / display_height)

    if not (0 <= pixel_x < buffer_width and 0 <= pixel_y < buffer_height):
        logger.debug(f"Pick {point} maps to ({pixel_x}, {pixel_y}), outside {buffer_width}x{buffer_height}")
        return None

    return pixel_x, pixel_y
