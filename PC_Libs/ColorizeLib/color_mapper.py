"""
Writes replacement colors into a pixel buffer.

Both selection strategies end here: the flood fill hands over a region that
receives a single color, the global scan hands over a per-pixel assignment.
All four channels are overwritten, so the replacement's alpha replaces the
original pixel's alpha.

Functions:
    apply_region: Paint every coordinate in a region with one color
    apply_assignments: Paint each coordinate with its own color
"""

import logging
from typing import Dict, Iterable

from PC_Libs.ColorizeLib.color_models import PixelCoord, RgbaColor
from PC_Libs.ColorizeLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def apply_region(buffer: PixelBuffer, region: Iterable[PixelCoord], replacement: RgbaColor) -> int:
    """
    Overwrite every pixel of `region` with `replacement`, in place.

    Args:
        buffer: The buffer to modify
        region: In-bounds pixel coordinates
        replacement: (r, g, b, a) color to write

    Returns:
        Number of pixels written
    """
    color = tuple(replacement)
    written = 0
    for x, y in region:
        buffer.set_pixel(x, y, color)
        written += 1

    logger.debug(f"Wrote {color} into {written} pixels")
    return written


def apply_assignments(buffer: PixelBuffer, assignments: Dict[PixelCoord, RgbaColor]) -> int:
    """
    Overwrite each pixel in `assignments` with its mapped color, in place.

    Returns:
        Number of pixels written
    """
    for (x, y), color in assignments.items():
        buffer.set_pixel(x, y, color)
    return len(assignments)
