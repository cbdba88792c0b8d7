"""
Posterization of pixel buffers.

Posterizing collapses the soft gradients that antialiasing leaves along
shape edges into a few flat levels per channel. The flood fill runs on a
posterized scratch copy so that sub-tolerance drift along an edge cannot
carry a region across it. Output of this module is never written back into
an authoritative buffer.

Functions:
    posterize: Return a posterized copy of a buffer
    posterize_color: Posterize a single color with the same rule
    posterize_step: The real-valued quantization step for a level count
"""

import logging
import math

import numpy as np

from PC_Libs.constants import CHANNEL_MAX, MIN_POSTERIZE_LEVELS
from PC_Libs.pillow_compat import Image
from PC_Libs.ColorizeLib.color_models import RgbaColor
from PC_Libs.ColorizeLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def posterize_step(levels: int) -> float:
    """
    Quantization step for `levels` output values per channel.

    Raises:
        ValueError: If levels < 2
    """
    if levels < MIN_POSTERIZE_LEVELS:
        raise ValueError(f"levels must be >= {MIN_POSTERIZE_LEVELS}, got {levels}")
    return CHANNEL_MAX / (levels - 1)


def _quantize_channel(value: float, step: float) -> int:
    # Round half away from zero; channel values are never negative.
    return int(math.floor(value / step + 0.5)) * int(step)


def posterize_color(color: RgbaColor, levels: int) -> RgbaColor:
    """Posterize the R, G and B channels of one color, keeping alpha."""
    step = posterize_step(levels)
    r, g, b, a = color
    return (
        _quantize_channel(r, step),
        _quantize_channel(g, step),
        _quantize_channel(b, step),
        a,
    )


def posterize(buffer: PixelBuffer, levels: int) -> PixelBuffer:
    """
    Return a posterized copy of `buffer`.

    Each of R, G and B is mapped to round(channel / step) * int(step) with
    step = 255 / (levels - 1). Alpha is untouched and the input buffer is
    never modified.

    Args:
        buffer: Source buffer
        levels: Number of output levels per channel (>= 2)

    Returns:
        A new PixelBuffer holding the posterized pixels

    Raises:
        ValueError: If levels < 2
    """
    step = posterize_step(levels)

    data = np.array(buffer.image, dtype=np.float64)
    quantized = data.copy()
    quantized[..., :3] = np.floor(data[..., :3] / step + 0.5) * int(step)

    logger.debug(f"Posterized {buffer.width}x{buffer.height} buffer to {levels} levels (step={step:.3f})")
    return PixelBuffer(Image.fromarray(quantized.astype(np.uint8)))
