"""
Color distance metric used by every colorizer selection.

Distances are Euclidean over the R, G and B channels in the 0-255 domain.
Alpha never takes part in the comparison.
"""

import math

from PC_Libs.ColorizeLib.color_models import RgbaColor


def color_distance(a: RgbaColor, b: RgbaColor) -> float:
    """
    Euclidean RGB distance between two colors, ignoring alpha.

    Args:
        a: First color (r, g, b, a)
        b: Second color (r, g, b, a)

    Returns:
        Distance in [0, ~441.67]
    """
    dr = a[0] - b[0]
    dg = a[1] - b[1]
    db = a[2] - b[2]
    return math.sqrt(dr * dr + dg * dg + db * db)


def colors_match(color: RgbaColor, target: RgbaColor, tolerance: float) -> bool:
    """True when `color` lies within `tolerance` of `target` (inclusive)."""
    return color_distance(color, target) <= tolerance
