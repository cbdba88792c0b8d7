"""
Region selection strategies for PNG Colorizer.

Two interchangeable ways of deciding which pixels receive a new color:

- Global match: every pixel in the buffer is compared against an ordered
  substitution table; the first entry within tolerance wins.
- Connected match: a 4-connected flood fill from a seed pixel collects the
  contiguous region within tolerance of a target color.

Classes:
    ColorSubstitutionTable: Ordered source -> replacement color table

Functions:
    global_match: Apply a substitution table across a whole buffer
    connected_match: Flood-fill a region from a seed pixel
"""

import logging
from collections import deque
from typing import Dict, Iterator, List, Optional, Tuple

from PC_Libs.ColorizeLib.color_distance import colors_match
from PC_Libs.ColorizeLib.color_mapper import apply_assignments
from PC_Libs.ColorizeLib.color_models import PixelCoord, RgbaColor, SelectionRegion
from PC_Libs.ColorizeLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

# Left, right, up, down. No diagonals.
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class ColorSubstitutionTable:
    """
    Ordered table of (source, replacement) color pairs.

    Sources are unique. Setting an existing source updates its replacement
    without moving it, so the order of the table is always the order in
    which sources were first added.

    Matching is "first qualifying entry in table order", not "closest
    qualifying entry": with overlapping tolerances an earlier, farther
    source wins over a later, nearer one.

    Example:
        >>> table = ColorSubstitutionTable()
        >>> table.set((255, 0, 0, 255), (0, 0, 255, 255))
        >>> table.first_match((250, 5, 0, 255), tolerance=10)
        (0, 0, 255, 255)
    """

    def __init__(self):
        self._entries: List[Tuple[RgbaColor, RgbaColor]] = []

    def set(self, source: RgbaColor, replacement: RgbaColor) -> None:
        """Insert a substitution, or update it in place if `source` exists."""
        source = tuple(source)
        replacement = tuple(replacement)
        for index, (existing, _) in enumerate(self._entries):
            if existing == source:
                self._entries[index] = (source, replacement)
                logger.debug(f"Updated substitution {source} -> {replacement}")
                return

        self._entries.append((source, replacement))
        logger.debug(f"Added substitution {source} -> {replacement}")

    def get(self, source: RgbaColor) -> Optional[RgbaColor]:
        """Exact-key lookup; returns None when `source` is absent."""
        source = tuple(source)
        for existing, replacement in self._entries:
            if existing == source:
                return replacement
        return None

    def remove(self, source: RgbaColor) -> bool:
        """
        Remove the substitution for `source`.

        Returns:
            True if removed, False if `source` was not in the table
        """
        source = tuple(source)
        for index, (existing, _) in enumerate(self._entries):
            if existing == source:
                del self._entries[index]
                return True
        return False

    def first_match(self, color: RgbaColor, tolerance: float) -> Optional[RgbaColor]:
        """Replacement of the first entry whose source is within tolerance of `color`."""
        for source, replacement in self._entries:
            if colors_match(color, source, tolerance):
                return replacement
        return None

    def items(self) -> List[Tuple[RgbaColor, RgbaColor]]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, source: object) -> bool:
        return self.get(source) is not None

    def __iter__(self) -> Iterator[Tuple[RgbaColor, RgbaColor]]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ColorSubstitutionTable({self._entries!r})"


def global_match(buffer: PixelBuffer, table: ColorSubstitutionTable, tolerance: float) -> int:
    """
    Apply `table` to every pixel of `buffer`, in place.

    Pixels are visited in raster order. For each one the table is walked in
    insertion order and the first source within `tolerance` supplies the
    replacement. Pixels matching no entry are left untouched. Every pixel is
    classified before any pixel is written.

    Args:
        buffer: Buffer to modify
        table: Ordered substitutions
        tolerance: Maximum RGB distance for a match (inclusive)

    Returns:
        Number of pixels replaced
    """
    if not len(table):
        return 0

    width = buffer.width
    assignments: Dict[PixelCoord, RgbaColor] = {}
    # Identical colors always resolve to the same entry
    resolved: Dict[RgbaColor, Optional[RgbaColor]] = {}

    for index, color in enumerate(buffer.image.getdata()):
        if color not in resolved:
            resolved[color] = table.first_match(color, tolerance)
        replacement = resolved[color]
        if replacement is not None:
            assignments[(index % width, index // width)] = replacement

    replaced = apply_assignments(buffer, assignments)
    logger.debug(
        f"Global match replaced {replaced} of {width * buffer.height} pixels "
        f"using {len(table)} substitutions (tolerance={tolerance})"
    )
    return replaced


def connected_match(
    buffer: PixelBuffer,
    seed: PixelCoord,
    target_color: RgbaColor,
    tolerance: float,
) -> SelectionRegion:
    """
    Flood-fill the 4-connected region around `seed`.

    A neighbor joins the region when it is inside the buffer, not yet
    visited, and within `tolerance` of `target_color`. The seed itself is
    always part of the region. Each pixel enters the frontier at most once,
    so the fill terminates after at most width * height steps.

    Args:
        buffer: Buffer to test pixels against (usually a posterized copy)
        seed: (x, y) starting pixel
        target_color: Color neighbors are compared with
        tolerance: Maximum RGB distance for membership (inclusive)

    Returns:
        Set of (x, y) coordinates in the region

    Raises:
        IndexError: If the seed lies outside the buffer
    """
    seed_x, seed_y = seed
    if not buffer.in_bounds(seed_x, seed_y):
        raise IndexError(f"Seed ({seed_x}, {seed_y}) outside {buffer.width}x{buffer.height} buffer")

    start = (seed_x, seed_y)
    region: SelectionRegion = {start}
    frontier = deque([start])

    while frontier:
        x, y = frontier.popleft()
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if not buffer.in_bounds(nx, ny):
                continue
            neighbor = (nx, ny)
            if neighbor in region:
                continue
            if colors_match(buffer.get_pixel(nx, ny), target_color, tolerance):
                region.add(neighbor)
                frontier.append(neighbor)

    logger.debug(f"Flood fill from {start} selected {len(region)} pixels (tolerance={tolerance})")
    return region
