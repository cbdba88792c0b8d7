"""
Bounded list of recently chosen replacement colors.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from PC_Libs.constants import DEFAULT_RECENT_CAPACITY
from PC_Libs.ColorizeLib.color_models import RgbaColor


class RecentColorCache:
    """
    Most-recent-first list of replacement colors without duplicates.

    Recording a color that is already present leaves the cache unchanged;
    it is not moved back to the front.
    """

    def __init__(self, capacity: int = DEFAULT_RECENT_CAPACITY, colors: Optional[Iterable[RgbaColor]] = None):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = int(capacity)
        self._colors: List[RgbaColor] = []
        # Seed oldest first so the given order is kept front-to-back
        for color in reversed(list(colors or [])):
            self.record(color)

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, color: RgbaColor) -> bool:
        """
        Record a chosen color.

        Returns:
            True if the color was inserted, False if it was already present
        """
        color = tuple(color)
        if color in self._colors:
            return False

        self._colors.insert(0, color)
        del self._colors[self._capacity:]
        return True

    def values(self) -> Tuple[RgbaColor, ...]:
        """Colors front (most recent) to back."""
        return tuple(self._colors)

    def clear(self) -> None:
        self._colors.clear()

    def __contains__(self, color: object) -> bool:
        return color in self._colors

    def __iter__(self) -> Iterator[RgbaColor]:
        return iter(self.values())

    def __len__(self) -> int:
        return len(self._colors)
