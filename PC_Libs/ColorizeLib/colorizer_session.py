"""
Colorizer session: ownership of the image being edited.

A session holds exactly one authoritative PixelBuffer at a time together
with the state that belongs to it (the substitution table) and the state
that outlives it (recently used colors). Loading a new image replaces the
buffer wholesale and clears the substitution table.

Pick handling depends on the configured mode:

- flood_fill: the buffer is posterized into a scratch copy, a region is
  flood-filled on that copy, and the replacement color is written into the
  authoritative buffer at the region's coordinates.
- global: the picked pixel's color is recorded in the substitution table;
  the displayed view is a copy of the buffer with the whole table applied,
  and the authoritative buffer itself stays untouched.

Classes:
    ColorizerConfig: Tunable settings for a session
    ColorizerSession: Owns the buffer and handles picks
"""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from PC_Libs.constants import (
    DEFAULT_BLUR_RADIUS,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_POSTERIZE_LEVELS,
    DEFAULT_RECENT_CAPACITY,
    DEFAULT_TOLERANCE,
    MIN_POSTERIZE_LEVELS,
    MODE_FLOOD_FILL,
    MODE_GLOBAL,
    SUPPORTED_MODES,
)
from PC_Libs.pillow_compat import ImageFilter
from PC_Libs.ColorizeLib.color_mapper import apply_region
from PC_Libs.ColorizeLib.color_models import ColorInput, PixelCoord, RgbaColor, normalize_color
from PC_Libs.ColorizeLib.coordinate_mapper import map_display_point
from PC_Libs.ColorizeLib.pixel_buffer import PixelBuffer, decode_buffer, encode_buffer, load_buffer
from PC_Libs.ColorizeLib.posterizer import posterize
from PC_Libs.ColorizeLib.recent_colors import RecentColorCache
from PC_Libs.ColorizeLib.region_selector import ColorSubstitutionTable, connected_match, global_match

logger = logging.getLogger(__name__)


@dataclass
class ColorizerConfig:
    """Configuration for a colorizer session.

    Attributes:
        mode: Pick handling mode - 'flood_fill' or 'global'
        tolerance: Maximum RGB distance for a color match (front-ends use 0-255)
        posterize_levels: Levels per channel of the flood-fill scratch copy
        recent_capacity: Number of recently used colors to keep
        blur_radius: Default radius of the Gaussian blur action
    """
    mode: str = MODE_FLOOD_FILL
    tolerance: float = DEFAULT_TOLERANCE
    posterize_levels: int = DEFAULT_POSTERIZE_LEVELS
    recent_capacity: int = DEFAULT_RECENT_CAPACITY
    blur_radius: float = DEFAULT_BLUR_RADIUS

    def __post_init__(self):
        if self.mode not in SUPPORTED_MODES:
            raise ValueError(f"Unsupported mode: {self.mode}. Use one of {', '.join(SUPPORTED_MODES)}")
        if self.posterize_levels < MIN_POSTERIZE_LEVELS:
            raise ValueError(f"posterize_levels must be >= {MIN_POSTERIZE_LEVELS}, got {self.posterize_levels}")
        if self.recent_capacity < 1:
            raise ValueError(f"recent_capacity must be >= 1, got {self.recent_capacity}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColorizerConfig":
        """Create from dictionary, ignoring unknown keys."""
        normalized = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "tolerance" in normalized:
            normalized["tolerance"] = float(normalized["tolerance"])
        if "posterize_levels" in normalized:
            normalized["posterize_levels"] = int(normalized["posterize_levels"])
        if "recent_capacity" in normalized:
            normalized["recent_capacity"] = int(normalized["recent_capacity"])
        if "blur_radius" in normalized:
            normalized["blur_radius"] = float(normalized["blur_radius"])
        return cls(**normalized)


class ColorizerSession:
    """
    Owns the image being edited and handles picks on it.

    Example:
        >>> session = ColorizerSession()
        >>> session.load_path(Path("sprite.png"))
        >>> session.handle_pick((120.0, 40.0), (400.0, 400.0), (0, 128, 255, 255))
        >>> png_bytes = session.encode()
    """

    def __init__(
        self,
        config: Optional[ColorizerConfig] = None,
        recent_colors: Optional[RecentColorCache] = None,
    ):
        self.config = config or ColorizerConfig()
        self.substitutions = ColorSubstitutionTable()
        if recent_colors is None:
            recent_colors = RecentColorCache(self.config.recent_capacity)
        self.recent_colors = recent_colors
        self._buffer: Optional[PixelBuffer] = None
        # (table entries, tolerance) -> rendered view and its replaced-pixel count;
        # reset by every session operation that writes the buffer
        self._rendered: Optional[Tuple[Tuple[Any, float], PixelBuffer, int]] = None

    # ------------------------------------------------------------------
    # Buffer ownership
    # ------------------------------------------------------------------

    @property
    def has_image(self) -> bool:
        return self._buffer is not None

    @property
    def buffer(self) -> PixelBuffer:
        """The authoritative buffer."""
        return self._require_buffer()

    def replace_buffer(self, buffer: PixelBuffer) -> None:
        """Take ownership of `buffer`, dropping the previous one and its substitutions."""
        self._buffer = buffer
        self.substitutions.clear()
        self._rendered = None
        logger.info(f"Loaded {buffer.width}x{buffer.height} image")

    def load_bytes(self, data: bytes) -> PixelBuffer:
        """
        Decode `data` and make it the session's buffer.

        Raises:
            DecodeError: If the bytes are not an image; the session is unchanged
        """
        buffer = decode_buffer(data)
        self.replace_buffer(buffer)
        return buffer

    def load_path(self, path: Path) -> PixelBuffer:
        """
        Read an image file and make it the session's buffer.

        Raises:
            FileNotFoundError: If the file does not exist
            DecodeError: If the file is not an image; the session is unchanged
        """
        buffer = load_buffer(Path(path))
        self.replace_buffer(buffer)
        return buffer

    def _require_buffer(self) -> PixelBuffer:
        if self._buffer is None:
            raise RuntimeError("No image loaded")
        return self._buffer

    # ------------------------------------------------------------------
    # Picks
    # ------------------------------------------------------------------

    def resolve_pick(
        self,
        point: Tuple[float, float],
        display_size: Tuple[float, float],
    ) -> Optional[PixelCoord]:
        """Map a display-space pick onto a pixel of the buffer, or None."""
        buffer = self._require_buffer()
        return map_display_point(point, display_size, buffer.size)

    def matching_surface(self) -> PixelBuffer:
        """Posterized scratch copy of the buffer used for flood-fill decisions."""
        return posterize(self._require_buffer(), self.config.posterize_levels)

    def sample_color(self, pixel: PixelCoord, posterized: Optional[bool] = None) -> RgbaColor:
        """
        Color at `pixel`, as offered to the color chooser.

        Args:
            pixel: (x, y) pixel coordinate
            posterized: Sample the posterized copy instead of the buffer.
                Defaults to True in flood_fill mode and False in global mode.
        """
        if posterized is None:
            posterized = self.config.mode == MODE_FLOOD_FILL
        surface = self.matching_surface() if posterized else self._require_buffer()
        return surface.get_pixel(*pixel)

    def fill_region(
        self,
        pixel: PixelCoord,
        replacement: ColorInput,
        tolerance: Optional[float] = None,
    ) -> int:
        """
        Flood-fill the region around `pixel` with `replacement`.

        The region is computed on a posterized copy, measured against the
        seed's posterized color, and written into the authoritative buffer.

        Returns:
            Number of pixels recolored
        """
        buffer = self._require_buffer()
        color = normalize_color(replacement)
        if tolerance is None:
            tolerance = self.config.tolerance

        surface = posterize(buffer, self.config.posterize_levels)
        target = surface.get_pixel(*pixel)
        region = connected_match(surface, pixel, target, tolerance)

        self.recent_colors.record(color)
        written = apply_region(buffer, region, color)
        self._rendered = None
        logger.debug(f"Filled region at {pixel} (target {target}) with {color}: {written} pixels")
        return written

    def add_substitution(self, pixel: PixelCoord, replacement: ColorInput) -> int:
        """
        Record `color at pixel -> replacement` in the substitution table.

        The re-rendered view is kept, so a following render() or encode()
        does not sweep the buffer again.

        Returns:
            Number of pixels the whole table replaces in the re-rendered view
        """
        buffer = self._require_buffer()
        color = normalize_color(replacement)
        source = buffer.get_pixel(*pixel)

        self.substitutions.set(source, color)
        self.recent_colors.record(color)
        _, replaced = self._rendered_view()
        return replaced

    def _rendered_view(self) -> Tuple[PixelBuffer, int]:
        buffer = self._require_buffer()
        key = (tuple(self.substitutions.items()), self.config.tolerance)
        if self._rendered is None or self._rendered[0] != key:
            view = buffer.clone()
            replaced = global_match(view, self.substitutions, self.config.tolerance)
            self._rendered = (key, view, replaced)
        return self._rendered[1], self._rendered[2]

    def render(self) -> PixelBuffer:
        """Copy of the buffer with the whole substitution table applied."""
        view, _ = self._rendered_view()
        return view.clone()

    def flatten(self) -> PixelBuffer:
        """
        Bake the substitution table into the authoritative buffer.

        The table is cleared afterwards, so the buffer alone holds the result.
        """
        view, _ = self._rendered_view()
        self._buffer = view
        self.substitutions.clear()
        self._rendered = None
        logger.debug("Flattened substitutions into the buffer")
        return self._buffer

    def current_view(self) -> PixelBuffer:
        """What a front-end should display for the current mode."""
        if self.config.mode == MODE_GLOBAL:
            return self.render()
        return self._require_buffer()

    def handle_pick(
        self,
        point: Tuple[float, float],
        display_size: Tuple[float, float],
        replacement: ColorInput,
    ) -> int:
        """
        Resolve a display-space pick and apply `replacement` for the current mode.

        Picks that fall outside the buffer are ignored.

        Returns:
            Number of pixels affected, 0 for an ignored pick
        """
        pixel = self.resolve_pick(point, display_size)
        if pixel is None:
            logger.debug(f"Ignored pick at {point} on display {display_size}")
            return 0

        if self.config.mode == MODE_GLOBAL:
            return self.add_substitution(pixel, replacement)
        return self.fill_region(pixel, replacement)

    # ------------------------------------------------------------------
    # Whole-image actions
    # ------------------------------------------------------------------

    def apply_gaussian_blur(self, radius: Optional[float] = None) -> PixelBuffer:
        """
        Blur the authoritative buffer.

        Raises:
            ValueError: If radius <= 0 or > 100
        """
        buffer = self._require_buffer()
        if radius is None:
            radius = self.config.blur_radius
        if not (0 < radius <= 100):
            raise ValueError(f"radius must be 0 < r <= 100, got {radius}")

        self._buffer = PixelBuffer(buffer.image.filter(ImageFilter.GaussianBlur(radius=radius)))
        self._rendered = None
        logger.debug(f"Applied Gaussian blur (radius={radius})")
        return self._buffer

    def encode(self, image_format: str = DEFAULT_OUTPUT_FORMAT) -> bytes:
        """Encode the current view."""
        if self.config.mode == MODE_GLOBAL:
            view, _ = self._rendered_view()
            return encode_buffer(view, image_format)
        return encode_buffer(self._require_buffer(), image_format)
