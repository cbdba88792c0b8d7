"""
Pixel buffer model and image codec for PNG Colorizer.

A PixelBuffer owns one decoded raster image as a dense RGBA grid. Every
colorizer operation reads and writes pixels through it, and the codec
functions below are the only way bytes become buffers and back.

Classes:
    DecodeError: Raised when image bytes cannot be decoded
    PixelBuffer: Exclusively-owned RGBA pixel grid

Functions:
    decode_buffer: Decode encoded image bytes into a PixelBuffer
    load_buffer: Read and decode an image file from disk
    encode_buffer: Encode a PixelBuffer into image bytes
"""

import io
import logging
from pathlib import Path
from typing import Any, Iterator, Tuple

from PC_Libs.constants import BUFFER_MODE, DEFAULT_OUTPUT_FORMAT
from PC_Libs.pillow_compat import Image, UnidentifiedImageError
from PC_Libs.ColorizeLib.color_models import PixelCoord, RgbaColor

logger = logging.getLogger(__name__)


class DecodeError(IOError):
    """Raised when bytes are not a decodable raster image."""


class PixelBuffer:
    """
    RGBA pixel grid backed by a Pillow image.

    The buffer always holds 4 channels: images in any other mode are
    converted on construction, with full opacity where no alpha exists.
    Copies are only made through clone(), which never aliases the
    underlying pixel storage.

    Example:
        >>> buffer = PixelBuffer.new(4, 4, (255, 0, 0, 255))
        >>> buffer.get_pixel(0, 0)
        (255, 0, 0, 255)
    """

    def __init__(self, image: Any):
        if image.mode != BUFFER_MODE:
            image = image.convert(BUFFER_MODE)
        self._image = image
        self._pixels = image.load()

    @classmethod
    def new(cls, width: int, height: int, color: RgbaColor = (0, 0, 0, 255)) -> "PixelBuffer":
        """Create a buffer of the given size filled with one color."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer size must be positive, got {width}x{height}")
        return cls(Image.new(BUFFER_MODE, (width, height), tuple(color)))

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def image(self) -> Any:
        """The backing Pillow image. Callers must not mutate it."""
        return self._image

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> RgbaColor:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return self._pixels[x, y]

    def set_pixel(self, x: int, y: int, color: RgbaColor) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        self._pixels[x, y] = tuple(color)

    def coordinates(self) -> Iterator[PixelCoord]:
        """Yield every (x, y) coordinate in raster order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def clone(self) -> "PixelBuffer":
        """Return a deep copy that shares no pixel storage with this buffer."""
        return PixelBuffer(self._image.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.size == other.size and self._image.tobytes() == other._image.tobytes()

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"


def decode_buffer(data: bytes) -> PixelBuffer:
    """
    Decode encoded image bytes into a PixelBuffer.

    Args:
        data: Encoded image bytes (PNG, JPEG, BMP, GIF, ...)

    Returns:
        A new RGBA PixelBuffer

    Raises:
        DecodeError: If the bytes are empty, malformed or of an unsupported format
    """
    if not data:
        raise DecodeError("Cannot decode empty image data")

    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise DecodeError(f"Failed to decode image: {e}") from e

    logger.debug(f"Decoded {image.format} image {image.size[0]}x{image.size[1]} mode={image.mode}")
    return PixelBuffer(image)


def load_buffer(path: Path) -> PixelBuffer:
    """
    Read an image file from disk and decode it.

    Raises:
        FileNotFoundError: If the file does not exist
        DecodeError: If the file is not a decodable image
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Image file not found: {path}")
    return decode_buffer(path.read_bytes())


def encode_buffer(buffer: PixelBuffer, image_format: str = DEFAULT_OUTPUT_FORMAT) -> bytes:
    """
    Encode a PixelBuffer into image bytes.

    PNG (the default) round-trips all four channels losslessly. JPEG has no
    alpha channel, so the buffer is flattened to RGB first.

    Args:
        buffer: The buffer to encode
        image_format: Pillow format name (PNG, JPEG, BMP, ...)

    Returns:
        The encoded image bytes
    """
    save_format = image_format.upper()
    if save_format == "JPG":
        save_format = "JPEG"

    image = buffer.image
    if save_format == "JPEG":
        image = image.convert("RGB")

    output = io.BytesIO()
    image.save(output, format=save_format)
    return output.getvalue()
