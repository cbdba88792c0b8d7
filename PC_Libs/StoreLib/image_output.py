"""
Saving encoded images to disk.

Functions:
    build_output_name: File name for an export taken at a given time
    save_encoded_image: Write encoded image bytes into a directory
"""

import logging
import time
from pathlib import Path
from typing import Optional

from PC_Libs.constants import DEFAULT_OUTPUT_EXTENSION, OUTPUT_FILE_PREFIX

logger = logging.getLogger(__name__)


def build_output_name(timestamp_ms: int) -> str:
    """
    Build the export file name for a millisecond timestamp.

    Returns:
        e.g. 'image_1700000000000.png'
    """
    return f"{OUTPUT_FILE_PREFIX}{int(timestamp_ms)}{DEFAULT_OUTPUT_EXTENSION}"


def save_encoded_image(data: bytes, output_dir: Path, timestamp_ms: Optional[int] = None) -> Path:
    """
    Save encoded image bytes into `output_dir`.

    Args:
        data: Encoded image bytes
        output_dir: Existing directory to write into
        timestamp_ms: Milliseconds since the epoch used in the file name
            (defaults to now)

    Returns:
        Path of the written file

    Raises:
        OSError: If the directory does not exist, is not a directory,
            or the file cannot be written
    """
    output_dir = Path(output_dir)
    if not output_dir.exists():
        raise OSError(f"Output directory does not exist: {output_dir}")

    if not output_dir.is_dir():
        raise OSError(f"Output path is not a directory: {output_dir}")

    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)

    save_path = output_dir / build_output_name(timestamp_ms)
    save_path.write_bytes(data)
    logger.info(f"Image saved to {save_path}")
    return save_path
