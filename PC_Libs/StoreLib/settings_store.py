"""
Settings storage for PNG Colorizer.

Persists the session configuration and the recently used colors between
runs as a small JSON document:

    {
        "schema_version": 1,
        "config": {"mode": "flood_fill", "tolerance": 65.0, ...},
        "recent_colors": ["#ff0000ff", "#0000ffff"]
    }

Functions:
    settings_to_payload: Build the JSON payload for a config and recent colors
    payload_to_settings: Rebuild config and recent colors from a payload
    save_settings: Write settings to a file
    load_settings: Read settings from a file, falling back to defaults
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from PC_Libs.constants import FIELD_CONFIG, FIELD_RECENT_COLORS, FIELD_SCHEMA_VERSION, SCHEMA_VERSION
from PC_Libs.ColorizeLib.color_models import RgbaColor, format_hex_color, parse_hex_color
from PC_Libs.ColorizeLib.colorizer_session import ColorizerConfig
from PC_Libs.ColorizeLib.recent_colors import RecentColorCache

logger = logging.getLogger(__name__)


def settings_to_payload(config: ColorizerConfig, recent_colors: RecentColorCache) -> Dict[str, Any]:
    """Build the JSON-serializable settings payload."""
    return {
        FIELD_SCHEMA_VERSION: SCHEMA_VERSION,
        FIELD_CONFIG: config.to_dict(),
        FIELD_RECENT_COLORS: [format_hex_color(color) for color in recent_colors.values()],
    }


def _parse_recent_colors(values: Any) -> List[RgbaColor]:
    if not isinstance(values, list):
        return []

    colors: List[RgbaColor] = []
    for value in values:
        try:
            colors.append(parse_hex_color(str(value)))
        except ValueError:
            logger.warning(f"Skipping invalid recent color: {value!r}")
    return colors


def payload_to_settings(payload: Any) -> Tuple[ColorizerConfig, RecentColorCache]:
    """
    Rebuild settings from a loaded payload.

    Missing or malformed sections fall back to defaults.
    """
    if not isinstance(payload, dict):
        payload = {}

    config_data = payload.get(FIELD_CONFIG)
    config = ColorizerConfig()
    if isinstance(config_data, dict):
        try:
            config = ColorizerConfig.from_dict(config_data)
        except (TypeError, ValueError) as e:
            logger.warning(f"Ignoring invalid colorizer config: {e}")

    recent = RecentColorCache(
        config.recent_capacity,
        _parse_recent_colors(payload.get(FIELD_RECENT_COLORS)),
    )
    return config, recent


def save_settings(settings_path: Path, config: ColorizerConfig, recent_colors: RecentColorCache) -> Path:
    """
    Save settings to a JSON file, creating parent directories as needed.

    Args:
        settings_path: Destination file
        config: Session configuration
        recent_colors: Recently used colors

    Returns:
        The path written

    Raises:
        OSError: If the file cannot be written
    """
    settings_path = Path(settings_path)
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    payload = settings_to_payload(config, recent_colors)
    settings_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info(f"Saved settings to {settings_path}")
    return settings_path


def load_settings(settings_path: Path) -> Tuple[ColorizerConfig, RecentColorCache]:
    """
    Load settings from a JSON file.

    Args:
        settings_path: File to read

    Returns:
        (config, recent_colors); defaults when the file is missing or invalid
    """
    settings_path = Path(settings_path)
    try:
        payload = json.loads(settings_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.debug(f"No settings file at {settings_path}, using defaults")
        payload = {}
    except (ValueError, OSError) as e:
        logger.warning(f"Could not read settings from {settings_path}: {e}")
        payload = {}

    return payload_to_settings(payload)
