"""
StoreLib - Settings persistence and image output for PNG Colorizer.
"""

from PC_Libs.StoreLib.settings_store import (
    load_settings,
    payload_to_settings,
    save_settings,
    settings_to_payload,
)
from PC_Libs.StoreLib.image_output import build_output_name, save_encoded_image

__all__ = [
    "load_settings",
    "payload_to_settings",
    "save_settings",
    "settings_to_payload",
    "build_output_name",
    "save_encoded_image",
]
