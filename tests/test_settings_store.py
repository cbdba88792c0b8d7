"""
Unit tests for settings_store module.

Tests settings persistence, payload conversion and fallback to defaults.
"""

import json
import tempfile
from pathlib import Path

from PC_Libs.constants import SCHEMA_VERSION
from PC_Libs.ColorizeLib.colorizer_session import ColorizerConfig
from PC_Libs.ColorizeLib.recent_colors import RecentColorCache
from PC_Libs.StoreLib.settings_store import (
    load_settings,
    payload_to_settings,
    save_settings,
    settings_to_payload,
)


class TestSettingsPayload:
    """Tests for payload conversion."""

    def test_payload_structure(self):
        recent = RecentColorCache(colors=[(255, 0, 0, 255), (0, 0, 255, 128)])

        payload = settings_to_payload(ColorizerConfig(tolerance=20), recent)

        assert payload["schema_version"] == SCHEMA_VERSION
        assert payload["config"]["tolerance"] == 20
        assert payload["recent_colors"] == ["#ff0000ff", "#0000ff80"]

    def test_non_dict_payload_gives_defaults(self):
        config, recent = payload_to_settings(["not", "a", "dict"])

        assert config == ColorizerConfig()
        assert len(recent) == 0

    def test_invalid_config_gives_default_config(self):
        config, _ = payload_to_settings({"config": {"mode": "spray"}})

        assert config == ColorizerConfig()

    def test_invalid_colors_are_skipped(self):
        _, recent = payload_to_settings({"recent_colors": ["#00ff00", "nope", 12]})

        assert recent.values() == ((0, 255, 0, 255),)

    def test_recent_capacity_from_config(self):
        payload = {
            "config": {"recent_capacity": 2},
            "recent_colors": ["#010101", "#020202", "#030303"],
        }

        config, recent = payload_to_settings(payload)

        assert config.recent_capacity == 2
        assert recent.values() == ((1, 1, 1, 255), (2, 2, 2, 255))


class TestSaveAndLoadSettings:
    """Tests for save_settings and load_settings."""

    def test_saves_and_loads(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "settings.json"
            config = ColorizerConfig(mode="global", tolerance=12.5, posterize_levels=6)
            recent = RecentColorCache(colors=[(1, 2, 3, 255), (4, 5, 6, 7)])

            saved = save_settings(path, config, recent)
            loaded_config, loaded_recent = load_settings(path)

            assert saved == path
            assert loaded_config == config
            assert loaded_recent.values() == recent.values()

    def test_written_file_is_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "settings.json"

            save_settings(path, ColorizerConfig(), RecentColorCache())

            data = json.loads(path.read_text())
            assert data["config"]["mode"] == "flood_fill"
            assert data["recent_colors"] == []

    def test_missing_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config, recent = load_settings(Path(tmpdir) / "missing.json")

            assert config == ColorizerConfig()
            assert len(recent) == 0

    def test_invalid_json_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "settings.json"
            path.write_text("not valid json")

            config, recent = load_settings(path)

            assert config == ColorizerConfig()
            assert len(recent) == 0

    def test_non_utf8_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "settings.json"
            path.write_bytes(b"\xff\xfe\x00garbage")

            config, recent = load_settings(path)

            assert config == ColorizerConfig()
            assert len(recent) == 0
