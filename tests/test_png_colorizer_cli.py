"""
Tests for the png_colorizer command line.
"""

import json

import pytest
from PIL import Image

import png_colorizer

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture
def striped_png(tmp_path):
    """4x4 red PNG whose column x=2 is blue."""
    image = Image.new("RGBA", (4, 4), RED)
    for y in range(4):
        image.putpixel((2, y), BLUE)
    path = tmp_path / "in.png"
    image.save(path)
    return path


class TestPngColorizerCli:
    """Tests for png_colorizer.main."""

    def test_flood_fill(self, striped_png, tmp_path):
        out = tmp_path / "out.png"

        code = png_colorizer.main([str(striped_png), str(out), "--seed", "0", "0", "--color", "#00ff00"])

        assert code == 0
        result = Image.open(out).convert("RGBA")
        assert result.getpixel((1, 3)) == (0, 255, 0, 255)
        assert result.getpixel((2, 0)) == BLUE
        assert result.getpixel((3, 0)) == RED

    def test_global_mode(self, striped_png, tmp_path):
        out = tmp_path / "out.png"

        code = png_colorizer.main([
            str(striped_png), str(out),
            "--seed", "0", "0", "--color", "0f0", "--mode", "global",
        ])

        assert code == 0
        result = Image.open(out).convert("RGBA")
        assert result.getpixel((3, 0)) == (0, 255, 0, 255)
        assert result.getpixel((2, 2)) == BLUE

    def test_display_coordinates(self, striped_png, tmp_path):
        out = tmp_path / "out.png"

        png_colorizer.main([
            str(striped_png), str(out),
            "--seed", "210", "5", "--display", "400", "400", "--color", "#00ff00",
        ])

        result = Image.open(out).convert("RGBA")
        assert result.getpixel((2, 3)) == (0, 255, 0, 255)
        assert result.getpixel((0, 0)) == RED

    def test_out_of_bounds_seed_writes_unchanged(self, striped_png, tmp_path):
        out = tmp_path / "out.png"

        code = png_colorizer.main([str(striped_png), str(out), "--seed", "9", "9", "--color", "#00ff00"])

        assert code == 0
        assert list(Image.open(out).convert("RGBA").getdata()) == list(Image.open(striped_png).getdata())

    def test_undecodable_input(self, tmp_path):
        bad = tmp_path / "bad.png"
        bad.write_bytes(b"not an image")

        code = png_colorizer.main([str(bad), str(tmp_path / "out.png"), "--seed", "0", "0", "--color", "#fff"])

        assert code == 1
        assert not (tmp_path / "out.png").exists()

    def test_missing_input(self, tmp_path):
        code = png_colorizer.main([
            str(tmp_path / "nope.png"), str(tmp_path / "out.png"),
            "--seed", "0", "0", "--color", "#fff",
        ])

        assert code == 1

    def test_bad_color_is_usage_error(self, striped_png, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            png_colorizer.main([str(striped_png), str(tmp_path / "o.png"), "--seed", "0", "0", "--color", "blue"])

        assert excinfo.value.code == 2

    def test_invalid_levels(self, striped_png, tmp_path):
        code = png_colorizer.main([
            str(striped_png), str(tmp_path / "o.png"),
            "--seed", "0", "0", "--color", "#fff", "--levels", "1",
        ])

        assert code == 2

    def test_settings_store_recent_colors(self, striped_png, tmp_path):
        settings = tmp_path / "settings.json"

        png_colorizer.main([
            str(striped_png), str(tmp_path / "o.png"),
            "--seed", "0", "0", "--color", "#00ff00", "--tolerance", "5", "--settings", str(settings),
        ])

        data = json.loads(settings.read_text())
        assert data["recent_colors"] == ["#00ff00ff"]
        assert data["config"]["tolerance"] == 5.0

    def test_tolerance_is_clamped(self, striped_png, tmp_path):
        settings = tmp_path / "settings.json"

        png_colorizer.main([
            str(striped_png), str(tmp_path / "o.png"),
            "--seed", "0", "0", "--color", "#00ff00", "--tolerance", "900", "--settings", str(settings),
        ])

        data = json.loads(settings.read_text())
        assert data["config"]["tolerance"] == 255.0

    def test_blur_runs_after_global_recolor(self, striped_png, tmp_path):
        out = tmp_path / "out.png"

        png_colorizer.main([
            str(striped_png), str(out),
            "--seed", "0", "0", "--color", "#00ff00", "--mode", "global", "--blur",
        ])

        red, green, blue, _ = Image.open(out).convert("RGBA").getpixel((1, 0))
        assert red == 0
        assert green > 0
        assert blue > 0

    def test_non_utf8_settings_fall_back_to_defaults(self, striped_png, tmp_path):
        settings = tmp_path / "settings.json"
        settings.write_bytes(b"\xff\xfe\x00garbage")

        code = png_colorizer.main([
            str(striped_png), str(tmp_path / "o.png"),
            "--seed", "0", "0", "--color", "#00ff00", "--settings", str(settings),
        ])

        assert code == 0
        assert json.loads(settings.read_text())["recent_colors"] == ["#00ff00ff"]
