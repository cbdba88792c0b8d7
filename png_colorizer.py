#!/usr/bin/env python3
"""
PNG Colorizer command line.

Recolors one region (flood_fill mode) or every similar color (global mode)
of an image, starting from a picked pixel.

Examples:
    # Flood-fill the shape under pixel (12, 30) with blue
    python png_colorizer.py sprite.png out.png --seed 12 30 --color "#0000ff"

    # Replace every color close to the one at (5, 5), looser matching
    python png_colorizer.py sprite.png out.png --seed 5 5 --color ff8800 --mode global --tolerance 90

    # Seed given in display coordinates of a 400x400 preview
    python png_colorizer.py sprite.png out.png --seed 210.5 97 --display 400 400 --color "#0f0"
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from PC_Libs.constants import MAX_TOLERANCE, MIN_TOLERANCE, MODE_GLOBAL, SUPPORTED_MODES
from PC_Libs.ColorizeLib.color_models import parse_hex_color
from PC_Libs.ColorizeLib.colorizer_session import ColorizerConfig, ColorizerSession
from PC_Libs.ColorizeLib.pixel_buffer import DecodeError
from PC_Libs.StoreLib.settings_store import load_settings, save_settings

logger = logging.getLogger("png_colorizer")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Replace a picked color region of an image with a new color")
    ap.add_argument("input", type=Path, help="Image to recolor")
    ap.add_argument("output", type=Path, help="Where to write the recolored PNG")
    ap.add_argument("--seed", nargs=2, type=float, required=True, metavar=("X", "Y"),
                    help="Picked point (pixel coordinates unless --display is given)")
    ap.add_argument("--color", required=True, type=parse_hex_color,
                    help="Replacement color as #RGB, #RRGGBB or #RRGGBBAA")
    ap.add_argument("--display", nargs=2, type=float, metavar=("W", "H"),
                    help="Size the image is displayed at; --seed is then a display-space point")
    ap.add_argument("--mode", choices=SUPPORTED_MODES, help="Selection mode")
    ap.add_argument("--tolerance", type=float,
                    help=f"Maximum RGB distance for a match ({MIN_TOLERANCE:g}-{MAX_TOLERANCE:g})")
    ap.add_argument("--levels", type=int, help="Posterize levels used for flood fill")
    ap.add_argument("--blur", action="store_true", help="Apply a Gaussian blur after recoloring")
    ap.add_argument("--settings", type=Path,
                    help="JSON settings file to read defaults from and store recent colors in")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def resolve_config(args: argparse.Namespace, base: ColorizerConfig) -> ColorizerConfig:
    """Overlay command line options onto the stored configuration."""
    data = base.to_dict()
    if args.mode is not None:
        data["mode"] = args.mode
    if args.tolerance is not None:
        tolerance = min(max(args.tolerance, MIN_TOLERANCE), MAX_TOLERANCE)
        if tolerance != args.tolerance:
            logger.warning(f"Tolerance {args.tolerance} clamped to {tolerance}")
        data["tolerance"] = tolerance
    if args.levels is not None:
        data["posterize_levels"] = args.levels
    return ColorizerConfig.from_dict(data)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.settings is not None:
        stored_config, recent_colors = load_settings(args.settings)
    else:
        stored_config, recent_colors = ColorizerConfig(), None

    try:
        config = resolve_config(args, stored_config)
    except ValueError as e:
        logger.error(str(e))
        return 2

    session = ColorizerSession(config, recent_colors)
    try:
        session.load_path(args.input)
    except (FileNotFoundError, DecodeError) as e:
        logger.error(str(e))
        return 1

    if args.display is not None:
        display_size = tuple(args.display)
    else:
        display_size = (float(session.buffer.width), float(session.buffer.height))

    changed = session.handle_pick(tuple(args.seed), display_size, args.color)
    if changed == 0 and session.resolve_pick(tuple(args.seed), display_size) is None:
        logger.warning(f"Seed {tuple(args.seed)} is outside the image; writing it unchanged")
    else:
        logger.info(f"Recolored {changed} pixels ({config.mode})")

    if args.blur:
        if config.mode == MODE_GLOBAL:
            session.flatten()
        session.apply_gaussian_blur()

    args.output.write_bytes(session.encode())
    logger.info(f"Wrote {args.output}")

    if args.settings is not None:
        save_settings(args.settings, config, session.recent_colors)

    return 0


if __name__ == "__main__":
    sys.exit(main())
