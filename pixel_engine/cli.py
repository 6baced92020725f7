#!/usr/bin/env python3
"""
Command-line interface for the pixel engine
Runs flood fill, background removal and sprite sheet assembly on PNG files
"""

import argparse
import sys
from typing import Optional

from .core.pixel_engine_compositor import assemble
from .core.pixel_engine_exceptions import PixelEngineError, format_error_message
from .core.pixel_engine_fill import flood_fill
from .core.pixel_engine_io import load_buffer, save_buffer
from .core.pixel_engine_mask import remove_color
from .core.pixel_engine_models import HorizontalAlign, SheetLayout, VerticalAlign
from .core.pixel_engine_settings import SettingsManager
from .core.pixel_engine_utils import parse_hex_color
from .logging_config import get_logger, setup_logging_from_settings

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixel-engine", description="Pixel art editing tools"
    )
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("--settings", help="Settings JSON file")
    subparsers = parser.add_subparsers(dest="command")

    # Fill command
    fill_parser = subparsers.add_parser("fill", help="Flood fill a region")
    fill_parser.add_argument("image", help="Input image")
    fill_parser.add_argument("x", type=int, help="Seed X coordinate")
    fill_parser.add_argument("y", type=int, help="Seed Y coordinate")
    fill_parser.add_argument("color", help="Fill color as #RRGGBB or #RRGGBBAA")
    fill_parser.add_argument("--output", "-o", help="Output PNG (default: overwrite input)")

    # Mask command
    mask_parser = subparsers.add_parser("mask", help="Remove a background color")
    mask_parser.add_argument("image", help="Input image")
    mask_parser.add_argument("x", type=int, help="Seed X coordinate")
    mask_parser.add_argument("y", type=int, help="Seed Y coordinate")
    mask_parser.add_argument("--tolerance", "-t", type=int,
                             help="Per-channel RGB tolerance (default from settings)")
    mask_parser.add_argument("--output", "-o", help="Output PNG (default: overwrite input)")

    # Assemble command
    sheet_parser = subparsers.add_parser("assemble", help="Build a sprite sheet")
    sheet_parser.add_argument("images", nargs="+", help="Frames in sheet order")
    sheet_parser.add_argument("--output", "-o", required=True, help="Output PNG")
    sheet_parser.add_argument("--columns", "-c", type=int, help="Grid columns")
    sheet_parser.add_argument("--spacing", "-s", type=int, help="Pixels between cells")
    sheet_parser.add_argument("--h-align", choices=[a.value for a in HorizontalAlign],
                              help="Horizontal alignment in each cell")
    sheet_parser.add_argument("--v-align", choices=[a.value for a in VerticalAlign],
                              help="Vertical alignment in each cell")

    return parser


def _run_fill(args: argparse.Namespace, settings: SettingsManager) -> None:
    color = parse_hex_color(args.color)
    buffer = load_buffer(args.image)
    changed = flood_fill(buffer, args.x, args.y, color)
    output = save_buffer(buffer, args.output or args.image)
    logger.info(f"Filled {len(changed)} pixels, saved to {output}")


def _run_mask(args: argparse.Namespace, settings: SettingsManager) -> None:
    tolerance = args.tolerance
    if tolerance is None:
        tolerance = settings.get_int("tolerance")
    buffer = load_buffer(args.image)
    masked = remove_color(buffer, args.x, args.y, tolerance)
    output = save_buffer(buffer, args.output or args.image)
    logger.info(f"Masked {masked} pixels, saved to {output}")


def _run_assemble(args: argparse.Namespace, settings: SettingsManager) -> None:
    defaults = settings.sheet_layout()
    layout = SheetLayout(
        columns=args.columns if args.columns is not None else defaults.columns,
        spacing=args.spacing if args.spacing is not None else defaults.spacing,
        h_align=args.h_align or defaults.h_align,
        v_align=args.v_align or defaults.v_align,
    )
    frames = [load_buffer(path) for path in args.images]
    sheet = assemble(frames, layout)
    output = save_buffer(sheet, args.output)
    logger.info(
        f"Assembled {len(frames)} frames into {sheet.width}x{sheet.height} sheet, "
        f"saved to {output}"
    )


COMMANDS = {
    "fill": ("fill region", _run_fill),
    "mask": ("remove color", _run_mask),
    "assemble": ("assemble sprite sheet", _run_assemble),
}


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point, returns the process exit code"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 2

    settings = SettingsManager(args.settings)
    setup_logging_from_settings(settings, args.log_level, args.log_file)

    operation, handler = COMMANDS[args.command]
    try:
        handler(args, settings)
    except PixelEngineError as e:
        message = format_error_message(operation, e)
        logger.error(message)
        print(f"Error: {message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
