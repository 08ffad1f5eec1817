#!/usr/bin/env python3
# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
TextRaster - command line entry point.

Usage:
    textraster FONT TEXT > out.png
    textraster -o out.png -s 48 FONT "Hello"
    textraster -o out.tif --color c0ffc0 --feature=-kern FONT "AVATAR"
    echo "سلام" | textraster --direction rtl -o out.png FONT -

The image is encoded in memory first, so a failed run never leaves a
partial or empty output file behind.
"""

from __future__ import annotations

import io
import logging
import sys

from . import devices
from .cli_args import build_argument_parser
from .core import types as tr
from .core.error import TextRasterError
from .core.pipeline import TextRenderer

logger = logging.getLogger(__name__)

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def _configure_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS.get(verbosity, logging.DEBUG),
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_text(arg: str) -> str | bytes:
    """The TEXT argument, or UTF-8 bytes from stdin for '-' (one line, newline stripped)."""
    if arg != "-":
        return arg
    return sys.stdin.buffer.read().rstrip(b"\r\n")


def _select_device(args) -> str:
    if args.device:
        return args.device
    if args.outputfile:
        inferred = devices.device_for_path(args.outputfile)
        if inferred:
            return inferred
    return tr.DEFAULT_DEVICE


def options_from_args(args) -> tr.RenderOptions:
    """Build RenderOptions from parsed command-line arguments."""
    return tr.RenderOptions(
        pixel_size=args.size,
        face_index=args.face_index,
        foreground=args.color,
        strict_bounds=args.strict_bounds,
        glyph_cache=not args.no_glyph_cache,
        features=dict(args.features),
        direction=args.direction,
        script=args.script,
        language=args.language,
        device=_select_device(args),
    )


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the textraster command.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = build_argument_parser(devices.available_devices())
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    options = options_from_args(args)
    buffer = io.BytesIO()
    try:
        renderer = TextRenderer(args.font, options)
        job = renderer.render_to(_read_text(args.text), buffer)
    except TextRasterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.info("Rendered %d glyph(s) to a %dx%d %s image",
                len(job.run), job.canvas.width, job.canvas.height, options.device)
    stats = renderer.cache_stats() if args.cache_stats else None
    if stats is not None:
        print(f"Glyph cache: {stats['entries']} entries, {stats['hits']} hits, "
              f"{stats['misses']} misses ({stats['hit_rate']:.1%} hit rate), "
              f"{stats['memory_bytes']} bytes", file=sys.stderr)

    try:
        if args.outputfile:
            with open(args.outputfile, "wb") as f:
                f.write(buffer.getvalue())
        else:
            sys.stdout.buffer.write(buffer.getvalue())
            sys.stdout.buffer.flush()
    except OSError as exc:
        print(f"Error: cannot write output: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
