# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for TextRaster.

Handles command-line argument definition and the small value parsers for
colors, OpenType feature settings and output device selection.
"""

from __future__ import annotations

import argparse
import re

from . import __version__
from .core import types as tr

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")
_FEATURE_RE = re.compile(r"^([+-]?)([A-Za-z0-9 ]{1,4})(?:=(\d+))?$")


def parse_color(spec: str) -> tuple[int, int, int]:
    """Parse ``RRGGBB`` / ``#RRGGBB`` or ``R,G,B`` into an RGB tuple.

    Raises:
        argparse.ArgumentTypeError: If the specification is malformed.
    """
    spec = spec.strip()
    m = _HEX_COLOR_RE.match(spec)
    if m:
        value = int(m.group(1), 16)
        return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    parts = spec.split(",")
    if len(parts) == 3:
        try:
            rgb = tuple(int(p) for p in parts)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid color: '{spec}'")
        if all(0 <= c <= 255 for c in rgb):
            return rgb
    raise argparse.ArgumentTypeError(
        f"Invalid color: '{spec}' (use RRGGBB, #RRGGBB or R,G,B with 0-255 components)"
    )


def parse_feature(spec: str) -> tuple[str, int]:
    """Parse an OpenType feature setting.

    Accepts ``kern``, ``+kern`` (on), ``-kern`` (off) and ``salt=2``.

    Raises:
        argparse.ArgumentTypeError: If the specification is malformed.
    """
    m = _FEATURE_RE.match(spec.strip())
    if not m:
        raise argparse.ArgumentTypeError(f"Invalid feature: '{spec}'")
    sign, tag, value = m.groups()
    if value is not None:
        if sign:
            raise argparse.ArgumentTypeError(f"Invalid feature: '{spec}'")
        return tag, int(value)
    return tag, 0 if sign == "-" else 1


def build_argument_parser(available_devices: list[str]) -> argparse.ArgumentParser:
    """
    Create and configure the TextRaster argument parser.

    Args:
        available_devices: List of available output device names.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="textraster",
        description="TextRaster - render a line of text to an RGBA image with HarfBuzz and FreeType",
        epilog="Without -o the image is written to standard output. "
               "Use '-' as TEXT to read UTF-8 text from standard input.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"TextRaster {__version__}"
    )
    parser.add_argument("font", help="Path to the font file (TTF, OTF, TTC)")
    parser.add_argument("text", help="Text to render, or '-' for standard input")
    parser.add_argument(
        "-o", "--output", dest="outputfile", help="Output image file (default: standard output)"
    )
    parser.add_argument(
        "-d",
        "--device",
        choices=available_devices,
        help=f'Output device ({", ".join(available_devices)}); '
             f'inferred from the -o extension, default {tr.DEFAULT_DEVICE}',
    )
    parser.add_argument(
        "-s", "--size", type=int, default=tr.DEFAULT_PIXEL_SIZE,
        help=f"Font size in pixels per em (default: {tr.DEFAULT_PIXEL_SIZE})"
    )
    parser.add_argument(
        "--face-index", type=int, default=0,
        help="Face index within a font collection (default: 0)"
    )
    parser.add_argument(
        "-c", "--color", type=parse_color, default=tr.DEFAULT_FOREGROUND,
        help="Foreground color as RRGGBB or R,G,B (default: 000000)"
    )
    parser.add_argument(
        "-f", "--feature", dest="features", type=parse_feature, action="append", default=[],
        metavar="FEATURE",
        help="OpenType feature, e.g. --feature=-kern, -f +liga, -f salt=2 (repeatable)"
    )
    parser.add_argument(
        "--direction", choices=["ltr", "rtl"],
        help="Text direction (default: guessed from the text)"
    )
    parser.add_argument(
        "--script", help="ISO 15924 script tag, e.g. Arab (default: guessed)"
    )
    parser.add_argument(
        "--language", help="BCP 47 language tag, e.g. fa (default: guessed)"
    )
    parser.add_argument(
        "--strict-bounds", action="store_true",
        help="Fail instead of silently clipping glyph pixels that fall outside the canvas"
    )
    parser.add_argument(
        "--no-glyph-cache", action="store_true",
        help="Disable glyph caching (useful for debugging font rendering)"
    )
    parser.add_argument(
        "--cache-stats", action="store_true",
        help="Print glyph cache statistics after rendering"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log font and shaping diagnostics to stderr (-vv for per-glyph detail)"
    )

    return parser
