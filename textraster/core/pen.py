# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Fixed-point pen tracker.

The pen walks the baseline in 26.6 units. Glyph bearings (whole pixels
from FreeType) are promoted to 26.6 and combined with the shaper's
offsets, and only the final sum is floored to a pixel. Rounding therefore
never accumulates from one glyph to the next.
"""

from __future__ import annotations

from . import types as tr


def to_fixed(pixels: int) -> int:
    """Convert whole pixels to 26.6 units."""
    return pixels << tr.FIXED_SHIFT


def from_fixed(value: int) -> int:
    """Floor a 26.6 value to whole pixels."""
    return value >> tr.FIXED_SHIFT


def place(pen: tr.PenState, glyph: tr.PositionedGlyph,
          bitmap: tr.RenderedGlyphBitmap) -> tuple[int, int]:
    """Pixel position of the bitmap's top-left corner on the canvas.

    bitmap_top points up from the baseline while canvas rows grow
    downward, so the vertical terms are subtracted.

    Args:
        pen: Current pen; not modified.
        glyph: Shaped glyph supplying x_offset/y_offset.
        bitmap: Rendered bitmap supplying the bearing.

    Returns:
        (px, py) in canvas pixels, possibly negative or past the edges.
    """
    px = from_fixed(pen.x + to_fixed(bitmap.bitmap_left) + glyph.x_offset)
    py = from_fixed(pen.y - to_fixed(bitmap.bitmap_top) - glyph.y_offset)
    return px, py


def advance(pen: tr.PenState, glyph: tr.PositionedGlyph) -> None:
    """Move the pen past the glyph. Horizontal layout only: y_advance is ignored."""
    pen.x += glyph.x_advance


def start_pen(size: tr.CanvasSize) -> tr.PenState:
    """Pen at the left edge, on the baseline derived from the canvas size."""
    return tr.PenState(x=0, y=size.pen_origin_y)
