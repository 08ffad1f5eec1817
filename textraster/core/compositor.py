# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Glyph Compositor

Walks a shaped run, asks the renderer backend for each glyph's coverage
bitmap, places it with the pen tracker and merges it into the canvas.

Merge rule:
    alpha(x, y) = max(alpha(x, y), coverage(gx, gy))

Overlapping glyphs never darken each other; the more opaque contribution
wins. max() is commutative, so the result does not depend on the order in
which glyphs with fixed placements are merged.

Bounds policy:
    Pixels that land outside the canvas are clipped per axis. A bitmap
    hanging off the right edge does not wrap into the next row, and a
    glyph placed entirely outside contributes nothing. With strict bounds
    enabled, losing any non-zero coverage raises CompositeBoundsError.
"""

from __future__ import annotations

import logging
from typing import Protocol

import numpy as np

from . import pen as pen_tracker
from . import types as tr
from .canvas import Canvas
from .error import CompositeBoundsError, GlyphRenderError

logger = logging.getLogger(__name__)


class GlyphRenderer(Protocol):
    def render_glyph(self, glyph_id: int) -> tr.RenderedGlyphBitmap: ...


def _clip_span(origin: int, length: int, limit: int) -> tuple[int, int, int]:
    """Clip [origin, origin+length) to [0, limit).

    Returns:
        (dst_start, dst_end, src_start); dst_end <= dst_start means nothing is visible.
    """
    dst_start = max(origin, 0)
    dst_end = min(origin + length, limit)
    return dst_start, dst_end, dst_start - origin


def composite_at(canvas: Canvas, bitmap: tr.RenderedGlyphBitmap, px: int, py: int,
                 strict: bool = False) -> int:
    """Merge one coverage bitmap into the canvas alpha with its top-left at (px, py).

    Args:
        canvas: Destination; RGB channels are left untouched.
        bitmap: Source coverage.
        px, py: Destination pixel of the bitmap's top-left corner.
        strict: Raise instead of silently dropping non-zero coverage.

    Returns:
        Number of destination pixels inside the canvas that the bitmap covered.

    Raises:
        CompositeBoundsError: In strict mode, when visible coverage is clipped.
    """
    if bitmap.is_empty():
        return 0

    x0, x1, gx = _clip_span(px, bitmap.width, canvas.width)
    y0, y1, gy = _clip_span(py, bitmap.rows, canvas.height)
    visible = x1 > x0 and y1 > y0

    src = bitmap.array
    if strict:
        kept = int(src[gy:gy + (y1 - y0), gx:gx + (x1 - x0)].astype(np.int64).sum()) if visible else 0
        if kept != int(src.astype(np.int64).sum()):
            raise CompositeBoundsError(
                f"{bitmap.width}x{bitmap.rows} bitmap at ({px}, {py}) exceeds "
                f"{canvas.width}x{canvas.height} canvas"
            )

    if not visible:
        return 0

    dst = canvas.alpha[y0:y1, x0:x1]
    np.maximum(dst, src[gy:gy + (y1 - y0), gx:gx + (x1 - x0)], out=dst)
    return (x1 - x0) * (y1 - y0)


class GlyphCompositor:
    """Renders and merges every glyph of a run onto a canvas."""

    def __init__(self, renderer: GlyphRenderer, strict_bounds: bool = False) -> None:
        self.renderer = renderer
        self.strict_bounds = strict_bounds
        self.skipped: list[int] = []

    def composite(self, canvas: Canvas, run: tr.GlyphRun, size: tr.CanvasSize) -> Canvas:
        """Draw the run onto the canvas in order.

        A glyph the backend cannot render is skipped but its advance is
        still applied, so later glyphs keep their shaped positions.

        Returns:
            The same canvas, for chaining.
        """
        pen = pen_tracker.start_pen(size)
        self.skipped = []

        for glyph in run:
            try:
                bitmap = self.renderer.render_glyph(glyph.glyph_id)
            except GlyphRenderError as exc:
                logger.warning("Skipping glyph %d (cluster %d): %s",
                               glyph.glyph_id, glyph.cluster, exc.reason)
                self.skipped.append(glyph.glyph_id)
            else:
                px, py = pen_tracker.place(pen, glyph, bitmap)
                covered = composite_at(canvas, bitmap, px, py, strict=self.strict_bounds)
                logger.debug("glyph %d at (%d, %d) %dx%d, %d px on canvas",
                             glyph.glyph_id, px, py, bitmap.width, bitmap.rows, covered)
            pen_tracker.advance(pen, glyph)

        return canvas
