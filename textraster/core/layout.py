# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Canvas size estimator.

Sizes the output before any glyph is rendered:

- width is the floored sum of the run's horizontal advances
- height is the font line height plus padding, grown by HEIGHT_MARGIN_FACTOR
  so that marks and scripts reaching past the nominal ascent/descent
  usually still fit
- the baseline sits one pixel above the font descender

The height is a heuristic, not a measured bound. Glyphs that still
overflow are clipped by the compositor.
"""

from __future__ import annotations

import logging

from . import types as tr
from .error import LayoutError
from .pen import from_fixed

logger = logging.getLogger(__name__)


def descender_magnitude(descender: int) -> int:
    """Distance in pixels from the bottom edge of the canvas to the baseline.

    Args:
        descender: Font descender in 26.6 units, normally negative.
    """
    # whole pixels, truncated toward zero
    return abs(descender) // tr.FIXED_ONE + 1


def estimate(run: tr.GlyphRun, metrics: tr.FontMetrics) -> tr.CanvasSize:
    """Compute the canvas size and baseline for a shaped run.

    Args:
        run: Shaped glyphs; only the x advances are read.
        metrics: Vertical metrics of the font used for shaping.

    Returns:
        CanvasSize. Width 0 is a valid result for an empty run.

    Raises:
        LayoutError: If the width is negative or the height is not positive.
    """
    width = from_fixed(run.total_advance())
    line_height = from_fixed(metrics.line_height)
    height = int((line_height + tr.HEIGHT_PADDING) * tr.HEIGHT_MARGIN_FACTOR)
    baseline = descender_magnitude(metrics.descender)

    if width < 0:
        raise LayoutError(f"negative canvas width {width} from {len(run)} glyph advances")
    if height <= 0:
        raise LayoutError(
            f"canvas height {height} is not positive (font line height {line_height}px)"
        )

    logger.debug("Bound: %d x %d, baseline %d px above bottom", width, height, baseline)
    return tr.CanvasSize(width=width, height=height, baseline=baseline)
