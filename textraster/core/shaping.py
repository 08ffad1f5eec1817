# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
HarfBuzz shaper.

Turns a string into a GlyphRun. Because the HarfBuzz font is scaled to
``pixel_size * 64`` (see font_loader), advances and offsets are already
26.6 pixel units and are passed through untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import uharfbuzz as hb

from . import types as tr
from .error import LayoutError
from .font_loader import LoadedFont

logger = logging.getLogger(__name__)

# Vertical directions ("ttb", "btt") are not supported by the layout.
HORIZONTAL_DIRECTIONS = ("ltr", "rtl")


@dataclass(frozen=True)
class ShapingResult:
    run: tr.GlyphRun
    metrics: tr.FontMetrics


class HarfBuzzShaper:
    """Shapes text with a LoadedFont's HarfBuzz view."""

    def __init__(self, font: LoadedFont, features: dict[str, int] | None = None,
                 direction: str | None = None, script: str | None = None,
                 language: str | None = None) -> None:
        if direction is not None and direction not in HORIZONTAL_DIRECTIONS:
            raise LayoutError(f"unsupported text direction {direction!r}; "
                              f"expected one of {', '.join(HORIZONTAL_DIRECTIONS)}")
        self.font = font
        self.features = dict(features or {})
        self.direction = direction
        self.script = script
        self.language = language

    def _make_buffer(self, text: str | bytes) -> hb.Buffer:
        buf = hb.Buffer()
        if isinstance(text, bytes):
            # invalid sequences become U+FFFD inside HarfBuzz
            buf.add_utf8(text)
        else:
            buf.add_str(text)
        if self.direction is not None:
            buf.direction = self.direction
        if self.script is not None:
            buf.script = self.script
        if self.language is not None:
            buf.language = self.language
        buf.guess_segment_properties()
        return buf

    def shape(self, text: str | bytes) -> ShapingResult:
        """Shape text into positioned glyphs.

        Args:
            text: A str, or UTF-8 encoded bytes.

        Returns:
            ShapingResult with the run and the font's vertical metrics.
            Empty or unshapeable input yields an empty run.
        """
        buf = self._make_buffer(text)
        hb.shape(self.font.hb_font, buf, self.features)

        infos = buf.glyph_infos or []
        positions = buf.glyph_positions or []
        if len(infos) != len(positions):
            logger.warning("HarfBuzz returned %d glyph infos but %d positions",
                           len(infos), len(positions))

        glyphs = []
        for info, pos in zip(infos, positions):
            glyphs.append(tr.PositionedGlyph(
                glyph_id=info.codepoint,
                cluster=info.cluster,
                x_advance=pos.x_advance,
                y_advance=pos.y_advance,
                x_offset=pos.x_offset,
                y_offset=pos.y_offset,
            ))
            logger.debug("Codepoint %d cluster %d advance (%d, %d) offset (%d, %d)",
                         info.codepoint, info.cluster, pos.x_advance, pos.y_advance,
                         pos.x_offset, pos.y_offset)

        logger.debug("%d glyphs shaped (direction %s, script %s)",
                     len(glyphs), buf.direction, buf.script)
        return ShapingResult(run=tr.GlyphRun(glyphs), metrics=self.font.metrics)
