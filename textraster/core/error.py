# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
Exception hierarchy.

Fatal errors (LayoutError, CompositeBoundsError, EncodeError, FontLoadError)
abort the job before any output is written. GlyphRenderError is recovered
by the compositor, which skips the glyph and keeps going.
"""


class TextRasterError(Exception):
    """Base class for all errors raised by textraster."""


class FontLoadError(TextRasterError):
    """The font file could not be read, parsed or sized."""


class LayoutError(TextRasterError):
    """The canvas size estimator could not produce an allocatable canvas."""


class GlyphRenderError(TextRasterError):
    """A single glyph could not be rendered to a coverage bitmap."""

    def __init__(self, glyph_id: int, reason: str) -> None:
        super().__init__(f"glyph {glyph_id}: {reason}")
        self.glyph_id = glyph_id
        self.reason = reason


class CompositeBoundsError(TextRasterError):
    """A glyph write fell outside the canvas while strict bounds checking is on."""


class EncodeError(TextRasterError):
    """The image encoder failed; no output was written."""


class PipelineStateError(TextRasterError):
    """A pipeline step was invoked out of order."""
