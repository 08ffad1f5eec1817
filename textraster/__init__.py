# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
TextRaster - render a line of text to an RGBA image.

HarfBuzz shapes the text, FreeType rasterizes each glyph, and the glyphs'
coverage is merged into a single straight-alpha canvas that an output
device (PNG, TIFF) encodes.

Usage:
    from textraster import RenderOptions, render_text

    with open("hello.png", "wb") as f:
        render_text("DejaVuSans.ttf", "Hello", f, RenderOptions(pixel_size=48))
"""

__version__ = "0.3.0"

from .core.error import (
    CompositeBoundsError,
    EncodeError,
    FontLoadError,
    GlyphRenderError,
    LayoutError,
    PipelineStateError,
    TextRasterError,
)
from .core.pipeline import RenderJob, TextRenderer, render_text
from .core.types import RenderOptions
