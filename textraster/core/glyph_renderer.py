# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
FreeType renderer backend.

Loads a glyph by index with default hinting, renders it in normal
(8-bit antialiased) mode and copies the coverage out of FreeType's glyph
slot before the next glyph overwrites it. The slot's bitmap rows may be
padded (pitch > width) or stored bottom-up (negative pitch); both are
normalized to a packed top-down buffer. 1-bit bitmaps from bitmap-only
fonts are expanded to 0/255 coverage. Color (BGRA) bitmaps are rejected.
"""

from __future__ import annotations

import logging

import freetype
import numpy as np

from . import types as tr
from .error import GlyphRenderError
from .font_loader import LoadedFont
from .glyph_cache import GlyphBitmapCache, GlyphCacheKey

logger = logging.getLogger(__name__)


def _packed_rows(bitmap) -> np.ndarray:
    """Bitmap buffer as a top-down (rows, abs(pitch)) array."""
    pitch = bitmap.pitch
    rows = np.array(bitmap.buffer, dtype=np.uint8).reshape(bitmap.rows, abs(pitch))
    if pitch < 0:
        rows = rows[::-1]
    return rows


def coverage_from_bitmap(bitmap) -> bytes:
    """Extract width*rows coverage bytes from a FreeType bitmap.

    Raises:
        ValueError: For pixel modes other than gray and mono.
    """
    width, height = bitmap.width, bitmap.rows
    if width == 0 or height == 0:
        return b""

    mode = bitmap.pixel_mode
    if mode == freetype.FT_PIXEL_MODE_GRAY:
        rows = _packed_rows(bitmap)[:, :width]
    elif mode == freetype.FT_PIXEL_MODE_MONO:
        # 8 pixels per byte, most significant bit first
        rows = np.unpackbits(_packed_rows(bitmap), axis=1)[:, :width] * np.uint8(255)
    else:
        raise ValueError(f"unsupported pixel mode {mode}")
    return np.ascontiguousarray(rows).tobytes()


class FreeTypeRenderer:
    """Renders glyph ids of a LoadedFont to coverage bitmaps, optionally cached."""

    render_mode = tr.RENDER_MODE_NORMAL

    def __init__(self, font: LoadedFont, cache: GlyphBitmapCache | None = None) -> None:
        self.font = font
        self.cache = cache

    def _cache_key(self, glyph_id: int) -> GlyphCacheKey:
        return GlyphCacheKey(self.font.font_id, glyph_id, self.font.pixel_size, self.render_mode)

    def render_glyph(self, glyph_id: int) -> tr.RenderedGlyphBitmap:
        """Render one glyph.

        Raises:
            GlyphRenderError: If FreeType cannot load or render the glyph,
                or produces a bitmap in an unsupported pixel mode.
        """
        key = None
        if self.cache is not None:
            key = self._cache_key(glyph_id)
            cached = self.cache.get(key)
            if cached is not None:
                return cached

        face = self.font.ft_face
        try:
            face.load_glyph(glyph_id, freetype.FT_LOAD_DEFAULT)
            slot = face.glyph
            slot.render(freetype.FT_RENDER_MODE_NORMAL)
        except freetype.FT_Exception as exc:
            raise GlyphRenderError(glyph_id, f"FreeType error: {exc}") from exc

        try:
            coverage = coverage_from_bitmap(slot.bitmap)
        except ValueError as exc:
            raise GlyphRenderError(glyph_id, str(exc)) from exc

        bitmap = tr.RenderedGlyphBitmap(
            width=slot.bitmap.width,
            rows=slot.bitmap.rows,
            coverage=coverage,
            bitmap_left=slot.bitmap_left,
            bitmap_top=slot.bitmap_top,
        )

        if key is not None:
            self.cache.put(key, bitmap)
        return bitmap
