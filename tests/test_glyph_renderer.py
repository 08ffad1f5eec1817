# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from types import SimpleNamespace

import freetype
import pytest

from textraster.core import types as tr
from textraster.core.error import GlyphRenderError
from textraster.core.glyph_cache import GlyphBitmapCache
from textraster.core.glyph_renderer import FreeTypeRenderer, coverage_from_bitmap


def _bitmap(width, rows, pitch, buffer, mode=freetype.FT_PIXEL_MODE_GRAY):
    return SimpleNamespace(width=width, rows=rows, pitch=pitch, buffer=list(buffer), pixel_mode=mode)


def test_gray_rows_drop_pitch_padding():
    bmp = _bitmap(3, 2, 4, [1, 2, 3, 0, 4, 5, 6, 0])
    assert coverage_from_bitmap(bmp) == bytes([1, 2, 3, 4, 5, 6])


def test_negative_pitch_is_bottom_up():
    bmp = _bitmap(2, 2, -2, [3, 4, 1, 2])
    assert coverage_from_bitmap(bmp) == bytes([1, 2, 3, 4])


def test_mono_expands_bits():
    bmp = _bitmap(10, 1, 2, [0b10100000, 0b01000000], mode=freetype.FT_PIXEL_MODE_MONO)
    assert coverage_from_bitmap(bmp) == bytes([255, 0, 255, 0, 0, 0, 0, 0, 0, 255])


def test_empty_bitmap():
    assert coverage_from_bitmap(_bitmap(0, 0, 0, [])) == b""


def test_color_bitmap_rejected():
    bmp = _bitmap(1, 1, 4, [0, 0, 0, 255], mode=7)  # FT_PIXEL_MODE_BGRA
    with pytest.raises(ValueError):
        coverage_from_bitmap(bmp)


class _FakeFace:
    """Minimal stand-in for freetype.Face: every glyph is a 2x1 bitmap of its id."""

    def __init__(self, missing=()):
        self.missing = set(missing)
        self.loads = 0
        self.glyph = None

    def load_glyph(self, index, flags):
        self.loads += 1
        if index in self.missing:
            raise freetype.FT_Exception(0x10)
        bitmap = _bitmap(2, 1, 2, [index, index])
        self.glyph = SimpleNamespace(bitmap=bitmap, bitmap_left=1, bitmap_top=7,
                                     render=lambda mode: None)


def _font(face):
    return SimpleNamespace(ft_face=face, font_id=("fake.ttf", 0), pixel_size=32)


def test_renders_bearing_and_coverage():
    renderer = FreeTypeRenderer(_font(_FakeFace()))
    bitmap = renderer.render_glyph(9)
    assert (bitmap.width, bitmap.rows) == (2, 1)
    assert (bitmap.bitmap_left, bitmap.bitmap_top) == (1, 7)
    assert bitmap.coverage == bytes([9, 9])


def test_freetype_failure_becomes_glyph_render_error():
    renderer = FreeTypeRenderer(_font(_FakeFace(missing=(4,))))
    with pytest.raises(GlyphRenderError) as excinfo:
        renderer.render_glyph(4)
    assert excinfo.value.glyph_id == 4


def test_cache_serves_repeats():
    face = _FakeFace()
    cache = GlyphBitmapCache()
    renderer = FreeTypeRenderer(_font(face), cache)
    first = renderer.render_glyph(3)
    second = renderer.render_glyph(3)
    assert first is second
    assert face.loads == 1
    assert cache.stats()['hits'] == 1
    assert renderer.render_mode == tr.RENDER_MODE_NORMAL


def test_failures_are_not_cached():
    face = _FakeFace(missing=(4,))
    cache = GlyphBitmapCache()
    renderer = FreeTypeRenderer(_font(face), cache)
    for _ in range(2):
        with pytest.raises(GlyphRenderError):
            renderer.render_glyph(4)
    assert face.loads == 2
    assert len(cache) == 0
