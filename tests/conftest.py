# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared fixtures: in-memory shaper and renderer stand-ins."""

from __future__ import annotations

import glob
import os

import pytest

from textraster.core import types as tr
from textraster.core.error import GlyphRenderError
from textraster.core.shaping import ShapingResult


def solid_bitmap(width: int, rows: int, value: int = 255,
                 left: int = 0, top: int = 0) -> tr.RenderedGlyphBitmap:
    return tr.RenderedGlyphBitmap(width=width, rows=rows, coverage=bytes([value]) * (width * rows),
                                  bitmap_left=left, bitmap_top=top)


class FakeShaper:
    def __init__(self, runs: dict, metrics: tr.FontMetrics) -> None:
        self.runs = runs
        self.metrics = metrics
        self.calls = 0

    def shape(self, text):
        self.calls += 1
        return ShapingResult(run=self.runs.get(text, tr.GlyphRun()), metrics=self.metrics)


class FakeRenderer:
    """Serves prebuilt bitmaps; glyph ids listed in ``broken`` raise GlyphRenderError."""

    def __init__(self, bitmaps: dict, broken: tuple = ()) -> None:
        self.bitmaps = bitmaps
        self.broken = set(broken)
        self.requests: list[int] = []

    def render_glyph(self, glyph_id: int) -> tr.RenderedGlyphBitmap:
        self.requests.append(glyph_id)
        if glyph_id in self.broken:
            raise GlyphRenderError(glyph_id, "missing outline")
        return self.bitmaps[glyph_id]


# "AB": two 10px glyphs, bearing (1, 8), 20px line height, descender -5px
AB_METRICS = tr.FontMetrics(line_height=20 * 64, descender=-5 * 64, ascender=15 * 64)
AB_RUN = tr.GlyphRun([
    tr.PositionedGlyph(glyph_id=36, cluster=0, x_advance=640),
    tr.PositionedGlyph(glyph_id=37, cluster=1, x_advance=640),
])


@pytest.fixture
def ab_shaper():
    return FakeShaper({"AB": AB_RUN, "": tr.GlyphRun()}, AB_METRICS)


@pytest.fixture
def ab_renderer():
    return FakeRenderer({
        36: solid_bitmap(6, 8, 180, left=1, top=8),
        37: solid_bitmap(7, 8, 220, left=1, top=8),
    })


_FONT_PATTERNS = [
    "/usr/share/fonts/**/DejaVuSans.ttf",
    "/usr/share/fonts/**/LiberationSans-Regular.ttf",
    "/usr/share/fonts/**/FreeSans.ttf",
    "/usr/share/fonts/**/*.ttf",
    "/usr/local/share/fonts/**/*.ttf",
    "/Library/Fonts/*.ttf",
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    os.path.join(os.environ.get("WINDIR", r"C:\Windows"), "Fonts", "arial.ttf"),
]


@pytest.fixture(scope="session")
def system_font():
    """Path of an installed TrueType font; skips the test when none is found."""
    env = os.environ.get("TEXTRASTER_TEST_FONT")
    if env and os.path.isfile(env):
        return env
    for pattern in _FONT_PATTERNS:
        matches = sorted(glob.glob(pattern, recursive=True))
        if matches:
            return matches[0]
    pytest.skip("no TrueType font installed")
