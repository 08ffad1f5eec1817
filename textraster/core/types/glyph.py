# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
TextRaster Types Glyph Module

Value types that flow between the shaper, the renderer backend and the
compositor:

- PositionedGlyph: one shaped glyph with 26.6 advance and offset
- GlyphRun: the immutable, ordered result of shaping one string
- FontMetrics: vertical metrics of a sized font, in 26.6 pixel units
- RenderedGlyphBitmap: a coverage bitmap plus its bearing
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

import numpy as np

__all__ = ["PositionedGlyph", "GlyphRun", "FontMetrics", "RenderedGlyphBitmap"]


@dataclass(frozen=True)
class PositionedGlyph:
    """A shaped glyph.

    Advances move the pen after the glyph is drawn. Offsets displace only
    this glyph's placement and are never accumulated into the pen.
    All four metrics are signed 26.6 fixed-point integers.
    """
    glyph_id: int
    cluster: int = 0        # index into the source text, informational
    x_advance: int = 0
    y_advance: int = 0
    x_offset: int = 0
    y_offset: int = 0


class GlyphRun:
    """Ordered, immutable sequence of PositionedGlyph produced by one shaping call."""

    __slots__ = ("_glyphs",)

    def __init__(self, glyphs: Iterable[PositionedGlyph] = ()) -> None:
        self._glyphs: tuple[PositionedGlyph, ...] = tuple(glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def __iter__(self) -> Iterator[PositionedGlyph]:
        return iter(self._glyphs)

    def __getitem__(self, index: int) -> PositionedGlyph:
        return self._glyphs[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GlyphRun):
            return NotImplemented
        return self._glyphs == other._glyphs

    def __hash__(self) -> int:
        return hash(self._glyphs)

    def __repr__(self) -> str:
        return f"GlyphRun({list(self._glyphs)!r})"

    @property
    def glyphs(self) -> tuple[PositionedGlyph, ...]:
        return self._glyphs

    def total_advance(self) -> int:
        """Sum of horizontal advances in 26.6 units."""
        return sum(g.x_advance for g in self._glyphs)


@dataclass(frozen=True)
class FontMetrics:
    """Vertical metrics of a font at a given pixel size.

    Values are 26.6 fixed point, as reported by FreeType's size metrics.
    The descender is normally negative (below the baseline).
    """
    line_height: int
    descender: int
    ascender: int = 0


@dataclass(frozen=True, eq=False)
class RenderedGlyphBitmap:
    """Antialiased coverage bitmap of one glyph.

    coverage is row-major, one byte per pixel, ``width * rows`` bytes with
    no row padding. bitmap_left/bitmap_top are the bearing: the offset from
    the glyph origin on the baseline to the bitmap's top-left corner, with
    bitmap_top measured upward.
    """
    width: int
    rows: int
    coverage: bytes
    bitmap_left: int = 0
    bitmap_top: int = 0
    _array: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.coverage) < self.width * self.rows:
            raise ValueError(
                f"coverage holds {len(self.coverage)} bytes, "
                f"expected {self.width * self.rows} for {self.width}x{self.rows}"
            )
        if self.width * self.rows == 0:
            arr = np.zeros((self.rows, self.width), dtype=np.uint8)
        else:
            arr = np.frombuffer(self.coverage, dtype=np.uint8, count=self.width * self.rows)
            arr = arr.reshape(self.rows, self.width)
        arr.flags.writeable = False
        object.__setattr__(self, "_array", arr)

    @property
    def height(self) -> int:
        return self.rows

    @property
    def array(self) -> np.ndarray:
        """Read-only (rows, width) uint8 view of the coverage."""
        return self._array

    @property
    def nbytes(self) -> int:
        return self.width * self.rows

    def is_empty(self) -> bool:
        return self.width == 0 or self.rows == 0
