# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from textraster.core import pen
from textraster.core import types as tr

from conftest import solid_bitmap


def test_fixed_conversions_floor():
    assert pen.to_fixed(10) == 640
    assert pen.from_fixed(640) == 10
    assert pen.from_fixed(639) == 9
    assert pen.from_fixed(-1) == -1
    assert pen.from_fixed(-64) == -1
    assert pen.from_fixed(-65) == -2


def test_place_first_glyph_of_ab():
    state = tr.PenState(x=0, y=1728)
    glyph = tr.PositionedGlyph(glyph_id=36, x_advance=640)
    assert pen.place(state, glyph, solid_bitmap(6, 8, left=1, top=8)) == (1, 19)


def test_offsets_move_placement_only():
    state = tr.PenState(x=0, y=1728)
    glyph = tr.PositionedGlyph(glyph_id=1, x_advance=640, x_offset=128, y_offset=192)
    px, py = pen.place(state, glyph, solid_bitmap(2, 2, left=0, top=0))
    assert (px, py) == (2, 24)

    pen.advance(state, glyph)
    assert (state.x, state.y) == (640, 1728)


def test_y_advance_is_not_applied():
    state = tr.PenState(x=0, y=100)
    pen.advance(state, tr.PositionedGlyph(glyph_id=1, x_advance=64, y_advance=-640))
    assert state.y == 100


def test_fractional_advances_do_not_accumulate_rounding():
    # 1.5px advances: pixel x of each glyph is floor(n * 1.5), not n * floor(1.5)
    state = tr.PenState(x=0, y=0)
    glyph = tr.PositionedGlyph(glyph_id=1, x_advance=96)
    xs = []
    for _ in range(4):
        xs.append(pen.place(state, glyph, solid_bitmap(1, 1))[0])
        pen.advance(state, glyph)
    assert xs == [0, 1, 3, 4]


def test_negative_bearing_floors_left():
    state = tr.PenState(x=32, y=640)
    px, _ = pen.place(state, tr.PositionedGlyph(glyph_id=1), solid_bitmap(1, 1, left=-1))
    assert px == -1


def test_start_pen_uses_baseline():
    size = tr.CanvasSize(width=20, height=33, baseline=6)
    state = pen.start_pen(size)
    assert (state.x, state.y) == (0, 1728)
