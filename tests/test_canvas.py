# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import numpy as np
import pytest

from textraster.core import types as tr
from textraster.core.canvas import Canvas


def test_allocation_fills_foreground_with_zero_alpha():
    canvas = Canvas(4, 3, foreground=(192, 255, 192))
    assert canvas.pixels.shape == (3, 4, 4)
    assert (canvas.pixels[:, :, 0] == 192).all()
    assert (canvas.pixels[:, :, 1] == 255).all()
    assert (canvas.pixels[:, :, 2] == 192).all()
    assert not canvas.alpha.any()


def test_default_foreground_is_transparent_black():
    canvas = Canvas(2, 2)
    assert canvas.tobytes() == bytes(16)


def test_allocate_empty_run_uses_minimum_width():
    canvas = Canvas.allocate(tr.CanvasSize(width=0, height=33, baseline=6))
    assert (canvas.width, canvas.height) == (tr.MIN_CANVAS_WIDTH, 33)


def test_stride_and_raw_length():
    canvas = Canvas(5, 7)
    assert canvas.stride == 20
    assert len(canvas.tobytes()) == 5 * 7 * 4


def test_alpha_view_writes_through():
    canvas = Canvas(3, 2)
    canvas.alpha[1, 2] = 99
    assert canvas.get_alpha(2, 1) == 99
    assert canvas.tobytes()[(1 * 3 + 2) * 4 + 3] == 99


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 5)])
def test_rejects_empty_dimensions(width, height):
    with pytest.raises(ValueError):
        Canvas(width, height)


def test_freeze_blocks_writes():
    canvas = Canvas(2, 2)
    canvas.freeze()
    assert canvas.frozen
    with pytest.raises(ValueError):
        canvas.alpha[0, 0] = 1


def test_equality_compares_pixels():
    a, b = Canvas(2, 2), Canvas(2, 2)
    assert a == b
    b.alpha[0, 0] = 1
    assert a != b
    assert np.array_equal(a.pixels[:, :, :3], b.pixels[:, :, :3])
