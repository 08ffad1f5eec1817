# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Canvas - the RGBA pixel buffer one rendering job draws into.

The color channels are filled with the foreground color once, at
allocation, and never change. Glyph coverage lives entirely in the alpha
channel, so the buffer is straight (non-premultiplied) RGBA.
"""

from __future__ import annotations

import numpy as np

from . import types as tr


class Canvas:
    """Fixed-size RGBA8 buffer, row-major, stride ``width * 4``."""

    def __init__(self, width: int, height: int,
                 foreground: tuple[int, int, int] = tr.DEFAULT_FOREGROUND) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.foreground = tuple(int(c) for c in foreground)
        self.pixels = np.zeros((height, width, tr.CHANNELS), dtype=np.uint8)
        self.pixels[:, :, :3] = self.foreground

    @classmethod
    def allocate(cls, size: tr.CanvasSize,
                 foreground: tuple[int, int, int] = tr.DEFAULT_FOREGROUND) -> Canvas:
        """Allocate a canvas for an estimator result.

        An empty run estimates width 0; the buffer is then MIN_CANVAS_WIDTH
        wide so it can still be encoded.
        """
        return cls(max(size.width, tr.MIN_CANVAS_WIDTH), size.height, foreground)

    @property
    def alpha(self) -> np.ndarray:
        """Writable (height, width) view of the alpha channel."""
        return self.pixels[:, :, tr.ALPHA_CHANNEL]

    @property
    def stride(self) -> int:
        return self.width * tr.CHANNELS

    @property
    def frozen(self) -> bool:
        return not self.pixels.flags.writeable

    def freeze(self) -> None:
        """Make the buffer read-only; called once the canvas has been encoded."""
        self.pixels.flags.writeable = False

    def get_alpha(self, x: int, y: int) -> int:
        return int(self.pixels[y, x, tr.ALPHA_CHANNEL])

    def tobytes(self) -> bytes:
        """Raw RGBA rows, top to bottom."""
        return self.pixels.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            np.array_equal(self.pixels, other.pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height}, foreground={self.foreground})"
