# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
PNG Output Device

Encodes a finished canvas as an 8-bit-per-channel RGBA PNG with straight
alpha, using Pillow.
"""

from typing import BinaryIO

from ...core.canvas import Canvas
from ..common.pil_encoder import encode, write_encoded

EXTENSIONS = (".png",)

# zlib level 0-9; Pillow's default is 6
COMPRESS_LEVEL = 6


def write_image(canvas: Canvas, stream: BinaryIO, compress_level: int = COMPRESS_LEVEL) -> None:
    """
    Encode the canvas to PNG and write it to the stream.

    Args:
        canvas: Finished canvas; read only.
        stream: Binary destination (file, sys.stdout.buffer, BytesIO).
        compress_level: zlib compression level.

    Raises:
        EncodeError: On encoder or write failure. Nothing is written when
            encoding fails.
    """
    data = encode(canvas, "PNG", compress_level=compress_level)
    write_encoded(data, stream)
