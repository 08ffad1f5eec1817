# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
TIFF Output Device

Encodes a finished canvas as an RGBA TIFF with unassociated (straight)
alpha using Pillow. LZW compression by default.
"""

from typing import BinaryIO

from ...core.canvas import Canvas
from ..common.pil_encoder import encode, write_encoded

EXTENSIONS = (".tif", ".tiff")

COMPRESSION = "tiff_lzw"


def write_image(canvas: Canvas, stream: BinaryIO, compression: str = COMPRESSION) -> None:
    """Encode the canvas to TIFF and write it to the stream.

    Args:
        canvas: Finished canvas; read only.
        stream: Binary destination.
        compression: Pillow TIFF compression name ("raw", "tiff_lzw", "tiff_adobe_deflate", ...).

    Raises:
        EncodeError: On encoder or write failure.
    """
    data = encode(canvas, "TIFF", compression=compression)
    write_encoded(data, stream)
