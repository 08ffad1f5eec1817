# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared Pillow encoding for the raster output devices."""

from __future__ import annotations

import io
from typing import Any, BinaryIO

from PIL import Image

from ...core.canvas import Canvas
from ...core.error import EncodeError


def canvas_to_pil(canvas: Canvas) -> Image.Image:
    """Wrap the canvas's straight-alpha RGBA rows as a PIL image.

    The pixel array is shared with the image, not copied.
    """
    return Image.frombuffer("RGBA", (canvas.width, canvas.height), canvas.pixels,
                            "raw", "RGBA", canvas.stride, 1)


def encode(canvas: Canvas, format: str, **save_kwargs: Any) -> bytes:
    """Encode the canvas into an in-memory image file.

    Raises:
        EncodeError: If Pillow fails to encode.
    """
    bio = io.BytesIO()
    try:
        canvas_to_pil(canvas).save(bio, format=format, **save_kwargs)
    except (OSError, ValueError, KeyError) as exc:
        raise EncodeError(f"{format} encoding failed: {exc}") from exc
    return bio.getvalue()


def write_encoded(data: bytes, stream: BinaryIO) -> None:
    """Write a fully encoded image to the destination in one piece.

    Raises:
        EncodeError: If the destination rejects the write.
    """
    try:
        stream.write(data)
        stream.flush()
    except (OSError, ValueError) as exc:
        # ValueError: write to a closed file
        raise EncodeError(f"cannot write image: {exc}") from exc
