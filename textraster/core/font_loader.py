# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Font Loader - opens one face of a font file for both shaping and rendering.

The same bytes back a HarfBuzz font (shaping) and a FreeType face
(rasterization), so glyph ids produced by the shaper always index the face
that renders them. Both are sized to the same pixel size, and the HarfBuzz
scale is set to ``pixel_size * 64`` so shaping positions come out directly
in 26.6 pixel units.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import freetype
import uharfbuzz as hb

from . import types as tr
from .error import FontLoadError

logger = logging.getLogger(__name__)


def _decode_name(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value) if value is not None else ""


@dataclass
class LoadedFont:
    """A sized font face, viewed through both HarfBuzz and FreeType."""
    path: str
    face_index: int
    pixel_size: int
    ft_face: Any                # freetype.Face
    hb_font: Any                # uharfbuzz.Font
    metrics: tr.FontMetrics

    @property
    def font_id(self) -> tuple[str, int]:
        """Hashable identity used in glyph cache keys."""
        return (self.path, self.face_index)

    def describe(self) -> dict:
        """Face-level information for diagnostics."""
        face = self.ft_face
        bbox = face.bbox
        return {
            'path': self.path,
            'family': _decode_name(face.family_name),
            'style': _decode_name(face.style_name),
            'num_faces': face.num_faces,
            'bbox': (bbox.xMin, bbox.xMax, bbox.yMin, bbox.yMax),
            'units_per_em': face.units_per_EM,
            'ascender': face.ascender,
            'descender': face.descender,
            'height': face.height,
            'pixel_size': self.pixel_size,
        }


def load_font(path: str | os.PathLike, pixel_size: int = tr.DEFAULT_PIXEL_SIZE,
              face_index: int = 0) -> LoadedFont:
    """Load and size a font face.

    Args:
        path: Font file (TTF, OTF, TTC, ...).
        pixel_size: Pixels per em.
        face_index: Face within a collection.

    Returns:
        LoadedFont ready for shaping and rendering.

    Raises:
        FontLoadError: If the file cannot be read or FreeType rejects the
            face or the size.
    """
    path = os.fspath(path)
    if pixel_size <= 0:
        raise FontLoadError(f"pixel size must be positive, got {pixel_size}")
    if face_index < 0:
        raise FontLoadError(f"face index must not be negative, got {face_index}")

    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as exc:
        raise FontLoadError(f"cannot read font file {path}: {exc.strerror or exc}") from exc

    try:
        ft_face = freetype.Face(path, face_index)
        ft_face.set_pixel_sizes(0, pixel_size)
    except freetype.FT_Exception as exc:
        raise FontLoadError(f"FreeType cannot load {path} (face {face_index}): {exc}") from exc

    hb_face = hb.Face(hb.Blob(data), face_index)
    hb_font = hb.Font(hb_face)
    hb.ot_font_set_funcs(hb_font)
    scale = pixel_size * tr.FIXED_ONE
    hb_font.scale = (scale, scale)

    size = ft_face.size
    metrics = tr.FontMetrics(
        line_height=size.height,
        descender=size.descender,
        ascender=size.ascender,
    )

    font = LoadedFont(
        path=path,
        face_index=face_index,
        pixel_size=pixel_size,
        ft_face=ft_face,
        hb_font=hb_font,
        metrics=metrics,
    )

    info = font.describe()
    logger.info("Font loaded from %s: %s %s, %d face(s), %d units per em",
                path, info['family'], info['style'], info['num_faces'], info['units_per_em'])
    logger.info("BBox x: (%d, %d), y: (%d, %d); ascender %d, descender %d, height %d",
                *info['bbox'], info['ascender'], info['descender'], info['height'])
    logger.info("Sized to %d px: line height %d, descender %d (26.6)",
                pixel_size, metrics.line_height, metrics.descender)
    return font
