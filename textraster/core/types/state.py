# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
TextRaster Types State Module

Mutable and per-invocation state: the pen, the estimated canvas size,
the pipeline state machine and the render options.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .constants import DEFAULT_DEVICE, DEFAULT_FOREGROUND, DEFAULT_PIXEL_SIZE, FIXED_ONE

__all__ = ["PenState", "CanvasSize", "PipelineState", "RenderOptions"]


@dataclass
class PenState:
    """Pen position in 26.6 units; y is the baseline measured down from the canvas top."""
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class CanvasSize:
    """Estimator result.

    baseline is the descender magnitude: the distance in pixels from the
    bottom edge of the canvas up to the baseline.
    """
    width: int
    height: int
    baseline: int

    @property
    def pen_origin_y(self) -> int:
        """Initial pen y in 26.6 units."""
        return (self.height - self.baseline) * FIXED_ONE


class PipelineState(enum.Enum):
    IDLE = "idle"
    SHAPED = "shaped"
    SIZED = "sized"
    COMPOSITED = "composited"
    ENCODED = "encoded"


@dataclass
class RenderOptions:
    """Caller-facing configuration for one rendering job.

    Attributes:
        pixel_size: Font size in pixels per em.
        face_index: Face to load from a font collection.
        foreground: RGB color painted wherever coverage is non-zero.
        strict_bounds: Raise CompositeBoundsError instead of clipping.
        glyph_cache: Reuse rendered bitmaps for repeated glyph ids.
        cache_entries: Maximum bitmaps kept by the glyph cache.
        features: OpenType features, e.g. {"kern": 0, "liga": 1}.
        direction: "ltr" or "rtl"; guessed from the text when None.
        script: ISO 15924 script tag; guessed when None.
        language: BCP 47 language tag; guessed when None.
        device: Output device name ("png", "tiff").
    """
    pixel_size: int = DEFAULT_PIXEL_SIZE
    face_index: int = 0
    foreground: tuple[int, int, int] = DEFAULT_FOREGROUND
    strict_bounds: bool = False
    glyph_cache: bool = True
    cache_entries: int | None = None
    features: dict[str, int] = field(default_factory=dict)
    direction: str | None = None
    script: str | None = None
    language: str | None = None
    device: str = DEFAULT_DEVICE
