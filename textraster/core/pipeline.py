# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Text rendering pipeline.

One RenderJob takes one string through

    IDLE -> SHAPED -> SIZED -> COMPOSITED -> ENCODED

Each step requires the previous one; calling a step out of order raises
PipelineStateError. The canvas is allocated in the SIZED step from the
estimator result, only ever written by the compositor, and frozen once it
has been encoded.

Shaper and renderer are duck-typed so the pipeline can be driven by the
HarfBuzz/FreeType backends or by any object with the same methods:

    shaper.shape(text) -> ShapingResult(run, metrics)
    renderer.render_glyph(glyph_id) -> RenderedGlyphBitmap
"""

from __future__ import annotations

import logging
import os
from typing import Any, BinaryIO

from .. import devices
from . import layout
from . import types as tr
from .canvas import Canvas
from .compositor import GlyphCompositor, GlyphRenderer
from .error import EncodeError, PipelineStateError
from .font_loader import LoadedFont, load_font
from .glyph_cache import GlyphBitmapCache
from .glyph_renderer import FreeTypeRenderer
from .shaping import HarfBuzzShaper

logger = logging.getLogger(__name__)


def _resolve_device(name: str) -> Any:
    try:
        return devices.get_device(name)
    except ValueError as exc:
        raise EncodeError(str(exc)) from None


class RenderJob:
    """Renders one string to one image."""

    def __init__(self, shaper: Any, renderer: GlyphRenderer,
                 foreground: tuple[int, int, int] = tr.DEFAULT_FOREGROUND,
                 strict_bounds: bool = False) -> None:
        self.shaper = shaper
        self.renderer = renderer
        self.foreground = foreground
        self.strict_bounds = strict_bounds

        self.state = tr.PipelineState.IDLE
        self.run: tr.GlyphRun | None = None
        self.metrics: tr.FontMetrics | None = None
        self.size: tr.CanvasSize | None = None
        self.canvas: Canvas | None = None
        self.skipped_glyphs: list[int] = []

    def _require(self, expected: tr.PipelineState, step: str) -> None:
        if self.state is not expected:
            raise PipelineStateError(
                f"cannot {step} in state {self.state.value}; expected {expected.value}"
            )

    def shape(self, text: str | bytes) -> tr.GlyphRun:
        self._require(tr.PipelineState.IDLE, "shape")
        result = self.shaper.shape(text)
        self.run = result.run
        self.metrics = result.metrics
        self.state = tr.PipelineState.SHAPED
        return self.run

    def layout(self) -> Canvas:
        """Estimate the canvas size and allocate the canvas.

        Raises:
            LayoutError: Nothing is allocated and the job stays SHAPED.
        """
        self._require(tr.PipelineState.SHAPED, "size the canvas")
        self.size = layout.estimate(self.run, self.metrics)
        self.canvas = Canvas.allocate(self.size, self.foreground)
        self.state = tr.PipelineState.SIZED
        return self.canvas

    def composite(self) -> Canvas:
        self._require(tr.PipelineState.SIZED, "composite")
        compositor = GlyphCompositor(self.renderer, strict_bounds=self.strict_bounds)
        compositor.composite(self.canvas, self.run, self.size)
        self.skipped_glyphs = compositor.skipped
        self.state = tr.PipelineState.COMPOSITED
        return self.canvas

    def encode(self, stream: BinaryIO, device: str = tr.DEFAULT_DEVICE, **params: Any) -> None:
        """Hand the canvas to an output device.

        Raises:
            EncodeError: Unknown device or encoder failure. The job stays
                COMPOSITED and nothing was written.
        """
        self._require(tr.PipelineState.COMPOSITED, "encode")
        _resolve_device(device).write_image(self.canvas, stream, **params)
        self.canvas.freeze()
        self.state = tr.PipelineState.ENCODED

    def render(self, text: str | bytes) -> Canvas:
        """Shape, size and composite; the canvas is left ready to encode."""
        self.shape(text)
        self.layout()
        return self.composite()


class TextRenderer:
    """Loads a font once and renders any number of strings with it.

    The glyph cache, when enabled, is shared by all jobs of this renderer.
    """

    def __init__(self, font_path: str | os.PathLike,
                 options: tr.RenderOptions | None = None) -> None:
        self.options = options or tr.RenderOptions()
        _resolve_device(self.options.device)
        self.font: LoadedFont = load_font(font_path, self.options.pixel_size,
                                          self.options.face_index)
        self.cache = GlyphBitmapCache(self.options.cache_entries) \
            if self.options.glyph_cache else None
        self.shaper = HarfBuzzShaper(self.font, features=self.options.features,
                                     direction=self.options.direction,
                                     script=self.options.script,
                                     language=self.options.language)
        self.renderer = FreeTypeRenderer(self.font, self.cache)

    def new_job(self) -> RenderJob:
        return RenderJob(self.shaper, self.renderer,
                         foreground=self.options.foreground,
                         strict_bounds=self.options.strict_bounds)

    def render(self, text: str | bytes) -> Canvas:
        """Render text to a canvas without encoding it."""
        return self.new_job().render(text)

    def render_to(self, text: str | bytes, stream: BinaryIO, **params: Any) -> RenderJob:
        """Render text and encode it to the stream with the configured device."""
        job = self.new_job()
        job.render(text)
        job.encode(stream, self.options.device, **params)
        if job.skipped_glyphs:
            logger.warning("%d glyph(s) could not be rendered and were left out",
                           len(job.skipped_glyphs))
        return job

    def cache_stats(self) -> dict | None:
        return self.cache.stats() if self.cache is not None else None


def render_text(font_path: str | os.PathLike, text: str | bytes, stream: BinaryIO,
                options: tr.RenderOptions | None = None) -> Canvas:
    """Render text with the font at font_path and write the image to stream."""
    job = TextRenderer(font_path, options).render_to(text, stream)
    return job.canvas
