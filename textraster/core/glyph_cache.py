# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
Glyph Cache Infrastructure

LRU cache for rendered glyph coverage bitmaps. Repeated glyph ids in a run
(every "e" in a sentence) are rasterized by FreeType once and then served
from the cache.

Architecture:
- GlyphCacheKey: font identity, glyph id, pixel size and render mode
- GlyphBitmapCache: LRU cache bounded by entry count and coverage bytes

Cache Key Design:
- font_id: (path, face index) of the loaded font - stable for the
  lifetime of the process, unlike id()
- glyph_id: shaped glyph index, not a character code, so ligatures and
  contextual forms are cached separately
- pixel_size / render_mode: anything that changes the rasterized bitmap

Placement is not part of the key. The same bitmap is reused wherever the
glyph lands because the compositor places whole-pixel bitmaps.

Failures are never cached: a glyph that raises GlyphRenderError is retried
on its next occurrence.
"""

from collections import OrderedDict
from dataclasses import dataclass

from . import types as tr


@dataclass(frozen=True)
class GlyphCacheKey:
    """Unique identifier for a cached glyph bitmap.

    Frozen dataclass for automatic __hash__ and __eq__, so it can be used
    directly as a dictionary key.
    """
    font_id: object         # (path, face_index) or any hashable font identity
    glyph_id: int
    pixel_size: int
    render_mode: str = tr.RENDER_MODE_NORMAL


class GlyphBitmapCache:
    """LRU cache for rendered glyph bitmaps.

    Uses OrderedDict for O(1) LRU operations: a hit moves the entry to the
    end, eviction pops from the front. Enforces both an entry count and a
    coverage byte limit.

    Thread Safety: NOT thread-safe. A cache belongs to one renderer, and
    rendering is single-threaded.
    """
    DEFAULT_MAX_ENTRIES = 4096
    DEFAULT_MAX_BYTES = 64 * 1024 * 1024  # 64 MB of coverage

    def __init__(self, max_entries: int | None = None, max_bytes: int | None = None) -> None:
        """Initialize the cache.

        Args:
            max_entries: Maximum cached bitmaps before LRU eviction.
                        Defaults to DEFAULT_MAX_ENTRIES (4096).
            max_bytes: Maximum total coverage bytes. Defaults to 64 MB.
        """
        self._cache: OrderedDict[GlyphCacheKey, tr.RenderedGlyphBitmap] = OrderedDict()
        self._max_entries = max_entries or self.DEFAULT_MAX_ENTRIES
        self._max_bytes = max_bytes or self.DEFAULT_MAX_BYTES
        self._current_bytes = 0
        self._hits = 0
        self._misses = 0

    def get(self, key: GlyphCacheKey) -> tr.RenderedGlyphBitmap | None:
        """Retrieve cached bitmap, updating LRU order and statistics."""
        entry = self._cache.get(key)
        if entry is not None:
            self._hits += 1
            self._cache.move_to_end(key)
        else:
            self._misses += 1
        return entry

    def put(self, key: GlyphCacheKey, bitmap: tr.RenderedGlyphBitmap) -> None:
        """Cache a bitmap with LRU eviction by count and memory.

        A bitmap larger than the whole byte budget is not cached at all.
        """
        entry_bytes = bitmap.nbytes
        if entry_bytes > self._max_bytes:
            return

        if key in self._cache:
            old = self._cache.pop(key)
            self._current_bytes -= old.nbytes

        # Evict if over limits
        while self._cache and (len(self._cache) >= self._max_entries or
                               self._current_bytes + entry_bytes > self._max_bytes):
            _, evicted = self._cache.popitem(last=False)
            self._current_bytes -= evicted.nbytes

        self._cache[key] = bitmap
        self._current_bytes += entry_bytes

    def clear(self) -> None:
        """Clear entire cache and reset statistics."""
        self._cache.clear()
        self._current_bytes = 0
        self._hits = 0
        self._misses = 0

    def stats(self) -> dict:
        """Return cache statistics for debugging/profiling.

        Returns:
            Dictionary with entries, max_entries, hits, misses, hit_rate and memory_bytes
        """
        total = self._hits + self._misses
        return {
            'entries': len(self._cache),
            'max_entries': self._max_entries,
            'hits': self._hits,
            'misses': self._misses,
            'hit_rate': self._hits / total if total > 0 else 0.0,
            'memory_bytes': self._current_bytes,
        }

    def __contains__(self, key: GlyphCacheKey) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)
