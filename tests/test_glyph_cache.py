# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from textraster.core.glyph_cache import GlyphBitmapCache, GlyphCacheKey

from conftest import solid_bitmap


def _key(glyph_id, font_id=("font.ttf", 0), size=64):
    return GlyphCacheKey(font_id, glyph_id, size)


def test_keys_compare_by_value():
    assert _key(5) == _key(5)
    assert hash(_key(5)) == hash(_key(5))
    assert _key(5) != _key(5, size=32)
    assert _key(5) != _key(5, font_id=("other.ttf", 0))


def test_get_put_and_stats():
    cache = GlyphBitmapCache()
    bitmap = solid_bitmap(4, 4)
    assert cache.get(_key(1)) is None
    cache.put(_key(1), bitmap)
    assert cache.get(_key(1)) is bitmap
    stats = cache.stats()
    assert stats['entries'] == 1
    assert stats['hits'] == 1
    assert stats['misses'] == 1
    assert stats['hit_rate'] == 0.5
    assert stats['memory_bytes'] == 16


def test_evicts_least_recently_used_by_count():
    cache = GlyphBitmapCache(max_entries=2)
    cache.put(_key(1), solid_bitmap(1, 1))
    cache.put(_key(2), solid_bitmap(1, 1))
    cache.get(_key(1))
    cache.put(_key(3), solid_bitmap(1, 1))
    assert _key(1) in cache
    assert _key(2) not in cache
    assert _key(3) in cache
    assert len(cache) == 2


def test_evicts_by_bytes():
    cache = GlyphBitmapCache(max_bytes=100)
    cache.put(_key(1), solid_bitmap(6, 6))     # 36
    cache.put(_key(2), solid_bitmap(6, 6))     # 72
    cache.put(_key(3), solid_bitmap(6, 6))     # would be 108
    assert _key(1) not in cache
    assert cache.stats()['memory_bytes'] == 72


def test_oversized_bitmap_not_cached():
    cache = GlyphBitmapCache(max_bytes=10)
    cache.put(_key(1), solid_bitmap(4, 4))
    assert len(cache) == 0


def test_replacing_entry_updates_memory():
    cache = GlyphBitmapCache()
    cache.put(_key(1), solid_bitmap(4, 4))
    cache.put(_key(1), solid_bitmap(2, 2))
    assert len(cache) == 1
    assert cache.stats()['memory_bytes'] == 4


def test_clear_resets_everything():
    cache = GlyphBitmapCache()
    cache.put(_key(1), solid_bitmap(2, 2))
    cache.get(_key(1))
    cache.clear()
    assert cache.stats() == {
        'entries': 0, 'max_entries': GlyphBitmapCache.DEFAULT_MAX_ENTRIES,
        'hits': 0, 'misses': 0, 'hit_rate': 0.0, 'memory_bytes': 0,
    }
