# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
TextRaster Types Constants Module

Numeric constants shared by the layout, compositing and device modules.
Font metrics and shaping positions are carried as 26.6 fixed-point
integers throughout; pixel values only appear at placement time.
"""

# 26.6 fixed point
FIXED_SHIFT = 6                             # fractional bits
FIXED_ONE = 1 << FIXED_SHIFT                # 64 units per pixel

# Canvas size heuristic
HEIGHT_PADDING = 2                          # pixels added to the font line height
HEIGHT_MARGIN_FACTOR = 1.5                  # room for tall marks and non-Latin scripts
MIN_CANVAS_WIDTH = 1                        # allocation floor for empty runs

# Canvas pixel layout
CHANNELS = 4                                # R, G, B, A
ALPHA_CHANNEL = 3
BIT_DEPTH = 8

# Rendering defaults
DEFAULT_PIXEL_SIZE = 64
DEFAULT_FOREGROUND = (0, 0, 0)              # RGB, alpha carries coverage
DEFAULT_DEVICE = "png"

# FreeType render mode names used in cache keys
RENDER_MODE_NORMAL = "normal"               # 8-bit antialiased gray coverage
