# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
TextRaster Types Package - Public API

Re-exports every value type and constant so callers use a single
namespace:

```python
from ..core import types as tr

run = tr.GlyphRun([tr.PositionedGlyph(glyph_id=36, x_advance=640)])
pen = tr.PenState(x=0, y=size.pen_origin_y)
```

**Internal Module Organization:**
- constants.py: fixed-point, canvas and default constants
- glyph.py: PositionedGlyph, GlyphRun, FontMetrics, RenderedGlyphBitmap
- state.py: PenState, CanvasSize, PipelineState, RenderOptions
"""

from .constants import *
from .glyph import *
from .state import *
