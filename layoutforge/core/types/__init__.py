# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LayoutForge Types Package - Public API

All page tree types and constants are available through this single
namespace to support the standard import pattern:
`from layoutforge.core import types as lf`

**Internal Module Organization:**
- constants.py: item tags, orientations, line styles, decorations
- vectors.py: Point, Dash, PatternFill and the standard vector shapes
- extended.py: extended vector instructions (x-... tags)
- text.py: Inline, TextLine, PageReference, Watermark
- graphics.py: Image, CoverFit, SvgFragment, clip brackets, Pattern
- document.py: PageSize, Page, Document
"""

from .constants import *
from .vectors import *
from .extended import *
from .text import *
from .graphics import *
from .document import *
