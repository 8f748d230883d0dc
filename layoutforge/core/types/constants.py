# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LayoutForge Types Constants Module

Names shared between the layout engine output and the render pass: item type
tags, page orientations, line styles, alignments and text decorations.
"""

# Render item type tags (layout engine output)
ITEM_VECTOR = "vector"
ITEM_LINE = "line"
ITEM_IMAGE = "image"
ITEM_SVG = "svg"
ITEM_BEGIN_CLIP = "beginClip"
ITEM_END_CLIP = "endClip"

# Extended vector instructions carry this prefix on their type tag
EXTENDED_PREFIX = "x-"

# Page orientations
PORTRAIT = "portrait"
LANDSCAPE = "landscape"

# Line joins and caps (names understood by the sink)
LINE_JOIN_MITER = "miter"
LINE_JOIN_ROUND = "round"
LINE_JOIN_BEVEL = "bevel"
LINE_CAP_BUTT = "butt"
LINE_CAP_ROUND = "round"
LINE_CAP_SQUARE = "square"

DEFAULT_LINE_WIDTH = 1
DEFAULT_COLOR = "black"

# Inline alignment
ALIGN_LEFT = "left"
ALIGN_CENTER = "center"
ALIGN_RIGHT = "right"
ALIGN_JUSTIFY = "justify"

# Text decorations and their styles
DECORATION_UNDERLINE = "underline"
DECORATION_OVERLINE = "overline"
DECORATION_LINE_THROUGH = "lineThrough"
DECORATION_STYLE_SOLID = "solid"
DECORATION_STYLE_DOUBLE = "double"
DECORATION_STYLE_DASHED = "dashed"
DECORATION_STYLE_DOTTED = "dotted"
DECORATION_STYLE_WAVY = "wavy"

# Baseline shifts as a fraction of the font size
SUPERSCRIPT_SHIFT = 0.75
SUBSCRIPT_SHIFT = 0.35
