# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared Cairo rendering utilities."""

from PIL import ImageColor

import cairo

_LINE_JOINS = {
    'miter': cairo.LINE_JOIN_MITER,
    'round': cairo.LINE_JOIN_ROUND,
    'bevel': cairo.LINE_JOIN_BEVEL,
}

_LINE_CAPS = {
    'butt': cairo.LINE_CAP_BUTT,
    'round': cairo.LINE_CAP_ROUND,
    'square': cairo.LINE_CAP_SQUARE,
}


def _safe_rgb(color):
    """
    Normalize a layout colour to an (r, g, b) tuple of floats, defaulting to black.

    Accepts CSS colour strings (names, ``#rgb``, ``#rrggbb``, ``rgb(...)``),
    RGB sequences in 0-255 and CMYK sequences in 0-100.
    """
    if not color:
        return (0, 0, 0)
    if isinstance(color, str):
        try:
            r, g, b = ImageColor.getrgb(color)[:3]
        except ValueError:
            return (0, 0, 0)
        return (r / 255, g / 255, b / 255)
    if len(color) == 3:
        return (color[0] / 255, color[1] / 255, color[2] / 255)
    if len(color) == 4:
        c, m, y, k = (component / 100 for component in color)
        return ((1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k))
    if len(color) == 1:
        return (color[0] / 255, color[0] / 255, color[0] / 255)
    return (0, 0, 0)


def _line_join(name):
    return _LINE_JOINS.get(name, cairo.LINE_JOIN_MITER)


def _line_cap(name):
    return _LINE_CAPS.get(name, cairo.LINE_CAP_BUTT)


def _quote_attribute(value):
    """Quote a string for a Cairo tag attribute list."""
    escaped = str(value).replace('\\', '\\\\').replace("'", "\\'")
    return f"'{escaped}'"
