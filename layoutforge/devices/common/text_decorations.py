# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Text Decoration Rendering Module

Backgrounds behind inline runs and underline/overline/line-through
decorations. Consecutive inlines sharing a decoration, style and colour are
drawn as a single group spanning their combined width.

KNOWN LIMITATION: decorations are positioned from the line's nominal
baseline, so superscript/subscript runs get their decoration where the
unshifted text would be.
"""

import math

from ...core import types as lf
from ...core.error import LayoutDataError
from .render_utils import saved_state

# Dash and gap lengths for dashed decorations
_DASH_LENGTH = 3.96
_DASH_GAP = 2.84

# Horizontal and vertical half-wave size for wavy decorations
_WAVE_H = 0.7
_WAVE_V = 1


class _DecorationGroup:
    __slots__ = ('line', 'decoration', 'color', 'style', 'inlines')

    def __init__(self, line, decoration, color, style, inline):
        self.line = line
        self.decoration = decoration
        self.color = color
        self.style = style
        self.inlines = [inline]


def group_decorations(line):
    """Group consecutive inlines with identical decoration, style and colour."""
    groups = []
    current = None
    for inline in line.inlines:
        decoration = inline.decoration
        if not decoration:
            current = None
            continue
        if isinstance(decoration, str):
            decoration = [decoration]

        color = inline.decoration_color or inline.color or lf.DEFAULT_COLOR
        style = inline.decoration_style or lf.DECORATION_STYLE_SOLID
        for item in decoration:
            if (current is None or item != current.decoration
                    or style != current.style or color != current.color):
                current = _DecorationGroup(line, item, color, style, inline)
                groups.append(current)
            else:
                current.inlines.append(inline)
    return groups


def _largest_inline(group):
    largest = group.inlines[0]
    for inline in group.inlines[1:]:
        if inline.font_size > largest.font_size:
            largest = inline
    return largest


def _draw_decoration(group, x, y, sink) -> None:
    first = group.inlines[0]
    biggest = _largest_inline(group)
    total_width = sum(inline.width + (inline.justify_shift or 0) for inline in group.inlines)
    line_ascent = group.line.get_ascender_height()
    ascent = biggest.font.ascender / 1000 * biggest.font_size
    descent = biggest.height - ascent

    lw = 0.5 + math.floor(max(biggest.font_size - 8, 0) / 2) * 0.12

    if group.decoration == lf.DECORATION_UNDERLINE:
        y += line_ascent + descent * 0.45
    elif group.decoration == lf.DECORATION_OVERLINE:
        y += line_ascent - ascent * 0.85
    elif group.decoration == lf.DECORATION_LINE_THROUGH:
        y += line_ascent - ascent * 0.25
    else:
        raise LayoutDataError(f"Unknown decoration: {group.decoration!r}")

    left = x + first.x

    with saved_state(sink):
        if group.style == lf.DECORATION_STYLE_DOUBLE:
            gap = max(0.5, lw * 2)
            sink.fill_color(group.color)
            sink.rect(left, y - lw / 2, total_width, lw / 2)
            sink.fill()
            sink.rect(left, y + gap - lw / 2, total_width, lw / 2)
            sink.fill()

        elif group.style == lf.DECORATION_STYLE_DASHED:
            dashes = math.ceil(total_width / (_DASH_LENGTH + _DASH_GAP))
            sink.rect(left, y, total_width, lw)
            sink.clip()
            sink.fill_color(group.color)
            dx = left
            for _ in range(dashes):
                sink.rect(dx, y - lw / 2, _DASH_LENGTH, lw)
                sink.fill()
                dx += _DASH_LENGTH + _DASH_GAP

        elif group.style == lf.DECORATION_STYLE_DOTTED:
            dots = math.ceil(total_width / (lw * 3))
            sink.rect(left, y, total_width, lw)
            sink.clip()
            sink.fill_color(group.color)
            dx = left
            for _ in range(dots):
                sink.rect(dx, y - lw / 2, lw, lw)
                sink.fill()
                dx += lw * 3

        elif group.style == lf.DECORATION_STYLE_WAVY:
            waves = math.ceil(total_width / (_WAVE_H * 2)) + 1
            wx = left - 1
            sink.rect(left, y - _WAVE_V, total_width, _WAVE_V * 2)
            sink.clip()
            sink.line_width(0.24)
            sink.move_to(wx, y)
            for _ in range(waves):
                sink.bezier_curve_to(wx + _WAVE_H, y - _WAVE_V, wx + _WAVE_H * 2, y - _WAVE_V,
                                     wx + _WAVE_H * 3, y)
                sink.bezier_curve_to(wx + _WAVE_H * 4, y + _WAVE_V, wx + _WAVE_H * 5, y + _WAVE_V,
                                     wx + _WAVE_H * 6, y)
                wx += _WAVE_H * 6
            sink.stroke(group.color)

        else:
            sink.fill_color(group.color)
            sink.rect(left, y - lw / 2, total_width, lw)
            sink.fill()


def draw_decorations(line, x, y, sink) -> None:
    for group in group_decorations(line):
        _draw_decoration(group, x, y, sink)


def draw_background(line, x, y, sink) -> None:
    height = line.get_height()
    for inline in line.inlines:
        if not inline.background:
            continue
        justify_shift = inline.justify_shift or 0
        sink.fill_color(inline.background)
        sink.rect(x + inline.x - justify_shift, y, inline.width + justify_shift * 2, height)
        sink.fill()
