# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Vector Shape Rendering Module

Translates one standard vector shape into sink calls: line style, path
construction, then paint. Extended instructions are routed to
extended_vectors, which skips all of the defaulting done here.
"""

from ...core import types as lf
from .extended_vectors import render_extended_vector
from .render_utils import _opacity_or_default


def render_vector(vector, sink, patterns=None) -> None:
    """
    Render a vector shape or extended instruction.

    Args:
        vector: VectorShape or ExtendedInstruction from the page tree
        sink: Drawing sink to emit calls on
        patterns: Mapping of pattern name to the sink's pattern handle
    """
    if isinstance(vector, lf.ExtendedInstruction):
        render_extended_vector(vector, sink)
        return

    if not isinstance(vector, lf.VectorShape):
        return

    sink.line_width(vector.line_width or lf.DEFAULT_LINE_WIDTH)
    if vector.dash:
        dash = vector.dash
        sink.dash(dash.length, space=dash.space or dash.length, phase=dash.phase or 0)
    else:
        sink.undash()
    sink.line_join(vector.line_join or lf.LINE_JOIN_MITER)
    sink.line_cap(vector.line_cap or lf.LINE_CAP_BUTT)

    # A gradient replaces the fill colour for this paint only
    fill_color = vector.color

    if isinstance(vector, lf.Ellipse):
        sink.ellipse(vector.x, vector.y, vector.r1, vector.r2)
        if vector.linear_gradient:
            fill_color = _linear_gradient(sink, vector.x - vector.r1, vector.y,
                                          vector.x + vector.r1, vector.y,
                                          vector.linear_gradient)

    elif isinstance(vector, lf.Rect):
        if vector.r:
            sink.rounded_rect(vector.x, vector.y, vector.w, vector.h, vector.r)
        else:
            sink.rect(vector.x, vector.y, vector.w, vector.h)
        if vector.linear_gradient:
            fill_color = _linear_gradient(sink, vector.x, vector.y,
                                          vector.x + vector.w, vector.y,
                                          vector.linear_gradient)

    elif isinstance(vector, lf.Line):
        sink.move_to(vector.x1, vector.y1)
        sink.line_to(vector.x2, vector.y2)

    elif isinstance(vector, lf.Polyline):
        _render_polyline(vector, sink)

    elif isinstance(vector, lf.SvgPath):
        sink.path(vector.d)

    if isinstance(fill_color, lf.PatternFill):
        fill_color = _resolve_pattern(fill_color, patterns)

    if fill_color and vector.line_color:
        sink.fill_color(fill_color, _opacity_or_default(vector.fill_opacity))
        sink.stroke_color(vector.line_color, _opacity_or_default(vector.stroke_opacity))
        sink.fill_and_stroke()
    elif fill_color:
        sink.fill_color(fill_color, _opacity_or_default(vector.fill_opacity))
        sink.fill()
    else:
        sink.stroke_color(vector.line_color or lf.DEFAULT_COLOR,
                          _opacity_or_default(vector.stroke_opacity))
        sink.stroke()


def _render_polyline(vector, sink) -> None:
    points = vector.points
    if not points:
        return

    sink.move_to(points[0].x, points[0].y)
    for point in points[1:]:
        sink.line_to(point.x, point.y)

    if len(points) > 1:
        first = points[0]
        last = points[-1]
        if vector.close_path or (first.x == last.x and first.y == last.y):
            sink.close_path()


def _linear_gradient(sink, x1, y1, x2, y2, stops):
    """Build a horizontal gradient with the stop colours evenly spaced over [0, 1]."""
    gradient = sink.linear_gradient(x1, y1, x2, y2)
    count = len(stops)
    step = 1 / (count - 1) if count > 1 else 0
    for i, color in enumerate(stops):
        gradient.stop(i * step, color)
    return gradient


def _resolve_pattern(marker, patterns):
    """Swap a pattern marker for the registered pattern (and its colour, if uncoloured)."""
    pattern = (patterns or {}).get(marker.name)
    if pattern is None:
        return marker.color
    if marker.color is not None:
        return (pattern, marker.color)
    return pattern
