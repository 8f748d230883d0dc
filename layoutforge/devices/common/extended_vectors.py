# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Extended Vector Instruction Module

Dispatches the x-... instruction set straight onto the sink. Each instruction
sets exactly what it names: no line join/cap reset, no paint defaults, and
save/restore balance is left to whoever produced the sequence.
"""

from ...core import types as lf


def render_extended_vector(vector, sink) -> None:
    """Emit the sink calls for a single extended instruction; unknown instructions are ignored."""
    if isinstance(vector, lf.SaveContext):
        sink.save()
        return

    if isinstance(vector, lf.RestoreContext):
        sink.restore()
        return

    if isinstance(vector, lf.RotateContext):
        _rotate(vector.angle, vector.origin, sink)
        return

    if isinstance(vector, lf.TranslateContext):
        sink.translate(vector.x, vector.y)
        return

    if isinstance(vector, lf.ScaleContext):
        if vector.origin is not None:
            sink.scale(vector.scale, origin=(vector.origin.x, vector.origin.y))
        else:
            sink.scale(vector.scale)
        return

    if isinstance(vector, lf.LineStyle):
        sink.line_width(vector.line_width or lf.DEFAULT_LINE_WIDTH)
        if vector.dash:
            sink.dash(vector.dash.length, space=vector.dash.space or vector.dash.length)
        else:
            sink.undash()
        return

    if isinstance(vector, lf.StrokeColor):
        if vector.opacity:
            sink.stroke_color(vector.color, vector.opacity)
        else:
            sink.stroke_color(vector.color)
        return

    if isinstance(vector, lf.FillColor):
        if vector.opacity:
            sink.fill_color(vector.color, vector.opacity)
        else:
            sink.fill_color(vector.color)
        return

    if isinstance(vector, lf.StrokePath):
        if vector.color is not None:
            sink.stroke(vector.color)
        else:
            sink.stroke()
        return

    if isinstance(vector, lf.FillPath):
        if vector.color is not None:
            sink.fill(vector.color)
        else:
            sink.fill()
        return

    if isinstance(vector, lf.FillAndStrokePath):
        if vector.fill_color is not None and vector.stroke_color is not None:
            sink.fill_and_stroke(vector.fill_color, vector.stroke_color)
        else:
            sink.fill_and_stroke()
        return

    if isinstance(vector, lf.MoveTo):
        sink.move_to(vector.x, vector.y)
        return

    if isinstance(vector, lf.LineTo):
        sink.line_to(vector.x, vector.y)
        return

    if isinstance(vector, lf.XLine):
        sink.move_to(vector.x1, vector.y1)
        sink.line_to(vector.x2, vector.y2)
        return

    if isinstance(vector, lf.XRect):
        sink.rect(vector.x, vector.y, vector.width, vector.height)
        return

    if isinstance(vector, lf.XEllipse):
        sink.ellipse(vector.cx, vector.cy, vector.rx, vector.ry)
        return

    if isinstance(vector, lf.QuadraticCurve):
        if vector.x1 is not None and vector.y1 is not None:
            sink.move_to(vector.x1, vector.y1)
        sink.quadratic_curve_to(vector.cpx, vector.cpy, vector.x2, vector.y2)
        return

    if isinstance(vector, lf.BezierCurve):
        if vector.x1 is not None and vector.y1 is not None:
            sink.move_to(vector.x1, vector.y1)
        sink.bezier_curve_to(vector.cpx1, vector.cpy1, vector.cpx2, vector.cpy2,
                             vector.x2, vector.y2)
        return

    if isinstance(vector, lf.ClosePath):
        sink.close_path()
        return

    if isinstance(vector, lf.ClipToRect):
        sink.rect(vector.x, vector.y, vector.width, vector.height)
        sink.clip()
        return


def _rotate(angle, origin, sink) -> None:
    """Rotate the context; layout angles are counter-clockwise, the sink's are clockwise."""
    fixed_angle = round(-angle, 2)
    if origin is not None:
        sink.rotate(fixed_angle, origin=(origin.x, origin.y))
    else:
        sink.rotate(fixed_angle)
