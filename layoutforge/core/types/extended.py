# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LayoutForge Types Extended Vector Instructions Module

Raw graphics-state and path operations. Unlike the standard shapes these do
not get any styling defaults from the render pass: each instruction changes
exactly the state or geometry it names, so sequences of them behave like a
small stack machine over the sink (save, transform, build a path, paint,
restore).
"""

from typing import Optional

from .vectors import Dash, Point


class ExtendedInstruction(object):
    TYPE = None


class SaveContext(ExtendedInstruction):
    TYPE = "x-saveContext"


class RestoreContext(ExtendedInstruction):
    TYPE = "x-restoreContext"


class RotateContext(ExtendedInstruction):
    TYPE = "x-rotateContext"

    def __init__(self, angle: float, origin: Optional[Point] = None) -> None:
        self.angle = angle
        self.origin = origin


class TranslateContext(ExtendedInstruction):
    TYPE = "x-translateContext"

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class ScaleContext(ExtendedInstruction):
    TYPE = "x-scaleContext"

    def __init__(self, scale: float, origin: Optional[Point] = None) -> None:
        self.scale = scale
        self.origin = origin


class LineStyle(ExtendedInstruction):
    TYPE = "x-lineStyle"

    def __init__(self, line_width: Optional[float] = None, dash: Optional[Dash] = None) -> None:
        self.line_width = line_width
        self.dash = dash


class StrokeColor(ExtendedInstruction):
    TYPE = "x-strokeColor"

    def __init__(self, color, opacity: Optional[float] = None) -> None:
        self.color = color
        self.opacity = opacity


class FillColor(ExtendedInstruction):
    TYPE = "x-fillColor"

    def __init__(self, color, opacity: Optional[float] = None) -> None:
        self.color = color
        self.opacity = opacity


class StrokePath(ExtendedInstruction):
    TYPE = "x-strokePath"

    def __init__(self, color=None) -> None:
        self.color = color


class FillPath(ExtendedInstruction):
    TYPE = "x-fillPath"

    def __init__(self, color=None) -> None:
        self.color = color


class FillAndStrokePath(ExtendedInstruction):
    TYPE = "x-fillAndStrokePath"

    def __init__(self, fill_color=None, stroke_color=None) -> None:
        self.fill_color = fill_color
        self.stroke_color = stroke_color


class MoveTo(ExtendedInstruction):
    TYPE = "x-moveTo"

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class LineTo(ExtendedInstruction):
    TYPE = "x-lineTo"

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class XLine(ExtendedInstruction):
    TYPE = "x-line"

    def __init__(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2


class XRect(ExtendedInstruction):
    TYPE = "x-rect"

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class XEllipse(ExtendedInstruction):
    TYPE = "x-ellipse"

    def __init__(self, cx: float, cy: float, rx: float, ry: float) -> None:
        self.cx = cx
        self.cy = cy
        self.rx = rx
        self.ry = ry


class QuadraticCurve(ExtendedInstruction):
    """Quadratic curve; ``(x1, y1)`` is an optional explicit start point."""
    TYPE = "x-quadraticCurve"

    def __init__(self, cpx: float, cpy: float, x2: float, y2: float,
                 x1: Optional[float] = None, y1: Optional[float] = None) -> None:
        self.cpx = cpx
        self.cpy = cpy
        self.x2 = x2
        self.y2 = y2
        self.x1 = x1
        self.y1 = y1


class BezierCurve(ExtendedInstruction):
    """Cubic curve; ``(x1, y1)`` is an optional explicit start point."""
    TYPE = "x-bezierCurve"

    def __init__(self, cpx1: float, cpy1: float, cpx2: float, cpy2: float,
                 x2: float, y2: float,
                 x1: Optional[float] = None, y1: Optional[float] = None) -> None:
        self.cpx1 = cpx1
        self.cpy1 = cpy1
        self.cpx2 = cpx2
        self.cpy2 = cpy2
        self.x2 = x2
        self.y2 = y2
        self.x1 = x1
        self.y1 = y1


class ClosePath(ExtendedInstruction):
    TYPE = "x-closePath"


class ClipToRect(ExtendedInstruction):
    TYPE = "x-clipToRect"

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height


# Type tag -> instruction class, used by the layout loader
EXTENDED_INSTRUCTIONS = {
    cls.TYPE: cls for cls in (
        SaveContext, RestoreContext, RotateContext, TranslateContext, ScaleContext,
        LineStyle, StrokeColor, FillColor, StrokePath, FillPath, FillAndStrokePath,
        MoveTo, LineTo, XLine, XRect, XEllipse, QuadraticCurve, BezierCurve,
        ClosePath, ClipToRect,
    )
}
