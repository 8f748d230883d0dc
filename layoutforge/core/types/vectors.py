# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LayoutForge Types Vector Classes Module

Vector shapes produced by the layout engine. A shape carries its own line
style and paint; the render pass fills in defaults for anything left unset.
"""

from typing import Optional, Sequence, Union


class Point(object):
    __slots__ = ("x", "y")

    def __init__(self, x: Union[int, float], y: Union[int, float]) -> None:
        self.x = x
        self.y = y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


class Dash(object):
    """Dash pattern: dash length, gap (defaults to the length) and phase."""
    __slots__ = ("length", "space", "phase")

    def __init__(self, length: float, space: Optional[float] = None, phase: float = 0) -> None:
        self.length = length
        self.space = space
        self.phase = phase


class PatternFill(object):
    """
    Marker used as a fill colour to paint with a registered pattern.

    ``color`` is only used by uncoloured patterns, which take their paint
    from the shape instead of their own content.
    """
    __slots__ = ("name", "color")

    def __init__(self, name: str, color=None) -> None:
        self.name = name
        self.color = color


class VectorShape(object):
    """Base class for the standard shape vocabulary."""

    TYPE = None

    def __init__(self, line_width: Optional[float] = None, dash: Optional[Dash] = None,
                 line_join: Optional[str] = None, line_cap: Optional[str] = None,
                 color=None, line_color=None, fill_opacity: Optional[float] = None,
                 stroke_opacity: Optional[float] = None,
                 linear_gradient: Optional[Sequence] = None) -> None:
        self.line_width = line_width
        self.dash = dash
        self.line_join = line_join
        self.line_cap = line_cap
        self.color = color
        self.line_color = line_color
        self.fill_opacity = fill_opacity
        self.stroke_opacity = stroke_opacity
        self.linear_gradient = linear_gradient


class Ellipse(VectorShape):
    TYPE = "ellipse"

    def __init__(self, x: float, y: float, r1: float, r2: Optional[float] = None, **style) -> None:
        super().__init__(**style)
        self.x = x
        self.y = y
        self.r1 = r1
        self.r2 = r1 if r2 is None else r2


class Rect(VectorShape):
    TYPE = "rect"

    def __init__(self, x: float, y: float, w: float, h: float, r: Optional[float] = None,
                 **style) -> None:
        super().__init__(**style)
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.r = r


class Line(VectorShape):
    TYPE = "line"

    def __init__(self, x1: float, y1: float, x2: float, y2: float, **style) -> None:
        super().__init__(**style)
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2


class Polyline(VectorShape):
    TYPE = "polyline"

    def __init__(self, points: Sequence[Point], close_path: bool = False, **style) -> None:
        super().__init__(**style)
        self.points = list(points)
        self.close_path = close_path


class SvgPath(VectorShape):
    """A path given as SVG path data, handed to the sink untouched."""
    TYPE = "path"

    def __init__(self, d: str, **style) -> None:
        super().__init__(**style)
        self.d = d
