# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SVG path data support for the Cairo sink.

Path strings (``"M 0 0 L 10 10 Q 20 0 30 10 A 5 5 0 0 1 40 10 Z"``) are
parsed by fontTools' SVG path parser, which reports segments to a pen; the
pen below appends them to the Cairo context's current path. Quadratic
segments and arcs arrive already converted to cubic curves.
"""

from fontTools.pens.basePen import BasePen
from fontTools.svgLib.path import parse_path


class CairoPathPen(BasePen):
    """Pen that builds the current path of a Cairo context."""

    def __init__(self, cairo_ctx):
        super().__init__(None)
        self.cairo_ctx = cairo_ctx

    def _moveTo(self, pt):
        self.cairo_ctx.move_to(*pt)

    def _lineTo(self, pt):
        self.cairo_ctx.line_to(*pt)

    def _curveToOne(self, pt1, pt2, pt3):
        self.cairo_ctx.curve_to(pt1[0], pt1[1], pt2[0], pt2[1], pt3[0], pt3[1])

    def _closePath(self):
        self.cairo_ctx.close_path()

    def _endPath(self):
        pass


def append_svg_path(cairo_ctx, d: str) -> None:
    """Append the segments of SVG path data ``d`` to the context's current path."""
    parse_path(d, CairoPathPen(cairo_ctx))
