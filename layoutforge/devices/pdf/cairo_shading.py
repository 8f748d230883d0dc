# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cairo Gradient Module

Linear gradients handed out by the Cairo sink. The renderer adds colour
stops one at a time and then uses the gradient as a fill colour; the
gradient is anchored in the user space in effect when the path is painted.
"""

import cairo

from .cairo_utils import _safe_rgb


class LinearGradient:
    """Axial gradient between two points, padded beyond both ends."""

    def __init__(self, x1, y1, x2, y2):
        self.pattern = cairo.LinearGradient(x1, y1, x2, y2)
        self.pattern.set_extend(cairo.EXTEND_PAD)
        self.stops = []

    def stop(self, offset, color, opacity=1):
        """Add a colour stop at ``offset`` (0..1); returns self for chaining."""
        r, g, b = _safe_rgb(color)
        self.pattern.add_color_stop_rgba(offset, r, g, b, opacity)
        self.stops.append((offset, color, opacity))
        return self
