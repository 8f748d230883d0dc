# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cairo PDF Sink

The drawing sink the render pass writes to when producing PDF. It exposes
the drawing-command vocabulary used by the shared renderers (graphics state,
transforms, paths, painting, text, images and link annotations) and carries
it out on a Cairo PDFSurface.

Coordinates are PDF points with the origin at the top-left of the page and
y growing downwards, which is Cairo's native user space, so no flip is
needed anywhere.

Cairo has a single source per context while documents track a fill and a
stroke colour independently. The sink therefore keeps its own paint state
(fill/stroke source and opacity) which is pushed and popped in step with
the Cairo graphics state and applied right before each paint operation.

Every page gets a fresh Cairo context, so no graphics state (clips,
transforms, unbalanced saves) leaks from one page to the next.
"""

import logging
import math

import cairo

from .cairo_images import cover_placement, load_image_surface, paint_image
from .cairo_patterns import TilingPattern, build_tiling_pattern
from .cairo_shading import LinearGradient
from .cairo_utils import _line_cap, _line_join, _quote_attribute, _safe_rgb
from .path_data import append_svg_path

logger = logging.getLogger(__name__)

# Control point distance for approximating a quarter ellipse with a cubic curve
_KAPPA = 4.0 * ((math.sqrt(2) - 1.0) / 3.0)

_SOLID = 'solid'
_GRADIENT = 'gradient'
_PATTERN = 'pattern'


class _PaintState:
    """Fill/stroke sources and opacities, saved and restored with the graphics state."""

    __slots__ = ('fill', 'stroke', 'fill_opacity', 'stroke_opacity')

    def __init__(self):
        self.fill = (_SOLID, (0, 0, 0))
        self.stroke = (_SOLID, (0, 0, 0))
        self.fill_opacity = 1
        self.stroke_opacity = 1

    def copy(self):
        state = _PaintState()
        state.fill = self.fill
        state.stroke = self.stroke
        state.fill_opacity = self.fill_opacity
        state.stroke_opacity = self.stroke_opacity
        return state


def _paint_source(color):
    """Convert a colour argument (string, sequence, gradient or pattern) to a paint source."""
    if isinstance(color, LinearGradient):
        return (_GRADIENT, color.pattern)
    if isinstance(color, TilingPattern):
        return (_PATTERN, color, None)
    if isinstance(color, (tuple, list)) and len(color) == 2 and isinstance(color[0], TilingPattern):
        return (_PATTERN, color[0], _safe_rgb(color[1]))
    return (_SOLID, _safe_rgb(color))


class CairoSink:
    """
    Drawing sink backed by a Cairo PDFSurface.

    Args:
        target: File path or binary file-like object receiving the PDF
        page_size: (width, height) of the first page in points
    """

    def __init__(self, target, page_size):
        width, height = page_size
        self.surface = cairo.PDFSurface(target, width, height)
        self.context = None
        self.layout_pages = None
        self.pages_written = 0
        self.page_width = width
        self.page_height = height
        self._page_size = (width, height)
        self._state = _PaintState()
        self._state_stack = []
        self._font = None
        self._font_size = 12

    # Pages

    @property
    def page_size(self):
        """Size used for pages added from now on."""
        return self._page_size

    @page_size.setter
    def page_size(self, size):
        self._page_size = (size[0], size[1])

    def add_page(self) -> None:
        """Start a new page at the configured page size."""
        if self.pages_written > 0:
            self.surface.show_page()

        width, height = self._page_size
        self.surface.set_size(width, height)
        self.page_width = width
        self.page_height = height

        self.context = cairo.Context(self.surface)
        self._state = _PaintState()
        self._state_stack = []
        self.pages_written += 1

    def finalize(self) -> None:
        """Emit the last page and close the surface."""
        if self.pages_written > 0:
            self.surface.show_page()
        self.surface.finish()

    # Graphics state

    def save(self) -> None:
        self.context.save()
        self._state_stack.append(self._state.copy())

    def restore(self) -> None:
        self.context.restore()
        if self._state_stack:
            self._state = self._state_stack.pop()

    # Transforms

    def rotate(self, angle, origin=None) -> None:
        """Rotate by ``angle`` degrees (clockwise on the page) about ``origin``."""
        ox, oy = origin if origin is not None else (0, 0)
        ctx = self.context
        ctx.translate(ox, oy)
        ctx.rotate(math.radians(angle))
        ctx.translate(-ox, -oy)

    def translate(self, x, y) -> None:
        self.context.translate(x, y)

    def scale(self, sx, sy=None, origin=None) -> None:
        if sy is None:
            sy = sx
        ox, oy = origin if origin is not None else (0, 0)
        ctx = self.context
        ctx.translate(ox, oy)
        ctx.scale(sx, sy)
        ctx.translate(-ox, -oy)

    def transform(self, a, b, c, d, e, f) -> None:
        self.context.transform(cairo.Matrix(a, b, c, d, e, f))

    # Line style

    def line_width(self, width) -> None:
        self.context.set_line_width(width)

    def dash(self, length, space=None, phase=0) -> None:
        if space is None:
            space = length
        self.context.set_dash([length, space], phase or 0)

    def undash(self) -> None:
        self.context.set_dash([])

    def line_join(self, join) -> None:
        self.context.set_line_join(_line_join(join))

    def line_cap(self, cap) -> None:
        self.context.set_line_cap(_line_cap(cap))

    # Path construction

    def move_to(self, x, y) -> None:
        self.context.move_to(x, y)

    def line_to(self, x, y) -> None:
        self.context.line_to(x, y)

    def bezier_curve_to(self, cp1x, cp1y, cp2x, cp2y, x, y) -> None:
        self.context.curve_to(cp1x, cp1y, cp2x, cp2y, x, y)

    def quadratic_curve_to(self, cpx, cpy, x, y) -> None:
        """Append a quadratic curve, elevated to the equivalent cubic."""
        ctx = self.context
        if ctx.has_current_point():
            x0, y0 = ctx.get_current_point()
        else:
            x0, y0 = cpx, cpy
            ctx.move_to(x0, y0)
        ctx.curve_to(x0 + 2 / 3 * (cpx - x0), y0 + 2 / 3 * (cpy - y0),
                     x + 2 / 3 * (cpx - x), y + 2 / 3 * (cpy - y),
                     x, y)

    def rect(self, x, y, width, height) -> None:
        self.context.rectangle(x, y, width, height)

    def raw_rect(self, x, y, width, height) -> None:
        """Rectangle path used for clip brackets."""
        self.context.rectangle(x, y, width, height)

    def rounded_rect(self, x, y, width, height, radius=0) -> None:
        radius = max(0, min(radius, width / 2, height / 2))
        if not radius:
            self.rect(x, y, width, height)
            return
        ctx = self.context
        ctx.new_sub_path()
        ctx.arc(x + width - radius, y + radius, radius, -math.pi / 2, 0)
        ctx.arc(x + width - radius, y + height - radius, radius, 0, math.pi / 2)
        ctx.arc(x + radius, y + height - radius, radius, math.pi / 2, math.pi)
        ctx.arc(x + radius, y + radius, radius, math.pi, 3 * math.pi / 2)
        ctx.close_path()

    def ellipse(self, x, y, r1, r2=None) -> None:
        """Ellipse centred on (x, y) built from four cubic curves."""
        if r2 is None:
            r2 = r1
        ctx = self.context
        left = x - r1
        top = y - r2
        ox = r1 * _KAPPA
        oy = r2 * _KAPPA
        right = left + r1 * 2
        bottom = top + r2 * 2

        ctx.move_to(left, y)
        ctx.curve_to(left, y - oy, x - ox, top, x, top)
        ctx.curve_to(x + ox, top, right, y - oy, right, y)
        ctx.curve_to(right, y + oy, x + ox, bottom, x, bottom)
        ctx.curve_to(x - ox, bottom, left, y + oy, left, y)
        ctx.close_path()

    def close_path(self) -> None:
        self.context.close_path()

    def path(self, d) -> None:
        append_svg_path(self.context, d)

    # Colour

    def fill_color(self, color, opacity=None) -> None:
        self._state.fill = _paint_source(color)
        if opacity is not None:
            self._state.fill_opacity = opacity

    def stroke_color(self, color, opacity=None) -> None:
        self._state.stroke = _paint_source(color)
        if opacity is not None:
            self._state.stroke_opacity = opacity

    def opacity(self, value) -> None:
        """Set fill and stroke opacity together."""
        self._state.fill_opacity = value
        self._state.stroke_opacity = value

    def linear_gradient(self, x1, y1, x2, y2):
        return LinearGradient(x1, y1, x2, y2)

    def pattern(self, bbox, x_step, y_step, content, colored=True):
        return build_tiling_pattern(bbox, x_step, y_step, content, colored)

    # Painting

    def fill(self, color=None) -> None:
        if color is not None:
            self.fill_color(color)
        self._fill_path(preserve=False)

    def stroke(self, color=None) -> None:
        if color is not None:
            self.stroke_color(color)
        self._stroke_path(preserve=False)

    def fill_and_stroke(self, fill_color=None, stroke_color=None) -> None:
        if fill_color is not None:
            self.fill_color(fill_color)
        if stroke_color is not None:
            self.stroke_color(stroke_color)
        self._fill_path(preserve=True)
        self._stroke_path(preserve=False)

    def clip(self) -> None:
        self.context.clip()

    def _fill_path(self, preserve) -> None:
        ctx = self.context
        source = self._state.fill
        opacity = self._state.fill_opacity

        if source[0] == _SOLID:
            ctx.set_source_rgba(*source[1], opacity)
            if preserve:
                ctx.fill_preserve()
            else:
                ctx.fill()
            return

        # Non-solid sources are painted through a clip of the path
        ctx.save()
        try:
            ctx.clip_preserve()
            if source[0] == _PATTERN and not source[1].colored:
                r, g, b = source[2] or (0, 0, 0)
                ctx.set_source_rgba(r, g, b, opacity)
                ctx.mask(source[1].surface_pattern)
            else:
                ctx.set_source(source[1] if source[0] == _GRADIENT else source[1].surface_pattern)
                ctx.paint_with_alpha(opacity)
        finally:
            ctx.restore()
        if not preserve:
            ctx.new_path()

    def _stroke_path(self, preserve) -> None:
        ctx = self.context
        source = self._state.stroke
        opacity = self._state.stroke_opacity

        if source[0] == _SOLID:
            ctx.set_source_rgba(*source[1], opacity)
            if preserve:
                ctx.stroke_preserve()
            else:
                ctx.stroke()
            return

        if source[0] == _PATTERN and not source[1].colored:
            # Stencil patterns stroke in their underlying colour
            ctx.set_source_rgba(*(source[2] or (0, 0, 0)), opacity)
            if preserve:
                ctx.stroke_preserve()
            else:
                ctx.stroke()
            return

        ctx.push_group()
        ctx.set_source(source[1] if source[0] == _GRADIENT else source[1].surface_pattern)
        if preserve:
            ctx.stroke_preserve()
        else:
            ctx.stroke()
        ctx.pop_group_to_source()
        ctx.paint_with_alpha(opacity)

    def _set_text_source(self) -> None:
        ctx = self.context
        source = self._state.fill
        opacity = self._state.fill_opacity
        if source[0] == _SOLID:
            ctx.set_source_rgba(*source[1], opacity)
        elif source[0] == _GRADIENT:
            ctx.set_source(source[1])
        elif source[1].colored:
            ctx.set_source(source[1].surface_pattern)
        else:
            ctx.set_source_rgba(*(source[2] or (0, 0, 0)), opacity)

    # Text

    def font(self, font) -> None:
        self._font = font

    def font_size(self, size) -> None:
        self._font_size = size

    def text(self, text, x, y, line_break=False, text_width=None, character_spacing=None,
             features=None, link=None, go_to=None, destination=None) -> None:
        """
        Draw a single run of text whose glyph box top-left is (x, y).

        Text is never wrapped: runs arrive already broken into lines.
        ``features`` are accepted for API compatibility; Cairo's toy text
        API cannot select OpenType features.
        """
        if not text:
            return
        ctx = self.context
        font = self._font
        size = self._font_size

        ctx.set_font_face(font.face)
        ctx.set_font_size(size)
        self._set_text_source()
        baseline = y + font.ascender / 1000 * size

        tags = []
        if destination:
            tags.append((cairo.TAG_DEST, f"name={_quote_attribute(destination)}"))
        if link:
            tags.append((cairo.TAG_LINK, f"uri={_quote_attribute(link)}"))
        elif go_to:
            tags.append((cairo.TAG_LINK, f"dest={_quote_attribute(go_to)}"))

        for tag_name, attributes in tags:
            ctx.tag_begin(tag_name, attributes)

        if character_spacing:
            cursor = x
            for char in text:
                ctx.move_to(cursor, baseline)
                ctx.show_text(char)
                cursor += ctx.text_extents(char).x_advance + character_spacing
        else:
            ctx.move_to(x, baseline)
            ctx.show_text(text)
        ctx.new_path()

        for tag_name, _ in reversed(tags):
            ctx.tag_end(tag_name)

    # Images

    def image(self, src, x, y, width=None, height=None, cover=None,
              align='center', valign='center') -> None:
        """
        Place an image at (x, y).

        With ``cover=(w, h)`` the image is scaled to cover that box and
        aligned inside it; otherwise it is stretched to width x height, a
        missing dimension following the image's aspect ratio.
        """
        surface = load_image_surface(src)
        image_width = surface.get_width()
        image_height = surface.get_height()
        if not image_width or not image_height:
            logger.debug("Skipping zero sized image")
            return

        if cover is not None:
            dx, dy, width, height = cover_placement(image_width, image_height,
                                                    cover[0], cover[1], align, valign)
            x += dx
            y += dy
        elif width and not height:
            height = width * image_height / image_width
        elif height and not width:
            width = height * image_width / image_height
        elif not width and not height:
            width, height = image_width, image_height

        paint_image(self.context, surface, x, y, width, height, self._state.fill_opacity)

    # Links

    def link(self, x, y, width, height, url) -> None:
        self._link_area(x, y, width, height, f"uri={_quote_attribute(url)}")

    def go_to(self, x, y, width, height, name) -> None:
        self._link_area(x, y, width, height, f"dest={_quote_attribute(name)}")

    def annotate_page_link(self, x, y, width, height, page_number) -> None:
        """Link an area to the top of a 1-based page number."""
        self._link_area(x, y, width, height, f"page={int(page_number)} pos=[0 0]")

    def _link_area(self, x, y, width, height, target) -> None:
        attributes = f"rect=[{x} {y} {width} {height}] {target}"
        self.context.tag_begin(cairo.TAG_LINK, attributes)
        self.context.tag_end(cairo.TAG_LINK)
