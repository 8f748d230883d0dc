# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SVG Fragment Rendering Module

Converts an embedded SVG fragment into sink calls. The fragment is fitted
into its laid-out box from its viewBox (uniform scale, centred, like SVG's
default ``xMidYMid meet``) and walked element by element. Painting covers the
static subset a document layout needs: shapes, paths, groups, transforms,
fill/stroke/opacity presentation attributes and plain text.

Text fonts are resolved through a font callback ``(family, bold, italic)``
that maps a CSS font-family list onto the document's configured fonts.
"""

import logging
import math
import re
import xml.etree.ElementTree as ET

from tinycss2 import parse_declaration_list, serialize

from ...core.error import LayoutDataError
from .render_utils import saved_state

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_TRANSFORM_RE = re.compile(r"(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)")

# Presentation attributes inherited by child elements
_INHERITED = ('fill', 'stroke', 'stroke-width', 'fill-opacity', 'stroke-opacity',
              'font-family', 'font-size', 'font-weight', 'font-style', 'text-anchor', 'color')

_DEFAULT_STYLE = {
    'fill': 'black',
    'stroke': 'none',
    'stroke-width': '1',
    'fill-opacity': '1',
    'stroke-opacity': '1',
    'opacity': '1',
    'font-size': '16',
    'font-weight': 'normal',
    'font-style': 'normal',
    'text-anchor': 'start',
}


def make_font_callback(font_provider, default_font):
    """
    Build the font callback used for SVG text.

    The first family of the comma separated CSS list that the provider knows
    wins; otherwise the fragment's default font is used. A family without the
    requested style raises FontNotFoundError.
    """
    def font_callback(family, bold, italic):
        families = [name.strip().strip('\'"') for name in (family or '').split(',')]
        font = next((name for name in families if name and name in font_provider), default_font)
        return font_provider.provide_font(font, bold, italic)

    return font_callback


def render_svg(svg, sink, font_callback) -> None:
    """Render an SvgFragment into its laid-out box."""
    try:
        root = ET.fromstring(svg.svg)
    except ET.ParseError as exc:
        raise LayoutDataError(f"Invalid SVG markup: {exc}") from exc

    view_box = _view_box(root)

    with saved_state(sink):
        sink.translate(svg.x, svg.y)
        if view_box is not None:
            vb_x, vb_y, vb_width, vb_height = view_box
            if vb_width > 0 and vb_height > 0:
                scale = min(svg.width / vb_width, svg.height / vb_height)
                sink.translate((svg.width - vb_width * scale) / 2,
                               (svg.height - vb_height * scale) / 2)
                sink.scale(scale, scale)
                sink.translate(-vb_x, -vb_y)

        _render_children(root, dict(_DEFAULT_STYLE), sink, font_callback)


def _view_box(root):
    view_box = root.get('viewBox')
    if view_box:
        numbers = [float(n) for n in _NUMBER_RE.findall(view_box)]
        if len(numbers) == 4:
            return tuple(numbers)
    width = root.get('width')
    height = root.get('height')
    if width and height:
        return (0, 0, _length(width), _length(height))
    return None


def _local_name(tag):
    return tag.rsplit('}', 1)[-1] if isinstance(tag, str) else ''


def _length(value, default=0.0):
    if value is None:
        return default
    match = _NUMBER_RE.match(str(value).strip())
    return float(match.group()) if match else default


def _numbers(value):
    return [float(n) for n in _NUMBER_RE.findall(value or '')]


def _element_style(node, inherited):
    style = {key: inherited[key] for key in _INHERITED if key in inherited}
    style['opacity'] = '1'
    for key in _DEFAULT_STYLE:
        if node.get(key) is not None:
            style[key] = node.get(key)
    if node.get('color') is not None:
        style['color'] = node.get('color')
    style.update(_inline_style(node.get('style')))
    return style


def _inline_style(text):
    """Parse a ``style`` attribute into property -> value, later declarations winning."""
    if not text:
        return {}
    declarations = {}
    for declaration in parse_declaration_list(text, skip_comments=True, skip_whitespace=True):
        if declaration.type != 'declaration':
            logger.debug("Ignoring malformed SVG style declaration in %r", text)
            continue
        declarations[declaration.lower_name] = serialize(declaration.value).strip()
    return declarations


def _apply_transform(transform, sink) -> None:
    for name, args in _TRANSFORM_RE.findall(transform):
        values = _numbers(args)
        if name == 'matrix' and len(values) == 6:
            sink.transform(*values)
        elif name == 'translate' and values:
            sink.translate(values[0], values[1] if len(values) > 1 else 0)
        elif name == 'scale' and values:
            sink.scale(values[0], values[1] if len(values) > 1 else values[0])
        elif name == 'rotate' and values:
            if len(values) == 3:
                sink.rotate(values[0], origin=(values[1], values[2]))
            else:
                sink.rotate(values[0])
        elif name == 'skewX' and values:
            sink.transform(1, 0, math.tan(math.radians(values[0])), 1, 0, 0)
        elif name == 'skewY' and values:
            sink.transform(1, math.tan(math.radians(values[0])), 0, 1, 0, 0)


def _render_children(node, style, sink, font_callback) -> None:
    for child in node:
        _render_node(child, style, sink, font_callback)


def _render_node(node, inherited, sink, font_callback) -> None:
    tag = _local_name(node.tag)
    if tag in ('defs', 'title', 'desc', 'metadata', 'style', 'clipPath', 'mask'):
        return

    style = _element_style(node, inherited)
    if style.get('display') == 'none' or style.get('visibility') == 'hidden':
        return

    transform = node.get('transform')
    if transform:
        with saved_state(sink):
            _apply_transform(transform, sink)
            _render_element(tag, node, style, sink, font_callback)
    else:
        _render_element(tag, node, style, sink, font_callback)


def _render_element(tag, node, style, sink, font_callback) -> None:
    if tag in ('g', 'svg', 'a', 'switch'):
        _render_children(node, style, sink, font_callback)
        return

    if tag == 'text':
        _render_text(node, style, sink, font_callback)
        return

    if not _has_paint(style):
        return

    if tag == 'path':
        d = node.get('d')
        if not d:
            return
        sink.path(d)
    elif tag == 'rect':
        x, y = _length(node.get('x')), _length(node.get('y'))
        width, height = _length(node.get('width')), _length(node.get('height'))
        if width <= 0 or height <= 0:
            return
        radius = _length(node.get('rx') or node.get('ry'))
        if radius:
            sink.rounded_rect(x, y, width, height, radius)
        else:
            sink.rect(x, y, width, height)
    elif tag == 'circle':
        r = _length(node.get('r'))
        if r <= 0:
            return
        sink.ellipse(_length(node.get('cx')), _length(node.get('cy')), r, r)
    elif tag == 'ellipse':
        rx, ry = _length(node.get('rx')), _length(node.get('ry'))
        if rx <= 0 or ry <= 0:
            return
        sink.ellipse(_length(node.get('cx')), _length(node.get('cy')), rx, ry)
    elif tag == 'line':
        sink.move_to(_length(node.get('x1')), _length(node.get('y1')))
        sink.line_to(_length(node.get('x2')), _length(node.get('y2')))
    elif tag in ('polyline', 'polygon'):
        values = _numbers(node.get('points'))
        points = list(zip(values[0::2], values[1::2]))
        if not points:
            return
        sink.move_to(*points[0])
        for point in points[1:]:
            sink.line_to(*point)
        if tag == 'polygon':
            sink.close_path()
    else:
        logger.debug("Skipping unsupported SVG element <%s>", tag)
        return

    _paint(style, sink)


def _color(style, key):
    value = style.get(key)
    if value == 'currentColor':
        value = style.get('color', 'black')
    if not value or value == 'none' or value.startswith('url('):
        return None
    return value


def _has_paint(style):
    return _color(style, 'fill') is not None or _color(style, 'stroke') is not None


def _paint(style, sink) -> None:
    opacity = _length(style.get('opacity'), 1)
    fill = _color(style, 'fill')
    stroke = _color(style, 'stroke')
    fill_opacity = _length(style.get('fill-opacity'), 1) * opacity
    stroke_opacity = _length(style.get('stroke-opacity'), 1) * opacity

    if stroke is not None:
        sink.line_width(_length(style.get('stroke-width'), 1))
    if fill is not None and stroke is not None:
        sink.fill_color(fill, fill_opacity)
        sink.stroke_color(stroke, stroke_opacity)
        sink.fill_and_stroke()
    elif fill is not None:
        sink.fill_color(fill, fill_opacity)
        sink.fill()
    else:
        sink.stroke_color(stroke, stroke_opacity)
        sink.stroke()


def _render_text(node, style, sink, font_callback) -> None:
    text = ' '.join(''.join(node.itertext()).split())
    fill = _color(style, 'fill')
    if not text or fill is None:
        return

    bold = style.get('font-weight') in ('bold', 'bolder') or _length(style.get('font-weight'), 400) >= 600
    italic = style.get('font-style') in ('italic', 'oblique')
    font = font_callback(style.get('font-family'), bold, italic)
    size = _length(style.get('font-size'), 16)

    x = _length(node.get('x'))
    y = _length(node.get('y'))
    anchor = style.get('text-anchor')
    if anchor in ('middle', 'end'):
        width = font.width_of_string(text, size)
        x -= width / 2 if anchor == 'middle' else width

    sink.fill_color(fill, _length(style.get('fill-opacity'), 1) * _length(style.get('opacity'), 1))
    sink.font(font)
    sink.font_size(size)
    # SVG positions text by its baseline, the sink by the top of the glyph box
    sink.text(text, x, y - font.ascender / 1000 * size, line_break=False)
