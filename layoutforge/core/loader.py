# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Layout Loader Module

Builds a typed Document from the layout engine's output, a JSON-compatible
mapping using the engine's camelCase keys:

    {
        "pages": [
            {"pageSize": {"width": 595.28, "height": 841.89},
             "items": [{"type": "vector", "item": {"type": "rect", ...}},
                       {"type": "line", "item": {"x": 40, "y": 40, "inlines": [...]}}],
             "watermark": {"text": "DRAFT", "fontSize": 40, ...}}
        ],
        "patterns": {"stripe": {"bbox": [0, 0, 4, 4], "xStep": 4, "yStep": 4,
                                "content": "1 w 0 0 m 4 4 l s"}},
        "pageNumbers": {"chapter-2": 3},
        "info": {"title": "Report"}
    }

Inline and watermark fonts are given by family plus ``bold``/``italics``
flags and resolved through the font provider while loading, so an unknown
font fails before anything is drawn.

Unknown item and vector types are skipped; structurally invalid input
raises LayoutDataError.
"""

import json
import logging

from . import types as lf
from .error import LayoutDataError, PageSizeError
from .font_provider import DEFAULT_FONT, FontProvider
from .page_sizes import fix_page_size

logger = logging.getLogger(__name__)

# Standard shape type -> constructor argument names, in layout key order
_SHAPE_FIELDS = {
    lf.Ellipse.TYPE: ('x', 'y', 'r1', 'r2'),
    lf.Rect.TYPE: ('x', 'y', 'w', 'h', 'r'),
    lf.Line.TYPE: ('x1', 'y1', 'x2', 'y2'),
}

# Extended instruction type -> (layout key, constructor argument) pairs
_EXTENDED_FIELDS = {
    lf.RotateContext.TYPE: (('angle', 'angle'), ('origin', 'origin')),
    lf.TranslateContext.TYPE: (('x', 'x'), ('y', 'y')),
    lf.ScaleContext.TYPE: (('scale', 'scale'), ('origin', 'origin')),
    lf.LineStyle.TYPE: (('lineWidth', 'line_width'), ('dash', 'dash')),
    lf.StrokeColor.TYPE: (('strokeColor', 'color'), ('strokeOpacity', 'opacity')),
    lf.FillColor.TYPE: (('fillColor', 'color'), ('fillOpacity', 'opacity')),
    lf.StrokePath.TYPE: (('strokeColor', 'color'),),
    lf.FillPath.TYPE: (('fillColor', 'color'),),
    lf.FillAndStrokePath.TYPE: (('fillColor', 'fill_color'), ('strokeColor', 'stroke_color')),
    lf.MoveTo.TYPE: (('x', 'x'), ('y', 'y')),
    lf.LineTo.TYPE: (('x', 'x'), ('y', 'y')),
    lf.XLine.TYPE: (('x1', 'x1'), ('y1', 'y1'), ('x2', 'x2'), ('y2', 'y2')),
    lf.XRect.TYPE: (('x', 'x'), ('y', 'y'), ('width', 'width'), ('height', 'height')),
    lf.XEllipse.TYPE: (('cx', 'cx'), ('cy', 'cy'), ('rx', 'rx'), ('ry', 'ry')),
    lf.QuadraticCurve.TYPE: (('cpx', 'cpx'), ('cpy', 'cpy'), ('x2', 'x2'), ('y2', 'y2'),
                             ('x1', 'x1'), ('y1', 'y1')),
    lf.BezierCurve.TYPE: (('cpx1', 'cpx1'), ('cpy1', 'cpy1'), ('cpx2', 'cpx2'),
                          ('cpy2', 'cpy2'), ('x2', 'x2'), ('y2', 'y2'),
                          ('x1', 'x1'), ('y1', 'y1')),
    lf.ClipToRect.TYPE: (('x', 'x'), ('y', 'y'), ('width', 'width'), ('height', 'height')),
}


def load_document_file(path, font_provider=None) -> lf.Document:
    """Read layout output from a JSON file and load it."""
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise LayoutDataError(f"{path}: invalid JSON: {exc}") from exc
    return load_document(data, font_provider)


def load_document(data, font_provider=None) -> lf.Document:
    """
    Build a Document from layout output.

    Args:
        data: Layout output mapping (see module docstring)
        font_provider: FontProvider resolving inline fonts (default fonts when None)

    Raises:
        LayoutDataError: the data is structurally invalid
        FontNotFoundError: a font/style is not configured in the provider
    """
    if not isinstance(data, dict):
        raise LayoutDataError("Layout output must be a mapping")
    if font_provider is None:
        font_provider = FontProvider()

    pages_data = data.get('pages')
    if not isinstance(pages_data, list):
        raise LayoutDataError("Layout output has no 'pages' list")

    patterns = {name: _load_pattern(name, pattern)
                for name, pattern in (data.get('patterns') or {}).items()}

    loader = _Loader(font_provider, patterns)
    pages = [loader.page(page, index) for index, page in enumerate(pages_data)]

    page_numbers = data.get('pageNumbers') or {}
    if not isinstance(page_numbers, dict):
        raise LayoutDataError("'pageNumbers' must map ids to page numbers")

    document = lf.Document(pages, patterns=patterns, page_numbers=page_numbers,
                           info=data.get('info'))
    logger.debug("Loaded %d pages, %d patterns", len(pages), len(patterns))
    return document


def _require(data, key, where):
    try:
        return data[key]
    except (KeyError, TypeError):
        raise LayoutDataError(f"{where}: missing '{key}'") from None


def _point(data):
    if data is None:
        return None
    if isinstance(data, dict):
        return lf.Point(_require(data, 'x', 'point'), _require(data, 'y', 'point'))
    if isinstance(data, (list, tuple)) and len(data) == 2:
        return lf.Point(data[0], data[1])
    raise LayoutDataError(f"Invalid point: {data!r}")


def _dash(data):
    if not data:
        return None
    return lf.Dash(_require(data, 'length', 'dash'), data.get('space'), data.get('phase', 0))


def _page_reference(data):
    if data is None:
        return None
    if isinstance(data, str):
        return lf.PageReference(data)
    if isinstance(data, dict):
        return lf.PageReference(_require(data, 'id', 'pageReference'))
    raise LayoutDataError(f"Invalid page reference: {data!r}")


def _load_pattern(name, data):
    where = f"pattern {name!r}"
    bbox = _require(data, 'bbox', where)
    if not isinstance(bbox, (list, tuple)) or len(bbox) != 4:
        raise LayoutDataError(f"{where}: 'bbox' must have four numbers")
    return lf.Pattern(bbox, _require(data, 'xStep', where), _require(data, 'yStep', where),
                      _require(data, 'content', where), data.get('colored', True))


class _Loader:
    """Converts page and item mappings, resolving fonts and pattern names."""

    def __init__(self, font_provider, patterns):
        self.font_provider = font_provider
        self.patterns = patterns

    def font(self, data):
        return self.font_provider.provide_font(data.get('font') or DEFAULT_FONT,
                                               bool(data.get('bold')), bool(data.get('italics')))

    def page(self, data, index):
        where = f"page {index + 1}"
        if not isinstance(data, dict):
            raise LayoutDataError(f"{where}: page must be a mapping")
        try:
            page_size = fix_page_size(data.get('pageSize'), data.get('pageOrientation'))
        except PageSizeError as exc:
            raise LayoutDataError(f"{where}: {exc}") from exc

        items = []
        for entry in data.get('items') or []:
            item = self.item(entry, where)
            if item is not None:
                items.append(item)

        watermark = data.get('watermark')
        return lf.Page(page_size, items, self.watermark(watermark) if watermark else None)

    def item(self, entry, where):
        item_type = _require(entry, 'type', where)
        data = entry.get('item')

        if item_type == lf.ITEM_VECTOR:
            return self.vector(_require(entry, 'item', where))
        if item_type == lf.ITEM_LINE:
            return self.line(_require(entry, 'item', where))
        if item_type == lf.ITEM_IMAGE:
            return self.image(_require(entry, 'item', where))
        if item_type == lf.ITEM_SVG:
            return self.svg(_require(entry, 'item', where))
        if item_type == lf.ITEM_BEGIN_CLIP:
            return lf.BeginClip(_require(data, 'x', 'beginClip'), _require(data, 'y', 'beginClip'),
                                _require(data, 'width', 'beginClip'),
                                _require(data, 'height', 'beginClip'))
        if item_type == lf.ITEM_END_CLIP:
            return lf.EndClip()

        logger.debug("%s: skipping unknown item type %r", where, item_type)
        return None

    # Vectors

    def vector(self, data):
        vector_type = _require(data, 'type', 'vector')

        if vector_type.startswith(lf.EXTENDED_PREFIX):
            return self.extended(vector_type, data)

        style = dict(
            line_width=data.get('lineWidth'),
            dash=_dash(data.get('dash')),
            line_join=data.get('lineJoin'),
            line_cap=data.get('lineCap'),
            color=self.paint(data.get('color')),
            line_color=data.get('lineColor'),
            fill_opacity=data.get('fillOpacity'),
            stroke_opacity=data.get('strokeOpacity'),
            linear_gradient=data.get('linearGradient'),
        )

        if vector_type in _SHAPE_FIELDS:
            shape = {lf.Ellipse.TYPE: lf.Ellipse, lf.Rect.TYPE: lf.Rect,
                     lf.Line.TYPE: lf.Line}[vector_type]
            names = _SHAPE_FIELDS[vector_type]
            # Radii and corner radius are optional
            required = names[:4] if vector_type != lf.Ellipse.TYPE else names[:3]
            args = {name: (_require(data, name, vector_type) if name in required else data.get(name))
                    for name in names}
            return shape(**args, **style)
        if vector_type == lf.Polyline.TYPE:
            points = [_point(p) for p in data.get('points') or []]
            return lf.Polyline(points, bool(data.get('closePath')), **style)
        if vector_type == lf.SvgPath.TYPE:
            return lf.SvgPath(_require(data, 'd', vector_type), **style)

        logger.debug("Skipping unknown vector type %r", vector_type)
        return None

    def paint(self, color):
        """Turn a pattern name (or [name, color]) into a PatternFill, leave colours alone."""
        if isinstance(color, str) and color in self.patterns:
            return lf.PatternFill(color)
        if isinstance(color, list) and len(color) == 2 and isinstance(color[0], str) \
                and color[0] in self.patterns:
            return lf.PatternFill(color[0], color[1])
        return color

    def extended(self, vector_type, data):
        cls = lf.EXTENDED_INSTRUCTIONS.get(vector_type)
        if cls is None:
            logger.debug("Skipping unknown extended instruction %r", vector_type)
            return None

        kwargs = {}
        for key, name in _EXTENDED_FIELDS.get(vector_type, ()):
            value = data.get(key)
            if key == 'origin':
                value = _point(value)
            elif key == 'dash':
                value = _dash(value)
            if value is not None:
                kwargs[name] = value
        try:
            return cls(**kwargs)
        except TypeError as exc:
            raise LayoutDataError(f"{vector_type}: {exc}") from exc

    # Text

    def inline(self, data):
        text = data.get('text', '')
        return lf.Inline(
            str(text),
            self.font(data),
            _require(data, 'fontSize', 'inline'),
            x=data.get('x', 0),
            width=data.get('width', 0),
            height=data.get('height'),
            color=data.get('color'),
            opacity=data.get('opacity'),
            alignment=data.get('alignment'),
            link=data.get('link'),
            link_to_page=data.get('linkToPage'),
            link_to_destination=data.get('linkToDestination'),
            sup=bool(data.get('sup')),
            sub=bool(data.get('sub')),
            character_spacing=data.get('characterSpacing'),
            font_features=data.get('fontFeatures'),
            page_reference=_page_reference(data.get('pageReference')),
            background=data.get('background'),
            decoration=data.get('decoration'),
            decoration_color=data.get('decorationColor'),
            decoration_style=data.get('decorationStyle'),
            justify_shift=data.get('justifyShift', 0),
        )

    def line(self, data):
        inlines = [self.inline(inline) for inline in data.get('inlines') or []]
        return lf.TextLine(
            inlines,
            data.get('x', 0),
            data.get('y', 0),
            height=data.get('height', 0),
            ascender_height=data.get('ascenderHeight', 0),
            id=data.get('id'),
            page_reference=_page_reference(data.get('pageReference')),
        )

    def watermark(self, data):
        size = data.get('size') or {}
        return lf.Watermark(
            _require(data, 'text', 'watermark'),
            self.font(data),
            data.get('fontSize', size.get('fontSize')),
            data.get('width', size.get('width')),
            data.get('height', size.get('height')),
            color=data.get('color') or lf.DEFAULT_COLOR,
            opacity=data.get('opacity', 0.6),
            angle=data.get('angle'),
        )

    # Images and SVG

    def image(self, data):
        cover = data.get('cover')
        return lf.Image(
            _require(data, 'image', 'image'),
            _require(data, 'x', 'image'),
            _require(data, 'y', 'image'),
            data.get('width', data.get('_width')),
            data.get('height', data.get('_height')),
            opacity=data.get('opacity'),
            link=data.get('link'),
            link_to_page=data.get('linkToPage'),
            link_to_destination=data.get('linkToDestination'),
            cover=lf.CoverFit(cover.get('width'), cover.get('height'),
                              cover.get('align'), cover.get('valign')) if cover else None,
            x_image=bool(data.get('xImage')),
            rotation=data.get('rotation') or 0,
            rotation_origin=_point(data.get('rotationOrigin')),
            flip_h=bool(data.get('xImageFlipH')),
            flip_v=bool(data.get('xImageFlipV')),
        )

    def svg(self, data):
        return lf.SvgFragment(
            _require(data, 'svg', 'svg'),
            _require(data, 'x', 'svg'),
            _require(data, 'y', 'svg'),
            data.get('width', data.get('_width')),
            data.get('height', data.get('_height')),
            font=data.get('font'),
            options=data.get('options'),
        )
