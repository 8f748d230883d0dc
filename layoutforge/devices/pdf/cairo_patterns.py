# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cairo Tiling Pattern Module

Builds repeating fill patterns from a pattern cell description: a bounding
box, a horizontal and vertical step and a small PDF content stream that
paints one cell (for example ``"1 w 0 0 m 4 4 l s"``).

The content stream is parsed with pypdf's ContentStream and its operations
are replayed onto a Cairo recording surface the size of one step, which is
then wrapped in a repeating surface pattern.

Supported operators:
- path construction: m l c v y h re
- painting: f F f* S s B B* b b* n
- graphics state: q Q cm w J j d
- colour: g G rg RG k K

Uncoloured patterns ignore the colours in their content stream; they are
painted through as a mask in the colour supplied at fill time.
"""

import logging

import cairo
from pypdf.errors import PdfReadError
from pypdf.generic import ArrayObject, ContentStream, DecodedStreamObject

logger = logging.getLogger(__name__)


class TilingPattern:
    """A repeating pattern ready to be used as a Cairo source or mask."""

    __slots__ = ('surface', 'surface_pattern', 'colored')

    def __init__(self, surface, colored):
        self.surface = surface
        self.surface_pattern = cairo.SurfacePattern(surface)
        self.surface_pattern.set_extend(cairo.EXTEND_REPEAT)
        self.colored = colored


def build_tiling_pattern(bbox, x_step, y_step, content, colored=True) -> TilingPattern:
    """
    Render one pattern cell and wrap it in a repeating pattern.

    Args:
        bbox: Cell bounding box [x0, y0, x1, y1] in pattern space
        x_step: Horizontal repeat distance
        y_step: Vertical repeat distance
        content: PDF content stream painting one cell
        colored: False for stencil patterns coloured at fill time
    """
    x0, y0 = bbox[0], bbox[1]
    width = x_step or (bbox[2] - bbox[0])
    height = y_step or (bbox[3] - bbox[1])

    surface = cairo.RecordingSurface(cairo.CONTENT_COLOR_ALPHA,
                                     cairo.Rectangle(x0, y0, width, height))
    pattern_ctx = cairo.Context(surface)
    _run_content_stream(content, pattern_ctx, colored)
    surface.flush()
    return TilingPattern(surface, colored)


def _run_content_stream(content, pattern_ctx, colored) -> None:
    if isinstance(content, str):
        content = content.encode('latin-1')
    stream = DecodedStreamObject()
    stream.set_data(content or b'')

    try:
        operations = ContentStream(stream, None).operations
    except PdfReadError as exc:
        logger.warning("Cannot parse pattern content stream: %s", exc)
        return

    for operands, operator in operations:
        operator = operator.decode('latin-1')
        try:
            _execute(operator, [_operand(value) for value in operands], pattern_ctx, colored)
        except (IndexError, TypeError, ValueError, cairo.Error) as exc:
            logger.warning("Skipping malformed pattern operator '%s': %s", operator, exc)


def _operand(value):
    if isinstance(value, ArrayObject):
        return [float(item) for item in value]
    if isinstance(value, (int, float)):
        return float(value)
    return value


def _execute(operator, operands, pattern_ctx, colored) -> None:
    if operator == 'm':
        pattern_ctx.move_to(operands[0], operands[1])
    elif operator == 'l':
        pattern_ctx.line_to(operands[0], operands[1])
    elif operator == 'c':
        pattern_ctx.curve_to(*operands[:6])
    elif operator == 'v':
        x, y = pattern_ctx.get_current_point()
        pattern_ctx.curve_to(x, y, *operands[:4])
    elif operator == 'y':
        pattern_ctx.curve_to(operands[0], operands[1], operands[2], operands[3],
                             operands[2], operands[3])
    elif operator == 'h':
        pattern_ctx.close_path()
    elif operator == 're':
        pattern_ctx.rectangle(*operands[:4])

    elif operator in ('f', 'F', 'f*'):
        pattern_ctx.set_fill_rule(cairo.FILL_RULE_EVEN_ODD if operator == 'f*'
                                  else cairo.FILL_RULE_WINDING)
        pattern_ctx.fill()
    elif operator in ('S', 's'):
        if operator == 's':
            pattern_ctx.close_path()
        pattern_ctx.stroke()
    elif operator in ('B', 'B*', 'b', 'b*'):
        if operator.startswith('b'):
            pattern_ctx.close_path()
        pattern_ctx.set_fill_rule(cairo.FILL_RULE_EVEN_ODD if operator.endswith('*')
                                  else cairo.FILL_RULE_WINDING)
        pattern_ctx.fill_preserve()
        pattern_ctx.stroke()
    elif operator == 'n':
        pattern_ctx.new_path()

    elif operator == 'q':
        pattern_ctx.save()
    elif operator == 'Q':
        pattern_ctx.restore()
    elif operator == 'cm':
        pattern_ctx.transform(cairo.Matrix(*operands[:6]))
    elif operator == 'w':
        pattern_ctx.set_line_width(operands[0])
    elif operator == 'J':
        pattern_ctx.set_line_cap((cairo.LINE_CAP_BUTT, cairo.LINE_CAP_ROUND,
                                  cairo.LINE_CAP_SQUARE)[int(operands[0])])
    elif operator == 'j':
        pattern_ctx.set_line_join((cairo.LINE_JOIN_MITER, cairo.LINE_JOIN_ROUND,
                                   cairo.LINE_JOIN_BEVEL)[int(operands[0])])
    elif operator == 'd':
        pattern_ctx.set_dash(operands[0], operands[1])

    elif operator in ('g', 'G', 'rg', 'RG', 'k', 'K'):
        # Stencil patterns keep the default opaque black
        if colored:
            pattern_ctx.set_source_rgb(*_device_color(operator, operands))

    else:
        logger.debug("Ignoring unsupported pattern operator '%s'", operator)


def _device_color(operator, operands):
    if operator in ('g', 'G'):
        return (operands[0], operands[0], operands[0])
    if operator in ('rg', 'RG'):
        return tuple(operands[:3])
    c, m, y, k = operands[:4]
    return ((1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k))
