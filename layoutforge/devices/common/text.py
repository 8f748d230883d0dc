# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Text Line Rendering Module

Places the inline runs of one laid-out line: background, glyphs, links and
destinations, then decorations. Deferred page-number references are
resolved here, once every page is known, by swapping in the real number and
re-anchoring the run to its aligned edge.
"""

import logging

from ...core import types as lf
from ...core.error import UnresolvedReferenceError
from .render_utils import _opacity_or_default
from .text_decorations import draw_background, draw_decorations

logger = logging.getLogger(__name__)


def resolve_page_reference(reference, inline, page_numbers) -> None:
    """
    Replace an inline's placeholder text with the referenced page number.

    The run is re-measured with its own font, size, character spacing and
    features, and shifted by the width change so right- and centre-aligned
    references stay anchored to their original edge.

    Raises:
        UnresolvedReferenceError: the target was never registered during layout
    """
    page_number = (page_numbers or {}).get(reference.target)
    if page_number is None:
        raise UnresolvedReferenceError(reference.target)

    inline.text = str(page_number)
    inline.link_to_page = page_number

    new_width = inline.font.width_of_string(inline.text, inline.font_size, inline.font_features)
    new_width += (inline.character_spacing or 0) * (len(inline.text) - 1)
    diff_width = inline.width - new_width
    inline.width = new_width

    if inline.alignment == lf.ALIGN_RIGHT:
        inline.x += diff_width
    elif inline.alignment == lf.ALIGN_CENTER:
        inline.x += diff_width / 2

    logger.debug("Resolved page reference %r to page %d", reference.target, page_number)


def baseline_shift(line, inline) -> float:
    """Vertical offset from the top of the line to the inline's glyph origin."""
    line_height = line.get_height()
    descent = line_height - line.get_ascender_height()
    shift = line_height - (inline.font.ascender / 1000 * inline.font_size) - descent

    if inline.sup:
        shift -= inline.font_size * lf.SUPERSCRIPT_SHIFT
    if inline.sub:
        shift += inline.font_size * lf.SUBSCRIPT_SHIFT
    return shift


def render_line(line, x, y, sink, page_numbers=None) -> None:
    """
    Render one TextLine at (x, y).

    Args:
        line: TextLine to render
        x, y: Position of the line's top-left corner
        sink: Drawing sink
        page_numbers: Destination id -> page number table for deferred references
    """
    if line.page_reference is not None and line.inlines:
        resolve_page_reference(line.page_reference, line.inlines[0], page_numbers)

    x = x or 0
    y = y or 0

    draw_background(line, x, y, sink)

    for index, inline in enumerate(line.inlines):
        if inline.page_reference is not None:
            resolve_page_reference(inline.page_reference, inline, page_numbers)

        shift_to_baseline = baseline_shift(line, inline)

        sink.fill_color(inline.color or lf.DEFAULT_COLOR, _opacity_or_default(inline.opacity))
        sink.font(inline.font)
        sink.font_size(inline.font_size)
        sink.text(
            inline.text,
            x + inline.x,
            y + shift_to_baseline,
            line_break=False,
            text_width=inline.width,
            character_spacing=inline.character_spacing,
            features=inline.font_features,
            link=inline.link,
            go_to=inline.link_to_destination,
            destination=line.id if index == 0 else None,
        )

        if inline.link_to_page:
            sink.annotate_page_link(x + inline.x, y + shift_to_baseline,
                                    inline.width, inline.height, inline.link_to_page)

    draw_decorations(line, x, y, sink)
