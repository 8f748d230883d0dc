# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shared Page Rendering Module

This module provides the page render driver: it walks the laid-out pages in
order and dispatches every item to the renderer for its kind.

Architecture:
- render_pages() is the main entry point for device implementations
- vectors / extended_vectors: standard shapes and raw graphics-state instructions
- text / text_decorations: laid-out text lines
- images: raster images and page watermarks
- svg: embedded SVG fragments

The driver owns page creation. The sink's configured page size is swapped
whenever a page's orientation differs from it, so portrait and landscape
pages can be mixed freely in one document.
"""

import logging

from ...core import types as lf
from .images import render_image, render_watermark
from .svg import make_font_callback, render_svg
from .text import render_line
from .vectors import render_vector

logger = logging.getLogger(__name__)


def render_pages(pages, font_provider, sink, patterns=None, progress_callback=None,
                 page_numbers=None, default_font=None) -> None:
    """
    Render every page and item onto the sink.

    This is the main entry point for rendering. Device implementations should:
    1. Create the sink with the document's initial page size
    2. Resolve the document's patterns into sink pattern handles
    3. Call this function
    4. Finalize output (write the file, compress, ...)

    Args:
        pages: Ordered Page list from the layout engine
        font_provider: Font provider used for SVG text
        sink: Drawing sink to render to
        patterns: Pattern name -> sink pattern handle
        progress_callback: Called after each item with the fraction of items rendered
        page_numbers: Destination id -> page number table for deferred page references
        default_font: Family used for SVG text whose font-family is not configured

    Raises:
        UnresolvedReferenceError: a page reference target is missing from page_numbers
        FontNotFoundError: SVG text asked for a font/style that is not configured
    """
    sink.layout_pages = pages
    sink.add_page()

    total_items = sum(len(page.items) for page in pages) if progress_callback else 0
    rendered_items = 0

    for page_index, page in enumerate(pages):
        if page_index > 0:
            _update_page_orientation(page, sink)
            sink.add_page()

        for item in page.items:
            _render_item(item, font_provider, sink, patterns, page_numbers, default_font)
            rendered_items += 1
            if progress_callback:
                progress_callback(rendered_items / total_items)

        if page.watermark is not None:
            render_watermark(page, sink)

    logger.debug("Rendered %d pages", len(pages))


def _update_page_orientation(page, sink) -> None:
    """Swap the sink's configured width/height if the page's orientation differs."""
    width, height = sink.page_size
    previous_orientation = lf.LANDSCAPE if width > height else lf.PORTRAIT
    if page.page_size.orientation != previous_orientation:
        sink.page_size = (height, width)


def _render_item(item, font_provider, sink, patterns, page_numbers, default_font) -> None:
    if isinstance(item, (lf.VectorShape, lf.ExtendedInstruction)):
        render_vector(item, sink, patterns)
        return

    if isinstance(item, lf.TextLine):
        render_line(item, item.x, item.y, sink, page_numbers)
        return

    if isinstance(item, lf.Image):
        render_image(item, sink)
        return

    if isinstance(item, lf.SvgFragment):
        font_callback = make_font_callback(font_provider, item.font or default_font)
        render_svg(item, sink, font_callback)
        return

    if isinstance(item, lf.BeginClip):
        sink.save()
        sink.raw_rect(item.x, item.y, item.width, item.height)
        sink.clip()
        return

    if isinstance(item, lf.EndClip):
        sink.restore()
        return

    logger.debug("Ignoring unknown render item %r", type(item).__name__)
