# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PDF Output Device

This module renders a laid-out Document to a PDF file using Cairo's
PDFSurface through the CairoSink and the shared render pass.

Document Lifecycle:
    1. Truncate the page list to ``max_pages`` and resolve auto page heights
    2. Create the sink at the first page's size
    3. Resolve the document's fill patterns into sink pattern handles (once)
    4. Run the render pass
    5. Finish the Cairo surface and post-process the file with pypdf:
       document metadata, content stream compression and the auto-print
       open action

Cairo writes uncompressed content streams and its own producer string, so
the pypdf pass is what gives the output its final shape.
"""

import io
import logging
import math
import os
import re

from pypdf import PdfReader, PdfWriter
from pypdf.generic import DictionaryObject, NameObject

from ...core import types as lf
from ...core.config import RenderOptions
from ...core.font_provider import DEFAULT_FONT, FontProvider
from ...core.page_sizes import calculate_page_height, fix_page_size
from ..common.renderer import render_pages
from .cairo_images import clear_image_cache
from .sink import CairoSink

logger = logging.getLogger(__name__)

# Suppress noisy "Multiple definitions in dictionary" warnings from pypdf
logging.getLogger('pypdf').setLevel(logging.ERROR)

PRODUCER = 'layoutforge'

# Document information keys reserved by the PDF standard
_STANDARD_INFO_KEYS = ('Title', 'Author', 'Subject', 'Keywords',
                       'Creator', 'Producer', 'CreationDate', 'ModDate', 'Trapped')


def create_pdf(document, output, fonts=None, options=None):
    """
    Render a Document to PDF.

    Args:
        document: Laid-out Document (see layoutforge.core.loader.load_document)
        output: Output file path, or a binary file-like object
        fonts: FontProvider, or a font descriptor mapping, used for SVG text
        options: RenderOptions (defaults apply when None)

    Returns:
        Number of pages written

    Raises:
        UnresolvedReferenceError: a page reference points at an unknown id
        FontNotFoundError: SVG text needs a font/style that is not configured
    """
    if options is None:
        options = RenderOptions()
    font_provider = fonts if isinstance(fonts, FontProvider) else FontProvider(fonts)

    pages = _limit_pages(document.pages, options.max_pages)
    if not pages:
        pages = [lf.Page(lf.PageSize(*_default_size()))]
    pages = _resolve_auto_height(pages, options.page_margins)

    first_size = pages[0].page_size
    buffer = io.BytesIO()
    sink = CairoSink(buffer, (first_size.width, first_size.height))
    patterns = resolve_patterns(document.patterns, sink)

    try:
        render_pages(pages, font_provider, sink,
                     patterns=patterns,
                     progress_callback=options.progress_callback,
                     page_numbers=document.page_numbers,
                     default_font=DEFAULT_FONT)
    finally:
        clear_image_cache()
    sink.finalize()

    info = dict(document.info)
    info.update(options.info or {})
    data = finalize_pdf(buffer.getvalue(), info,
                        compress=options.compress, auto_print=options.auto_print)
    _write_output(data, output)

    logger.info("Wrote %d page(s)", sink.pages_written)
    return sink.pages_written


def _default_size():
    size = fix_page_size()
    return size.width, size.height


def _limit_pages(pages, max_pages):
    if max_pages is not None and max_pages > -1:
        return list(pages[:max_pages])
    return list(pages)


def _resolve_auto_height(pages, page_margins):
    """Give auto-height (infinite) pages the height of their laid-out content."""
    if not any(math.isinf(page.page_size.height) for page in pages):
        return pages

    height = calculate_page_height(pages, page_margins)
    logger.debug("Auto page height resolved to %s", height)
    resolved = []
    for page in pages:
        size = page.page_size
        if math.isinf(size.height):
            # Orientation is recomputed from the resolved dimensions
            page = lf.Page(lf.PageSize(size.width, height),
                           page.items, page.watermark)
        resolved.append(page)
    return resolved


def resolve_patterns(patterns, sink):
    """Create one sink pattern handle per named document pattern."""
    return {
        name: sink.pattern(pattern.bbox, pattern.x_step, pattern.y_step,
                           pattern.content, pattern.colored)
        for name, pattern in (patterns or {}).items()
    }


def standardize_info_key(key):
    """
    Map a document info key to its PDF name.

    Standard keys may be given in lower case (``title`` -> ``Title``);
    custom keys keep their case but may not contain whitespace.
    """
    standardized = key[:1].upper() + key[1:]
    if standardized in _STANDARD_INFO_KEYS:
        return standardized
    return re.sub(r'\s+', '', key)


def build_metadata(info):
    metadata = {'/Producer': PRODUCER, '/Creator': PRODUCER}
    for key, value in (info or {}).items():
        if value:
            metadata['/' + standardize_info_key(key)] = str(value)
    return metadata


def finalize_pdf(data, info=None, compress=True, auto_print=False):
    """
    Post-process the PDF produced by Cairo.

    Writes document metadata, compresses content streams (best effort: an
    uncompressed PDF is still valid) and installs the auto-print action.
    """
    reader = PdfReader(io.BytesIO(data), strict=False)
    writer = PdfWriter(clone_from=reader)

    writer.add_metadata(build_metadata(info))

    if compress:
        try:
            for page in writer.pages:
                page.compress_content_streams()
        except Exception as exc:
            logger.warning("Content stream compression failed, writing uncompressed: %s", exc)

    if auto_print:
        writer._root_object[NameObject('/OpenAction')] = DictionaryObject({
            NameObject('/Type'): NameObject('/Action'),
            NameObject('/S'): NameObject('/Named'),
            NameObject('/N'): NameObject('/Print'),
        })

    out = io.BytesIO()
    writer.write(out)
    return out.getvalue()


def _write_output(data, output):
    if isinstance(output, (str, os.PathLike)):
        with open(output, 'wb') as f:
            f.write(data)
    else:
        output.write(data)
