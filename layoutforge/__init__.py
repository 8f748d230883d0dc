# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LayoutForge renders the output of a document layout engine (pages of
positioned shapes, text lines, images, SVG fragments and clip brackets) to
PDF through Cairo.
"""

__version__ = "0.1.0"

from .core.config import RenderOptions  # noqa: E402
from .core.font_provider import FontProvider  # noqa: E402
from .core.loader import load_document, load_document_file  # noqa: E402
from .devices.common.renderer import render_pages  # noqa: E402
from .devices.pdf.pdf import create_pdf  # noqa: E402

__all__ = [
    "FontProvider",
    "RenderOptions",
    "create_pdf",
    "load_document",
    "load_document_file",
    "render_pages",
]
