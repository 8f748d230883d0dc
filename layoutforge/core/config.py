# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Options controlling a PDF render."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

ProgressCallback = Callable[[float], None]


@dataclass
class RenderOptions:
    """
    Options for create_pdf.

    Attributes:
        compress: Compress page content streams after rendering.
        auto_print: Ask the viewer to open the print dialog when the file is opened.
        max_pages: Render at most this many pages (None renders all of them).
        progress_callback: Called after every item with the fraction rendered so far.
        info: Document metadata (title, author, subject, keywords, custom keys).
        page_margins: Margins used when an auto-height page is measured.
    """
    compress: bool = True
    auto_print: bool = False
    max_pages: Optional[int] = None
    progress_callback: Optional[ProgressCallback] = None
    info: dict[str, Any] = field(default_factory=dict)
    page_margins: Any = 40
