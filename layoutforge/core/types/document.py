# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LayoutForge Types Document Classes Module

The page tree handed over by the layout engine. Items inside a page are the
payload objects themselves (shapes, lines, images, ...) in paint order.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from .constants import LANDSCAPE, PORTRAIT
from .graphics import Pattern
from .text import Watermark


class PageSize(object):
    __slots__ = ("width", "height", "orientation")

    def __init__(self, width: float, height: float, orientation: Optional[str] = None) -> None:
        self.width = width
        self.height = height
        if orientation is None:
            orientation = LANDSCAPE if width > height else PORTRAIT
        self.orientation = orientation

    def __repr__(self) -> str:
        return f"PageSize({self.width}, {self.height}, {self.orientation!r})"


class Page(object):
    def __init__(self, page_size: PageSize, items: Optional[Sequence[Any]] = None,
                 watermark: Optional[Watermark] = None) -> None:
        self.page_size = page_size
        self.items: List[Any] = list(items) if items else []
        self.watermark = watermark


class Document(object):
    """
    A fully laid-out document.

    ``page_numbers`` maps destination ids registered during layout to their
    1-based page number; deferred page references are resolved against it.
    """

    def __init__(self, pages: Sequence[Page],
                 patterns: Optional[Mapping[str, Pattern]] = None,
                 page_numbers: Optional[Mapping[str, int]] = None,
                 info: Optional[Mapping[str, Any]] = None) -> None:
        self.pages: List[Page] = list(pages)
        self.patterns: Dict[str, Pattern] = dict(patterns) if patterns else {}
        self.page_numbers: Dict[str, int] = dict(page_numbers) if page_numbers else {}
        self.info: Dict[str, Any] = dict(info) if info else {}
