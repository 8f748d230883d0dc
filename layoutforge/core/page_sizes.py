# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Page size and margin normalisation.

Turns the page size a document asks for (a standard name, an explicit
width/height, an orientation, an ``auto`` height) into a concrete PageSize,
and computes the real height of auto-height documents once they are laid out.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Sequence

from . import types as lf
from .error import PageSizeError

# Standard page sizes in points, portrait
STANDARD_PAGE_SIZES = {
    '4A0': (4767.87, 6740.79),
    '2A0': (3370.39, 4767.87),
    'A0': (2383.94, 3370.39),
    'A1': (1683.78, 2383.94),
    'A2': (1190.55, 1683.78),
    'A3': (841.89, 1190.55),
    'A4': (595.28, 841.89),
    'A5': (419.53, 595.28),
    'A6': (297.64, 419.53),
    'A7': (209.76, 297.64),
    'A8': (147.40, 209.76),
    'A9': (104.88, 147.40),
    'A10': (73.70, 104.88),
    'B0': (2834.65, 4008.19),
    'B1': (2004.09, 2834.65),
    'B2': (1417.32, 2004.09),
    'B3': (1000.63, 1417.32),
    'B4': (708.66, 1000.63),
    'B5': (498.90, 708.66),
    'B6': (354.33, 498.90),
    'B7': (249.45, 354.33),
    'B8': (175.75, 249.45),
    'B9': (124.72, 175.75),
    'B10': (87.87, 124.72),
    'C0': (2599.37, 3676.54),
    'C1': (1836.85, 2599.37),
    'C2': (1298.27, 1836.85),
    'C3': (918.43, 1298.27),
    'C4': (649.13, 918.43),
    'C5': (459.21, 649.13),
    'C6': (323.15, 459.21),
    'C7': (229.61, 323.15),
    'C8': (161.57, 229.61),
    'C9': (113.39, 161.57),
    'C10': (79.37, 113.39),
    'RA0': (2437.80, 3458.27),
    'RA1': (1729.13, 2437.80),
    'RA2': (1218.90, 1729.13),
    'RA3': (864.57, 1218.90),
    'RA4': (609.45, 864.57),
    'SRA0': (2551.18, 3628.35),
    'SRA1': (1814.17, 2551.18),
    'SRA2': (1275.59, 1814.17),
    'SRA3': (907.09, 1275.59),
    'SRA4': (637.80, 907.09),
    'EXECUTIVE': (521.86, 756.00),
    'FOLIO': (612.00, 936.00),
    'LEGAL': (612.00, 1008.00),
    'LETTER': (612.00, 792.00),
    'TABLOID': (792.00, 1224.00),
}

DEFAULT_PAGE_SIZE = 'A4'
DEFAULT_MARGIN = 40


def page_size_to_width_and_height(page_size: Any) -> tuple[float, float]:
    """Resolve a page size name or ``{width, height}`` mapping to a (width, height) pair."""
    if isinstance(page_size, str):
        size = STANDARD_PAGE_SIZES.get(page_size.upper())
        if size is None:
            raise PageSizeError(f"Page size {page_size} not recognized")
        return size
    if isinstance(page_size, lf.PageSize):
        return page_size.width, page_size.height
    if isinstance(page_size, Mapping):
        try:
            return page_size['width'], page_size['height']
        except KeyError as exc:
            raise PageSizeError(f"Page size is missing {exc.args[0]!r}")
    if isinstance(page_size, Sequence) and len(page_size) == 2:
        return page_size[0], page_size[1]
    raise PageSizeError(f"Invalid page size definition: {page_size!r}")


def fix_page_size(page_size: Any = None, page_orientation: str | None = None) -> lf.PageSize:
    """
    Normalise a page size definition.

    A height of ``"auto"`` becomes infinity (no page breaks; the real height
    is computed after layout with calculate_page_height). The orientation,
    when given, swaps width and height if the size points the other way.
    """
    if isinstance(page_size, Mapping) and page_size.get('height') == 'auto':
        page_size = dict(page_size, height=math.inf)

    width, height = page_size_to_width_and_height(page_size or DEFAULT_PAGE_SIZE)

    if isinstance(page_orientation, str):
        orientation = page_orientation.lower()
        if (orientation == lf.PORTRAIT and width > height) or \
                (orientation == lf.LANDSCAPE and width < height):
            width, height = height, width

    return lf.PageSize(width, height)


def fix_page_margins(margin: Any) -> dict[str, float] | None:
    """Expand a margin definition (number, [h, v], [l, t, r, b] or mapping) to its four sides."""
    if margin is None:
        return None

    if isinstance(margin, (int, float)):
        return {'left': margin, 'right': margin, 'top': margin, 'bottom': margin}
    if isinstance(margin, Mapping):
        return {side: margin.get(side, 0) for side in ('left', 'top', 'right', 'bottom')}
    if isinstance(margin, Sequence) and not isinstance(margin, str):
        if len(margin) == 2:
            return {'left': margin[0], 'top': margin[1], 'right': margin[0], 'bottom': margin[1]}
        if len(margin) == 4:
            return {'left': margin[0], 'top': margin[1], 'right': margin[2], 'bottom': margin[3]}

    raise PageSizeError('Invalid pageMargins definition')


def _item_height(item) -> float:
    if isinstance(item, lf.TextLine):
        return item.get_height()
    height = getattr(item, 'height', None)
    if isinstance(height, (int, float)):
        return height
    return 0


def calculate_page_height(pages: Sequence[lf.Page], margins: Any = None) -> float:
    """
    Height of an auto-height page: the lowest item bottom plus the bottom margin.

    Items without a known height count as zero-height at their y position.
    """
    fixed_margins = fix_page_margins(DEFAULT_MARGIN if margins is None else margins)
    height = fixed_margins['top']

    for page in pages:
        for item in page.items:
            top = getattr(item, 'y', None)
            if not isinstance(top, (int, float)):
                continue
            bottom = top + _item_height(item)
            if bottom > height:
                height = bottom

    return height + fixed_margins['bottom']
