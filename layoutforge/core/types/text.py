# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LayoutForge Types Text Classes Module

Laid-out text: lines made of positioned inline runs, deferred page-number
references and page watermarks. Fonts are already resolved by the time the
tree reaches the render pass; ``font`` is whatever the font provider returned
(anything with ``ascender`` and ``width_of_string``).
"""

from typing import List, Optional, Sequence, Union


class PageReference(object):
    """
    A page number that is only known once every page has been laid out.

    ``target`` is the id of a destination registered during layout; the
    render pass looks it up in the document's page number table.
    """
    __slots__ = ("target",)

    def __init__(self, target: str) -> None:
        self.target = target

    def __repr__(self) -> str:
        return f"PageReference({self.target!r})"


class Inline(object):
    """One contiguous run of styled text within a line."""

    def __init__(self, text: str, font, font_size: float, *,
                 x: float = 0, width: float = 0, height: Optional[float] = None,
                 color=None, opacity: Optional[float] = None,
                 alignment: Optional[str] = None,
                 link: Optional[str] = None,
                 link_to_page: Optional[int] = None,
                 link_to_destination: Optional[str] = None,
                 sup: bool = False, sub: bool = False,
                 character_spacing: Optional[float] = None,
                 font_features: Optional[Sequence[str]] = None,
                 page_reference: Optional[PageReference] = None,
                 background=None,
                 decoration: Union[str, Sequence[str], None] = None,
                 decoration_color=None,
                 decoration_style: Optional[str] = None,
                 justify_shift: float = 0) -> None:
        self.text = text
        self.font = font
        self.font_size = font_size
        self.x = x
        self.width = width
        self.height = font_size if height is None else height
        self.color = color
        self.opacity = opacity
        self.alignment = alignment
        self.link = link
        self.link_to_page = link_to_page
        self.link_to_destination = link_to_destination
        self.sup = sup
        self.sub = sub
        self.character_spacing = character_spacing
        self.font_features = list(font_features) if font_features else None
        self.page_reference = page_reference
        self.background = background
        self.decoration = decoration
        self.decoration_color = decoration_color
        self.decoration_style = decoration_style
        self.justify_shift = justify_shift

    def __repr__(self) -> str:
        return f"Inline({self.text!r}, x={self.x}, width={self.width})"


class TextLine(object):
    """
    A laid-out line of text positioned on the page.

    ``height`` and ``ascender_height`` are the line metrics computed by the
    layout engine (tallest inline times line height, largest ascent).
    """

    def __init__(self, inlines: Sequence[Inline], x: float = 0, y: float = 0, *,
                 height: float = 0, ascender_height: float = 0,
                 id: Optional[str] = None,
                 page_reference: Optional[PageReference] = None) -> None:
        self.inlines: List[Inline] = list(inlines)
        self.x = x
        self.y = y
        self.height = height
        self.ascender_height = ascender_height
        self.id = id
        self.page_reference = page_reference

    def get_height(self) -> float:
        return self.height

    def get_ascender_height(self) -> float:
        return self.ascender_height


class Watermark(object):
    """Text painted over the page content, centred and rotated."""

    def __init__(self, text: str, font, font_size: float, width: float, height: float, *,
                 color="black", opacity: float = 0.6, angle: Optional[float] = None) -> None:
        self.text = text
        self.font = font
        self.font_size = font_size
        self.width = width
        self.height = height
        self.color = color
        self.opacity = opacity
        self.angle = angle
