# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LayoutForge Types Graphics Classes Module

Images, embedded SVG fragments, clip brackets and fill patterns.
"""

from typing import Any, Dict, Optional, Sequence, Union

from .vectors import Point


class CoverFit(object):
    """Box an image is scaled to cover (and clipped to), with alignment inside it."""
    __slots__ = ("width", "height", "align", "valign")

    def __init__(self, width: Optional[float] = None, height: Optional[float] = None,
                 align: Optional[str] = None, valign: Optional[str] = None) -> None:
        self.width = width
        self.height = height
        self.align = align
        self.valign = valign


class Image(object):
    """
    A raster image at its resolved position and size.

    ``image`` is the source handed to the sink: a file path, raw bytes or a
    file-like object. ``x_image`` selects extended placement, which honours
    ``rotation``/``rotation_origin`` and the flip flags.
    """

    def __init__(self, image: Union[str, bytes, Any], x: float, y: float,
                 width: float, height: float, *,
                 opacity: Optional[float] = None,
                 link: Optional[str] = None,
                 link_to_page: Optional[int] = None,
                 link_to_destination: Optional[str] = None,
                 cover: Optional[CoverFit] = None,
                 x_image: bool = False,
                 rotation: float = 0,
                 rotation_origin: Optional[Point] = None,
                 flip_h: bool = False, flip_v: bool = False) -> None:
        self.image = image
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.opacity = opacity
        self.link = link
        self.link_to_page = link_to_page
        self.link_to_destination = link_to_destination
        self.cover = cover
        self.x_image = x_image
        self.rotation = rotation
        self.rotation_origin = rotation_origin
        self.flip_h = flip_h
        self.flip_v = flip_v


class SvgFragment(object):
    """SVG markup placed in a laid-out box; ``font`` is the fallback family."""

    def __init__(self, svg: str, x: float, y: float, width: float, height: float, *,
                 font: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> None:
        self.svg = svg
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.font = font
        self.options = dict(options) if options else {}


class BeginClip(object):
    """Opens a clip bracket: everything until the matching EndClip is clipped to the rect."""
    __slots__ = ("x", "y", "width", "height")

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class EndClip(object):
    __slots__ = ()


class Pattern(object):
    """
    Tiling fill pattern, registered once per document.

    ``content`` is a PDF content stream (``"1 w 0 1 m 4 5 l s"``) drawn in
    the ``bbox`` cell and repeated every ``x_step``/``y_step``. Uncoloured
    patterns (``colored=False``) take their paint from the shape.
    """

    def __init__(self, bbox: Sequence[float], x_step: float, y_step: float,
                 content: str, colored: bool = True) -> None:
        self.bbox = tuple(bbox)
        self.x_step = x_step
        self.y_step = y_step
        self.content = content
        self.colored = colored
