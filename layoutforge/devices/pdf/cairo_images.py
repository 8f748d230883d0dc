# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cairo Image Rendering Module

Decodes raster images with Pillow and places them on a Cairo context.

Image sources may be a file path, a ``data:`` URL with base64 payload, raw
encoded bytes or an already opened PIL image. Decoded surfaces are cached so
an image repeated on every page (a letterhead logo, say) is decoded once.

Performance:
- Surfaces are cached in an LRU keyed by the source (path, URL or bytes)
"""

import base64
import io
import logging
from collections import OrderedDict

from PIL import Image, UnidentifiedImageError

import cairo

from ...core.error import LayoutDataError

logger = logging.getLogger(__name__)

_IMAGE_CACHE_MAX_ENTRIES = 64
_image_surface_cache = OrderedDict()


def clear_image_cache():
    """Clear the decoded image surface cache."""
    _image_surface_cache.clear()


def load_image_surface(src):
    """
    Decode an image source into a Cairo ARGB32 surface.

    Raises:
        LayoutDataError: the source cannot be read or decoded
    """
    if isinstance(src, Image.Image):
        return _pil_to_surface(src)

    key = bytes(src) if isinstance(src, (bytes, bytearray)) else src
    surface = _image_surface_cache.get(key)
    if surface is not None:
        _image_surface_cache.move_to_end(key)
        return surface

    try:
        with _open_image(src) as pil_image:
            surface = _pil_to_surface(pil_image)
    except (OSError, UnidentifiedImageError, ValueError) as exc:
        raise LayoutDataError(f"Cannot load image {_describe(src)}: {exc}") from exc

    _image_surface_cache[key] = surface
    if len(_image_surface_cache) > _IMAGE_CACHE_MAX_ENTRIES:
        _image_surface_cache.popitem(last=False)
    return surface


def _open_image(src):
    if isinstance(src, (bytes, bytearray)):
        return Image.open(io.BytesIO(src))
    if isinstance(src, str) and src.startswith('data:'):
        header, _, payload = src.partition(',')
        if ';base64' not in header:
            raise ValueError("only base64 data URLs are supported")
        return Image.open(io.BytesIO(base64.b64decode(payload)))
    return Image.open(src)


def _describe(src):
    if isinstance(src, str) and not src.startswith('data:'):
        return repr(src)
    return f"<{type(src).__name__} data>"


def _pil_to_surface(pil_image):
    """Convert a PIL image to a premultiplied BGRA Cairo surface."""
    rgba = pil_image.convert('RGBA')
    width, height = rgba.size
    data = bytearray(rgba.tobytes('raw', 'BGRa'))
    stride = cairo.ImageSurface.format_stride_for_width(cairo.FORMAT_ARGB32, width)
    if stride != width * 4:
        raise ValueError(f"unexpected stride {stride} for width {width}")
    return cairo.ImageSurface.create_for_data(data, cairo.FORMAT_ARGB32, width, height, stride)


def cover_placement(image_width, image_height, box_width, box_height,
                    align='center', valign='center'):
    """
    Scale an image to cover a box, keeping its aspect ratio.

    Returns (dx, dy, width, height): the offset of the scaled image from the
    box origin and its size. The overflowing axis is aligned per
    ``align`` (left/center/right) and ``valign`` (top/center/bottom).
    """
    image_ratio = image_width / image_height
    if image_ratio > box_width / box_height:
        height = box_height
        width = box_height * image_ratio
    else:
        width = box_width
        height = box_width / image_ratio

    dx = dy = 0.0
    if align == 'center':
        dx = (box_width - width) / 2
    elif align == 'right':
        dx = box_width - width
    if valign == 'center':
        dy = (box_height - height) / 2
    elif valign == 'bottom':
        dy = box_height - height
    return dx, dy, width, height


def paint_image(cairo_ctx, surface, x, y, width, height, alpha=1.0) -> None:
    """Stretch an image surface over the box (x, y, width, height)."""
    image_width = surface.get_width()
    image_height = surface.get_height()
    if not image_width or not image_height or not width or not height:
        logger.debug("Skipping empty image placement at (%s, %s)", x, y)
        return

    cairo_ctx.save()
    try:
        cairo_ctx.translate(x, y)
        cairo_ctx.scale(width / image_width, height / image_height)
        cairo_ctx.set_source_surface(surface, 0, 0)
        cairo_ctx.get_source().set_filter(cairo.FILTER_GOOD)
        if alpha >= 1:
            cairo_ctx.paint()
        else:
            cairo_ctx.paint_with_alpha(alpha)
    finally:
        cairo_ctx.restore()
