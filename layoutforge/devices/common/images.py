# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Image and Watermark Rendering Module

Places raster images in one of three modes and paints page watermarks:

- extended: rotation about an origin and horizontal/vertical flips, inside a
  save/restore bracket
- cover: the image is scaled to cover a box and clipped to it
- plain: the image is stretched to its resolved width and height

Links on an image are independent of each other; any combination of URL,
page and named-destination links is attached after placement.
"""

import math

from ...core import types as lf
from .extended_vectors import _rotate
from .render_utils import _opacity_or_default, saved_state


def render_image(image, sink) -> None:
    """Place one Image and attach its links."""
    sink.opacity(_opacity_or_default(image.opacity))

    if image.x_image:
        _render_extended_image(image, sink)
    elif image.cover is not None:
        _render_cover_image(image, sink)
    else:
        sink.image(image.image, image.x, image.y, width=image.width, height=image.height)

    if image.link:
        sink.link(image.x, image.y, image.width, image.height, image.link)
    if image.link_to_page:
        sink.annotate_page_link(image.x, image.y, image.width, image.height, image.link_to_page)
    if image.link_to_destination:
        sink.go_to(image.x, image.y, image.width, image.height, image.link_to_destination)


def _render_extended_image(image, sink) -> None:
    with saved_state(sink):
        if image.rotation:
            _rotate(image.rotation, image.rotation_origin, sink)

        if image.flip_h or image.flip_v:
            sink.scale(-1 if image.flip_h else 1,
                       -1 if image.flip_v else 1,
                       origin=(image.x + image.width / 2, image.y + image.height / 2))

        sink.image(image.image, image.x, image.y, width=image.width, height=image.height)


def _render_cover_image(image, sink) -> None:
    cover = image.cover
    width = cover.width or image.width
    height = cover.height or image.height
    with saved_state(sink):
        sink.rect(image.x, image.y, width, height)
        sink.clip()
        sink.image(image.image, image.x, image.y,
                   cover=(width, height), align=cover.align or lf.ALIGN_CENTER,
                   valign=cover.valign or lf.ALIGN_CENTER)


def render_watermark(page, sink) -> None:
    """
    Paint the page watermark over everything else on the page.

    The text box is centred on the page and the whole page is rotated about
    its centre, by the watermark's angle or, when unset, along the diagonal.
    """
    watermark = page.watermark
    page_width = sink.page_width
    page_height = sink.page_height

    sink.fill_color(watermark.color or lf.DEFAULT_COLOR)
    sink.opacity(watermark.opacity)

    with saved_state(sink):
        if watermark.angle is not None:
            angle = -watermark.angle
        else:
            angle = math.atan2(page_height, page_width) * -180 / math.pi
        sink.rotate(angle, origin=(page_width / 2, page_height / 2))

        x = page_width / 2 - watermark.width / 2
        y = page_height / 2 - watermark.height / 2

        sink.font(watermark.font)
        sink.font_size(watermark.font_size)
        sink.text(watermark.text, x, y, line_break=False)
