from __future__ import annotations

import io

import pytest
from PIL import Image
from pypdf import PdfReader

from layoutforge.core.font_provider import FontProvider
from layoutforge.devices.pdf.cairo_images import cover_placement, load_image_surface
from layoutforge.devices.pdf.cairo_patterns import _run_content_stream, build_tiling_pattern
from layoutforge.devices.pdf.cairo_utils import _quote_attribute, _safe_rgb
from layoutforge.devices.pdf.sink import CairoSink
from layoutforge.core.error import LayoutDataError


def _png_bytes(size=(4, 2), color=(255, 0, 0, 128)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGBA", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.mark.parametrize("color, expected", [
    ("#ff0000", (1.0, 0.0, 0.0)),
    ("white", (1.0, 1.0, 1.0)),
    ([0, 0, 255], (0.0, 0.0, 1.0)),
    ([0, 0, 0, 100], (0.0, 0.0, 0.0)),
    ("not-a-colour", (0, 0, 0)),
    (None, (0, 0, 0)),
])
def test_safe_rgb(color, expected) -> None:
    assert _safe_rgb(color) == pytest.approx(expected)


def test_quote_attribute_escapes_quotes() -> None:
    assert _quote_attribute("it's") == "'it\\'s'"


@pytest.mark.parametrize("align, valign, expected", [
    ("center", "center", (-50, 0, 200, 100)),
    ("left", "top", (0, 0, 200, 100)),
    ("right", "bottom", (-100, 0, 200, 100)),
])
def test_cover_placement_wide_image(align, valign, expected) -> None:
    assert cover_placement(400, 200, 100, 100, align, valign) == pytest.approx(expected)


def test_cover_placement_tall_image() -> None:
    assert cover_placement(100, 400, 100, 100, "center", "bottom") == pytest.approx((0, -300, 100, 400))


def test_image_surfaces_are_decoded_once() -> None:
    data = _png_bytes()
    surface = load_image_surface(data)

    assert (surface.get_width(), surface.get_height()) == (4, 2)
    assert load_image_surface(data) is surface


def test_undecodable_image_raises() -> None:
    with pytest.raises(LayoutDataError):
        load_image_surface(b"not an image")


def test_tiling_pattern_runs_content_stream() -> None:
    pattern = build_tiling_pattern([0, 0, 4, 4], 4, 4, "q 1 0 0 rg 1 w 0 0 m 4 4 l S Q 0 0 2 2 re f")

    assert pattern.colored is True
    x, y, width, height = pattern.surface.ink_extents()
    assert width > 0 and height > 0


class _RecordingContext:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        return lambda *args: self.calls.append((name, args))


def test_pattern_content_stream_skips_comments() -> None:
    ctx = _RecordingContext()
    _run_content_stream("0 0 % start of the hatch\nm 6 6 l [2 1] 0 d S", ctx, colored=False)

    assert ctx.calls == [
        ("move_to", (0.0, 0.0)),
        ("line_to", (6.0, 6.0)),
        ("set_dash", ([2.0, 1.0], 0.0)),
        ("stroke", ()),
    ]


def test_pattern_colours_apply_only_to_coloured_patterns() -> None:
    coloured, stencil = _RecordingContext(), _RecordingContext()
    _run_content_stream("0 0 1 rg", coloured, colored=True)
    _run_content_stream("0 0 1 rg", stencil, colored=False)

    assert coloured.calls == [("set_source_rgb", (0.0, 0.0, 1.0))]
    assert stencil.calls == []


def test_paint_state_follows_save_restore() -> None:
    sink = CairoSink(io.BytesIO(), (100, 100))
    sink.add_page()
    sink.fill_color("red", 0.5)
    sink.save()
    sink.fill_color("blue", 1)
    sink.restore()

    assert sink._state.fill == ("solid", pytest.approx((1.0, 0.0, 0.0)))
    assert sink._state.fill_opacity == 0.5


def test_sink_draws_every_command_kind() -> None:
    output = io.BytesIO()
    sink = CairoSink(output, (200, 300))
    font = FontProvider().provide_font("Helvetica")

    sink.add_page()
    sink.line_width(2)
    sink.dash(3, space=1, phase=0)
    sink.line_join("round")
    sink.line_cap("square")
    sink.rect(10, 10, 50, 20)
    sink.fill_and_stroke("red", "blue")
    sink.undash()
    sink.rounded_rect(10, 40, 50, 20, 5)
    sink.ellipse(100, 100, 20, 10)
    sink.path("M 10 150 Q 30 130 50 150 A 10 10 0 0 1 70 150 Z")
    sink.stroke()

    gradient = sink.linear_gradient(0, 0, 100, 0).stop(0, "red").stop(1, "blue")
    sink.rect(0, 200, 100, 20)
    sink.fill(gradient)

    stencil = sink.pattern([0, 0, 4, 4], 4, 4, "0 0 m 4 4 l S", colored=False)
    sink.rect(0, 230, 100, 20)
    sink.fill_color((stencil, "green"), 0.5)
    sink.fill()

    sink.save()
    sink.rotate(-30, origin=(100, 150))
    sink.scale(-1, 1, origin=(100, 150))
    sink.transform(1, 0, 0.2, 1, 0, 0)
    sink.move_to(0, 0)
    sink.quadratic_curve_to(10, 10, 20, 0)
    sink.bezier_curve_to(30, 10, 40, 10, 50, 0)
    sink.stroke("black")
    sink.restore()

    sink.image(_png_bytes(), 120, 10, width=40)
    sink.save()
    sink.raw_rect(120, 40, 40, 40)
    sink.clip()
    sink.image(_png_bytes(), 120, 40, cover=(40, 40), align="center", valign="center")
    sink.restore()

    sink.opacity(0.8)
    sink.font(font)
    sink.font_size(12)
    sink.text("Hello", 10, 260, line_break=False, destination="top")
    sink.text("Link", 60, 260, character_spacing=1.5, link="https://example.com")
    sink.link(0, 0, 20, 20, "https://example.com")

    sink.page_size = (300, 200)
    sink.add_page()
    assert (sink.page_width, sink.page_height) == (300, 200)
    sink.go_to(0, 0, 20, 20, "top")
    sink.annotate_page_link(30, 0, 20, 20, 1)
    sink.finalize()

    reader = PdfReader(io.BytesIO(output.getvalue()))
    assert len(reader.pages) == 2
    assert float(reader.pages[1].mediabox.width) == pytest.approx(300)
    assert "/Annots" in reader.pages[0]
