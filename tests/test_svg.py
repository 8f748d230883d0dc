from __future__ import annotations

import pytest

from conftest import Call, RecordingSink, portrait
from layoutforge.core import types as lf
from layoutforge.core.error import FontNotFoundError, LayoutDataError
from layoutforge.devices.common.renderer import render_pages
from layoutforge.devices.common.svg import make_font_callback, render_svg

SVG_NS = 'xmlns="http://www.w3.org/2000/svg"'


def test_font_callback_picks_first_known_family(font_provider) -> None:
    callback = make_font_callback(font_provider, "Mono")

    assert callback("Unknown, 'Roboto', sans-serif", True, False).name == "Roboto-bold"
    assert callback("Unknown", False, False).name == "Mono-normal"
    assert callback(None, False, False).name == "Mono-normal"


def test_font_callback_missing_style_names_font_and_style(font_provider) -> None:
    callback = make_font_callback(font_provider, "Mono")

    with pytest.raises(FontNotFoundError) as excinfo:
        callback("Mono", True, True)
    assert "'Mono'" in str(excinfo.value)
    assert "'bolditalics'" in str(excinfo.value)


def test_svg_is_fitted_into_its_box(sink, font_provider) -> None:
    svg = lf.SvgFragment(f'<svg {SVG_NS} viewBox="0 0 50 50"><rect x="1" y="2" width="3" height="4" '
                         f'fill="red"/></svg>', 10, 20, 100, 200)
    render_svg(svg, sink, make_font_callback(font_provider, "Roboto"))

    assert sink.calls == [
        Call("save", (), {}),
        Call("translate", (10, 20), {}),
        Call("translate", (0.0, 50.0), {}),
        Call("scale", (2.0, 2.0), {}),
        Call("translate", (-0.0, -0.0), {}),
        Call("rect", (1.0, 2.0, 3.0, 4.0), {}),
        Call("fill_color", ("red", 1.0), {}),
        Call("fill", (), {}),
        Call("restore", (), {}),
    ]


def test_svg_shapes_and_strokes(sink, font_provider) -> None:
    markup = (f'<svg {SVG_NS} width="10" height="10">'
              '<g stroke="blue" stroke-width="2" fill="none">'
              '<line x1="0" y1="0" x2="5" y2="5"/>'
              '<polygon points="0,0 5,0 5,5"/>'
              '<circle cx="5" cy="5" r="2" fill="green"/>'
              '</g></svg>')
    render_svg(lf.SvgFragment(markup, 0, 0, 10, 10), sink, make_font_callback(font_provider, "Roboto"))

    names = sink.names()
    assert names.count("stroke") == 2
    assert names.count("fill_and_stroke") == 1
    assert "close_path" in names
    assert Call("ellipse", (5.0, 5.0, 2.0, 2.0), {}) in sink.calls
    assert Call("line_width", (2.0,), {}) in sink.calls


def test_svg_style_attribute_is_parsed_as_css(sink, font_provider) -> None:
    markup = (f'<svg {SVG_NS} width="10" height="10">'
              '<rect width="5" height="5" style="fill:none;/* outline */ stroke:blue;'
              'stroke-width: 3 !important"/></svg>')
    render_svg(lf.SvgFragment(markup, 0, 0, 10, 10), sink, make_font_callback(font_provider, "Roboto"))

    assert sink.find("stroke_color") == [Call("stroke_color", ("blue", 1.0), {})]
    assert Call("line_width", (3.0,), {}) in sink.calls
    assert sink.find("fill_color") == []


def test_svg_transform_is_bracketed(sink, font_provider) -> None:
    markup = (f'<svg {SVG_NS} width="10" height="10">'
              '<path d="M0 0 L5 5" stroke="black" transform="translate(1, 2) rotate(45)"/></svg>')
    render_svg(lf.SvgFragment(markup, 0, 0, 10, 10), sink, make_font_callback(font_provider, "Roboto"))

    names = sink.names()
    path_index = names.index("path")
    assert names[path_index - 3:path_index] == ["save", "translate", "rotate"]
    assert sink.calls[path_index] == Call("path", ("M0 0 L5 5",), {})


def test_svg_text_uses_font_callback(sink, font_provider) -> None:
    markup = (f'<svg {SVG_NS} width="100" height="20">'
              '<text x="0" y="10" font-family="Roboto" font-weight="bold" font-size="10">Hi</text></svg>')
    render_svg(lf.SvgFragment(markup, 0, 0, 100, 20), sink, make_font_callback(font_provider, "Mono"))

    (font_call,) = sink.find("font")
    assert font_call.args[0].name == "Roboto-bold"
    (text,) = sink.find("text")
    assert text.args == ("Hi", 0.0, pytest.approx(2.0))


def test_svg_text_with_unconfigured_style_fails_render(font_provider) -> None:
    markup = f'<svg {SVG_NS} width="10" height="10"><text font-style="italic">x</text></svg>'
    page = portrait([lf.SvgFragment(markup, 0, 0, 10, 10, font="Mono")])

    with pytest.raises(FontNotFoundError):
        render_pages([page], font_provider, RecordingSink())


def test_invalid_svg_raises(sink, font_provider) -> None:
    with pytest.raises(LayoutDataError):
        render_svg(lf.SvgFragment("<svg", 0, 0, 1, 1), sink, make_font_callback(font_provider, "Mono"))
