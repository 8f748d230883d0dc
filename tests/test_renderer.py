from __future__ import annotations

import pytest

from conftest import Call, RecordingSink, StubFont, landscape, portrait
from layoutforge.core import types as lf
from layoutforge.devices.common.renderer import render_pages

FONT = StubFont()


def _rect(color="red"):
    return lf.Rect(0, 0, 10, 10, color=color)


def _line():
    return lf.TextLine([lf.Inline("hello", FONT, 10, width=25)], 40, 40,
                       height=12, ascender_height=8)


def test_orientation_swaps_page_size(font_provider) -> None:
    sink = RecordingSink((595.28, 841.89))
    render_pages([portrait(), landscape(), portrait()], font_provider, sink)

    assert [c for c in sink.calls if c.name in ("add_page", "set_page_size")] == [
        Call("add_page", (), {}),
        Call("set_page_size", (841.89, 595.28), {}),
        Call("add_page", (), {}),
        Call("set_page_size", (595.28, 841.89), {}),
        Call("add_page", (), {}),
    ]
    assert sink.added_pages == [(595.28, 841.89), (841.89, 595.28), (595.28, 841.89)]


def test_same_orientation_keeps_page_size(font_provider) -> None:
    sink = RecordingSink()
    render_pages([portrait(), portrait()], font_provider, sink)

    assert sink.find("set_page_size") == []
    assert len(sink.added_pages) == 2


def test_progress_reports_every_item(font_provider) -> None:
    reported = []
    pages = [portrait([_rect(), _rect()]), portrait([_rect(), _line(), _rect()])]
    render_pages(pages, font_provider, RecordingSink(), progress_callback=reported.append)

    assert reported == pytest.approx([0.2, 0.4, 0.6, 0.8, 1.0])


def test_watermark_paints_after_items(font_provider) -> None:
    watermark = lf.Watermark("DRAFT", StubFont(), 40, 200, 50)
    sink = RecordingSink()
    render_pages([portrait([_rect(), _line()], watermark)], font_provider, sink)

    names = sink.names()
    last_item_call = max(i for i, name in enumerate(names) if name in ("fill", "text")
                         and sink.calls[i].args[:1] != ("DRAFT",))
    assert names.index("rotate") > last_item_call
    assert sink.find("text")[-1].args[0] == "DRAFT"


def test_render_is_deterministic(font_provider) -> None:
    def render():
        sink = RecordingSink()
        page = portrait([
            _rect(),
            lf.Polyline([lf.Point(0, 0), lf.Point(5, 5)], line_color="blue", dash=lf.Dash(2)),
            _line(),
            lf.Image("logo.png", 0, 0, 10, 10, link="https://example.com"),
        ])
        render_pages([page], font_provider, sink)
        return sink.calls

    assert render() == render()


def test_clip_bracket_spans_items(font_provider) -> None:
    page = portrait([lf.BeginClip(1, 2, 3, 4), _rect(), lf.EndClip()])
    sink = RecordingSink()
    render_pages([page], font_provider, sink)

    names = sink.names()
    assert names[1:4] == ["save", "raw_rect", "clip"]
    assert sink.calls[2] == Call("raw_rect", (1, 2, 3, 4), {})
    assert names[-1] == "restore"
    assert names.index("fill") < names.index("restore")


def test_unknown_items_are_skipped(font_provider) -> None:
    sink = RecordingSink()
    render_pages([portrait([object(), _rect()])], font_provider, sink)

    assert "fill" in sink.names()


def test_layout_pages_exposed_to_sink(font_provider) -> None:
    pages = [portrait()]
    sink = RecordingSink()
    render_pages(pages, font_provider, sink)

    assert sink.layout_pages is pages


def test_page_numbers_reach_line_renderer(font_provider) -> None:
    inline = lf.Inline("00", StubFont(), 10, width=10, page_reference=lf.PageReference("end"))
    line = lf.TextLine([inline], 0, 0, height=12, ascender_height=8)
    sink = RecordingSink()
    render_pages([portrait([line])], font_provider, sink, page_numbers={"end": 5})

    assert sink.find("text")[0].args[0] == "5"


def test_patterns_reach_vector_renderer(font_provider) -> None:
    handle = object()
    page = portrait([lf.Rect(0, 0, 1, 1, color=lf.PatternFill("dots"))])
    sink = RecordingSink()
    render_pages([page], font_provider, sink, patterns={"dots": handle})

    assert sink.find("fill_color")[0].args[0] is handle
