from __future__ import annotations

import pytest

from conftest import Call
from layoutforge.core.error import LayoutDataError
from layoutforge.devices.common.text_decorations import draw_decorations, group_decorations


def test_consecutive_matching_inlines_share_a_group(make_inline, make_line) -> None:
    line = make_line([
        make_inline("a", decoration="underline"),
        make_inline("b", decoration="underline"),
        make_inline("c"),
        make_inline("d", decoration="underline"),
        make_inline("e", decoration="underline", decoration_color="red"),
    ])

    groups = group_decorations(line)

    assert [[i.text for i in g.inlines] for g in groups] == [["a", "b"], ["d"], ["e"]]
    assert [g.color for g in groups] == ["black", "black", "red"]


def test_multiple_decorations_on_one_inline(make_inline, make_line) -> None:
    line = make_line([make_inline("a", decoration=["underline", "lineThrough"])])

    assert [g.decoration for g in group_decorations(line)] == ["underline", "lineThrough"]


def test_solid_underline_geometry(sink, make_inline, make_line) -> None:
    # size 10: ascent 8, descent 2; line ascender height 8
    line = make_line([make_inline("ab", x=4, decoration="underline", color="blue")])
    draw_decorations(line, 10, 20, sink)

    assert sink.names() == ["save", "fill_color", "rect", "fill", "restore"]
    assert sink.calls[1] == Call("fill_color", ("blue",), {})
    x, y, width, height = sink.calls[2].args
    assert x == 14
    assert y == pytest.approx(20 + 8 + 2 * 0.45 - 0.31)
    assert width == 10
    assert height == pytest.approx(0.62)


def test_group_width_includes_justify_shift(sink, make_inline, make_line) -> None:
    line = make_line([
        make_inline("ab", decoration="overline", justify_shift=1),
        make_inline("cd", x=10, decoration="overline"),
    ])
    draw_decorations(line, 0, 0, sink)

    assert sink.find("rect")[0].args[2] == 21


def test_dashed_style_draws_clipped_dashes(sink, make_inline, make_line) -> None:
    line = make_line([make_inline("a", width=20, decoration="underline", decoration_style="dashed")])
    draw_decorations(line, 0, 0, sink)

    names = sink.names()
    assert names[:3] == ["save", "rect", "clip"]
    assert names.count("fill") == 3
    assert names[-1] == "restore"


def test_double_style_draws_two_bars(sink, make_inline, make_line) -> None:
    line = make_line([make_inline("a", decoration="lineThrough", decoration_style="double")])
    draw_decorations(line, 0, 0, sink)

    assert sink.names().count("fill") == 2


def test_wavy_style_strokes_inside_clip(sink, make_inline, make_line) -> None:
    line = make_line([make_inline("a", width=8, decoration="underline",
                                  decoration_style="wavy", decoration_color="red")])
    draw_decorations(line, 0, 0, sink)

    clip_rect = sink.calls[1]
    assert clip_rect.name == "rect"
    assert clip_rect.args[3] == 2
    assert Call("line_width", (0.24,), {}) in sink.calls
    assert "bezier_curve_to" in sink.names()
    assert sink.calls[-2] == Call("stroke", ("red",), {})


def test_unknown_decoration_raises(sink, make_inline, make_line) -> None:
    line = make_line([make_inline("a", decoration="sideways")])

    with pytest.raises(LayoutDataError, match="sideways"):
        draw_decorations(line, 0, 0, sink)
    assert "save" not in sink.names()
