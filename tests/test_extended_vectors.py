from __future__ import annotations

import pytest

from conftest import Call
from layoutforge.core import types as lf
from layoutforge.devices.common.vectors import render_vector


@pytest.mark.parametrize("instruction, expected", [
    (lf.SaveContext(), [Call("save", (), {})]),
    (lf.RestoreContext(), [Call("restore", (), {})]),
    (lf.TranslateContext(5, 6), [Call("translate", (5, 6), {})]),
    (lf.ScaleContext(2), [Call("scale", (2,), {})]),
    (lf.ScaleContext(2, lf.Point(1, 2)), [Call("scale", (2,), {"origin": (1, 2)})]),
    (lf.RotateContext(30), [Call("rotate", (-30,), {})]),
    (lf.RotateContext(10.126, lf.Point(3, 4)), [Call("rotate", (-10.13,), {"origin": (3, 4)})]),
    (lf.MoveTo(1, 2), [Call("move_to", (1, 2), {})]),
    (lf.LineTo(3, 4), [Call("line_to", (3, 4), {})]),
    (lf.XLine(1, 2, 3, 4), [Call("move_to", (1, 2), {}), Call("line_to", (3, 4), {})]),
    (lf.XRect(1, 2, 3, 4), [Call("rect", (1, 2, 3, 4), {})]),
    (lf.XEllipse(1, 2, 3, 4), [Call("ellipse", (1, 2, 3, 4), {})]),
    (lf.ClosePath(), [Call("close_path", (), {})]),
    (lf.ClipToRect(1, 2, 3, 4), [Call("rect", (1, 2, 3, 4), {}), Call("clip", (), {})]),
])
def test_instruction_maps_to_sink_calls(sink, instruction, expected) -> None:
    render_vector(instruction, sink)

    assert sink.calls == expected


def test_line_style_defaults(sink) -> None:
    render_vector(lf.LineStyle(), sink)
    assert sink.calls == [Call("line_width", (1,), {}), Call("undash", (), {})]

    sink.calls.clear()
    render_vector(lf.LineStyle(2, lf.Dash(3, 1, phase=5)), sink)
    assert sink.calls == [Call("line_width", (2,), {}), Call("dash", (3,), {"space": 1})]


def test_colors_pass_opacity_only_when_set(sink) -> None:
    render_vector(lf.FillColor("red", 0.5), sink)
    render_vector(lf.FillColor("red", 0), sink)
    render_vector(lf.StrokeColor("blue"), sink)

    assert sink.calls == [
        Call("fill_color", ("red", 0.5), {}),
        Call("fill_color", ("red",), {}),
        Call("stroke_color", ("blue",), {}),
    ]


def test_paint_instructions(sink) -> None:
    render_vector(lf.FillPath(), sink)
    render_vector(lf.FillPath("red"), sink)
    render_vector(lf.StrokePath("blue"), sink)
    render_vector(lf.FillAndStrokePath("red", "blue"), sink)
    render_vector(lf.FillAndStrokePath("red"), sink)

    assert sink.calls == [
        Call("fill", (), {}),
        Call("fill", ("red",), {}),
        Call("stroke", ("blue",), {}),
        Call("fill_and_stroke", ("red", "blue"), {}),
        Call("fill_and_stroke", (), {}),
    ]


def test_curves_move_to_explicit_start(sink) -> None:
    render_vector(lf.QuadraticCurve(1, 2, 3, 4, x1=0, y1=0), sink)
    render_vector(lf.BezierCurve(1, 2, 3, 4, 5, 6), sink)

    assert sink.calls == [
        Call("move_to", (0, 0), {}),
        Call("quadratic_curve_to", (1, 2, 3, 4), {}),
        Call("bezier_curve_to", (1, 2, 3, 4, 5, 6), {}),
    ]


def test_extended_instructions_skip_shape_defaults(sink) -> None:
    render_vector(lf.XRect(0, 0, 1, 1), sink)

    assert "line_join" not in sink.names()
    assert "line_width" not in sink.names()


def test_unbalanced_restore_is_passed_through(sink) -> None:
    render_vector(lf.RestoreContext(), sink)
    render_vector(lf.RestoreContext(), sink)

    assert sink.names() == ["restore", "restore"]
