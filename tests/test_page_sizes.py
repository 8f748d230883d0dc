from __future__ import annotations

import math

import pytest

from layoutforge.core import types as lf
from layoutforge.core.error import PageSizeError
from layoutforge.core.page_sizes import calculate_page_height, fix_page_margins, fix_page_size


def test_named_size_defaults_to_portrait() -> None:
    size = fix_page_size("a4")

    assert (size.width, size.height) == (595.28, 841.89)
    assert size.orientation == "portrait"


def test_default_page_size_is_a4() -> None:
    assert fix_page_size().width == 595.28


def test_orientation_swaps_dimensions() -> None:
    size = fix_page_size("LETTER", "landscape")

    assert (size.width, size.height) == (792.0, 612.0)
    assert size.orientation == "landscape"


def test_explicit_size_and_auto_height() -> None:
    assert fix_page_size({"width": 300, "height": 200}).orientation == "landscape"

    auto = fix_page_size({"width": 300, "height": "auto"})
    assert math.isinf(auto.height)
    assert auto.orientation == "portrait"


def test_unknown_size_raises() -> None:
    with pytest.raises(PageSizeError, match="not recognized"):
        fix_page_size("A99")


@pytest.mark.parametrize("margin, expected", [
    (10, {"left": 10, "right": 10, "top": 10, "bottom": 10}),
    ([10, 20], {"left": 10, "top": 20, "right": 10, "bottom": 20}),
    ([1, 2, 3, 4], {"left": 1, "top": 2, "right": 3, "bottom": 4}),
    ({"left": 5}, {"left": 5, "top": 0, "right": 0, "bottom": 0}),
])
def test_margins_are_expanded(margin, expected) -> None:
    assert fix_page_margins(margin) == expected


@pytest.mark.parametrize("margin", [[1, 2, 3], "wide"])
def test_invalid_margins_raise(margin) -> None:
    with pytest.raises(PageSizeError, match="pageMargins"):
        fix_page_margins(margin)


def test_calculate_page_height_uses_lowest_item() -> None:
    line = lf.TextLine([], 40, 300, height=20)
    page = lf.Page(lf.PageSize(300, math.inf), [
        lf.Rect(0, 100, 10, 10),
        line,
        lf.Image("logo.png", 0, 200, 10, 50),
    ])

    assert calculate_page_height([page], 40) == 360
