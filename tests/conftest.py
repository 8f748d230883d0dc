from __future__ import annotations

from typing import Any, NamedTuple

import pytest

from layoutforge.core import types as lf
from layoutforge.core.error import FontNotFoundError
from layoutforge.core.font_provider import font_style


class Call(NamedTuple):
    name: str
    args: tuple
    kwargs: dict


class StubFont:
    """Font with fixed metrics: ascender 800/1000 em, every glyph half an em wide."""

    ascender = 800
    descender = -200

    def __init__(self, name: str = "Stub") -> None:
        self.name = name

    def width_of_string(self, text: str, size: float, features=None) -> float:
        return len(text) * size * 0.5

    def __repr__(self) -> str:
        return f"StubFont({self.name!r})"


class StubFontProvider:
    def __init__(self, fonts: dict[str, set[str]]) -> None:
        self.fonts = fonts
        self._cache: dict[tuple[str, str], StubFont] = {}

    def __contains__(self, family: str) -> bool:
        return family in self.fonts

    def provide_font(self, family: str, bold: bool = False, italic: bool = False) -> StubFont:
        style = font_style(bold, italic)
        if style not in self.fonts.get(family, ()):
            raise FontNotFoundError(family, style)
        return self._cache.setdefault((family, style), StubFont(f"{family}-{style}"))


class RecordingGradient:
    def __init__(self, sink: "RecordingSink", coords: tuple) -> None:
        self.sink = sink
        self.coords = coords
        self.stops: list[tuple[float, Any]] = []

    def stop(self, offset, color, opacity=1):
        self.stops.append((offset, color))
        self.sink.calls.append(Call("gradient_stop", (offset, color), {}))
        return self

    def __eq__(self, other):
        return (isinstance(other, RecordingGradient)
                and self.coords == other.coords and self.stops == other.stops)


class RecordingPattern:
    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, other):
        return isinstance(other, RecordingPattern) and self.name == other.name

    def __repr__(self) -> str:
        return f"RecordingPattern({self.name!r})"


class RecordingSink:
    """Sink that records every drawing call in order."""

    def __init__(self, page_size=(595.28, 841.89)) -> None:
        self.calls: list[Call] = []
        self._page_size = tuple(page_size)
        self.page_width, self.page_height = self._page_size
        self.layout_pages = None
        self.added_pages: list[tuple[float, float]] = []

    @property
    def page_size(self):
        return self._page_size

    @page_size.setter
    def page_size(self, size):
        self._page_size = tuple(size)
        self.calls.append(Call("set_page_size", tuple(size), {}))

    def add_page(self) -> None:
        self.page_width, self.page_height = self._page_size
        self.added_pages.append(self._page_size)
        self.calls.append(Call("add_page", (), {}))

    def linear_gradient(self, x1, y1, x2, y2):
        self.calls.append(Call("linear_gradient", (x1, y1, x2, y2), {}))
        return RecordingGradient(self, (x1, y1, x2, y2))

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args, **kwargs):
            self.calls.append(Call(name, args, kwargs))

        return record

    def names(self) -> list[str]:
        return [call.name for call in self.calls]

    def find(self, name: str) -> list[Call]:
        return [call for call in self.calls if call.name == name]


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def font() -> StubFont:
    return StubFont()


@pytest.fixture()
def font_provider() -> StubFontProvider:
    return StubFontProvider({
        "Roboto": {"normal", "bold", "italics", "bolditalics"},
        "Mono": {"normal"},
    })


@pytest.fixture()
def make_inline(font):
    def _make(text="text", **kwargs) -> lf.Inline:
        kwargs.setdefault("width", len(text) * kwargs.get("font_size", 10) * 0.5)
        font_size = kwargs.pop("font_size", 10)
        return lf.Inline(text, kwargs.pop("font", font), font_size, **kwargs)

    return _make


@pytest.fixture()
def make_line():
    def _make(inlines, x=0, y=0, **kwargs) -> lf.TextLine:
        kwargs.setdefault("height", 12)
        kwargs.setdefault("ascender_height", 8)
        return lf.TextLine(inlines, x, y, **kwargs)

    return _make


def portrait(items=(), watermark=None) -> lf.Page:
    return lf.Page(lf.PageSize(595.28, 841.89), list(items), watermark)


def landscape(items=(), watermark=None) -> lf.Page:
    return lf.Page(lf.PageSize(841.89, 595.28), list(items), watermark)
