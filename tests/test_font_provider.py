from __future__ import annotations

import pytest

from layoutforge.core.error import FontNotFoundError
from layoutforge.core.font_provider import FontProvider


def test_default_fonts_resolve_and_are_cached() -> None:
    provider = FontProvider()
    bold = provider.provide_font("Helvetica", bold=True)

    assert bold.name == "Helvetica-Bold"
    assert provider.provide_font("Helvetica", bold=True) is bold
    assert bold.width_of_string("abc", 10) > 0
    assert bold.width_of_string("", 10) == 0


def test_unknown_family_raises() -> None:
    with pytest.raises(FontNotFoundError, match="'Nope' in style 'italics'"):
        FontProvider().provide_font("Nope", italic=True)


@pytest.mark.parametrize("spec", ["fonts/Roboto-Regular.ttf", "Roboto-Medium.OTF", r"C:\fonts\roboto.ttc"])
def test_font_file_descriptors_are_rejected(spec) -> None:
    provider = FontProvider({"Roboto": {"normal": spec}})

    with pytest.raises(FontNotFoundError, match="font file") as excinfo:
        provider.provide_font("Roboto")
    assert (excinfo.value.font, excinfo.value.style) == ("Roboto", "normal")
