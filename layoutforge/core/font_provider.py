# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Font provider: resolves a logical font family plus bold/italic flags to a
Cairo-backed font that can be measured and drawn.

Font descriptors map a family to its four styles, each naming either a
PostScript font (``Helvetica-Bold``) or a system family (``DejaVu Sans``):

    {"Helvetica": {"normal": "Helvetica", "bold": "Helvetica-Bold",
                   "italics": "Helvetica-Oblique",
                   "bolditalics": "Helvetica-BoldOblique"}}

Metrics follow the usual 1000 unit em: ``ascender`` and ``descender`` are
measured at size 1000 so callers can scale them by ``font_size / 1000``.

Faces come from Cairo's toy font API, which selects installed fonts by
name. Descriptors naming a font file (``fonts/Roboto-Regular.ttf``) are
rejected with FontNotFoundError.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

import cairo

from .error import FontNotFoundError

logger = logging.getLogger(__name__)

# Size the metrics font is scaled to (one em in font units)
_UNITS_PER_EM = 1000

_NORMAL = (cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)

# PostScript to system font mapping for common fonts
_PS_TO_SYSTEM_FONT = {
    # Standard 14 PDF fonts - map to common system equivalents
    'Times-Roman': ('Times New Roman', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL),
    'Times-Bold': ('Times New Roman', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD),
    'Times-Italic': ('Times New Roman', cairo.FONT_SLANT_ITALIC, cairo.FONT_WEIGHT_NORMAL),
    'Times-BoldItalic': ('Times New Roman', cairo.FONT_SLANT_ITALIC, cairo.FONT_WEIGHT_BOLD),
    'Helvetica': ('Helvetica', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL),
    'Helvetica-Bold': ('Helvetica', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD),
    'Helvetica-Oblique': ('Helvetica', cairo.FONT_SLANT_OBLIQUE, cairo.FONT_WEIGHT_NORMAL),
    'Helvetica-BoldOblique': ('Helvetica', cairo.FONT_SLANT_OBLIQUE, cairo.FONT_WEIGHT_BOLD),
    'Courier': ('Courier', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL),
    'Courier-Bold': ('Courier', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD),
    'Courier-Oblique': ('Courier', cairo.FONT_SLANT_OBLIQUE, cairo.FONT_WEIGHT_NORMAL),
    'Courier-BoldOblique': ('Courier', cairo.FONT_SLANT_OBLIQUE, cairo.FONT_WEIGHT_BOLD),
    'Symbol': ('Symbol', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL),
    'ZapfDingbats': ('Zapf Dingbats', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL),

    # URW fonts (commonly available on Linux)
    'NimbusRoman-Regular': ('Nimbus Roman', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL),
    'NimbusRoman-Bold': ('Nimbus Roman', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD),
    'NimbusRoman-Italic': ('Nimbus Roman', cairo.FONT_SLANT_ITALIC, cairo.FONT_WEIGHT_NORMAL),
    'NimbusRoman-BoldItalic': ('Nimbus Roman', cairo.FONT_SLANT_ITALIC, cairo.FONT_WEIGHT_BOLD),
    'NimbusSans-Regular': ('Nimbus Sans', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL),
    'NimbusSans-Bold': ('Nimbus Sans', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD),
    'NimbusSans-Italic': ('Nimbus Sans', cairo.FONT_SLANT_OBLIQUE, cairo.FONT_WEIGHT_NORMAL),
    'NimbusSans-BoldItalic': ('Nimbus Sans', cairo.FONT_SLANT_OBLIQUE, cairo.FONT_WEIGHT_BOLD),
    'NimbusMonoPS-Regular': ('Nimbus Mono PS', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL),
    'NimbusMonoPS-Bold': ('Nimbus Mono PS', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD),
    'NimbusMonoPS-Italic': ('Nimbus Mono PS', cairo.FONT_SLANT_ITALIC, cairo.FONT_WEIGHT_NORMAL),
    'NimbusMonoPS-BoldItalic': ('Nimbus Mono PS', cairo.FONT_SLANT_ITALIC, cairo.FONT_WEIGHT_BOLD),
}

# Slant/weight implied by a descriptor style when the face is a plain family name
_STYLE_FACE = {
    'normal': (cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL),
    'bold': (cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD),
    'italics': (cairo.FONT_SLANT_ITALIC, cairo.FONT_WEIGHT_NORMAL),
    'bolditalics': (cairo.FONT_SLANT_ITALIC, cairo.FONT_WEIGHT_BOLD),
}

DEFAULT_FONT_DESCRIPTORS = {
    'Helvetica': {
        'normal': 'Helvetica',
        'bold': 'Helvetica-Bold',
        'italics': 'Helvetica-Oblique',
        'bolditalics': 'Helvetica-BoldOblique',
    },
    'Times': {
        'normal': 'Times-Roman',
        'bold': 'Times-Bold',
        'italics': 'Times-Italic',
        'bolditalics': 'Times-BoldItalic',
    },
    'Courier': {
        'normal': 'Courier',
        'bold': 'Courier-Bold',
        'italics': 'Courier-Oblique',
        'bolditalics': 'Courier-BoldOblique',
    },
}

DEFAULT_FONT = 'Helvetica'

_FONT_FILE_SUFFIXES = ('.ttf', '.otf', '.ttc', '.pfb', '.woff', '.woff2')


def _is_font_file(spec: str) -> bool:
    return any(sep in spec for sep in ('/', '\\')) or spec.lower().endswith(_FONT_FILE_SUFFIXES)


def font_style(bold: bool, italic: bool) -> str:
    """Return the descriptor key for a bold/italic combination."""
    if bold and italic:
        return 'bolditalics'
    if bold:
        return 'bold'
    if italic:
        return 'italics'
    return 'normal'


class Font:
    """A resolved font face with 1000-unit metrics and a Cairo face for drawing."""

    def __init__(self, name: str, family: str, slant: int, weight: int) -> None:
        self.name = name
        self.family = family
        self.slant = slant
        self.weight = weight
        self.face = cairo.ToyFontFace(family, slant, weight)
        self._scaled = cairo.ScaledFont(
            self.face,
            cairo.Matrix(xx=_UNITS_PER_EM, yy=_UNITS_PER_EM),
            cairo.Matrix(),
            cairo.FontOptions(),
        )
        ascent, descent = self._scaled.extents()[:2]
        self.ascender = ascent
        self.descender = -descent

    def width_of_string(self, text: str, size: float,
                        features: Optional[Sequence[str]] = None) -> float:
        """
        Advance width of ``text`` at ``size`` points.

        Cairo's toy text API has no OpenType feature selection, so
        ``features`` does not change the measurement.
        """
        if not text:
            return 0
        return self._scaled.text_extents(text).x_advance * size / _UNITS_PER_EM

    def __repr__(self) -> str:
        return f"Font({self.name!r})"


class FontProvider:
    """Resolves (family, bold, italic) to cached Font instances."""

    def __init__(self, font_descriptors: Optional[Mapping[str, Mapping[str, str]]] = None) -> None:
        if font_descriptors is None:
            font_descriptors = DEFAULT_FONT_DESCRIPTORS
        self.font_descriptors = {family: dict(styles) for family, styles in font_descriptors.items()}
        self._cache: dict[tuple[str, str], Font] = {}

    def __contains__(self, family: str) -> bool:
        return family in self.font_descriptors

    def get_font_spec(self, family: str, bold: bool, italic: bool) -> str | None:
        """Return the face name configured for a family/style, or None."""
        styles = self.font_descriptors.get(family)
        if styles is None:
            return None
        return styles.get(font_style(bold, italic))

    def provide_font(self, family: str, bold: bool = False, italic: bool = False) -> Font:
        """Return the font for a family/style, raising FontNotFoundError if not configured."""
        style = font_style(bold, italic)
        key = (family, style)
        font = self._cache.get(key)
        if font is not None:
            return font

        spec = self.get_font_spec(family, bold, italic)
        if spec is None:
            raise FontNotFoundError(family, style)
        if _is_font_file(spec):
            raise FontNotFoundError(
                family, style,
                f"Font '{family}' in style '{style}' names the font file '{spec}'; "
                f"fonts are selected by PostScript or system family name, not by file.")

        if spec in _PS_TO_SYSTEM_FONT:
            system_family, slant, weight = _PS_TO_SYSTEM_FONT[spec]
        else:
            system_family = spec
            slant, weight = _STYLE_FACE.get(style, _NORMAL)

        font = Font(spec, system_family, slant, weight)
        logger.debug("Resolved font %s/%s to %s", family, style, system_family)
        self._cache[key] = font
        return font
