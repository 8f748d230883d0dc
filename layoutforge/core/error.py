# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Error types raised by LayoutForge.

Every failure in the render pass is a defect in the laid-out tree handed to
it, so errors are raised immediately and never retried or masked.
"""

from __future__ import annotations


class LayoutForgeError(Exception):
    """Base class for all LayoutForge errors."""


class UnresolvedReferenceError(LayoutForgeError):
    """A deferred page-number reference points at an id that was never registered."""

    def __init__(self, target: str) -> None:
        super().__init__(f"Page reference id not found: {target!r}")
        self.target = target


class FontNotFoundError(LayoutForgeError):
    """The font provider has no face for the requested family and style."""

    def __init__(self, font: str, style: str, reason: str | None = None) -> None:
        super().__init__(
            reason or f"Font '{font}' in style '{style}' is not defined in the font section "
                      f"of the document definition."
        )
        self.font = font
        self.style = style


class LayoutDataError(LayoutForgeError):
    """The layout output is structurally invalid."""


class PageSizeError(LayoutForgeError):
    """Unknown page size name or invalid page margins."""
