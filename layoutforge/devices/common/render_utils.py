# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared render pass utilities."""

from contextlib import contextmanager


@contextmanager
def saved_state(sink):
    """Bracket a block with sink save/restore; the restore runs on every exit path."""
    sink.save()
    try:
        yield sink
    finally:
        sink.restore()


def _opacity_or_default(opacity, default=1):
    """Opacity to use when the layout left it unset or zero."""
    return opacity or default
