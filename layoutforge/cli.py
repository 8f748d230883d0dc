# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Command-line entry point: render layout engine output to a PDF file."""

from __future__ import annotations

import json
import logging
import sys

from .cli_args import build_argument_parser, get_output_path, load_font_config
from .core.config import RenderOptions
from .core.error import LayoutForgeError
from .core.font_provider import FontProvider
from .core.loader import load_document, load_document_file
from .devices.pdf.pdf import create_pdf

logger = logging.getLogger(__name__)


def _progress_printer():
    last = [-1]

    def report(fraction: float) -> None:
        percent = int(fraction * 100)
        if percent != last[0]:
            last[0] = percent
            print(f"\rRendering: {percent:3d}%", end="", file=sys.stderr, flush=True)
            if percent == 100:
                print(file=sys.stderr)

    return report


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the LayoutForge renderer.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        fonts = load_font_config(args.font_config) if args.font_config else None
    except (OSError, ValueError) as e:
        print(f"LayoutForge Error: {e}", file=sys.stderr)
        return 1
    font_provider = FontProvider(fonts)

    options = RenderOptions(
        compress=not args.no_compress,
        auto_print=args.auto_print,
        max_pages=args.max_pages,
        progress_callback=_progress_printer() if args.progress else None,
    )
    outputfile = get_output_path(args.outputfile, args.inputfile)

    try:
        if args.inputfile == "-":
            document = load_document(json.load(sys.stdin), font_provider)
        else:
            document = load_document_file(args.inputfile, font_provider)
        pages = create_pdf(document, outputfile, font_provider, options)
    except json.JSONDecodeError as e:
        print(f"LayoutForge Error: invalid JSON on stdin: {e}", file=sys.stderr)
        return 1
    except LayoutForgeError as e:
        print(f"LayoutForge Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"LayoutForge Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Wrote {pages} page(s) to {outputfile}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
