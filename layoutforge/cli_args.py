# LayoutForge - Layout to PDF Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for LayoutForge.

Handles command-line argument definition, parsing, font configuration files
and output file naming.
"""

from __future__ import annotations

import argparse
import json
import os

from . import __version__


def get_output_path(outputfile: str | None, inputfile: str) -> str:
    """
    Derive the output path from command-line arguments.

    Args:
        outputfile: The -o argument value (or None)
        inputfile: The layout input file

    Returns:
        The -o value, or the input file name with a ``.pdf`` extension
    """
    if outputfile:
        return outputfile
    if inputfile == "-":
        return "layout.pdf"
    return os.path.splitext(inputfile)[0] + ".pdf"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid page count: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"page count must not be negative: '{value}'")
    return number


def load_font_config(path: str) -> dict:
    """Read font descriptors (family -> {normal, bold, italics, bolditalics}) from JSON.

    Raises:
        ValueError: If the file is not a JSON object of family mappings.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid font configuration '{path}': {e}")
    if not isinstance(config, dict) or not all(isinstance(v, dict) for v in config.values()):
        raise ValueError(f"Font configuration '{path}' must map families to style mappings")
    return config


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the LayoutForge argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="layoutforge",
        description="LayoutForge - render laid-out documents to PDF",
        epilog="Use '-' as the input file to read the layout from stdin.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"LayoutForge {__version__}"
    )
    parser.add_argument("inputfile", help="Layout engine output (JSON) to render")
    parser.add_argument(
        "-o", "--output", dest="outputfile",
        help="Specify output filename (default: input name with .pdf)"
    )
    parser.add_argument(
        "--max-pages", type=_positive_int,
        help="Render at most this many pages"
    )
    parser.add_argument(
        "--no-compress", action="store_true",
        help="Leave page content streams uncompressed"
    )
    parser.add_argument(
        "--auto-print", action="store_true",
        help="Open the print dialog when the PDF is opened"
    )
    parser.add_argument(
        "--progress", action="store_true",
        help="Report rendering progress on stderr"
    )
    parser.add_argument(
        "--font-config",
        help="JSON file mapping font families to their normal/bold/italics/bolditalics faces"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    return parser
