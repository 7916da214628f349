#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/subcommands/palette.py

import argparse
import sys

from huepass.core import config as c
from huepass.shared.logger import HuepassArgumentParser
from huepass.shared.sanitizer import INPUT_HANDLERS
from huepass.shared.truecolor import ensure_truecolor
from huepass.logic.palette import engine


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for palette command."""
    parser = HuepassArgumentParser(
        prog="huepass palette",
        description="huepass palette: contrast matrix, report and exports for a named palette",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--color",
        action="append",
        type=INPUT_HANDLERS["palette_entry"],
        help="use -c NAME=HEX multiple times, in palette order"
    )
    parser.add_argument(
        "--store",
        default=None,
        help="JSON file holding the persisted palette"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="save the palette to --store"
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="remove the palette from --store"
    )
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "-R",
        "--report",
        action="store_true",
        help="print a Markdown contrast report"
    )
    output_group.add_argument(
        "-e",
        "--export",
        type=INPUT_HANDLERS["export_format"],
        default=None,
        help=f"export format: {', '.join(c.EXPORT_FORMATS)}"
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="write the report or export to a file instead of stdout"
    )
    return parser


def main() -> None:
    """Main entry point for palette command."""
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
