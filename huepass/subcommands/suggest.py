#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/subcommands/suggest.py

import argparse
import sys

from huepass.core import config as c
from huepass.shared.logger import HuepassArgumentParser
from huepass.shared.sanitizer import INPUT_HANDLERS
from huepass.shared.truecolor import ensure_truecolor
from huepass.logic.suggest import engine


def get_suggest_parser() -> argparse.ArgumentParser:
    """Create argument parser for suggest command."""
    parser = HuepassArgumentParser(
        prog="huepass suggest",
        description="huepass suggest: find the nearest lightness that meets a contrast target",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--foreground",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="foreground (text) hex code"
    )
    parser.add_argument(
        "-b",
        "--background",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="background hex code"
    )
    parser.add_argument(
        "-t",
        "--target",
        type=INPUT_HANDLERS["ratio"],
        default=c.WCAG_AA_NORMAL,
        help=f"target contrast ratio: 1 to 21 (default: {c.WCAG_AA_NORMAL})"
    )
    parser.add_argument(
        "-a",
        "--adjust",
        type=INPUT_HANDLERS["adjust_side"],
        default="foreground",
        help="which color to adjust: foreground or background (default: foreground)"
    )
    return parser


def main() -> None:
    """Main entry point for suggest command."""
    parser = get_suggest_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
