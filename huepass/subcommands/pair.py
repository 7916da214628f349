#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/subcommands/pair.py

import argparse
import sys

from huepass.core import config as c
from huepass.shared.logger import HuepassArgumentParser
from huepass.shared.sanitizer import INPUT_HANDLERS
from huepass.shared.truecolor import ensure_truecolor
from huepass.logic.pair import engine


def get_pair_parser() -> argparse.ArgumentParser:
    """Create argument parser for pair command."""
    parser = HuepassArgumentParser(
        prog="huepass pair",
        description="huepass pair: generate random foreground/background pairs that pass WCAG AA",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=1,
        help=f"number of pairs (default: 1, max: {c.MAX_COUNT})"
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )
    return parser


def main() -> None:
    """Main entry point for pair command."""
    parser = get_pair_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
