#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/subcommands/vision.py

import argparse
import sys

from huepass.shared.logger import HuepassArgumentParser
from huepass.shared.sanitizer import INPUT_HANDLERS
from huepass.shared.truecolor import ensure_truecolor
from huepass.logic.vision import engine


def get_vision_parser() -> argparse.ArgumentParser:
    parser = HuepassArgumentParser(
        prog="huepass vision",
        description="huepass vision: simulate color vision deficiency",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-H", "--hex",
        type=INPUT_HANDLERS["hex"],
        help="base hex code"
    )
    parser.add_argument(
        "--svg-filters",
        action="store_true",
        help="print SVG filter definitions for page-wide simulation and exit"
    )
    mode_group = parser.add_argument_group("display mode")
    mode_group.add_argument(
        "--store",
        default=None,
        help="JSON file holding the persisted display mode"
    )
    mode_group.add_argument(
        "-M", "--set-mode",
        type=INPUT_HANDLERS["cvd_type"],
        default=None,
        help="set the display mode: protanopia, deuteranopia, tritanopia, achromatopsia, none"
    )
    simulate_group = parser.add_argument_group("simulation types")
    simulate_group.add_argument(
        '-all', '--all-simulates',
        action="store_true",
        help="show all simulation types"
    )
    simulate_group.add_argument(
        '-p', '--protanopia',
        action="store_true",
        help="simulate protanopia red-blind"
    )
    simulate_group.add_argument(
        '-d', '--deuteranopia',
        action="store_true",
        help="simulate deuteranopia green-blind"
    )
    simulate_group.add_argument(
        '-t', '--tritanopia',
        action="store_true",
        help="simulate tritanopia blue-blind"
    )
    simulate_group.add_argument(
        '-a', '--achromatopsia',
        action="store_true",
        help="simulate achromatopsia total-blind"
    )
    return parser


def main() -> None:
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
