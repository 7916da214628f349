#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/logic/pair/engine.py

import argparse
import random

from huepass.core import config as c
from huepass.core.contrast import format_contrast_ratio, get_contrast_ratio
from huepass.core.conversions import parse_hex
from huepass.core.suggest import generate_accessible_pair
from huepass.shared.preview import print_text_sample


def run(args: argparse.Namespace) -> None:
    """Generate and print random accessible pairs."""
    if args.seed is not None:
        random.seed(args.seed)

    print()
    for i in range(args.count):
        fg_hex, bg_hex = generate_accessible_pair()
        ratio = get_contrast_ratio(parse_hex(fg_hex), parse_hex(bg_hex))
        label = f"{c.MSG_BOLD_COLORS['info']}pair{f'{i + 1}':>11}{c.RESET}"
        print_text_sample(fg_hex, bg_hex, label, end="")
        print(f"  {c.BOLD_WHITE}{fg_hex} on {bg_hex}  {format_contrast_ratio(ratio)}{c.RESET}")
    print()
