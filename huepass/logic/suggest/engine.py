#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/logic/suggest/engine.py

import argparse

from huepass.core.contrast import get_contrast_ratio
from huepass.core.conversions import parse_hex
from huepass.core.suggest import suggest_alternative
from .renderer import render_suggestion


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the suggest command"""
    fg_hex, bg_hex = args.foreground, args.background
    before = get_contrast_ratio(parse_hex(fg_hex), parse_hex(bg_hex))

    suggested = None
    after = None
    if before < args.target:
        suggested = suggest_alternative(fg_hex, bg_hex, args.target, args.adjust)
        if suggested is not None:
            pair = (fg_hex, suggested) if args.adjust == "background" else (suggested, bg_hex)
            after = get_contrast_ratio(parse_hex(pair[0]), parse_hex(pair[1]))

    render_suggestion(fg_hex, bg_hex, before, args.target, args.adjust, suggested, after)
