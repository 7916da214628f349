#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/logic/contrast/engine.py

import argparse

from huepass.core.compliance import (
    check_wcag_compliance,
    get_large_text_level,
    get_normal_text_level,
)
from huepass.core.contrast import get_contrast_ratio
from huepass.core.conversions import parse_hex
from .renderer import render_contrast_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the contrast check"""
    ratio = get_contrast_ratio(parse_hex(args.foreground), parse_hex(args.background))

    render_contrast_info(
        fg_hex=args.foreground,
        bg_hex=args.background,
        result=check_wcag_compliance(ratio),
        normal_level=get_normal_text_level(ratio),
        large_level=get_large_text_level(ratio),
    )
