#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/logic/contrast/renderer.py

from huepass.core import config as c
from huepass.core.compliance import ContrastResult, WcagLevel
from huepass.shared.preview import print_color_block, print_text_sample


def _label(key: str) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{key}{c.RESET}"


def _status(passed: bool) -> str:
    if passed:
        return f"{c.MSG_BOLD_COLORS['success']}Pass{c.RESET}"
    return f"{c.MSG_BOLD_COLORS['error']}Fail{c.RESET}"


def _level(level: WcagLevel) -> str:
    color = c.MSG_BOLD_COLORS['error'] if level.level == "Fail" else c.MSG_BOLD_COLORS['success']
    return f"{color}{level.label}{c.RESET}"


def render_contrast_info(
    fg_hex: str,
    bg_hex: str,
    result: ContrastResult,
    normal_level: WcagLevel,
    large_level: WcagLevel,
) -> None:
    """Strictly prints contrast information. Data must be pre-calculated by the engine."""
    print()
    print_color_block(fg_hex, f"{c.BOLD_WHITE}foreground{c.RESET}")
    print_color_block(bg_hex, f"{c.BOLD_WHITE}background{c.RESET}")
    print_text_sample(fg_hex, bg_hex, f"{c.BOLD_WHITE}sample{c.RESET}")

    print(f"\n{_label('contrast ratio')}    {c.BOLD_WHITE}: {result.ratio_string}{c.RESET}")
    print(f"{_label('normal text')}       {c.BOLD_WHITE}:{c.RESET} {_level(normal_level)}")
    print(f"{_label('large text')}        {c.BOLD_WHITE}:{c.RESET} {_level(large_level)}")

    print()
    print(f"{_label('AA normal')}         {c.BOLD_WHITE}:{c.RESET} {_status(result.normal_text_aa)}")
    print(f"{_label('AAA normal')}        {c.BOLD_WHITE}:{c.RESET} {_status(result.normal_text_aaa)}")
    print(f"{_label('AA large')}          {c.BOLD_WHITE}:{c.RESET} {_status(result.large_text_aa)}")
    print(f"{_label('AAA large')}         {c.BOLD_WHITE}:{c.RESET} {_status(result.large_text_aaa)}")
    print(f"{_label('ui components')}     {c.BOLD_WHITE}:{c.RESET} {_status(result.ui_components)}")
    print()
