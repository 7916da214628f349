#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/shared/preview.py

import re

from huepass.core.conversions import parse_hex
from huepass.core import config as c

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    r, g, b = parse_hex(hex_code)
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}{hex_code}{c.RESET}", end=end)


def print_text_sample(fg_hex: str, bg_hex: str, title: str = "sample", end: str = "\n") -> None:
    """Print sample text in the foreground color over the background color."""
    fr, fg, fb = parse_hex(fg_hex)
    br, bg, bb = parse_hex(bg_hex)
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[38;2;{fr};{fg};{fb}m\033[48;2;{br};{bg};{bb}m  Aa Bb Cc 123  {c.RESET}", end=end)
