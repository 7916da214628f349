#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/logic/suggest/renderer.py

from typing import Optional

from huepass.core import config as c
from huepass.core.contrast import format_contrast_ratio
from huepass.shared.logger import log
from huepass.shared.preview import print_color_block, print_text_sample


def _print_ratio(ratio: float) -> None:
    print(f"{c.MSG_BOLD_COLORS['info']}ratio{c.RESET}             {c.BOLD_WHITE}: {format_contrast_ratio(ratio)}{c.RESET}")


def render_suggestion(
    fg_hex: str,
    bg_hex: str,
    before: float,
    target: float,
    adjust: str,
    suggested: Optional[str] = None,
    after: Optional[float] = None,
) -> None:
    """Print the original pair and, when there is one, the adjusted pair."""
    print()
    print_text_sample(fg_hex, bg_hex, f"{c.BOLD_WHITE}original{c.RESET}")
    _print_ratio(before)
    print()

    if before >= target:
        log("success", f"pair already meets {format_contrast_ratio(target)}")
    elif suggested is None:
        log("warning", f"no {adjust} lightness reaches {format_contrast_ratio(target)} at this hue and saturation")
    else:
        new_fg, new_bg = (fg_hex, suggested) if adjust == "background" else (suggested, bg_hex)
        print_color_block(suggested, f"{c.MSG_BOLD_COLORS['info']}{adjust}{c.RESET}")
        print_text_sample(new_fg, new_bg, f"{c.BOLD_WHITE}suggested{c.RESET}")
        _print_ratio(after)
    print()
