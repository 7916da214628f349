#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/core/suggest.py

import random
from typing import Optional, Tuple

from . import config as c
from .contrast import get_contrast_ratio
from .conversions import format_hex, hsl_to_rgb, parse_hex, rgb_to_hsl
from .luminance import get_luminance

RGB = Tuple[int, int, int]


def _scan(h: float, s: float, l_start: float, reference: RGB,
          target_ratio: float, direction: int) -> Optional[RGB]:
    for i in range(0, c.LIGHTNESS_SEARCH_SPAN + 1, c.LIGHTNESS_STEP):
        l_new = max(0.0, min(c.PERCENT, l_start + direction * i))
        candidate = hsl_to_rgb(h, s, l_new)
        if get_contrast_ratio(candidate, reference) >= target_ratio:
            return candidate
    return None


def find_passing_color(
    color_to_adjust: RGB,
    reference_color: RGB,
    target_ratio: float = c.WCAG_AA_NORMAL,
) -> Optional[RGB]:
    """
    Find the nearest lightness variant of a color that reaches a target ratio.

    Hue and saturation are preserved. The scan moves away from the reference:
    lighter when the reference is dark (luminance < 0.5), darker otherwise.
    The opposite direction is only tried once the first is exhausted.
    Contrast is not monotonic in lightness, so every step is evaluated.

    Returns None when no lightness value reaches the target.
    """
    h, s, l_hsl = rgb_to_hsl(*color_to_adjust)
    go_lighter = get_luminance(*reference_color) < c.DARK_REFERENCE_LUM
    primary = 1 if go_lighter else -1

    found = _scan(h, s, l_hsl, reference_color, target_ratio, primary)
    if found is None:
        found = _scan(h, s, l_hsl, reference_color, target_ratio, -primary)
    return found


def suggest_alternative(
    foreground: str,
    background: str,
    target_ratio: float = c.WCAG_AA_NORMAL,
    adjust: str = "foreground",
) -> Optional[str]:
    """Suggest a replacement hex for one side of a foreground/background pair."""
    fg_rgb = parse_hex(foreground)
    bg_rgb = parse_hex(background)
    if fg_rgb is None or bg_rgb is None:
        return None

    if adjust == "background":
        found = find_passing_color(bg_rgb, fg_rgb, target_ratio)
    else:
        found = find_passing_color(fg_rgb, bg_rgb, target_ratio)

    return format_hex(*found) if found is not None else None


def generate_accessible_pair(rng=random) -> Tuple[str, str]:
    """
    Generate a random (foreground, background) pair that meets AA for normal text.

    `rng` only needs `choice` and `randrange`; the `random` module or a
    seeded `random.Random` both work.
    """
    background = rng.choice(c.PAIR_BACKGROUNDS)
    bg_rgb = parse_hex(background)

    hue = rng.randrange(int(c.HUE_MAX))
    saturation = c.PAIR_SATURATION_MIN + rng.randrange(c.PAIR_SATURATION_SPAN)

    if get_luminance(*bg_rgb) < c.DARK_REFERENCE_LUM:
        lightness = c.PAIR_LIGHT_FG_MIN + rng.randrange(c.PAIR_LIGHT_FG_SPAN)
    else:
        lightness = c.PAIR_DARK_FG_MIN + rng.randrange(c.PAIR_DARK_FG_SPAN)

    fg_rgb = hsl_to_rgb(hue, saturation, lightness)

    if get_contrast_ratio(fg_rgb, bg_rgb) < c.WCAG_AA_NORMAL:
        passing = find_passing_color(fg_rgb, bg_rgb)
        if passing is not None:
            fg_rgb = passing

    return format_hex(*fg_rgb), background
