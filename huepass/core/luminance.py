#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/core/luminance.py

from . import config as c


def _wcag_channel(color_comp: int) -> float:
    """Linearize one channel with the WCAG 2.1 breakpoint (0.03928)."""
    s = color_comp / c.RGB_MAX
    if s <= c.WCAG_LINEAR_TH:
        return s / c.SRGB_SLOPE
    return ((s + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: int, g: int, b: int) -> float:
    return (
        c.LUMA_R * _wcag_channel(r) +
        c.LUMA_G * _wcag_channel(g) +
        c.LUMA_B * _wcag_channel(b)
    )
