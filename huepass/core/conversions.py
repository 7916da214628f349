#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/core/conversions.py

import re
from typing import Optional, Tuple

from . import config as c
from huepass.shared.clamping import _clamp01, _clamp100, _clamp255, _round_half_up

HEX_REGEX = re.compile(r"#?([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})")
_HEX6_REGEX = re.compile(r"[0-9A-Fa-f]{6}")


def parse_hex(hex_code: str) -> Optional[Tuple[int, int, int]]:
    """
    Parse a hex color into an RGB tuple.

    Accepts 3- or 6-digit hex with an optional leading '#'. Anything else
    (wrong length, non-hex characters, non-string input) returns None.
    """
    if not isinstance(hex_code, str):
        return None
    h = hex_code[1:] if hex_code.startswith("#") else hex_code
    if len(h) == 3:
        # e.g., 'ABC' becomes 'AABBCC'
        h = "".join(ch * 2 for ch in h)
    if not _HEX6_REGEX.fullmatch(h):
        return None
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def format_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a '#RRGGBB' string."""
    r_clamped = _round_half_up(_clamp255(r))
    g_clamped = _round_half_up(_clamp255(g))
    b_clamped = _round_half_up(_clamp255(b))
    return f"#{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def normalize_hex(hex_code: str) -> Optional[str]:
    """Normalize hex text to '#RRGGBB' uppercase, or None if malformed."""
    rgb = parse_hex(hex_code)
    if rgb is None:
        return None
    return format_hex(*rgb)


def is_valid_hex(hex_code: str) -> bool:
    if not isinstance(hex_code, str):
        return False
    return HEX_REGEX.fullmatch(hex_code) is not None


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to HSL (hue in degrees, saturation and lightness in percent)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        s = delta / (c.UNIT - abs(c.DIV_2 * L - c.UNIT))
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + 2.0)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
        h = (h + c.HUE_MAX) % c.HUE_MAX
    return (h, s * c.PERCENT, L * c.PERCENT)


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[int, int, int]:
    """Convert HSL (degrees, percent, percent) to rounded RGB."""
    h = h % c.HUE_MAX
    s = _clamp100(s) / c.PERCENT
    L = _clamp100(L) / c.PERCENT
    if s == 0:
        r = g = b = L
    else:
        chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
        x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
        m = L - chroma / c.DIV_2
        if 0 <= h < 60:
            r_p, g_p, b_p = chroma, x, 0
        elif 60 <= h < 120:
            r_p, g_p, b_p = x, chroma, 0
        elif 120 <= h < 180:
            r_p, g_p, b_p = 0, chroma, x
        elif 180 <= h < 240:
            r_p, g_p, b_p = 0, x, chroma
        elif 240 <= h < 300:
            r_p, g_p, b_p = x, 0, chroma
        else:
            r_p, g_p, b_p = chroma, 0, x
        r, g, b = (r_p + m), (g_p + m), (b_p + m)
    return (
        _round_half_up(_clamp01(r) * c.RGB_MAX),
        _round_half_up(_clamp01(g) * c.RGB_MAX),
        _round_half_up(_clamp01(b) * c.RGB_MAX),
    )


def _srgb_to_linear(color_comp: int) -> float:
    """Linearize sRGB component (IEC 61966-2-1 breakpoint)."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to linear component."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET
