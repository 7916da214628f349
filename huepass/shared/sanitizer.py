#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/shared/sanitizer.py

import argparse
import re
from typing import Tuple

from huepass.core import config as c
from huepass.core.conversions import normalize_hex


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    handling multiple decimal points by keeping only the first one encountered.
    Accepts ratio notation such as '4.5:1' by ignoring everything after ':'.
    """
    if value is None:
        return None

    s = str(value).split(":")[0]
    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    # Return None if string is just a lonely dot
    if clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


def _extract_alpha_only(value: str) -> str:
    """Extracts only alphabetical characters from a string, lowercasing them."""
    if value is None:
        return ""
    return "".join(re.findall(r"[a-z]", str(value).lower()))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments. Returns '#RRGGBB'."""
    cleaned = normalize_hex(str(v).strip())
    if cleaned is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")
    return cleaned


def handle_palette_entry(v: str) -> Tuple[str, str]:
    """Validator for 'NAME=HEX' palette entries."""
    name, sep, hex_part = str(v).rpartition("=")
    name = name.strip()
    if not sep or not name:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid palette entry: '{raw}' (expected NAME=HEX)")
    return name, handle_hex(hex_part)


def handle_choice(choices):
    """
    Factory function returning a validator that reduces the value to its
    letters and checks it against a fixed list of choices.
    """
    def validator(v: str) -> str:
        cleaned = _extract_alpha_only(v)
        if cleaned not in choices:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(
                f"invalid choice: '{raw}' (choose from {', '.join(choices)})"
            )
        return cleaned
    return validator


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        return max(min_v, min(max_v, val))
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        return max(min_v, min(max_v, val))
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "palette_entry": handle_palette_entry,
    "cvd_type": handle_choice(c.SIMULATE_KEYS + ["none"]),
    "export_format": handle_choice(c.EXPORT_FORMATS),
    "adjust_side": handle_choice(["foreground", "background"]),
    "ratio": handle_float_range(c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO),
    "count": handle_int_range(1, c.MAX_COUNT),
    "seed": handle_int_range(0, 999_999_999_999_999_999),
}
