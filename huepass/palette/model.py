#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/palette/model.py

import random
import re
import time
from typing import List, NamedTuple, Optional

from huepass.core import config as c
from huepass.core.conversions import normalize_hex


class PaletteColor(NamedTuple):
    id: str
    name: str
    hex: str


def generate_id() -> str:
    """Opaque id: millisecond timestamp plus a random base-36 suffix."""
    suffix = "".join(random.choice(c.ID_ALPHABET) for _ in range(c.ID_SUFFIX_LEN))
    return f"{int(time.time() * 1000)}-{suffix}"


def create_palette_color(name: str, hex_code: str) -> Optional[PaletteColor]:
    clean_hex = normalize_hex(hex_code)
    if clean_hex is None:
        return None
    return PaletteColor(id=generate_id(), name=name, hex=clean_hex)


def rename_color(colors: List[PaletteColor], color_id: str, name: str) -> List[PaletteColor]:
    return [col._replace(name=name) if col.id == color_id else col for col in colors]


def recolor(colors: List[PaletteColor], color_id: str, hex_code: str) -> List[PaletteColor]:
    """Return a new list with one color's hex replaced; malformed hex leaves it unchanged."""
    clean_hex = normalize_hex(hex_code)
    if clean_hex is None:
        return list(colors)
    return [col._replace(hex=clean_hex) if col.id == color_id else col for col in colors]


def remove_color(colors: List[PaletteColor], color_id: str) -> List[PaletteColor]:
    return [col for col in colors if col.id != color_id]


def sanitize_key(name: str, sep: str = c.KEY_SEP_DASH) -> str:
    """
    Derive an export key from a free-form color name.

    Lowercases, collapses every run of non-alphanumeric characters into
    `sep` and strips leading/trailing separators, so "Sky Blue" and
    "sky-blue" share a key.
    """
    key = re.sub(r"[^a-z0-9]+", sep, str(name).lower()).strip(sep)
    return key or c.EMPTY_KEY


def camel_case_key(name: str) -> str:
    # e.g., 'Sky Blue' -> 'sky-blue' -> 'skyBlue', 'Gray 500' -> 'gray_500', '500 Gray' -> '_500Gray'
    head, *rest = sanitize_key(name, c.KEY_SEP_DASH).split(c.KEY_SEP_DASH)
    parts = ["_" + head if head[0].isdigit() else head]
    for part in rest:
        parts.append("_" + part if part[0].isdigit() else part[0].upper() + part[1:])
    return "".join(parts)
