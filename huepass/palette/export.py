#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/palette/export.py

import json
from enum import Enum
from typing import Callable, Dict, List, Tuple

from huepass.core import config as c
from huepass.core.conversions import normalize_hex, parse_hex
from .model import PaletteColor, camel_case_key, sanitize_key


class ExportFormat(Enum):
    CSS = "css"
    SCSS = "scss"
    JSON = "json"
    TAILWIND = "tailwind"
    TOKENS = "tokens"
    SWIFT = "swift"
    XML = "xml"


def _keyed_entries(colors: List[PaletteColor], sep: str) -> List[Tuple[str, PaletteColor]]:
    """
    Pair each color with its export key.

    Colors with a malformed hex are skipped. When two names share a key the
    later color wins but keeps the position of the first one, so every
    exporter emits the same set of entries in the same order.
    """
    entries: Dict[str, PaletteColor] = {}
    for color in colors:
        clean_hex = normalize_hex(color.hex)
        if clean_hex is None:
            continue
        entries[sanitize_key(color.name, sep)] = color._replace(hex=clean_hex)
    return list(entries.items())


def find_key_collisions(colors: List[PaletteColor]) -> Dict[str, List[str]]:
    """Map each export key shared by several colors to the colliding names."""
    seen: Dict[str, List[str]] = {}
    for color in colors:
        if normalize_hex(color.hex) is None:
            continue
        seen.setdefault(sanitize_key(color.name), []).append(color.name)
    return {key: names for key, names in seen.items() if len(names) > 1}


def export_as_css(colors: List[PaletteColor]) -> str:
    lines = [":root {"]
    for key, color in _keyed_entries(colors, c.KEY_SEP_DASH):
        lines.append(f"  --color-{key}: {color.hex};")
    lines.append("}")
    return "\n".join(lines)


def export_as_scss(colors: List[PaletteColor]) -> str:
    entries = _keyed_entries(colors, c.KEY_SEP_DASH)
    lines = [f"$color-{key}: {color.hex};" for key, color in entries]

    # Also a map for @each iteration
    lines.append("")
    lines.append("$colors: (")
    for key, color in entries:
        lines.append(f"  '{key}': {color.hex},")
    lines.append(");")
    return "\n".join(lines)


def export_as_json(colors: List[PaletteColor]) -> str:
    palette = {key: color.hex for key, color in _keyed_entries(colors, c.KEY_SEP_UNDERSCORE)}
    return json.dumps({"colors": palette}, indent=2)


def export_as_tailwind(colors: List[PaletteColor]) -> str:
    lines = ["module.exports = {", "  theme: {", "    extend: {", "      colors: {"]
    for key, color in _keyed_entries(colors, c.KEY_SEP_DASH):
        lines.append(f"        '{key}': '{color.hex}',")
    lines.extend(["      },", "    },", "  },", "};"])
    return "\n".join(lines)


def export_as_design_tokens(colors: List[PaletteColor]) -> str:
    """Design Tokens Community Group (DTCG) document under a `color` group."""
    tokens = {"color": {}}
    for key, color in _keyed_entries(colors, c.KEY_SEP_DASH):
        tokens["color"][key] = {
            "$type": "color",
            "$value": color.hex,
            "$description": color.name,
        }
    return json.dumps(tokens, indent=2, ensure_ascii=False)


def export_as_swift(colors: List[PaletteColor]) -> str:
    lines = [
        "import UIKit",
        "",
        "extension UIColor {",
        "    struct Palette {",
    ]
    dec = c.SWIFT_CHANNEL_DECIMALS
    for _, color in _keyed_entries(colors, c.KEY_SEP_DASH):
        r, g, b = parse_hex(color.hex)
        lines.append(
            f"        static let {camel_case_key(color.name)} = UIColor("
            f"red: {r / c.RGB_MAX:.{dec}f}, green: {g / c.RGB_MAX:.{dec}f}, "
            f"blue: {b / c.RGB_MAX:.{dec}f}, alpha: 1.0)"
        )
    lines.extend(["    }", "}"])
    return "\n".join(lines)


def export_as_android_xml(colors: List[PaletteColor]) -> str:
    lines = ['<?xml version="1.0" encoding="utf-8"?>', "<resources>"]
    for key, color in _keyed_entries(colors, c.KEY_SEP_UNDERSCORE):
        lines.append(f'    <color name="{key}">{color.hex}</color>')
    lines.append("</resources>")
    return "\n".join(lines)


EXPORTERS: Dict[ExportFormat, Callable[[List[PaletteColor]], str]] = {
    ExportFormat.CSS: export_as_css,
    ExportFormat.SCSS: export_as_scss,
    ExportFormat.JSON: export_as_json,
    ExportFormat.TAILWIND: export_as_tailwind,
    ExportFormat.TOKENS: export_as_design_tokens,
    ExportFormat.SWIFT: export_as_swift,
    ExportFormat.XML: export_as_android_xml,
}


def export_palette(colors: List[PaletteColor], fmt: ExportFormat) -> str:
    return EXPORTERS[fmt](colors)
