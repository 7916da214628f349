"""Palette exporters: exact formats, entry counts and key collisions."""

import json
import re

import pytest

from huepass.palette.export import (
    EXPORTERS,
    ExportFormat,
    export_as_android_xml,
    export_as_css,
    export_as_design_tokens,
    export_as_json,
    export_as_scss,
    export_as_swift,
    export_as_tailwind,
    export_palette,
    find_key_collisions,
)
from huepass.palette.model import PaletteColor

PALETTE = [
    PaletteColor("1", "Sky Blue", "#87CEEB"),
    PaletteColor("2", "Ink", "#111111"),
    PaletteColor("3", "Paper White", "#fafafa"),
]


def _swift_hexes(text):
    hexes = []
    for r, g, b in re.findall(r"red: ([\d.]+), green: ([\d.]+), blue: ([\d.]+)", text):
        hexes.append("#" + "".join(f"{round(float(v) * 255):02X}" for v in (r, g, b)))
    return hexes


def _entries(fmt, text):
    """Return the hex values emitted by an exporter, in order."""
    if fmt is ExportFormat.JSON:
        return list(json.loads(text)["colors"].values())
    if fmt is ExportFormat.TOKENS:
        return [t["$value"] for t in json.loads(text)["color"].values()]
    if fmt is ExportFormat.SWIFT:
        return _swift_hexes(text)
    if fmt is ExportFormat.SCSS:
        text = text.split("$colors")[0]
    return re.findall(r"#[0-9A-F]{6}", text)


def test_css():
    assert export_as_css(PALETTE) == "\n".join([
        ":root {",
        "  --color-sky-blue: #87CEEB;",
        "  --color-ink: #111111;",
        "  --color-paper-white: #FAFAFA;",
        "}",
    ])


def test_scss():
    assert export_as_scss(PALETTE) == "\n".join([
        "$color-sky-blue: #87CEEB;",
        "$color-ink: #111111;",
        "$color-paper-white: #FAFAFA;",
        "",
        "$colors: (",
        "  'sky-blue': #87CEEB,",
        "  'ink': #111111,",
        "  'paper-white': #FAFAFA,",
        ");",
    ])


def test_json():
    data = json.loads(export_as_json(PALETTE))
    assert data == {"colors": {"sky_blue": "#87CEEB", "ink": "#111111", "paper_white": "#FAFAFA"}}
    assert export_as_json(PALETTE).startswith('{\n  "colors": {\n    "sky_blue": "#87CEEB",')


def test_tailwind():
    assert export_as_tailwind(PALETTE) == "\n".join([
        "module.exports = {",
        "  theme: {",
        "    extend: {",
        "      colors: {",
        "        'sky-blue': '#87CEEB',",
        "        'ink': '#111111',",
        "        'paper-white': '#FAFAFA',",
        "      },",
        "    },",
        "  },",
        "};",
    ])


def test_design_tokens():
    tokens = json.loads(export_as_design_tokens(PALETTE))
    assert list(tokens) == ["color"]
    assert tokens["color"]["sky-blue"] == {
        "$type": "color",
        "$value": "#87CEEB",
        "$description": "Sky Blue",
    }
    assert list(tokens["color"]) == ["sky-blue", "ink", "paper-white"]


def test_swift():
    text = export_as_swift(PALETTE)
    lines = text.split("\n")
    assert lines[:4] == ["import UIKit", "", "extension UIColor {", "    struct Palette {"]
    assert "        static let skyBlue = UIColor(red: 0.529, green: 0.808, blue: 0.922, alpha: 1.0)" in lines
    assert "        static let paperWhite = UIColor(red: 0.980, green: 0.980, blue: 0.980, alpha: 1.0)" in lines
    assert lines[-2:] == ["    }", "}"]


def test_swift_names_never_start_with_a_digit():
    text = export_as_swift([PaletteColor("1", "500 Gray", "#000000")])
    assert "        static let _500Gray = UIColor(red: 0.000, green: 0.000, blue: 0.000, alpha: 1.0)" in text.split("\n")


def test_android_xml():
    assert export_as_android_xml(PALETTE) == "\n".join([
        '<?xml version="1.0" encoding="utf-8"?>',
        "<resources>",
        '    <color name="sky_blue">#87CEEB</color>',
        '    <color name="ink">#111111</color>',
        '    <color name="paper_white">#FAFAFA</color>',
        "</resources>",
    ])


@pytest.mark.parametrize("fmt", list(ExportFormat))
def test_every_exporter_emits_each_color_once(fmt):
    text = export_palette(PALETTE, fmt)
    assert _entries(fmt, text) == ["#87CEEB", "#111111", "#FAFAFA"]


@pytest.mark.parametrize("fmt", list(ExportFormat))
def test_exporters_are_deterministic(fmt):
    assert export_palette(PALETTE, fmt) == export_palette(PALETTE, fmt)
    assert export_palette(PALETTE, fmt) == EXPORTERS[fmt](PALETTE)


@pytest.mark.parametrize("fmt", list(ExportFormat))
def test_colliding_keys_resolve_last_write_wins(fmt):
    colors = [
        PaletteColor("1", "Sky Blue", "#111111"),
        PaletteColor("2", "Other", "#333333"),
        PaletteColor("3", "sky-blue", "#222222"),
    ]
    assert _entries(fmt, export_palette(colors, fmt)) == ["#222222", "#333333"]


def test_find_key_collisions():
    colors = [
        PaletteColor("1", "Sky Blue", "#111111"),
        PaletteColor("2", "sky-blue", "#222222"),
        PaletteColor("3", "Ink", "#333333"),
    ]
    assert find_key_collisions(colors) == {"sky-blue": ["Sky Blue", "sky-blue"]}
    assert find_key_collisions(PALETTE) == {}


@pytest.mark.parametrize("fmt", list(ExportFormat))
def test_malformed_colors_are_skipped(fmt):
    colors = PALETTE + [PaletteColor("4", "Broken", "#12")]
    assert _entries(fmt, export_palette(colors, fmt)) == ["#87CEEB", "#111111", "#FAFAFA"]


def test_export_does_not_mutate_palette():
    colors = list(PALETTE)
    for fmt in ExportFormat:
        export_palette(colors, fmt)
    assert colors == PALETTE
    assert colors[2].hex == "#fafafa"
