#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/palette/report.py

from typing import List

from huepass.core.contrast import format_contrast_ratio
from .matrix import MatrixCell
from .model import PaletteColor


def _row(cells: List[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def export_contrast_report(colors: List[PaletteColor], matrix: List[List[MatrixCell]]) -> str:
    """
    Render a Markdown contrast report: palette listing, then the full matrix.

    Every cell is judged against the normal-text AA threshold only.
    """
    lines = ["# Color Contrast Report", "", "## Palette Colors", ""]

    for color in colors:
        lines.append(f"- **{color.name}**: {color.hex}")

    lines.extend(["", "## Contrast Matrix", ""])

    header = ["Background \\ Foreground"] + [color.name for color in colors]
    lines.append(_row(header))
    lines.append(_row(["---"] * len(header)))

    for bg_color, cells in zip(colors, matrix):
        row = [bg_color.name]
        for cell in cells:
            status = "Pass" if cell.compliance.normal_text_aa else "Fail"
            row.append(f"{format_contrast_ratio(cell.ratio)} ({status})")
        lines.append(_row(row))

    return "\n".join(lines)
