#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/logic/palette/renderer.py

from typing import List

from huepass.core import config as c
from huepass.core.contrast import format_contrast_ratio
from huepass.palette.matrix import MatrixCell
from huepass.palette.model import PaletteColor
from huepass.shared.preview import print_color_block

CELL_WIDTH = 10


def _fit(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "~"


def render_palette(colors: List[PaletteColor], matrix: List[List[MatrixCell]]) -> None:
    """Print palette swatches followed by the contrast matrix (rows are backgrounds)."""
    print()
    for color in colors:
        print_color_block(color.hex, f"{c.MSG_BOLD_COLORS['info']}{color.name}{c.RESET}")

    if not colors:
        print()
        return

    print()
    header = " " * CELL_WIDTH + "".join(f"{_fit(col.name, CELL_WIDTH - 1):>{CELL_WIDTH}}" for col in colors)
    print(f"{c.BOLD_WHITE}bg \\ fg{c.RESET}")
    print(f"{c.BOLD_WHITE}{header}{c.RESET}")
    for bg_color, cells in zip(colors, matrix):
        row = f"{c.BOLD_WHITE}{_fit(bg_color.name, CELL_WIDTH - 1):<{CELL_WIDTH}}{c.RESET}"
        for cell in cells:
            tone = c.MSG_COLORS['success'] if cell.compliance.normal_text_aa else c.MSG_COLORS['error']
            row += f"{tone}{format_contrast_ratio(cell.ratio):>{CELL_WIDTH}}{c.RESET}"
        print(row)
    print()
