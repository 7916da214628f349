#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/palette/matrix.py

from typing import List, NamedTuple

from huepass.core.compliance import ContrastResult, check_wcag_compliance
from huepass.core.contrast import get_contrast_ratio
from huepass.core.conversions import parse_hex
from .model import PaletteColor


class MatrixCell(NamedTuple):
    foreground_id: str
    background_id: str
    ratio: float
    compliance: ContrastResult


def calculate_pair_contrast(foreground: PaletteColor, background: PaletteColor) -> float:
    """Contrast between two palette colors; 1.0 when either hex is malformed."""
    fg_rgb = parse_hex(foreground.hex)
    bg_rgb = parse_hex(background.hex)
    if fg_rgb is None or bg_rgb is None:
        return 1.0
    return get_contrast_ratio(fg_rgb, bg_rgb)


def build_contrast_matrix(colors: List[PaletteColor]) -> List[List[MatrixCell]]:
    """Row i uses colors[i] as background, column j uses colors[j] as foreground."""
    matrix = []
    for bg_color in colors:
        row = []
        for fg_color in colors:
            ratio = calculate_pair_contrast(fg_color, bg_color)
            row.append(MatrixCell(
                foreground_id=fg_color.id,
                background_id=bg_color.id,
                ratio=ratio,
                compliance=check_wcag_compliance(ratio),
            ))
        matrix.append(row)
    return matrix
