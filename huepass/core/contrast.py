#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/core/contrast.py

from typing import Tuple

from . import config as c
from .luminance import get_luminance


def get_contrast_ratio(c1: Tuple[int, int, int], c2: Tuple[int, int, int]) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two RGB colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter luminance.
    The result does not depend on argument order and lies in [1, 21].
    """
    y1 = get_luminance(*c1)
    y2 = get_luminance(*c2)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def format_contrast_ratio(ratio: float) -> str:
    return f"{ratio:.{c.EXP_2}f}:1"
