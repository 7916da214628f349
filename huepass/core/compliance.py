#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/core/compliance.py

from typing import NamedTuple

from . import config as c
from .contrast import format_contrast_ratio


class ContrastResult(NamedTuple):
    ratio: float
    ratio_string: str
    normal_text_aa: bool
    normal_text_aaa: bool
    large_text_aa: bool
    large_text_aaa: bool
    ui_components: bool


class WcagLevel(NamedTuple):
    level: str
    label: str


AAA_PASS = WcagLevel("AAA", "AAA Pass")
AA_PASS = WcagLevel("AA", "AA Pass")
FAIL = WcagLevel("Fail", "Fail")


def check_wcag_compliance(ratio: float) -> ContrastResult:
    """Classify a contrast ratio against every WCAG 2.1 threshold."""
    return ContrastResult(
        ratio=ratio,
        ratio_string=format_contrast_ratio(ratio),
        normal_text_aa=ratio >= c.WCAG_AA_NORMAL,
        normal_text_aaa=ratio >= c.WCAG_AAA_NORMAL,
        large_text_aa=ratio >= c.WCAG_AA_LARGE,
        large_text_aaa=ratio >= c.WCAG_AAA_LARGE,
        ui_components=ratio >= c.WCAG_UI_COMPONENTS,
    )


def _grade(ratio: float, aaa: float, aa: float) -> WcagLevel:
    if ratio >= aaa:
        return AAA_PASS
    if ratio >= aa:
        return AA_PASS
    return FAIL


def get_normal_text_level(ratio: float) -> WcagLevel:
    return _grade(ratio, c.WCAG_AAA_NORMAL, c.WCAG_AA_NORMAL)


def get_large_text_level(ratio: float) -> WcagLevel:
    return _grade(ratio, c.WCAG_AAA_LARGE, c.WCAG_AA_LARGE)
