#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/core/vision.py

from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from . import config as c
from .conversions import _linear_to_srgb, _srgb_to_linear, format_hex, parse_hex


class CvdType(Enum):
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"
    NONE = "none"


class CvdInfo(NamedTuple):
    id: CvdType
    name: str
    description: str
    prevalence: str


CVD_TYPES: List[CvdInfo] = [
    CvdInfo(
        CvdType.PROTANOPIA,
        "Protanopia",
        "Red-blind, difficulty distinguishing red from green",
        "~1% of males",
    ),
    CvdInfo(
        CvdType.DEUTERANOPIA,
        "Deuteranopia",
        "Green-blind, most common form of color blindness",
        "~5% of males",
    ),
    CvdInfo(
        CvdType.TRITANOPIA,
        "Tritanopia",
        "Blue-blind, difficulty with blue and yellow",
        "~0.01% of population",
    ),
    CvdInfo(
        CvdType.ACHROMATOPSIA,
        "Achromatopsia",
        "Complete color blindness, sees only in grayscale",
        "~0.003% of population",
    ),
]

Matrix3 = Tuple[Tuple[float, float, float], ...]


def parse_cvd_type(value) -> Optional[CvdType]:
    """Map a mode name (any case) or CvdType to a CvdType, or None if unknown."""
    if isinstance(value, CvdType):
        return value
    if not isinstance(value, str):
        return None
    try:
        return CvdType(value.strip().lower())
    except ValueError:
        return None


def _require_cvd_type(value) -> CvdType:
    cvd_type = parse_cvd_type(value)
    if cvd_type is None:
        raise ValueError(f"unknown color vision deficiency: {value!r}")
    return cvd_type


def _apply_matrix(rgb_lin: Tuple[float, float, float], matrix: Matrix3) -> Tuple[float, float, float]:
    r_lin, g_lin, b_lin = rgb_lin
    return (
        r_lin * matrix[0][0] + g_lin * matrix[0][1] + b_lin * matrix[0][2],
        r_lin * matrix[1][0] + g_lin * matrix[1][1] + b_lin * matrix[1][2],
        r_lin * matrix[2][0] + g_lin * matrix[2][1] + b_lin * matrix[2][2],
    )


def simulate_cvd(hex_code: str, cvd_type) -> Optional[str]:
    """
    Simulate how a color appears under a color vision deficiency.

    The color is linearized (0.04045 breakpoint), transformed in linear RGB,
    then re-encoded to sRGB. `cvd_type` is a CvdType or its name. `NONE`
    returns the input untouched; a malformed hex returns None and an unknown
    mode raises ValueError.
    """
    cvd_type = _require_cvd_type(cvd_type)
    if cvd_type is CvdType.NONE:
        return hex_code

    rgb = parse_hex(hex_code)
    if rgb is None:
        return None

    rgb_lin = tuple(_srgb_to_linear(v) for v in rgb)

    if cvd_type is CvdType.ACHROMATOPSIA:
        w_r, w_g, w_b = c.GRAYSCALE_WEIGHTS
        gray = rgb_lin[0] * w_r + rgb_lin[1] * w_g + rgb_lin[2] * w_b
        sim_lin = (gray, gray, gray)
    else:
        sim_lin = _apply_matrix(rgb_lin, c.CB_MATRICES[cvd_type.value])

    return format_hex(*(_linear_to_srgb(v) * c.RGB_MAX for v in sim_lin))


# ==========================================
# SVG filter representation
# ==========================================

def get_filter_matrix(cvd_type) -> Tuple[Tuple[float, ...], ...]:
    """Return the 4x4 RGBA matrix (identity alpha row) for a CVD type."""
    cvd_type = _require_cvd_type(cvd_type)
    if cvd_type is CvdType.NONE:
        rows = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
    elif cvd_type is CvdType.ACHROMATOPSIA:
        rows = (c.GRAYSCALE_WEIGHTS,) * 3
    else:
        rows = c.CB_MATRICES[cvd_type.value]

    return tuple(tuple(row) + (0.0,) for row in rows) + ((0.0, 0.0, 0.0, 1.0),)


def get_cvd_filter_id(cvd_type) -> str:
    return f"cvd-filter-{_require_cvd_type(cvd_type).value}"


def _fe_color_matrix_values(cvd_type: CvdType) -> str:
    # feColorMatrix takes 4x5 values; the fifth column is a zero offset
    lines = []
    for row in get_filter_matrix(cvd_type):
        lines.append(" ".join(f"{v:g}" for v in row + (0.0,)))
    return "\n            ".join(lines)


def generate_cvd_filters() -> str:
    """Render hidden SVG <filter> definitions for every CVD type."""
    out = [
        '<svg class="cvd-filters" aria-hidden="true" '
        'style="position: absolute; width: 0; height: 0; overflow: hidden;">',
        "  <defs>",
    ]
    for info in CVD_TYPES:
        out.append(f"    <!-- {info.name} -->")
        out.append(f'    <filter id="{get_cvd_filter_id(info.id)}">')
        out.append('      <feColorMatrix type="matrix" values="')
        out.append(f"            {_fe_color_matrix_values(info.id)}")
        out.append('      "/>')
        out.append("    </filter>")
    out.append("  </defs>")
    out.append("</svg>")
    return "\n".join(out)
