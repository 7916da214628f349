#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/shared/clamping.py

import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(255.0, v))


def _clamp100(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(100.0, v))


def _round_half_up(v: float) -> int:
    # 76.5 -> 77, unlike round() which gives the even neighbour
    return int(math.floor(v + 0.5))
