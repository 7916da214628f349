#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/logic/vision/renderer.py

from typing import List, Tuple

from huepass.core import config as c
from huepass.core.vision import CvdType
from huepass.shared.preview import print_color_block

_SHORT_LABELS = {
    CvdType.PROTANOPIA: "protan",
    CvdType.DEUTERANOPIA: "deuter",
    CvdType.TRITANOPIA: "tritan",
    CvdType.ACHROMATOPSIA: "achroma",
}


def render_simulations(base_hex: str, simulated: List[Tuple[CvdType, str]]) -> None:
    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}base color{c.RESET}")
    if simulated:
        print()
    for cvd_type, sim_hex in simulated:
        label = f"{c.MSG_BOLD_COLORS['info']}{_SHORT_LABELS[cvd_type]}{c.RESET}"
        print_color_block(sim_hex, label)
    print()
