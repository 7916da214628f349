#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/logic/vision/engine.py

import argparse
import sys

from huepass.core import config as c
from huepass.core.vision import CvdType, generate_cvd_filters, parse_cvd_type, simulate_cvd
from huepass.shared.logger import log
from huepass.shared.state import CvdModeState
from huepass.shared.storage import JsonFileStore
from .renderer import render_simulations


def _selected_types(args: argparse.Namespace, state: CvdModeState):
    if args.all_simulates:
        return [CvdType(key) for key in c.SIMULATE_KEYS]
    selected = [CvdType(key) for key in c.SIMULATE_KEYS if getattr(args, key, False)]
    if not selected and state.mode is not CvdType.NONE:
        selected = [state.mode]
    return selected


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the vision command"""
    if args.svg_filters:
        print(generate_cvd_filters())
        return

    state = CvdModeState.from_store(JsonFileStore(args.store)) if args.store else CvdModeState()

    if args.set_mode is not None:
        state.subscribe(lambda mode: log("success", f"cvd mode set to '{mode.value}'"))
        state.set_mode(parse_cvd_type(args.set_mode))
        if not args.store:
            log("warning", "no --store given, mode is not persisted")

    if args.hex is None:
        if args.set_mode is None:
            log("error", "-H/--hex is required unless --svg-filters or -M/--set-mode is used")
            sys.exit(2)
        return

    simulated = [(cvd_type, simulate_cvd(args.hex, cvd_type)) for cvd_type in _selected_types(args, state)]
    render_simulations(args.hex, simulated)
