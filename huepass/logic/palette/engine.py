#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/logic/palette/engine.py

import argparse
import sys

from huepass.palette.export import ExportFormat, export_palette, find_key_collisions
from huepass.palette.matrix import build_contrast_matrix
from huepass.palette.report import export_contrast_report
from huepass.shared.logger import log
from .renderer import render_palette
from .resolver import resolve_palette_input


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the palette command"""
    colors = resolve_palette_input(args)
    if not colors:
        if args.clear or args.save:
            return
        log("error", "palette is empty: pass -c NAME=HEX entries or --store FILE")
        sys.exit(2)

    for key, names in find_key_collisions(colors).items():
        log("warning", f"names {', '.join(repr(n) for n in names)} share export key '{key}', the last one is used")

    matrix = build_contrast_matrix(colors)

    if args.export:
        text = export_palette(colors, ExportFormat(args.export))
    elif args.report:
        text = export_contrast_report(colors, matrix)
    else:
        render_palette(colors, matrix)
        return

    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
        log("success", f"wrote '{args.output}'")
    else:
        print(text)
