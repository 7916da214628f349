#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/logic/palette/resolver.py

import argparse
import sys
from typing import List

from huepass.palette.model import PaletteColor, create_palette_color
from huepass.shared.logger import log
from huepass.shared.storage import JsonFileStore, clear_stored_palette, load_palette, save_palette


def resolve_palette_input(args: argparse.Namespace) -> List[PaletteColor]:
    """Build the palette from -c entries or the store, applying --clear/--save."""
    store = JsonFileStore(args.store) if args.store else None

    if (args.save or args.clear) and store is None:
        log("error", "--save and --clear require --store FILE")
        sys.exit(2)

    if args.clear:
        clear_stored_palette(store)
        log("success", f"cleared stored palette in '{args.store}'")

    if args.color:
        # Entries are validated by argparse, so creation cannot fail here
        colors = [create_palette_color(name, hex_code) for name, hex_code in args.color]
    elif store is not None:
        colors = load_palette(store)
    else:
        colors = []

    if args.save:
        save_palette(store, colors)
        log("success", f"saved {len(colors)} colors to '{args.store}'")

    return colors
