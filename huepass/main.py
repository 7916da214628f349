#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/main.py

import argparse
import sys

from huepass import __version__
from huepass.logic.contrast import engine
from huepass.subcommands.command_registry import SUBCOMMANDS
from huepass.shared.logger import log, HuepassArgumentParser
from huepass.shared.sanitizer import INPUT_HANDLERS
from huepass.shared.truecolor import ensure_truecolor


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main contrast command."""
    parser = HuepassArgumentParser(
        prog="huepass",
        description="huepass: check WCAG contrast between a foreground and a background color",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"huepass {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "-f",
        "--foreground",
        type=INPUT_HANDLERS["hex"],
        help="foreground (text) hex code, 3 or 6 digits, '#' optional",
    )
    parser.add_argument(
        "-b",
        "--background",
        type=INPUT_HANDLERS["hex"],
        help="background hex code, 3 or 6 digits, '#' optional",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_contrast_command(args: argparse.Namespace) -> None:
    """Entry point for the core contrast command."""
    parser = get_contrast_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    if args.foreground is None or args.background is None:
        log("error", "both -f/--foreground and -b/--background are required")
        log("info", "use 'huepass --help' for more information")
        sys.exit(2)

    engine.run(args)


def main() -> None:
    """Main entry point for huepass CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_contrast_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_contrast_command(args)


if __name__ == "__main__":
    main()
