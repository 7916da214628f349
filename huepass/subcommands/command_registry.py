#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/subcommands/command_registry.py

from . import (
    suggest,
    vision,
    palette,
    pair,
)

SUBCOMMANDS = {
    'suggest': suggest,
    'vision': vision,
    'palette': palette,
    'pair': pair,
}
