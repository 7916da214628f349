#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/shared/storage.py

import json
import os
from collections.abc import MutableMapping
from typing import Iterator, List

from huepass.core import config as c
from huepass.core.conversions import normalize_hex
from huepass.core.vision import CvdType, parse_cvd_type
from huepass.palette.model import PaletteColor
from .logger import log


class JsonFileStore(MutableMapping):
    """
    String key-value store persisted as a single JSON object file.

    A missing or unreadable file behaves as an empty store. Every write
    rewrites the whole file.
    """

    def __init__(self, path: str):
        self.path = path
        self._data = self._read()

    def _read(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError, RecursionError):
            log("warning", f"could not read store '{self.path}', starting empty")
            return {}
        if not isinstance(data, dict):
            log("warning", f"store '{self.path}' is not a JSON object, starting empty")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self) -> None:
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump(self._data, fh, indent=2, ensure_ascii=False)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value
        self._write()

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._write()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


# ==========================================
# Palette persistence
# ==========================================

def save_palette(store: MutableMapping, colors: List[PaletteColor]) -> None:
    store[c.PALETTE_STORAGE_KEY] = json.dumps([col._asdict() for col in colors])


def _decode_palette(raw: str) -> List[PaletteColor]:
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("palette is not a list")

    colors = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError("palette entry is not an object")
        color_id, name = item.get("id"), item.get("name")
        if not isinstance(color_id, str) or not isinstance(name, str):
            raise ValueError("palette entry needs string 'id' and 'name'")
        clean_hex = normalize_hex(item.get("hex"))
        if clean_hex is None:
            raise ValueError(f"palette entry '{name}' has an invalid hex")
        colors.append(PaletteColor(id=color_id, name=name, hex=clean_hex))
    return colors


def load_palette(store: MutableMapping) -> List[PaletteColor]:
    """
    Load the stored palette.

    A missing value yields an empty palette. Anything that does not match
    the schema (a JSON list of {id, name, hex} objects) is discarded as a
    whole and also yields an empty palette.
    """
    raw = store.get(c.PALETTE_STORAGE_KEY)
    if not raw:
        return []
    try:
        return _decode_palette(raw)
    except (TypeError, ValueError, RecursionError) as e:
        log("warning", f"discarding stored palette: {e}")
        return []


def clear_stored_palette(store: MutableMapping) -> None:
    store.pop(c.PALETTE_STORAGE_KEY, None)


# ==========================================
# CVD mode persistence
# ==========================================

def save_cvd_mode(store: MutableMapping, mode: CvdType) -> None:
    store[c.CVD_STORAGE_KEY] = mode.value


def load_cvd_mode(store: MutableMapping) -> CvdType:
    """Stored CVD mode, or NONE when missing or unrecognised."""
    return parse_cvd_type(store.get(c.CVD_STORAGE_KEY)) or CvdType.NONE
