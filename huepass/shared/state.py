#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/shared/state.py

from collections.abc import MutableMapping
from typing import Callable, List, Optional

from huepass.core.vision import CvdType
from .storage import load_cvd_mode, save_cvd_mode

Listener = Callable[[CvdType], None]


class CvdModeState:
    """
    Current CVD display mode, owned by the presentation layer.

    Optionally backed by a key-value store (last write wins). Subscribers
    are called with the new mode after every `set_mode`.
    """

    def __init__(self, mode: CvdType = CvdType.NONE, store: Optional[MutableMapping] = None):
        self._mode = mode
        self._store = store
        self._listeners: List[Listener] = []

    @classmethod
    def from_store(cls, store: MutableMapping) -> "CvdModeState":
        return cls(load_cvd_mode(store), store)

    @property
    def mode(self) -> CvdType:
        return self._mode

    def set_mode(self, mode: CvdType) -> None:
        self._mode = mode
        if self._store is not None:
            save_cvd_mode(self._store, mode)
        for listener in list(self._listeners):
            listener(mode)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
