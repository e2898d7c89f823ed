"""
src/layers/registry.py
──────────────────────
Keyed layer store with independent visibility.

Rebuilding a layer (`put`) keeps its visibility; toggling visibility never
rebuilds or refetches. A key may be marked visible before its layer exists.
"""
from __future__ import annotations

import threading
from collections.abc import Iterable

from config.stations import DEFAULT_VISIBLE_LAYERS
from src.layers.builders import Layer


class LayerRegistry:
    def __init__(self, visible: Iterable[str] = DEFAULT_VISIBLE_LAYERS):
        self._layers: dict[str, Layer] = {}
        self._visible: set[str] = set(visible)
        self._lock = threading.Lock()

    def put(self, layer: Layer) -> None:
        with self._lock:
            self._layers[layer.key] = layer

    def get(self, key: str) -> Layer | None:
        with self._lock:
            return self._layers.get(key)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._layers)

    def toggle(self, key: str) -> bool:
        """Flip visibility; returns the new state."""
        with self._lock:
            if key in self._visible:
                self._visible.discard(key)
                return False
            self._visible.add(key)
            return True

    def set_visible(self, keys: Iterable[str]) -> None:
        with self._lock:
            self._visible = set(keys)

    def is_visible(self, key: str) -> bool:
        with self._lock:
            return key in self._visible

    def visible_keys(self) -> list[str]:
        with self._lock:
            return sorted(self._visible)

    def visible_layers(self) -> list[Layer]:
        """Built layers that are switched on, in build order."""
        with self._lock:
            return [layer for key, layer in self._layers.items() if key in self._visible]
