"""Held-key tracking. Turns press/release events into immutable snapshots."""
from __future__ import annotations

from jetpack.types import HeldKeys, Key


class KeyTracker:
    def __init__(self) -> None:
        self._held: set[Key] = set()

    def press(self, key: Key) -> None:
        self._held.add(key)

    def release(self, key: Key) -> None:
        self._held.discard(key)

    def clear(self) -> None:
        """Drop every held key, e.g. when the window loses focus."""
        self._held.clear()

    def snapshot(self) -> HeldKeys:
        return frozenset(self._held)

    def __contains__(self, key: object) -> bool:
        return key in self._held
