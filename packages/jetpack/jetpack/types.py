"""Shared type aliases, logical keys, and errors for the jetpack core."""

from __future__ import annotations

import enum

Vec = tuple[float, float]


class Key(enum.Enum):
    """Logical keys the simulation understands. Mapping from hardware keys lives in the frontend."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    GROW = "grow"
    SHRINK = "shrink"


HeldKeys = frozenset[Key]

NO_KEYS: HeldKeys = frozenset()


class UnknownProfileError(KeyError):
    """Raised when looking up a physics profile that is not registered."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"Unknown profile {name!r}, expected one of {', '.join(known)}")
