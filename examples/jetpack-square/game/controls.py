"""Hardware key bindings for the logical simulation keys."""
from __future__ import annotations

import pygame

from jetpack import Key, KeyTracker

KEY_BINDINGS: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_EQUALS: Key.GROW,
    pygame.K_PLUS: Key.GROW,
    pygame.K_KP_PLUS: Key.GROW,
    pygame.K_MINUS: Key.SHRINK,
    pygame.K_KP_MINUS: Key.SHRINK,
}


def handle_key_event(tracker: KeyTracker, event: pygame.event.Event) -> None:
    """Feed a KEYDOWN/KEYUP event into the tracker. Unbound keys are ignored."""
    key = KEY_BINDINGS.get(event.key)
    if key is None:
        return
    if event.type == pygame.KEYDOWN:
        tracker.press(key)
    elif event.type == pygame.KEYUP:
        tracker.release(key)
