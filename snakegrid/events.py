"""Per-frame keyboard and quit tracking."""

from __future__ import annotations

from collections.abc import Iterable

import pygame


class EventManager:
    """Tracks keys newly pressed this frame and whether quitting was requested."""

    def __init__(self) -> None:
        self._pressed: set[int] = set()
        self._last_pressed: set[int] = set()
        self._should_quit = False

    def poll_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Consume one frame's events, identifying keys by scancode."""
        self._last_pressed = self._pressed
        self._pressed = set()
        for event in events:
            if event.type == pygame.QUIT:
                self._should_quit = True
            elif event.type == pygame.KEYDOWN and not getattr(event, "repeat", False):
                self._pressed.add(event.scancode)

    def is_key_pressed(self, key: int) -> bool:
        """True if the key went down this frame but not the previous one."""
        return key in self._pressed and key not in self._last_pressed

    def should_quit(self) -> bool:
        return self._should_quit