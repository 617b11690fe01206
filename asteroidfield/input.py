"""Keyboard state tracking across frames and game updates."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

import pygame

log = logging.getLogger(__name__)

GRAPH_LENGTH = 200
GRAPH_COLOUR = (255, 255, 0)


class InputManager:
    """Tracks which keys are held, and which were held at the last update."""

    def __init__(self) -> None:
        self.keymap: set[int] = set()
        self._prev_keymap: frozenset[int] = frozenset()
        self.debug = False
        self.quit = False
        self.graph: deque[float] = deque(maxlen=GRAPH_LENGTH)

    def update(self) -> None:
        """Remember the current key state; call once per game update."""
        self._prev_keymap = frozenset(self.keymap)

    def handle_input(self, events: Iterable[pygame.event.Event]) -> None:
        """Apply a batch of window events to the key state."""
        for event in events:
            if event.type == pygame.QUIT:
                self.quit = True
            elif event.type == pygame.KEYDOWN:
                self.keymap.add(event.key)
            elif event.type == pygame.KEYUP:
                self.keymap.discard(event.key)

    def prev_check_key(self, key: int) -> bool:
        """Whether the key was held at the last update."""
        return key in self._prev_keymap

    def check_key(self, key: int) -> bool:
        """Whether the key is held now."""
        return key in self.keymap

    def check_key_pressed(self, key: int) -> bool:
        """Whether the key went down since the last update."""
        result = not self.prev_check_key(key) and self.check_key(key)
        if self.debug and result:
            log.info("Key pressed: input {%s}", key)
        return result

    def check_key_release(self, key: int) -> bool:
        """Whether the key went up since the last update."""
        result = self.prev_check_key(key) and not self.check_key(key)
        if self.debug and result:
            log.info("Key released: input {%s}", key)
        return result

    def update_graph(self, key: int) -> None:
        """Record one sample of the key's state for the debug graph."""
        pressed = float(self.check_key_pressed(key))
        held = float(self.check_key(key))
        released = float(self.check_key_release(key))
        value = pressed / 2 + held / 2 - released
        self.graph.append(-value)

    def render_graph(self, surface: pygame.Surface) -> None:
        """Draw the recorded samples as a yellow line."""
        points = [(2 * i + 20, value * 20 + 60) for i, value in enumerate(self.graph)]
        if len(points) >= 2:
            pygame.draw.lines(surface, GRAPH_COLOUR, False, points)