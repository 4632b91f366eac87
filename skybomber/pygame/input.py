"""Input handling for the pygame client."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from skybomber.core.entities import ControlMode
from skybomber.core.input import DirectionalState, InputState
from skybomber.pygame.keybindings import DEFAULT_BINDINGS, KeyBindings


class InputHandler:
    """Translate pygame events into staged player intent.

    Events only record what the player wants; the simulation reads it once per
    frame through :meth:`poll`, which also clears the one-shot requests.
    """

    def __init__(self, app, bindings: KeyBindings = DEFAULT_BINDINGS) -> None:
        self.app = app
        self.bindings = bindings
        self._held_keys: set[int] = set()
        self.pointer: Optional[Tuple[float, float]] = None
        self._fire_pending = False
        self._mode_pending: Optional[ControlMode] = None

    # ------------------------------------------------------------------
    # Event entry point
    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._held_keys.add(event.key)
            self._handle_key(event.key)
        elif event.type == pygame.KEYUP:
            self._held_keys.discard(event.key)
        elif event.type == pygame.MOUSEMOTION:
            self.pointer = self.app.to_world(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.pointer = self.app.to_world(event.pos)
            self._fire_pending = True

    def poll(self) -> InputState:
        state = InputState(
            directions=self.directions(),
            pointer=self.pointer,
            control_mode=self._mode_pending,
            fire_requested=self._fire_pending,
        )
        self._fire_pending = False
        self._mode_pending = None
        return state

    def directions(self) -> DirectionalState:
        held = self._held_keys
        bindings = self.bindings
        return DirectionalState(
            up=bool(held & bindings.up),
            down=bool(held & bindings.down),
            left=bool(held & bindings.left),
            right=bool(held & bindings.right),
        )

    def reset(self) -> None:
        self._held_keys.clear()
        self._fire_pending = False
        self._mode_pending = None

    # ------------------------------------------------------------------
    # Internal helpers
    def _handle_key(self, key: int) -> None:
        app = self.app
        bindings = self.bindings
        if key in bindings.quit:
            app.running = False
            return
        if key in bindings.restart:
            if app.session.crashed:
                app.restart()
            return
        if key in bindings.toggle_mode:
            current = self._mode_pending or app.session.control_mode
            self._mode_pending = current.toggled()
            return
        if key in bindings.fire and not app.session.crashed:
            self._fire_pending = True


__all__ = ["InputHandler"]
