"""Keybinding definitions for the Sky Bomber pygame client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

import pygame


def _keys(*keys: int) -> FrozenSet[int]:
    return frozenset(keys)


@dataclass(frozen=True)
class KeyBindings:
    up: FrozenSet[int] = field(default_factory=lambda: _keys(pygame.K_w, pygame.K_UP))
    down: FrozenSet[int] = field(default_factory=lambda: _keys(pygame.K_s, pygame.K_DOWN))
    left: FrozenSet[int] = field(default_factory=lambda: _keys(pygame.K_a, pygame.K_LEFT))
    right: FrozenSet[int] = field(
        default_factory=lambda: _keys(pygame.K_d, pygame.K_RIGHT)
    )
    fire: FrozenSet[int] = field(default_factory=lambda: _keys(pygame.K_SPACE))
    toggle_mode: FrozenSet[int] = field(default_factory=lambda: _keys(pygame.K_m))
    restart: FrozenSet[int] = field(default_factory=lambda: _keys(pygame.K_r))
    quit: FrozenSet[int] = field(default_factory=lambda: _keys(pygame.K_ESCAPE))


DEFAULT_BINDINGS = KeyBindings()


__all__ = ["DEFAULT_BINDINGS", "KeyBindings"]
