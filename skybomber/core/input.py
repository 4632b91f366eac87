"""Abstract control state consumed once per simulation tick."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from skybomber.core.entities import ControlMode


@dataclass(frozen=True)
class DirectionalState:
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @property
    def horizontal(self) -> int:
        return int(self.right) - int(self.left)

    @property
    def vertical(self) -> int:
        return int(self.down) - int(self.up)


@dataclass(frozen=True)
class InputState:
    """Player intent staged by the front-end for the next tick.

    ``control_mode`` is ``None`` when the front-end does not want to change
    the current mode, and ``pointer`` is ``None`` when no pointer position is
    known yet. ``fire_requested`` is edge-triggered: the front-end
    reports each press exactly once.
    """

    directions: DirectionalState = field(default_factory=DirectionalState)
    pointer: Optional[Tuple[float, float]] = None
    control_mode: Optional[ControlMode] = None
    fire_requested: bool = False


IDLE = InputState()


__all__ = ["DirectionalState", "IDLE", "InputState"]
