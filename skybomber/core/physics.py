"""Per-tick movement for the aircraft, falling bombs and explosion blasts."""

from __future__ import annotations

import logging
import math
from typing import Optional

from skybomber.core.entities import Bomb, ControlMode, CrashCause
from skybomber.core.input import InputState
from skybomber.core.settings import (
    AIRCRAFT_MARGIN_BOTTOM,
    AIRCRAFT_MARGIN_SIDE,
    AIRCRAFT_MARGIN_TOP,
)
from skybomber.core.state import SessionState

logger = logging.getLogger(__name__)


class MovementIntegrator:
    """Advance positions by one fixed simulation step."""

    def __init__(
        self,
        *,
        fuel_burn: float = 0.09,
        pointer_follow: float = 0.09,
        heading_damping: float = 0.5,
        explosion_growth: float = 2.0,
        bomb_release_offset: float = 14.0,
    ) -> None:
        self.fuel_burn = fuel_burn
        self.pointer_follow = pointer_follow
        self.heading_damping = heading_damping
        self.explosion_growth = explosion_growth
        self.bomb_release_offset = bomb_release_offset

    def advance(self, state: SessionState, controls: InputState) -> None:
        aircraft = state.aircraft
        if aircraft.alive:
            self._burn_fuel(state)
        if aircraft.alive:
            self.move_aircraft(state, controls)
        for bomb in state.bombs:
            if not bomb.exploded:
                bomb.fall()
        for explosion in state.explosions:
            explosion.animate(self.explosion_growth)

    def drop_bomb(self, state: SessionState) -> Optional[Bomb]:
        aircraft = state.aircraft
        if not aircraft.alive:
            return None
        bomb = Bomb(x=aircraft.x, y=aircraft.y + self.bomb_release_offset)
        state.bombs.append(bomb)
        return bomb

    # ------------------------------------------------------------------
    # Aircraft
    def move_aircraft(self, state: SessionState, controls: InputState) -> None:
        aircraft = state.aircraft
        if state.control_mode is ControlMode.POINTER:
            if controls.pointer is not None:
                target_x, target_y = controls.pointer
                aircraft.x += (target_x - aircraft.x) * self.pointer_follow
                aircraft.y += (target_y - aircraft.y) * self.pointer_follow
                dx = target_x - aircraft.x
                dy = target_y - aircraft.y
                aircraft.heading = math.atan2(dy, dx) * self.heading_damping
        else:
            directions = controls.directions
            aircraft.x += directions.horizontal * aircraft.speed
            aircraft.y += directions.vertical * aircraft.speed
            aircraft.heading = 0.0
        self._clamp_aircraft(state)

    def _clamp_aircraft(self, state: SessionState) -> None:
        aircraft = state.aircraft
        aircraft.x = max(
            AIRCRAFT_MARGIN_SIDE, min(state.width - AIRCRAFT_MARGIN_SIDE, aircraft.x)
        )
        aircraft.y = max(
            AIRCRAFT_MARGIN_TOP, min(state.height - AIRCRAFT_MARGIN_BOTTOM, aircraft.y)
        )

    def _burn_fuel(self, state: SessionState) -> None:
        aircraft = state.aircraft
        aircraft.burn_fuel(self.fuel_burn)
        if aircraft.fuel <= 0 and aircraft.crash(CrashCause.FUEL):
            logger.info("Aircraft ran out of fuel at tick %d", state.tick)


__all__ = ["MovementIntegrator"]
