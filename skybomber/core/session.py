"""Game session management decoupled from rendering concerns."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from skybomber.core.collisions import CollisionResolver, TickEvents
from skybomber.core.entities import Aircraft, Bomb, ControlMode, FuelCan, Tank
from skybomber.core.input import IDLE, InputState
from skybomber.core.physics import MovementIntegrator
from skybomber.core.settings import ConfigurationError, WorldSettings
from skybomber.core.snapshot import WorldSnapshot, build_snapshot
from skybomber.core.spawner import EntitySpawner
from skybomber.core.state import SessionState, SessionStatus
from skybomber.core.terrain import TerrainProfile, generate_terrain

logger = logging.getLogger(__name__)

START_ALTITUDE = 90.0


class GameSession:
    """Own the mutable state of one play-through and advance it tick by tick.

    A session starts ``FLYING`` and ends ``CRASHED``; once crashed the world
    is frozen and every further tick is a no-op. Starting over means creating
    a new session.
    """

    def __init__(
        self,
        settings: Optional[WorldSettings] = None,
        *,
        control_mode: ControlMode = ControlMode.DIRECTIONAL,
        terrain: Optional[TerrainProfile] = None,
        aircraft: Optional[Aircraft] = None,
        rng: Optional[random.Random] = None,
        integrator: Optional[MovementIntegrator] = None,
        resolver: Optional[CollisionResolver] = None,
        spawner: Optional[EntitySpawner] = None,
    ) -> None:
        self.settings = (settings or WorldSettings()).validate()
        self._rng = rng or random.Random(self.settings.seed)
        width = float(self.settings.width)
        height = float(self.settings.height)

        self.integrator = integrator or MovementIntegrator()
        self.resolver = resolver or CollisionResolver()
        self.spawner = spawner or EntitySpawner(self._rng)

        if terrain is not None:
            _check_terrain_span(terrain, width)

        self.state = SessionState(
            width=width,
            height=height,
            terrain=terrain or generate_terrain(self.settings, self._rng),
            aircraft=aircraft or Aircraft(x=width / 2, y=START_ALTITUDE),
            control_mode=control_mode,
        )
        self.spawner.populate(self.state)
        logger.info(
            "Session started: world %dx%d, %d terrain points, %s controls",
            self.settings.width,
            self.settings.height,
            len(self.state.terrain),
            control_mode.value,
        )

    # ------------------------------------------------------------------
    # Properties
    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def crashed(self) -> bool:
        return self.state.crashed

    @property
    def aircraft(self) -> Aircraft:
        return self.state.aircraft

    @property
    def terrain(self) -> TerrainProfile:
        return self.state.terrain

    @property
    def tanks(self) -> Sequence[Tank]:
        return self.state.tanks

    @property
    def fuel_cans(self) -> Sequence[FuelCan]:
        return self.state.fuel_cans

    @property
    def control_mode(self) -> ControlMode:
        return self.state.control_mode

    @property
    def tick_count(self) -> int:
        return self.state.tick

    # ------------------------------------------------------------------
    # Player actions
    def drop_bomb(self) -> Optional[Bomb]:
        if self.crashed:
            return None
        return self.integrator.drop_bomb(self.state)

    def toggle_control_mode(self) -> ControlMode:
        self.set_control_mode(self.state.control_mode.toggled())
        return self.state.control_mode

    def set_control_mode(self, mode: ControlMode) -> None:
        if mode is not self.state.control_mode:
            logger.debug("Control mode switched to %s", mode.value)
        self.state.control_mode = mode

    # ------------------------------------------------------------------
    # Simulation
    def tick(self, controls: InputState = IDLE) -> TickEvents:
        """Advance the world by one fixed step."""

        if self.crashed:
            return TickEvents()

        state = self.state
        if controls.control_mode is not None:
            self.set_control_mode(controls.control_mode)
        if controls.fire_requested:
            self.drop_bomb()

        self.integrator.advance(state, controls)
        events = self.resolver.resolve(state)
        self.spawner.populate(state)
        state.tick += 1
        self._update_status(events)
        return events

    def snapshot(self) -> WorldSnapshot:
        return build_snapshot(self.state)

    # ------------------------------------------------------------------
    # Internal helpers
    def _update_status(self, events: TickEvents) -> None:
        aircraft = self.state.aircraft
        if aircraft.alive:
            return
        self.state.status = SessionStatus.CRASHED
        if events.crash_cause is None:
            events.crash_cause = aircraft.crash_cause
        logger.info(
            "Game over after %d ticks (%s), final score %d",
            self.state.tick,
            aircraft.crash_cause.value if aircraft.crash_cause else "unknown",
            aircraft.score,
        )


def _check_terrain_span(terrain: TerrainProfile, width: float) -> None:
    first, last = terrain.points[0], terrain.points[-1]
    if first.x != 0 or last.x != width:
        raise ConfigurationError(
            f"terrain spans {first.x}..{last.x} but the world is 0..{width} wide"
        )


__all__ = ["GameSession"]
