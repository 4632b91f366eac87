"""Collision detection and the gameplay effects it triggers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from skybomber.core.entities import Bomb, CrashCause, Explosion, FuelCan, Tank
from skybomber.core.state import SessionState

logger = logging.getLogger(__name__)


@dataclass
class TickEvents:
    """Information about what happened during one tick."""

    explosions: List[Explosion] = field(default_factory=list)
    tanks_destroyed: List[Tank] = field(default_factory=list)
    fuel_collected: List[FuelCan] = field(default_factory=list)
    points_scored: int = 0
    fuel_gained: float = 0.0
    crash_cause: Optional[CrashCause] = None


class CollisionResolver:
    """Resolve terrain, tank and fuel interactions for a tick.

    Checks run in a fixed order: aircraft against terrain, bombs against
    terrain (with the blast hitting tanks at the moment of detonation), then
    fuel pickups. Spent entities are swept out afterwards.
    """

    def __init__(
        self,
        *,
        ground_clearance: float = 4.0,
        explosion_lift: float = 2.0,
        explosion_radius: float = 3.0,
        explosion_ticks: int = 18,
        blast_radius: float = 32.0,
        tank_points: int = 50,
        pickup_radius: float = 24.0,
        fuel_per_can: float = 60.0,
    ) -> None:
        self.ground_clearance = ground_clearance
        self.explosion_lift = explosion_lift
        self.explosion_radius = explosion_radius
        self.explosion_ticks = explosion_ticks
        self.blast_radius = blast_radius
        self.tank_points = tank_points
        self.pickup_radius = pickup_radius
        self.fuel_per_can = fuel_per_can

    def resolve(self, state: SessionState) -> TickEvents:
        events = TickEvents()
        self._check_aircraft_terrain(state, events)
        for bomb in state.bombs:
            if not bomb.exploded:
                self._check_bomb_terrain(state, bomb, events)
        self._check_fuel_pickups(state, events)
        self._sweep(state)
        return events

    # ------------------------------------------------------------------
    # Individual checks
    def _check_aircraft_terrain(self, state: SessionState, events: TickEvents) -> None:
        aircraft = state.aircraft
        if not aircraft.alive:
            return
        if state.terrain.is_below_ground(aircraft.x, aircraft.belly_y):
            aircraft.crash(CrashCause.TERRAIN)
            events.crash_cause = CrashCause.TERRAIN
            logger.info(
                "Aircraft hit the terrain at (%.1f, %.1f) on tick %d",
                aircraft.x,
                aircraft.y,
                state.tick,
            )

    def _check_bomb_terrain(
        self, state: SessionState, bomb: Bomb, events: TickEvents
    ) -> None:
        ground = state.terrain.height_at(bomb.x)
        if bomb.y <= ground - self.ground_clearance:
            return
        bomb.exploded = True
        explosion = Explosion(
            x=bomb.x,
            y=ground - self.explosion_lift,
            radius=self.explosion_radius,
            remaining_ticks=self.explosion_ticks,
        )
        state.explosions.append(explosion)
        events.explosions.append(explosion)
        self._apply_blast(state, bomb, events)

    def _apply_blast(self, state: SessionState, bomb: Bomb, events: TickEvents) -> None:
        for tank in state.tanks:
            if not tank.alive:
                continue
            if tank.distance_to(bomb.x, bomb.y) >= self.blast_radius:
                continue
            tank.destroy()
            state.aircraft.add_score(self.tank_points)
            events.tanks_destroyed.append(tank)
            events.points_scored += self.tank_points
            logger.debug("Tank destroyed at (%.1f, %.1f)", tank.x, tank.y)

    def _check_fuel_pickups(self, state: SessionState, events: TickEvents) -> None:
        aircraft = state.aircraft
        if not aircraft.alive:
            return
        for can in state.fuel_cans:
            if not can.alive:
                continue
            if can.distance_to(aircraft.x, aircraft.y) >= self.pickup_radius:
                continue
            can.consume()
            aircraft.refuel(self.fuel_per_can)
            events.fuel_collected.append(can)
            events.fuel_gained += self.fuel_per_can
            logger.debug("Fuel collected, tank now %.1f", aircraft.fuel)

    # ------------------------------------------------------------------
    def _sweep(self, state: SessionState) -> None:
        state.bombs = [
            bomb for bomb in state.bombs if not bomb.exploded and bomb.y < state.height
        ]
        state.explosions = [ex for ex in state.explosions if not ex.expired]
        state.tanks = [tank for tank in state.tanks if tank.alive]
        state.fuel_cans = [can for can in state.fuel_cans if can.alive]


__all__ = ["CollisionResolver", "TickEvents"]
