"""Immutable read views of the world handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from skybomber.core.entities import ControlMode, CrashCause
from skybomber.core.state import SessionState, SessionStatus


@dataclass(frozen=True)
class AircraftView:
    x: float
    y: float
    heading: float
    alive: bool


@dataclass(frozen=True)
class BombView:
    x: float
    y: float


@dataclass(frozen=True)
class ExplosionView:
    x: float
    y: float
    radius: float
    remaining_ticks: int


@dataclass(frozen=True)
class GroundEntityView:
    """Position of a tank or fuel can."""

    x: float
    y: float


@dataclass(frozen=True)
class WorldSnapshot:
    width: float
    height: float
    terrain: Tuple[Tuple[float, float], ...]
    aircraft: AircraftView
    bombs: Tuple[BombView, ...]
    explosions: Tuple[ExplosionView, ...]
    tanks: Tuple[GroundEntityView, ...]
    fuel_cans: Tuple[GroundEntityView, ...]
    score: int
    fuel: float
    control_mode: ControlMode
    status: SessionStatus
    crash_cause: Optional[CrashCause]
    tick: int

    @property
    def game_over(self) -> bool:
        return self.status is SessionStatus.CRASHED


def build_snapshot(state: SessionState) -> WorldSnapshot:
    aircraft = state.aircraft
    return WorldSnapshot(
        width=state.width,
        height=state.height,
        terrain=state.terrain.as_tuples(),
        aircraft=AircraftView(aircraft.x, aircraft.y, aircraft.heading, aircraft.alive),
        bombs=tuple(BombView(bomb.x, bomb.y) for bomb in state.bombs),
        explosions=tuple(
            ExplosionView(ex.x, ex.y, ex.radius, ex.remaining_ticks)
            for ex in state.explosions
        ),
        tanks=tuple(GroundEntityView(t.x, t.y) for t in state.tanks if t.alive),
        fuel_cans=tuple(GroundEntityView(f.x, f.y) for f in state.fuel_cans if f.alive),
        score=aircraft.score,
        fuel=aircraft.fuel,
        control_mode=state.control_mode,
        status=state.status,
        crash_cause=aircraft.crash_cause,
        tick=state.tick,
    )


__all__ = [
    "AircraftView",
    "BombView",
    "ExplosionView",
    "GroundEntityView",
    "WorldSnapshot",
    "build_snapshot",
]
