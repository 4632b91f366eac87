from __future__ import annotations

import random
from typing import Callable, Optional, Sequence

import pytest

from skybomber.core.entities import Aircraft, FuelCan, Tank
from skybomber.core.session import GameSession
from skybomber.core.settings import WorldSettings
from skybomber.core.spawner import EntitySpawner
from skybomber.core.state import SessionState
from skybomber.core.terrain import TerrainProfile

WORLD_WIDTH = 400
WORLD_HEIGHT = 400


class PinnedSpawner(EntitySpawner):
    """Spawner that places replacements at fixed columns, away from the action."""

    def __init__(
        self,
        tank_columns: Sequence[float] = (300.0, 320.0, 340.0, 360.0),
        fuel_columns: Sequence[float] = (300.0, 340.0),
    ) -> None:
        super().__init__(random.Random(0))
        self._tank_columns = list(tank_columns)
        self._fuel_columns = list(fuel_columns)
        self._tank_index = 0
        self._fuel_index = 0

    def spawn_tank(self, state: SessionState) -> Tank:
        x = self._tank_columns[self._tank_index % len(self._tank_columns)]
        self._tank_index += 1
        return Tank(x=x, y=state.terrain.height_at(x) - self.tank_lift)

    def spawn_fuel_can(self, state: SessionState) -> FuelCan:
        x = self._fuel_columns[self._fuel_index % len(self._fuel_columns)]
        self._fuel_index += 1
        return FuelCan(x=x, y=state.terrain.height_at(x) - self.fuel_lift)


@pytest.fixture
def world_settings() -> WorldSettings:
    """Provide a small deterministic world for gameplay tests."""

    return WorldSettings(width=WORLD_WIDTH, height=WORLD_HEIGHT, segments=8, seed=1234)


@pytest.fixture
def make_state() -> Callable[..., SessionState]:
    def factory(
        ground_y: float = 300.0, aircraft: tuple[float, float] = (100.0, 50.0)
    ) -> SessionState:
        return SessionState(
            width=float(WORLD_WIDTH),
            height=float(WORLD_HEIGHT),
            terrain=TerrainProfile.flat(WORLD_WIDTH, WORLD_HEIGHT, ground_y),
            aircraft=Aircraft(x=aircraft[0], y=aircraft[1]),
        )

    return factory


@pytest.fixture
def make_session(world_settings: WorldSettings) -> Callable[..., GameSession]:
    """Build a session over level ground with predictable respawns."""

    def factory(
        ground_y: float = 300.0,
        aircraft: tuple[float, float] = (100.0, 50.0),
        fuel: Optional[float] = None,
    ) -> GameSession:
        plane = Aircraft(x=aircraft[0], y=aircraft[1])
        if fuel is not None:
            plane.fuel = fuel
        return GameSession(
            world_settings,
            terrain=TerrainProfile.flat(WORLD_WIDTH, WORLD_HEIGHT, ground_y),
            aircraft=plane,
            spawner=PinnedSpawner(),
        )

    return factory
