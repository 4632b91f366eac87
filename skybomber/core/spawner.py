"""Keep the tank and fuel can populations topped up."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from skybomber.core.entities import FuelCan, Tank
from skybomber.core.state import SessionState

logger = logging.getLogger(__name__)


@dataclass
class SpawnReport:
    tanks: int = 0
    fuel_cans: int = 0

    @property
    def total(self) -> int:
        return self.tanks + self.fuel_cans


class EntitySpawner:
    """Spawn ground entities at random spots flush with the terrain.

    Positions are independent draws; a new entity may overlap an existing one.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        tank_target: int = 4,
        fuel_target: int = 2,
        tank_margin: float = 40.0,
        fuel_margin: float = 60.0,
        tank_lift: float = 26.0,
        fuel_lift: float = 16.0,
    ) -> None:
        self._rng = rng or random.Random()
        self.tank_target = tank_target
        self.fuel_target = fuel_target
        self.tank_margin = tank_margin
        self.fuel_margin = fuel_margin
        self.tank_lift = tank_lift
        self.fuel_lift = fuel_lift

    def populate(self, state: SessionState) -> SpawnReport:
        report = SpawnReport()
        while len(state.tanks) < self.tank_target:
            state.tanks.append(self.spawn_tank(state))
            report.tanks += 1
        while len(state.fuel_cans) < self.fuel_target:
            state.fuel_cans.append(self.spawn_fuel_can(state))
            report.fuel_cans += 1
        if report.total:
            logger.debug(
                "Spawned %d tank(s) and %d fuel can(s) at tick %d",
                report.tanks,
                report.fuel_cans,
                state.tick,
            )
        return report

    def spawn_tank(self, state: SessionState) -> Tank:
        x = self._rng.uniform(self.tank_margin, state.width - self.tank_margin)
        return Tank(x=x, y=state.terrain.height_at(x) - self.tank_lift)

    def spawn_fuel_can(self, state: SessionState) -> FuelCan:
        x = self._rng.uniform(self.fuel_margin, state.width - self.fuel_margin)
        return FuelCan(x=x, y=state.terrain.height_at(x) - self.fuel_lift)


__all__ = ["EntitySpawner", "SpawnReport"]
