"""Mutable world state owned by the tick loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from skybomber.core.entities import (
    Aircraft,
    Bomb,
    ControlMode,
    Explosion,
    FuelCan,
    Tank,
)
from skybomber.core.terrain import TerrainProfile


class SessionStatus(Enum):
    FLYING = "flying"
    CRASHED = "crashed"


@dataclass
class SessionState:
    """Everything a tick reads and writes, passed explicitly to each component."""

    width: float
    height: float
    terrain: TerrainProfile
    aircraft: Aircraft
    control_mode: ControlMode = ControlMode.DIRECTIONAL
    status: SessionStatus = SessionStatus.FLYING
    bombs: List[Bomb] = field(default_factory=list)
    explosions: List[Explosion] = field(default_factory=list)
    tanks: List[Tank] = field(default_factory=list)
    fuel_cans: List[FuelCan] = field(default_factory=list)
    tick: int = 0

    @property
    def crashed(self) -> bool:
        return self.status is SessionStatus.CRASHED


__all__ = ["SessionState", "SessionStatus"]
