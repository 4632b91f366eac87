"""Entity definitions for the aircraft, its bombs and the ground targets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ControlMode(Enum):
    """How player input is turned into aircraft movement."""

    DIRECTIONAL = "directional"
    POINTER = "pointer"

    def toggled(self) -> "ControlMode":
        if self is ControlMode.DIRECTIONAL:
            return ControlMode.POINTER
        return ControlMode.DIRECTIONAL

    @property
    def label(self) -> str:
        return "Mouse" if self is ControlMode.POINTER else "WASD/Arrow"


class CrashCause(Enum):
    TERRAIN = "terrain"
    FUEL = "fuel"


@dataclass
class Aircraft:
    """The player's aircraft."""

    x: float
    y: float
    speed: float = 4.0
    heading: float = 0.0  # radians, 0 is level flight
    fuel: float = 120.0
    score: int = 0
    alive: bool = True
    crash_cause: Optional[CrashCause] = None

    # Distance from the centre to the underside of the fuselage.
    belly_offset: float = 14.0

    @property
    def belly_y(self) -> float:
        return self.y + self.belly_offset

    def crash(self, cause: CrashCause) -> bool:
        """Mark the aircraft as destroyed; returns False if it already was."""

        if not self.alive:
            return False
        self.alive = False
        self.crash_cause = cause
        return True

    def burn_fuel(self, amount: float) -> None:
        self.fuel -= amount

    def refuel(self, amount: float) -> None:
        self.fuel += amount

    def add_score(self, points: int) -> None:
        self.score += points

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(x - self.x, y - self.y)


@dataclass
class Bomb:
    x: float
    y: float
    fall_speed: float = 5.0
    exploded: bool = False

    def fall(self) -> None:
        self.y += self.fall_speed


@dataclass
class Explosion:
    """Short-lived blast marker left where a bomb met the ground."""

    x: float
    y: float
    radius: float = 3.0
    remaining_ticks: int = 18

    def animate(self, growth: float) -> None:
        self.radius += growth
        self.remaining_ticks -= 1

    @property
    def expired(self) -> bool:
        return self.remaining_ticks <= 0


@dataclass
class Tank:
    x: float
    y: float
    alive: bool = True

    def destroy(self) -> None:
        self.alive = False

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)


@dataclass
class FuelCan:
    x: float
    y: float
    alive: bool = True

    def consume(self) -> None:
        self.alive = False

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)


__all__ = [
    "Aircraft",
    "Bomb",
    "ControlMode",
    "CrashCause",
    "Explosion",
    "FuelCan",
    "Tank",
]
