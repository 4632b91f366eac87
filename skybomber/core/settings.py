"""World configuration shared by every simulation component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class ConfigurationError(ValueError):
    """Raised when a session is set up with unusable world parameters."""


# Horizontal margin kept clear of the world edge when placing fuel cans.
# The widest spawn margin, so it bounds the smallest playable width.
SPAWN_MARGIN = 60
AIRCRAFT_MARGIN_SIDE = 32
AIRCRAFT_MARGIN_TOP = 32
AIRCRAFT_MARGIN_BOTTOM = 36


@dataclass
class WorldSettings:
    """Configuration options for a single play session."""

    width: int = 900
    height: int = 600
    segments: int = 35
    seed: Optional[int] = None

    def validate(self) -> "WorldSettings":
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"world dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.segments < 1:
            raise ConfigurationError(
                f"terrain needs at least one segment, got {self.segments}"
            )
        if self.width <= 2 * max(SPAWN_MARGIN, AIRCRAFT_MARGIN_SIDE):
            raise ConfigurationError(
                f"world width {self.width} leaves no room to spawn entities"
            )
        if self.height <= AIRCRAFT_MARGIN_TOP + AIRCRAFT_MARGIN_BOTTOM:
            raise ConfigurationError(
                f"world height {self.height} leaves no room for the aircraft"
            )
        return self


__all__ = [
    "AIRCRAFT_MARGIN_BOTTOM",
    "AIRCRAFT_MARGIN_SIDE",
    "AIRCRAFT_MARGIN_TOP",
    "ConfigurationError",
    "SPAWN_MARGIN",
    "WorldSettings",
]
