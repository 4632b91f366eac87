"""Procedural terrain: a piecewise-linear ground line over the world."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from skybomber.core.settings import ConfigurationError, WorldSettings

logger = logging.getLogger(__name__)

START_DEPTH = 120.0
MAX_STEP = 19.0
HIGHEST_DEPTH = 190.0
LOWEST_DEPTH = 50.0


@dataclass(frozen=True)
class TerrainPoint:
    x: float
    y: float


class TerrainProfile:
    """Ground surface described by control points joined with straight lines."""

    def __init__(self, points: Sequence[TerrainPoint], world_height: float) -> None:
        if len(points) < 2:
            raise ConfigurationError("terrain profile needs at least two points")
        for left, right in zip(points, points[1:]):
            if right.x <= left.x:
                raise ConfigurationError(
                    f"terrain points must be strictly increasing in x ({left.x} >= {right.x})"
                )
        self.points: Tuple[TerrainPoint, ...] = tuple(points)
        self.world_height = world_height
        self.fallback_y = world_height - LOWEST_DEPTH

    @classmethod
    def flat(cls, width: float, world_height: float, ground_y: float) -> "TerrainProfile":
        """Level ground at ``ground_y`` across the whole world."""

        return cls(
            [TerrainPoint(0.0, ground_y), TerrainPoint(float(width), ground_y)],
            world_height,
        )

    def __iter__(self) -> Iterator[TerrainPoint]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    # ------------------------------------------------------------------
    # Queries
    def height_at(self, x: float) -> float:
        """Return the ground ``y`` under ``x``.

        The first segment whose span contains ``x`` wins, so a shared endpoint
        resolves to the left segment (both segments agree there anyway). When
        no segment matches, typically because ``x`` drifted past the world
        edge, the fallback ground level is returned instead.
        """

        for p0, p1 in zip(self.points, self.points[1:]):
            if p0.x <= x <= p1.x:
                return p0.y + (p1.y - p0.y) * ((x - p0.x) / (p1.x - p0.x))
        return self.fallback_y

    def is_below_ground(self, x: float, y: float) -> bool:
        return y > self.height_at(x)

    def as_tuples(self) -> Tuple[Tuple[float, float], ...]:
        return tuple((p.x, p.y) for p in self.points)


def generate_terrain(
    settings: WorldSettings, rng: Optional[random.Random] = None
) -> TerrainProfile:
    """Random-walk a height profile across the world.

    Every point is nudged from the previous one by up to ``MAX_STEP`` and
    clamped into the band between ``HIGHEST_DEPTH`` and ``LOWEST_DEPTH``
    above the bottom of the world.
    """

    if settings.segments < 1:
        raise ConfigurationError(
            f"terrain needs at least one segment, got {settings.segments}"
        )
    rng = rng or random.Random(settings.seed)
    width = float(settings.width)
    height = float(settings.height)
    top = height - HIGHEST_DEPTH
    bottom = height - LOWEST_DEPTH

    points = []
    last_y = height - START_DEPTH
    for i in range(settings.segments + 1):
        next_y = last_y + rng.uniform(-MAX_STEP, MAX_STEP)
        next_y = max(top, min(bottom, next_y))
        points.append(TerrainPoint(i * width / settings.segments, next_y))
        last_y = next_y

    profile = TerrainProfile(points, height)
    logger.debug(
        "Generated terrain: %d points, y range %.1f..%.1f",
        len(profile),
        min(p.y for p in profile),
        max(p.y for p in profile),
    )
    return profile


__all__ = ["TerrainPoint", "TerrainProfile", "generate_terrain"]
