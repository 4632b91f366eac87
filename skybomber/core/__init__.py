"""Core simulation for Sky Bomber, independent of rendering."""

from skybomber.core.collisions import CollisionResolver, TickEvents
from skybomber.core.entities import (
    Aircraft,
    Bomb,
    ControlMode,
    CrashCause,
    Explosion,
    FuelCan,
    Tank,
)
from skybomber.core.input import DirectionalState, InputState
from skybomber.core.physics import MovementIntegrator
from skybomber.core.session import GameSession
from skybomber.core.settings import ConfigurationError, WorldSettings
from skybomber.core.snapshot import WorldSnapshot, build_snapshot
from skybomber.core.spawner import EntitySpawner
from skybomber.core.state import SessionState, SessionStatus
from skybomber.core.terrain import TerrainPoint, TerrainProfile, generate_terrain

__all__ = [
    "Aircraft",
    "Bomb",
    "CollisionResolver",
    "ConfigurationError",
    "ControlMode",
    "CrashCause",
    "DirectionalState",
    "EntitySpawner",
    "Explosion",
    "FuelCan",
    "GameSession",
    "InputState",
    "MovementIntegrator",
    "SessionState",
    "SessionStatus",
    "Tank",
    "TerrainPoint",
    "TerrainProfile",
    "TickEvents",
    "WorldSettings",
    "WorldSnapshot",
    "build_snapshot",
    "generate_terrain",
]
