"""Top-level package for the Sky Bomber arcade game."""

__version__ = "1.0.0"

from skybomber.core import (
    ConfigurationError,
    ControlMode,
    GameSession,
    InputState,
    SessionStatus,
    TerrainProfile,
    WorldSettings,
    WorldSnapshot,
)

__all__ = [
    "ConfigurationError",
    "ControlMode",
    "GameSession",
    "InputState",
    "SessionStatus",
    "TerrainProfile",
    "WorldSettings",
    "WorldSnapshot",
]

__all__.append("__version__")

try:
    from skybomber.pygame import PygameSkyBomber, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameSkyBomber = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The graphical client needs pygame, which is not installed. "
            "Install it with the gui extra: pip install 'skybomber[gui]'"
        )

    __all__.extend(["PygameSkyBomber", "run_pygame"])
else:
    __all__.extend(["PygameSkyBomber", "run_pygame"])
