"""Pygame-powered presentation layer for Sky Bomber."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of Sky Bomber."
    ) from exc

from skybomber.core.entities import ControlMode
from skybomber.core.session import GameSession
from skybomber.core.settings import WorldSettings
from skybomber.core.snapshot import WorldSnapshot
from skybomber.pygame.hud import draw_game_over, draw_hud
from skybomber.pygame.input import InputHandler
from skybomber.pygame.keybindings import DEFAULT_BINDINGS, KeyBindings
from skybomber.pygame.renderer import draw_scene

logger = logging.getLogger(__name__)


class PygameSkyBomber:
    """Graphical client built on top of the core simulation.

    Runs one fixed simulation tick per rendered frame; the frame clock caps
    the rate at ``fps``.
    """

    def __init__(
        self,
        settings: Optional[WorldSettings] = None,
        *,
        control_mode: ControlMode = ControlMode.DIRECTIONAL,
        fps: int = 60,
        bindings: KeyBindings = DEFAULT_BINDINGS,
    ) -> None:
        self.settings = (settings or WorldSettings()).validate()
        self.fps = fps
        self._initial_mode = control_mode

        pygame.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode((self.settings.width, self.settings.height))
        pygame.display.set_caption("Sky Bomber")

        self.font_small = pygame.font.SysFont("monospace", 12)
        self.font_hud = pygame.font.SysFont("monospace", 24, bold=True)
        self.font_body = pygame.font.SysFont("monospace", 30, bold=True)
        self.font_title = pygame.font.SysFont("monospace", 48, bold=True)

        self.clock = pygame.time.Clock()
        self.running = True
        self.input = InputHandler(self, bindings)
        self.session = self._new_session(control_mode)
        self.snapshot: WorldSnapshot = self.session.snapshot()

    # ------------------------------------------------------------------
    # Session helpers
    def _new_session(self, control_mode: ControlMode) -> GameSession:
        session = GameSession(self.settings, control_mode=control_mode)
        self._debug_world_summary(session)
        return session

    def _debug_world_summary(self, session: GameSession) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        terrain = session.terrain
        heights = [point.y for point in terrain]
        logger.debug(
            "World generated: size=%dx%d, terrain points=%d, ground y=%.1f..%.1f",
            self.settings.width,
            self.settings.height,
            len(terrain),
            min(heights),
            max(heights),
        )
        for tank in session.tanks:
            logger.debug("  Tank at (%.1f, %.1f)", tank.x, tank.y)
        for can in session.fuel_cans:
            logger.debug("  Fuel can at (%.1f, %.1f)", can.x, can.y)

    def restart(self) -> None:
        """Start a fresh session, keeping the current control mode."""

        mode = self.session.control_mode
        self.input.reset()
        self.session = self._new_session(mode)
        self.snapshot = self.session.snapshot()

    def to_world(self, position: Tuple[int, int]) -> Tuple[float, float]:
        x, y = position
        return float(x), float(y)

    # ------------------------------------------------------------------
    # Game Loop helpers
    def run(self) -> None:
        """Main pygame loop."""

        while self.running:
            self.clock.tick(self.fps)
            self._handle_events()
            self._update()
            self._draw()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            else:
                self.input.process_event(event)

    def _update(self) -> None:
        self.session.tick(self.input.poll())
        self.snapshot = self.session.snapshot()

    def _draw(self) -> None:
        snapshot = self.snapshot
        draw_scene(self.screen, snapshot, self.font_small)
        draw_hud(self.screen, snapshot, self.font_hud)
        draw_game_over(self.screen, snapshot, self.font_title, self.font_body)
        pygame.display.flip()


def run_pygame(**kwargs: object) -> None:
    """Convenience helper for launching the pygame client."""

    app = PygameSkyBomber(**kwargs)  # type: ignore[arg-type]
    app.run()


__all__ = ["PygameSkyBomber", "run_pygame"]
