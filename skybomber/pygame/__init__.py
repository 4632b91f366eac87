"""Pygame front-end for Sky Bomber."""

from skybomber.pygame.app import PygameSkyBomber, run_pygame

__all__ = ["PygameSkyBomber", "run_pygame"]
