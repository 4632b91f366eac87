"""Rendering helpers for the pygame front-end."""

from skybomber.pygame.renderer.scene import (
    draw_aircraft,
    draw_background,
    draw_bombs,
    draw_explosions,
    draw_fuel_cans,
    draw_scene,
    draw_tanks,
    draw_terrain,
)

__all__ = [
    "draw_aircraft",
    "draw_background",
    "draw_bombs",
    "draw_explosions",
    "draw_fuel_cans",
    "draw_scene",
    "draw_tanks",
    "draw_terrain",
]
