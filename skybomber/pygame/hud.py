"""HUD and game-over overlay rendering for the pygame client."""

from __future__ import annotations

import pygame

from skybomber.core.entities import CrashCause
from skybomber.core.snapshot import WorldSnapshot

_CRASH_TEXT = {
    CrashCause.TERRAIN: "You flew into the ground.",
    CrashCause.FUEL: "You ran out of fuel.",
}


def hud_lines(snapshot: WorldSnapshot) -> list[str]:
    return [
        f"Score: {snapshot.score}",
        f"Fuel: {snapshot.fuel:.0f}",
        "Bombs: ∞",
        f"Control: {snapshot.control_mode.label}",
    ]


def draw_hud(surface: pygame.Surface, snapshot: WorldSnapshot, font: pygame.font.Font) -> None:
    text_color = pygame.Color(255, 255, 255)
    columns = [30, 220, 430, 640]
    for x, line in zip(columns, hud_lines(snapshot)):
        surface.blit(font.render(line, True, text_color), (x, 20))


def draw_game_over(
    surface: pygame.Surface,
    snapshot: WorldSnapshot,
    title_font: pygame.font.Font,
    body_font: pygame.font.Font,
) -> None:
    if not snapshot.game_over:
        return
    width, height = surface.get_size()
    center_x = width // 2
    center_y = height // 2

    shade = pygame.Surface((width, height), pygame.SRCALPHA)
    shade.fill((10, 12, 20, 120))
    surface.blit(shade, (0, 0))

    title = title_font.render("GAME OVER", True, pygame.Color("#fad932"))
    surface.blit(title, title.get_rect(center=(center_x, center_y - 40)))

    lines = [f"Final score: {snapshot.score}"]
    if snapshot.crash_cause is not None:
        lines.insert(0, _CRASH_TEXT[snapshot.crash_cause])
    lines.append("Press R to play again")
    y = center_y + 10
    for line in lines:
        rendered = body_font.render(line, True, pygame.Color("white"))
        surface.blit(rendered, rendered.get_rect(center=(center_x, y)))
        y += rendered.get_height() + 8


__all__ = ["draw_game_over", "draw_hud", "hud_lines"]
