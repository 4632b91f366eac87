"""Rendering helpers for the Sky Bomber pygame client."""

from __future__ import annotations

import math

import pygame

from skybomber.core.snapshot import WorldSnapshot

SKY_TOP = pygame.Color(78, 149, 205)
SKY_BOTTOM = pygame.Color(19, 57, 84)
GROUND_FILL = pygame.Color("#2f5b25")
GROUND_EDGE = pygame.Color("#20531c")
TANK_BODY = pygame.Color("#be230b")
TANK_TURRET = pygame.Color("#553333")
FUEL_COLOR = pygame.Color("#ffee10")
BOMB_FILL = pygame.Color("#222222")
BOMB_EDGE = pygame.Color("#444444")
BLAST_CORE = pygame.Color("#fce354")
BLAST_HALO = (250, 130, 90, 153)
PLANE_BODY = pygame.Color("#eaeaea")
PLANE_TAIL = pygame.Color("#5077bb")


def draw_background(surface: pygame.Surface) -> None:
    width, height = surface.get_size()
    for y in range(0, height, 4):
        t = y / max(height - 1, 1)
        color = SKY_TOP.lerp(SKY_BOTTOM, t)
        pygame.draw.rect(surface, color, (0, y, width, 4))


def draw_terrain(surface: pygame.Surface, snapshot: WorldSnapshot) -> None:
    height = snapshot.height
    outline = list(snapshot.terrain)
    polygon = [(0.0, height)] + outline + [(snapshot.width, height)]
    pygame.draw.polygon(surface, GROUND_FILL, polygon)
    pygame.draw.lines(surface, GROUND_EDGE, False, outline, 4)


def draw_tanks(surface: pygame.Surface, snapshot: WorldSnapshot, font: pygame.font.Font) -> None:
    for tank in snapshot.tanks:
        x, y = int(tank.x), int(tank.y)
        pygame.draw.rect(surface, TANK_BODY, (x - 18, y - 12, 36, 16))
        pygame.draw.rect(surface, TANK_TURRET, (x - 6, y - 24, 12, 12))
        label = font.render("TANK", True, pygame.Color("white"))
        surface.blit(label, (x - 15, y - 28 - label.get_height() // 2))


def draw_fuel_cans(
    surface: pygame.Surface, snapshot: WorldSnapshot, font: pygame.font.Font
) -> None:
    for can in snapshot.fuel_cans:
        center = (int(can.x), int(can.y))
        pygame.draw.circle(surface, FUEL_COLOR, center, 13)
        label = font.render("Fuel", True, pygame.Color("#111111"))
        surface.blit(label, label.get_rect(center=center))


def draw_bombs(surface: pygame.Surface, snapshot: WorldSnapshot) -> None:
    for bomb in snapshot.bombs:
        center = (int(bomb.x), int(bomb.y))
        pygame.draw.circle(surface, BOMB_FILL, center, 8)
        pygame.draw.circle(surface, BOMB_EDGE, center, 8, 2)


def draw_explosions(surface: pygame.Surface, snapshot: WorldSnapshot) -> None:
    for explosion in snapshot.explosions:
        radius = explosion.radius
        halo_radius = int(radius * 1.5)
        overlay = pygame.Surface((halo_radius * 2 + 2, halo_radius * 2 + 2), pygame.SRCALPHA)
        pygame.draw.circle(overlay, BLAST_HALO, (halo_radius + 1, halo_radius + 1), halo_radius)
        surface.blit(overlay, (explosion.x - halo_radius - 1, explosion.y - halo_radius - 1))
        pygame.draw.circle(surface, BLAST_CORE, (int(explosion.x), int(explosion.y)), int(radius))


def draw_aircraft(surface: pygame.Surface, snapshot: WorldSnapshot) -> None:
    aircraft = snapshot.aircraft
    if not aircraft.alive:
        return
    sprite = pygame.Surface((64, 24), pygame.SRCALPHA)
    sprite.fill(PLANE_BODY)
    pygame.draw.rect(sprite, PLANE_TAIL, (4, 4, 12, 16))
    # pygame rotates counter-clockwise while y points down on screen.
    rotated = pygame.transform.rotate(sprite, -math.degrees(aircraft.heading))
    surface.blit(rotated, rotated.get_rect(center=(aircraft.x, aircraft.y)))


def draw_scene(
    surface: pygame.Surface, snapshot: WorldSnapshot, font: pygame.font.Font
) -> None:
    draw_background(surface)
    draw_terrain(surface, snapshot)
    draw_tanks(surface, snapshot, font)
    draw_fuel_cans(surface, snapshot, font)
    draw_bombs(surface, snapshot)
    draw_explosions(surface, snapshot)
    draw_aircraft(surface, snapshot)


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
