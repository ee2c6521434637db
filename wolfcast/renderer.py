"""Drawing the floor, ceiling, walls and editor grid onto a surface."""

from __future__ import annotations

import pygame

from wolfcast.grid import GRID_SIZE, WALL, GameMap
from wolfcast.player import Player
from wolfcast.raycast import HORIZON, SCREEN_WIDTH, texture_offset, wall_heights
from wolfcast.textures import Textures

SURFACE_HEIGHT = 300
CEILING_COLOUR = (50, 50, 50)
FLOOR_COLOUR = (100, 50, 50)
WALL_COLOUR = (150, 150, 150)
GRID_WALL_COLOUR = (100, 100, 100)
GRID_LINE_COLOUR = (255, 255, 255)


def _scrolled_strip(texture: pygame.Surface, player: Player) -> pygame.Surface:
    """Return the visible part of a repeated, scrolled and stretched texture."""
    tex_w, tex_h = texture.get_size()
    left, top = texture_offset(player, tex_w, tex_h)
    cols = min(tex_w, SCREEN_WIDTH)
    rows = min(tex_h, SURFACE_HEIGHT)
    tile = pygame.Surface((cols, rows))
    for ox in (-left, tex_w - left):
        for oy in (-top, tex_h - top):
            tile.blit(texture, (ox, oy))
    size = (
        max(1, round(cols * SCREEN_WIDTH / tex_w)),
        max(1, round(rows * SURFACE_HEIGHT / tex_h)),
    )
    return pygame.transform.scale(tile, size)


def _render_surface(surface, player, texture, y_pos, colour) -> None:
    if texture is None:
        surface.fill(colour, pygame.Rect(0, y_pos, SCREEN_WIDTH, SURFACE_HEIGHT))
    else:
        surface.blit(_scrolled_strip(texture, player), (0, y_pos))


def render_floor_ceiling(surface: pygame.Surface, player: Player, textures: Textures) -> None:
    """Draw the ceiling on the upper half and the floor on the lower half."""
    _render_surface(surface, player, textures.ceiling, 0, CEILING_COLOUR)
    _render_surface(surface, player, textures.floor, SURFACE_HEIGHT, FLOOR_COLOUR)


def render_walls(
    surface: pygame.Surface, player: Player, game_map: GameMap, textures: Textures
) -> None:
    """Draw one vertical wall slice per screen column, centred on the horizon."""
    wall = textures.wall
    for column, height in enumerate(wall_heights(player, game_map)):
        pixel_height = max(1, round(height))
        top = round(HORIZON - height / 2)
        if wall is None:
            surface.fill(WALL_COLOUR, pygame.Rect(column, top, 1, pixel_height))
            continue
        tex_w, tex_h = wall.get_size()
        strip = wall.subsurface(pygame.Rect(column % tex_w, 0, 1, tex_h))
        surface.blit(pygame.transform.scale(strip, (1, pixel_height)), (column, top))


def render_grid(surface: pygame.Surface, game_map: GameMap) -> None:
    """Draw the editor overlay: wall cells filled, every cell outlined."""
    for y, row in enumerate(game_map.grid):
        for x, value in enumerate(row):
            cell = pygame.Rect(x * GRID_SIZE, y * GRID_SIZE, GRID_SIZE, GRID_SIZE)
            if value == WALL:
                surface.fill(GRID_WALL_COLOUR, cell)
            pygame.draw.rect(surface, GRID_LINE_COLOUR, cell.inflate(2, 2), 1)