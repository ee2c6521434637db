"""Ray casting through the grid and the geometry the renderer draws from."""

from __future__ import annotations

import math

from wolfcast.grid import WALL, GameMap
from wolfcast.player import Player

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
HORIZON = 300
FOV = 1.0
RAY_STEP = 0.1
MAX_DISTANCE = 100.0
SCROLL_FACTOR = 0.5
SIDE_FACTOR = 0.2


def cast_ray(player: Player, game_map: GameMap, angle: float) -> float:
    """March a ray from the player until it hits a wall; return the distance."""
    ray_x, ray_y = player.x, player.y
    dx, dy = math.cos(angle), math.sin(angle)
    while 0 <= ray_x < game_map.width and 0 <= ray_y < game_map.height:
        if game_map.cell(int(ray_x), int(ray_y)) == WALL:
            return math.hypot(ray_x - player.x, ray_y - player.y)
        ray_x += dx * RAY_STEP
        ray_y += dy * RAY_STEP
    return MAX_DISTANCE


def wall_heights(player: Player, game_map: GameMap) -> list[float]:
    """Return the height in pixels of the wall slice for every screen column."""
    half = SCREEN_WIDTH // 2
    heights = []
    for column in range(SCREEN_WIDTH):
        angle = player.angle + (column - half) * (FOV / SCREEN_WIDTH)
        distance = cast_ray(player, game_map, angle)
        heights.append(SCREEN_HEIGHT / (distance + 0.1))
    return heights


def _wrap(value: float, size: int) -> int:
    # The offset is reduced modulo an unsigned 32-bit size, so negatives wrap.
    return (int(value) & 0xFFFFFFFF) % size


def texture_offset(player: Player, tex_width: int, tex_height: int) -> tuple[int, int]:
    """Return the (left, top) texel where the floor and ceiling textures start."""
    if tex_width <= 0 or tex_height <= 0:
        raise ValueError(f"texture size must be positive, got {tex_width}x{tex_height}")
    forward = -player.y * tex_height * SCROLL_FACTOR
    side = player.x * tex_width * SCROLL_FACTOR * SIDE_FACTOR
    return _wrap(side, tex_width), _wrap(forward, tex_height)