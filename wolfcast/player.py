"""The player: position, heading and movement through the grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from wolfcast.grid import EMPTY, GameMap

TURN_STEP = 0.1


class Key(Enum):
    """Keys the game reacts to."""

    W = "w"
    S = "s"
    A = "a"
    D = "d"
    E = "e"


def _is_open(game_map: GameMap, x: float, y: float) -> bool:
    cx, cy = int(x), int(y)
    return game_map.contains(cx, cy) and game_map.cell(cx, cy) == EMPTY


@dataclass
class Player:
    """Position in map cells, heading in radians and step length per key press."""

    x: float = 2.0
    y: float = 2.0
    angle: float = 0.0
    speed: float = 0.1

    def move(self, game_map: GameMap, key: Key) -> None:
        """Step forward or back, or turn, as the key asks; walls block each axis."""
        dx = dy = 0.0
        if key is Key.W:
            dx = math.cos(self.angle) * self.speed
            dy = math.sin(self.angle) * self.speed
        elif key is Key.S:
            dx = -math.cos(self.angle) * self.speed
            dy = -math.sin(self.angle) * self.speed
        elif key is Key.A:
            self.angle -= TURN_STEP
        elif key is Key.D:
            self.angle += TURN_STEP

        new_x = self.x + dx
        new_y = self.y + dy
        if 0 <= new_x < game_map.width and _is_open(game_map, new_x, new_y):
            self.x = new_x
        if 0 <= new_y < game_map.height and _is_open(game_map, new_x, new_y):
            self.y = new_y