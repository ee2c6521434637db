"""Game state, event handling and the main loop."""

from __future__ import annotations

import argparse
import sys

import pygame

from wolfcast.grid import WALL, GameMap, create_map
from wolfcast.player import Key, Player
from wolfcast.raycast import SCREEN_HEIGHT, SCREEN_WIDTH
from wolfcast.renderer import render_floor_ceiling, render_grid, render_walls
from wolfcast.textures import TextureError, Textures, load_textures

MAP_SIZE = 16
FRAME_RATE = 60
ERROR_EXIT = 84

_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_e: Key.E,
}


class Game:
    """The player, the map, the textures and whether the editor is shown."""

    def __init__(
        self,
        textures: Textures | None = None,
        map_width: int = MAP_SIZE,
        map_height: int = MAP_SIZE,
    ):
        self.player = Player()
        self.game_map: GameMap = create_map(map_width, map_height)
        self.textures = textures if textures is not None else Textures()
        self.editor_mode = False
        self.running = True

    def handle_event(self, event: pygame.event.Event, mouse_pos: tuple[int, int]) -> None:
        """React to one window event; ``mouse_pos`` is the current pointer position."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            key = _KEYS.get(event.key)
            if key is Key.E:
                self.editor_mode = not self.editor_mode
            elif key is not None:
                self.player.move(self.game_map, key)
        elif event.type == pygame.MOUSEBUTTONDOWN and self.editor_mode:
            self.game_map.edit(mouse_pos[0], mouse_pos[1], WALL)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw one frame."""
        render_floor_ceiling(surface, self.player, self.textures)
        render_walls(surface, self.player, self.game_map, self.textures)
        if self.editor_mode:
            render_grid(surface, self.game_map)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="wolfcast", description="A small ray-cast maze.")
    parser.add_argument(
        "--textures",
        default=".",
        help="directory holding wall.png, floor.png and ceiling.png",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            print(f"Error: Failed to create window: {exc}", file=sys.stderr)
            return ERROR_EXIT
        pygame.display.set_caption("Wolf3D")
        try:
            textures = load_textures(args.textures)
        except TextureError as exc:
            for name in exc.missing:
                print(f"Error: Failed to load {name}", file=sys.stderr)
            print("Error: Texture loading failed", file=sys.stderr)
            print("Error: Failed to initialize game", file=sys.stderr)
            return ERROR_EXIT

        game = Game(textures)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                game.handle_event(event, pygame.mouse.get_pos())
            game.draw(screen)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())