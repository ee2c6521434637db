import pygame

from wolfcast.game import Game
from wolfcast.textures import Textures


def _key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def _click():
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))


def test_new_game_state():
    game = Game()
    assert game.editor_mode is False
    assert game.running is True
    assert (game.game_map.width, game.game_map.height) == (16, 16)
    assert (game.player.x, game.player.y) == (2.0, 2.0)


def test_quit_stops_the_game():
    game = Game()
    game.handle_event(pygame.event.Event(pygame.QUIT), (0, 0))
    assert game.running is False


def test_e_toggles_editor():
    game = Game()
    game.handle_event(_key(pygame.K_e), (0, 0))
    assert game.editor_mode is True
    game.handle_event(_key(pygame.K_e), (0, 0))
    assert game.editor_mode is False


def test_w_moves_player_forward():
    game = Game()
    game.handle_event(_key(pygame.K_w), (0, 0))
    assert game.player.x > 2.0


def test_turn_keys_change_angle():
    game = Game()
    game.handle_event(_key(pygame.K_d), (0, 0))
    assert game.player.angle > 0.0
    game.handle_event(_key(pygame.K_a), (0, 0))
    game.handle_event(_key(pygame.K_a), (0, 0))
    assert game.player.angle < 0.0


def test_other_keys_are_ignored():
    game = Game()
    game.handle_event(_key(pygame.K_q), (0, 0))
    assert (game.player.x, game.player.y, game.player.angle) == (2.0, 2.0, 0.0)
    assert game.editor_mode is False


def test_click_in_editor_places_wall():
    game = Game()
    game.handle_event(_key(pygame.K_e), (0, 0))
    game.handle_event(_click(), (100, 70))
    assert game.game_map.cell(3, 2) == 1


def test_click_outside_editor_does_nothing():
    game = Game()
    game.handle_event(_click(), (100, 70))
    assert game.game_map.cell(3, 2) == 0


def test_draw_shows_grid_only_in_editor():
    game = Game(Textures())
    screen = pygame.Surface((800, 600))
    game.draw(screen)
    assert tuple(screen.get_at((16, 16)))[:3] == (50, 50, 50)
    game.editor_mode = True
    game.draw(screen)
    assert tuple(screen.get_at((16, 16)))[:3] == (100, 100, 100)