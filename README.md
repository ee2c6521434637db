# wolfcast

wolfcast is a small raycasting maze explorer in the style of the classic
first-person games. It opens an 800×600 window and shows a 16×16 map whose
outer ring is wall. Each screen column gets one wall slice. Floor and ceiling
are drawn from textures, and an editor mode lets you add walls with the mouse.

## Installation

```
pip install .
```

The game needs `pygame`, which is installed with the package.

## Running

```
wolfcast
wolfcast --textures path/to/images
```

The game loads three images. By default it reads them from the current
directory. `--textures DIR` makes it read them from `DIR` instead. The images
are:

- `wall.png`
- `floor.png`
- `ceiling.png`

If any of them is missing or cannot be read, the game prints one error line for
each image that failed and exits with status 84. It also exits with status 84
if the window cannot be created. Closing the window ends the game with
status 0.

## Controls

| Key / input | Action                                              |
|-------------|-----------------------------------------------------|
| `W`         | step forward along the current heading              |
| `S`         | step backward                                       |
| `A`         | turn by −0.1 radian                                 |
| `D`         | turn by +0.1 radian                                 |
| `E`         | toggle editor mode                                  |
| mouse click | in editor mode, turn the clicked cell into a wall   |

Walls block movement. The x and y parts of a step are each checked against the
grid.

In editor mode the map is drawn as an overlay of 32-pixel cells. Each cell is
outlined in white, and wall cells are filled grey. A click outside the map does
nothing.

## Using the pieces

The game logic works without a window:

```python
from wolfcast.grid import create_map
from wolfcast.player import Key, Player
from wolfcast.raycast import cast_ray, texture_offset, wall_heights

game_map = create_map(16, 16)      # border cells are walls
player = Player()                  # starts at (2.0, 2.0), angle 0, speed 0.1
player.move(game_map, Key.W)       # walls block the step
distance = cast_ray(player, game_map, player.angle)  # 100.0 if no wall is hit
heights = wall_heights(player, game_map)              # one height per screen column
left, top = texture_offset(player, 64, 64)            # floor/ceiling scroll offset
```

- `create_map(width, height)` raises `ValueError` for a size below 1.
- `GameMap.cell(x, y)` returns a cell value and raises `IndexError` outside
  the map.
- `GameMap.edit(pixel_x, pixel_y, value)` sets the cell under a pixel position.
  It returns whether a cell was changed.
- `wolfcast.textures.load_textures(directory)` returns a `Textures` holding the
  three surfaces. It raises `TextureError` when an image cannot be loaded, and
  the error's `missing` attribute lists the file names that failed. A
  `Textures()` with no surfaces makes the renderer draw flat colours instead.
- `wolfcast.renderer` draws onto any pygame surface through
  `render_floor_ceiling`, `render_walls` and `render_grid`.
- `wolfcast.game.Game` holds the state and handles events through
  `handle_event(event, mouse_pos)`, and `Game.draw(surface)` draws one frame.

## What it does not do

There are no enemies, weapons or goals; the game is only walking through the
maze. The editor can only add walls and cannot remove them. Edited maps are not
saved, and every run starts again from the empty walled 16×16 map.

## Tests

```
pip install .[test]
pytest
```