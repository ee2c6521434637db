"""The level grid: walls on the border, open floor inside, editable with the mouse."""

from __future__ import annotations

from dataclasses import dataclass, field

GRID_SIZE = 32
WALL = 1
EMPTY = 0


@dataclass
class GameMap:
    """A rectangular grid of cells, indexed as ``grid[y][x]``."""

    width: int
    height: int
    grid: list[list[int]] = field(repr=False)

    def contains(self, x: int, y: int) -> bool:
        """Tell whether the cell coordinates lie inside the map."""
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> int:
        """Return the value of the cell at column ``x``, row ``y``."""
        if not self.contains(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} map")
        return self.grid[y][x]

    def edit(self, pixel_x: int, pixel_y: int, value: int) -> bool:
        """Set the cell under a pixel position; return whether a cell was changed."""
        # Truncate towards zero, as integer division on the pixel position does.
        grid_x = int(pixel_x / GRID_SIZE)
        grid_y = int(pixel_y / GRID_SIZE)
        if not self.contains(grid_x, grid_y):
            return False
        self.grid[grid_y][grid_x] = value
        return True


def create_map(width: int, height: int) -> GameMap:
    """Build a map whose outer ring is wall and whose inside is empty."""
    if width < 1 or height < 1:
        raise ValueError(f"map size must be positive, got {width}x{height}")
    grid = [
        [
            WALL if y in (0, height - 1) or x in (0, width - 1) else EMPTY
            for x in range(width)
        ]
        for y in range(height)
    ]
    return GameMap(width=width, height=height, grid=grid)