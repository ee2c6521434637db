"""Loading the wall, floor and ceiling images."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import pygame

WALL_FILE = "wall.png"
FLOOR_FILE = "floor.png"
CEILING_FILE = "ceiling.png"


class TextureError(Exception):
    """Raised when one or more texture images cannot be loaded."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__("; ".join(f"Failed to load {name}" for name in self.missing))


@dataclass
class Textures:
    """The three surfaces the renderer uses; ``None`` means draw a flat colour."""

    wall: pygame.Surface | None = None
    floor: pygame.Surface | None = None
    ceiling: pygame.Surface | None = None


def _load(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


def load_textures(directory: str | os.PathLike = ".") -> Textures:
    """Load the three images from a directory, raising if any is unreadable."""
    base = Path(directory)
    loaded = {name: _load(base / name) for name in (WALL_FILE, FLOOR_FILE, CEILING_FILE)}
    missing = [name for name, surface in loaded.items() if surface is None]
    if missing:
        raise TextureError(missing)
    return Textures(
        wall=loaded[WALL_FILE],
        floor=loaded[FLOOR_FILE],
        ceiling=loaded[CEILING_FILE],
    )