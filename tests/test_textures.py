import pygame
import pytest

from wolfcast.textures import TextureError, Textures, load_textures


def _write_image(path, size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    pygame.image.save(surface, str(path))


@pytest.fixture
def texture_dir(tmp_path):
    _write_image(tmp_path / "wall.png", (16, 8), (200, 0, 0))
    _write_image(tmp_path / "floor.png", (8, 8), (0, 200, 0))
    _write_image(tmp_path / "ceiling.png", (4, 12), (0, 0, 200))
    return tmp_path


def test_loads_all_three(texture_dir):
    textures = load_textures(texture_dir)
    assert textures.wall.get_size() == (16, 8)
    assert textures.floor.get_size() == (8, 8)
    assert textures.ceiling.get_size() == (4, 12)
    assert tuple(textures.floor.get_at((1, 1)))[:3] == (0, 200, 0)


def test_missing_file_is_reported(texture_dir):
    (texture_dir / "floor.png").unlink()
    with pytest.raises(TextureError) as info:
        load_textures(texture_dir)
    assert info.value.missing == ["floor.png"]
    assert "Failed to load floor.png" in str(info.value)


def test_all_missing_are_reported(tmp_path):
    with pytest.raises(TextureError) as info:
        load_textures(tmp_path)
    assert info.value.missing == ["wall.png", "floor.png", "ceiling.png"]


def test_unreadable_file_counts_as_missing(texture_dir):
    (texture_dir / "wall.png").write_bytes(b"not an image")
    with pytest.raises(TextureError) as info:
        load_textures(texture_dir)
    assert info.value.missing == ["wall.png"]


def test_default_textures_are_empty():
    textures = Textures()
    assert (textures.wall, textures.floor, textures.ceiling) == (None, None, None)