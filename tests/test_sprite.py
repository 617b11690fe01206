import pygame
import pytest

from asteroidfield.sprite import SpriteManager

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


def _solid(size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    return surface


@pytest.fixture
def image_dir(tmp_path):
    directory = tmp_path / "assets" / "images"
    directory.mkdir(parents=True)
    return directory


def test_load_sprite_reads_size_from_file(tmp_path, image_dir):
    pygame.image.save(_solid((6, 9), RED), str(image_dir / "ship.bmp"))
    manager = SpriteManager(tmp_path)
    sprite = manager.load_sprite("ship", ".bmp")
    assert (sprite.width, sprite.height) == (6, 9)
    assert sprite.name == "ship"
    assert manager.get_sprite("ship") is sprite


def test_load_missing_file_returns_none(tmp_path, image_dir):
    manager = SpriteManager(tmp_path)
    assert manager.load_sprite("nothing", ".bmp") is None
    assert manager.sprite_names() == []


def test_get_unknown_sprite_is_none():
    assert SpriteManager().get_sprite("ghost") is None


def test_add_sprite_and_names():
    manager = SpriteManager()
    manager.add_sprite("big_rock_1", _solid((3, 3), RED))
    manager.add_sprite("bullet", _solid((2, 2), RED))
    assert sorted(manager.sprite_names()) == ["big_rock_1", "bullet"]


def test_render_sprite_blits_at_position():
    manager = SpriteManager()
    manager.add_sprite("life", _solid((4, 4), RED))
    target = _solid((20, 20), BLACK)
    manager.render_sprite(target, 5, 5, "life")
    assert tuple(target.get_at((5, 5))) == RED
    assert tuple(target.get_at((8, 8))) == RED
    assert tuple(target.get_at((4, 4))) == BLACK
    assert tuple(target.get_at((9, 9))) == BLACK


def test_render_unknown_sprite_leaves_surface_untouched():
    manager = SpriteManager()
    target = _solid((5, 5), BLACK)
    manager.render_sprite(target, 0, 0, "life")
    assert tuple(target.get_at((0, 0))) == BLACK


def test_destroy_all_clears_sprites():
    manager = SpriteManager()
    manager.add_sprite("fire", _solid((2, 2), RED))
    manager.destroy_all()
    assert manager.sprite_names() == []
    assert manager.get_sprite("fire") is None