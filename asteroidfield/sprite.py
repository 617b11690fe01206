"""Loading and drawing of image sprites."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pygame

log = logging.getLogger(__name__)


@dataclass
class Sprite:
    """An image together with its name and pixel size."""

    name: str
    width: int
    height: int
    image: pygame.Surface


class SpriteManager:
    """Holds sprites loaded from ``<base_dir>/assets/images``."""

    def __init__(self, base_dir: str | Path = ".") -> None:
        self.base_dir = Path(base_dir)
        self._sprites: dict[str, Sprite] = {}

    def load_sprite(self, name: str, extension: str = ".png") -> Sprite | None:
        """Load an image file into memory; return ``None`` if it cannot be read."""
        path = self.base_dir / "assets" / "images" / f"{name}{extension}"
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            log.error("Failed loading sprite {%s}: %s", path, exc)
            return None
        sprite = self.add_sprite(name, image)
        log.info("Sprite loaded {%s} size{%dx%d}", path, sprite.width, sprite.height)
        return sprite

    def add_sprite(self, name: str, image: pygame.Surface) -> Sprite:
        """Register an already created image under ``name``."""
        width, height = image.get_size()
        sprite = Sprite(name=name, width=width, height=height, image=image)
        self._sprites[name] = sprite
        return sprite

    def get_sprite(self, name: str) -> Sprite | None:
        """Return the named sprite, or ``None`` if there is none."""
        sprite = self._sprites.get(name)
        if sprite is None:
            log.error("Failed to retrieve sprite {%s}", name)
        return sprite

    def sprite_names(self) -> list[str]:
        """Names of every loaded sprite."""
        return list(self._sprites)

    def render_sprite(self, surface: pygame.Surface, x: int, y: int, name: str) -> None:
        """Draw the named sprite unrotated with its top-left corner at (x, y)."""
        sprite = self.get_sprite(name)
        if sprite is None:
            return
        surface.blit(sprite.image, (x, y))

    def destroy_all(self) -> None:
        """Forget every loaded sprite."""
        self._sprites.clear()