"""Living game objects, their per-instance variables and drawing."""

from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Any

import pygame

from .sprite import Sprite, SpriteManager
from .vector_math import Vec2, deg_to_rad

log = logging.getLogger(__name__)

DEBUG_COLOUR = (150, 150, 0)


class SpriteNotFoundError(LookupError):
    """Raised when an entity is spawned with a sprite that is not loaded."""


class VariableError(LookupError):
    """Raised when an entity variable cannot be read as requested."""


@dataclass
class Entity:
    """An instance of a sprite in the world, pivoting around its centre."""

    instance_id: int
    sprite: Sprite
    position: Vec2 = field(default_factory=Vec2)
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    rotation: float = 0.0
    visible: bool = True

    def render(self, surface: pygame.Surface, debug: bool = False) -> None:
        """Draw the sprite scaled and rotated clockwise, centred on the position."""
        if not self.visible:
            return

        width = self.sprite.width * self.scale.x
        height = self.sprite.height * self.scale.y
        image = self.sprite.image
        if (self.scale.x, self.scale.y) != (1.0, 1.0):
            image = pygame.transform.scale(
                image, (max(0, round(width)), max(0, round(height)))
            )
        if self.rotation:
            image = pygame.transform.rotate(image, -self.rotation)
        centre = (self.position.x, self.position.y)
        surface.blit(image, image.get_rect(center=centre))

        if debug:
            self._render_outline(surface, width, height)

    def _render_outline(self, surface: pygame.Surface, width: float, height: float) -> None:
        cx, cy = self.position.x, self.position.y
        rad = deg_to_rad(self.rotation)
        c, s = math.cos(rad), math.sin(rad)
        half_w, half_h = width / 2, height / 2
        corners = [(-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h)]
        points = [
            (int(cx + dx * c - dy * s), int(cy + dx * s + dy * c)) for dx, dy in corners
        ]
        pygame.draw.lines(surface, DEBUG_COLOUR, True, points)
        pygame.draw.rect(surface, DEBUG_COLOUR, pygame.Rect(int(cx - 2), int(cy - 2), 4, 4))


class EntityManager:
    """Owns every living entity and the named variables attached to each."""

    def __init__(self, sprite_manager: SpriteManager | None = None) -> None:
        self.sprite_manager = sprite_manager if sprite_manager is not None else SpriteManager()
        self.debug = False
        self._ids = itertools.count()
        self._entities: dict[int, Entity] = {}
        self._alive: list[int] = []
        self._vars: dict[int, dict[str, Any]] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def alive_ids(self) -> list[int]:
        """Identifiers of living entities, in the order they were spawned."""
        return list(self._alive)

    def get_entity(self, entity_id: int) -> Entity | None:
        """The entity with that identifier, or ``None`` if it is not alive."""
        return self._entities.get(entity_id)

    def render_all(self, surface: pygame.Surface) -> None:
        """Draw every living entity."""
        for entity in self._entities.values():
            entity.render(surface, self.debug)

    def spawn(self, sprite_name: str, position: Vec2) -> Entity:
        """Create an entity showing the named sprite at ``position``."""
        sprite = self.sprite_manager.get_sprite(sprite_name)
        if sprite is None:
            raise SpriteNotFoundError(f"Failed to retrieve sprite {{{sprite_name}}}")

        entity = Entity(
            instance_id=next(self._ids),
            sprite=sprite,
            position=Vec2(position.x, position.y),
        )
        self._entities[entity.instance_id] = entity
        self._vars[entity.instance_id] = {}
        self._alive.append(entity.instance_id)
        log.info(
            "Entity spawned {%s} at {%.0f | %.0f}", sprite_name, position.x, position.y
        )
        return entity

    def kill(self, entity_id: int) -> None:
        """Remove a living entity and its variables; unknown ids are ignored."""
        if entity_id not in self._alive:
            return
        self._alive.remove(entity_id)
        entity = self._entities.pop(entity_id)
        log.info("Entity killed {%d | %s}", entity_id, entity.sprite.name)
        self.clear_vars(entity_id)

    def destroy_all(self) -> None:
        """Kill every living entity."""
        for entity_id in list(self._entities):
            self.kill(entity_id)

    def set_var(self, entity_id: int, key: str, value: Any) -> None:
        """Attach or replace a named value on an entity."""
        self._vars.setdefault(entity_id, {})[key] = value

    def get_var(self, entity_id: int, key: str, expected_type: type | None = None) -> Any:
        """Read a named value, checking its type when ``expected_type`` is given."""
        variables = self._vars.get(entity_id)
        if variables is None:
            raise VariableError(f"Entity not found... {{{entity_id}}}")
        if key not in variables:
            raise VariableError(f"Variable not found... {{{entity_id} | {key}}}")
        value = variables[key]
        if expected_type is not None and not isinstance(value, expected_type):
            raise VariableError(f"Bad type for key: {key}")
        return value

    def has_var(self, entity_id: int, key: str) -> bool:
        """Whether the entity holds a value under ``key``."""
        return key in self._vars.get(entity_id, {})

    def remove_var(self, entity_id: int, key: str) -> None:
        """Drop one named value, if present."""
        self._vars.get(entity_id, {}).pop(key, None)

    def clear_vars(self, entity_id: int) -> None:
        """Drop every value attached to the entity."""
        self._vars.pop(entity_id, None)