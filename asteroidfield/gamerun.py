"""The playing scene: ship control, asteroids, bullets, lives and score."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

import pygame

from .entity import Entity
from .scene import Scene
from .vector_math import Vec2, deg_to_rad, distance, lerp

log = logging.getLogger(__name__)

FPS = 60
WIN_W = 1080
WIN_H = 720
MS_PER_FRAME = float(1000 // FPS)

SCREEN_PADDING = 20
SPAWN_PADDING = 20.0
BULLET_PADDING = 100
COLLISION_MERCY = 8
FIRE_OFFSET = 6
THRUST_FACTOR = 0.1
FRICTION = 0.02
CHILD_SPREAD = 30
CHILD_COUNT = 2

SCORES = {
    "big_rock": 300,
    "med_rock": 200,
    "small_rock": 100,
    "life": 200,
}

_SIZE_MARKERS = {
    "SMALL": "small",
    "MEDIUM": "med",
    "BIG": "big",
}


class AsteroidType(IntEnum):
    """Size class of an asteroid."""

    SMALL = 0
    MEDIUM = 1
    BIG = 2


@dataclass
class GameState:
    """Lives left, points scored and whether the game has ended."""

    life: int = 3
    score: int = 0
    game_over: bool = False


class RunGameScene(Scene):
    """The main game: fly the ship, shoot rocks, avoid collisions."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__()
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState()
        self.player: Entity | None = None
        self.debug = False
        self._kill_queue: list[int] = []

    # -- helpers -----------------------------------------------------------

    def add_score(self, name: str) -> None:
        """Add the points for destroying the named kind of object."""
        self.state.score += SCORES.get(name, 0)

    def wrap_around(self, entity: Entity) -> None:
        """Move an entity that left the screen to the opposite side."""
        pad = SCREEN_PADDING
        width, height = WIN_W + pad, WIN_H + pad
        x, y = entity.position.x, entity.position.y
        if x < -pad:
            entity.position.x += width
        if x > width:
            entity.position.x -= width
        if y < -pad:
            entity.position.y += height
        if y > height:
            entity.position.y -= height

    def kill(self, *targets: int | Entity | Iterable[int]) -> None:
        """Queue entities for removal at the end of the update; duplicates are ignored."""
        for target in targets:
            if isinstance(target, Entity):
                self._queue_kill(target.instance_id)
            elif isinstance(target, int):
                self._queue_kill(target)
            else:
                self.kill(*target)

    def _queue_kill(self, entity_id: int) -> None:
        if entity_id not in self._kill_queue:
            self._kill_queue.append(entity_id)

    def handle_kill_list(self) -> None:
        """Remove every queued entity, in the order they were queued."""
        for entity_id in self._kill_queue:
            self.ent_mngr.kill(entity_id)
        self._kill_queue.clear()

    def random_asteroid_sprite(self, asteroid_type: AsteroidType) -> str:
        """Pick a loaded rock sprite of the given size, or "" if there is none."""
        marker = _SIZE_MARKERS[asteroid_type.name]
        candidates = [
            name
            for name in self.sprite_mngr.sprite_names()
            if "rock" in name and marker in name
        ]
        if not candidates:
            return ""
        return candidates[self.rng.randrange(len(candidates))]

    def random_angle(self) -> float:
        """A whole number of degrees in [0, 360)."""
        return float(self.rng.randrange(360))

    def random_initial_velocity(self) -> Vec2:
        """A velocity in a random direction with speed in [1, 2)."""
        angle = deg_to_rad(self.random_angle())
        speed = 1.0 + self.rng.randrange(100) / 100.0
        return Vec2(math.cos(angle), math.sin(angle)) * speed

    def _random_edge_position(self) -> Vec2:
        edge = self.rng.randrange(4)
        if edge == 0:
            return Vec2(float(self.rng.randrange(WIN_W)), -SPAWN_PADDING)
        if edge == 1:
            return Vec2(float(self.rng.randrange(WIN_W)), WIN_H + SPAWN_PADDING)
        if edge == 2:
            return Vec2(-SPAWN_PADDING, float(self.rng.randrange(WIN_H)))
        return Vec2(WIN_W + SPAWN_PADDING, float(self.rng.randrange(WIN_H)))

    def spawn_asteroid(
        self, asteroid_type: AsteroidType, position: Vec2 | None = None
    ) -> Entity:
        """Spawn a rock at ``position``, or just off a random screen edge."""
        if position is None:
            position = self._random_edge_position()
        sprite_name = self.random_asteroid_sprite(asteroid_type)
        entity = self.ent_mngr.spawn(sprite_name, position)
        entity.rotation = self.random_angle()
        self.ent_mngr.set_var(entity.instance_id, "velocity", self.random_initial_velocity())
        self.ent_mngr.set_var(entity.instance_id, "size_type", asteroid_type)
        return entity

    def destroy_asteroid(self, entity_id: int) -> None:
        """Break a rock: score it, and split it into two smaller ones unless small."""
        ents = self.ent_mngr
        if not ents.has_var(entity_id, "size_type"):
            log.warning("Instance is not an asteroid type.")
            return

        self.kill(entity_id)
        self.audio_mngr.reset("short_explosion")
        self.audio_mngr.play("short_explosion")

        size = ents.get_var(entity_id, "size_type", AsteroidType)
        if size is AsteroidType.BIG:
            self.add_score("big_rock")
            child_type = AsteroidType.MEDIUM
        elif size is AsteroidType.MEDIUM:
            self.add_score("med_rock")
            child_type = AsteroidType.SMALL
        else:
            self.add_score("small_rock")
            return

        for _ in range(CHILD_COUNT):
            sign_x = 1 if self.rng.randrange(2) else -1
            sign_y = 1 if self.rng.randrange(2) else -1
            rx = float(self.rng.randrange(CHILD_SPREAD)) * sign_x
            ry = float(self.rng.randrange(CHILD_SPREAD)) * sign_y
            origin = ents.get_entity(entity_id).position
            self.spawn_asteroid(child_type, Vec2(origin.x + rx, origin.y + ry))

    # -- scene hooks -------------------------------------------------------

    def start(self) -> None:
        """Reset lives, spawn the ship and the first wave of rocks."""
        self.state.life = 3
        self.state.game_over = False

        self.player = self.ent_mngr.spawn("ship", Vec2(WIN_W // 2, WIN_H // 2))
        pid = self.player.instance_id
        for key, value in (
            ("velocity", Vec2()),
            ("direction", Vec2()),
            ("rot_delta", 2.5),
            ("move_spd", 1.0),
            ("firerate", 300.0),
            ("fire_timer", 0.0),
            ("bullet_spd", 15.0),
            ("effects", False),
            ("fx_id", -1),
        ):
            self.ent_mngr.set_var(pid, key, value)

        for size in (
            AsteroidType.BIG,
            AsteroidType.BIG,
            AsteroidType.BIG,
            AsteroidType.MEDIUM,
            AsteroidType.SMALL,
        ):
            self.spawn_asteroid(size)

    def update(self) -> None:
        """Advance the game by one fixed step."""
        inputs, ents, audio = self.input_mngr, self.ent_mngr, self.audio_mngr
        player = self.player
        pid = player.instance_id

        if inputs.check_key_pressed(pygame.K_p):
            self.debug = not self.debug
            inputs.debug = self.debug
            ents.debug = self.debug

        left = inputs.check_key(pygame.K_a)
        right = inputs.check_key(pygame.K_d)
        forward = inputs.check_key(pygame.K_w)
        shoot = inputs.check_key(pygame.K_SPACE)
        player.rotation += (int(right) - int(left)) * ents.get_var(pid, "rot_delta", float)

        rad = deg_to_rad(player.rotation - 90)
        direction = Vec2(math.cos(rad), math.sin(rad))
        velocity = ents.get_var(pid, "velocity", Vec2)
        move_spd = ents.get_var(pid, "move_spd", float)

        if forward and not self.state.game_over:
            velocity = velocity + direction * (move_spd * THRUST_FACTOR)
            audio.play("engine_rumble")
        else:
            audio.pause("engine_rumble")

        velocity = Vec2(lerp(velocity.x, 0.0, FRICTION), lerp(velocity.y, 0.0, FRICTION))
        ents.set_var(pid, "velocity", velocity)
        player.position = player.position + velocity
        ents.set_var(pid, "direction", direction)

        fire_timer = ents.get_var(pid, "fire_timer", float)
        if fire_timer > 0:
            fire_timer -= MS_PER_FRAME
        if shoot and fire_timer <= 0 and not self.state.game_over:
            fire_timer = ents.get_var(pid, "firerate", float)
            bullet = ents.spawn("bullet", player.position)
            bullet.rotation = player.rotation
            audio.play("laser_shoot")
        ents.set_var(pid, "fire_timer", fire_timer)

        for entity_id in ents.alive_ids():
            self._update_entity(entity_id)

        if not self.state.game_over:
            self._update_thrust_effect(forward)

        if self.state.life <= 0:
            self.state.game_over = True
            player.visible = False
            self.kill(ents.get_var(pid, "fx_id", int))
            ents.set_var(pid, "effects", False)

        self.handle_kill_list()

    def _update_entity(self, entity_id: int) -> None:
        entity = self.ent_mngr.get_entity(entity_id)
        name = entity.sprite.name

        if name == "bullet":
            self._move_bullet(entity)
        else:
            self.wrap_around(entity)

        if "rock" in name:
            self._update_rock(entity)

        if name == "fire":
            self._follow_player(entity)

    def _move_bullet(self, bullet: Entity) -> None:
        rad = deg_to_rad(bullet.rotation - 90)
        speed = self.ent_mngr.get_var(self.player.instance_id, "bullet_spd", float)
        bullet.position = bullet.position + Vec2(math.cos(rad), math.sin(rad)) * speed
        pos = bullet.position
        pad = BULLET_PADDING
        if pos.x < -pad or pos.x > WIN_W + pad or pos.y < -pad or pos.y > WIN_H + pad:
            self.kill(bullet.instance_id)

    def _update_rock(self, rock: Entity) -> None:
        ents = self.ent_mngr
        player = self.player
        rock_id = rock.instance_id
        rock.position = rock.position + ents.get_var(rock_id, "velocity", Vec2)

        size = rock.sprite.width * rock.scale.x
        for other_id in ents.alive_ids():
            other = ents.get_entity(other_id)
            other_name = other.sprite.name

            if other_name == "bullet":
                if distance(rock.position, other.position) <= size / 2 + COLLISION_MERCY:
                    self.destroy_asteroid(rock_id)
                    self.kill(other_id)
                    break

            if other_name == "ship" and not self.state.game_over:
                reach = size / 2 + (player.sprite.width * player.scale.x) / 2
                if distance(rock.position, other.position) <= reach:
                    self.state.life -= 1
                    player.position.x = float(WIN_W // 2)
                    player.position.y = float(WIN_H // 2)
                    self.audio_mngr.reset("short_explosion")
                    self.audio_mngr.play("short_explosion")

    def _thrust_position(self) -> Vec2:
        player = self.player
        backwards = self.ent_mngr.get_var(player.instance_id, "direction", Vec2) * -1
        return player.position + backwards * (player.sprite.width * player.scale.x - FIRE_OFFSET)

    def _follow_player(self, effect: Entity) -> None:
        effect.position = self._thrust_position()
        effect.rotation = self.player.rotation

    def _update_thrust_effect(self, forward: bool) -> None:
        ents = self.ent_mngr
        pid = self.player.instance_id
        had_effect = ents.get_var(pid, "effects", bool)
        ents.set_var(pid, "effects", forward)

        if not had_effect and forward:
            effect = ents.spawn("fire", Vec2())
            self._follow_player(effect)
            ents.set_var(pid, "fx_id", effect.instance_id)

        if had_effect and not forward:
            self.kill(ents.get_var(pid, "fx_id", int))

    def render(self, surface: pygame.Surface) -> None:
        """Draw one life icon per remaining life."""
        for i in range(self.state.life):
            self.sprite_mngr.render_sprite(surface, 15 + 20 * i, 15, "life")

    def name(self) -> str:
        return "RunGame"