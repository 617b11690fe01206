"""Scenes and the manager that switches between them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

import pygame

if TYPE_CHECKING:
    from .entity import EntityManager
    from .input import InputManager
    from .sound import AudioManager
    from .sprite import SpriteManager

log = logging.getLogger(__name__)


@dataclass
class GameSubSystem:
    """The managers a scene works with."""

    sprite_mngr: SpriteManager | None = None
    ent_mngr: EntityManager | None = None
    audio_mngr: AudioManager | None = None
    input_mngr: InputManager | None = None
    scene_mngr: Any = None


class Scene(ABC):
    """A stage of the game with its own start, update and render steps."""

    def __init__(self) -> None:
        self.subsystems = GameSubSystem()

    @property
    def sprite_mngr(self) -> SpriteManager:
        return self.subsystems.sprite_mngr

    @property
    def ent_mngr(self) -> EntityManager:
        return self.subsystems.ent_mngr

    @property
    def audio_mngr(self) -> AudioManager:
        return self.subsystems.audio_mngr

    @property
    def input_mngr(self) -> InputManager:
        return self.subsystems.input_mngr

    @property
    def scene_mngr(self) -> SceneManager:
        return self.subsystems.scene_mngr

    def set_subsystems(self, subsystems: GameSubSystem) -> None:
        """Take a copy of the managers this scene will use."""
        self.subsystems = replace(subsystems)

    @abstractmethod
    def start(self) -> None:
        """Set the scene up; called once when it becomes current."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one game update."""

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the scene's own overlays."""

    @abstractmethod
    def name(self) -> str:
        """A short name for logging."""


class SceneManager:
    """Holds the current scene and hands it the game's managers."""

    def __init__(
        self,
        sprite_mngr: SpriteManager | None = None,
        ent_mngr: EntityManager | None = None,
        audio_mngr: AudioManager | None = None,
        input_mngr: InputManager | None = None,
    ) -> None:
        self.subsystems = GameSubSystem(
            sprite_mngr=sprite_mngr,
            ent_mngr=ent_mngr,
            audio_mngr=audio_mngr,
            input_mngr=input_mngr,
            scene_mngr=self,
        )
        self.current_scene: Scene | None = None

    def change_scene(self, scene: Scene | None) -> None:
        """Replace the current scene and start the new one."""
        log.info("Changing scenes...")
        self.current_scene = scene
        if scene is not None:
            log.info("Scene changed to {%s}", scene.name())
            scene.set_subsystems(self.subsystems)
            scene.start()

    def run_update(self) -> None:
        """Update the current scene, if any."""
        if self.current_scene is not None:
            self.current_scene.update()

    def run_render(self, surface: pygame.Surface) -> None:
        """Render the current scene, if any."""
        if self.current_scene is not None:
            self.current_scene.render(surface)