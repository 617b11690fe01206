"""Window setup, asset loading and the fixed-step main loop."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence

import pygame

from .entity import EntityManager
from .gamerun import FPS, MS_PER_FRAME, WIN_H, WIN_W, RunGameScene
from .input import InputManager
from .scene import SceneManager
from .sound import AudioManager
from .sprite import SpriteManager

log = logging.getLogger(__name__)

APP_TITLE = "Asteroids"
APP_VERSION = "v1.0"
BACKGROUND = (25, 25, 25)

SPRITES = (
    "missing",
    "life",
    "big_rock_1",
    "med_rock_1",
    "med_rock_2",
    "med_rock_3",
    "small_rock_1",
    "ship",
    "fire",
    "bullet",
)

AUDIOS = (
    ("laser_shoot", 0.7),
    ("engine_rumble", 1.0),
    ("short_explosion", 0.6),
)


class FrameClock:
    """Turns wall-clock ticks into a number of fixed game updates and tracks FPS."""

    def __init__(self, ms_per_frame: float = MS_PER_FRAME) -> None:
        self.ms_per_frame = ms_per_frame
        self.fps = 0.0
        self._previous: int | None = None
        self._lag = 0.0
        self._frame_count = 0
        self._fps_timer = 0

    def tick(self, now: int) -> int:
        """Record a rendered frame at ``now`` ms; return how many updates are due."""
        delta = 0 if self._previous is None else now - self._previous
        self._previous = now
        self._lag += delta

        self._frame_count += 1
        self._fps_timer += delta
        if self._fps_timer >= 1000:
            self.fps = self._frame_count * 1000.0 / self._fps_timer
            self._frame_count = 0
            self._fps_timer = 0

        updates = 0
        while self._lag >= self.ms_per_frame:
            updates += 1
            self._lag -= self.ms_per_frame
        return updates


def load_sprites(sprite_mngr: SpriteManager) -> None:
    """Load every sprite the game uses."""
    log.info("Loading sprites to memory...")
    for name in SPRITES:
        sprite_mngr.load_sprite(name, ".png")


def load_audios(audio_mngr: AudioManager) -> None:
    """Load every sound the game uses, then apply the master volume."""
    log.info("Loading audios to memory...")
    for name, gain in AUDIOS:
        audio_mngr.load_audio(name, gain)
    audio_mngr.set_master_volume(1.0)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="asteroidfield", description="Play Asteroids.")
    parser.add_argument(
        "--base-dir",
        default=".",
        help="directory holding the assets folder (default: current directory)",
    )
    parser.add_argument("--seed", type=int, default=0, help="random seed (default: 0)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    log.info("Application starting... {%s %s}", APP_TITLE, APP_VERSION)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption(APP_TITLE)

        sprite_mngr = SpriteManager(args.base_dir)
        audio_mngr = AudioManager(args.base_dir)
        load_sprites(sprite_mngr)
        load_audios(audio_mngr)

        input_mngr = InputManager()
        ent_mngr = EntityManager(sprite_mngr)
        scene_mngr = SceneManager(sprite_mngr, ent_mngr, audio_mngr, input_mngr)
        scene_mngr.change_scene(RunGameScene(random.Random(args.seed)))

        clock = FrameClock(MS_PER_FRAME)
        running = True
        while running:
            input_mngr.handle_input(pygame.event.get())
            running = not input_mngr.quit

            for _ in range(clock.tick(pygame.time.get_ticks())):
                scene_mngr.run_update()
                input_mngr.update()

            screen.fill(BACKGROUND)
            ent_mngr.render_all(screen)
            scene_mngr.run_render(screen)
            pygame.display.flip()
        log.info("Last measured frame rate: %.1f (target %d)", clock.fps, FPS)
    finally:
        log.info("Application closing... {%s}", APP_TITLE)
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())