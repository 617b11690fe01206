from pathlib import Path
from unittest import mock

import pygame
import pytest

from asteroidfield.app import SPRITES, FrameClock, load_audios, load_sprites, main
from asteroidfield.gamerun import MS_PER_FRAME
from asteroidfield.sound import AudioManager
from asteroidfield.sprite import SpriteManager


class FakeSound:
    def __init__(self):
        self.volume = None

    def set_volume(self, volume):
        self.volume = volume

    def play(self):
        return None

    def stop(self):
        pass


def write_images(base, names):
    folder = base / "assets" / "images"
    folder.mkdir(parents=True, exist_ok=True)
    for name in names:
        pygame.image.save(pygame.Surface((8, 8)), str(folder / f"{name}.png"))


def test_first_tick_runs_no_update():
    clock = FrameClock(MS_PER_FRAME)
    assert clock.tick(500) == 0


def test_tick_counts_fixed_updates():
    clock = FrameClock(16)
    assert clock.tick(0) == 0
    assert clock.tick(16) == 1
    assert clock.tick(20) == 0


def test_total_updates_match_elapsed_time():
    clock = FrameClock(16)
    times = [0, 3, 40, 41, 90, 200, 201, 333, 1000, 1017]
    total = sum(clock.tick(t) for t in times)
    assert total == times[-1] // 16


def test_fps_measured_after_a_second():
    clock = FrameClock(16)
    for t in (0, 500, 1000):
        clock.tick(t)
    assert clock.fps == pytest.approx(3.0)


def test_load_sprites_loads_present_files(tmp_path):
    present = ["ship", "bullet", "life"]
    write_images(tmp_path, present)
    manager = SpriteManager(tmp_path)
    load_sprites(manager)
    assert sorted(manager.sprite_names()) == sorted(present)


def test_load_sprites_all(tmp_path):
    write_images(tmp_path, SPRITES)
    manager = SpriteManager(tmp_path)
    load_sprites(manager)
    assert sorted(manager.sprite_names()) == sorted(SPRITES)


def test_load_audios_applies_gains(tmp_path):
    sounds = {}
    manager = AudioManager(
        tmp_path, loader=lambda path: sounds.setdefault(Path(path).stem, FakeSound())
    )
    load_audios(manager)
    assert sorted(sounds) == ["engine_rumble", "laser_shoot", "short_explosion"]
    assert manager.get_audio_info("laser_shoot").gain == pytest.approx(0.7)
    assert manager.get_audio_info("short_explosion").gain == pytest.approx(0.6)
    assert sounds["laser_shoot"].volume == pytest.approx(0.7)
    assert manager.master_volume == 1


def test_main_runs_until_quit(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    write_images(tmp_path, SPRITES)
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", return_value=[quit_event]):
        result = main(["--base-dir", str(tmp_path), "--seed", "3"])
    assert result == 0