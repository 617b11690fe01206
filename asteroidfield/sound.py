"""Loading, mixing and playback of named sound effects."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import pygame

log = logging.getLogger(__name__)


def clamp01(x: float) -> float:
    """Clamp a value into the range [0, 1]."""
    return min(max(x, 0.0), 1.0)


@dataclass
class AudioInfo:
    """Settings of one sound; the defaults mark missing information."""

    name: str = "..."
    gain: float = -1.0
    speed: float = -1.0


class Audio:
    """One loaded sound and the channel it plays on."""

    def __init__(self, name: str, sound: Any) -> None:
        self.info = AudioInfo(name=name)
        self.sound = sound
        self._channel: Any = None
        self._paused = False

    def apply_gain(self, master_gain: float) -> None:
        """Set the playback volume from the sound's gain and the master gain."""
        self.sound.set_volume(clamp01(self.info.gain) * clamp01(master_gain))

    def set_speed(self, speed: float) -> None:
        """Record the playback speed ratio."""
        self.info.speed = speed

    def play(self) -> None:
        """Resume if paused, and start the sound if it is not already playing."""
        if self._channel is not None and self._paused:
            self._channel.unpause()
            self._paused = False
        if self._channel is None or not self._channel.get_busy():
            self._channel = self.sound.play()
            self._paused = False

    def pause(self) -> None:
        """Pause playback, keeping the position."""
        if self._channel is not None and not self._paused:
            self._channel.pause()
            self._paused = True

    def reset(self) -> None:
        """Drop whatever is queued so the next play starts from the beginning."""
        self.sound.stop()
        self._channel = None
        self._paused = False


class AudioManager:
    """Named sounds loaded from ``<base_dir>/assets/sounds/<name>.wav``."""

    def __init__(
        self,
        base_dir: str | Path = ".",
        loader: Callable[[str], Any] | None = None,
    ) -> None:
        self.base_dir = Path(base_dir)
        self._loader = loader if loader is not None else pygame.mixer.Sound
        self._audios: dict[str, Audio] = {}
        self.master_volume = 1.0

    def load_audio(self, audio_name: str, gain: float = 1.0) -> Audio | None:
        """Load a sound; return ``None`` and keep going if it cannot be read."""
        path = self.base_dir / "assets" / "sounds" / f"{audio_name}.wav"
        try:
            sound = self._loader(str(path))
        except (pygame.error, OSError) as exc:
            log.error("Couldn't load .wav file {%s}: %s", audio_name, exc)
            return None
        audio = Audio(audio_name, sound)
        audio.info.gain = gain
        self._audios[audio_name] = audio
        log.info("Loaded audio {%s}", path)
        return audio

    def audio_exists(self, audio_name: str) -> bool:
        """Whether a sound of that name is loaded."""
        exists = audio_name in self._audios
        if not exists:
            log.warning("Audio does not exist {%s}", audio_name)
        return exists

    def _get(self, audio_name: str, action: str) -> Audio | None:
        if not self.audio_exists(audio_name):
            log.warning("Failed to %s audio {%s}", action, audio_name)
            return None
        return self._audios[audio_name]

    def set_master_volume(self, volume: float) -> None:
        """Set the master gain and apply it to every loaded sound."""
        self.master_volume = volume
        for audio in self._audios.values():
            audio.apply_gain(volume)

    def play(self, audio_name: str) -> None:
        """Play the named sound; missing sounds are ignored."""
        audio = self._get(audio_name, "play")
        if audio is not None:
            audio.play()

    def pause(self, audio_name: str) -> None:
        """Pause the named sound; missing sounds are ignored."""
        audio = self._get(audio_name, "pause")
        if audio is not None:
            audio.pause()

    def reset(self, audio_name: str) -> None:
        """Stop and clear the named sound; missing sounds are ignored."""
        audio = self._get(audio_name, "reset")
        if audio is not None:
            audio.reset()

    def set_gain(self, audio_name: str, gain: float) -> None:
        """Change one sound's gain and reapply the master gain."""
        audio = self._get(audio_name, "set gain of")
        if audio is not None:
            audio.info.gain = gain
            audio.apply_gain(self.master_volume)

    def get_audio_info(self, audio_name: str) -> AudioInfo:
        """A copy of the sound's settings, or default info if it is missing."""
        audio = self._get(audio_name, "retrieve info of")
        if audio is None:
            return AudioInfo()
        return replace(audio.info)