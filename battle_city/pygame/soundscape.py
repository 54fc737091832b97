"""Procedural sound effects for simulation events, played through pygame.mixer."""

from __future__ import annotations

import logging
import math
import os
from array import array
from dataclasses import dataclass
from typing import Dict, Optional

import pygame

from battle_city.core.events import GameEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToneSpec:
    """Frequency sweep rendered into a short sample buffer."""

    start_freq: float
    end_freq: float
    duration: float
    waveform: str


TONES: Dict[GameEvent, ToneSpec] = {
    GameEvent.SHOT_FIRED: ToneSpec(440.0, 110.0, 0.1, "square"),
    GameEvent.EXPLOSION: ToneSpec(100.0, 20.0, 0.5, "sawtooth"),
    GameEvent.POWER_UP_COLLECTED: ToneSpec(200.0, 800.0, 0.3, "sine"),
    GameEvent.GAME_OVER: ToneSpec(150.0, 50.0, 1.0, "square"),
}


class Soundscape:
    """Mixer facade that turns GameEvents into short synthesised tones.

    Instances are callable so they can be subscribed to a Session directly.
    """

    def __init__(
        self,
        *,
        enabled: bool = True,
        frequency: int = 44_100,
        size: int = -16,
        channels: int = 2,
        buffer: int = 512,
    ) -> None:
        self.enabled = enabled
        self._mixer_ready = False
        self._registry: Dict[GameEvent, pygame.mixer.Sound] = {}
        self._volumes: Dict[str, float] = {"master": 1.0, "effects": 1.0}
        self._status_message: Optional[str] = None
        self._active_driver: Optional[str] = None
        self._init_params = {
            "frequency": frequency,
            "size": size,
            "channels": channels,
            "buffer": buffer,
        }

        if not enabled:
            return

        self._initialise_mixer()
        if self._mixer_ready:
            self._build_bank()

    # ------------------------------------------------------------------
    # Playback
    def __call__(self, event: GameEvent) -> None:
        self.play(event)

    def play(self, event: GameEvent, *, volume: Optional[float] = None) -> None:
        if not self._mixer_ready:
            return
        sound = self._registry.get(event)
        if sound is None:
            return
        vol = self._volumes["master"] * self._volumes["effects"]
        if volume is not None:
            vol *= volume
        sound.set_volume(max(0.0, min(1.0, vol)))
        sound.play()

    def has_sound(self, event: GameEvent) -> bool:
        return event in self._registry

    # ------------------------------------------------------------------
    # Volume management
    def set_volume(self, category: str, value: float) -> None:
        self._volumes[category] = max(0.0, min(1.0, value))

    def get_volume(self, category: str) -> float:
        return self._volumes.get(category, 1.0)

    @property
    def status_message(self) -> Optional[str]:
        return self._status_message

    @property
    def ready(self) -> bool:
        return self._mixer_ready

    # ------------------------------------------------------------------
    # Mixer bootstrap
    def _initialise_mixer(self) -> None:
        original_driver = os.environ.get("SDL_AUDIODRIVER")
        last_error: Optional[str] = None

        for driver in self._candidate_drivers(original_driver):
            try:
                self._apply_driver_env(driver)
                pygame.mixer.quit()
                pygame.mixer.init(**self._init_params)
            except pygame.error as exc:
                last_error = str(exc)
                continue
            self._mixer_ready = True
            self._active_driver = driver if driver is not None else os.environ.get(
                "SDL_AUDIODRIVER"
            )
            if self._active_driver == "dummy":
                self._set_status_message(
                    "Audio device unavailable; running with SDL 'dummy' driver (no sound output)."
                )
            break

        self._restore_driver_env(original_driver)

        if not self._mixer_ready:
            reason = f": {last_error}" if last_error else ""
            self._set_status_message(f"Audio initialisation failed{reason}. Sound remains muted.")

    def _candidate_drivers(self, original: Optional[str]) -> list[Optional[str]]:
        if original:
            return [original]
        return [None, "pulse", "pipewire", "alsa", "coreaudio", "directsound", "wasapi", "dummy"]

    def _apply_driver_env(self, driver: Optional[str]) -> None:
        if driver is None:
            os.environ.pop("SDL_AUDIODRIVER", None)
        else:
            os.environ["SDL_AUDIODRIVER"] = driver

    def _restore_driver_env(self, original: Optional[str]) -> None:
        if original is None:
            os.environ.pop("SDL_AUDIODRIVER", None)
        else:
            os.environ["SDL_AUDIODRIVER"] = original

    def _set_status_message(self, message: Optional[str]) -> None:
        if message and message != self._status_message:
            logger.warning(message)
        self._status_message = message

    # ------------------------------------------------------------------
    # Synthesis
    def _build_bank(self) -> None:
        for event, spec in TONES.items():
            sound = self._synthesise(spec)
            if sound is not None:
                self._registry[event] = sound

    def _synthesise(self, spec: ToneSpec) -> Optional[pygame.mixer.Sound]:
        init = pygame.mixer.get_init()
        if not init:
            return None
        sample_rate, size, channels = init
        if abs(size) != 16:
            return None

        total_samples = max(1, int(sample_rate * spec.duration))
        ratio = spec.end_freq / spec.start_freq
        scale = 32767 * 0.6
        phase = 0.0

        wave = array("h")
        for index in range(total_samples):
            t = index / total_samples
            # Exponential sweep; gain decays to a tenth over the tone.
            freq = spec.start_freq * (ratio ** t)
            gain = 0.1 ** t
            phase = (phase + freq / sample_rate) % 1.0
            wave.append(int(scale * gain * _oscillator(spec.waveform, phase)))

        if channels == 2:
            stereo = array("h")
            for sample in wave:
                stereo.extend([sample, sample])
            data = stereo.tobytes()
        else:
            data = wave.tobytes()

        try:
            return pygame.mixer.Sound(buffer=data)
        except pygame.error:
            return None


def _oscillator(waveform: str, phase: float) -> float:
    if waveform == "square":
        return 1.0 if phase < 0.5 else -1.0
    if waveform == "sawtooth":
        return 2.0 * phase - 1.0
    return math.sin(2.0 * math.pi * phase)


__all__ = ["Soundscape", "TONES", "ToneSpec"]
