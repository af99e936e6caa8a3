"""Audible alert played at the end of every phase."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np
import soundfile as sf

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
BEEP_FREQUENCY_HZ = 880.0
BEEP_SECONDS = 0.3
BEEP_FADE_SECONDS = 0.01
BEEP_VOLUME = 0.5


class AlertError(RuntimeError):
    """The alert sound could not be decoded or played."""


def built_in_beep(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Generate the default alert: a short sine beep with a fade in and out.

    Returns float32 samples in the range [-1, 1], shape (frames, 1).
    """
    frames = int(sample_rate * BEEP_SECONDS)
    t = np.arange(frames) / sample_rate
    tone = np.sin(2 * np.pi * BEEP_FREQUENCY_HZ * t) * BEEP_VOLUME

    # Avoid clicks at the edges
    fade = min(int(sample_rate * BEEP_FADE_SECONDS), frames // 2)
    if fade:
        ramp = np.linspace(0.0, 1.0, fade)
        tone[:fade] *= ramp
        tone[-fade:] *= ramp[::-1]

    return tone.astype(np.float32).reshape(-1, 1)


class AlertPlayer:
    """Plays either a user-supplied sound file or the built-in beep.

    The audio output is acquired for each alert and released once playback
    finishes; `play` blocks until the sound is over. Every failure is raised
    to the caller, including for the built-in beep.

    `output` is any object exposing sounddevice's `play(data, samplerate,
    blocking)`; the default opens the system's default output device.
    """

    def __init__(self, sound_file: Path | None = None, output: Any | None = None):
        self.sound_file = sound_file
        self._output = output

    def load(self) -> tuple[np.ndarray, int]:
        """Decode the alert into (samples, sample_rate)."""
        if self.sound_file is None:
            logger.debug("Using built-in alert beep")
            return built_in_beep(), SAMPLE_RATE

        path = Path(self.sound_file).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"Sound file not found: {path}")

        logger.debug(f"Decoding alert sound: {path}")
        try:
            data, sample_rate = sf.read(str(path), dtype="float32", always_2d=True)
        except RuntimeError as e:
            raise AlertError(f"Cannot decode sound file {path}: {e}") from e

        return data, sample_rate

    def play(self) -> None:
        """Play the alert to completion."""
        data, sample_rate = self.load()
        output = self._acquire_output()

        try:
            output.play(data, samplerate=sample_rate, blocking=True)
        except Exception as e:
            raise AlertError(f"Audio playback failed: {e}") from e

    def _acquire_output(self) -> Any:
        """Return the audio output, checking that a default device exists."""
        if self._output is not None:
            return self._output

        # Imported here: importing sounddevice fails when PortAudio is missing
        try:
            import sounddevice as sd
        except OSError as e:
            raise AlertError(f"No audio backend available: {e}") from e

        try:
            sd.check_output_settings()
        except (sd.PortAudioError, ValueError) as e:
            raise AlertError(f"No audio output device available: {e}") from e

        return sd
