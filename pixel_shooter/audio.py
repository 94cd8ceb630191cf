"""
Sound effects
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np
import pygame

from .config.constants import (
    EXPLOSION_CUTOFF_END, EXPLOSION_CUTOFF_START, EXPLOSION_DURATION,
    EXPLOSION_GAIN_END, EXPLOSION_GAIN_START, SAMPLE_RATE,
)

logger = logging.getLogger(__name__)


class AudioAdapter(ABC):
    """Fire-and-forget sound output"""

    @abstractmethod
    def play_explosion(self):
        """Play the enemy-destroyed sound"""
        pass

    def cleanup(self):
        pass


class NullAudio(AudioAdapter):
    """Silent adapter for headless runs"""

    def play_explosion(self):
        pass


def _exponential_ramp(start: float, end: float, n: int) -> np.ndarray:
    return start * (end / start) ** (np.arange(n) / max(1, n - 1))


def synthesize_explosion(sample_rate: int = SAMPLE_RATE,
                         duration: float = EXPLOSION_DURATION,
                         rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Render a noise burst as 16-bit mono samples.

    White noise runs through a one-pole low-pass whose cutoff sweeps
    exponentially from 800 Hz down to 10 Hz, while the gain ramps from 0.5
    to 0.01.

    Args:
        sample_rate: output rate in Hz
        duration: length in seconds
        rng: random source for the noise

    Returns:
        int16 array of length sample_rate * duration
    """
    rng = rng if rng is not None else np.random.default_rng()
    n = int(round(sample_rate * duration))
    noise = rng.uniform(-1.0, 1.0, n)

    cutoff = _exponential_ramp(EXPLOSION_CUTOFF_START, EXPLOSION_CUTOFF_END, n)
    alpha = 1.0 - np.exp(-2.0 * np.pi * cutoff / sample_rate)

    filtered = np.empty(n)
    y = 0.0
    for i in range(n):
        y += alpha[i] * (noise[i] - y)
        filtered[i] = y

    peak = np.max(np.abs(filtered))
    if peak > 0:
        filtered /= peak

    gain = _exponential_ramp(EXPLOSION_GAIN_START, EXPLOSION_GAIN_END, n)
    return (filtered * gain * 32767).astype(np.int16)


class PygameAudio(AudioAdapter):
    """Plays a pre-rendered explosion through pygame.mixer"""

    def __init__(self, volume: float = 0.5, seed: Optional[int] = None):
        self.enabled = False
        self.sound = None

        try:
            pygame.mixer.pre_init(SAMPLE_RATE, size=-16, channels=1, buffer=512)
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio disabled, mixer unavailable: %s", e)
            return

        mixer_format = pygame.mixer.get_init()
        if mixer_format is None:
            logger.warning("Audio disabled, mixer did not initialise")
            return

        frequency, _, channels = mixer_format
        samples = synthesize_explosion(frequency, rng=np.random.default_rng(seed))
        if channels > 1:
            samples = np.repeat(samples[:, np.newaxis], channels, axis=1)

        self.sound = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
        self.sound.set_volume(volume)
        self.enabled = True
        logger.debug("Audio ready at %d Hz, %d channel(s)", frequency, channels)

    def play_explosion(self):
        if self.enabled:
            self.sound.play()

    def cleanup(self):
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False
