from __future__ import annotations

import os

# Headless SDL and matplotlib for the tests that open surfaces, events or plots.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

from pixel_shooter.audio import AudioAdapter
from pixel_shooter.core import Simulation, Spawner
from pixel_shooter.ui import UIAdapter


class RecordingAudio(AudioAdapter):
    def __init__(self) -> None:
        self.explosions = 0

    def play_explosion(self) -> None:
        self.explosions += 1


class RecordingUI(UIAdapter):
    def __init__(self) -> None:
        self.scores: list[int] = []
        self.game_over_visible: bool | None = None
        self.start_visible: bool | None = None

    def show_score(self, score: int) -> None:
        self.scores.append(score)

    def show_game_over_overlay(self, visible: bool) -> None:
        self.game_over_visible = visible

    def show_start_overlay(self, visible: bool) -> None:
        self.start_visible = visible


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture()
def audio() -> RecordingAudio:
    return RecordingAudio()


@pytest.fixture()
def ui() -> RecordingUI:
    return RecordingUI()


@pytest.fixture()
def sim(rng: np.random.Generator, audio: RecordingAudio, ui: RecordingUI) -> Simulation:
    """Idle simulation with a seeded spawner and recording adapters."""
    return Simulation(spawner=Spawner(rng), audio=audio, ui=ui)
