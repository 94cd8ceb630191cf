"""
Per-frame simulation and run lifecycle
"""

import logging
from typing import Optional

import numpy as np

from ..audio import AudioAdapter, NullAudio
from ..config.constants import DEFAULT_DIFFICULTY
from ..ui import NullUI, UIAdapter
from .collision import CollisionReport, CollisionResolver
from .difficulty import get_profile
from .game_state import PhaseMachine, RunPhase, SimulationState
from .input import InputSnapshot, NO_INPUT
from .spawner import Spawner

logger = logging.getLogger(__name__)


class Simulation:
    """
    Owns one SimulationState and advances it one tick at a time.

    The caller decides when to call tick(); nothing here knows about clocks
    or frame rates. Adapters receive side effects only: an explosion per kill,
    score updates, and overlay changes on phase transitions.
    """

    def __init__(self,
                 spawner: Optional[Spawner] = None,
                 resolver: Optional[CollisionResolver] = None,
                 audio: Optional[AudioAdapter] = None,
                 ui: Optional[UIAdapter] = None,
                 difficulty: str = DEFAULT_DIFFICULTY):
        self.spawner = spawner if spawner is not None else Spawner()
        self.resolver = resolver if resolver is not None else CollisionResolver()
        self.audio = audio if audio is not None else NullAudio()
        self.ui = ui if ui is not None else NullUI()

        self.machine = PhaseMachine()
        self.state = SimulationState(profile=get_profile(difficulty))

    @classmethod
    def seeded(cls, seed: Optional[int], **kwargs) -> 'Simulation':
        """Build a simulation whose enemy draws replay for the same seed"""
        return cls(spawner=Spawner(np.random.default_rng(seed)), **kwargs)

    @property
    def phase(self) -> RunPhase:
        return self.state.phase

    def _sync_phase(self):
        self.state.phase = self.machine.phase

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------
    def start(self, difficulty: str):
        """Begin a fresh run at the named difficulty"""
        profile = get_profile(difficulty)
        self.machine.begin()
        self._sync_phase()

        self.state.reset_run(profile)
        self._spawn(self.state.frame_counter)

        self.ui.show_start_overlay(False)
        self.ui.show_game_over_overlay(False)
        self.ui.show_score(self.state.score)
        logger.debug("Run started at %s difficulty", profile.name)

    def restart(self):
        """Begin a fresh run with the active difficulty"""
        self.start(self.state.profile.name)

    def return_to_idle(self):
        """Go back to the start screen without starting a run"""
        self.machine.show_start_screen()
        self._sync_phase()

        self.ui.show_start_overlay(True)
        self.ui.show_game_over_overlay(False)
        logger.debug("Returned to start screen")

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------
    def _spawn(self, frame_counter: int):
        enemy = self.spawner.maybe_spawn(frame_counter, self.state.profile)
        if enemy is not None:
            self.state.enemies.append(enemy)

    def tick(self, controls: InputSnapshot = NO_INPUT) -> Optional[CollisionReport]:
        """
        Advance the run by one frame.

        Does nothing outside the playing phase.

        Returns:
            The collision report for this frame, or None when frozen
        """
        if not self.state.is_playing:
            return None

        state = self.state
        state.frame_counter += 1
        state.player.update(controls)
        for enemy in state.enemies:
            enemy.update()
        self._spawn(state.frame_counter)

        report = self.resolver.resolve(state)

        if report.kills:
            for _ in range(report.kills):
                self.audio.play_explosion()
            self.ui.show_score(state.score)

        if report.player_hit:
            self.machine.player_hit()
            self._sync_phase()
            self.ui.show_game_over_overlay(True)
            logger.debug("Player hit at frame %d with score %d",
                         state.frame_counter, state.score)

        return report
