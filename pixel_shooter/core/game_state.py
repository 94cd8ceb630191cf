"""
Run state and phase machine
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from statemachine import State, StateMachine

from ..config.constants import DEFAULT_DIFFICULTY
from .difficulty import DifficultyProfile, get_profile
from .entities import Enemy, Player


class RunPhase(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class PhaseMachine(StateMachine):
    """
    Guards phase transitions:
    idle -> playing -> game_over -> playing, and back to idle from anywhere.

    The machine holds no game data; the simulation performs the entry work.
    """

    idle = State("Idle", value=RunPhase.IDLE.value, initial=True)
    playing = State("Playing", value=RunPhase.PLAYING.value)
    game_over = State("Game over", value=RunPhase.GAME_OVER.value)

    begin = idle.to(playing) | playing.to.itself() | game_over.to(playing)
    player_hit = playing.to(game_over)
    show_start_screen = playing.to(idle) | game_over.to(idle) | idle.to.itself()

    @property
    def phase(self) -> RunPhase:
        return RunPhase(self.current_state_value)


@dataclass
class SimulationState:
    """Everything a run owns; mutated only by the simulation tick"""

    profile: DifficultyProfile = field(default_factory=lambda: get_profile(DEFAULT_DIFFICULTY))
    score: int = 0
    frame_counter: int = 0
    player: Player = field(default_factory=Player)
    enemies: List[Enemy] = field(default_factory=list)
    phase: RunPhase = RunPhase.IDLE

    @property
    def is_started(self) -> bool:
        return self.phase is not RunPhase.IDLE

    @property
    def is_game_over(self) -> bool:
        return self.phase is RunPhase.GAME_OVER

    @property
    def is_playing(self) -> bool:
        return self.phase is RunPhase.PLAYING

    def reset_run(self, profile: Optional[DifficultyProfile] = None):
        """Fresh score, frame counter, player and an empty enemy list"""
        if profile is not None:
            self.profile = profile
        self.score = 0
        self.frame_counter = 0
        self.player = Player()
        self.enemies = []
