"""Simulation core"""

from .geometry import Box, boxes_overlap
from .difficulty import DifficultyProfile, DIFFICULTY_PRESETS, get_profile
from .input import InputSnapshot, NO_INPUT
from .entities import Player, Bullet, Enemy
from .spawner import Spawner
from .collision import CollisionResolver, CollisionReport
from .game_state import SimulationState, RunPhase, PhaseMachine
from .simulation import Simulation

__all__ = [
    'Box', 'boxes_overlap',
    'DifficultyProfile', 'DIFFICULTY_PRESETS', 'get_profile',
    'InputSnapshot', 'NO_INPUT',
    'Player', 'Bullet', 'Enemy',
    'Spawner',
    'CollisionResolver', 'CollisionReport',
    'SimulationState', 'RunPhase', 'PhaseMachine',
    'Simulation',
]
