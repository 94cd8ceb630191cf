"""
Enemy spawning
"""

from typing import Optional

import numpy as np

from .difficulty import DifficultyProfile
from .entities import Enemy


class Spawner:
    """Introduces a new enemy on every spawn-interval boundary"""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    @staticmethod
    def is_spawn_frame(frame_counter: int, profile: DifficultyProfile) -> bool:
        return frame_counter % profile.spawn_interval_frames == 0

    def maybe_spawn(self, frame_counter: int, profile: DifficultyProfile) -> Optional[Enemy]:
        """
        Spawn an enemy when the frame counter lands on the interval.

        Args:
            frame_counter: frames elapsed in the current run (0 at run start)
            profile: active difficulty

        Returns:
            The new enemy, or None on other frames
        """
        if not self.is_spawn_frame(frame_counter, profile):
            return None
        return Enemy.spawn(profile, self.rng)
