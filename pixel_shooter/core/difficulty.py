"""
Difficulty presets
"""

from dataclasses import dataclass
from typing import Dict

from ..config.constants import DIFFICULTY_TABLE


@dataclass(frozen=True)
class DifficultyProfile:
    """Enemy spawn cadence and speed range for one run"""
    name: str
    spawn_interval_frames: int
    speed_min: float
    speed_max: float

    def __post_init__(self):
        if isinstance(self.spawn_interval_frames, bool) or not isinstance(self.spawn_interval_frames, int):
            raise ValueError(f"spawn_interval_frames must be an int, got {self.spawn_interval_frames!r}")
        if self.spawn_interval_frames <= 0:
            raise ValueError(f"spawn_interval_frames must be positive, got {self.spawn_interval_frames}")
        if self.speed_min > self.speed_max:
            raise ValueError(
                f"speed_min ({self.speed_min}) must not exceed speed_max ({self.speed_max})"
            )


DIFFICULTY_PRESETS: Dict[str, DifficultyProfile] = {
    name: DifficultyProfile(name, interval, speed_min, speed_max)
    for name, (interval, speed_min, speed_max) in DIFFICULTY_TABLE.items()
}


def get_profile(name: str) -> DifficultyProfile:
    """Look up a preset by name"""
    try:
        return DIFFICULTY_PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown difficulty {name!r}, expected one of {sorted(DIFFICULTY_PRESETS)}"
        ) from None
