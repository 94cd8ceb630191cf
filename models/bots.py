"""
Scripted policies over the ShooterEnv observation
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from envs.shooter_env import MOVE_LEFT, MOVE_NONE, MOVE_RIGHT


class Bot(ABC):
    """Base class: maps an observation to a (move, fire) action"""

    name = "Bot"

    def reset(self):
        pass

    @abstractmethod
    def act(self, obs: np.ndarray) -> Tuple[int, int]:
        pass


class IdleBot(Bot):
    """Never moves, never fires"""

    name = "IdleBot"

    def act(self, obs):
        return MOVE_NONE, 0


class RandomBot(Bot):
    name = "RandomBot"

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def reset(self):
        self.rng = np.random.default_rng(self.seed)

    def act(self, obs):
        return int(self.rng.integers(3)), int(self.rng.integers(2))


class HunterBot(Bot):
    """
    Steers under the nearest enemy and keeps firing.

    An enemy that is horizontally close and about to reach the player row
    takes priority: the bot sidesteps away from it instead.
    """

    name = "HunterBot"

    def __init__(self, tolerance: float = 0.02, danger_dx: float = 0.1, danger_dy: float = -0.15):
        self.tolerance = tolerance
        self.danger_dx = danger_dx
        self.danger_dy = danger_dy

    def act(self, obs):
        enemies = obs[2:].reshape(-1, 3)
        live = enemies[np.any(enemies != 0.0, axis=1)]
        if len(live) == 0:
            return MOVE_NONE, 1

        # observations are sorted nearest first
        dx, dy, _ = live[0]

        if abs(dx) < self.danger_dx and dy > self.danger_dy:
            if obs[0] <= 0.0:
                return MOVE_RIGHT, 1
            if obs[0] >= 1.0:
                return MOVE_LEFT, 1
            return (MOVE_RIGHT if dx < 0 else MOVE_LEFT), 1

        if dx < -self.tolerance:
            return MOVE_LEFT, 1
        if dx > self.tolerance:
            return MOVE_RIGHT, 1
        return MOVE_NONE, 1


BOT_TYPES = {
    "IdleBot": IdleBot,
    "RandomBot": RandomBot,
    "HunterBot": HunterBot,
}


def make_bot(kind: str, seed: Optional[int] = None) -> Bot:
    """Build a bot by type name"""
    if kind not in BOT_TYPES:
        raise ValueError(f"Unknown bot type {kind!r}, expected one of {sorted(BOT_TYPES)}")
    if kind == "RandomBot":
        return RandomBot(seed)
    return BOT_TYPES[kind]()
