from __future__ import annotations

import numpy as np
import pytest

from envs.shooter_env import MOVE_LEFT, MOVE_NONE, MOVE_RIGHT
from models import Bot, HunterBot, IdleBot, RandomBot, make_bot


def _obs(player_x=0.5, *enemies):
    obs = np.zeros(17, dtype=np.float32)
    obs[0] = player_x
    for i, (dx, dy, speed) in enumerate(enemies):
        obs[2 + 3 * i: 5 + 3 * i] = (dx, dy, speed)
    return obs


def test_idle_bot_does_nothing() -> None:
    assert IdleBot().act(_obs()) == (MOVE_NONE, 0)


def test_random_bot_replays_after_reset() -> None:
    bot = make_bot("RandomBot", seed=5)
    first = [bot.act(_obs()) for _ in range(20)]
    bot.reset()
    assert [bot.act(_obs()) for _ in range(20)] == first
    assert isinstance(bot, RandomBot)


def test_hunter_fires_when_field_is_empty() -> None:
    assert HunterBot().act(_obs()) == (MOVE_NONE, 1)


def test_hunter_steers_towards_distant_enemy() -> None:
    bot = HunterBot()
    assert bot.act(_obs(0.5, (0.3, -0.8, 0.5))) == (MOVE_RIGHT, 1)
    assert bot.act(_obs(0.5, (-0.3, -0.8, 0.5))) == (MOVE_LEFT, 1)
    assert bot.act(_obs(0.5, (0.01, -0.8, 0.5))) == (MOVE_NONE, 1)


def test_hunter_sidesteps_enemy_about_to_land() -> None:
    bot = HunterBot()
    assert bot.act(_obs(0.5, (0.05, -0.05, 0.5))) == (MOVE_LEFT, 1)
    assert bot.act(_obs(0.5, (-0.05, -0.05, 0.5))) == (MOVE_RIGHT, 1)
    # pinned against a wall it has to dodge the other way
    assert bot.act(_obs(0.0, (0.05, -0.05, 0.5))) == (MOVE_RIGHT, 1)
    assert bot.act(_obs(1.0, (-0.05, -0.05, 0.5))) == (MOVE_LEFT, 1)


def test_unknown_bot_type() -> None:
    with pytest.raises(ValueError, match="Sniper"):
        make_bot("SniperBot")


def test_bot_base_requires_an_action() -> None:
    with pytest.raises(TypeError):
        Bot()
