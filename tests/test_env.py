from __future__ import annotations

import numpy as np
import pytest

from envs import ShooterEnv
from envs.shooter_env import MOVE_NONE
from pixel_shooter.core import Enemy

STAY = np.array([MOVE_NONE, 0])
FIRE = np.array([MOVE_NONE, 1])


@pytest.fixture()
def env():
    e = ShooterEnv(difficulty="easy", max_steps=500, max_enemies=5)
    yield e
    e.close()


def test_spaces(env) -> None:
    assert list(env.action_space.nvec) == [3, 2]
    assert env.observation_space.shape == (17,)


def test_reset_is_seeded(env) -> None:
    obs_a, info_a = env.reset(seed=3)
    obs_b, info_b = env.reset(seed=3)

    np.testing.assert_array_equal(obs_a, obs_b)
    assert env.observation_space.contains(obs_a)
    assert obs_a[0] == pytest.approx(0.5)
    assert info_a == info_b
    assert info_a["enemies"] == 1
    assert info_a["frame"] == 0


def test_player_hit_terminates_with_penalty(env) -> None:
    env.reset(seed=0)
    player = env.simulation.state.player
    env.simulation.state.enemies = [Enemy(x=player.x, y=player.y, speed=0.0)]

    obs, reward, terminated, truncated, info = env.step(STAY)

    assert reward == -1.0
    assert terminated and not truncated
    assert env.observation_space.contains(obs)


def test_episode_truncates_at_max_steps() -> None:
    env = ShooterEnv(difficulty="easy", max_steps=3)
    env.reset(seed=0)

    results = [env.step(STAY) for _ in range(3)]

    assert [r[3] for r in results] == [False, False, True]
    assert not any(r[2] for r in results)
    assert results[-1][4]["frame"] == 3


def test_kill_is_rewarded(env) -> None:
    env.reset(seed=0)
    player = env.simulation.state.player
    env.simulation.state.enemies = [Enemy(x=player.x, y=player.y - 40, speed=0.0)]

    total = 0.0
    _, reward, *_ = env.step(FIRE)
    total += reward
    for _ in range(8):
        _, reward, terminated, _, info = env.step(STAY)
        total += reward
        assert not terminated

    assert total == 1.0
    assert info["score"] == 10


def test_reset_option_switches_difficulty(env) -> None:
    _, info = env.reset(seed=0, options={"difficulty": "hard"})
    assert info["difficulty"] == "hard"
    assert env.simulation.state.profile.name == "hard"


def test_unknown_difficulty_fails_fast() -> None:
    with pytest.raises(ValueError):
        ShooterEnv(difficulty="nightmare")
