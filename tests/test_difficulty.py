from __future__ import annotations

import pytest

from pixel_shooter.core.difficulty import DIFFICULTY_PRESETS, DifficultyProfile, get_profile


def test_presets_match_known_values() -> None:
    assert set(DIFFICULTY_PRESETS) == {"easy", "medium", "hard"}

    medium = get_profile("medium")
    assert medium.spawn_interval_frames == 60
    assert (medium.speed_min, medium.speed_max) == (1.5, 3.0)

    assert get_profile("easy").spawn_interval_frames == 90
    assert get_profile("hard").spawn_interval_frames == 30
    assert get_profile("hard").speed_max == 5.0


def test_unknown_difficulty_is_rejected() -> None:
    with pytest.raises(ValueError, match="nightmare"):
        get_profile("nightmare")


@pytest.mark.parametrize(
    "interval, speed_min, speed_max",
    [
        (60, 3.0, 1.5),
        (0, 1.0, 2.0),
        (-30, 1.0, 2.0),
        (1.5, 1.0, 2.0),
    ],
)
def test_malformed_profiles_fail_at_construction(interval, speed_min, speed_max) -> None:
    with pytest.raises(ValueError):
        DifficultyProfile("broken", interval, speed_min, speed_max)


def test_equal_speed_bounds_are_allowed() -> None:
    profile = DifficultyProfile("flat", 10, 2.0, 2.0)
    assert profile.speed_min == profile.speed_max
