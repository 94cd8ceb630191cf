from __future__ import annotations

import pytest

from pixel_shooter.app import ShooterApp
from pixel_shooter.config import Settings
from pixel_shooter.controls import (
    TRIGGER_CLICK, TRIGGER_MENU, TRIGGER_QUIT, TRIGGER_RESTART, TRIGGER_START,
)
from pixel_shooter.core import Enemy, NO_INPUT, RunPhase, Simulation
from pixel_shooter.rendering import ACTION_RESTART


@pytest.fixture()
def app():
    """App wired to a headless simulation; no window is opened."""
    a = ShooterApp(Settings())
    a.simulation = Simulation.seeded(0, ui=a.overlay)
    a.running = True
    return a


def _crash(app: ShooterApp) -> None:
    player = app.simulation.state.player
    app.simulation.state.enemies = [Enemy(x=player.x, y=player.y, speed=0.0)]
    app.simulation.tick(NO_INPUT)
    assert app.simulation.phase is RunPhase.GAME_OVER


def test_start_key_uses_default_difficulty(app) -> None:
    app._dispatch([{'type': TRIGGER_START, 'difficulty': None}])
    assert app.simulation.phase is RunPhase.PLAYING
    assert app.simulation.state.profile.name == "medium"
    assert not app.overlay.start_visible


def test_start_is_ignored_while_playing(app) -> None:
    app._dispatch([{'type': TRIGGER_START, 'difficulty': 'easy'}])
    app.simulation.tick(NO_INPUT)
    app._dispatch([{'type': TRIGGER_START, 'difficulty': 'hard'}])
    assert app.simulation.state.profile.name == "easy"
    assert app.simulation.state.frame_counter == 1


def test_restart_only_after_game_over(app) -> None:
    app._dispatch([{'type': TRIGGER_START, 'difficulty': 'hard'}])
    app.simulation.tick(NO_INPUT)
    app._dispatch([{'type': TRIGGER_RESTART}])
    assert app.simulation.state.frame_counter == 1

    _crash(app)
    app._dispatch([{'type': TRIGGER_RESTART}])
    assert app.simulation.phase is RunPhase.PLAYING
    assert app.simulation.state.frame_counter == 0
    assert app.simulation.state.profile.name == "hard"


def test_menu_returns_to_start_screen(app) -> None:
    app._dispatch([{'type': TRIGGER_START, 'difficulty': 'easy'}])
    app._dispatch([{'type': TRIGGER_MENU}])
    assert app.simulation.phase is RunPhase.IDLE
    assert app.overlay.start_visible


def test_clicks_drive_overlay_buttons(app) -> None:
    hard = app.overlay.start_buttons['hard'].center
    app._dispatch([{'type': TRIGGER_CLICK, 'pos': hard}])
    assert app.simulation.state.profile.name == "hard"
    assert not app.controls.pointer_active

    _crash(app)
    restart = app.overlay.game_over_buttons[ACTION_RESTART].center
    app._dispatch([{'type': TRIGGER_CLICK, 'pos': restart}])
    assert app.simulation.phase is RunPhase.PLAYING
    assert not app.overlay.game_over_visible


def test_quit_stops_the_loop(app) -> None:
    app._dispatch([{'type': TRIGGER_QUIT}, {'type': TRIGGER_START, 'difficulty': 'easy'}])
    assert app.running is False
    assert app.simulation.phase is RunPhase.IDLE
