"""
Game application: window, main loop and trigger wiring
"""

import logging
from typing import Dict, List, Optional

from .audio import AudioAdapter, NullAudio, PygameAudio
from .config import Settings, load_settings
from .config.constants import DIFFICULTY_TABLE, HEIGHT, WIDTH
from .controls import (
    PygameInput, TRIGGER_CLICK, TRIGGER_MENU, TRIGGER_QUIT, TRIGGER_RESTART, TRIGGER_START,
)
from .core import Simulation
from .core.game_state import RunPhase
from .rendering import ACTION_MENU, ACTION_RESTART, OverlayUI, PygameRenderer

logger = logging.getLogger(__name__)


class ShooterApp:
    """Main application"""

    def __init__(self, settings: Settings):
        self.settings = settings

        self.renderer: Optional[PygameRenderer] = None
        self.audio: Optional[AudioAdapter] = None
        self.overlay = OverlayUI(WIDTH, HEIGHT)
        self.controls = PygameInput(settings.window_scale)
        self.simulation: Optional[Simulation] = None
        self.running = False

    def initialize(self):
        """Open the window and build the simulation"""
        self.renderer = PygameRenderer()
        self.renderer.init(WIDTH, HEIGHT, self.settings.window_title, self.settings.window_scale)

        if self.settings.enable_sound:
            self.audio = PygameAudio(self.settings.sound_volume, self.settings.seed)
        else:
            self.audio = NullAudio()

        self.simulation = Simulation.seeded(
            self.settings.seed,
            audio=self.audio,
            ui=self.overlay,
            difficulty=self.settings.default_difficulty,
        )
        self.overlay.show_start_overlay(True)
        logger.info("Initialised (default difficulty: %s, seed: %s)",
                    self.settings.default_difficulty, self.settings.seed)

    def run(self):
        """Run until the window is closed"""
        self.running = True
        while self.running:
            self._dispatch(self.controls.poll_events())
            if not self.running:
                break

            self.simulation.tick(self.controls.snapshot())
            self._render_frame()
            self.renderer.tick(self.settings.render_fps)

        self.cleanup()

    def _dispatch(self, triggers: List[Dict]):
        """Apply external triggers to the simulation"""
        phase = self.simulation.phase

        for trigger in triggers:
            kind = trigger['type']

            if kind == TRIGGER_QUIT:
                self.running = False
                return

            if kind == TRIGGER_START and phase is RunPhase.IDLE:
                self._start(trigger['difficulty'] or self.settings.default_difficulty)
            elif kind == TRIGGER_RESTART and phase is RunPhase.GAME_OVER:
                self.simulation.restart()
                self.controls.release_pointer()
            elif kind == TRIGGER_MENU and phase is not RunPhase.IDLE:
                self.simulation.return_to_idle()
            elif kind == TRIGGER_CLICK:
                self._handle_click(trigger['pos'])
            else:
                continue

            phase = self.simulation.phase

    def _handle_click(self, pos):
        action = self.overlay.hit_test(pos)
        if action is None:
            return

        if action in DIFFICULTY_TABLE:
            self._start(action)
        elif action == ACTION_RESTART:
            self.simulation.restart()
            self.controls.release_pointer()
        elif action == ACTION_MENU:
            self.simulation.return_to_idle()

    def _start(self, difficulty: str):
        logger.info("Starting %s run", difficulty)
        self.simulation.start(difficulty)
        # The click that pressed a button must not become a drag
        self.controls.release_pointer()

    def _render_frame(self):
        state = self.simulation.state
        self.renderer.clear()
        self.renderer.draw_background(state.frame_counter)

        if state.is_started:
            self.renderer.draw_player(state.player)
            for bullet in state.player.bullets:
                self.renderer.draw_bullet(bullet)
            for enemy in state.enemies:
                self.renderer.draw_enemy(enemy)

        self.overlay.draw(self.renderer)
        self.renderer.present()

    def cleanup(self):
        """Release resources"""
        if self.audio:
            self.audio.cleanup()
        if self.renderer:
            self.renderer.cleanup()
        logger.info("Exited cleanly")


def main(config_path: str = "config.yaml"):
    """Entry point"""
    settings = load_settings(config_path)
    logging.basicConfig(
        level=str(settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = ShooterApp(settings)
    app.initialize()
    app.run()


if __name__ == "__main__":
    main()
