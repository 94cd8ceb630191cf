"""
Score line and start / game-over overlays
"""

from typing import Dict, Optional, Tuple

import pygame

from ..config.constants import *
from ..core.difficulty import DIFFICULTY_PRESETS
from ..ui import UIAdapter

# Button actions returned by OverlayUI.hit_test
ACTION_RESTART = 'restart'
ACTION_MENU = 'menu'


class OverlayUI(UIAdapter):
    """Keeps overlay visibility and draws it with a PygameRenderer"""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        self.width = width
        self.height = height
        self.score = 0
        self.game_over_visible = False
        self.start_visible = True

        left = (width - BUTTON_WIDTH) // 2
        self.start_buttons: Dict[str, pygame.Rect] = {}
        for i, name in enumerate(DIFFICULTY_PRESETS):
            top = height // 2 + i * BUTTON_SPACING
            self.start_buttons[name] = pygame.Rect(left, top, BUTTON_WIDTH, BUTTON_HEIGHT)

        self.game_over_buttons: Dict[str, pygame.Rect] = {
            ACTION_RESTART: pygame.Rect(left, height // 2 + 10, BUTTON_WIDTH, BUTTON_HEIGHT),
            ACTION_MENU: pygame.Rect(left, height // 2 + 10 + BUTTON_SPACING,
                                     BUTTON_WIDTH, BUTTON_HEIGHT),
        }

    def show_score(self, score: int):
        self.score = score

    def show_game_over_overlay(self, visible: bool):
        self.game_over_visible = visible

    def show_start_overlay(self, visible: bool):
        self.start_visible = visible

    def hit_test(self, pos: Tuple[float, float]) -> Optional[str]:
        """
        Map a playfield-space click to a button action.

        Returns:
            A difficulty name on the start screen, 'restart' or 'menu' on the
            game-over screen, or None
        """
        if self.start_visible:
            buttons = self.start_buttons
        elif self.game_over_visible:
            buttons = self.game_over_buttons
        else:
            return None

        for action, rect in buttons.items():
            if rect.collidepoint(pos):
                return action
        return None

    def draw(self, renderer):
        if not self.start_visible:
            renderer.draw_text(f"Score: {self.score}", *SCORE_POS, size='medium')

        if self.start_visible:
            self._draw_start(renderer)
        elif self.game_over_visible:
            self._draw_game_over(renderer)

    def _draw_start(self, renderer):
        renderer.draw_panel(0, 0, self.width, self.height)
        renderer.draw_text("PIXEL SHOOTER", self.width // 2, self.height // 3,
                           size='large', center=True)
        renderer.draw_text("Choose difficulty (1/2/3)", self.width // 2,
                           self.height // 3 + 40, size='small',
                           color=THEME_COLORS['text_secondary'], center=True)
        for name, rect in self.start_buttons.items():
            renderer.draw_button(rect, name.upper())

    def _draw_game_over(self, renderer):
        renderer.draw_panel(0, 0, self.width, self.height)
        renderer.draw_text("GAME OVER", self.width // 2, self.height // 2 - 60,
                           size='large', color=THEME_COLORS['text_warning'], center=True)
        renderer.draw_text(f"Score: {self.score}", self.width // 2, self.height // 2 - 25,
                           size='medium', center=True)
        renderer.draw_button(self.game_over_buttons[ACTION_RESTART], "RESTART (R)")
        renderer.draw_button(self.game_over_buttons[ACTION_MENU], "MENU (M)")
