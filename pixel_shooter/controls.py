"""
Keyboard, mouse and touch input
"""

from typing import Dict, List, Optional, Sequence, Tuple

import pygame

from .config.constants import DIFFICULTY_TABLE
from .core.input import InputSnapshot

# Trigger names produced by poll_events
TRIGGER_QUIT = 'quit'
TRIGGER_START = 'start'
TRIGGER_RESTART = 'restart'
TRIGGER_MENU = 'menu'
TRIGGER_CLICK = 'click'

DIFFICULTY_KEYS = dict(zip((pygame.K_1, pygame.K_2, pygame.K_3), DIFFICULTY_TABLE))


class PygameInput:
    """
    Tracks pointer state across events and hands out per-tick snapshots.

    Mouse drags and touches are both treated as a pointer; positions are kept
    in window pixels and converted to playfield space with the window scale.
    """

    def __init__(self, scale: float = 1.0):
        self.scale = scale
        self.pointer_active = False
        self.pointer_window_x = 0.0

    def _window_size(self) -> Tuple[int, int]:
        surface = pygame.display.get_surface()
        return surface.get_size() if surface else (0, 0)

    def poll_events(self) -> List[Dict]:
        """
        Drain the pygame event queue.

        Returns:
            Trigger dicts, e.g. {'type': 'start', 'difficulty': 'easy'} or
            {'type': 'click', 'pos': (x, y)} with pos in playfield space
        """
        triggers = []

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                triggers.append({'type': TRIGGER_QUIT})

            elif event.type == pygame.KEYDOWN:
                if event.key in DIFFICULTY_KEYS:
                    triggers.append({'type': TRIGGER_START, 'difficulty': DIFFICULTY_KEYS[event.key]})
                elif event.key == pygame.K_RETURN:
                    triggers.append({'type': TRIGGER_START, 'difficulty': None})
                elif event.key == pygame.K_r:
                    triggers.append({'type': TRIGGER_RESTART})
                elif event.key in (pygame.K_m, pygame.K_ESCAPE):
                    triggers.append({'type': TRIGGER_MENU})

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.pointer_active = True
                self.pointer_window_x = event.pos[0]
                triggers.append({'type': TRIGGER_CLICK, 'pos': self._to_playfield(*event.pos)})
            elif event.type == pygame.MOUSEMOTION and self.pointer_active:
                self.pointer_window_x = event.pos[0]
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.pointer_active = False

            # Touch coordinates are normalised to [0, 1]; touches also emit
            # synthetic mouse events on most platforms, which is harmless here
            elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
                width, _ = self._window_size()
                self.pointer_active = True
                self.pointer_window_x = event.x * width
            elif event.type == pygame.FINGERUP:
                self.pointer_active = False

        return triggers

    def _to_playfield(self, window_x: float, window_y: float) -> Tuple[float, float]:
        return window_x / self.scale, window_y / self.scale

    def release_pointer(self):
        """Forget an in-progress drag, e.g. after the click that started a run"""
        self.pointer_active = False

    def snapshot(self, pressed: Optional[Sequence[bool]] = None) -> InputSnapshot:
        """Capture the controls for this tick"""
        if pressed is None:
            pressed = pygame.key.get_pressed()

        return InputSnapshot(
            move_left=bool(pressed[pygame.K_LEFT] or pressed[pygame.K_a]),
            move_right=bool(pressed[pygame.K_RIGHT] or pressed[pygame.K_d]),
            fire=bool(pressed[pygame.K_SPACE]),
            pointer_active=self.pointer_active,
            pointer_x=self.pointer_window_x / self.scale,
        )
