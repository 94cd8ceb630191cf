"""
Pygame renderer
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Tuple

import pygame

from ..config.constants import *
from .renderer import Renderer, starfield

if TYPE_CHECKING:
    from ..core.entities import Bullet, Enemy, Player

logger = logging.getLogger(__name__)


class PygameRenderer(Renderer):
    """Draws on a logical playfield surface and scales it into the window"""

    def __init__(self):
        self.window = None
        self.screen = None
        self.clock = None
        self.fonts: Dict[str, pygame.font.Font] = {}
        self.width = 0
        self.height = 0
        self.scale = 1.0

    def init(self, width: int, height: int, title: str = "", scale: float = 1.0):
        """Initialise pygame and open the window"""
        pygame.init()
        self.width = width
        self.height = height
        self.scale = scale
        self.window = pygame.display.set_mode((int(width * scale), int(height * scale)))
        pygame.display.set_caption(title)
        self.screen = pygame.Surface((width, height))
        self.clock = pygame.time.Clock()

        self._init_fonts()
        logger.info("Window opened at %dx%d (scale %.2f)",
                    self.window.get_width(), self.window.get_height(), scale)

    def _init_fonts(self):
        sizes = {
            'small': FONT_SIZE_SMALL,
            'medium': FONT_SIZE_MEDIUM,
            'large': FONT_SIZE_LARGE,
        }
        for name, size in sizes.items():
            self.fonts[name] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, size, bold=True)

    def clear(self):
        self.screen.fill(THEME_COLORS['background'])

    def draw_background(self, frame_counter: int):
        for x, y in starfield(frame_counter, self.width, self.height):
            self.screen.fill(THEME_COLORS['star'], (int(x), int(y), STAR_SIZE, STAR_SIZE))

    def _draw_sprite(self, x: float, y: float,
                     rects: List[Tuple[int, int, int, int]],
                     color: Tuple[int, int, int]):
        ox, oy = int(x), int(y)
        for dx, dy, w, h in rects:
            self.screen.fill(color, (ox + dx, oy + dy, w, h))

    def draw_player(self, player: 'Player'):
        self._draw_sprite(player.x, player.y, PLAYER_SPRITE, THEME_COLORS['player'])

    def draw_bullet(self, bullet: 'Bullet'):
        self.screen.fill(THEME_COLORS['bullet'],
                         (int(bullet.x), int(bullet.y), bullet.width, bullet.height))

    def draw_enemy(self, enemy: 'Enemy'):
        self._draw_sprite(enemy.x, enemy.y, ENEMY_SPRITE, THEME_COLORS['enemy'])
        self._draw_sprite(enemy.x, enemy.y, ENEMY_EYES, THEME_COLORS['enemy_eye'])

    def draw_text(self, text: str, x: int, y: int,
                  size: str = 'medium', color: Tuple[int, int, int] = None,
                  center: bool = False):
        if color is None:
            color = THEME_COLORS['text_primary']

        font = self.fonts.get(size, self.fonts['medium'])
        surface = font.render(text, True, color)

        if center:
            rect = surface.get_rect(center=(x, y))
            self.screen.blit(surface, rect)
        else:
            self.screen.blit(surface, (x, y))

    def draw_panel(self, x: int, y: int, width: int, height: int,
                   alpha: int = PANEL_ALPHA):
        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        panel.fill((0, 0, 0, alpha))
        self.screen.blit(panel, (x, y))

    def draw_button(self, rect: pygame.Rect, label: str):
        """Draw a bordered button with a centred label"""
        pygame.draw.rect(self.screen, THEME_COLORS['button'], rect)
        pygame.draw.rect(self.screen, THEME_COLORS['button_border'], rect, 2)
        self.draw_text(label, rect.centerx, rect.centery, size='medium', center=True)

    def present(self):
        if self.scale == 1.0:
            self.window.blit(self.screen, (0, 0))
        else:
            pygame.transform.scale(self.screen, self.window.get_size(), self.window)
        pygame.display.flip()

    def tick(self, fps: float):
        """Throttle to the target frame rate"""
        if self.clock:
            self.clock.tick(fps)

    def cleanup(self):
        pygame.quit()
