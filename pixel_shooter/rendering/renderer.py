"""
Abstract renderer interface
"""

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Tuple

from ..config.constants import HEIGHT, STAR_COUNT, STAR_DRIFT, STAR_ROW_SPACING, WIDTH

if TYPE_CHECKING:
    from ..core.entities import Bullet, Enemy, Player


def starfield(frame_counter: int, width: int = WIDTH, height: int = HEIGHT,
              count: int = STAR_COUNT) -> List[Tuple[float, float]]:
    """Star positions for a frame; stars drift sideways and scroll down one pixel per frame"""
    stars = []
    for i in range(count):
        x = (math.sin(i + frame_counter * STAR_DRIFT) * width + width) % width
        y = (i * STAR_ROW_SPACING + frame_counter) % height
        stars.append((x, y))
    return stars


class Renderer(ABC):
    """Base class for renderers"""

    @abstractmethod
    def init(self, width: int, height: int, title: str = "", scale: float = 1.0):
        """Open the output surface"""
        pass

    @abstractmethod
    def clear(self):
        """Clear the frame"""
        pass

    @abstractmethod
    def draw_background(self, frame_counter: int):
        """Draw the scrolling starfield"""
        pass

    @abstractmethod
    def draw_player(self, player: 'Player'):
        """Draw the player sprite"""
        pass

    @abstractmethod
    def draw_bullet(self, bullet: 'Bullet'):
        """Draw one bullet"""
        pass

    @abstractmethod
    def draw_enemy(self, enemy: 'Enemy'):
        """Draw one enemy sprite"""
        pass

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int,
                  size: str = 'medium', color: Tuple[int, int, int] = None,
                  center: bool = False):
        """Draw text"""
        pass

    @abstractmethod
    def draw_panel(self, x: int, y: int, width: int, height: int,
                   alpha: int = 180):
        """Draw a translucent panel"""
        pass

    @abstractmethod
    def draw_button(self, rect, label: str):
        """Draw a labelled button inside rect"""
        pass

    @abstractmethod
    def present(self):
        """Show the finished frame"""
        pass

    @abstractmethod
    def tick(self, fps: float):
        """Wait out the rest of the frame"""
        pass

    @abstractmethod
    def cleanup(self):
        """Release resources"""
        pass
