"""Rendering module"""

from .renderer import Renderer, starfield
from .pygame_renderer import PygameRenderer
from .overlay import OverlayUI, ACTION_MENU, ACTION_RESTART

__all__ = ['Renderer', 'starfield', 'PygameRenderer', 'OverlayUI', 'ACTION_MENU', 'ACTION_RESTART']
