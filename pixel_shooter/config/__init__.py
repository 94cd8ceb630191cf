"""Configuration module"""

from .settings import Settings, load_settings
from .constants import *

__all__ = ['Settings', 'load_settings']
