"""
Configuration management
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import DEFAULT_DIFFICULTY, DIFFICULTY_TABLE

logger = logging.getLogger(__name__)

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Settings:
    """Runtime settings for the game window and loop"""

    def __init__(self):
        # Window
        self.window_title = "Pixel Shooter"
        self.window_scale = 1.5
        self.render_fps = 60

        # Sound
        self.enable_sound = True
        self.sound_volume = 0.5

        # Game
        self.default_difficulty = DEFAULT_DIFFICULTY
        self.seed: Optional[int] = None

        self.log_level = "INFO"

    def load_from_file(self, config_path: str):
        """Load settings from a YAML or JSON file"""
        path = Path(config_path)

        if path.suffix in ('.yaml', '.yml'):
            with open(path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        elif path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        for key, value in config.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                logger.debug("Ignoring unknown settings key %r", key)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'window_title': self.window_title,
            'window_scale': self.window_scale,
            'render_fps': self.render_fps,
            'enable_sound': self.enable_sound,
            'sound_volume': self.sound_volume,
            'default_difficulty': self.default_difficulty,
            'seed': self.seed,
            'log_level': self.log_level,
        }

    def save_to_file(self, config_path: str):
        """Save settings to a YAML or JSON file"""
        config = self.to_dict()
        path = Path(config_path)

        if path.suffix in ('.yaml', '.yml'):
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump(config, f, default_flow_style=False, allow_unicode=True)
        elif path.suffix == '.json':
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    def validate(self) -> bool:
        """Reject settings the game cannot run with"""
        if self.render_fps <= 0:
            raise ValueError(f"render_fps must be positive, got {self.render_fps}")
        if self.window_scale <= 0:
            raise ValueError(f"window_scale must be positive, got {self.window_scale}")
        if self.default_difficulty not in DIFFICULTY_TABLE:
            raise ValueError(
                f"Unknown default_difficulty {self.default_difficulty!r}, "
                f"expected one of {sorted(DIFFICULTY_TABLE)}"
            )
        if not 0.0 <= self.sound_volume <= 1.0:
            logger.warning("sound_volume %s out of range, clamping", self.sound_volume)
            self.sound_volume = max(0.0, min(1.0, self.sound_volume))
        if str(self.log_level).upper() not in _LOG_LEVELS:
            logger.warning("Unknown log_level %r, using INFO", self.log_level)
            self.log_level = "INFO"

        return True


def load_settings(config_path: str = None) -> Settings:
    """Convenience loader: defaults, optionally overridden by a file"""
    settings = Settings()

    if config_path and Path(config_path).exists():
        settings.load_from_file(config_path)

    settings.validate()
    return settings
