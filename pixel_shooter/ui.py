"""
UI adapter interface
"""

from abc import ABC, abstractmethod


class UIAdapter(ABC):
    """Receives display changes on transitions and score updates"""

    @abstractmethod
    def show_score(self, score: int):
        pass

    @abstractmethod
    def show_game_over_overlay(self, visible: bool):
        pass

    @abstractmethod
    def show_start_overlay(self, visible: bool):
        pass


class NullUI(UIAdapter):
    """Discards display changes"""

    def show_score(self, score: int):
        pass

    def show_game_over_overlay(self, visible: bool):
        pass

    def show_start_overlay(self, visible: bool):
        pass
