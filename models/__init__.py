from .bots import Bot, IdleBot, RandomBot, HunterBot, make_bot

__all__ = ['Bot', 'IdleBot', 'RandomBot', 'HunterBot', 'make_bot']
