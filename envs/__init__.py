from .shooter_env import ShooterEnv

__all__ = ['ShooterEnv']
