"""Pixel Shooter: a small arcade shooter built around a deterministic simulation core"""

__version__ = "0.1.0"
