"""
Per-tick input snapshot
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InputSnapshot:
    """Controls as seen at the start of a tick; pointer_x is in playfield space"""
    move_left: bool = False
    move_right: bool = False
    fire: bool = False
    pointer_active: bool = False
    pointer_x: float = 0.0


NO_INPUT = InputSnapshot()
