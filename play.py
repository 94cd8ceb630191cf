#!/usr/bin/env python3
"""
Pixel Shooter - play in a window

Controls: Left/Right or A/D to move, Space to fire, or drag with the mouse /
a finger to steer with continuous fire. 1/2/3 picks a difficulty on the start
screen, R restarts after a game over, M or Escape returns to the start screen.
"""

import sys

from pixel_shooter.app import main

if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "config.yaml")
