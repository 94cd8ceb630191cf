"""
Player, bullets and enemies
"""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from ..config.constants import (
    BULLET_HEIGHT, BULLET_MUZZLE_OFFSET, BULLET_SPEED, BULLET_WIDTH,
    ENEMY_HEIGHT, ENEMY_WIDTH, HEIGHT, PLAYER_BOTTOM_MARGIN, PLAYER_HEIGHT,
    PLAYER_SPEED, PLAYER_WIDTH, SHOOT_COOLDOWN_FRAMES, WIDTH,
)
from .difficulty import DifficultyProfile
from .geometry import Box
from .input import InputSnapshot


@dataclass
class Bullet:
    """Player projectile travelling straight up"""
    x: float
    y: float
    width: int = BULLET_WIDTH
    height: int = BULLET_HEIGHT
    speed: float = BULLET_SPEED
    to_remove: bool = False

    def update(self):
        self.y -= self.speed

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass
class Enemy:
    """Adversary falling at a constant speed"""
    x: float
    y: float
    speed: float
    width: int = ENEMY_WIDTH
    height: int = ENEMY_HEIGHT
    to_remove: bool = False

    @classmethod
    def spawn(cls, profile: DifficultyProfile, rng: np.random.Generator) -> 'Enemy':
        """Create an enemy just above the top edge with a random column and speed"""
        x = float(rng.uniform(0, WIDTH - ENEMY_WIDTH))
        speed = float(rng.uniform(profile.speed_min, profile.speed_max))
        return cls(x=x, y=-ENEMY_HEIGHT, speed=speed)

    def update(self):
        self.y += self.speed

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass
class Player:
    """The avatar at the bottom of the playfield; owns its bullets"""
    x: float = WIDTH / 2 - PLAYER_WIDTH / 2
    y: float = HEIGHT - PLAYER_BOTTOM_MARGIN
    width: int = PLAYER_WIDTH
    height: int = PLAYER_HEIGHT
    speed: float = PLAYER_SPEED
    shoot_cooldown: int = 0
    bullets: List[Bullet] = field(default_factory=list)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    def update(self, controls: InputSnapshot):
        """Move, fire if the cooldown allows, then advance owned bullets"""
        # Keyboard and pointer deltas add up when both are active
        if controls.move_left:
            self.x -= self.speed
        if controls.move_right:
            self.x += self.speed

        if controls.pointer_active:
            if controls.pointer_x < self.center_x:
                self.x -= self.speed
            else:
                self.x += self.speed

        self.x = max(0, min(WIDTH - self.width, self.x))

        # Pointer control fires continuously
        if (controls.fire or controls.pointer_active) and self.shoot_cooldown <= 0:
            self.bullets.append(Bullet(self.center_x - BULLET_MUZZLE_OFFSET, self.y))
            self.shoot_cooldown = SHOOT_COOLDOWN_FRAMES
        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= 1

        # A bullet fired this tick already moves once
        for bullet in self.bullets:
            bullet.update()
