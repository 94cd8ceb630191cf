import gymnasium as gym
from gymnasium import spaces
import numpy as np

from pixel_shooter.config.constants import (
    DEFAULT_DIFFICULTY, ENEMY_HEIGHT, HEIGHT, PLAYER_WIDTH, SHOOT_COOLDOWN_FRAMES, WIDTH,
)
from pixel_shooter.core import InputSnapshot, Simulation, Spawner, get_profile

# Move actions
MOVE_LEFT, MOVE_NONE, MOVE_RIGHT = 0, 1, 2


class ShooterEnv(gym.Env):
    """
    Single-player shooter as a gymnasium environment.
      - action (move, fire): move in {0=left, 1=none, 2=right}, fire in {0, 1}
      - observation: player_x, cooldown, then (dx, dy, speed) of the nearest
        max_enemies enemies ordered by distance, zero padded
      - reward: +1 per enemy destroyed, -1 on the step the player is hit
    """

    metadata = {"render_modes": []}

    def __init__(self,
                 difficulty=DEFAULT_DIFFICULTY,
                 max_steps=5000,
                 max_enemies=5):
        super().__init__()
        self.difficulty = difficulty
        self.max_steps = max_steps
        self.max_enemies = max_enemies
        # fail fast on unknown names
        self.profile = get_profile(difficulty)

        self.action_space = spaces.MultiDiscrete([3, 2])

        obs_dim = 2 + 3 * max_enemies
        low = np.full(obs_dim, -1.0, dtype=np.float32)
        high = np.full(obs_dim, 1.0, dtype=np.float32)
        low[:2] = 0.0
        self.observation_space = spaces.Box(low, high, dtype=np.float32)

        self.simulation = None
        self.steps = 0

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        if options and "difficulty" in options:
            self.profile = get_profile(options["difficulty"])
            self.difficulty = options["difficulty"]

        # the simulation draws from the env's seeded generator
        self.simulation = Simulation(spawner=Spawner(self.np_random))
        self.simulation.start(self.difficulty)
        self.steps = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])
        controls = InputSnapshot(
            move_left=(move == MOVE_LEFT),
            move_right=(move == MOVE_RIGHT),
            fire=(fire == 1),
        )

        self.steps += 1
        report = self.simulation.tick(controls)

        reward = 0.0
        if report is not None:
            reward += float(report.kills)
            if report.player_hit:
                reward -= 1.0

        terminated = self.simulation.state.is_game_over
        truncated = (not terminated) and self.steps >= self.max_steps

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _get_obs(self):
        state = self.simulation.state
        player = state.player
        obs = np.zeros(self.observation_space.shape, dtype=np.float32)

        obs[0] = player.x / (WIDTH - PLAYER_WIDTH)
        obs[1] = max(player.shoot_cooldown, 0) / SHOOT_COOLDOWN_FRAMES

        px, py = player.center_x, player.y
        enemies = sorted(
            state.enemies,
            key=lambda e: (e.x + e.width / 2 - px) ** 2 + (e.y + e.height / 2 - py) ** 2,
        )
        speed_scale = max(self.profile.speed_max, 1e-6)
        for i, enemy in enumerate(enemies[:self.max_enemies]):
            base = 2 + 3 * i
            obs[base] = (enemy.x + enemy.width / 2 - px) / WIDTH
            obs[base + 1] = (enemy.y + enemy.height / 2 - py) / (HEIGHT + ENEMY_HEIGHT)
            obs[base + 2] = enemy.speed / speed_scale

        return np.clip(obs, self.observation_space.low, self.observation_space.high)

    def _get_info(self):
        state = self.simulation.state
        return {
            "score": state.score,
            "frame": state.frame_counter,
            "enemies": len(state.enemies),
            "difficulty": self.difficulty,
        }

    def close(self):
        self.simulation = None
