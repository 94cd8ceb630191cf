#!/usr/bin/env python3
"""
arena.py - scripted bot arena
====================================================================
Plays every configured bot against every difficulty preset headlessly and
reports how they fare.

- Seeded episodes: episode i of every bot/difficulty pair uses seed base_seed + i,
  so all bots face the same enemy waves.
- Summary: mean / max score, mean survival frames and survival rate per
  bot x difficulty, written to a timestamped CSV.
- Optional bar chart of mean score.
"""
from __future__ import annotations

import itertools
import time
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
import seaborn as sns
import yaml
from matplotlib import pyplot as plt
from tqdm import tqdm

from envs.shooter_env import ShooterEnv
from models.bots import Bot, make_bot

# ────────────────── 1. Defaults (overridden by the `arena` section of config.yaml) ──────────────────
ARENA_CONFIG: Dict[str, Any] = {
    "config_path": "config.yaml",
    "output_dir": "results_arena",
    "episodes": 20,
    "base_seed": 0,
    "max_steps": 3600,
    "difficulties": ["easy", "medium", "hard"],
    "bots": ["IdleBot", "RandomBot", "HunterBot"],
    "generate_plots": True,
    "env": {},
}


def load_arena_config(config_path: str) -> Dict[str, Any]:
    """Merge the `arena` section of a YAML file over the defaults; `env` is kept for ShooterEnv"""
    config = dict(ARENA_CONFIG)
    path = Path(config_path)
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config.update(data.get("arena", {}))
        config["env"] = data.get("env", {})
    return config


# ────────────────── 2. Episodes ──────────────────
def run_episode(env: ShooterEnv, bot: Bot, seed: int, difficulty: str) -> Dict[str, Any]:
    """Play one episode and return its record"""
    obs, info = env.reset(seed=seed, options={"difficulty": difficulty})
    bot.reset()

    total_reward = 0.0
    terminated = truncated = False
    while not (terminated or truncated):
        action = bot.act(obs)
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += reward

    return {
        "bot": bot.name,
        "difficulty": difficulty,
        "seed": seed,
        "score": info["score"],
        "frames": info["frame"],
        "survived": bool(truncated and not terminated),
        "reward": total_reward,
    }


def run_arena(config: Dict[str, Any]) -> pd.DataFrame:
    """Run every bot x difficulty x episode and collect one row per episode"""
    env_params = dict(config.get("env", {}))
    env_params["max_steps"] = config["max_steps"]
    env = ShooterEnv(**env_params)
    records: List[Dict[str, Any]] = []

    plan = list(itertools.product(config["bots"], config["difficulties"]))
    total = len(plan) * config["episodes"]

    with tqdm(total=total, desc="Arena", unit="ep") as pbar:
        for bot_kind, difficulty in plan:
            bot = make_bot(bot_kind, seed=config["base_seed"])
            pbar.set_description(f"{bot_kind} @ {difficulty}")
            for i in range(config["episodes"]):
                records.append(run_episode(env, bot, config["base_seed"] + i, difficulty))
                pbar.update(1)

    env.close()
    return pd.DataFrame.from_records(records)


# ────────────────── 3. Report ──────────────────
def summarize(results: pd.DataFrame) -> pd.DataFrame:
    """Aggregate per bot x difficulty"""
    summary = results.groupby(["bot", "difficulty"]).agg(
        episodes=("score", "size"),
        mean_score=("score", "mean"),
        max_score=("score", "max"),
        mean_frames=("frames", "mean"),
        survival_rate=("survived", "mean"),
    )
    return summary.sort_values("mean_score", ascending=False)


def plot_summary(summary: pd.DataFrame, output_path: Path):
    """Bar chart of mean score per bot, grouped by difficulty"""
    data = summary.reset_index()
    plt.figure(figsize=(8, 5))
    sns.barplot(data=data, x="difficulty", y="mean_score", hue="bot")
    plt.title("Mean score per bot and difficulty")
    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    plt.close()
    print(f"[chart] Saved to: {output_path}")


def main():
    start_time = time.time()
    print("=" * 60)
    print("              Pixel Shooter bot arena")
    print("=" * 60)

    config = load_arena_config(ARENA_CONFIG["config_path"])
    output_dir = Path(config["output_dir"])
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"[info] Bots: {', '.join(config['bots'])}")
    print(f"[info] Difficulties: {', '.join(config['difficulties'])}")
    print(f"[info] {config['episodes']} episodes each, up to {config['max_steps']} frames")

    results = run_arena(config)
    summary = summarize(results)

    stamp = time.strftime('%Y%m%d_%H%M%S')
    summary_csv_path = output_dir / f"summary_{stamp}.csv"
    summary.to_csv(summary_csv_path)
    print(f"\n[report] Summary saved to: {summary_csv_path}")

    print("\n" + "=" * 25 + " Summary " + "=" * 25)
    print(summary.to_string(float_format="{:.2f}".format))

    if config["generate_plots"]:
        plot_summary(summary, output_dir / f"mean_score_{stamp}.png")

    print(f"\n[done] Arena finished in {time.time() - start_time:.2f} s.")


if __name__ == "__main__":
    main()
