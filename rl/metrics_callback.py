"""
Custom callbacks for tracking meteor-game metrics during training.
Records per episode: reward, length, final score, kills, crashes.
"""

import os
import csv
from typing import Dict, List, Any, Optional

import numpy as np
from stable_baselines3.common.callbacks import BaseCallback


class MetricsCallback(BaseCallback):
    """
    Callback to track and log game metrics per episode.
    Saves to CSV for easy plotting.
    """

    def __init__(
        self,
        log_dir: str,
        algo_name: str,
        verbose: int = 1,
    ):
        super().__init__(verbose)
        self.log_dir = log_dir
        self.algo_name = algo_name

        self.episode_rewards: List[float] = []
        self.episode_lengths: List[int] = []
        self.episode_scores: List[int] = []
        self.episode_kills: List[int] = []
        self.episode_crashes: List[int] = []

        self.csv_path: Optional[str] = None
        self.csv_file = None
        self.csv_writer = None

    def _on_training_start(self) -> None:
        """Initialize CSV file for logging."""
        os.makedirs(self.log_dir, exist_ok=True)
        self.csv_path = os.path.join(self.log_dir, f"{self.algo_name}_metrics.csv")

        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = csv.writer(self.csv_file)
        self.csv_writer.writerow([
            "timestep", "episode", "reward", "length",
            "score", "kills", "crashes", "accuracy"
        ])
        self.csv_file.flush()

        if self.verbose > 0:
            print(f"[MetricsCallback] Logging to {self.csv_path}")

    def record_episode(self, info: Dict[str, Any]) -> None:
        """Store one finished episode (``info`` carries the Monitor ``episode`` entry)."""
        ep_info = info["episode"]
        kills = info.get("kills", 0)
        shots = info.get("shots", 0)
        accuracy = kills / shots if shots else 0.0

        self.episode_rewards.append(float(ep_info["r"]))
        self.episode_lengths.append(int(ep_info["l"]))
        self.episode_scores.append(info.get("score", 0))
        self.episode_kills.append(kills)
        self.episode_crashes.append(info.get("crashes", 0))

        if self.csv_writer:
            self.csv_writer.writerow([
                self.num_timesteps,
                len(self.episode_rewards),
                ep_info["r"],
                ep_info["l"],
                self.episode_scores[-1],
                kills,
                self.episode_crashes[-1],
                accuracy,
            ])
            self.csv_file.flush()

    def _on_step(self) -> bool:
        infos = self.locals.get("infos", [])
        dones = self.locals.get("dones", [])

        for info, done in zip(infos, dones):
            # Monitor adds the "episode" entry on the final step
            if done and "episode" in info:
                self.record_episode(info)

                if self.verbose > 0 and len(self.episode_rewards) % 10 == 0:
                    avg_reward = sum(self.episode_rewards[-10:]) / 10
                    avg_score = sum(self.episode_scores[-10:]) / 10
                    print(f"[{self.algo_name}] Episode {len(self.episode_rewards)}, "
                          f"Timestep {self.num_timesteps}, "
                          f"Avg Reward (10 ep): {avg_reward:.2f}, "
                          f"Avg Score (10 ep): {avg_score:.1f}")

        return True

    def _on_training_end(self) -> None:
        if self.csv_file:
            self.csv_file.close()
            if self.verbose > 0:
                print(f"[MetricsCallback] Saved {len(self.episode_rewards)} episodes to {self.csv_path}")

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics."""
        if not self.episode_rewards:
            return {}

        return {
            "mean_reward": np.mean(self.episode_rewards),
            "std_reward": np.std(self.episode_rewards),
            "mean_length": np.mean(self.episode_lengths),
            "total_episodes": len(self.episode_rewards),
            "mean_score": np.mean(self.episode_scores),
            "mean_kills": np.mean(self.episode_kills),
            "mean_crashes": np.mean(self.episode_crashes),
        }


class TensorboardMetricsCallback(BaseCallback):
    """
    Logs game metrics to TensorBoard at the end of each episode.
    """

    def _on_step(self) -> bool:
        infos = self.locals.get("infos", [])
        dones = self.locals.get("dones", [])

        for info, done in zip(infos, dones):
            if done and "episode" in info:
                ep = info["episode"]
                self.logger.record("custom/episode_reward", ep["r"])
                self.logger.record("custom/episode_length", ep["l"])
                self.logger.record("custom/score", info.get("score", 0))
                self.logger.record("custom/kills", info.get("kills", 0))
                self.logger.record("custom/crashes", info.get("crashes", 0))

        return True
