"""
Training script for the meteor environment using Stable-Baselines3
Supports PPO and DQN with per-episode game metrics.
"""

import os
import argparse
from typing import Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from stable_baselines3 import PPO, DQN
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize
from stable_baselines3.common.callbacks import CheckpointCallback, EvalCallback
from stable_baselines3.common.monitor import Monitor

from game.meteors import MeteorEnv
from rl.configs.meteor_config import (
    ENV_CONFIG,
    REWARD_CONFIGS,
    PPO_CONFIG,
    DQN_CONFIG,
    TRAINING_CONFIG,
)
from rl.metrics_callback import MetricsCallback, TensorboardMetricsCallback


class MultiDiscreteToDiscreteWrapper(gym.ActionWrapper):
    """
    Wrapper to convert MultiDiscrete action space to Discrete for DQN.
    Flattens MultiDiscrete([3, 2]) to Discrete(6).
    """

    def __init__(self, env):
        super().__init__(env)
        self.orig_action_space = env.action_space
        self._nvec = env.action_space.nvec
        self.n_total = int(np.prod(self._nvec))
        self.action_space = spaces.Discrete(self.n_total)

    def action(self, action):
        """Convert flat discrete action to MultiDiscrete."""
        indices = []
        remaining = int(action)
        for n in reversed(self._nvec):
            indices.append(remaining % n)
            remaining //= n
        return np.array(list(reversed(indices)), dtype=np.int64)


def make_env(seed: Optional[int] = None, reward: str = "score", wrap_for_dqn: bool = False):
    """Factory function to create the environment"""
    def _init():
        env = MeteorEnv(reward_config=REWARD_CONFIGS[reward], **ENV_CONFIG)
        if wrap_for_dqn:
            env = MultiDiscreteToDiscreteWrapper(env)
        env = Monitor(env)
        if seed is not None:
            env.reset(seed=seed)
        return env
    return _init


def _callbacks(algo: str, eval_env, save_dir: str, log_dir: str, freq_div: int = 1):
    checkpoint_callback = CheckpointCallback(
        save_freq=max(1, TRAINING_CONFIG["save_freq"] // freq_div),
        save_path=save_dir,
        name_prefix=f"{algo}_meteors",
    )
    eval_callback = EvalCallback(
        eval_env,
        best_model_save_path=save_dir,
        log_path=log_dir,
        eval_freq=max(1, TRAINING_CONFIG["eval_freq"] // freq_div),
        n_eval_episodes=TRAINING_CONFIG["n_eval_episodes"],
        deterministic=True,
        render=False,
    )
    metrics_callback = MetricsCallback(log_dir=log_dir, algo_name=algo, verbose=1)
    tb_callback = TensorboardMetricsCallback(verbose=0)
    return metrics_callback, [checkpoint_callback, eval_callback, metrics_callback, tb_callback]


def _report(algo: str, final_path: str, metrics_callback: MetricsCallback):
    print(f"\n{'='*60}")
    print(f"{algo.upper()} Training complete! Model saved to {final_path}")
    summary = metrics_callback.get_summary()
    if summary:
        print(f"Mean Reward: {summary['mean_reward']:.2f} ± {summary['std_reward']:.2f}")
        print(f"Mean Score: {summary['mean_score']:.1f}  "
              f"Kills: {summary['mean_kills']:.1f}  Crashes: {summary['mean_crashes']:.1f}")
        print(f"Total Episodes: {summary['total_episodes']}")
    print(f"{'='*60}\n")


def train_ppo(
    total_timesteps: int = None,
    save_dir: str = "./models/ppo",
    log_dir: str = "./logs/ppo",
    tensorboard_log: str = "./tensorboard_logs/ppo",
    n_envs: int = 4,
    reward: str = "score",
):
    """Train PPO agent on the meteor environment"""

    if total_timesteps is None:
        total_timesteps = TRAINING_CONFIG["total_timesteps"]

    os.makedirs(save_dir, exist_ok=True)
    os.makedirs(log_dir, exist_ok=True)

    print(f"\n{'='*60}")
    print(f"Training PPO for {total_timesteps:,} timesteps...")
    print(f"Using {n_envs} parallel environments, reward config '{reward}'")
    print(f"{'='*60}\n")

    env = DummyVecEnv([make_env(seed=i, reward=reward) for i in range(n_envs)])
    env = VecNormalize(env, norm_obs=True, norm_reward=True)

    eval_env = DummyVecEnv([make_env(seed=100, reward=reward)])
    eval_env = VecNormalize(eval_env, norm_obs=True, norm_reward=False, training=False)

    metrics_callback, callbacks = _callbacks("ppo", eval_env, save_dir, log_dir, freq_div=n_envs)

    model = PPO(env=env, tensorboard_log=tensorboard_log, **PPO_CONFIG)
    model.learn(total_timesteps=total_timesteps, callback=callbacks)

    final_path = os.path.join(save_dir, "ppo_meteors_final")
    model.save(final_path)
    env.save(os.path.join(save_dir, "vec_normalize.pkl"))

    _report("ppo", final_path, metrics_callback)
    return model, metrics_callback


def train_dqn(
    total_timesteps: int = None,
    save_dir: str = "./models/dqn",
    log_dir: str = "./logs/dqn",
    tensorboard_log: str = "./tensorboard_logs/dqn",
    reward: str = "score",
):
    """Train DQN agent on the meteor environment"""

    if total_timesteps is None:
        total_timesteps = TRAINING_CONFIG["total_timesteps"]

    os.makedirs(save_dir, exist_ok=True)
    os.makedirs(log_dir, exist_ok=True)

    print(f"\n{'='*60}")
    print(f"Training DQN for {total_timesteps:,} timesteps...")
    print(f"Using MultiDiscrete->Discrete action wrapper (6 actions)")
    print(f"{'='*60}\n")

    env = DummyVecEnv([make_env(seed=0, reward=reward, wrap_for_dqn=True)])
    eval_env = DummyVecEnv([make_env(seed=100, reward=reward, wrap_for_dqn=True)])

    metrics_callback, callbacks = _callbacks("dqn", eval_env, save_dir, log_dir)

    model = DQN(env=env, tensorboard_log=tensorboard_log, **DQN_CONFIG)
    model.learn(total_timesteps=total_timesteps, callback=callbacks)

    final_path = os.path.join(save_dir, "dqn_meteors_final")
    model.save(final_path)

    _report("dqn", final_path, metrics_callback)
    return model, metrics_callback


def main():
    parser = argparse.ArgumentParser(description="Train RL agent on the meteor environment")
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=["ppo", "dqn", "all"],
        help="RL algorithm to use (default: ppo)",
    )
    parser.add_argument(
        "--timesteps",
        type=int,
        default=None,
        help=f"Total timesteps to train (default: {TRAINING_CONFIG['total_timesteps']})",
    )
    parser.add_argument(
        "--n-envs",
        type=int,
        default=4,
        help="Number of parallel environments for PPO (default: 4)",
    )
    parser.add_argument(
        "--reward",
        type=str,
        default="score",
        choices=sorted(REWARD_CONFIGS),
        help="Reward shaping config (default: score)",
    )

    args = parser.parse_args()

    if args.algo == "ppo":
        train_ppo(total_timesteps=args.timesteps, n_envs=args.n_envs, reward=args.reward)
    elif args.algo == "dqn":
        train_dqn(total_timesteps=args.timesteps, reward=args.reward)
    elif args.algo == "all":
        print("Training all algorithms sequentially...")
        train_dqn(total_timesteps=args.timesteps, reward=args.reward)
        train_ppo(total_timesteps=args.timesteps, n_envs=args.n_envs, reward=args.reward)


if __name__ == "__main__":
    main()
