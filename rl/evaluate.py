"""
Evaluation script for trained agents on the meteor environment
"""

import argparse
from typing import Optional

import numpy as np

from stable_baselines3 import PPO, DQN
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize

from game.meteors import MeteorEnv
from rl.configs.meteor_config import ENV_CONFIG
from rl.train import MultiDiscreteToDiscreteWrapper

ALGORITHMS = {"ppo": PPO, "dqn": DQN}


def load_model(model_path: str, algo: str):
    if algo not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {algo}")
    return ALGORITHMS[algo].load(model_path)


def _summarize(title: str, rewards, lengths, scores):
    print("\n" + "="*50)
    print(f"{title} ({len(rewards)} episodes):")
    print(f"Mean Reward: {np.mean(rewards):.2f} ± {np.std(rewards):.2f}")
    print(f"Mean Episode Length: {np.mean(lengths):.1f}")
    print(f"Mean Final Score: {np.mean(scores):.1f}")
    print(f"Min / Max Reward: {np.min(rewards):.2f} / {np.max(rewards):.2f}")
    print("="*50)
    return {
        "mean_reward": float(np.mean(rewards)),
        "std_reward": float(np.std(rewards)),
        "mean_length": float(np.mean(lengths)),
        "mean_score": float(np.mean(scores)),
        "episode_rewards": list(rewards),
        "episode_lengths": list(lengths),
    }


def evaluate_model(
    model_path: str,
    algo: str = "ppo",
    n_episodes: int = 10,
    render: bool = True,
    seed: Optional[int] = None,
    vec_normalize_path: Optional[str] = None,
):
    """
    Evaluate a trained model

    Args:
        model_path: Path to the saved model
        algo: Algorithm used ('ppo' or 'dqn')
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Random seed for evaluation
        vec_normalize_path: Path to VecNormalize stats (for PPO)
    """
    model = load_model(model_path, algo)

    render_mode = "human" if render else None
    env = MeteorEnv(render_mode=render_mode, **ENV_CONFIG)
    if algo == "dqn":
        env = MultiDiscreteToDiscreteWrapper(env)

    venv = DummyVecEnv([lambda: env])
    if vec_normalize_path:
        venv = VecNormalize.load(vec_normalize_path, venv)
        venv.training = False
        venv.norm_reward = False

    episode_rewards, episode_lengths, episode_scores = [], [], []

    for episode in range(n_episodes):
        if seed is not None:
            venv.seed(seed + episode)
        obs = venv.reset()

        total_reward = 0.0
        steps = 0
        while True:
            action, _ = model.predict(obs, deterministic=True)
            obs, reward, done, info = venv.step(action)
            total_reward += float(reward[0])
            steps += 1
            if done[0]:
                break

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info[0].get("score", 0))

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Length = {steps}, Score = {info[0].get('score', 0):06d}")

    venv.close()
    return _summarize("Evaluation Results", episode_rewards, episode_lengths, episode_scores)


def compare_with_random(n_episodes: int = 10, seed: Optional[int] = None):
    """
    Evaluate a random policy baseline
    """
    print("Evaluating random policy baseline...")

    env = MeteorEnv(render_mode=None, **ENV_CONFIG)
    env.action_space.seed(seed)

    episode_rewards, episode_lengths, episode_scores = [], [], []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])

    env.close()
    return _summarize("Random Policy Results", episode_rewards, episode_lengths, episode_scores)


def main():
    parser = argparse.ArgumentParser(description="Evaluate trained RL agent")
    parser.add_argument(
        "model_path",
        type=str,
        help="Path to the trained model",
    )
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=sorted(ALGORITHMS),
        help="Algorithm used to train the model (default: ppo)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=10,
        help="Number of evaluation episodes (default: 10)",
    )
    parser.add_argument(
        "--no-render",
        action="store_true",
        help="Disable rendering",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--vec-normalize",
        type=str,
        default=None,
        help="Path to VecNormalize stats file (for PPO)",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate random policy for comparison",
    )

    args = parser.parse_args()

    results = evaluate_model(
        model_path=args.model_path,
        algo=args.algo,
        n_episodes=args.n_episodes,
        render=not args.no_render,
        seed=args.seed,
        vec_normalize_path=args.vec_normalize,
    )

    if args.compare_random:
        print("\n")
        random_results = compare_with_random(
            n_episodes=args.n_episodes,
            seed=args.seed,
        )

        improvement = results["mean_reward"] - random_results["mean_reward"]
        print(f"\nImprovement over random: {improvement:.2f}")


if __name__ == "__main__":
    main()
