import csv

import pytest

pytest.importorskip("stable_baselines3")

from game.meteors import MeteorEnv  # noqa: E402
from rl.metrics_callback import MetricsCallback  # noqa: E402
from rl.train import MultiDiscreteToDiscreteWrapper  # noqa: E402


def test_discrete_actions_cover_every_rotate_fire_pair():
    env = MultiDiscreteToDiscreteWrapper(MeteorEnv())
    assert env.action_space.n == 6

    decoded = [tuple(int(v) for v in env.action(a)) for a in range(6)]
    assert decoded == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]
    assert len(set(decoded)) == 6
    assert all(env.orig_action_space.contains(env.action(a)) for a in range(6))


def test_wrapped_env_steps():
    env = MultiDiscreteToDiscreteWrapper(MeteorEnv(max_steps=5))
    env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(5)
    assert info["step"] == 1
    assert env.unwrapped.sim.player.rotation > 0


def _episode(r, l, score, kills, shots, crashes=0):
    return {"episode": {"r": r, "l": l}, "score": score,
            "kills": kills, "shots": shots, "crashes": crashes}


def test_record_episode_rows_and_summary(tmp_path):
    cb = MetricsCallback(log_dir=str(tmp_path), algo_name="dqn", verbose=0)
    cb._on_training_start()

    cb.record_episode(_episode(3.5, 100, score=4, kills=4, shots=8, crashes=1))
    cb.record_episode(_episode(-1.0, 50, score=0, kills=0, shots=0, crashes=2))
    cb._on_training_end()

    assert cb.episode_rewards == [3.5, -1.0]
    assert cb.episode_lengths == [100, 50]
    assert cb.episode_scores == [4, 0]
    assert cb.episode_kills == [4, 0]
    assert cb.episode_crashes == [1, 2]

    with open(tmp_path / "dqn_metrics.csv", newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["episode"] == "1"
    assert float(rows[0]["accuracy"]) == pytest.approx(0.5)
    # No shots fired: accuracy is zero, not a division error
    assert float(rows[1]["accuracy"]) == 0.0
    assert rows[1]["crashes"] == "2"

    summary = cb.get_summary()
    assert summary["total_episodes"] == 2
    assert summary["mean_reward"] == pytest.approx(1.25)
    assert summary["mean_length"] == pytest.approx(75)
    assert summary["mean_score"] == pytest.approx(2)
    assert summary["mean_kills"] == pytest.approx(2)
    assert summary["mean_crashes"] == pytest.approx(1.5)


def test_summary_empty_before_any_episode(tmp_path):
    cb = MetricsCallback(log_dir=str(tmp_path), algo_name="ppo", verbose=0)
    assert cb.get_summary() == {}
