import numpy as np
import pytest
from gymnasium.utils.env_checker import check_env

from game.meteors.meteor_env import MeteorEnv
from game.meteors.utils import Vector
from game.meteors.entities import Meteor


@pytest.fixture
def env():
    e = MeteorEnv(max_steps=300)
    yield e
    e.close()


def test_passes_gymnasium_checker():
    check_env(MeteorEnv(max_steps=200), skip_render_check=True)


def test_reset_shapes(env):
    obs, info = env.reset(seed=0)
    assert obs.shape == env.observation_space.shape
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0
    assert info["num_meteors"] == 0
    # Heading 0: sin 0, cos 1
    assert obs[0] == pytest.approx(0.0)
    assert obs[1] == pytest.approx(1.0)


def test_truncates_at_max_steps(env):
    env.reset(seed=1)
    for i in range(300):
        obs, reward, terminated, truncated, info = env.step(np.array([0, 0]))
        assert not terminated
        assert truncated == (i == 299)
        assert env.observation_space.contains(obs)
    assert info["step"] == 300


def test_seeded_episodes_repeat(env):
    def rollout(seed):
        obs, _ = env.reset(seed=seed)
        env.action_space.seed(seed)
        trace = [obs]
        for _ in range(200):
            obs, *_ = env.step(env.action_space.sample())
            trace.append(obs)
        return np.stack(trace)

    assert np.array_equal(rollout(5), rollout(5))
    assert not np.array_equal(rollout(5), rollout(6))


def test_fire_action_shoots_and_costs(env):
    env.reset(seed=2)
    env.sim.player.shoot_cooldown.force_ready()
    _, reward, _, _, info = env.step(np.array([0, 1]))
    assert info["shots"] == 1
    assert info["num_bullets"] == 1
    assert reward == pytest.approx(-env.rewards["R_SHOT"])


def test_rotate_actions(env):
    env.reset(seed=3)
    env.step(np.array([2, 0]))
    assert env.sim.player.rotation > 0
    env.step(np.array([1, 0]))
    env.step(np.array([1, 0]))
    assert env.sim.player.rotation < 0


def test_crash_is_penalised(env):
    env.reset(seed=4)
    p = env.sim.player.position
    env.sim.meteors.append(Meteor(position=Vector(p.x, p.y), sprite=env.assets.meteors[0]))
    _, reward, _, _, info = env.step(np.array([0, 0]))
    assert info["crashes"] == 1
    assert info["score"] == 0
    assert reward == pytest.approx(-1.0)


def test_reward_config_overrides():
    env = MeteorEnv(reward_config={"name": "x", "R_CRASH": 3.0})
    assert env.rewards["R_CRASH"] == 3.0
    assert env.rewards["R_KILL"] == 1.0
    assert "name" not in env.rewards


def test_nearest_meteor_in_observation(env):
    obs, _ = env.reset(seed=0)
    p = env.sim.player
    px, py = p.render_info().center
    sprite = env.assets.meteors[0]
    env.sim.meteors.append(Meteor(
        position=Vector(px + 200 - sprite.half_width, py - sprite.half_height),
        sprite=sprite,
        movement=Vector(-1.75, 0.0),
    ))
    obs = env._get_obs()
    assert obs[5] == pytest.approx(200 / env.config.width, abs=1e-6)
    assert obs[6] == pytest.approx(0.0, abs=1e-6)
    assert obs[7] == pytest.approx(-1.0)
    assert obs[8] == pytest.approx(0.0)


def test_rgb_array_frame():
    env = MeteorEnv(render_mode="rgb_array")
    env.reset(seed=0)
    frame = env.render()
    assert frame.shape == (600, 800, 3)
    assert frame.dtype == np.uint8
    # The ship is drawn in the middle of the frame
    assert frame[300, 400].any()
    assert not frame[0, 0].any()


def test_rejects_bad_arguments():
    with pytest.raises(AssertionError):
        MeteorEnv(render_mode="ascii")
    with pytest.raises(AssertionError):
        MeteorEnv(width=0)
