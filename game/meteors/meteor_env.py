"""
MeteorEnv - the meteor shooter as a Gymnasium environment
---------------------------------------------------------
- Wraps one Simulation; one env step == one simulation tick
- Gymnasium API
- MultiDiscrete action space: [rotate(3), fire(2)]
- Vector observation: ship heading + cooldown + top-K nearest meteors
- Reward from kills, crashes, shots and a small time cost
- The game never ends on its own; episodes are truncated at max_steps

Quick test:
    python -m game.meteors.meteor_env
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .assets import AssetBundle, headless_assets
from .config import GameConfig
from .entities import Controls
from .simulation import Simulation, TickEvents

DEFAULT_REWARDS = {
    "R_KILL": 1.0,
    "R_CRASH": 1.0,
    "R_SHOT": 0.01,
    "R_TIME": 0.0,
}


class MeteorEnv(gym.Env):
    """Meteor shooter environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        tps: int = 60,
        max_steps: int = 3600,  # 60s at 60 TPS
        k_meteors: int = 5,
        shoot_cooldown_ms: int = 500,
        meteor_spawn_ms: int = 1000,
        reward_config: Optional[Dict[str, float]] = None,
        assets: Optional[AssetBundle] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        assert k_meteors >= 0, "k_meteors must be non-negative"
        assert max_steps > 0, "max_steps must be positive"
        self.render_mode = render_mode

        self.config = GameConfig(
            width=width,
            height=height,
            tps=tps,
            shoot_cooldown_ms=shoot_cooldown_ms,
            meteor_spawn_ms=meteor_spawn_ms,
        )
        self.metadata = {**self.metadata, "render_fps": tps}
        self.assets = assets or headless_assets()
        self.max_steps = max_steps
        self.k_meteors = k_meteors

        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k.startswith("R_")})

        # rotate: 0 none, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Ship: sin/cos heading(2) cooldown(1) score(1) bullets(1)
        # Each meteor: rel pos(2) movement(2)
        obs_dim = 5 + self.k_meteors * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self.sim: Simulation = None  # type: ignore
        self._step_count = 0
        self._totals = TickEvents()

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self._totals = TickEvents()
        # Spawns draw from the env's seeded generator
        self.sim = Simulation(self.assets, config=self.config, rng=self.np_random)

        if self._window is not None:
            self._window.sim = self.sim

        return self._get_obs(), self._get_info()

    def step(self, action):
        rotate, fire = int(action[0]), int(action[1])
        controls = Controls(
            rotate_left=rotate == 1,
            rotate_right=rotate == 2,
            fire=fire == 1,
        )

        events = self.sim.step(controls)
        self._totals.shots += events.shots
        self._totals.spawned += events.spawned
        self._totals.kills += events.kills
        self._totals.crashes += events.crashes

        reward = self._compute_reward(events)

        self._step_count += 1
        terminated = False
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        player = self.sim.player
        px, py = player.render_info().center

        max_bullets = max(1.0, cfg.width / max(cfg.bullet_speed, 1e-6) / max(1, cfg.shoot_cooldown_ticks))
        obs_parts = [
            math.sin(player.rotation),
            math.cos(player.rotation),
            player.shoot_cooldown.progress * 2 - 1,
            self.sim.score / 100.0,
            len(self.sim.bullets) / max_bullets,
        ]

        max_speed = max(1e-6, cfg.meteor_speed_range[1])

        def dist2(m):
            mx, my = m.render_info().center
            return (mx - px) ** 2 + (my - py) ** 2

        nearest = sorted(self.sim.meteors, key=dist2)
        for i in range(self.k_meteors):
            if i < len(nearest):
                m = nearest[i]
                mx, my = m.render_info().center
                obs_parts += [
                    (mx - px) / cfg.width,
                    (my - py) / cfg.height,
                    m.movement.x / max_speed,
                    m.movement.y / max_speed,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        obs = np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)
        return obs

    def _compute_reward(self, events: TickEvents) -> float:
        r = self.rewards
        reward = 0.0
        reward += r["R_KILL"] * events.kills
        reward -= r["R_CRASH"] * events.crashes
        reward -= r["R_SHOT"] * events.shots
        reward -= r["R_TIME"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.sim.score,
            "kills": self._totals.kills,
            "crashes": self._totals.crashes,
            "shots": self._totals.shots,
            "num_meteors": len(self.sim.meteors),
            "num_bullets": len(self.sim.bullets),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "human":
            if self._window is None:
                from .window import MeteorWindow
                # The env drives the ticks, the window only draws
                self._window = MeteorWindow(self.sim, title="MeteorEnv", interactive=False)
            self._window.dispatch_events()
            self._window.on_draw()
            self._window.flip()
            return None

        return self._render_rgb_array()

    def _render_rgb_array(self) -> np.ndarray:
        """Rasterise every collider as a filled box"""
        h, w = self.config.height, self.config.width
        frame = np.zeros((h, w, 3), dtype=np.uint8)

        colors = [(80, 200, 120)]
        colors += [(200, 120, 80)] * len(self.sim.meteors)
        colors += [(180, 180, 240)] * len(self.sim.bullets)

        for item, color in zip(self.sim.render_list(), colors):
            x0 = int(max(0, math.floor(item.x)))
            y0 = int(max(0, math.floor(item.y)))
            x1 = int(min(w, math.ceil(item.x + item.sprite.width)))
            y1 = int(min(h, math.ceil(item.y + item.sprite.height)))
            if x0 < x1 and y0 < y1:
                frame[y0:y1, x0:x1] = color
        return frame

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, max_steps: int = 1800, seed: int = 42):
    """Run a random-policy episode and report the score"""
    env = MeteorEnv(render_mode="human" if render else None, max_steps=max_steps)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to stop early.")
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f}  score: {info['score']:06d}  "
          f"kills: {info['kills']}  crashes: {info['crashes']}")
    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=True)
