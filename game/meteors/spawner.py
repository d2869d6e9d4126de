"""
Meteor spawner: places new meteors on a circle around a jittered target
near the screen centre and aims them at it.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .assets import SpriteInfo
from .config import GameConfig
from .entities import Meteor
from .utils import Vector


class MeteorSpawner:
    """Builds meteors from an injected random generator"""

    def __init__(self, config: GameConfig, sprites: Sequence[SpriteInfo], rng: np.random.Generator):
        assert len(sprites) > 0, "need at least one meteor sprite"
        self.config = config
        self.sprites = tuple(sprites)
        self.rng = rng

    def _jitter(self, total: float) -> float:
        return float(self.rng.uniform(-total / 2, total / 2))

    def pick_target(self) -> Vector:
        cx, cy = self.config.center
        jitter = self.config.meteor_target_jitter
        return Vector(cx + self._jitter(jitter), cy + self._jitter(jitter))

    def pick_angle(self) -> float:
        angle = float(self.rng.uniform(0.0, 2 * math.pi))
        return angle + math.radians(self._jitter(self.config.meteor_angle_jitter_deg))

    def spawn(self) -> Meteor:
        cfg = self.config
        sprite = self.sprites[int(self.rng.integers(len(self.sprites)))]

        target = self.pick_target()
        r = cfg.spawn_radius
        angle = self.pick_angle()
        pos = Vector(target.x + math.cos(angle) * r, target.y + math.sin(angle) * r)

        lo, hi = cfg.meteor_speed_range
        speed = float(self.rng.uniform(lo, hi))

        # r > 0, so pos never coincides with target
        direction = (target - pos).normalize()
        rotation_speed = self._jitter(2 * cfg.meteor_rotation_speed)

        return Meteor(
            position=pos,
            sprite=sprite,
            movement=direction * speed,
            rotation_speed=rotation_speed,
            target=target,
        )
