"""
Game tuning constants
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple

from .timer import ticks_for


@dataclass(frozen=True)
class GameConfig:
    """All knobs of the simulation. Durations in ms, distances in pixels."""
    width: int = 800
    height: int = 600
    tps: int = 60

    # Player
    shoot_cooldown_ms: int = 500
    rotation_per_second: float = math.pi
    bullet_spawn_offset: float = 50.0
    bullet_speed_per_second: float = 350.0

    # Meteors
    meteor_spawn_ms: int = 1000
    meteor_target_jitter: float = 250.0  # total range, split evenly around the centre
    meteor_angle_jitter_deg: float = 60.0  # total range
    meteor_speed_range: Tuple[float, float] = (0.25, 1.75)  # per tick
    meteor_rotation_speed: float = 0.02  # max |rad| per tick

    # Lifecycle
    out_of_bounds_factor: float = 1.5

    def __post_init__(self):
        assert self.width > 0 and self.height > 0, "viewport must be non-empty"
        assert self.tps > 0, "tps must be positive"
        assert self.shoot_cooldown_ms >= 0 and self.meteor_spawn_ms >= 0
        lo, hi = self.meteor_speed_range
        assert 0 < lo <= hi, "meteor speeds must be positive"
        assert self.meteor_target_jitter >= 0
        assert self.out_of_bounds_factor > 1.0

    @property
    def shoot_cooldown_ticks(self) -> int:
        return ticks_for(self.shoot_cooldown_ms, self.tps)

    @property
    def meteor_spawn_ticks(self) -> int:
        return ticks_for(self.meteor_spawn_ms, self.tps)

    @property
    def turn_speed(self) -> float:
        """Radians per tick while a rotate key is held"""
        return self.rotation_per_second / self.tps

    @property
    def bullet_speed(self) -> float:
        """Pixels per tick"""
        return self.bullet_speed_per_second / self.tps

    @property
    def spawn_radius(self) -> float:
        return self.width / 2.0

    @property
    def center(self):
        return self.width / 2.0, self.height / 2.0

    @property
    def bounds(self):
        """Absolute coordinate limits past which entities are pruned"""
        return self.width * self.out_of_bounds_factor, self.height * self.out_of_bounds_factor
