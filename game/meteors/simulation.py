"""
Simulation - one fixed tick of the meteor shooter
---------------------------------------------------------
Per tick, in order:
- player update (rotation, cooldown, firing)
- timer-gated meteor spawn
- meteor and bullet motion
- collisions: meteor vs bullet (+1), meteor vs player (-1)
- out-of-bounds pruning
- score floor at zero

The renderer reads ``render_list()`` and ``score_text`` after each step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .assets import AssetBundle
from .config import GameConfig
from .entities import Bullet, Controls, Meteor, Player, RenderInfo
from .spawner import MeteorSpawner
from .timer import Timer
from .utils import Vector, make_rng


@dataclass
class TickEvents:
    """What happened during one step"""
    shots: int = 0
    spawned: int = 0
    kills: int = 0
    crashes: int = 0


class Simulation:
    """Authoritative game state. Single writer: ``step``."""

    def __init__(
        self,
        assets: AssetBundle,
        config: Optional[GameConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config or GameConfig()
        self.assets = assets
        self.spawner = MeteorSpawner(self.config, assets.meteors, rng if rng is not None else make_rng())

        self.player = self._make_player()
        self.meteor_spawn_timer = Timer(self.config.meteor_spawn_ticks)
        self.meteors: List[Meteor] = []
        self.bullets: List[Bullet] = []
        self.score = 0
        self.tick_count = 0

    def _make_player(self) -> Player:
        cfg = self.config
        sprite = self.assets.player
        cx, cy = cfg.center
        return Player(
            position=Vector(cx - sprite.half_width, cy - sprite.half_height),
            sprite=sprite,
            shoot_cooldown=Timer(cfg.shoot_cooldown_ticks),
            laser=self.assets.laser,
            fire_cue=self.assets.fire_cue,
            turn_speed=cfg.turn_speed,
            bullet_speed=cfg.bullet_speed,
            bullet_spawn_offset=cfg.bullet_spawn_offset,
        )

    # ----------------------------
    # Tick
    # ----------------------------

    def step(self, controls: Controls = Controls()) -> TickEvents:
        events = TickEvents()

        bullet = self.player.update(controls)
        if bullet is not None:
            self.bullets.append(bullet)
            events.shots += 1

        self.meteor_spawn_timer.update()
        if self.meteor_spawn_timer.is_ready():
            self.meteor_spawn_timer.reset()
            self.meteors.append(self.spawner.spawn())
            events.spawned += 1

        for m in self.meteors:
            m.update()
        for b in self.bullets:
            b.update()

        events.kills, events.crashes = self.resolve_collisions()
        self.prune()
        self.score = max(self.score, 0)

        self.tick_count += 1
        return events

    # ----------------------------
    # Collisions / lifecycle
    # ----------------------------

    def resolve_collisions(self) -> Tuple[int, int]:
        """Remove colliding entities and adjust the score.

        Works on snapshots: hits are marked during the sweep and removed once
        it is done. Each meteor takes at most one bullet and each bullet hits
        at most one meteor. Returns ``(kills, crashes)``.
        """
        meteor_hit = [False] * len(self.meteors)
        bullet_hit = [False] * len(self.bullets)
        bullet_rects = [b.collider() for b in self.bullets]

        kills = 0
        for i, m in enumerate(self.meteors):
            rect = m.collider()
            for j, b_rect in enumerate(bullet_rects):
                if bullet_hit[j]:
                    continue
                if rect.intersects(b_rect):
                    meteor_hit[i] = True
                    bullet_hit[j] = True
                    kills += 1
                    break

        self.meteors = [m for m, hit in zip(self.meteors, meteor_hit) if not hit]
        self.bullets = [b for b, hit in zip(self.bullets, bullet_hit) if not hit]
        self.score += kills

        player_rect = self.player.collider()
        survivors = [m for m in self.meteors if not m.collider().intersects(player_rect)]
        crashes = len(self.meteors) - len(survivors)
        self.meteors = survivors
        self.score -= crashes

        return kills, crashes

    def prune(self) -> int:
        """Drop meteors and bullets that drifted far off screen"""
        max_x, max_y = self.config.bounds
        before = len(self.meteors) + len(self.bullets)
        self.meteors = [m for m in self.meteors if m.is_inside(max_x, max_y)]
        self.bullets = [b for b in self.bullets if b.is_inside(max_x, max_y)]
        return before - len(self.meteors) - len(self.bullets)

    # ----------------------------
    # Read-only views for rendering
    # ----------------------------

    @property
    def score_text(self) -> str:
        return f"{self.score:06d}"

    def render_list(self) -> List[RenderInfo]:
        items = [self.player.render_info()]
        items.extend(m.render_info() for m in self.meteors)
        items.extend(b.render_info() for b in self.bullets)
        return items
