"""
Game entities: the player ship, meteors and bullets.

Positions are screen space (y down) and mark the top-left corner of the
sprite, so the collider is simply the sprite rectangle at ``position``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional

from .assets import SpriteInfo
from .timer import Timer
from .utils import Rect, Vector


@dataclass(frozen=True)
class Controls:
    """Held keys for one tick"""
    rotate_left: bool = False
    rotate_right: bool = False
    fire: bool = False


class RenderInfo(NamedTuple):
    """Raw transform parameters handed to the renderer"""
    sprite: SpriteInfo
    x: float
    y: float
    rotation: float
    half_width: float
    half_height: float

    @property
    def center(self):
        return self.x + self.half_width, self.y + self.half_height


@dataclass
class Entity:
    """Something that moves, is drawn and collides"""
    position: Vector
    sprite: SpriteInfo
    rotation: float = 0.0

    def collider(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.sprite.width, self.sprite.height)

    def render_info(self) -> RenderInfo:
        return RenderInfo(
            self.sprite,
            self.position.x,
            self.position.y,
            self.rotation,
            self.sprite.half_width,
            self.sprite.half_height,
        )

    def is_inside(self, max_x: float, max_y: float) -> bool:
        return abs(self.position.x) < max_x and abs(self.position.y) < max_y


@dataclass
class Bullet(Entity):
    """Laser bolt; the heading is fixed when it is fired"""
    speed: float = 0.0  # pixels per tick

    @classmethod
    def fired_from(cls, muzzle: Vector, heading: float, sprite: SpriteInfo, speed: float) -> "Bullet":
        # Centre the sprite on the muzzle point
        pos = Vector(muzzle.x - sprite.half_width, muzzle.y - sprite.half_height)
        return cls(position=pos, sprite=sprite, rotation=heading, speed=speed)

    def update(self) -> None:
        # Heading 0 points up the screen
        self.position = Vector(
            self.position.x + math.sin(self.rotation) * self.speed,
            self.position.y - math.cos(self.rotation) * self.speed,
        )


@dataclass
class Meteor(Entity):
    movement: Vector = field(default_factory=Vector)
    rotation_speed: float = 0.0
    target: Optional[Vector] = None  # point it was aimed at

    def update(self) -> None:
        self.position = self.position + self.movement
        self.rotation += self.rotation_speed


@dataclass
class Player(Entity):
    shoot_cooldown: Timer = field(default_factory=lambda: Timer(0))
    laser: Optional[SpriteInfo] = None
    fire_cue: Any = None
    turn_speed: float = 0.0
    bullet_speed: float = 0.0
    bullet_spawn_offset: float = 0.0

    def muzzle(self) -> Vector:
        """Point ``bullet_spawn_offset`` ahead of the sprite centre"""
        return Vector(
            self.position.x + self.sprite.half_width + math.sin(self.rotation) * self.bullet_spawn_offset,
            self.position.y + self.sprite.half_height - math.cos(self.rotation) * self.bullet_spawn_offset,
        )

    def update(self, controls: Controls) -> Optional[Bullet]:
        """Rotate, advance the cooldown and maybe fire. Returns the new bullet."""
        if controls.rotate_left:
            self.rotation -= self.turn_speed
        if controls.rotate_right:
            self.rotation += self.turn_speed

        self.shoot_cooldown.update()
        if not (self.shoot_cooldown.is_ready() and controls.fire):
            return None

        self.shoot_cooldown.reset()
        bullet = Bullet.fired_from(self.muzzle(), self.rotation, self.laser, self.bullet_speed)
        if self.fire_cue is not None:
            self.fire_cue.rewind()
            self.fire_cue.play()
        return bullet
