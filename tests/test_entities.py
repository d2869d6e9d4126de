import math

import pytest

from game.meteors.assets import SilentCue, SpriteInfo
from game.meteors.entities import Bullet, Controls, Meteor
from game.meteors.utils import Rect, Vector

SPRITE = SpriteInfo(10, 20)


def test_bullet_heading_zero_moves_up():
    b = Bullet(position=Vector(100, 100), sprite=SPRITE, rotation=0.0, speed=5.0)
    b.update()
    assert b.position.x == pytest.approx(100)
    assert b.position.y == pytest.approx(95)


def test_bullet_heading_quarter_turn_moves_right():
    b = Bullet(position=Vector(0, 0), sprite=SPRITE, rotation=math.pi / 2, speed=5.0)
    b.update()
    b.update()
    assert b.position.x == pytest.approx(10)
    assert b.position.y == pytest.approx(0, abs=1e-9)
    assert b.rotation == math.pi / 2


def test_bullet_is_centred_on_muzzle():
    b = Bullet.fired_from(Vector(50, 50), 0.3, SPRITE, speed=1.0)
    assert b.position == Vector(45, 40)
    assert b.rotation == 0.3


def test_meteor_moves_in_straight_line():
    m = Meteor(position=Vector(0, 0), sprite=SPRITE, movement=Vector(1.5, -0.5), rotation_speed=0.01)
    for _ in range(10):
        m.update()
    assert m.position.x == pytest.approx(15)
    assert m.position.y == pytest.approx(-5)
    assert m.rotation == pytest.approx(0.1)


def test_collider_uses_position_and_sprite_extent():
    m = Meteor(position=Vector(3, 4), sprite=SPRITE)
    assert m.collider() == Rect(3, 4, 10, 20)
    info = m.render_info()
    assert (info.half_width, info.half_height) == (5, 10)
    assert info.center == (8, 14)


def test_player_starts_centred(sim, config, assets):
    cx, cy = sim.player.render_info().center
    assert (cx, cy) == config.center
    assert sim.player.sprite is assets.player


def test_player_rotation(sim, config):
    player = sim.player
    player.update(Controls(rotate_right=True))
    assert player.rotation == pytest.approx(math.pi / config.tps)
    player.update(Controls(rotate_left=True))
    player.update(Controls(rotate_left=True))
    assert player.rotation == pytest.approx(-math.pi / config.tps)
    # Both held cancel out
    player.update(Controls(rotate_left=True, rotate_right=True))
    assert player.rotation == pytest.approx(-math.pi / config.tps)


def test_player_fires_only_when_cooldown_ready(sim, config):
    player = sim.player
    cue = player.fire_cue
    assert isinstance(cue, SilentCue)

    fired = [player.update(Controls(fire=True)) for _ in range(3 * config.shoot_cooldown_ticks)]
    shots = [i for i, b in enumerate(fired) if b is not None]

    # Holding fire repeats at the cooldown interval
    n = config.shoot_cooldown_ticks
    assert shots == [n - 1, 2 * n - 1, 3 * n - 1]
    assert cue.plays == 3
    assert cue.rewinds == 3


def test_fire_needs_the_key(sim, config):
    player = sim.player
    for _ in range(config.shoot_cooldown_ticks * 2):
        assert player.update(Controls()) is None
    assert player.shoot_cooldown.is_ready()
    assert player.update(Controls(fire=True)) is not None
    assert not player.shoot_cooldown.is_ready()


def test_bullet_spawns_ahead_of_ship(sim, config, assets):
    player = sim.player
    player.shoot_cooldown.force_ready()
    bullet = player.update(Controls(fire=True))

    cx, cy = config.center
    muzzle_x, muzzle_y = bullet.render_info().center
    assert muzzle_x == pytest.approx(cx)
    assert muzzle_y == pytest.approx(cy - config.bullet_spawn_offset)
    assert bullet.sprite is assets.laser
    assert bullet.speed == pytest.approx(config.bullet_speed)


def test_bullet_keeps_heading_after_ship_turns(sim):
    player = sim.player
    player.rotation = math.pi / 2
    player.shoot_cooldown.force_ready()
    bullet = player.update(Controls(fire=True))

    cx, cy = sim.config.center
    assert bullet.render_info().center == pytest.approx((cx + 50, cy))

    for _ in range(20):
        player.update(Controls(rotate_left=True))
        bullet.update()
    assert bullet.rotation == math.pi / 2
    assert bullet.render_info().center[1] == pytest.approx(cy)
