"""
Arcade window that drives the simulation at a fixed tick rate and draws it
"""

from __future__ import annotations

import math

import arcade

from .entities import Controls, RenderInfo
from .simulation import Simulation

LEFT_KEYS = (arcade.key.LEFT, arcade.key.A)
RIGHT_KEYS = (arcade.key.RIGHT, arcade.key.D)
FIRE_KEYS = (arcade.key.SPACE,)


class MeteorWindow(arcade.Window):
    """Human-facing front end: keyboard in, sprites out"""

    def __init__(self, sim: Simulation, title: str = "Meteors", interactive: bool = True):
        cfg = sim.config
        super().__init__(cfg.width, cfg.height, title, update_rate=1 / cfg.tps)
        self.sim = sim
        self.interactive = interactive
        self._held = set()

        self.BG = (0, 0, 0)
        self.OUTLINE_C = (200, 200, 220)
        self.SCORE_C = arcade.color.WHITE

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        self._held.add(symbol)

    def on_key_release(self, symbol: int, modifiers: int):
        self._held.discard(symbol)

    def controls(self) -> Controls:
        return Controls(
            rotate_left=any(k in self._held for k in LEFT_KEYS),
            rotate_right=any(k in self._held for k in RIGHT_KEYS),
            fire=any(k in self._held for k in FIRE_KEYS),
        )

    def on_update(self, delta_time: float):
        # One simulation tick per update, regardless of delta_time
        if self.interactive:
            self.sim.step(self.controls())

    # ----------------------------
    # Drawing
    # ----------------------------

    def _draw_item(self, item: RenderInfo):
        cx, cy = item.center
        # Arcade's origin is bottom-left
        rect = arcade.XYWH(cx, self.height - cy, item.sprite.width, item.sprite.height)
        angle = math.degrees(item.rotation)
        if item.sprite.texture is not None:
            arcade.draw_texture_rect(item.sprite.texture, rect, angle=angle)
        else:
            arcade.draw_rect_outline(rect, self.OUTLINE_C, border_width=2, tilt_angle=angle)

    def on_draw(self):
        self.clear(self.BG)
        for item in self.sim.render_list():
            self._draw_item(item)

        font_name = self.sim.assets.font_name or ("calibri", "arial")
        arcade.draw_text(
            self.sim.score_text,
            self.width / 2 - 100,
            self.height - 50,
            self.SCORE_C,
            48,
            font_name=font_name,
            anchor_y="top",
        )
