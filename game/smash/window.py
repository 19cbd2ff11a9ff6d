"""
Arcade windows for the smash simulation.

Simulation coordinates grow downward from the top of the track; arcade's grow
upward, so every rectangle is flipped against the window height.
"""

from __future__ import annotations

import arcade

from .simulation import Simulation
from .utils import Rect
from .smash_env import (
    ACTOR_C, ACTOR_SIZE, BG_C, BROKEN_C, HUD_C, STRIKE_C, TARGET_C, TRACK_C,
)


def _lrbt(r: Rect, height: float):
    return r.x, r.x + r.w, height - r.y - r.h, height - r.y


def draw_simulation(sim: Simulation, width: float, height: float):
    """Draw targets, the walker and (when armed) the strike region"""
    c = sim.config

    # Lanes
    for lane_x in (c.lane_left, c.lane_right):
        arcade.draw_lrbt_rectangle_filled(
            lane_x, lane_x + c.target_size, 0, height, TRACK_C
        )

    for t in sim.targets:
        if t.active:
            arcade.draw_lrbt_rectangle_filled(*_lrbt(t.hitbox, height), TARGET_C)
        else:
            arcade.draw_lrbt_rectangle_outline(*_lrbt(t.hitbox, height), BROKEN_C, 2)

    ax, ay = sim.actor.position
    arcade.draw_circle_filled(ax, height - ay, ACTOR_SIZE, ACTOR_C)

    if sim.strike_visible:
        arcade.draw_lrbt_rectangle_filled(*_lrbt(sim.actor.strike_region, height), STRIKE_C)

    # Charge bar
    bar_w, bar_h = 120, 8
    x0, y0 = 12, height - 22
    arcade.draw_lrbt_rectangle_filled(x0, x0 + bar_w, y0, y0 + bar_h, (60, 60, 60))
    fill = bar_w * min(sim.actor.holding / c.hold_max, 1.0)
    if fill > 0:
        color = STRIKE_C if sim.strike_visible else ACTOR_C
        arcade.draw_lrbt_rectangle_filled(x0, x0 + fill, y0, y0 + bar_h, color)

    txt = f"Targets: {len(sim.active_targets)}/{len(sim.targets)}  Tick: {sim.tick_count}"
    arcade.draw_text(txt, 12, height - 40, HUD_C, 12)


class SmashWindow(arcade.Window):
    """Arcade window rendering a SmashEnv; the env drives the loop"""

    def __init__(self, env):
        c = env.config
        super().__init__(c.track_width, c.track_height, "SmashEnv - Arcade")
        self.env = env

    def on_draw(self):
        self.clear(color=BG_C)
        draw_simulation(self.env.sim, self.width, self.height)


class PlayWindow(arcade.Window):
    """Human play: hold SPACE to charge, release to swing, R to respawn"""

    def __init__(self, sim: Simulation, title: str = "smash"):
        c = sim.config
        super().__init__(c.track_width, c.track_height, title)
        self.sim = sim

    def on_draw(self):
        self.clear(color=BG_C)
        draw_simulation(self.sim, self.width, self.height)
        if self.sim.all_struck:
            arcade.draw_text(
                "All smashed! R to respawn", self.width / 2, self.height / 2,
                HUD_C, 16, anchor_x="center",
            )

    def on_update(self, delta_time: float):
        self.sim.tick()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.SPACE:
            self.sim.set_hold_input(True)
        elif symbol == arcade.key.R:
            self.sim = Simulation(config=self.sim.config, rng=self.sim.rng)
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol == arcade.key.SPACE:
            self.sim.set_hold_input(False)
