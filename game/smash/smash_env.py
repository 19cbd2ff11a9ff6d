"""
SmashEnv - the smash simulation as a Gymnasium environment
----------------------------------------------------------
- One tick of the Simulation per step()
- Discrete(2) action: 0 = hold released, 1 = hold pressed
- Holding freezes the walker and charges the swing; releasing an armed swing
  breaks every target under the strike region
- Vector observation: walker/charge state + lane and offset of every target
- Arcade for rendering (window only created in "human" mode)

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m game.smash.smash_env
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import SmashConfig
from .simulation import Simulation
from .utils import Rect, clamp

# Palette shared by the arcade windows and the rgb_array raster
BG_C = (18, 18, 22)
TRACK_C = (40, 40, 48)
ACTOR_C = (80, 200, 120)
STRIKE_C = (240, 210, 80)
TARGET_C = (220, 80, 80)
BROKEN_C = (90, 60, 60)
HUD_C = (220, 220, 220)

ACTOR_SIZE = 10.0

DEFAULT_REWARD_CONFIG = {
    "R_STRIKE": 1.0,   # per target broken
    "R_WHIFF": 0.1,    # armed swing that breaks nothing
    "R_TIME": 0.001,   # per step
}


class SmashEnv(gym.Env):
    """Gymnasium wrapper driving a Simulation one tick per step"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        max_steps: int = 2000,
        reward_config: Optional[Dict[str, float]] = None,
        **config_kwargs,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode: {render_mode}")
        self.render_mode = render_mode
        self.max_steps = max_steps

        # Remaining kwargs are SmashConfig fields
        self.config = SmashConfig.from_dict(config_kwargs)

        self.reward_config = dict(DEFAULT_REWARD_CONFIG)
        if reward_config:
            self.reward_config.update(
                {k: v for k, v in reward_config.items() if k.startswith("R_")}
            )

        self.action_space = spaces.Discrete(2)

        # Walker: y(1) charge(1) armed(1)
        # Each target: lane(1) offset from strike region(1) active(1)
        obs_dim = 3 + 3 * self.config.target_count
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None

        self.sim: Simulation = None  # type: ignore
        self._step_count = 0
        self._events: Dict[str, float] = {}

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self._events = {}
        self.sim = Simulation(config=self.config, rng=self.np_random)

        return self._get_obs(), self._get_info()

    def step(self, action):
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r} for {self.action_space}")

        self._events = {"struck": 0.0, "whiff": 0.0}

        armed = self.sim.strike_visible
        struck = self.sim.set_hold_input(int(action) == 1)
        self.sim.tick()

        self._events["struck"] = float(len(struck))
        # set_hold_input only strikes on release, so armed + empty == missed swing
        if armed and int(action) == 0 and not struck:
            self._events["whiff"] = 1.0

        reward = self._compute_reward()

        terminated = self.sim.all_struck
        self._step_count += 1
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
        c = self.config
        actor = self.sim.actor

        obs_parts = [
            (actor.y / c.track_height) * 2 - 1,
            clamp(actor.holding / c.hold_max, 0.0, 1.0) * 2 - 1,
            1.0 if actor.is_strike_armed() else -1.0,
        ]

        strike_y = actor.strike_region.y
        for t in self.sim.targets:
            lane = -1.0 if t.x == c.lane_left else 1.0
            dy = (t.y - strike_y) / c.track_height
            obs_parts += [
                lane,
                clamp(dy, -1, 1),
                1.0 if t.active else -1.0,
            ]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        rc = self.reward_config
        reward = 0.0
        reward += rc["R_STRIKE"] * self._events.get("struck", 0.0)
        reward -= rc["R_WHIFF"] * self._events.get("whiff", 0.0)
        reward -= rc["R_TIME"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        snap = self.sim.snapshot()
        return {
            "holding": snap["holding"],
            "armed": snap["strike_visible"],
            "active_targets": snap["active_targets"],
            "targets_struck": snap["targets_struck"],
            "swings": snap["swings"],
            "struck_this_step": int(self._events.get("struck", 0.0)),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "rgb_array":
            return self._render_rgb_array()

        if self._window is None:
            from .window import SmashWindow
            self._window = SmashWindow(self)
        self._window.on_draw()
        return None

    def _render_rgb_array(self) -> np.ndarray:
        """Rasterize the track with numpy; rows grow downward like sim y"""
        c = self.config
        frame = np.empty((c.track_height, c.track_width, 3), dtype=np.uint8)
        frame[:] = BG_C

        for lane_x in (c.lane_left, c.lane_right):
            _fill(frame, Rect(lane_x, 0, c.target_size, c.track_height), TRACK_C)

        for t in self.sim.targets:
            if t.active:
                _fill(frame, t.hitbox, TARGET_C)
            else:
                _outline(frame, t.hitbox, BROKEN_C)

        if self.sim.strike_visible:
            _fill(frame, self.sim.actor.strike_region, STRIKE_C)

        ax, ay = self.sim.actor.position
        _fill(frame, Rect(ax - ACTOR_SIZE, ay - ACTOR_SIZE, 2 * ACTOR_SIZE, 2 * ACTOR_SIZE), ACTOR_C)
        return frame

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def _fill(frame: np.ndarray, r: Rect, color):
    h, w = frame.shape[:2]
    x0, x1 = max(int(r.x), 0), min(int(r.x + r.w), w)
    y0, y1 = max(int(r.y), 0), min(int(r.y + r.h), h)
    if x0 < x1 and y0 < y1:
        frame[y0:y1, x0:x1] = color


def _outline(frame: np.ndarray, r: Rect, color, width: int = 2):
    _fill(frame, Rect(r.x, r.y, r.w, width), color)
    _fill(frame, Rect(r.x, r.y + r.h - width, r.w, width), color)
    _fill(frame, Rect(r.x, r.y, width, r.h), color)
    _fill(frame, Rect(r.x + r.w - width, r.y, width, r.h), color)


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: int = 42) -> float:
    """Run a random episode for testing"""
    env = SmashEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to exit early.")

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.flip()
            time.sleep(1 / 60)

    print(f"Random episode return: {total:.2f} "
          f"({info['targets_struck']}/{env.config.target_count} targets, "
          f"{info['swings']} swings)")

    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
