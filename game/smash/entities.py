"""
Game entity dataclasses
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

from .config import SmashConfig
from .utils import Rect

logger = logging.getLogger(__name__)


@dataclass
class Target:
    """Smashable object; once inactive it stays inactive"""
    x: float
    y: float
    size: float = 64.0  # square hitbox edge
    active: bool = True

    @classmethod
    def spawn(cls, rng, config: SmashConfig) -> "Target":
        """Random y inside the spawn band, x on one of the two lanes"""
        y = rng.random() * config.spawn_range + config.spawn_offset
        x = config.lane_left if rng.random() < 0.5 else config.lane_right
        return cls(x=x, y=y, size=config.target_size)

    def deactivate(self):
        self.active = False

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    @property
    def hitbox(self) -> Rect:
        return Rect(self.x, self.y, self.size, self.size)


@dataclass
class Actor:
    """
    Player entity walking down the track.

    holding == 0.0 means idle; any other value is the accumulated charge and
    freezes the actor in place.
    """
    config: SmashConfig = field(default_factory=SmashConfig, repr=False)
    x: float = 0.0
    y: float = 0.0
    holding: float = 0.0
    strike_region: Rect = Rect(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def at_start(cls, config: SmashConfig) -> "Actor":
        actor = cls(config=config, x=config.start_x, y=config.start_y)
        actor.strike_region = actor._strike_region_at(actor.y)
        return actor

    def _strike_region_at(self, y: float) -> Rect:
        c = self.config
        return Rect(self.x, y + c.strike_offset_y, c.strike_width, c.strike_height)

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def advance(self, track_height: float):
        """Walk one tick down the track, wrapping to the top; frozen while holding"""
        if self.holding != 0.0:
            return
        self.y = (self.y + self.config.walking_speed) % track_height
        self.strike_region = self._strike_region_at(self.y)

    def begin_or_extend_hold(self):
        """Seed the charge, or add one step of charge; overcharging auto-releases"""
        if self.holding == 0.0:
            self.holding = self.config.hold_seed
            return
        self.holding += self.config.charge_rate
        if self.holding > self.config.hold_max:
            logger.debug("Hold overcharged at %.2f, auto-releasing", self.holding)
            self.end_hold()

    def end_hold(self):
        self.holding = 0.0

    def is_strike_armed(self) -> bool:
        return self.holding > self.config.hold_min
