"""
Simulation configuration
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, asdict
from typing import Any, Dict


class ConfigError(ValueError):
    """Raised when a SmashConfig cannot describe a playable simulation"""


@dataclass(frozen=True)
class SmashConfig:
    """All tunables of the smash simulation, in track pixels and ticks"""

    # Track
    track_width: int = 400
    track_height: int = 700

    # Actor
    start_x: float = 195.0
    start_y: float = 20.0
    walking_speed: float = 2.0  # px per tick

    # Strike region (below the actor)
    strike_width: float = 128.0
    strike_height: float = 32.0
    strike_offset_y: float = 32.0

    # Hold charge
    hold_seed: float = 0.1
    charge_rate: float = 0.3  # per tick while held
    hold_min: float = 4.0  # armed strictly above this
    hold_max: float = 6.0  # auto-release strictly above this

    # Targets
    lane_left: float = 135.0
    lane_right: float = 255.0
    spawn_offset: float = 100.0
    spawn_range: float = 550.0
    target_count: int = 13
    target_size: float = 64.0  # square hitbox edge

    def validate(self) -> "SmashConfig":
        """Raise ConfigError on degenerate values, return self otherwise"""
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ConfigError(f"{f.name} must be finite, got {value}")
        if self.target_count < 1:
            raise ConfigError(f"target_count must be >= 1, got {self.target_count}")
        if self.track_width <= 0 or self.track_height <= 0:
            raise ConfigError(
                f"track must have positive size, got {self.track_width}x{self.track_height}"
            )
        if not 0 <= self.start_x <= self.track_width:
            raise ConfigError(
                f"start_x ({self.start_x}) must lie within the track width ({self.track_width})"
            )
        if not 0 <= self.start_y < self.track_height:
            raise ConfigError(
                f"start_y ({self.start_y}) must lie within the track height ({self.track_height})"
            )
        if self.walking_speed < 0:
            raise ConfigError(f"walking_speed must be >= 0, got {self.walking_speed}")
        for name in ("strike_width", "strike_height", "target_size"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be > 0, got {getattr(self, name)}")
        if self.hold_seed <= 0 or self.charge_rate <= 0:
            raise ConfigError("hold_seed and charge_rate must be > 0")
        if self.hold_min >= self.hold_max:
            raise ConfigError(
                f"hold_min ({self.hold_min}) must be below hold_max ({self.hold_max})"
            )
        if self.hold_seed > self.hold_max:
            raise ConfigError(
                f"hold_seed ({self.hold_seed}) exceeds hold_max ({self.hold_max})"
            )
        if self.spawn_range <= 0:
            raise ConfigError(f"spawn_range must be > 0, got {self.spawn_range}")
        if self.lane_left == self.lane_right:
            raise ConfigError("lane_left and lane_right must differ")
        return self

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "SmashConfig":
        """Build a validated config from a plain dict (e.g. ENV_CONFIG)"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**values).validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
