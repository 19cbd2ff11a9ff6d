"""
Smash simulation - the actor, its targets and the strike resolution.

The surrounding shell (gym env, arcade window) drives it with:
    tick()                              once per frame
    set_hold_input(bool)                 frame-driven hold input, charges in tick()
    on_hold_input_start_or_continue()    charge once, on the shell's own cadence
    on_hold_input_end()                  release; strikes if the charge was armed

and reads actor / targets / strike_visible / snapshot() to render.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

from .config import ConfigError, SmashConfig
from .entities import Actor, Target
from .utils import make_rng, rects_overlap

logger = logging.getLogger(__name__)


class Simulation:
    """Owns one Actor and a fixed, insertion-ordered list of Targets"""

    def __init__(self, config: Optional[SmashConfig] = None, rng=None,
                 targets: Optional[List[Target]] = None):
        self.config = (config or SmashConfig()).validate()
        self.rng = rng if rng is not None else make_rng()

        self.actor = Actor.at_start(self.config)
        if targets is None:
            targets = [
                Target.spawn(self.rng, self.config) for _ in range(self.config.target_count)
            ]
        self.targets: List[Target] = targets

        self.hold_asserted = False

        # Informational counters for shells
        self.tick_count = 0
        self.swings = 0
        self.targets_struck = 0

        logger.info(
            "Simulation created: %d targets on a %dx%d track",
            len(self.targets), self.config.track_width, self.config.track_height,
        )

    @classmethod
    def from_targets(cls, targets: Iterable[Target],
                     config: Optional[SmashConfig] = None) -> "Simulation":
        """Simulation with a hand-placed target layout"""
        targets = list(targets)
        base = config or SmashConfig()
        if len(targets) != base.target_count:
            base = replace(base, target_count=len(targets))
        mismatched = [t for t in targets if t.size != base.target_size]
        if mismatched:
            raise ConfigError(
                f"{len(mismatched)} target(s) have a hitbox other than "
                f"target_size={base.target_size}"
            )
        return cls(config=base, targets=targets)

    # ----------------------------
    # Shell -> core
    # ----------------------------

    def tick(self):
        """Advance one simulation step; never resolves collisions"""
        if self.hold_asserted:
            self.actor.begin_or_extend_hold()
        self.actor.advance(self.config.track_height)
        self.tick_count += 1

    def on_hold_input_start_or_continue(self):
        self.actor.begin_or_extend_hold()

    def on_hold_input_end(self) -> List[Target]:
        """Release the hold. Returns the targets struck by this release."""
        struck: List[Target] = []
        if self.actor.is_strike_armed():
            self.swings += 1
            struck = self.resolve_collisions()
            logger.debug(
                "Swing at y=%.1f charge=%.2f struck %d target(s)",
                self.actor.strike_region.y, self.actor.holding, len(struck),
            )
        self.actor.end_hold()
        self.hold_asserted = False
        return struck

    def set_hold_input(self, asserted: bool) -> List[Target]:
        """Edge-triggered hold input; releasing resolves the swing"""
        if asserted and not self.hold_asserted:
            self.hold_asserted = True
        elif not asserted and self.hold_asserted:
            return self.on_hold_input_end()
        return []

    def resolve_collisions(self) -> List[Target]:
        """Deactivate every active target overlapping the strike region"""
        region = self.actor.strike_region
        struck = []
        for t in self.targets:
            if not t.active:
                continue
            if rects_overlap(region, t.hitbox):
                t.deactivate()
                struck.append(t)
        self.targets_struck += len(struck)
        return struck

    # ----------------------------
    # Core -> shell (read-only)
    # ----------------------------

    @property
    def strike_visible(self) -> bool:
        return self.actor.is_strike_armed()

    @property
    def active_targets(self) -> List[Target]:
        return [t for t in self.targets if t.active]

    @property
    def all_struck(self) -> bool:
        return not any(t.active for t in self.targets)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "actor": self.actor.position,
            "strike_region": tuple(self.actor.strike_region),
            "strike_visible": self.strike_visible,
            "holding": self.actor.holding,
            "targets": [(t.x, t.y, t.active) for t in self.targets],
            "active_targets": len(self.active_targets),
            "targets_struck": self.targets_struck,
            "swings": self.swings,
            "tick": self.tick_count,
        }
