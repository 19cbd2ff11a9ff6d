"""
Tests for Target and Actor entities.
"""
import random

import pytest
from game.smash.config import SmashConfig
from game.smash.entities import Actor, Target
from game.smash.utils import Rect


class SequenceRng:
    """Random source returning a fixed sequence of floats."""

    def __init__(self, values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


def charge(actor, calls):
    for _ in range(calls):
        actor.begin_or_extend_hold()


class TestTarget:
    """Tests for Target spawning and lifecycle."""

    def test_spawn_left_lane(self):
        """Low lane draw picks the left lane; y is offset plus scaled fraction."""
        config = SmashConfig()
        t = Target.spawn(SequenceRng([0.5, 0.2]), config)

        assert t.x == config.lane_left
        assert t.y == pytest.approx(0.5 * config.spawn_range + config.spawn_offset)
        assert t.active

    def test_spawn_right_lane(self):
        """High lane draw picks the right lane."""
        config = SmashConfig()
        t = Target.spawn(SequenceRng([0.0, 0.7]), config)

        assert t.x == config.lane_right
        assert t.y == config.spawn_offset

    def test_spawn_stays_in_band(self):
        """Seeded spawns only ever land on a lane and inside the spawn band."""
        config = SmashConfig()
        rng = random.Random(1234)

        for _ in range(200):
            t = Target.spawn(rng, config)
            assert t.x in (config.lane_left, config.lane_right)
            assert config.spawn_offset <= t.y < config.spawn_offset + config.spawn_range

    def test_spawn_uses_both_lanes(self):
        """Lane choice is binary but both lanes show up."""
        config = SmashConfig()
        rng = random.Random(5)
        lanes = {Target.spawn(rng, config).x for _ in range(50)}
        assert lanes == {config.lane_left, config.lane_right}

    def test_deactivate(self):
        """Deactivation is terminal."""
        t = Target(x=135.0, y=200.0)
        t.deactivate()
        assert not t.active

    def test_deactivate_idempotent(self):
        """Deactivating twice is a silent no-op."""
        t = Target(x=135.0, y=200.0)
        t.deactivate()
        t.deactivate()
        assert not t.active

    def test_hitbox_is_square(self):
        """Hitbox uses the same edge length on both axes."""
        t = Target(x=10.0, y=20.0, size=64.0)
        assert t.hitbox == Rect(10.0, 20.0, 64.0, 64.0)
        assert t.position == (10.0, 20.0)


class TestActorMotion:
    """Tests for walking along the track."""

    def test_initial_state(self):
        """Actor starts at its configured position with the strike region below it."""
        config = SmashConfig()
        actor = Actor.at_start(config)

        assert actor.position == (config.start_x, config.start_y)
        assert actor.holding == 0.0
        assert actor.strike_region == Rect(
            config.start_x,
            config.start_y + config.strike_offset_y,
            config.strike_width,
            config.strike_height,
        )

    def test_advance_moves_by_walking_speed(self):
        """Each idle tick moves the actor down by exactly the walking speed."""
        config = SmashConfig()
        actor = Actor.at_start(config)

        for i in range(1, 11):
            actor.advance(config.track_height)
            assert actor.y == pytest.approx(config.start_y + i * config.walking_speed)

    def test_advance_wraps_with_modulo(self):
        """699 + 2 on a 700 track wraps to 1, not clamped to 700."""
        config = SmashConfig(walking_speed=2.0, track_height=700)
        actor = Actor.at_start(config)
        actor.y = 699.0

        actor.advance(700)

        assert actor.y == pytest.approx(1.0)
        assert actor.strike_region.y == pytest.approx(1.0 + config.strike_offset_y)

    def test_strike_region_tracks_actor(self):
        """Strike region keeps its fixed vertical offset while walking."""
        config = SmashConfig()
        actor = Actor.at_start(config)

        for _ in range(37):
            actor.advance(config.track_height)

        assert actor.strike_region.y == pytest.approx(actor.y + config.strike_offset_y)
        assert actor.strike_region.x == actor.x

    def test_holding_suspends_motion(self):
        """Actor does not advance while holding."""
        config = SmashConfig()
        actor = Actor.at_start(config)
        actor.begin_or_extend_hold()
        before = (actor.position, actor.strike_region)

        for _ in range(5):
            actor.advance(config.track_height)

        assert (actor.position, actor.strike_region) == before


class TestActorHold:
    """Tests for the hold/charge state machine."""

    def test_first_hold_seeds_charge(self):
        """Starting a hold sets the seed value, not zero."""
        config = SmashConfig()
        actor = Actor.at_start(config)
        actor.begin_or_extend_hold()
        assert actor.holding == config.hold_seed

    def test_extend_adds_charge_rate(self):
        """Repeated holds add the charge rate."""
        config = SmashConfig()
        actor = Actor.at_start(config)
        charge(actor, 3)
        assert actor.holding == pytest.approx(config.hold_seed + 2 * config.charge_rate)

    def test_charge_monotonic_until_auto_release(self):
        """Charge grows by the rate each call, then resets once past the max."""
        config = SmashConfig()
        actor = Actor.at_start(config)

        values = []
        for _ in range(100):
            actor.begin_or_extend_hold()
            if actor.holding == 0.0:
                break
            values.append(actor.holding)
        else:
            pytest.fail("hold never auto-released")

        assert values[0] == config.hold_seed
        for prev, cur in zip(values, values[1:]):
            assert cur - prev == pytest.approx(config.charge_rate)
        assert values[-1] <= config.hold_max
        assert values[-1] + config.charge_rate > config.hold_max

    def test_auto_release_call_count(self):
        """With defaults the 21st call overshoots 6.0 and releases."""
        actor = Actor.at_start(SmashConfig())
        charge(actor, 20)
        assert actor.holding == pytest.approx(5.8)
        actor.begin_or_extend_hold()
        assert actor.holding == 0.0

    def test_hold_restarts_after_auto_release(self):
        """Holding on after an auto-release seeds a fresh charge."""
        config = SmashConfig()
        actor = Actor.at_start(config)
        charge(actor, 21)
        actor.begin_or_extend_hold()
        assert actor.holding == config.hold_seed

    def test_end_hold(self):
        """Ending a hold resets charge to zero."""
        actor = Actor.at_start(SmashConfig())
        charge(actor, 5)
        actor.end_hold()
        assert actor.holding == 0.0

    def test_end_hold_idempotent(self):
        """Ending a hold that was never started is harmless."""
        actor = Actor.at_start(SmashConfig())
        actor.end_hold()
        actor.end_hold()
        assert actor.holding == 0.0

    @pytest.mark.parametrize("holding,armed", [
        (0.0, False),
        (0.1, False),
        (2.0, False),
        (4.0, False),
        (4.0001, True),
        (5.8, True),
    ])
    def test_is_strike_armed_threshold(self, holding, armed):
        """Armed strictly above the minimum threshold."""
        actor = Actor.at_start(SmashConfig())
        actor.holding = holding
        assert actor.is_strike_armed() is armed

    def test_armed_after_enough_charge(self):
        """Fifteen calls (0.1 + 14 * 0.3 = 4.3) arm the strike."""
        actor = Actor.at_start(SmashConfig())
        charge(actor, 15)
        assert actor.is_strike_armed()
