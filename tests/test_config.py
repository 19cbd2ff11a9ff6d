"""
Tests for SmashConfig validation.
"""
import pytest
from game.smash.config import SmashConfig, ConfigError
from game.smash.simulation import Simulation


class TestSmashConfig:
    """Tests for configuration defaults and validation."""

    def test_defaults_are_valid(self):
        """Default config validates and matches the classic layout."""
        config = SmashConfig().validate()
        assert config.track_width == 400
        assert config.track_height == 700
        assert config.target_count == 13
        assert (config.lane_left, config.lane_right) == (135.0, 255.0)

    @pytest.mark.parametrize("overrides", [
        {"target_count": 0},
        {"track_height": 0},
        {"track_width": -1},
        {"walking_speed": -2.0},
        {"strike_width": 0.0},
        {"strike_height": -1.0},
        {"target_size": 0.0},
        {"hold_seed": 0.0},
        {"charge_rate": 0.0},
        {"hold_min": 6.0, "hold_max": 6.0},
        {"hold_min": 7.0},
        {"hold_seed": 7.0, "hold_min": 1.0, "hold_max": 6.0},
        {"spawn_range": 0.0},
        {"lane_left": 200.0, "lane_right": 200.0},
        {"start_y": 900.0},
        {"start_y": 700.0},
        {"start_y": -1.0},
        {"start_x": -5.0},
        {"start_x": 401.0},
        {"hold_min": float("nan")},
        {"charge_rate": float("nan")},
        {"walking_speed": float("inf")},
    ])
    def test_rejects_degenerate_values(self, overrides):
        """Degenerate values are rejected at validation time."""
        with pytest.raises(ConfigError):
            SmashConfig(**overrides).validate()

    def test_config_error_is_value_error(self):
        """ConfigError can be caught as ValueError."""
        with pytest.raises(ValueError):
            SmashConfig(target_count=0).validate()

    def test_from_dict(self):
        """Plain dicts build validated configs."""
        config = SmashConfig.from_dict({"target_count": 3, "walking_speed": 4.0})
        assert config.target_count == 3
        assert config.walking_speed == 4.0

    def test_from_dict_unknown_key(self):
        """Unknown keys are reported, not ignored."""
        with pytest.raises(ConfigError, match="bogus"):
            SmashConfig.from_dict({"bogus": 1})

    def test_round_trip_dict(self):
        """to_dict feeds back into from_dict unchanged."""
        config = SmashConfig(target_count=5)
        assert SmashConfig.from_dict(config.to_dict()) == config

    def test_simulation_rejects_bad_config(self):
        """Simulation construction validates its config."""
        with pytest.raises(ConfigError):
            Simulation(config=SmashConfig(target_count=0))
