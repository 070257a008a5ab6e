"""
Unit tests for configuration parsing.
"""

import pytest

from twm.config import Config, LayoutConfig
from twm.errors import ConfigError
from twm.layouts import MiddleLayout, SidedLayout, SidedTilePolicy
from twm.util import Direction


@pytest.mark.unit
class TestConfig:
    """Test building a Config from a parsed mapping."""

    def test_defaults(self):
        config = Config()

        assert config.keys == []
        assert config.taskbar.show is True
        assert config.layout.name == "sided"
        assert config.layout.side == Direction.LEFT
        assert config.layout.sided_tile == SidedTilePolicy.HIGHEST_ID

    def test_empty_mapping(self):
        assert Config.from_dict({}) == Config()
        assert Config.from_dict(None) == Config()

    def test_full_mapping(self):
        config = Config.from_dict(
            {
                "keys": [{"name": "new_workspace", "value": "ctrl+alt+enter"}],
                "taskbar": {"show": False},
                "layout": {"name": "sided", "side": "up", "sided_tile": "focused"},
                "debug_events": True,
            }
        )

        assert config.keys[0].name == "new_workspace"
        assert config.keys[0].value == "ctrl+alt+enter"
        assert config.taskbar.show is False
        assert config.layout.side == Direction.UP
        assert config.layout.sided_tile == SidedTilePolicy.FOCUSED
        assert config.debug_enabled

    def test_round_trip(self):
        data = {
            "keys": [{"name": "refresh", "value": "ctrl+r"}],
            "taskbar": {"show": False},
            "layout": {"name": "middle", "side": "Left", "sided_tile": "highest_id"},
            "debug_events": False,
        }

        assert Config.from_dict(data).to_dict() == data

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            Config.from_dict(["taskbar"])

    def test_unknown_key(self):
        with pytest.raises(ConfigError):
            Config.from_dict({"taskbar": {"visible": True}})

    @pytest.mark.parametrize(
        "data",
        [
            {"taskbar": {"show": "false"}},
            {"taskbar": {"show": 0}},
            {"debug_events": "false"},
            {"debug_events": None},
        ],
    )
    def test_flags_must_be_bool(self, data):
        with pytest.raises(ConfigError):
            Config.from_dict(data)

    def test_invalid_side(self):
        with pytest.raises(ConfigError):
            Config.from_dict({"layout": {"side": "sideways"}})

    def test_unknown_layout(self):
        with pytest.raises(ConfigError):
            LayoutConfig(name="spiral")

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            LayoutConfig(sided_tile="random")

    def test_debug_from_environment(self, monkeypatch):
        monkeypatch.setenv("TWM_DEBUG", "1")

        assert Config().debug_enabled

    def test_debug_disabled(self, monkeypatch):
        monkeypatch.delenv("TWM_DEBUG", raising=False)

        assert not Config().debug_enabled


@pytest.mark.unit
class TestLayoutConfig:
    """Test creating layouts from configuration."""

    def test_create_sided(self):
        layout = LayoutConfig(side="right", sided_tile="focused").create()

        assert isinstance(layout, SidedLayout)
        assert layout.side == Direction.RIGHT
        assert layout.policy == SidedTilePolicy.FOCUSED
        assert layout.is_dirty()

    def test_create_middle(self):
        assert isinstance(LayoutConfig(name="middle").create(), MiddleLayout)

    def test_create_returns_fresh_instances(self):
        config = LayoutConfig()

        assert config.create() is not config.create()
