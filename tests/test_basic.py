"""
Basic smoke tests for smart-home core components.
"""

import pytest

from smart_home import (
    AutomationEngine,
    AutomationRule,
    CentralController,
    Home,
    Light,
    Room,
    SmartHomeConfig,
    SmartHomeError,
    DeviceNotFoundError,
    DuplicateDeviceError,
    InvalidDeviceStateError,
)


def test_error_hierarchy():
    """Test that every error shares the base class."""
    for error_cls in (DeviceNotFoundError, DuplicateDeviceError, InvalidDeviceStateError):
        assert issubclass(error_cls, SmartHomeError)
    assert issubclass(InvalidDeviceStateError, ValueError)


def test_error_messages():
    """Test that errors carry their identifiers."""
    error = DeviceNotFoundError("L9")
    assert error.device_id == "L9"
    assert "L9" in str(error)
    assert "any room" in str(error)


def test_device_identity():
    """Test device ID, name and string form."""
    light = Light("L1", "Lamp")
    assert light.device_id == "L1"
    assert str(light) == "[L1] Lamp - OFF"
    with pytest.raises(AttributeError):
        light.device_id = "L2"
    with pytest.raises(ValueError):
        Light("", "No ID")


def test_wiring():
    """Test that the pieces compose."""
    home = Home("Demo")
    room = Room("Kitchen")
    room.add_device(Light("L1", "Kitchen Light"))
    home.add_room(room)

    controller = CentralController(home)
    engine = AutomationEngine(home)
    engine.add_rule(AutomationRule(name="noop", conditions=[], actions=[]))

    assert controller.turn_on_all_lights() == 1
    assert engine.evaluate_rules().rules_triggered == 1


class TestConfig:
    """Tests for SmartHomeConfig."""

    def test_defaults(self):
        """Test default values."""
        config = SmartHomeConfig()
        assert config.energy_saving_brightness == 30
        assert config.history_size == 100
        assert config.overwrite_rooms is True

    def test_round_trip(self):
        """Test dict serialization."""
        config = SmartHomeConfig(energy_saving_brightness=20, overwrite_rooms=False)
        assert SmartHomeConfig.from_dict(config.to_dict()) == config

    def test_from_partial_dict(self):
        """Test that missing keys use defaults."""
        config = SmartHomeConfig.from_dict({"history_size": 5})
        assert config.history_size == 5
        assert config.energy_saving_brightness == 30

    @pytest.mark.parametrize(
        "data",
        [
            {"energy_saving_brightness": 0},
            {"energy_saving_brightness": 101},
            {"history_size": 0},
            {"version": 99},
        ],
    )
    def test_invalid(self, data):
        """Test validation."""
        with pytest.raises(ValueError):
            SmartHomeConfig.from_dict(data)
