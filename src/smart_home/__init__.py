"""
smart-home: an in-memory smart-home automation core.

This library provides:
- Device variants (lights, thermostats, TVs, motion sensors) with
  declared capabilities
- Room and Home containers for lookup and aggregation
- A central controller for home-wide commands
- A rule engine that evaluates condition/action pairs in explicit passes
"""

from smart_home.core import (
    SmartHomeError,
    DeviceNotFoundError,
    DuplicateDeviceError,
    DuplicateRoomError,
    InvalidDeviceStateError,
    Capability,
    SmartHomeConfig,
    Room,
    Home,
    CentralController,
)
from smart_home.devices import (
    DeviceType,
    SmartDevice,
    Light,
    Thermostat,
    SmartTV,
    MotionSensor,
)
from smart_home.automation import AutomationEngine, AutomationRule

__version__ = "0.1.0"

__all__ = [
    "SmartHomeError",
    "DeviceNotFoundError",
    "DuplicateDeviceError",
    "DuplicateRoomError",
    "InvalidDeviceStateError",
    "Capability",
    "SmartHomeConfig",
    "Room",
    "Home",
    "CentralController",
    "DeviceType",
    "SmartDevice",
    "Light",
    "Thermostat",
    "SmartTV",
    "MotionSensor",
    "AutomationEngine",
    "AutomationRule",
]
