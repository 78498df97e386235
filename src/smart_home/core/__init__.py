"""
Core components of the smart-home library.

This package contains:
- exceptions: error taxonomy
- capabilities: capability tags and contracts
- config: SmartHomeConfig
- room / home: device containers
- controller: CentralController façade
"""

from smart_home.core.exceptions import (
    SmartHomeError,
    DeviceNotFoundError,
    DuplicateDeviceError,
    DuplicateRoomError,
    InvalidDeviceStateError,
)
from smart_home.core.capabilities import (
    Capability,
    Controllable,
    EnergyConsumer,
    Schedulable,
)
from smart_home.core.config import SmartHomeConfig
from smart_home.core.room import Room
from smart_home.core.home import Home
from smart_home.core.controller import CentralController

__all__ = [
    "SmartHomeError",
    "DeviceNotFoundError",
    "DuplicateDeviceError",
    "DuplicateRoomError",
    "InvalidDeviceStateError",
    "Capability",
    "Controllable",
    "EnergyConsumer",
    "Schedulable",
    "SmartHomeConfig",
    "Room",
    "Home",
    "CentralController",
]
