"""
Device variants for the smart-home core.

Each variant is a SmartDevice that declares its DeviceType tag and the
capabilities it satisfies:

    Light         controllable, energy consumer
    Thermostat    controllable, energy consumer, schedulable
    SmartTV       controllable, energy consumer
    MotionSensor  controllable
"""

from .base import DeviceType, SmartDevice, split_command
from .light import Light
from .thermostat import Thermostat
from .tv import SmartTV
from .motion_sensor import MotionSensor

__all__ = [
    "DeviceType",
    "SmartDevice",
    "split_command",
    "Light",
    "Thermostat",
    "SmartTV",
    "MotionSensor",
]
