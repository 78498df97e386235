"""
SmartDevice base class and helpers shared by all device variants.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Tuple

from smart_home.core.capabilities import Capability
from smart_home.core.exceptions import InvalidDeviceStateError

logger = logging.getLogger(__name__)


class DeviceType(Enum):
    """Device variant tags. Values are the names used for type filtering."""

    LIGHT = "Light"
    THERMOSTAT = "Thermostat"
    SMART_TV = "SmartTV"
    MOTION_SENSOR = "MotionSensor"

    @classmethod
    def from_name(cls, name: str) -> Optional["DeviceType"]:
        """
        Look up a device type by tag, ignoring case.

        Returns:
            The matching DeviceType or None
        """
        for device_type in cls:
            if device_type.value.lower() == name.strip().lower():
                return device_type
        return None


class SmartDevice(ABC):
    """
    A controllable unit of state in the home.

    Attributes:
        device_id: Unique, immutable identifier
        name: Human-readable name
        is_on: Power state (devices start off)

    Subclasses declare ``device_type`` and the set of ``capabilities`` they
    satisfy. Every state change is reported on the device's logger.
    """

    device_type: ClassVar[DeviceType]
    capabilities: ClassVar[FrozenSet[Capability]] = frozenset()

    def __init__(self, device_id: str, name: str) -> None:
        if not device_id:
            raise ValueError("device_id must be a non-empty string")
        self._device_id = device_id
        self.name = name
        self.is_on = False

    @property
    def device_id(self) -> str:
        return self._device_id

    def has_capability(self, capability: Capability) -> bool:
        """Check whether this device declares a capability."""
        return capability in self.capabilities

    @abstractmethod
    def turn_on(self) -> None:
        """Turn the device on."""
        pass

    @abstractmethod
    def turn_off(self) -> None:
        """Turn the device off."""
        pass

    @abstractmethod
    def get_status(self) -> str:
        """Get a one-line, human-readable status."""
        pass

    def snapshot(self) -> Dict[str, Any]:
        """
        Get the device state as a dict.

        Subclasses extend this with their own fields.
        """
        return {
            "device_id": self.device_id,
            "name": self.name,
            "type": self.device_type.value,
            "is_on": self.is_on,
        }

    def _report(self, message: str) -> None:
        """Emit a status line for this device."""
        logger.info(f"{self.name}: {message}")

    def _invalid(self, message: str) -> InvalidDeviceStateError:
        return InvalidDeviceStateError(self.device_id, message)

    def _unknown_command(self, command: str) -> bool:
        logger.info(f"{self.name}: unknown command '{command}'")
        return False

    def _int_argument(self, token: str, args: List[str]) -> Optional[int]:
        """
        Parse the integer argument of a command.

        Returns:
            The parsed value, or None (with a warning) if it is missing

        Raises:
            InvalidDeviceStateError: If the argument is not an integer
        """
        if not args:
            logger.warning(f"{self.name}: command '{token}' needs an argument")
            return None
        try:
            return int(args[0])
        except ValueError:
            raise self._invalid(f"'{token}' expects an integer, got '{args[0]}'") from None

    def __str__(self) -> str:
        return f"[{self.device_id}] {self.name} - {'ON' if self.is_on else 'OFF'}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(device_id={self.device_id!r}, name={self.name!r})"


def split_command(command: str) -> Tuple[str, List[str]]:
    """
    Split a command string into a lower-cased token and its arguments.

    Example:
        split_command("Channel 42") -> ("channel", ["42"])
    """
    parts = command.split()
    if not parts:
        return "", []
    return parts[0].lower(), parts[1:]
