"""
Room: an ordered collection of devices keyed by device ID.
"""

import logging
from typing import TYPE_CHECKING, Dict, List

from smart_home.core.exceptions import DeviceNotFoundError, DuplicateDeviceError

if TYPE_CHECKING:
    from smart_home.devices import DeviceType, SmartDevice

logger = logging.getLogger(__name__)


class Room:
    """
    A named room holding devices.

    Responsibilities:
    - Keep devices in insertion order
    - Enforce device ID uniqueness within the room
    - Apply power changes to every device it holds

    Devices are shared with the caller: lookups return the stored instance.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize an empty room.

        Args:
            name: Room name, unique within a Home
        """
        self.name = name
        self._devices: Dict[str, "SmartDevice"] = {}

    def add_device(self, device: "SmartDevice") -> None:
        """
        Add a device to the room.

        Args:
            device: The device to add

        Raises:
            DuplicateDeviceError: If a device with the same ID is already here
        """
        if device.device_id in self._devices:
            raise DuplicateDeviceError(device.device_id, self.name)

        self._devices[device.device_id] = device
        logger.info(f"Added {device.name} ({device.device_id}) to {self.name}")

    def remove_device(self, device_id: str) -> "SmartDevice":
        """
        Remove a device from the room.

        Args:
            device_id: The device ID

        Returns:
            The removed device

        Raises:
            DeviceNotFoundError: If the device is not in this room
        """
        device = self._devices.pop(device_id, None)
        if device is None:
            raise DeviceNotFoundError(device_id, self.name)

        logger.info(f"Removed {device.name} ({device_id}) from {self.name}")
        return device

    def find_device_by_id(self, device_id: str) -> "SmartDevice":
        """
        Find a device by ID.

        Raises:
            DeviceNotFoundError: If the device is not in this room
        """
        device = self._devices.get(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id, self.name)
        return device

    def has_device(self, device_id: str) -> bool:
        return device_id in self._devices

    def get_devices_by_type(self, device_type: "DeviceType") -> List["SmartDevice"]:
        """Get all devices of one variant, in insertion order."""
        return [d for d in self._devices.values() if d.device_type == device_type]

    def turn_on_all_devices(self) -> None:
        """Turn on every device, whatever its current state."""
        for device in self._devices.values():
            device.turn_on()
        logger.info(f"All devices in {self.name} turned on")

    def turn_off_all_devices(self) -> None:
        """Turn off every device, whatever its current state."""
        for device in self._devices.values():
            device.turn_off()
        logger.info(f"All devices in {self.name} turned off")

    @property
    def devices(self) -> List["SmartDevice"]:
        """Devices in insertion order (a new list; the devices are shared)."""
        return list(self._devices.values())

    @property
    def device_count(self) -> int:
        return len(self._devices)

    def status_report(self) -> str:
        """Render the room header and one status line per device."""
        lines = [f"== {self.name.upper()} =="]
        if not self._devices:
            lines.append("  No devices in this room")
        for device in self._devices.values():
            lines.append(f"  • {device.get_status()}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Room(name={self.name!r}, devices={self.device_count})"
