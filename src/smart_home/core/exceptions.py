"""
Error taxonomy for the smart-home core.

Lookup misses and duplicate additions are recoverable and reported to the
caller. Invalid device states are programming errors and are raised as soon
as they are detected.
"""

from typing import Optional


class SmartHomeError(Exception):
    """Base class for all smart-home errors."""


class DeviceNotFoundError(SmartHomeError):
    """Raised when a device lookup misses in a Room, Home, or Controller."""

    def __init__(self, device_id: str, scope: Optional[str] = None) -> None:
        self.device_id = device_id
        self.scope = scope
        where = f"in {scope}" if scope else "in any room"
        super().__init__(f"Device {device_id} not found {where}")


class DuplicateDeviceError(SmartHomeError):
    """Raised when a Room already holds a device with the same ID."""

    def __init__(self, device_id: str, room_name: str) -> None:
        self.device_id = device_id
        self.room_name = room_name
        super().__init__(f"Device with ID {device_id} already exists in {room_name}")


class DuplicateRoomError(SmartHomeError):
    """Raised when a Home refuses to overwrite a room with the same name."""

    def __init__(self, room_name: str, home_name: str) -> None:
        self.room_name = room_name
        self.home_name = home_name
        super().__init__(f"Room '{room_name}' already exists in {home_name}")


class InvalidDeviceStateError(SmartHomeError, ValueError):
    """
    Raised when an operation violates a device invariant.

    Examples: out-of-range brightness or temperature, or changing the
    channel of a TV that is switched off.
    """

    def __init__(self, device_id: str, message: str) -> None:
        self.device_id = device_id
        super().__init__(f"[{device_id}] {message}")
