"""
Home: the top-level container of rooms.
"""

import logging
import threading
from typing import TYPE_CHECKING, Dict, List, Optional

from smart_home.core.config import SmartHomeConfig
from smart_home.core.exceptions import DeviceNotFoundError, DuplicateRoomError
from smart_home.core.room import Room

if TYPE_CHECKING:
    from smart_home.devices import SmartDevice

logger = logging.getLogger(__name__)


class Home:
    """
    A named home made of rooms keyed by name.

    Rooms are kept in insertion order, so cross-room queries (find_device,
    get_all_devices) visit rooms in the order they were added. Device IDs
    only have to be unique within a room; if two rooms share an ID,
    find_device returns the one in the earlier room.

    ``lock`` is a re-entrant lock that callers sharing a Home across
    threads hold around device mutation. The controller's bulk operations
    and bound automation engines take it for the duration of their work.
    """

    def __init__(self, name: str, config: Optional[SmartHomeConfig] = None) -> None:
        """
        Initialize an empty home.

        Args:
            name: Home name
            config: Shared configuration (defaults are used if omitted)
        """
        self.name = name
        self.config = config or SmartHomeConfig()
        self.lock = threading.RLock()
        self._rooms: Dict[str, Room] = {}

    def add_room(self, room: Room, overwrite: Optional[bool] = None) -> None:
        """
        Add a room.

        Args:
            room: The room to add
            overwrite: Whether a room with the same name is replaced.
                None uses ``config.overwrite_rooms``.

        Raises:
            DuplicateRoomError: If the name is taken and overwriting is off
        """
        if overwrite is None:
            overwrite = self.config.overwrite_rooms

        if room.name in self._rooms:
            if not overwrite:
                raise DuplicateRoomError(room.name, self.name)
            logger.warning(f"Room '{room.name}' replaced in {self.name}")

        self._rooms[room.name] = room
        logger.info(f"Room '{room.name}' added to {self.name}")

    def remove_room(self, room_name: str) -> Optional[Room]:
        """
        Remove a room by name.

        Returns:
            The removed Room, or None if there was no such room
        """
        room = self._rooms.pop(room_name, None)
        if room is None:
            logger.warning(f"Room '{room_name}' not found in {self.name}")
            return None

        logger.info(f"Room '{room_name}' removed from {self.name}")
        return room

    def get_room(self, room_name: str) -> Optional[Room]:
        """Get a room by name, or None."""
        return self._rooms.get(room_name)

    def get_all_devices(self) -> List["SmartDevice"]:
        """
        Get every device in the home.

        Returns:
            Devices ordered by room insertion order, then by the room's own
            device order
        """
        devices: List["SmartDevice"] = []
        for room in self._rooms.values():
            devices.extend(room.devices)
        return devices

    def find_device(self, device_id: str) -> "SmartDevice":
        """
        Find a device by ID across all rooms.

        Raises:
            DeviceNotFoundError: If no room holds the device
        """
        for room in self._rooms.values():
            if room.has_device(device_id):
                return room.find_device_by_id(device_id)
        raise DeviceNotFoundError(device_id)

    def find_room_of(self, device_id: str) -> Optional[Room]:
        """Get the first room holding a device ID, or None."""
        for room in self._rooms.values():
            if room.has_device(device_id):
                return room
        return None

    def turn_off_everything(self) -> None:
        """Turn off every device in every room."""
        logger.info(f"Shutting down all devices in {self.name}")
        with self.lock:
            for room in self._rooms.values():
                room.turn_off_all_devices()

    @property
    def rooms(self) -> Dict[str, Room]:
        """Rooms by name (a new dict; the rooms are shared)."""
        return dict(self._rooms)

    @property
    def room_count(self) -> int:
        return len(self._rooms)

    def status_report(self) -> str:
        """Render the full status of every room and a summary."""
        sections = [f"{self.name.upper()} - FULL STATUS"]
        if not self._rooms:
            sections.append("  No rooms in this home")
        for room in self._rooms.values():
            sections.append(room.status_report())
        sections.append(f"Total Rooms: {self.room_count}")
        sections.append(f"Total Devices: {len(self.get_all_devices())}")
        return "\n".join(sections)

    def __repr__(self) -> str:
        return f"Home(name={self.name!r}, rooms={self.room_count})"
