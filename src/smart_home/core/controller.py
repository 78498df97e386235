"""
CentralController: home-wide operations over a single Home.
"""

import logging
from typing import List, Optional, cast

from smart_home.core.capabilities import Capability, Controllable, EnergyConsumer
from smart_home.core.config import SmartHomeConfig
from smart_home.core.home import Home
from smart_home.devices import DeviceType, Light, SmartDevice

logger = logging.getLogger(__name__)


class CentralController:
    """
    Stateless façade over a Home.

    Responsibilities:
    - Bulk power operations (all lights on, everything off)
    - Aggregate queries (total energy, devices by type, lookup by ID)
    - Broadcasting command tokens to controllable devices
    - Energy-saving mode

    Devices are selected by their declared DeviceType tag and capabilities,
    never by class identity.
    """

    def __init__(self, home: Home, config: Optional[SmartHomeConfig] = None) -> None:
        """
        Initialize the controller.

        Args:
            home: The home to control
            config: Configuration; defaults to the home's config
        """
        self.home = home
        self.config = config or home.config
        logger.info(f"Central controller initialized for {home.name}")

    def show_all_status(self) -> str:
        """Get the status report of every room and device."""
        return self.home.status_report()

    def turn_on_all_lights(self) -> int:
        """
        Turn on every light in the home.

        Returns:
            Number of lights turned on
        """
        count = 0
        with self.home.lock:
            for device in self.home.get_all_devices():
                if device.device_type == DeviceType.LIGHT:
                    device.turn_on()
                    count += 1

        logger.info(f"{count} light(s) turned on")
        return count

    def turn_off_all_devices(self) -> None:
        self.home.turn_off_everything()

    def get_total_energy_consumption(self) -> float:
        """
        Sum the power draw of every energy-consuming device.

        Returns:
            Total consumption in watts
        """
        total = 0.0
        for device in self.home.get_all_devices():
            if device.has_capability(Capability.ENERGY_CONSUMER):
                total += cast(EnergyConsumer, device).get_energy_consumption()
        return total

    def find_device(self, device_id: str) -> SmartDevice:
        """
        Find a device anywhere in the home.

        Raises:
            DeviceNotFoundError: If the device does not exist
        """
        return self.home.find_device(device_id)

    def list_devices_by_type(self, type_name: str) -> List[SmartDevice]:
        """
        List devices whose type tag matches a name.

        Args:
            type_name: Tag such as "Light" or "smarttv" (case-insensitive)

        Returns:
            Matching devices in home order (empty if the name is unknown)
        """
        device_type = DeviceType.from_name(type_name)
        if device_type is None:
            logger.info(f"No device type named '{type_name}'")
            return []
        return [d for d in self.home.get_all_devices() if d.device_type == device_type]

    def execute_global_command(self, command: str) -> int:
        """
        Send a command token to every controllable device.

        Each device decides whether it recognizes the token.

        Returns:
            Number of devices that recognized the command

        Raises:
            InvalidDeviceStateError: If a device recognizes the command but
                cannot perform it in its current state
        """
        logger.info(f"Executing global command: {command}")
        recognized = 0
        with self.home.lock:
            for device in self.home.get_all_devices():
                if device.has_capability(Capability.CONTROLLABLE):
                    if cast(Controllable, device).execute_command(command):
                        recognized += 1
        return recognized

    def energy_saving_mode(self) -> None:
        """
        Cut power use across the home.

        Lights that are on have their brightness forced down to
        ``config.energy_saving_brightness`` (power state untouched); TVs are
        turned off. Other devices are left alone.
        """
        logger.info("Activating energy saving mode")
        with self.home.lock:
            for device in self.home.get_all_devices():
                if device.device_type == DeviceType.LIGHT:
                    if device.is_on:
                        cast(Light, device).force_brightness(self.config.energy_saving_brightness)
                elif device.device_type == DeviceType.SMART_TV:
                    device.turn_off()
        logger.info("Energy saving mode activated")
