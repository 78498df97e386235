"""
Smart TV with channels, volume and streaming.
"""

import logging
from typing import Any, Dict

from smart_home.core.capabilities import Capability, Controllable, EnergyConsumer

from .base import DeviceType, SmartDevice, split_command

logger = logging.getLogger(__name__)

MIN_CHANNEL = 1
MAX_CHANNEL = 999
MIN_VOLUME = 0
MAX_VOLUME = 100
VOLUME_STEP = 10

WATCHING_WATTS = 80.0
STREAMING_WATTS = 120.0


class SmartTV(SmartDevice, Controllable, EnergyConsumer):
    """
    A TV that must be on for channel, volume and streaming changes.

    Channel numbers are validated; volume changes clamp to 0-100 instead.
    """

    device_type = DeviceType.SMART_TV
    capabilities = frozenset({Capability.CONTROLLABLE, Capability.ENERGY_CONSUMER})

    def __init__(self, device_id: str, name: str) -> None:
        super().__init__(device_id, name)
        self.channel = MIN_CHANNEL
        self.volume = 50
        self.is_streaming = False
        self.streaming_app = "none"

    def turn_on(self) -> None:
        self.is_on = True
        self._report(f"turned ON (channel {self.channel})")

    def turn_off(self) -> None:
        self.is_on = False
        self.is_streaming = False
        self._report("turned OFF")

    def get_status(self) -> str:
        status = (
            f"{self.name} | Status: {'ON' if self.is_on else 'OFF'} | "
            f"Channel: {self.channel} | Volume: {self.volume} | "
            f"Energy: {self.get_energy_consumption():.2f}W"
        )
        if self.is_streaming:
            status += f" | Streaming: {self.streaming_app}"
        return status

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update(
            channel=self.channel,
            volume=self.volume,
            is_streaming=self.is_streaming,
            streaming_app=self.streaming_app,
        )
        return data

    def change_channel(self, channel: int) -> None:
        """
        Switch to a channel. Cancels streaming.

        Raises:
            InvalidDeviceStateError: If the TV is off or channel is not 1-999
        """
        self._require_on("change channel")
        if not MIN_CHANNEL <= channel <= MAX_CHANNEL:
            raise self._invalid(f"Invalid channel number {channel}")
        self.channel = channel
        self.is_streaming = False
        self._report(f"changed to channel {channel}")

    def adjust_volume(self, change: int) -> None:
        """
        Change the volume by a relative amount, clamped to 0-100.

        Raises:
            InvalidDeviceStateError: If the TV is off
        """
        self._require_on("adjust volume")
        self.volume = max(MIN_VOLUME, min(MAX_VOLUME, self.volume + change))
        self._report(f"volume set to {self.volume}")

    def start_streaming(self, app: str) -> None:
        """
        Start streaming from an app.

        Raises:
            InvalidDeviceStateError: If the TV is off
        """
        self._require_on("stream")
        self.is_streaming = True
        self.streaming_app = app
        self._report(f"now streaming from {app}")

    def stop_streaming(self) -> None:
        self.is_streaming = False
        self.streaming_app = "none"
        self._report("stopped streaming")

    def set_mode(self, mode: str) -> None:
        self._report(f"mode set to {mode}")

    def execute_command(self, command: str) -> bool:
        token, args = split_command(command)
        if token == "on":
            self.turn_on()
        elif token == "off":
            self.turn_off()
        elif token == "channel":
            channel = self._int_argument(token, args)
            if channel is not None:
                self.change_channel(channel)
        elif token == "volumeup":
            self.adjust_volume(VOLUME_STEP)
        elif token == "volumedown":
            self.adjust_volume(-VOLUME_STEP)
        elif token == "stream":
            if args:
                self.start_streaming(args[0])
            else:
                logger.warning(f"{self.name}: command '{token}' needs an argument")
        else:
            return self._unknown_command(command)
        return True

    def get_energy_consumption(self) -> float:
        if not self.is_on:
            return 0.0
        return STREAMING_WATTS if self.is_streaming else WATCHING_WATTS

    def get_energy_efficiency_rating(self) -> str:
        return "B"

    def _require_on(self, operation: str) -> None:
        if not self.is_on:
            raise self._invalid(f"TV must be on to {operation}")
