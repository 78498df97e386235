"""
Dimmable smart light.
"""

from typing import Any, Dict

from smart_home.core.capabilities import Capability, Controllable, EnergyConsumer

from .base import DeviceType, SmartDevice, split_command

MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100
DIM_STEP = 10
WATTS_PER_BRIGHTNESS_POINT = 0.1  # LED bulb, about 10W at full brightness


class Light(SmartDevice, Controllable, EnergyConsumer):
    """
    A smart light with brightness, color and mode.

    Brightness drives power: setting it to 0 turns the light off and setting
    a positive level turns it on. ``force_brightness`` is the one path that
    changes brightness without touching power.
    """

    device_type = DeviceType.LIGHT
    capabilities = frozenset({Capability.CONTROLLABLE, Capability.ENERGY_CONSUMER})

    def __init__(self, device_id: str, name: str, brightness: int = MAX_BRIGHTNESS) -> None:
        super().__init__(device_id, name)
        self._check_brightness(brightness)
        self.brightness = brightness
        self.color = "white"
        self.mode = "normal"

    def turn_on(self) -> None:
        self.is_on = True
        if self.brightness == 0:
            self.brightness = MAX_BRIGHTNESS
        self._report(f"turned ON (brightness {self.brightness}%)")

    def turn_off(self) -> None:
        self.is_on = False
        self._report("turned OFF")

    def get_status(self) -> str:
        return (
            f"{self.name} | Status: {'ON' if self.is_on else 'OFF'} | "
            f"Brightness: {self.brightness}% | Color: {self.color} | "
            f"Energy: {self.get_energy_consumption():.2f}W"
        )

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update(brightness=self.brightness, color=self.color, mode=self.mode)
        return data

    def set_brightness(self, level: int) -> None:
        """
        Set the brightness level.

        Args:
            level: Brightness 0-100. 0 turns the light off, a positive level
                turns it on.

        Raises:
            InvalidDeviceStateError: If level is out of range
        """
        self._check_brightness(level)
        self.brightness = level
        self._report(f"brightness set to {level}%")

        if level == 0:
            self.is_on = False
        elif not self.is_on:
            self.is_on = True

    def force_brightness(self, level: int) -> None:
        """
        Set brightness directly, leaving the power state alone.

        Used by energy-saving mode. Unlike set_brightness, this never turns
        the light on or off.

        Raises:
            InvalidDeviceStateError: If level is out of range
        """
        self._check_brightness(level)
        self.brightness = level
        self._report(f"brightness forced to {level}%")

    def dim(self) -> None:
        """Lower brightness by one step; does nothing at or below the step."""
        if self.brightness > DIM_STEP:
            self.set_brightness(self.brightness - DIM_STEP)

    def set_color(self, color: str) -> None:
        self.color = color
        self._report(f"color changed to {color}")

    def set_mode(self, mode: str) -> None:
        self.mode = mode
        self._report(f"mode set to {mode}")

    def execute_command(self, command: str) -> bool:
        token, _ = split_command(command)
        if token == "on":
            self.turn_on()
        elif token == "off":
            self.turn_off()
        elif token == "dim":
            self.dim()
        else:
            return self._unknown_command(command)
        return True

    def get_energy_consumption(self) -> float:
        return self.brightness * WATTS_PER_BRIGHTNESS_POINT if self.is_on else 0.0

    def get_energy_efficiency_rating(self) -> str:
        return "A+"

    def _check_brightness(self, level: int) -> None:
        if not MIN_BRIGHTNESS <= level <= MAX_BRIGHTNESS:
            raise self._invalid(
                f"Brightness must be between {MIN_BRIGHTNESS} and {MAX_BRIGHTNESS}, got {level}"
            )
