"""
Smart thermostat with a simulated, one-degree-per-step temperature model.
"""

import logging
from typing import Any, Dict, List

from smart_home.core.capabilities import (
    Capability,
    Controllable,
    EnergyConsumer,
    Schedulable,
)

from .base import DeviceType, SmartDevice, split_command

logger = logging.getLogger(__name__)

MIN_TEMPERATURE = 10
MAX_TEMPERATURE = 35
MODES = ("heat", "cool", "auto")

IDLE_WATTS = 50.0
HEATING_WATTS = 150.0
COOLING_WATTS = 120.0


class Thermostat(SmartDevice, Controllable, EnergyConsumer, Schedulable):
    """
    A thermostat with current/target temperature, a mode and a task schedule.

    Each call to set_temperature moves the current temperature one degree
    toward the target, and only while the thermostat is on.
    """

    device_type = DeviceType.THERMOSTAT
    capabilities = frozenset(
        {Capability.CONTROLLABLE, Capability.ENERGY_CONSUMER, Capability.SCHEDULABLE}
    )

    def __init__(self, device_id: str, name: str, initial_temperature: int = 20) -> None:
        super().__init__(device_id, name)
        self._check_temperature(initial_temperature)
        self.current_temperature = initial_temperature
        self.target_temperature = initial_temperature
        self.mode = "auto"
        self._scheduled_tasks: Dict[str, str] = {}

    def turn_on(self) -> None:
        self.is_on = True
        self._report(f"turned ON (mode {self.mode})")

    def turn_off(self) -> None:
        self.is_on = False
        self._report("turned OFF")

    def get_status(self) -> str:
        return (
            f"{self.name} | Status: {'ON' if self.is_on else 'OFF'} | "
            f"Current: {self.current_temperature}°C | Target: {self.target_temperature}°C | "
            f"Mode: {self.mode} | Energy: {self.get_energy_consumption():.2f}W"
        )

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update(
            current_temperature=self.current_temperature,
            target_temperature=self.target_temperature,
            mode=self.mode,
            scheduled_tasks=self.scheduled_tasks,
        )
        return data

    def set_temperature(self, temperature: int) -> None:
        """
        Set the target temperature and run one adjustment step.

        Raises:
            InvalidDeviceStateError: If temperature is outside 10-35°C
        """
        self._check_temperature(temperature)
        self.target_temperature = temperature
        self._report(f"target temperature set to {temperature}°C")
        self._adjust_temperature()

    def _check_temperature(self, temperature: int) -> None:
        if not MIN_TEMPERATURE <= temperature <= MAX_TEMPERATURE:
            raise self._invalid(
                f"Temperature must be between {MIN_TEMPERATURE}°C and {MAX_TEMPERATURE}°C, "
                f"got {temperature}"
            )

    def _adjust_temperature(self) -> None:
        if not self.is_on:
            return

        if self.current_temperature < self.target_temperature:
            self.current_temperature += 1
            self._report(f"heating... current {self.current_temperature}°C")
        elif self.current_temperature > self.target_temperature:
            self.current_temperature -= 1
            self._report(f"cooling... current {self.current_temperature}°C")
        else:
            self._report("temperature reached target")

    def set_mode(self, mode: str) -> None:
        """
        Set the operating mode.

        Raises:
            InvalidDeviceStateError: Unless mode is heat, cool or auto
        """
        if mode not in MODES:
            raise self._invalid(f"Invalid mode '{mode}'. Use: {', '.join(MODES)}")
        self.mode = mode
        self._report(f"mode set to {mode}")

    def execute_command(self, command: str) -> bool:
        token, args = split_command(command)
        if token == "on":
            self.turn_on()
        elif token == "off":
            self.turn_off()
        elif token == "settemp":
            temperature = self._int_argument(token, args)
            if temperature is not None:
                self.set_temperature(temperature)
        elif token == "setmode":
            self._mode_argument(token, args)
        else:
            return self._unknown_command(command)
        return True

    def _mode_argument(self, token: str, args: List[str]) -> None:
        if not args:
            logger.warning(f"{self.name}: command '{token}' needs an argument")
            return
        self.set_mode(args[0])

    def get_energy_consumption(self) -> float:
        if not self.is_on:
            return 0.0
        if self.current_temperature != self.target_temperature:
            return HEATING_WATTS if self.mode == "heat" else COOLING_WATTS
        return IDLE_WATTS

    def get_energy_efficiency_rating(self) -> str:
        return "A"

    # Schedulable

    def schedule_task(self, time_label: str, action_label: str) -> None:
        self._scheduled_tasks[time_label] = action_label
        self._report(f"scheduled '{action_label}' at {time_label}")

    def cancel_scheduled_task(self, time_label: str) -> bool:
        if self._scheduled_tasks.pop(time_label, None) is None:
            logger.warning(f"{self.name}: no task scheduled at {time_label}")
            return False
        self._report(f"scheduled task at {time_label} cancelled")
        return True

    @property
    def scheduled_tasks(self) -> Dict[str, str]:
        return dict(self._scheduled_tasks)
