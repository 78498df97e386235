"""
Motion sensor.
"""

import logging
from datetime import datetime, UTC
from typing import Any, Dict, Optional

from smart_home.core.capabilities import Capability, Controllable

from .base import DeviceType, SmartDevice, split_command

logger = logging.getLogger(__name__)

MIN_SENSITIVITY = 1
MAX_SENSITIVITY = 10


class MotionSensor(SmartDevice, Controllable):
    """
    A sensor that records motion while active.

    Motion only counts while the sensor is on: ``is_motion_detected`` is
    False for an inactive sensor, and turning it off clears the flag.
    """

    device_type = DeviceType.MOTION_SENSOR
    capabilities = frozenset({Capability.CONTROLLABLE})

    def __init__(self, device_id: str, name: str) -> None:
        super().__init__(device_id, name)
        self.motion_detected = False
        self.sensitivity = 5
        self.last_detection: Optional[datetime] = None

    @property
    def is_motion_detected(self) -> bool:
        return self.motion_detected and self.is_on

    def turn_on(self) -> None:
        self.is_on = True
        self._report("activated, monitoring for motion")

    def turn_off(self) -> None:
        self.is_on = False
        self.motion_detected = False
        self._report("deactivated")

    def get_status(self) -> str:
        return (
            f"{self.name} | Status: {'ACTIVE' if self.is_on else 'INACTIVE'} | "
            f"Motion: {'DETECTED' if self.motion_detected else 'None'} | "
            f"Sensitivity: {self.sensitivity}"
        )

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update(
            motion_detected=self.motion_detected,
            sensitivity=self.sensitivity,
            last_detection=self.last_detection.isoformat() if self.last_detection else None,
        )
        return data

    def detect_motion(self, now: Optional[datetime] = None) -> bool:
        """
        Record a motion event.

        Args:
            now: Detection time (defaults to the current UTC time)

        Returns:
            True if motion was recorded, False if the sensor is inactive
        """
        if not self.is_on:
            logger.warning(f"{self.name} is not active, motion ignored")
            return False

        self.motion_detected = True
        self.last_detection = now or datetime.now(UTC)
        self._report("MOTION DETECTED")
        return True

    def clear_motion(self) -> None:
        self.motion_detected = False
        self._report("motion cleared")

    def set_sensitivity(self, level: int) -> None:
        """
        Set detection sensitivity.

        Raises:
            InvalidDeviceStateError: If level is not 1-10
        """
        if not MIN_SENSITIVITY <= level <= MAX_SENSITIVITY:
            raise self._invalid(
                f"Sensitivity must be between {MIN_SENSITIVITY} and {MAX_SENSITIVITY}, got {level}"
            )
        self.sensitivity = level
        self._report(f"sensitivity set to {level}")

    def set_mode(self, mode: str) -> None:
        self._report(f"mode set to {mode}")

    def execute_command(self, command: str) -> bool:
        token, _ = split_command(command)
        if token == "on":
            self.turn_on()
        elif token == "off":
            self.turn_off()
        elif token == "detect":
            self.detect_motion()
        elif token == "clear":
            self.clear_motion()
        else:
            return self._unknown_command(command)
        return True
