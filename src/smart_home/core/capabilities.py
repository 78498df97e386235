"""
Capability contracts a device may satisfy.

A device class declares the capabilities it implements in its
``capabilities`` attribute. Aggregation code (the controller, rule
conditions) queries that declared set instead of testing concrete classes.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict


class Capability(Enum):
    """Named behavior contracts."""

    CONTROLLABLE = "controllable"  # Accepts command tokens and a mode
    ENERGY_CONSUMER = "energy_consumer"  # Reports power draw in watts
    SCHEDULABLE = "schedulable"  # Stores time-label -> action-label tasks


class Controllable(ABC):
    """Devices that can be driven by short command tokens."""

    @abstractmethod
    def execute_command(self, command: str) -> bool:
        """
        Execute a command token (e.g., "on", "dim", "channel 5").

        Args:
            command: Command string; the first word selects the command

        Returns:
            True if the command was recognized, False otherwise.
            Unrecognized commands are reported, never raised.
        """
        pass

    @abstractmethod
    def set_mode(self, mode: str) -> None:
        """Set the operating mode of the device."""
        pass


class EnergyConsumer(ABC):
    """Devices that draw power."""

    @abstractmethod
    def get_energy_consumption(self) -> float:
        """
        Get the current power draw.

        Returns:
            Consumption in watts (0 when the device is off)
        """
        pass

    @abstractmethod
    def get_energy_efficiency_rating(self) -> str:
        """Get the efficiency rating (A+ to F)."""
        pass


class Schedulable(ABC):
    """
    Devices that keep a schedule of labelled tasks.

    The schedule is a label store only: nothing fires at the given time.
    """

    @abstractmethod
    def schedule_task(self, time_label: str, action_label: str) -> None:
        """
        Schedule a task.

        Args:
            time_label: When to run the task (e.g., "07:30")
            action_label: What to do (e.g., "settemp 22")
        """
        pass

    @abstractmethod
    def cancel_scheduled_task(self, time_label: str) -> bool:
        """
        Cancel the task stored under a time label.

        Returns:
            True if a task was removed
        """
        pass

    @property
    @abstractmethod
    def scheduled_tasks(self) -> Dict[str, str]:
        """Copy of the scheduled tasks."""
        pass
