"""
Data models for the automation engine.

Conditions and actions are small frozen records that hold explicit handles
to the devices (or controller) they read and act on. A rule's dependencies
are therefore visible in its data instead of hidden in closures.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from smart_home.core.controller import CentralController
    from smart_home.devices import Light, MotionSensor, SmartDevice


# =============================================================================
# Enums
# =============================================================================


class ConditionType(Enum):
    """Types of conditions a rule can check."""

    MOTION_DETECTED = "motion_detected"  # Sensor is active and saw motion
    DEVICE_ON = "device_on"  # Device power state
    ENERGY_ABOVE = "energy_above"  # Home-wide consumption over a threshold
    NUMERIC_ATTRIBUTE = "numeric_attribute"  # Device attribute within range
    PREDICATE = "predicate"  # Arbitrary zero-argument callable


class ActionType(Enum):
    """Types of actions a rule can run."""

    TURN_ON = "turn_on"
    TURN_OFF = "turn_off"
    SET_BRIGHTNESS = "set_brightness"
    COMMAND = "command"  # Command token for a controllable device
    CALLBACK = "callback"  # Arbitrary zero-argument callable


# =============================================================================
# Condition Configs
# =============================================================================


@dataclass(frozen=True)
class MotionDetectedCondition:
    """Met while the sensor is active and has detected motion."""

    sensor: "MotionSensor"

    @property
    def condition_type(self) -> ConditionType:
        return ConditionType.MOTION_DETECTED


@dataclass(frozen=True)
class DeviceOnCondition:
    """Check a device's power state."""

    device: "SmartDevice"
    on: bool = True  # True = must be on, False = must be off

    @property
    def condition_type(self) -> ConditionType:
        return ConditionType.DEVICE_ON


@dataclass(frozen=True)
class EnergyAboveCondition:
    """Met when the home's total consumption is strictly above a threshold."""

    controller: "CentralController"
    watts: float

    @property
    def condition_type(self) -> ConditionType:
        return ConditionType.ENERGY_ABOVE


@dataclass(frozen=True)
class NumericAttributeCondition:
    """Check that a numeric device attribute lies within a range.

    Example: NumericAttributeCondition(thermostat, "current_temperature", above=25)
    """

    device: "SmartDevice"
    attribute: str  # e.g., "brightness", "current_temperature", "volume"
    above: Optional[float] = None  # Value must be > this
    below: Optional[float] = None  # Value must be < this

    @property
    def condition_type(self) -> ConditionType:
        return ConditionType.NUMERIC_ATTRIBUTE


@dataclass(frozen=True)
class PredicateCondition:
    """Escape hatch for checks the other conditions cannot express.

    The predicate must not change any state.
    """

    predicate: Callable[[], bool]
    description: str = "predicate"

    @property
    def condition_type(self) -> ConditionType:
        return ConditionType.PREDICATE


ConditionConfig = (
    MotionDetectedCondition
    | DeviceOnCondition
    | EnergyAboveCondition
    | NumericAttributeCondition
    | PredicateCondition
)


# =============================================================================
# Action Configs
# =============================================================================


@dataclass(frozen=True)
class TurnOnAction:
    """Turn a device on (skipped if it already is)."""

    device: "SmartDevice"

    @property
    def action_type(self) -> ActionType:
        return ActionType.TURN_ON


@dataclass(frozen=True)
class TurnOffAction:
    """Turn a device off (skipped if it already is)."""

    device: "SmartDevice"

    @property
    def action_type(self) -> ActionType:
        return ActionType.TURN_OFF


@dataclass(frozen=True)
class SetBrightnessAction:
    """Set a light's brightness through its normal setter."""

    light: "Light"
    level: int

    @property
    def action_type(self) -> ActionType:
        return ActionType.SET_BRIGHTNESS


@dataclass(frozen=True)
class CommandAction:
    """Send a command token (e.g., "volumedown") to a controllable device."""

    device: "SmartDevice"
    command: str

    @property
    def action_type(self) -> ActionType:
        return ActionType.COMMAND


@dataclass(frozen=True)
class CallbackAction:
    """Run an arbitrary zero-argument callable."""

    callback: Callable[[], None]
    description: str = "callback"

    @property
    def action_type(self) -> ActionType:
        return ActionType.CALLBACK


ActionConfig = TurnOnAction | TurnOffAction | SetBrightnessAction | CommandAction | CallbackAction
