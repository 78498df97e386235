"""
Condition evaluators and action executors for the automation engine.

Evaluators read device state through the handles stored in each condition;
executors mutate devices through the handles stored in each action.
"""

import logging
from numbers import Number
from typing import cast

from smart_home.core.capabilities import Capability, Controllable

from .models import (
    ActionConfig,
    CallbackAction,
    CommandAction,
    ConditionConfig,
    DeviceOnCondition,
    EnergyAboveCondition,
    MotionDetectedCondition,
    NumericAttributeCondition,
    PredicateCondition,
    SetBrightnessAction,
    TurnOffAction,
    TurnOnAction,
)

logger = logging.getLogger(__name__)


class ConditionEvaluator:
    """
    Evaluates conditions for automation rules.

    Evaluation never changes device state.
    """

    def evaluate(self, condition: ConditionConfig) -> bool:
        """
        Evaluate a condition.

        Args:
            condition: The condition to evaluate

        Returns:
            True if condition is met, False otherwise
        """
        if isinstance(condition, MotionDetectedCondition):
            return condition.sensor.is_motion_detected
        elif isinstance(condition, DeviceOnCondition):
            return condition.device.is_on == condition.on
        elif isinstance(condition, EnergyAboveCondition):
            return condition.controller.get_total_energy_consumption() > condition.watts
        elif isinstance(condition, NumericAttributeCondition):
            return self._check_numeric_attribute(condition)
        elif isinstance(condition, PredicateCondition):
            return bool(condition.predicate())
        else:
            logger.warning(f"Unknown condition type: {type(condition)}")
            return False

    def evaluate_all(self, conditions: list[ConditionConfig]) -> bool:
        """
        Evaluate all conditions (AND logic, short-circuit).

        Returns:
            True if ALL conditions are met (an empty list is always met)
        """
        for condition in conditions:
            if not self.evaluate(condition):
                logger.debug(f"Condition not met: {condition.condition_type.value}")
                return False
        return True

    def _check_numeric_attribute(self, condition: NumericAttributeCondition) -> bool:
        value = getattr(condition.device, condition.attribute, None)
        if isinstance(value, bool) or not isinstance(value, Number):
            logger.warning(
                f"Attribute '{condition.attribute}' of {condition.device.device_id} "
                f"is not numeric: {value!r}"
            )
            return False

        if condition.above is not None and value <= condition.above:
            return False
        if condition.below is not None and value >= condition.below:
            return False
        return True


class ActionExecutor:
    """
    Executes rule actions against devices.

    Turn-on/turn-off actions are skipped when the device is already in the
    requested state. Device errors propagate to the caller.
    """

    def execute(self, action: ActionConfig) -> bool:
        """
        Execute an action.

        Returns:
            True if the action changed something, False if it was skipped
        """
        if isinstance(action, TurnOnAction):
            if action.device.is_on:
                logger.debug(f"Skipping turn_on for {action.device.device_id} (already on)")
                return False
            action.device.turn_on()
        elif isinstance(action, TurnOffAction):
            if not action.device.is_on:
                logger.debug(f"Skipping turn_off for {action.device.device_id} (already off)")
                return False
            action.device.turn_off()
        elif isinstance(action, SetBrightnessAction):
            action.light.set_brightness(action.level)
        elif isinstance(action, CommandAction):
            return self._execute_command(action)
        elif isinstance(action, CallbackAction):
            action.callback()
        else:
            logger.warning(f"Unknown action type: {type(action)}")
            return False
        return True

    def _execute_command(self, action: CommandAction) -> bool:
        if not action.device.has_capability(Capability.CONTROLLABLE):
            logger.warning(f"Device {action.device.device_id} does not accept commands")
            return False
        logger.info(f"Executing: {action.command} -> {action.device.device_id}")
        return cast(Controllable, action.device).execute_command(action.command)
