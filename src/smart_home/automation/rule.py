"""
AutomationRule: a named condition/action pair with an enabled flag.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Set

from .evaluators import ActionExecutor, ConditionEvaluator
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

_evaluator = ConditionEvaluator()
_executor = ActionExecutor()


@dataclass
class AutomationRule:
    """A complete automation rule.

    Consists of:
    - name: Identifies the rule for enable/disable/remove
    - conditions: All must be true for actions to run
    - actions: What to execute, in order
    - enabled: Whether rule is active

    A rule has exactly two states, enabled and disabled. A disabled rule
    never evaluates true.
    """

    name: str
    conditions: List[ConditionConfig]
    actions: List[ActionConfig]
    enabled: bool = True

    def evaluate(self) -> bool:
        """Return True if the rule is enabled and all its conditions hold."""
        return self.enabled and _evaluator.evaluate_all(self.conditions)

    def execute_if_true(self) -> bool:
        """
        Run the actions once if the rule evaluates true.

        Returns:
            True if the actions ran, False if nothing was done
        """
        if not self.evaluate():
            return False

        logger.info(f"Rule '{self.name}' triggered")
        for action in self.actions:
            _executor.execute(action)
        return True

    def enable(self) -> None:
        self.enabled = True
        logger.info(f"Rule '{self.name}' enabled")

    def disable(self) -> None:
        self.enabled = False
        logger.info(f"Rule '{self.name}' disabled")

    def dependencies(self) -> Set[str]:
        """Get the IDs of every device the rule reads or acts on."""
        device_ids = set()
        for item in [*self.conditions, *self.actions]:
            for attr in ("device", "sensor", "light"):
                device = getattr(item, attr, None)
                if device is not None:
                    device_ids.add(device.device_id)
        return device_ids

    def to_dict(self) -> Dict[str, Any]:
        """Describe the rule (devices are referenced by ID)."""
        return {
            "name": self.name,
            "enabled": self.enabled,
            "conditions": [self._serialize_condition(c) for c in self.conditions],
            "actions": [self._serialize_action(a) for a in self.actions],
        }

    def _serialize_condition(self, c: ConditionConfig) -> Dict[str, Any]:
        """Serialize condition config."""
        if isinstance(c, MotionDetectedCondition):
            return {"type": "motion_detected", "device_id": c.sensor.device_id}
        elif isinstance(c, DeviceOnCondition):
            return {"type": "device_on", "device_id": c.device.device_id, "on": c.on}
        elif isinstance(c, EnergyAboveCondition):
            return {"type": "energy_above", "home": c.controller.home.name, "watts": c.watts}
        elif isinstance(c, NumericAttributeCondition):
            return {
                "type": "numeric_attribute",
                "device_id": c.device.device_id,
                "attribute": c.attribute,
                "above": c.above,
                "below": c.below,
            }
        elif isinstance(c, PredicateCondition):
            return {"type": "predicate", "description": c.description}
        return {}

    def _serialize_action(self, a: ActionConfig) -> Dict[str, Any]:
        """Serialize action config."""
        if isinstance(a, TurnOnAction):
            return {"type": "turn_on", "device_id": a.device.device_id}
        elif isinstance(a, TurnOffAction):
            return {"type": "turn_off", "device_id": a.device.device_id}
        elif isinstance(a, SetBrightnessAction):
            return {"type": "set_brightness", "device_id": a.light.device_id, "level": a.level}
        elif isinstance(a, CommandAction):
            return {"type": "command", "device_id": a.device.device_id, "command": a.command}
        elif isinstance(a, CallbackAction):
            return {"type": "callback", "description": a.description}
        return {}

    def __str__(self) -> str:
        return f"Rule: {self.name} [{'ENABLED' if self.enabled else 'DISABLED'}]"


# =============================================================================
# Execution Records
# =============================================================================


@dataclass
class RuleExecution:
    """Record of a rule execution (for history/debugging)."""

    rule_name: str
    actions_executed: List[Dict[str, Any]]
    success: bool
    error: Optional[str]
    timestamp: datetime
    duration_ms: int = 0
    pass_number: int = 0
