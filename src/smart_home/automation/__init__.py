"""
Automation engine for smart-home.

Provides condition/action rules evaluated in explicit passes against live
device state.

Features:
- Ordered rules with name-based enable/disable/remove
- Motion, power state, energy, numeric attribute and predicate conditions
- Turn on/off, brightness, command and callback actions
- Sequential passes: earlier actions are visible to later conditions
- Execution history for debugging

Architecture:
    Conditions and actions hold explicit handles to the devices (or the
    controller) they use. The engine owns the rules; rules own nothing
    but references.

    ┌─────────────────────────────────────────────┐
    │        AutomationEngine (one pass)          │
    │                     │                       │
    │                     ▼                       │
    │   AutomationRule → conditions → actions     │
    │                     │                       │
    │                     ▼                       │
    │         Devices / CentralController         │
    └─────────────────────────────────────────────┘
"""

from .models import (
    # Enums
    ConditionType,
    ActionType,
    # Conditions
    MotionDetectedCondition,
    DeviceOnCondition,
    EnergyAboveCondition,
    NumericAttributeCondition,
    PredicateCondition,
    ConditionConfig,
    # Actions
    TurnOnAction,
    TurnOffAction,
    SetBrightnessAction,
    CommandAction,
    CallbackAction,
    ActionConfig,
)
from .evaluators import ConditionEvaluator, ActionExecutor
from .rule import AutomationRule, RuleExecution
from .engine import AutomationEngine, EngineResult
from .presets import motion_light_rule, energy_cap_rule

__all__ = [
    # Engine
    "AutomationEngine",
    "EngineResult",
    # Rule
    "AutomationRule",
    "RuleExecution",
    # Evaluators
    "ConditionEvaluator",
    "ActionExecutor",
    # Enums
    "ConditionType",
    "ActionType",
    # Conditions
    "MotionDetectedCondition",
    "DeviceOnCondition",
    "EnergyAboveCondition",
    "NumericAttributeCondition",
    "PredicateCondition",
    "ConditionConfig",
    # Actions
    "TurnOnAction",
    "TurnOffAction",
    "SetBrightnessAction",
    "CommandAction",
    "CallbackAction",
    "ActionConfig",
    # Presets
    "motion_light_rule",
    "energy_cap_rule",
]
