"""
Automation presets - ready-made rules for common patterns.
"""

from typing import TYPE_CHECKING, List, Sequence

from .models import (
    ActionConfig,
    DeviceOnCondition,
    EnergyAboveCondition,
    MotionDetectedCondition,
    SetBrightnessAction,
    TurnOffAction,
    TurnOnAction,
)
from .rule import AutomationRule

if TYPE_CHECKING:
    from smart_home.core.controller import CentralController
    from smart_home.devices import Light, MotionSensor, SmartDevice


def motion_light_rule(
    name: str,
    sensor: "MotionSensor",
    light: "Light",
    *,
    enabled: bool = True,
) -> AutomationRule:
    """
    Create a rule that turns a light on when a sensor detects motion.

    The rule only fires while the light is off, so repeated passes with
    motion still detected do not fire it again.

    Args:
        name: Rule name
        sensor: Motion sensor to watch
        light: Light to turn on
        enabled: Whether rule is active

    Returns:
        Configured AutomationRule

    Example:
        rule = motion_light_rule("Motion Light Rule", hall_sensor, hall_light)
    """
    return AutomationRule(
        name=name,
        conditions=[
            MotionDetectedCondition(sensor=sensor),
            DeviceOnCondition(device=light, on=False),
        ],
        actions=[TurnOnAction(device=light)],
        enabled=enabled,
    )


def energy_cap_rule(
    name: str,
    controller: "CentralController",
    *,
    threshold_watts: float = 200.0,
    dim_lights: Sequence["Light"] = (),
    brightness: int = 30,
    turn_off: Sequence["SmartDevice"] = (),
    enabled: bool = True,
) -> AutomationRule:
    """
    Create a rule that cuts consumption when the home draws too much power.

    Args:
        name: Rule name
        controller: Controller used to read total consumption
        threshold_watts: Fire when consumption is strictly above this
        dim_lights: Lights set to ``brightness``
        brightness: Brightness for the dimmed lights
        turn_off: Devices to switch off
        enabled: Whether rule is active

    Returns:
        Configured AutomationRule

    Example:
        rule = energy_cap_rule(
            "Energy Saving Rule",
            controller,
            threshold_watts=200,
            dim_lights=[living_light],
            turn_off=[tv],
        )
    """
    actions: List[ActionConfig] = [
        SetBrightnessAction(light=light, level=brightness) for light in dim_lights
    ]
    actions.extend(TurnOffAction(device=d) for d in turn_off)

    return AutomationRule(
        name=name,
        conditions=[EnergyAboveCondition(controller=controller, watts=threshold_watts)],
        actions=actions,
        enabled=enabled,
    )
