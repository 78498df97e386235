"""Tests for the automation engine."""

import threading
from datetime import datetime, UTC

import pytest

from smart_home import (
    CentralController,
    Home,
    InvalidDeviceStateError,
    Light,
    MotionSensor,
    Room,
    SmartHomeConfig,
)
from smart_home.automation import (
    AutomationEngine,
    AutomationRule,
    CallbackAction,
    DeviceOnCondition,
    MotionDetectedCondition,
    PredicateCondition,
    SetBrightnessAction,
    TurnOnAction,
)


@pytest.fixture
def engine():
    """Create an engine with no home bound."""
    return AutomationEngine()


def make_rule(name: str, enabled: bool = True) -> AutomationRule:
    """Helper to create an always-true rule with no actions."""
    return AutomationRule(name=name, conditions=[], actions=[], enabled=enabled)


def build_scenario():
    """Create a sensor seeing motion, a hall light and a stair light that follows it."""
    sensor = MotionSensor("M1", "Hall Sensor")
    sensor.turn_on()
    sensor.detect_motion()
    light = Light("L1", "Hall Light", brightness=80)
    follower = Light("L2", "Stair Light", brightness=50)

    motion_rule = AutomationRule(
        name="motion_light",
        conditions=[MotionDetectedCondition(sensor=sensor), DeviceOnCondition(device=light, on=False)],
        actions=[TurnOnAction(device=light)],
    )
    follow_rule = AutomationRule(
        name="follow_hall_light",
        conditions=[DeviceOnCondition(device=light), DeviceOnCondition(device=follower, on=False)],
        actions=[TurnOnAction(device=follower)],
    )
    return motion_rule, follow_rule, light, follower


class TestRuleManagement:
    """Tests for adding, removing, enabling and listing rules."""

    def test_list_rules_in_insertion_order(self, engine):
        """Test listing names and flags."""
        engine.add_rule(make_rule("a"))
        engine.add_rule(make_rule("b", enabled=False))
        assert engine.list_rules() == [("a", True), ("b", False)]

    def test_remove_deletes_all_matches(self, engine):
        """Test that duplicate names are all removed."""
        engine.add_rule(make_rule("dup"))
        engine.add_rule(make_rule("keep"))
        engine.add_rule(make_rule("dup"))

        assert engine.remove_rule("dup") == 2
        assert engine.list_rules() == [("keep", True)]

    def test_remove_missing(self, engine, caplog):
        """Test removing an unknown name."""
        with caplog.at_level("WARNING"):
            assert engine.remove_rule("ghost") == 0
        assert "Rule not found" in caplog.text

    def test_enable_disable_first_match(self, engine):
        """Test that only the first rule with a name is toggled."""
        engine.add_rule(make_rule("dup"))
        engine.add_rule(make_rule("dup"))

        assert engine.disable_rule("dup") is True
        assert engine.list_rules() == [("dup", False), ("dup", True)]

        assert engine.enable_rule("dup") is True
        assert engine.list_rules() == [("dup", True), ("dup", True)]

    def test_enable_disable_missing(self, engine):
        """Test that unknown names are reported."""
        assert engine.enable_rule("ghost") is False
        assert engine.disable_rule("ghost") is False

    def test_get_rules_is_a_copy(self, engine):
        """Test that callers cannot reorder the engine's rules."""
        engine.add_rule(make_rule("a"))
        engine.get_rules().clear()
        assert engine.get_rule("a") is not None


class TestEvaluationPass:
    """Tests for evaluate_rules."""

    def test_no_rules(self, engine):
        """Test an empty pass."""
        result = engine.evaluate_rules()
        assert result.rules_evaluated == 0
        assert result.rules_triggered == 0

    def test_counts_executed_rules(self, engine):
        """Test that disabled and unmet rules are visited but not counted."""
        engine.add_rule(make_rule("on"))
        engine.add_rule(make_rule("off", enabled=False))
        engine.add_rule(
            AutomationRule(name="never", conditions=[PredicateCondition(lambda: False)], actions=[])
        )

        result = engine.evaluate_rules()

        assert result.rules_evaluated == 3
        assert result.rules_triggered == 1
        assert result.triggered == ["on"]

    def test_every_rule_visited_once(self, engine):
        """Test that each rule's condition is checked exactly once per pass."""
        calls = []
        for name in ("a", "b", "c"):
            engine.add_rule(
                AutomationRule(
                    name=name,
                    conditions=[PredicateCondition(lambda n=name: calls.append(n) is None)],
                    actions=[],
                )
            )

        engine.evaluate_rules()
        assert calls == ["a", "b", "c"]

    def test_chained_rules_fire_in_same_pass(self, engine):
        """Test that a rule sees the effect of an earlier rule's action."""
        motion_rule, follow_rule, light, follower = build_scenario()
        engine.add_rule(motion_rule)
        engine.add_rule(follow_rule)

        result = engine.evaluate_rules()

        assert result.triggered == ["motion_light", "follow_hall_light"]
        assert light.is_on and follower.is_on

    def test_reversed_order_changes_outcome(self, engine):
        """Test that evaluation order is insertion order."""
        motion_rule, follow_rule, light, follower = build_scenario()
        engine.add_rule(follow_rule)
        engine.add_rule(motion_rule)

        first = engine.evaluate_rules()
        assert first.triggered == ["motion_light"]
        assert light.is_on is True
        assert follower.is_on is False

        second = engine.evaluate_rules()
        assert second.triggered == ["follow_hall_light"]
        assert follower.is_on is True

    def test_no_duplicate_firing(self, engine):
        """Test that a rule guarded by device state fires once across passes."""
        motion_rule, _, light, _ = build_scenario()
        engine.add_rule(motion_rule)

        assert engine.evaluate_rules().rules_triggered == 1
        assert engine.evaluate_rules().rules_triggered == 0

    def test_rules_added_mid_pass_wait(self, engine):
        """Test that a rule added by an action runs from the next pass."""
        late = make_rule("late")
        engine.add_rule(
            AutomationRule(
                name="adder",
                conditions=[PredicateCondition(lambda: engine.get_rule("late") is None)],
                actions=[CallbackAction(callback=lambda: engine.add_rule(late))],
            )
        )

        assert engine.evaluate_rules().triggered == ["adder"]
        assert engine.evaluate_rules().triggered == ["late"]

    def test_action_error_propagates(self, engine):
        """Test that invalid device states raised by actions reach the caller."""
        light = Light("L1", "Light")
        engine.add_rule(
            AutomationRule(
                name="bad",
                conditions=[],
                actions=[SetBrightnessAction(light=light, level=500)],
            )
        )

        with pytest.raises(InvalidDeviceStateError):
            engine.evaluate_rules()

        history = engine.get_history()
        assert len(history) == 1
        assert history[0].success is False
        assert "Brightness" in history[0].error


class TestHistory:
    """Tests for execution history."""

    def test_records_fired_rules(self, engine):
        """Test that only executions are recorded, newest first."""
        now = datetime(2025, 1, 15, 20, 0, 0, tzinfo=UTC)
        engine.add_rule(make_rule("a"))
        engine.add_rule(make_rule("b", enabled=False))

        engine.evaluate_rules(now=now)
        engine.evaluate_rules(now=now)

        history = engine.get_history()
        assert [h.rule_name for h in history] == ["a", "a"]
        assert [h.pass_number for h in history] == [2, 1]
        assert history[0].timestamp == now
        assert history[0].success is True

    def test_filter_and_limit(self, engine):
        """Test filtering by rule name and limiting."""
        engine.add_rule(make_rule("a"))
        engine.add_rule(make_rule("b"))
        for _ in range(3):
            engine.evaluate_rules()

        assert len(engine.get_history(rule_name="b")) == 3
        assert len(engine.get_history(limit=2)) == 2

    def test_history_size_from_config(self):
        """Test that history is bounded."""
        engine = AutomationEngine(config=SmartHomeConfig(history_size=2))
        engine.add_rule(make_rule("a"))
        for _ in range(5):
            engine.evaluate_rules()
        assert len(engine.get_history()) == 2


def test_pass_holds_home_lock():
    """Test that a bound engine evaluates under the home's lock."""
    home = Home("Locked")
    room = Room("Den")
    room.add_device(Light("L1", "Den Light"))
    home.add_room(room)
    controller = CentralController(home)
    engine = AutomationEngine(home)

    observed = []

    def probe():
        # Another thread cannot take the lock while the pass runs
        acquired = []
        thread = threading.Thread(target=lambda: acquired.append(home.lock.acquire(blocking=False)))
        thread.start()
        thread.join()
        observed.append(acquired[0])

    engine.add_rule(
        AutomationRule(name="probe", conditions=[], actions=[CallbackAction(callback=probe)])
    )
    engine.evaluate_rules()

    assert observed == [False]
    assert controller.turn_on_all_lights() == 1
