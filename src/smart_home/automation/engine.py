"""
Automation engine - ordered rule storage and evaluation passes.
"""

import logging
from collections import deque
from contextlib import nullcontext
from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import TYPE_CHECKING, Deque, List, Optional, Tuple

from smart_home.core.config import SmartHomeConfig

from .rule import AutomationRule, RuleExecution

if TYPE_CHECKING:
    from smart_home.core.home import Home

logger = logging.getLogger(__name__)


@dataclass
class EngineResult:
    """Result of one evaluation pass."""

    rules_evaluated: int = 0
    rules_triggered: int = 0
    triggered: List[str] = field(default_factory=list)  # Rule names, in firing order


class AutomationEngine:
    """
    Core engine for automation rule processing.

    Rules are kept in insertion order and evaluated in that order. A pass
    is sequential: an action fired by one rule is visible to the conditions
    of every later rule in the same pass. There is no background timer;
    callers invoke evaluate_rules() once per tick.

    Responsibilities:
    - Store rules (add, remove, enable, disable by name)
    - Run evaluation passes
    - Track execution history
    """

    def __init__(
        self,
        home: Optional["Home"] = None,
        config: Optional[SmartHomeConfig] = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            home: Optional home whose lock is held for each pass
            config: Configuration (defaults to the home's config)
        """
        self._home = home
        if config is None:
            config = home.config if home else SmartHomeConfig()
        self._rules: List[AutomationRule] = []
        self._history: Deque[RuleExecution] = deque(maxlen=config.history_size)
        self._passes = 0
        logger.info("Automation engine initialized")

    # =========================================================================
    # Configuration
    # =========================================================================

    def add_rule(self, rule: AutomationRule) -> None:
        """Append a rule. Names are not required to be unique."""
        self._rules.append(rule)
        logger.info(f"Added rule: {rule.name}")

    def remove_rule(self, name: str) -> int:
        """
        Remove every rule with the given name.

        Returns:
            Number of rules removed
        """
        before = len(self._rules)
        self._rules = [r for r in self._rules if r.name != name]
        removed = before - len(self._rules)

        if removed:
            logger.info(f"Removed {removed} rule(s) named '{name}'")
        else:
            logger.warning(f"Rule not found: {name}")
        return removed

    def enable_rule(self, name: str) -> bool:
        """
        Enable the first rule with the given name.

        Returns:
            False if no rule has that name
        """
        rule = self._find_rule(name)
        if rule is None:
            logger.warning(f"Rule not found: {name}")
            return False
        rule.enable()
        return True

    def disable_rule(self, name: str) -> bool:
        """
        Disable the first rule with the given name.

        Returns:
            False if no rule has that name
        """
        rule = self._find_rule(name)
        if rule is None:
            logger.warning(f"Rule not found: {name}")
            return False
        rule.disable()
        return True

    def get_rule(self, name: str) -> Optional[AutomationRule]:
        """Get the first rule with the given name, or None."""
        return self._find_rule(name)

    def get_rules(self) -> List[AutomationRule]:
        """Get all rules in evaluation order."""
        return list(self._rules)

    def list_rules(self) -> List[Tuple[str, bool]]:
        """Get (name, enabled) for every rule in evaluation order."""
        return [(r.name, r.enabled) for r in self._rules]

    def _find_rule(self, name: str) -> Optional[AutomationRule]:
        for rule in self._rules:
            if rule.name == name:
                return rule
        return None

    # =========================================================================
    # Evaluation
    # =========================================================================

    def evaluate_rules(self, now: Optional[datetime] = None) -> EngineResult:
        """
        Run one evaluation pass over every rule.

        Each rule is visited exactly once, in insertion order, whether or
        not earlier rules fired. Rules added or removed by an action take
        effect from the next pass.

        Args:
            now: Timestamp recorded in history (for testing)

        Returns:
            Result with counts of rules evaluated/triggered

        Raises:
            SmartHomeError: If a rule's condition or action fails. The
                failure is recorded in history and the pass stops there.
        """
        if now is None:
            now = datetime.now(UTC)

        self._passes += 1
        result = EngineResult()
        lock = self._home.lock if self._home else nullcontext()

        with lock:
            for rule in list(self._rules):
                result.rules_evaluated += 1
                if self._run_rule(rule, now):
                    result.rules_triggered += 1
                    result.triggered.append(rule.name)

        if result.rules_triggered:
            logger.info(f"{result.rules_triggered} automation rule(s) executed")
        else:
            logger.info("No automation rules triggered")
        return result

    def _run_rule(self, rule: AutomationRule, now: datetime) -> bool:
        start = datetime.now(UTC)
        try:
            fired = rule.execute_if_true()
        except Exception as e:
            logger.error(f"Error executing rule {rule.name}: {e}", exc_info=True)
            self._record_execution(rule, now, start, success=False, error=str(e))
            raise

        if fired:
            self._record_execution(rule, now, start, success=True, error=None)
        return fired

    # =========================================================================
    # History
    # =========================================================================

    def _record_execution(
        self,
        rule: AutomationRule,
        timestamp: datetime,
        start: datetime,
        success: bool,
        error: Optional[str],
    ) -> None:
        """Record an execution in history."""
        duration_ms = int((datetime.now(UTC) - start).total_seconds() * 1000)
        self._history.append(
            RuleExecution(
                rule_name=rule.name,
                actions_executed=rule.to_dict()["actions"] if success else [],
                success=success,
                error=error,
                timestamp=timestamp,
                duration_ms=duration_ms,
                pass_number=self._passes,
            )
        )

    def get_history(
        self,
        rule_name: Optional[str] = None,
        limit: int = 20,
    ) -> List[RuleExecution]:
        """
        Get execution history.

        Args:
            rule_name: Filter by rule (optional)
            limit: Maximum entries to return

        Returns:
            List of RuleExecution records (newest first)
        """
        result = []
        for execution in reversed(self._history):
            if rule_name and execution.rule_name != rule_name:
                continue
            result.append(execution)
            if len(result) >= limit:
                break
        return result
