"""Rule registry for typeparam-lint.

Provides a singleton registry holding the built-in rules plus any rule
plugins discovered through entry points.
"""

import logging
from importlib.metadata import entry_points
from typing import Any, TypedDict

from typeparam_lint.models import Severity
from typeparam_lint.rules.base import BaseRule
from typeparam_lint.rules.generic_parameter_names import (
    GenericParameterNamesMustBeginWithT,
)

logger = logging.getLogger(__name__)

RULE_ENTRY_POINT_GROUP = "typeparam_lint.rules"

BUILTIN_RULES: tuple[type[BaseRule], ...] = (GenericParameterNamesMustBeginWithT,)


class RuleNotFoundError(Exception):
    """Raised when a requested rule is not registered."""

    pass


class RuleAlreadyRegisteredError(Exception):
    """Raised when attempting to register a rule id that already exists."""

    pass


class RuleRegistryState(TypedDict):
    """State snapshot for RuleRegistry (used for test isolation)."""

    registry: dict[str, BaseRule]
    discovered: bool


class RuleRegistry:
    """Singleton registry for rules, keyed by rule id."""

    _instance: "RuleRegistry | None" = None
    _registry: dict[str, BaseRule]
    _discovered: bool

    def __new__(cls, *args: Any, **kwargs: Any) -> "RuleRegistry":  # noqa: ANN401
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registry = {}
            cls._instance._discovered = False
        return cls._instance

    def discover(self) -> None:
        """Register built-in rules and rule plugins from entry points.

        Entry point group: typeparam_lint.rules

        Plugins that fail to import are logged and skipped.
        """
        if self._discovered:
            return

        for rule_class in BUILTIN_RULES:
            self._register_once(rule_class())

        for ep in entry_points(group=RULE_ENTRY_POINT_GROUP):
            try:
                rule_class = ep.load()
            except ImportError as e:
                logger.warning("Skipping rule plugin '%s': %s", ep.name, e)
                continue
            self._register_once(rule_class())

        self._discovered = True
        logger.debug("Discovered rules: %s", self.list_rules())

    def _register_once(self, rule: BaseRule) -> None:
        if rule.id in self._registry:
            logger.debug("Rule %s already registered, skipping", rule.id)
            return
        self.register(rule)

    def register(self, rule: BaseRule) -> None:
        """Register a rule instance.

        Raises:
            RuleAlreadyRegisteredError: If a rule with the same id is registered

        """
        if rule.id in self._registry:
            raise RuleAlreadyRegisteredError(f"Rule '{rule.id}' is already registered")
        self._registry[rule.id] = rule

    def get(self, rule_id: str) -> BaseRule:
        """Get a rule by id.

        Raises:
            RuleNotFoundError: If the rule is not registered

        """
        if rule_id not in self._registry:
            raise RuleNotFoundError(f"Rule '{rule_id}' not registered")
        return self._registry[rule_id]

    def list_rules(self) -> list[str]:
        """List all registered rule ids."""
        return list(self._registry.keys())

    def all_rules(self) -> list[BaseRule]:
        """Return every registered rule."""
        return list(self._registry.values())

    def enabled_rules(self) -> list[BaseRule]:
        """Return rules that are enabled by default and not switched off."""
        return [
            rule
            for rule in self._registry.values()
            if rule.descriptor.enabled_by_default
            and rule.descriptor.default_severity is not Severity.OFF
        ]

    def is_registered(self, rule_id: str) -> bool:
        """Check if a rule is registered."""
        return rule_id in self._registry

    def clear(self) -> None:
        """Clear all registered rules (for testing)."""
        self._registry.clear()
        self._discovered = False

    @classmethod
    def snapshot_state(cls) -> RuleRegistryState:
        """Capture current state for later restoration (test isolation)."""
        instance = cls()
        return {
            "registry": instance._registry.copy(),
            "discovered": instance._discovered,
        }

    @classmethod
    def restore_state(cls, state: RuleRegistryState) -> None:
        """Restore state from a previously captured snapshot."""
        instance = cls()
        instance._registry = state["registry"].copy()
        instance._discovered = state["discovered"]
