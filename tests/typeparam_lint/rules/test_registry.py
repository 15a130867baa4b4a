"""Tests for RuleRegistry."""

from unittest.mock import MagicMock, patch

import pytest

from typeparam_lint.models import RuleDescriptor, Severity
from typeparam_lint.rules.generic_parameter_names import (
    DIAGNOSTIC_ID,
    GenericParameterNamesMustBeginWithT,
)
from typeparam_lint.rules.registry import (
    RuleAlreadyRegisteredError,
    RuleNotFoundError,
    RuleRegistry,
)


def _make_mock_rule(
    rule_id: str,
    enabled: bool = True,
    severity: Severity = Severity.WARNING,
) -> MagicMock:
    """Create a mock rule with a real descriptor."""
    rule = MagicMock()
    rule.id = rule_id
    rule.descriptor = RuleDescriptor(
        id=rule_id,
        title="Mock rule",
        message_format="Mock {identifier}",
        category="Test",
        default_severity=severity,
        enabled_by_default=enabled,
    )
    return rule


@pytest.fixture
def clean_registry() -> RuleRegistry:
    """Provide a cleared registry (state is restored by the root conftest)."""
    registry = RuleRegistry()
    registry.clear()
    return registry


class TestRuleRegistrySingleton:
    """Tests for RuleRegistry singleton behaviour."""

    def test_registry_is_singleton(self) -> None:
        """Test that RuleRegistry always returns the same instance."""
        assert RuleRegistry() is RuleRegistry()


class TestRuleRegistration:
    """Tests for rule registration and lookup."""

    def test_register_and_get(self, clean_registry: RuleRegistry) -> None:
        """Test that a registered rule can be looked up by id."""
        rule = _make_mock_rule("X001")

        clean_registry.register(rule)

        assert clean_registry.get("X001") is rule
        assert clean_registry.is_registered("X001")

    def test_register_duplicate_raises_error(
        self, clean_registry: RuleRegistry
    ) -> None:
        """Test that registering the same id twice raises an error."""
        clean_registry.register(_make_mock_rule("X001"))

        with pytest.raises(RuleAlreadyRegisteredError, match="X001"):
            clean_registry.register(_make_mock_rule("X001"))

    def test_get_unknown_rule_raises_error(
        self, clean_registry: RuleRegistry
    ) -> None:
        """Test that looking up an unknown rule raises an error."""
        with pytest.raises(RuleNotFoundError):
            clean_registry.get("missing")

    def test_enabled_rules_filters_disabled_and_off(
        self, clean_registry: RuleRegistry
    ) -> None:
        """Test that disabled rules and rules at severity off are excluded."""
        clean_registry.register(_make_mock_rule("ON"))
        clean_registry.register(_make_mock_rule("DISABLED", enabled=False))
        clean_registry.register(_make_mock_rule("OFF", severity=Severity.OFF))

        assert [rule.id for rule in clean_registry.enabled_rules()] == ["ON"]


class TestRuleDiscovery:
    """Tests for built-in and entry point discovery."""

    def test_discover_registers_builtin_rule(
        self, clean_registry: RuleRegistry
    ) -> None:
        """Test that discovery registers the generic parameter rule."""
        with patch("typeparam_lint.rules.registry.entry_points", return_value=[]):
            clean_registry.discover()

        assert isinstance(
            clean_registry.get(DIAGNOSTIC_ID), GenericParameterNamesMustBeginWithT
        )

    def test_discover_is_idempotent(self, clean_registry: RuleRegistry) -> None:
        """Test that discovering twice does not raise duplicate errors."""
        with patch("typeparam_lint.rules.registry.entry_points", return_value=[]):
            clean_registry.discover()
            clean_registry.discover()

        assert clean_registry.list_rules() == [DIAGNOSTIC_ID]

    def test_discover_loads_entry_point_rules(
        self, clean_registry: RuleRegistry
    ) -> None:
        """Test that rules published via entry points are registered."""
        plugin_rule = _make_mock_rule("PLUGIN1")
        ep = MagicMock()
        ep.load.return_value = lambda: plugin_rule

        with patch("typeparam_lint.rules.registry.entry_points", return_value=[ep]):
            clean_registry.discover()

        assert clean_registry.is_registered("PLUGIN1")

    def test_discover_skips_plugins_that_fail_to_import(
        self, clean_registry: RuleRegistry
    ) -> None:
        """Test that a broken plugin does not stop discovery."""
        ep = MagicMock()
        ep.name = "broken"
        ep.load.side_effect = ImportError("no module")

        with patch("typeparam_lint.rules.registry.entry_points", return_value=[ep]):
            clean_registry.discover()

        assert clean_registry.list_rules() == [DIAGNOSTIC_ID]
