"""Tests for AnalysisContext registration."""

import pytest

from typeparam_lint.analysis.context import AnalysisContext
from typeparam_lint.errors import RegistrationError
from typeparam_lint.models import NodeCategory


def _noop(declaration, sink) -> None:
    pass


class TestRegisterNodeAction:
    """Tests for register_node_action."""

    def test_registers_action_for_category(self) -> None:
        """Test that a registered action is returned for its category."""
        context = AnalysisContext()

        context.register_node_action(_noop, NodeCategory.GENERIC_PARAMETER)

        assert context.actions_for(NodeCategory.GENERIC_PARAMETER) == (_noop,)

    def test_accepts_category_by_value(self) -> None:
        """Test that the category's string value is accepted."""
        context = AnalysisContext()

        context.register_node_action(_noop, "generic_parameter")

        assert NodeCategory.GENERIC_PARAMETER in context.actions

    def test_preserves_registration_order(self) -> None:
        """Test that actions keep the order they were registered in."""

        def other(declaration, sink) -> None:
            pass

        context = AnalysisContext()
        context.register_node_action(_noop, NodeCategory.GENERIC_PARAMETER)
        context.register_node_action(other, NodeCategory.GENERIC_PARAMETER)

        assert context.actions_for(NodeCategory.GENERIC_PARAMETER) == (_noop, other)

    def test_unknown_category_is_rejected(self) -> None:
        """Test that an unknown node category is a registration error."""
        context = AnalysisContext()

        with pytest.raises(RegistrationError, match="Unknown node category"):
            context.register_node_action(_noop, "method_declaration")

        assert context.actions == {}

    def test_missing_category_is_rejected(self) -> None:
        """Test that at least one category is required."""
        with pytest.raises(RegistrationError):
            AnalysisContext().register_node_action(_noop)

    def test_non_callable_action_is_rejected(self) -> None:
        """Test that the action must be callable."""
        with pytest.raises(RegistrationError, match="not callable"):
            AnalysisContext().register_node_action(
                "not-a-function",  # type: ignore[arg-type]
                NodeCategory.GENERIC_PARAMETER,
            )

    def test_registration_after_freeze_is_rejected(self) -> None:
        """Test that a frozen context refuses new actions."""
        context = AnalysisContext()
        context.freeze()

        assert context.is_frozen
        with pytest.raises(RegistrationError, match="before traversal"):
            context.register_node_action(_noop, NodeCategory.GENERIC_PARAMETER)

    def test_actions_view_is_read_only(self) -> None:
        """Test that the actions mapping cannot be mutated by callers."""
        context = AnalysisContext()
        context.register_node_action(_noop, NodeCategory.GENERIC_PARAMETER)

        with pytest.raises(TypeError):
            context.actions[NodeCategory.GENERIC_PARAMETER] = ()  # type: ignore[index]
