"""Base rule abstraction for typeparam-lint."""

from __future__ import annotations

from abc import ABC, abstractmethod

from typeparam_lint.analysis.context import AnalysisContext
from typeparam_lint.models import RuleDescriptor


class BaseRule(ABC):
    """Abstract base class for rules.

    A rule exposes an immutable descriptor to the rule registry and registers
    its node actions once per analysis session. Rules must not keep mutable
    state between action invocations: the host may call them concurrently.
    """

    @property
    @abstractmethod
    def descriptor(self) -> RuleDescriptor:
        """Get the static metadata describing this rule."""

    @property
    def id(self) -> str:
        """Shortcut for the descriptor's rule id."""
        return self.descriptor.id

    @abstractmethod
    def initialize(self, context: AnalysisContext) -> None:
        """Register node actions with the session context.

        Args:
            context: The unfrozen context of the session being started

        """
