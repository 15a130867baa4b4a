"""Session-level registration of node actions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType
from typing import TYPE_CHECKING

from typeparam_lint.errors import RegistrationError
from typeparam_lint.models import GenericParameterDeclaration, NodeCategory

if TYPE_CHECKING:
    from collections.abc import Mapping

    from typeparam_lint.analysis.sink import DiagnosticSink

logger = logging.getLogger(__name__)

type NodeAction = Callable[[GenericParameterDeclaration, DiagnosticSink], None]


class AnalysisContext:
    """Collects the node actions rules register at session start.

    Rules call register_node_action() from their initialize() hook. The engine
    freezes the context before traversal begins; after that the registered
    actions are read-only and can be shared between worker threads.
    """

    def __init__(self) -> None:
        """Initialise an empty, unfrozen context."""
        self._actions: dict[NodeCategory, list[NodeAction]] = {}
        self._frozen = False

    def register_node_action(
        self, action: NodeAction, *categories: NodeCategory | str
    ) -> None:
        """Invoke ``action`` for every node of the given categories.

        Args:
            action: Callback receiving the matched declaration and a reporting sink
            categories: One or more node categories to observe

        Raises:
            RegistrationError: If the context is frozen, the action is not
                callable, or a category is missing or unknown

        """
        if self._frozen:
            raise RegistrationError(
                "Node actions must be registered before traversal starts"
            )
        if not callable(action):
            raise RegistrationError(f"Node action is not callable: {action!r}")
        if not categories:
            raise RegistrationError("At least one node category is required")

        resolved: list[NodeCategory] = []
        for category in categories:
            try:
                resolved.append(NodeCategory(category))
            except ValueError as e:
                raise RegistrationError(
                    f"Unknown node category: {category!r}. "
                    f"Available: {[c.value for c in NodeCategory]}"
                ) from e

        for category in resolved:
            self._actions.setdefault(category, []).append(action)
            logger.debug("Registered node action %r for %s", action, category)

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        """True once traversal may begin."""
        return self._frozen

    @property
    def actions(self) -> Mapping[NodeCategory, tuple[NodeAction, ...]]:
        """Registered actions per category, in registration order."""
        return MappingProxyType(
            {category: tuple(actions) for category, actions in self._actions.items()}
        )

    def actions_for(self, category: NodeCategory) -> tuple[NodeAction, ...]:
        """Return the actions registered for ``category``."""
        return tuple(self._actions.get(category, ()))
