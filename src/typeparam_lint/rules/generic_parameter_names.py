"""Generic parameter names must begin with T.

A violation occurs when the name of a generic type or method parameter does
not begin with the capital letter T, for example ``class Cache<Key>`` rather
than ``class Cache<TKey>``.
"""

from typing import override

from typeparam_lint.analysis.context import AnalysisContext
from typeparam_lint.analysis.reporting import report
from typeparam_lint.analysis.sink import DiagnosticSink
from typeparam_lint.models import (
    GenericParameterDeclaration,
    NodeCategory,
    RuleDescriptor,
    Severity,
)
from typeparam_lint.rules.base import BaseRule

DIAGNOSTIC_ID = "SA1654"

_REQUIRED_PREFIX = "T"

DESCRIPTOR = RuleDescriptor(
    id=DIAGNOSTIC_ID,
    title="Generic parameter names should begin with T",
    message_format="Generic parameter name '{identifier}' should begin with T",
    category="Naming",
    default_severity=Severity.WARNING,
    enabled_by_default=True,
    description=(
        "The name of a generic parameter does not begin with the capital letter T."
    ),
    help_link=(
        "https://github.com/DotNetAnalyzers/StyleCopAnalyzers/blob/master/"
        "documentation/SA1654.md"
    ),
)


def is_conformant(identifier_text: str) -> bool:
    """Return True if ``identifier_text`` starts with an uppercase ``T``.

    The comparison is ordinal: ``"t"``, ``"Ｔ"`` and an empty string all fail.
    """
    return identifier_text.startswith(_REQUIRED_PREFIX)


class GenericParameterNamesMustBeginWithT(BaseRule):
    """Flag generic parameters whose name does not begin with T."""

    @property
    @override
    def descriptor(self) -> RuleDescriptor:
        return DESCRIPTOR

    @override
    def initialize(self, context: AnalysisContext) -> None:
        context.register_node_action(
            self._handle_generic_parameter, NodeCategory.GENERIC_PARAMETER
        )

    def _handle_generic_parameter(
        self, declaration: GenericParameterDeclaration, sink: DiagnosticSink
    ) -> None:
        # The parser reports the missing name itself
        if declaration.is_missing:
            return

        if not is_conformant(declaration.identifier_text or ""):
            report(sink, DESCRIPTOR, declaration)
