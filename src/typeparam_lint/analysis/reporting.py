"""Turning violations into diagnostics."""

from typeparam_lint.analysis.sink import DiagnosticSink
from typeparam_lint.models import (
    DiagnosticRecord,
    GenericParameterDeclaration,
    RuleDescriptor,
)


def report(
    sink: DiagnosticSink,
    descriptor: RuleDescriptor,
    declaration: GenericParameterDeclaration,
) -> None:
    """Build a diagnostic for ``declaration`` and deliver it to ``sink``.

    The record is anchored at the declaration's source span and its message
    interpolates the offending identifier. No reference is kept after
    delivery; errors raised by the sink propagate to the host.
    """
    sink.accept(DiagnosticRecord.create(descriptor, declaration))
