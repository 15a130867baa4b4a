"""Generic parameter naming lint for typeparam-lint.

This package provides a rule that requires every generic type or method
parameter name to begin with the capital letter T, together with a
tree-sitter based host that runs it over C# and TypeScript sources.

Use: LintEngine(config).analyse_paths([...]) -> LintReport
"""

from typeparam_lint.analysis import (
    AnalysisContext,
    CollectingSink,
    CompilationUnit,
    DiagnosticSink,
    report,
)
from typeparam_lint.config import LintConfig
from typeparam_lint.engine import LintEngine, LintReport, SkippedFile
from typeparam_lint.errors import (
    LintConfigError,
    LintError,
    ParserError,
    RegistrationError,
    SessionClosedError,
)
from typeparam_lint.models import (
    DiagnosticRecord,
    GenericParameterDeclaration,
    Location,
    NodeCategory,
    RuleDescriptor,
    Severity,
    SourceSpan,
)
from typeparam_lint.rules import (
    BaseRule,
    GenericParameterNamesMustBeginWithT,
    RuleRegistry,
    is_conformant,
)

__all__ = [
    "AnalysisContext",
    "BaseRule",
    "CollectingSink",
    "CompilationUnit",
    "DiagnosticRecord",
    "DiagnosticSink",
    "GenericParameterDeclaration",
    "GenericParameterNamesMustBeginWithT",
    "LintConfig",
    "LintConfigError",
    "LintEngine",
    "LintError",
    "LintReport",
    "Location",
    "NodeCategory",
    "ParserError",
    "RegistrationError",
    "RuleDescriptor",
    "RuleRegistry",
    "SessionClosedError",
    "Severity",
    "SkippedFile",
    "SourceSpan",
    "is_conformant",
    "report",
]
