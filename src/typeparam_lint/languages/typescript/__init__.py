"""TypeScript and TSX language support."""

from typeparam_lint.languages.typescript.support import (
    TsxLanguageSupport,
    TypeScriptLanguageSupport,
)

__all__ = ["TsxLanguageSupport", "TypeScriptLanguageSupport"]
