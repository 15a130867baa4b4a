"""C# language support."""

from typeparam_lint.languages.csharp.support import (
    CSharpLanguageSupport,
    identifier_value_text,
)

__all__ = ["CSharpLanguageSupport", "identifier_value_text"]
