"""Language plugin system for typeparam-lint."""

from typeparam_lint.languages.base import (
    build_declaration,
    find_child_by_type,
    find_identifier,
    get_node_text,
    node_span,
)
from typeparam_lint.languages.protocols import LanguageSupport
from typeparam_lint.languages.registry import (
    LanguageAlreadyRegisteredError,
    LanguageNotFoundError,
    LanguageRegistry,
)

__all__ = [
    # Base utilities
    "build_declaration",
    "find_child_by_type",
    "find_identifier",
    "get_node_text",
    "node_span",
    # Protocol
    "LanguageSupport",
    # Registry
    "LanguageAlreadyRegisteredError",
    "LanguageNotFoundError",
    "LanguageRegistry",
]
