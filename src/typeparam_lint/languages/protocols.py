"""Protocols for language support plugins."""

from typing import Protocol, runtime_checkable

from tree_sitter import Language, Node

from typeparam_lint.models import GenericParameterDeclaration, NodeCategory


@runtime_checkable
class LanguageSupport(Protocol):
    """Protocol for language support plugins.

    Each language implementation must provide:
    - A canonical name (e.g., 'csharp', 'typescript')
    - Supported file extensions (e.g., ['.ts', '.mts'])
    - A method to get the tree-sitter language binding
    - A mapping from tree-sitter nodes to the node categories rules observe
    - A conversion from generic parameter nodes to declarations
    """

    @property
    def name(self) -> str:
        """Canonical language name (e.g., 'csharp', 'typescript')."""
        ...

    @property
    def file_extensions(self) -> list[str]:
        """Supported file extensions including dot (e.g., ['.cs'])."""
        ...

    def get_tree_sitter_language(self) -> Language:
        """Get tree-sitter Language object.

        May raise ImportError if the language's tree-sitter binding is not installed.
        """
        ...

    def categorise(self, node: Node) -> NodeCategory | None:
        """Return the category of ``node``, or None if no rule can observe it."""
        ...

    def to_declaration(
        self, node: Node, source_bytes: bytes, file_path: str
    ) -> GenericParameterDeclaration:
        """Convert a GENERIC_PARAMETER node into a declaration.

        Args:
            node: Node previously categorised as NodeCategory.GENERIC_PARAMETER
            source_bytes: The encoded source the tree was parsed from
            file_path: Path of the file being analysed

        Returns:
            Immutable declaration for rules to inspect

        """
        ...
