"""TypeScript language support implementation."""

from tree_sitter import Language, Node

from typeparam_lint.languages.base import build_declaration
from typeparam_lint.models import GenericParameterDeclaration, NodeCategory

# TypeScript file extensions (.tsx is handled by TsxLanguageSupport)
_TS_EXTENSIONS = [".ts", ".mts", ".cts"]
_TSX_EXTENSIONS = [".tsx"]

# TypeScript AST node types mapped to the categories rules can observe
_NODE_CATEGORIES = {
    "type_parameter": NodeCategory.GENERIC_PARAMETER,
}


class TypeScriptLanguageSupport:
    """TypeScript language support implementation.

    Generic parameters appear as ``type_parameter`` nodes inside the
    ``type_parameters`` of classes, interfaces, type aliases, functions
    and methods.
    """

    @property
    def name(self) -> str:
        """Return the canonical language name."""
        return "typescript"

    @property
    def file_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return _TS_EXTENSIONS

    def get_tree_sitter_language(self) -> Language:
        """Return the tree-sitter TypeScript language binding.

        The import is deferred to allow the module to be imported even when
        tree-sitter-typescript is not installed. This enables graceful degradation
        where unavailable languages are simply skipped during discovery.

        Raises:
            ImportError: If tree-sitter-typescript is not installed

        """
        import tree_sitter_typescript as tsts  # noqa: PLC0415

        return Language(tsts.language_typescript())

    def categorise(self, node: Node) -> NodeCategory | None:
        """Return the node category for ``node``, if any."""
        return _NODE_CATEGORIES.get(node.type)

    def to_declaration(
        self, node: Node, source_bytes: bytes, file_path: str
    ) -> GenericParameterDeclaration:
        """Convert a ``type_parameter`` node into a declaration."""
        return build_declaration(node, source_bytes, file_path, self.name)


class TsxLanguageSupport(TypeScriptLanguageSupport):
    """TSX variant of TypeScript.

    Uses the TSX grammar so JSX elements parse, at the cost of the
    ``<T>(x) => x`` arrow form, which TSX reads as a JSX tag.
    """

    @property
    def name(self) -> str:
        """Return the canonical language name."""
        return "tsx"

    @property
    def file_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return _TSX_EXTENSIONS

    def get_tree_sitter_language(self) -> Language:
        """Return the tree-sitter TSX language binding.

        Raises:
            ImportError: If tree-sitter-typescript is not installed

        """
        import tree_sitter_typescript as tsts  # noqa: PLC0415

        return Language(tsts.language_tsx())
