"""C# language support implementation."""

import re

from tree_sitter import Language, Node

from typeparam_lint.languages.base import build_declaration
from typeparam_lint.models import GenericParameterDeclaration, NodeCategory

# C# file extensions
_CS_EXTENSIONS = [".cs"]

# C# AST node types mapped to the categories rules can observe
_NODE_CATEGORIES = {
    "type_parameter": NodeCategory.GENERIC_PARAMETER,
}

# Prefix that lets a keyword be used as an identifier (e.g. @class)
_VERBATIM_PREFIX = "@"

_UNICODE_ESCAPE = re.compile(r"\\u([0-9A-Fa-f]{4})|\\U([0-9A-Fa-f]{8})")

_MAX_CODE_POINT = 0x10FFFF


def _decode_escape(match: re.Match[str]) -> str:
    code_point = int(match.group(1) or match.group(2), 16)
    if code_point > _MAX_CODE_POINT:
        return match.group(0)
    return chr(code_point)


def identifier_value_text(token_text: str) -> str:
    """Return the value of a C# identifier token as the compiler sees it.

    The verbatim ``@`` prefix is dropped and Unicode escapes are decoded, so
    ``@TKey`` and ``\\u0054Key`` both name ``TKey``.

    Example:
        >>> identifier_value_text("@TKey")
        'TKey'
        >>> identifier_value_text("\\\\u0054Key")
        'TKey'

    """
    return _UNICODE_ESCAPE.sub(
        _decode_escape, token_text.removeprefix(_VERBATIM_PREFIX)
    )


class CSharpLanguageSupport:
    """C# language support implementation.

    Generic parameters appear as ``type_parameter`` nodes inside the
    ``type_parameter_list`` of classes, structs, interfaces, records,
    delegates and methods.
    """

    @property
    def name(self) -> str:
        """Return the canonical language name."""
        return "csharp"

    @property
    def file_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return _CS_EXTENSIONS

    def get_tree_sitter_language(self) -> Language:
        """Return the tree-sitter C# language binding.

        The import is deferred so the module can be imported even when
        tree-sitter-c-sharp is not installed.

        Raises:
            ImportError: If tree-sitter-c-sharp is not installed

        """
        import tree_sitter_c_sharp as tscs  # noqa: PLC0415

        return Language(tscs.language())

    def categorise(self, node: Node) -> NodeCategory | None:
        """Return the node category for ``node``, if any."""
        return _NODE_CATEGORIES.get(node.type)

    def to_declaration(
        self, node: Node, source_bytes: bytes, file_path: str
    ) -> GenericParameterDeclaration:
        """Convert a ``type_parameter`` node into a declaration.

        The identifier is reported by value, not by its raw token text.
        """
        declaration = build_declaration(node, source_bytes, file_path, self.name)
        token_text = declaration.identifier_text
        if token_text is None:
            return declaration
        return declaration.model_copy(
            update={"identifier_text": identifier_value_text(token_text)}
        )
