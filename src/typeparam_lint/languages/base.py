"""Base utility functions for AST traversal.

These functions are language-agnostic and are shared by every language
implementation for the common tree-sitter operations.
"""

from tree_sitter import Node

from typeparam_lint.models import GenericParameterDeclaration, SourceSpan

_DEFAULT_ENCODING = "utf-8"

# Line and column offset (tree-sitter uses 0-based, we report 1-based)
_INDEX_OFFSET = 1

# Node types that can carry the name of a generic parameter
_IDENTIFIER_NODE_TYPES = frozenset({"identifier", "type_identifier"})


def get_node_text(node: Node, source_bytes: bytes) -> str:
    """Get the text content of an AST node.

    Args:
        node: Tree-sitter node with start_byte and end_byte attributes
        source_bytes: The encoded source the tree was parsed from

    Returns:
        Text content of the node

    """
    return source_bytes[node.start_byte : node.end_byte].decode(
        _DEFAULT_ENCODING, errors="replace"
    )


def node_span(node: Node) -> SourceSpan:
    """Convert a tree-sitter node's position into a 1-based SourceSpan."""
    start_row, start_column = node.start_point
    end_row, end_column = node.end_point
    return SourceSpan(
        start_line=start_row + _INDEX_OFFSET,
        start_column=start_column + _INDEX_OFFSET,
        end_line=end_row + _INDEX_OFFSET,
        end_column=end_column + _INDEX_OFFSET,
        start_byte=node.start_byte,
        end_byte=node.end_byte,
    )


def find_child_by_type(node: Node, child_types: frozenset[str] | str) -> Node | None:
    """Find the first direct child whose type is one of ``child_types``."""
    if isinstance(child_types, str):
        child_types = frozenset({child_types})
    for child in node.children:
        if child.type in child_types:
            return child
    return None


def find_identifier(node: Node) -> Node | None:
    """Find the identifier token naming a declaration node.

    The ``name`` field is preferred; grammars that do not expose it fall back
    to the first identifier-like child.
    """
    name_node = node.child_by_field_name("name")
    if name_node is None:
        name_node = find_child_by_type(node, _IDENTIFIER_NODE_TYPES)
    return name_node


def build_declaration(
    node: Node, source_bytes: bytes, file_path: str, language: str
) -> GenericParameterDeclaration:
    """Build a GenericParameterDeclaration from a generic parameter node.

    A name token that is absent, or that tree-sitter inserted as MISSING
    during error recovery, yields ``identifier_text=None``.

    Args:
        node: The generic parameter node
        source_bytes: The encoded source the tree was parsed from
        file_path: Path of the file the node belongs to
        language: Canonical language name

    Returns:
        Declaration anchored at the identifier token when there is one

    """
    name_node = find_identifier(node)
    if name_node is None or name_node.is_missing:
        return GenericParameterDeclaration(
            identifier_text=None,
            source_span=node_span(node),
            file_path=file_path,
            language=language,
        )

    return GenericParameterDeclaration(
        identifier_text=get_node_text(name_node, source_bytes),
        source_span=node_span(name_node),
        file_path=file_path,
        language=language,
    )
