"""Builders for test doubles shared across the test suite."""

from unittest.mock import MagicMock

from typeparam_lint.models import GenericParameterDeclaration, SourceSpan


def make_node(
    node_type: str,
    start_point: tuple[int, int] = (0, 0),
    end_point: tuple[int, int] = (0, 1),
    children: list[MagicMock] | None = None,
    name: MagicMock | None = None,
    is_missing: bool = False,
    start_byte: int = 0,
    end_byte: int = 1,
) -> MagicMock:
    """Create a stand-in for a tree-sitter Node."""
    node = MagicMock()
    node.type = node_type
    node.start_point = start_point
    node.end_point = end_point
    node.start_byte = start_byte
    node.end_byte = end_byte
    node.children = children or []
    node.is_missing = is_missing
    node.child_by_field_name.side_effect = lambda field: (
        name if field == "name" else None
    )
    return node


def make_declaration(
    identifier_text: str | None,
    line: int = 1,
    column: int = 1,
    file_path: str = "Sample.cs",
) -> GenericParameterDeclaration:
    """Create a declaration whose span covers ``identifier_text``."""
    length = len(identifier_text or "")
    return GenericParameterDeclaration(
        identifier_text=identifier_text,
        source_span=SourceSpan(
            start_line=line,
            start_column=column,
            end_line=line,
            end_column=column + length,
        ),
        file_path=file_path,
        language="csharp",
    )
