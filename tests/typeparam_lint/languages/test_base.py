"""Tests for language-agnostic traversal helpers."""

from tests.helpers import make_node
from typeparam_lint.languages.base import (
    build_declaration,
    find_child_by_type,
    find_identifier,
    get_node_text,
    node_span,
)


class TestGetNodeText:
    """Tests for get_node_text."""

    def test_slices_by_byte_offsets(self) -> None:
        """Test that text is sliced by bytes, not characters."""
        source = "class Ä<Key> {}".encode()
        # "Ä" is two bytes in UTF-8, so "Key" starts at byte 9
        node = make_node("identifier", start_byte=9, end_byte=12)

        assert get_node_text(node, source) == "Key"


class TestNodeSpan:
    """Tests for node_span."""

    def test_converts_to_one_based_positions(self) -> None:
        """Test that tree-sitter points become 1-based lines and columns."""
        node = make_node(
            "identifier",
            start_point=(2, 4),
            end_point=(2, 7),
            start_byte=30,
            end_byte=33,
        )

        span = node_span(node)

        assert (span.start_line, span.start_column) == (3, 5)
        assert (span.end_line, span.end_column) == (3, 8)
        assert (span.start_byte, span.end_byte) == (30, 33)


class TestFindHelpers:
    """Tests for node search helpers."""

    def test_find_child_by_type_accepts_several_types(self) -> None:
        """Test that any of several child types can match."""
        identifier = make_node("type_identifier")
        node = make_node("type_parameter", children=[make_node("in"), identifier])

        assert find_child_by_type(node, frozenset({"identifier", "type_identifier"})) is identifier
        assert find_child_by_type(node, "missing") is None

    def test_find_identifier_prefers_name_field(self) -> None:
        """Test that the name field wins over identifier children."""
        named = make_node("identifier")
        node = make_node(
            "type_parameter", children=[make_node("identifier"), named], name=named
        )

        assert find_identifier(node) is named

    def test_find_identifier_falls_back_to_identifier_child(self) -> None:
        """Test the fallback for grammars without a name field."""
        identifier = make_node("identifier")
        node = make_node("type_parameter", children=[identifier])

        assert find_identifier(node) is identifier


class TestBuildDeclaration:
    """Tests for build_declaration."""

    def test_present_identifier(self) -> None:
        """Test that the name text and name span are used."""
        source = b"class Foo<Key> {}"
        name = make_node(
            "identifier", start_point=(0, 10), end_point=(0, 13), start_byte=10, end_byte=13
        )
        node = make_node(
            "type_parameter", start_point=(0, 10), end_point=(0, 13), name=name
        )

        declaration = build_declaration(node, source, "Foo.cs", "csharp")

        assert declaration.identifier_text == "Key"
        assert declaration.source_span.start_column == 11
        assert declaration.file_path == "Foo.cs"
        assert declaration.language == "csharp"
        assert not declaration.is_missing

    def test_missing_token_yields_no_identifier(self) -> None:
        """Test that a MISSING token inserted by error recovery is treated as absent."""
        name = make_node("identifier", is_missing=True, start_byte=10, end_byte=10)
        node = make_node("type_parameter", start_point=(0, 9), name=name)

        declaration = build_declaration(node, b"class Foo<> {}", "Foo.cs", "csharp")

        assert declaration.identifier_text is None
        assert declaration.is_missing
        assert declaration.source_span.start_column == 10

    def test_absent_identifier_yields_no_identifier(self) -> None:
        """Test that a node with no name at all is treated as absent."""
        node = make_node("type_parameter", children=[make_node("attribute_list")])

        declaration = build_declaration(node, b"", "Foo.cs", "csharp")

        assert declaration.identifier_text is None

    def test_zero_length_identifier_is_present(self) -> None:
        """Test that an empty but present token is kept as an empty string."""
        name = make_node("identifier", start_byte=10, end_byte=10)
        node = make_node("type_parameter", name=name)

        declaration = build_declaration(node, b"class Foo<> {}", "Foo.cs", "csharp")

        assert declaration.identifier_text == ""
