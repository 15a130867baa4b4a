"""Data models shared by the host and the rules.

All models are frozen: declarations are owned by the syntax tree, descriptors
live for the whole session, and diagnostics are handed off to the sink as soon
as they are built.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Severity(StrEnum):
    """Diagnostic severity."""

    OFF = "off"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class NodeCategory(StrEnum):
    """Syntax node categories a rule can register interest in."""

    GENERIC_PARAMETER = "generic_parameter"


class SourceSpan(BaseModel):
    """A region of source text.

    Lines and columns are 1-based. Columns count bytes, as tree-sitter does.
    """

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(ge=1)
    start_column: int = Field(ge=1)
    end_line: int = Field(ge=1)
    end_column: int = Field(ge=1)
    start_byte: int = Field(default=0, ge=0)
    end_byte: int = Field(default=0, ge=0)


class GenericParameterDeclaration(BaseModel):
    """One formal type or method parameter introduced by a generic declaration.

    ``identifier_text`` is None when the parser could not recover a name at all.
    A present identifier may still be empty on a badly recovered parse.
    """

    model_config = ConfigDict(frozen=True)

    identifier_text: str | None
    source_span: SourceSpan
    file_path: str = "<string>"
    language: str | None = None

    @property
    def is_missing(self) -> bool:
        """True when there is no identifier token to check."""
        return self.identifier_text is None


class Location(BaseModel):
    """Where a diagnostic is anchored."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    span: SourceSpan


class RuleDescriptor(BaseModel):
    """Static metadata describing a rule to the rule registry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Stable rule identifier")
    title: str = Field(min_length=1)
    message_format: str = Field(
        min_length=1,
        description="Message template, interpolated with {identifier}",
    )
    category: str = Field(min_length=1)
    default_severity: Severity = Severity.WARNING
    enabled_by_default: bool = True
    description: str = ""
    help_link: str = ""

    def format_message(self, identifier: str) -> str:
        """Interpolate the offending identifier into the message template."""
        return self.message_format.format(identifier=identifier)


class DiagnosticRecord(BaseModel):
    """A single rule violation found in source."""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    severity: Severity
    message: str
    location: Location
    help_reference: str = ""

    @classmethod
    def create(
        cls,
        descriptor: RuleDescriptor,
        declaration: GenericParameterDeclaration,
    ) -> DiagnosticRecord:
        """Build a diagnostic for a declaration that violates ``descriptor``.

        Args:
            descriptor: Descriptor of the rule reporting the violation
            declaration: The offending declaration

        Returns:
            Diagnostic anchored at the declaration's source span

        """
        return cls(
            rule_id=descriptor.id,
            severity=descriptor.default_severity,
            message=descriptor.format_message(declaration.identifier_text or ""),
            location=Location(
                file_path=declaration.file_path,
                span=declaration.source_span,
            ),
            help_reference=descriptor.help_link,
        )

    def sort_key(self) -> tuple[str, int, int, str]:
        """Key used to order diagnostics deterministically."""
        span = self.location.span
        return (
            self.location.file_path,
            span.start_line,
            span.start_column,
            self.rule_id,
        )
