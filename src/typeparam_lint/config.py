"""Configuration for the lint engine."""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from typeparam_lint.errors import LintConfigError

logger = logging.getLogger(__name__)

_DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB


def validate_and_normalise_language(v: str | None) -> str | None:
    """Validate and normalise a language string.

    Example:
        >>> validate_and_normalise_language("  CSharp ")
        'csharp'
        >>> validate_and_normalise_language(None)

    Raises:
        ValueError: If language is empty string or whitespace-only

    """
    if v is not None:
        if not v.strip():
            raise ValueError("Language must be a non-empty string if provided")
        return v.strip().lower()
    return v


class LintConfig(BaseModel):
    """Configuration for a lint run with Pydantic validation.

    Immutable once created, so a single instance can be shared by every
    worker of a session.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    language: str | None = Field(
        default=None,
        description="Force one language for every file (detected from extension if None)",
    )
    max_file_size: int = Field(
        default=_DEFAULT_MAX_FILE_SIZE,
        description="Skip files larger than this size in bytes",
        gt=0,
    )
    max_workers: int = Field(
        default=4,
        description="Number of compilation units analysed in parallel",
        ge=1,
    )
    exclude_generated: bool = Field(
        default=True,
        description="Skip files recognised as generated code",
    )
    exclude_patterns: list[str] = Field(
        default_factory=list,
        description="Glob patterns (matched against posix paths) of files to skip",
    )
    encoding: str = Field(default="utf-8", min_length=1)

    @field_validator("language")
    @classmethod
    def validate_language_if_provided(cls, v: str | None) -> str | None:
        """Validate language if provided."""
        return validate_and_normalise_language(v)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding names a known codec."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from a properties dictionary.

        Args:
            properties: Raw properties, e.g. loaded from a YAML file

        Returns:
            Validated configuration object

        Raises:
            LintConfigError: If validation fails

        """
        try:
            return cls.model_validate(properties)
        except ValidationError as e:
            raise LintConfigError(f"Invalid lint configuration: {e}") from e
        except ValueError as e:
            raise LintConfigError(f"Invalid lint configuration: {e}") from e

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> Self:
        """Load configuration from a YAML file.

        An empty file yields the default configuration.

        Raises:
            LintConfigError: If the file cannot be read, parsed or validated

        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise LintConfigError(f"Failed to parse YAML config {path}: {e}") from e
        except OSError as e:
            raise LintConfigError(f"Failed to read config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise LintConfigError(f"Invalid configuration format in {path}")

        logger.info("Configuration loaded from %s", path)
        return cls.from_properties(data)  # type: ignore[arg-type]
