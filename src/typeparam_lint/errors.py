"""Error classes for typeparam-lint.

This module provides:
- LintError: Base exception class for all lint errors
- ParserError: Source could not be parsed or the language is not supported
- RegistrationError: A rule registered an invalid node action with the session
- SessionClosedError: A diagnostic was delivered after the session was torn down
- LintConfigError: Lint configuration is invalid
"""


class LintError(Exception):
    """Base exception for all typeparam-lint errors."""

    pass


class ParserError(LintError):
    """Raised when source code cannot be parsed."""

    pass


class RegistrationError(LintError):
    """Raised when the analysis context rejects a node action registration.

    This is a fatal condition for the session and is never retried.
    """

    pass


class SessionClosedError(LintError):
    """Raised when a diagnostic sink receives a record after it was closed."""

    pass


class LintConfigError(LintError):
    """Raised when lint configuration is invalid."""

    pass
