"""Main entry point for typeparam-lint.

This module provides the command-line interface, including commands for:
- Checking source files for generic parameter naming violations
- Listing available rules
- Listing available languages
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from typeparam_lint.cli import (
    OutputFormat,
    check_command,
    list_languages_command,
    list_rules_command,
)

app = typer.Typer(name="typeparam-lint", no_args_is_help=True)

_LOG_LEVEL_HELP = "Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"


@app.command()
def check(
    paths: Annotated[
        list[Path],
        typer.Argument(
            help="Source files or directories to check",
            exists=True,
            readable=True,
        ),
    ],
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a YAML lint configuration file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Report format written to stdout",
            case_sensitive=False,
            rich_help_panel="Output",
        ),
    ] = OutputFormat.TEXT,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Also save the report as JSON to this file",
            file_okay=True,
            dir_okay=False,
            writable=True,
            rich_help_panel="Output",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show skipped files and help links (sets log level to DEBUG)",
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help=_LOG_LEVEL_HELP, case_sensitive=False),
    ] = "WARNING",
) -> None:
    """Check generic parameter names in source files.

    Example:
        typeparam-lint check src/ --format json -o report.json

    """
    check_command(paths, config, output_format, output, verbose, log_level)


@app.command(name="ls-rules")
def list_available_rules(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help=_LOG_LEVEL_HELP, case_sensitive=False),
    ] = "WARNING",
) -> None:
    """List available (built-in & registered) rules."""
    list_rules_command(log_level)


@app.command(name="ls-languages")
def list_available_languages(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help=_LOG_LEVEL_HELP, case_sensitive=False),
    ] = "WARNING",
) -> None:
    """List available (built-in & registered) languages."""
    list_languages_command(log_level)


if __name__ == "__main__":
    app()
