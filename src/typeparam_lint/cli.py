"""CLI command implementations for typeparam-lint."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from typeparam_lint.config import LintConfig
from typeparam_lint.engine import LintEngine, LintReport
from typeparam_lint.errors import LintError
from typeparam_lint.languages.registry import LanguageRegistry
from typeparam_lint.logging import get_cli_logger, setup_logging
from typeparam_lint.models import Severity
from typeparam_lint.rules.registry import RuleRegistry

logger = get_cli_logger()
console = Console()

_SEVERITY_STYLES = {
    Severity.INFO: "blue",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


class OutputFormat(StrEnum):
    """Report output formats."""

    TEXT = "text"
    JSON = "json"


class OutputFormatter:
    """Handles formatting CLI output for different commands."""

    def format_report(self, report: LintReport, verbose: bool = False) -> None:
        """Print a lint report as a table of diagnostics.

        Args:
            report: Report to print
            verbose: Also list skipped files and help links

        """
        if report.diagnostics:
            table = Table(
                title="Generic Parameter Naming Diagnostics",
                show_header=True,
                header_style="bold magenta",
            )
            table.add_column("Location", style="cyan")
            table.add_column("Rule", style="bold")
            table.add_column("Severity")
            table.add_column("Message", style="white")
            if verbose:
                table.add_column("Help", style="dim")

            for record in report.diagnostics:
                span = record.location.span
                style = _SEVERITY_STYLES.get(record.severity, "white")
                row = [
                    f"{record.location.file_path}:{span.start_line}:{span.start_column}",
                    record.rule_id,
                    f"[{style}]{record.severity.value}[/{style}]",
                    record.message,
                ]
                if verbose:
                    row.append(record.help_reference)
                table.add_row(*row)

            console.print(table)

        if verbose and report.skipped:
            skipped = Table(title="Skipped Files", header_style="bold yellow")
            skipped.add_column("File", style="cyan")
            skipped.add_column("Reason")
            for item in report.skipped:
                skipped.add_row(item.file_path, item.reason)
            console.print(skipped)

        summary_style = "red" if report.has_diagnostics else "green"
        console.print(
            f"[{summary_style}]{len(report.diagnostics)} diagnostic(s)[/{summary_style}] "
            f"in {report.files_analysed} file(s), {len(report.skipped)} skipped"
        )

    def report_to_json(self, report: LintReport) -> str:
        """Serialise a report to JSON."""
        return report.model_dump_json(indent=2)

    def format_rule_list(self, registry: RuleRegistry) -> None:
        """Print the registered rules."""
        rules = registry.all_rules()
        if not rules:
            console.print(
                Panel(
                    "[yellow]No rules available.[/yellow]",
                    title="Warning",
                    border_style="yellow",
                )
            )
            logger.warning("No rules registered")
            return

        table = Table(title="Available Rules", show_header=True, header_style="bold magenta")
        table.add_column("Id", style="cyan", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Category")
        table.add_column("Severity")
        table.add_column("Enabled")
        for rule in rules:
            descriptor = rule.descriptor
            table.add_row(
                descriptor.id,
                descriptor.title,
                descriptor.category,
                descriptor.default_severity.value,
                "yes" if descriptor.enabled_by_default else "no",
            )
        console.print(table)

    def format_language_list(self, registry: LanguageRegistry) -> None:
        """Print the registered languages and their extensions."""
        table = Table(
            title="Available Languages", show_header=True, header_style="bold magenta"
        )
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Extensions")
        for name in registry.list_languages():
            table.add_row(name, ", ".join(registry.get(name).file_extensions))
        console.print(table)


def setup_cli_logging(log_level: str, verbose: bool = False) -> None:
    """Set up logging for CLI commands.

    Args:
        log_level: Logging level string
        verbose: Override with DEBUG level if True

    """
    effective_log_level = "DEBUG" if verbose else log_level
    setup_logging(level=effective_log_level)


def handle_cli_error(error: Exception, message: str) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        error: The exception that occurred
        message: User-friendly error message

    """
    logger.error("%s: %s", message, error)

    error_panel = Panel(f"[red]{error}[/red]", title=message, border_style="red")
    console.print(error_panel)
    raise typer.Exit(1) from error


def check_command(
    paths: list[Path],
    config_path: Path | None = None,
    output_format: OutputFormat = OutputFormat.TEXT,
    output: Path | None = None,
    verbose: bool = False,
    log_level: str = "WARNING",
) -> None:
    """CLI command implementation for linting files.

    Exits with status 1 when any diagnostic is reported or the run fails.

    Args:
        paths: Files and directories to lint
        config_path: Optional YAML configuration file
        output_format: Report format printed to stdout
        output: Optional file to write the JSON report to
        verbose: Enable verbose output
        log_level: Logging level

    """
    setup_cli_logging(log_level, verbose)

    try:
        config = (
            LintConfig.from_yaml_file(config_path) if config_path else LintConfig()
        )
        engine = LintEngine(config)
        report = engine.analyse_paths(paths)
    except LintError as e:
        handle_cli_error(e, "Lint failed")
        return

    formatter = OutputFormatter()
    if output_format is OutputFormat.JSON:
        typer.echo(formatter.report_to_json(report))
    else:
        formatter.format_report(report, verbose=verbose)

    if output is not None:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(formatter.report_to_json(report), encoding="utf-8")
        except OSError as e:
            handle_cli_error(e, "Failed to write report")
        logger.info("Report saved to %s", output)

    if report.has_diagnostics:
        raise typer.Exit(1)


def list_rules_command(log_level: str = "WARNING") -> None:
    """CLI command implementation for listing rules."""
    setup_cli_logging(log_level)
    registry = RuleRegistry()
    registry.discover()
    OutputFormatter().format_rule_list(registry)


def list_languages_command(log_level: str = "WARNING") -> None:
    """CLI command implementation for listing languages."""
    setup_cli_logging(log_level)
    registry = LanguageRegistry()
    registry.discover()
    OutputFormatter().format_language_list(registry)
