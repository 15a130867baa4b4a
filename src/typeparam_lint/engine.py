"""Lint engine: parses compilation units and runs rules over them."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import BaseModel, Field
from tree_sitter import Parser

from typeparam_lint.analysis.context import AnalysisContext
from typeparam_lint.analysis.sink import CollectingSink
from typeparam_lint.analysis.walker import CompilationUnit, SyntaxWalker
from typeparam_lint.config import LintConfig
from typeparam_lint.errors import ParserError
from typeparam_lint.languages.protocols import LanguageSupport
from typeparam_lint.languages.registry import LanguageNotFoundError, LanguageRegistry
from typeparam_lint.models import DiagnosticRecord
from typeparam_lint.rules.base import BaseRule
from typeparam_lint.rules.registry import RuleRegistry

logger = logging.getLogger(__name__)

_BYTE_ORDER_MARK = "\ufeff"

# Number of leading lines searched for a generated-code marker
_GENERATED_HEADER_LINES = 20

_GENERATED_SUFFIXES = (
    ".g.cs",
    ".g.i.cs",
    ".designer.cs",
    ".generated.cs",
    ".generated.ts",
)
_GENERATED_MARKERS = ("<auto-generated", "@generated")
_COMMENT_PREFIXES = ("//", "/*", "*", "#")


class SkippedFile(BaseModel):
    """A file the engine did not analyse, and why."""

    file_path: str
    reason: str


class LintReport(BaseModel):
    """Aggregated result of one lint session."""

    diagnostics: list[DiagnosticRecord] = Field(default_factory=list)
    files_analysed: int = 0
    skipped: list[SkippedFile] = Field(default_factory=list)

    @property
    def has_diagnostics(self) -> bool:
        """True if any rule reported a violation."""
        return bool(self.diagnostics)


def is_generated_code(file_path: str, source_code: str) -> bool:
    """Check whether a file is generated code.

    A file counts as generated if its name carries a generated-code suffix
    or its leading comment header contains an auto-generated marker.
    """
    if file_path.lower().endswith(_GENERATED_SUFFIXES):
        return True

    header = source_code.removeprefix(_BYTE_ORDER_MARK).splitlines()
    for line in header[:_GENERATED_HEADER_LINES]:
        stripped = line.strip()
        if not stripped:
            continue
        if not stripped.startswith(_COMMENT_PREFIXES):
            break
        if any(marker in stripped for marker in _GENERATED_MARKERS):
            return True
    return False


def deduplicate(records: Iterable[DiagnosticRecord]) -> list[DiagnosticRecord]:
    """Drop duplicate records and order the rest deterministically."""
    unique = dict.fromkeys(records)
    return sorted(unique, key=DiagnosticRecord.sort_key)


class LintEngine:
    """Runs registered rules over source code.

    Every public entry point is one analysis session: each enabled rule is
    initialised exactly once, the session context is frozen, and then the
    compilation units are analysed, in parallel for analyse_paths().
    """

    def __init__(
        self,
        config: LintConfig | None = None,
        rules: Sequence[BaseRule] | None = None,
        languages: LanguageRegistry | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config: Lint configuration (defaults apply if None)
            rules: Rules to run (enabled rules from the RuleRegistry if None)
            languages: Language registry (the discovered singleton if None)

        """
        self._config = config or LintConfig()

        if rules is None:
            rule_registry = RuleRegistry()
            rule_registry.discover()
            rules = rule_registry.enabled_rules()
        self._rules = tuple(rules)

        if languages is None:
            languages = LanguageRegistry()
            languages.discover()
        self._languages = languages

    @property
    def config(self) -> LintConfig:
        """The engine's configuration."""
        return self._config

    @property
    def rules(self) -> tuple[BaseRule, ...]:
        """Rules run by this engine."""
        return self._rules

    def start_session(self) -> AnalysisContext:
        """Initialise every rule against a fresh context and freeze it.

        Raises:
            RegistrationError: If a rule registers an invalid node action

        """
        context = AnalysisContext()
        for rule in self._rules:
            rule.initialize(context)
            logger.debug("Initialised rule %s", rule.id)
        context.freeze()
        return context

    def analyse_source(
        self, source_code: str, language: str, file_path: str = "<string>"
    ) -> list[DiagnosticRecord]:
        """Analyse a single source string.

        Args:
            source_code: Source code to analyse
            language: Canonical language name (e.g., 'csharp')
            file_path: Path reported in diagnostic locations

        Returns:
            Deduplicated, ordered diagnostics

        Raises:
            ParserError: If the language is not registered

        """
        context = self.start_session()
        unit = CompilationUnit(
            file_path=file_path,
            source_code=source_code,
            language=self._resolve_language(language).name,
        )
        return self.analyse_unit(context, unit)

    def analyse_file(self, path: Path | str) -> list[DiagnosticRecord]:
        """Analyse a single file, ignoring size and generated-code exclusions.

        Raises:
            ParserError: If the file cannot be read or its language is unknown

        """
        path = Path(path)
        language = self._language_for(path)
        try:
            source_code = self._read_source(path)
        except (OSError, UnicodeDecodeError) as e:
            raise ParserError(f"Failed to read {path}: {e}") from e

        context = self.start_session()
        unit = CompilationUnit(
            file_path=path.as_posix(), source_code=source_code, language=language.name
        )
        return self.analyse_unit(context, unit)

    def analyse_paths(self, paths: Sequence[Path | str]) -> LintReport:
        """Analyse files and directories.

        Directories are searched recursively for files with a registered
        extension. Units that cannot be analysed are recorded as skipped.

        Args:
            paths: Files and directories to analyse

        Returns:
            LintReport with deduplicated, ordered diagnostics

        """
        context = self.start_session()
        report = LintReport()

        units: list[CompilationUnit] = []
        for path in self._expand_paths(paths):
            unit = self._load_unit(path, report)
            if unit is not None:
                units.append(unit)

        logger.info(
            "Analysing %d files with %d rules (max_workers=%d)",
            len(units),
            len(self._rules),
            self._config.max_workers,
        )

        diagnostics: list[DiagnosticRecord] = []
        if self._config.max_workers == 1 or len(units) <= 1:
            for unit in units:
                diagnostics.extend(self.analyse_unit(context, unit))
        else:
            with ThreadPoolExecutor(max_workers=self._config.max_workers) as pool:
                for result in pool.map(
                    lambda u: self.analyse_unit(context, u), units
                ):
                    diagnostics.extend(result)

        report.diagnostics = deduplicate(diagnostics)
        report.files_analysed = len(units)
        logger.info(
            "Analysis completed: %d diagnostics in %d files (%d skipped)",
            len(report.diagnostics),
            report.files_analysed,
            len(report.skipped),
        )
        return report

    def analyse_unit(
        self, context: AnalysisContext, unit: CompilationUnit
    ) -> list[DiagnosticRecord]:
        """Parse one compilation unit and run the session's actions over it.

        Each call uses its own parser and sink, so units can be analysed
        concurrently against the same frozen context.

        Raises:
            ParserError: If the unit's language is not registered

        """
        language = self._resolve_language(unit.language)
        parser = Parser()
        parser.language = language.get_tree_sitter_language()
        tree = parser.parse(unit.source_bytes)
        if tree.root_node.has_error:
            logger.debug("Syntax errors in %s, analysing recovered tree", unit.file_path)

        sink = CollectingSink()
        try:
            SyntaxWalker(context, language).walk(tree.root_node, unit, sink)
        finally:
            sink.close()
        return deduplicate(sink.records)

    def _resolve_language(self, name: str) -> LanguageSupport:
        try:
            return self._languages.get(name)
        except LanguageNotFoundError as e:
            raise ParserError(
                f"Language '{name}' not supported. "
                f"Available: {self._languages.list_languages()}"
            ) from e

    def _language_for(self, path: Path) -> LanguageSupport:
        if self._config.language is not None:
            return self._resolve_language(self._config.language)
        try:
            return self._languages.get_by_extension(path.suffix)
        except LanguageNotFoundError as e:
            raise ParserError(
                f"Cannot detect language for file extension: {path.suffix}"
            ) from e

    def _is_excluded(self, path: Path) -> bool:
        posix = path.as_posix()
        return any(
            fnmatch.fnmatch(posix, pattern) for pattern in self._config.exclude_patterns
        )

    def _expand_paths(self, paths: Sequence[Path | str]) -> list[Path]:
        extensions = set(self._languages.list_extensions())
        expanded: list[Path] = []
        for raw in paths:
            path = Path(raw)
            if path.is_dir():
                expanded.extend(
                    sorted(
                        p
                        for p in path.rglob("*")
                        if p.is_file()
                        and (
                            self._config.language is not None
                            or p.suffix.lower() in extensions
                        )
                    )
                )
            else:
                expanded.append(path)
        return [p for p in dict.fromkeys(expanded) if not self._is_excluded(p)]

    def _read_source(self, path: Path) -> str:
        # The byte order mark is not part of the source text
        source_code = path.read_text(encoding=self._config.encoding)
        return source_code.removeprefix(_BYTE_ORDER_MARK)

    def _load_unit(self, path: Path, report: LintReport) -> CompilationUnit | None:
        file_path = path.as_posix()

        def skip(reason: str) -> None:
            logger.warning("Skipping %s: %s", file_path, reason)
            report.skipped.append(SkippedFile(file_path=file_path, reason=reason))

        try:
            language = self._language_for(path)
        except ParserError as e:
            skip(str(e))
            return None

        try:
            size = path.stat().st_size
        except OSError as e:
            skip(f"unreadable: {e}")
            return None
        if size > self._config.max_file_size:
            skip(f"file size {size} exceeds max_file_size {self._config.max_file_size}")
            return None

        try:
            source_code = self._read_source(path)
        except UnicodeDecodeError as e:
            skip(f"cannot decode as {self._config.encoding}: {e}")
            return None
        except OSError as e:
            skip(f"unreadable: {e}")
            return None

        if self._config.exclude_generated and is_generated_code(file_path, source_code):
            logger.debug("Skipping generated file %s", file_path)
            report.skipped.append(SkippedFile(file_path=file_path, reason="generated code"))
            return None

        return CompilationUnit(
            file_path=file_path, source_code=source_code, language=language.name
        )
