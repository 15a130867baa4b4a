"""Language registry for typeparam-lint.

Provides a singleton registry holding the built-in languages plus any
language plugins discovered through entry points.
"""

import logging
from importlib.metadata import entry_points
from typing import Any, TypedDict

from typeparam_lint.languages.protocols import LanguageSupport

logger = logging.getLogger(__name__)

LANGUAGE_ENTRY_POINT_GROUP = "typeparam_lint.languages"


class LanguageNotFoundError(Exception):
    """Raised when a requested language is not registered."""

    pass


class LanguageAlreadyRegisteredError(Exception):
    """Raised when attempting to register a language that already exists."""

    pass


class LanguageRegistryState(TypedDict):
    """State snapshot for LanguageRegistry (used for test isolation)."""

    registry: dict[str, LanguageSupport]
    extension_map: dict[str, str]
    discovered: bool


class LanguageRegistry:
    """Singleton registry for language support plugins.

    Registers the built-in languages and discovers third-party plugins via
    entry points, then provides lookup by language name or file extension.
    """

    _instance: "LanguageRegistry | None" = None
    _registry: dict[str, LanguageSupport]
    _extension_map: dict[str, str]  # ".ts" → "typescript"
    _discovered: bool

    def __new__(cls, *args: Any, **kwargs: Any) -> "LanguageRegistry":  # noqa: ANN401
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registry = {}
            cls._instance._extension_map = {}
            cls._instance._discovered = False
        return cls._instance

    def discover(self) -> None:
        """Register built-in languages and plugins from entry points.

        Entry point group: typeparam_lint.languages

        Languages are validated by calling get_tree_sitter_language() to ensure
        the tree-sitter binding is actually installed. Languages with missing
        bindings are skipped.
        """
        if self._discovered:
            return

        # Deferred to avoid a cycle: the built-in supports import languages.base
        from typeparam_lint.languages.csharp import CSharpLanguageSupport
        from typeparam_lint.languages.typescript import (
            TsxLanguageSupport,
            TypeScriptLanguageSupport,
        )

        for language_class in (
            CSharpLanguageSupport,
            TypeScriptLanguageSupport,
            TsxLanguageSupport,
        ):
            self._register_if_available(language_class)

        for ep in entry_points(group=LANGUAGE_ENTRY_POINT_GROUP):
            try:
                language_class = ep.load()
            except ImportError as e:
                logger.warning("Skipping language plugin '%s': %s", ep.name, e)
                continue
            self._register_if_available(language_class)

        self._discovered = True
        logger.debug("Discovered languages: %s", self.list_languages())

    def _register_if_available(self, language_class: type[Any]) -> None:
        """Register a language unless it is already known or its binding is missing."""
        language = language_class()
        if self.is_registered(language.name):
            return
        try:
            # This triggers the deferred import in get_tree_sitter_language()
            language.get_tree_sitter_language()
        except ImportError as e:
            logger.warning(
                "Skipping language '%s': tree-sitter binding unavailable (%s)",
                language.name,
                e,
            )
            return
        self.register(language)

    def register(self, language: LanguageSupport) -> None:
        """Register a language support instance.

        Args:
            language: LanguageSupport implementation

        Raises:
            LanguageAlreadyRegisteredError: If language already registered

        """
        if language.name in self._registry:
            raise LanguageAlreadyRegisteredError(
                f"Language '{language.name}' is already registered"
            )

        self._registry[language.name] = language
        for ext in language.file_extensions:
            self._extension_map[ext] = language.name

    def get(self, name: str) -> LanguageSupport:
        """Get a language by name.

        Args:
            name: Canonical language name (e.g., 'csharp', 'typescript')

        Returns:
            LanguageSupport implementation

        Raises:
            LanguageNotFoundError: If language not registered

        """
        if name not in self._registry:
            raise LanguageNotFoundError(f"Language '{name}' not registered")
        return self._registry[name]

    def get_by_extension(self, extension: str) -> LanguageSupport:
        """Get a language by file extension.

        Args:
            extension: File extension including dot (e.g., '.cs', '.ts')

        Returns:
            LanguageSupport implementation

        Raises:
            LanguageNotFoundError: If no language supports the extension

        """
        extension = extension.lower()
        if extension not in self._extension_map:
            raise LanguageNotFoundError(
                f"No language registered for extension '{extension}'"
            )
        return self._registry[self._extension_map[extension]]

    def list_languages(self) -> list[str]:
        """List all registered language names."""
        return list(self._registry.keys())

    def list_extensions(self) -> list[str]:
        """List all supported file extensions."""
        return list(self._extension_map.keys())

    def is_registered(self, name: str) -> bool:
        """Check if a language is registered."""
        return name in self._registry

    def clear(self) -> None:
        """Clear all registered languages (for testing)."""
        self._registry.clear()
        self._extension_map.clear()
        self._discovered = False

    @classmethod
    def snapshot_state(cls) -> LanguageRegistryState:
        """Capture current state for later restoration (test isolation)."""
        instance = cls()
        return {
            "registry": instance._registry.copy(),
            "extension_map": instance._extension_map.copy(),
            "discovered": instance._discovered,
        }

    @classmethod
    def restore_state(cls, state: LanguageRegistryState) -> None:
        """Restore state from a previously captured snapshot."""
        instance = cls()
        instance._registry = state["registry"].copy()
        instance._extension_map = state["extension_map"].copy()
        instance._discovered = state["discovered"]
