"""Workspace-level pytest configuration and fixtures."""

import pytest

from typeparam_lint.languages.registry import LanguageRegistry
from typeparam_lint.rules.registry import RuleRegistry


@pytest.fixture(autouse=True, scope="function")
def isolate_registries():
    """Automatically preserve and restore registry state for each test.

    LanguageRegistry and RuleRegistry are singletons with mutable global
    state; tests that clear or extend them must not leak into later tests.
    """
    saved_languages = LanguageRegistry.snapshot_state()
    saved_rules = RuleRegistry.snapshot_state()

    yield

    LanguageRegistry.restore_state(saved_languages)
    RuleRegistry.restore_state(saved_rules)
