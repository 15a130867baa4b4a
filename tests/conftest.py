"""Shared fixtures for typeparam-lint tests."""

import logging

import pytest

from typeparam_lint.analysis.sink import CollectingSink


@pytest.fixture
def sink() -> CollectingSink:
    """Provide an open collecting sink."""
    return CollectingSink()


@pytest.fixture
def restore_logging():
    """Restore logger state touched by setup_logging()."""
    root = logging.getLogger()
    package = logging.getLogger("typeparam_lint")
    saved = (root.level, list(root.handlers), package.level, package.propagate)

    yield

    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    package.setLevel(saved[2])
    package.propagate = saved[3]
    package.handlers.clear()
