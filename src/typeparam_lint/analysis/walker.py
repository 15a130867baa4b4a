"""Syntax tree walker that dispatches registered node actions."""

import logging
from dataclasses import dataclass
from functools import cached_property

from tree_sitter import Node

from typeparam_lint.analysis.context import AnalysisContext
from typeparam_lint.analysis.sink import DiagnosticSink
from typeparam_lint.languages.protocols import LanguageSupport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompilationUnit:
    """One source file analysed independently of all others."""

    file_path: str
    source_code: str
    language: str

    @cached_property
    def source_bytes(self) -> bytes:
        """The source encoded once for parsing and token slicing."""
        return self.source_code.encode("utf-8")


class SyntaxWalker:
    """Walks one parsed tree and invokes the context's node actions.

    The walker holds no per-unit state, so one instance can serve many
    compilation units concurrently.
    """

    def __init__(self, context: AnalysisContext, language: LanguageSupport) -> None:
        """Initialise the walker.

        Args:
            context: Frozen session context holding the registered actions
            language: Language support used to categorise nodes

        """
        self._context = context
        self._language = language

    def walk(self, root: Node, unit: CompilationUnit, sink: DiagnosticSink) -> int:
        """Visit ``root`` in pre-order and dispatch matching nodes.

        Args:
            root: Root node of the parsed tree
            unit: The compilation unit the tree was parsed from
            sink: Reporting sink handed to every action

        Returns:
            Number of nodes dispatched to at least one action

        """
        actions = self._context.actions
        if not actions:
            return 0

        dispatched = 0
        stack = [root]
        while stack:
            node = stack.pop()
            category = self._language.categorise(node)
            if category is not None and category in actions:
                declaration = self._language.to_declaration(
                    node, unit.source_bytes, unit.file_path
                )
                for action in actions[category]:
                    action(declaration, sink)
                dispatched += 1
            stack.extend(reversed(node.children))

        logger.debug("Dispatched %d nodes in %s", dispatched, unit.file_path)
        return dispatched
