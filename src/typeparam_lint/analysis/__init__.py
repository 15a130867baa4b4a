"""Analysis session plumbing: registration, traversal and reporting."""

from typeparam_lint.analysis.context import AnalysisContext, NodeAction
from typeparam_lint.analysis.reporting import report
from typeparam_lint.analysis.sink import CollectingSink, DiagnosticSink
from typeparam_lint.analysis.walker import CompilationUnit, SyntaxWalker

__all__ = [
    "AnalysisContext",
    "CollectingSink",
    "CompilationUnit",
    "DiagnosticSink",
    "NodeAction",
    "SyntaxWalker",
    "report",
]
