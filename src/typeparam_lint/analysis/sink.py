"""Diagnostic sinks that receive records from rules."""

import threading
from typing import Protocol, runtime_checkable

from typeparam_lint.errors import SessionClosedError
from typeparam_lint.models import DiagnosticRecord


@runtime_checkable
class DiagnosticSink(Protocol):
    """Reporting channel handed to node actions."""

    def accept(self, record: DiagnosticRecord) -> None:
        """Take ownership of ``record``."""
        ...


class CollectingSink:
    """Sink that buffers records in memory.

    The engine hands one sink to each compilation unit. The lock still makes
    it safe to share one sink between threads.
    """

    def __init__(self) -> None:
        """Initialise an open, empty sink."""
        self._records: list[DiagnosticRecord] = []
        self._lock = threading.Lock()
        self._closed = False

    def accept(self, record: DiagnosticRecord) -> None:
        """Buffer ``record``.

        Raises:
            SessionClosedError: If the sink has been closed

        """
        with self._lock:
            if self._closed:
                raise SessionClosedError(
                    f"Cannot accept diagnostic {record.rule_id}: sink is closed"
                )
            self._records.append(record)

    def close(self) -> None:
        """Stop accepting records."""
        with self._lock:
            self._closed = True

    @property
    def closed(self) -> bool:
        """True once close() has been called."""
        return self._closed

    @property
    def records(self) -> list[DiagnosticRecord]:
        """Copy of the records accepted so far, in arrival order."""
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
