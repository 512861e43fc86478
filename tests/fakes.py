"""
Test doubles shared across the suite.

RecordingResource is an in-memory TransactionalResource that records every
begin/commit/rollback, so transactional commands can be tested without a
database.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


class FakeStoreError(Exception):
    """Native error type of the recording resource."""


class RecordingResource:
    """
    TransactionalResource double.

    Rows written through `insert` are staged and only become visible in
    `rows` when the scope commits.
    """

    error_types = (FakeStoreError,)

    def __init__(self) -> None:
        self.events: list[str] = []
        self.rows: list[object] = []
        self._staged: list[object] | None = None

    @contextmanager
    def begin_scope(self) -> Iterator[RecordingResource]:
        self.events.append("begin")
        self._staged = []
        try:
            yield self
        except BaseException:
            self.events.append("rollback")
            raise
        else:
            self.rows.extend(self._staged)
            self.events.append("commit")
        finally:
            self._staged = None

    def insert(self, row: object) -> None:
        if self._staged is None:
            raise FakeStoreError("insert outside of a transaction")
        self._staged.append(row)

    def fail(self, message: str = "constraint violated") -> None:
        raise FakeStoreError(message)
