"""
PostgreSQL transactional resource — psycopg (v3) adapter.

Adapter layer — implements the TransactionalResource port on top of a
psycopg connection. Each scope is a `connection.transaction()` block:

  1. BEGIN (or SAVEPOINT when already inside a transaction)
  2. command body runs its queries on the same connection
  3. COMMIT on normal exit, ROLLBACK when an exception leaves the block

    resource = PsycopgResource.connect(dsn)

    class CreateWidget(Command):
        def call(self, name: str) -> Result[int]:
            resource.connection.execute("INSERT INTO widgets (name) VALUES (%s)", (name,))
            return self.success(name)

    CreateWidget.declare_transactional({"call"}, resource=resource)
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any

import psycopg
import structlog

log = structlog.get_logger()


class PsycopgResource:
    """Transactional resource over a single psycopg connection."""

    def __init__(self, connection: psycopg.Connection[Any]) -> None:
        self._connection = connection

    @classmethod
    def connect(cls, dsn: str) -> PsycopgResource:
        """
        Open an autocommit connection so every scope is its own transaction.

        The caller owns the connection and should close it via `close()`.
        """
        connection = psycopg.connect(dsn, autocommit=True)
        log.debug("psycopg_resource.connected", server_version=connection.info.server_version)
        return cls(connection)

    @property
    def connection(self) -> psycopg.Connection[Any]:
        return self._connection

    @property
    def error_types(self) -> tuple[type[BaseException], ...]:
        return (psycopg.Error,)

    def begin_scope(self) -> AbstractContextManager[Any]:
        return self._connection.transaction()

    def close(self) -> None:
        self._connection.close()
