"""
Integration test fixtures — PostgreSQL testcontainer and schema setup.

Provides a real PostgreSQL instance for the test session via testcontainers.
Each test gets an empty `widgets` table and its own PsycopgResource.
"""

from __future__ import annotations

from collections.abc import Iterator

import psycopg
import pytest
from testcontainers.postgres import PostgresContainer

from railcmd.adapters.psycopg_resource import PsycopgResource

DDL = """
CREATE TABLE widgets (
    id    SERIAL PRIMARY KEY,
    name  TEXT NOT NULL UNIQUE
);
"""

TRUNCATE_ALL = "TRUNCATE widgets RESTART IDENTITY;"


@pytest.fixture(scope="session")
def postgres_container() -> Iterator[PostgresContainer]:
    """Start a PostgreSQL container for the entire test session."""
    with PostgresContainer("postgres:16-alpine") as pg:
        dsn = pg.get_connection_url().replace("postgresql+psycopg2", "postgresql")
        with psycopg.connect(dsn) as conn:
            conn.execute(DDL)
            conn.commit()
        yield pg


@pytest.fixture()
def dsn(postgres_container: PostgresContainer) -> str:
    """Return a psycopg-compatible DSN and truncate all tables before each test."""
    connection_url = postgres_container.get_connection_url().replace(
        "postgresql+psycopg2", "postgresql"
    )
    with psycopg.connect(connection_url) as conn:
        conn.execute(TRUNCATE_ALL)
        conn.commit()
    return connection_url


@pytest.fixture()
def pg_resource(dsn: str) -> Iterator[PsycopgResource]:
    """An autocommit PsycopgResource, closed after the test."""
    resource = PsycopgResource.connect(dsn)
    yield resource
    resource.close()


def count_widgets(dsn: str) -> int:
    with psycopg.connect(dsn) as conn:
        row = conn.execute("SELECT count(*) FROM widgets").fetchone()
    assert row is not None
    return int(row[0])
