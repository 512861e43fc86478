"""
Shared test fixtures for the railcmd test suite.

Provides a fresh in-memory transactional resource per test and makes sure
no process-wide default resource leaks from one test to the next.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from railcmd.transaction import clear_default_resource
from tests.fakes import RecordingResource


@pytest.fixture()
def resource() -> RecordingResource:
    """A fresh recording resource for each test."""
    return RecordingResource()


@pytest.fixture(autouse=True)
def _reset_default_resource() -> Iterator[None]:
    yield
    clear_default_resource()
