"""Shared pytest fixtures for SFAS tests."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from pathlib import Path

import pytest
from sfas.db.connection import init_memory_db


@pytest.fixture
def db() -> Iterator[sqlite3.Connection]:
    """Provide an initialized in-memory database, closed after the test."""
    conn = init_memory_db()
    yield conn
    conn.close()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Provide a database file location inside a nested temp directory."""
    return tmp_path / "data" / "sfas.db"
