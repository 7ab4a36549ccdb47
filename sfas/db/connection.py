"""SQLite connection management for SFAS.

Handles database initialization, schema creation, and connection
lifecycle. The default layout keeps a single database file under
the user's home directory::

    ~/.sfas/
      data/
        sfas.db

"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sfas.db.schema import ADDITIVE_MIGRATIONS, ALL_TABLES, SEED_SETTINGS

logger = logging.getLogger(__name__)

# Default data directory (can be overridden for testing)
_DEFAULT_DATA_DIR = Path.home() / ".sfas" / "data"
DEFAULT_DB_PATH = _DEFAULT_DATA_DIR / "sfas.db"


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Open a SQLite connection shared across request threads.

    The connection runs in autocommit mode so every statement is its
    own transaction, and may be used from any thread.

    Args:
        db_path: Path to the .db file. If None, uses in-memory database.

    Returns:
        Active SQLite connection with ``sqlite3.Row`` rows.

    """
    if db_path is None:
        target = ":memory:"
    else:
        path = Path(db_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        target = str(path)

    conn = sqlite3.connect(target, check_same_thread=False, isolation_level=None)
    conn.row_factory = sqlite3.Row
    if db_path is not None:
        conn.execute("PRAGMA journal_mode = WAL")
    return conn


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create tables, seed the settings row, and apply column migrations.

    Safe to run on every startup. Table creation and seeding errors
    propagate; a failed additive migration is logged and skipped.

    Args:
        conn: Active SQLite connection.

    Raises:
        sqlite3.Error: If a table cannot be created or seeded.

    """
    for ddl in ALL_TABLES:
        conn.execute(ddl)
    conn.execute(SEED_SETTINGS)

    for statement in ADDITIVE_MIGRATIONS:
        try:
            conn.execute(statement)
        except sqlite3.OperationalError as exc:
            # Column already present on anything but a legacy database
            logger.debug("Skipped migration %r: %s", statement, exc)
        else:
            logger.info("Applied migration: %s", statement)


def init_db(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Open the app-state database and make sure its schema exists.

    Args:
        db_path: Path to the .db file.
            Defaults to ~/.sfas/data/sfas.db.

    Returns:
        Initialized SQLite connection.

    """
    if db_path is None:
        db_path = DEFAULT_DB_PATH

    conn = _with_schema(get_connection(db_path))
    logger.info("Database initialized at %s", db_path)
    return conn


def init_memory_db() -> sqlite3.Connection:
    """Create an in-memory database with full schema.

    Useful for testing and ephemeral operations.

    Returns:
        In-memory SQLite connection with all tables created.

    """
    return _with_schema(get_connection(None))


def _with_schema(conn: sqlite3.Connection) -> sqlite3.Connection:
    try:
        ensure_schema(conn)
    except sqlite3.Error:
        conn.close()
        raise
    return conn


@contextmanager
def open_database(db_path: str | Path | None = None) -> Iterator[sqlite3.Connection]:
    """Hold the shared connection for the lifetime of a process.

    Args:
        db_path: Path to the .db file.
            Defaults to ~/.sfas/data/sfas.db.

    Yields:
        Initialized SQLite connection, closed when the block exits.

    """
    conn = init_db(db_path)
    try:
        yield conn
    finally:
        conn.close()
        logger.info("Database closed")
