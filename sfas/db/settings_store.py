"""Settings store — read and overwrite the settings singleton.

The row is seeded by :func:`sfas.db.connection.ensure_schema`; this
store never inserts or deletes it.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace

from sfas.db.schema import SETTINGS_ID
from sfas.models import Settings

logger = logging.getLogger(__name__)


class SettingsMissingError(sqlite3.DatabaseError):
    """The settings row is absent from an initialized database."""


class SettingsStore:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def get(self) -> Settings:
        """Return the settings singleton.

        Raises:
            SettingsMissingError: If the row does not exist.

        """
        row = self.conn.execute(
            "SELECT id, monthly_addition FROM settings WHERE id = ?",
            (SETTINGS_ID,),
        ).fetchone()
        if row is None:
            msg = f"settings row {SETTINGS_ID} not found"
            raise SettingsMissingError(msg)
        return Settings.from_row(row)

    def update(self, settings: Settings) -> None:
        """Overwrite ``monthly_addition``. The supplied ``id`` is ignored."""
        settings = replace(settings, id=SETTINGS_ID)
        self.conn.execute(
            "UPDATE settings SET monthly_addition = ? WHERE id = ?",
            (settings.monthly_addition, settings.id),
        )
        logger.info("Monthly addition set to %s", settings.monthly_addition)
