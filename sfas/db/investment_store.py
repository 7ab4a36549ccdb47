"""Investment store — SQLite CRUD for savings positions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sfas.models import Investment

if TYPE_CHECKING:
    import sqlite3

logger = logging.getLogger(__name__)


class InvestmentStore:
    """Owns every statement issued against the ``investments`` table.

    Storage errors propagate to the caller unchanged.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def list_all(self) -> list[Investment]:
        """Return all investments in storage order.

        Rows written before ``monthly_addition_enabled`` existed report
        it as enabled.
        """
        rows = self.conn.execute(
            "SELECT id, name, principal, annual_rate, "
            "COALESCE(monthly_addition_enabled, 1) AS monthly_addition_enabled, "
            "created_at FROM investments"
        ).fetchall()
        return [Investment.from_row(r) for r in rows]

    def create(self, investment: Investment) -> int:
        """Insert an investment and return its new ID.

        Any ``id`` or ``created_at`` on the value is ignored; storage
        assigns both.
        """
        rows = self.conn.execute(
            "INSERT INTO investments "
            "(name, principal, annual_rate, monthly_addition_enabled) "
            "VALUES (?, ?, ?, ?) RETURNING id",
            (
                investment.name,
                investment.principal,
                investment.annual_rate,
                investment.monthly_addition_enabled,
            ),
        ).fetchall()
        new_id = int(rows[0]["id"])
        logger.info("Created investment %d: %s", new_id, investment.name)
        return new_id

    def update(self, investment: Investment) -> None:
        """Overwrite the mutable fields of the investment with the same ID.

        Does nothing if no such row exists.

        Raises:
            ValueError: If the investment has no ID.

        """
        if investment.id is None:
            msg = "investment.id is required for update"
            raise ValueError(msg)

        self.conn.execute(
            "UPDATE investments SET name = ?, principal = ?, annual_rate = ?, "
            "monthly_addition_enabled = ? WHERE id = ?",
            (
                investment.name,
                investment.principal,
                investment.annual_rate,
                investment.monthly_addition_enabled,
                investment.id,
            ),
        )
        logger.debug("Updated investment %d", investment.id)

    def delete(self, investment_id: int) -> None:
        """Remove an investment. Missing IDs are ignored."""
        self.conn.execute("DELETE FROM investments WHERE id = ?", (investment_id,))
        logger.debug("Deleted investment %d", investment_id)
