"""Bonus store — SQLite CRUD for monthly bonuses.

Amounts go through :func:`sfas.precision.round_money` on the way in
and out unless the store is built with ``round_amounts=False``, in
which case they are kept exactly as the caller supplied them.

"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from sfas.models import Bonus
from sfas.precision import round_money

if TYPE_CHECKING:
    import sqlite3

logger = logging.getLogger(__name__)


class BonusStore:
    """Owns every statement issued against the ``bonuses`` table."""

    def __init__(self, conn: sqlite3.Connection, *, round_amounts: bool = True) -> None:
        self.conn = conn
        self.round_amounts = round_amounts

    def _amount(self, amount: float) -> float:
        return round_money(amount) if self.round_amounts else amount

    def list_all(self) -> list[Bonus]:
        """Return all bonuses ordered by month ascending."""
        rows = self.conn.execute(
            "SELECT id, name, amount, month, created_at FROM bonuses ORDER BY month ASC"
        ).fetchall()
        bonuses = [Bonus.from_row(r) for r in rows]
        if self.round_amounts:
            bonuses = [replace(b, amount=round_money(b.amount)) for b in bonuses]
        return bonuses

    def create(self, bonus: Bonus) -> int:
        """Insert a bonus and return its new ID."""
        rows = self.conn.execute(
            "INSERT INTO bonuses (name, amount, month) VALUES (?, ?, ?) RETURNING id",
            (bonus.name, self._amount(bonus.amount), bonus.month),
        ).fetchall()
        new_id = int(rows[0]["id"])
        logger.info("Created bonus %d: %s (month %d)", new_id, bonus.name, bonus.month)
        return new_id

    def update(self, bonus: Bonus) -> None:
        """Overwrite the bonus with the same ID. Missing IDs are ignored.

        Raises:
            ValueError: If the bonus has no ID.

        """
        if bonus.id is None:
            msg = "bonus.id is required for update"
            raise ValueError(msg)

        self.conn.execute(
            "UPDATE bonuses SET name = ?, amount = ?, month = ? WHERE id = ?",
            (bonus.name, self._amount(bonus.amount), bonus.month, bonus.id),
        )
        logger.debug("Updated bonus %d", bonus.id)

    def delete(self, bonus_id: int) -> None:
        """Remove a bonus. Missing IDs are ignored."""
        self.conn.execute("DELETE FROM bonuses WHERE id = ?", (bonus_id,))
        logger.debug("Deleted bonus %d", bonus_id)
