"""Entity types persisted by the SFAS stores.

Investments, bonuses, and settings are independent aggregates with no
references between them. ``id`` and ``created_at`` are assigned by
storage; values built by callers leave them unset.

"""

from __future__ import annotations

import sqlite3
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any

from sfas.db.schema import SETTINGS_ID


def _parse_timestamp(raw: str | None) -> datetime | None:
    """Parse a SQLite ``CURRENT_TIMESTAMP`` value (UTC, no TZ suffix)."""
    if raw is None:
        return None
    return datetime.fromisoformat(raw).replace(tzinfo=UTC)


@dataclass
class Investment:
    """A savings position.

    Attributes:
        name: Display name.
        principal: Amount currently invested.
        annual_rate: Annual interest rate as a percentage.
        monthly_addition_enabled: Whether the monthly addition applies.
        id: Storage-assigned identifier.
        created_at: Creation time (UTC).

    """

    name: str
    principal: float
    annual_rate: float
    monthly_addition_enabled: bool = True
    id: int | None = None
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> Investment:
        return cls(
            id=row["id"],
            name=row["name"],
            principal=row["principal"],
            annual_rate=row["annual_rate"],
            monthly_addition_enabled=bool(row["monthly_addition_enabled"]),
            created_at=_parse_timestamp(row["created_at"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Bonus:
    """A one-off amount received in a calendar month.

    Attributes:
        name: Display name.
        amount: Monetary amount.
        month: Calendar month (1-12).
        id: Storage-assigned identifier.
        created_at: Creation time (UTC).

    """

    name: str
    amount: float
    month: int
    id: int | None = None
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> Bonus:
        return cls(
            id=row["id"],
            name=row["name"],
            amount=row["amount"],
            month=row["month"],
            created_at=_parse_timestamp(row["created_at"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Settings:
    """The settings singleton. ``id`` is always 1 once stored."""

    monthly_addition: float = 0.0
    id: int = SETTINGS_ID

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> Settings:
        return cls(id=row["id"], monthly_addition=row["monthly_addition"])

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
