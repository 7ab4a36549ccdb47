"""SFAS sidecar entry point.

Serves the stores to a parent process over stdin/stdout using
newline-delimited JSON messages.

Protocol:
    Request:  {"id": "uuid", "method": "string", "params": {}}
    Response: {"id": "uuid", "result": {}}
    Error:    {"id": "uuid", "error": {"message": "string"}}
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
import traceback
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sfas import log_config
from sfas.config import get_config
from sfas.db.bonus_store import BonusStore
from sfas.db.connection import open_database
from sfas.db.investment_store import InvestmentStore
from sfas.db.settings_store import SettingsStore
from sfas.models import Bonus, Investment, Settings

if TYPE_CHECKING:
    import sqlite3


class _RecordEncoder(json.JSONEncoder):
    """JSON encoder that handles entity dataclasses and datetimes."""

    def default(self, o: Any) -> Any:
        """Convert non-serializable types to JSON-safe values."""
        if dataclasses.is_dataclass(o) and not isinstance(o, type):
            return dataclasses.asdict(o)
        if isinstance(o, datetime):
            return o.isoformat()
        return super().default(o)


def _build_handlers(
    conn: sqlite3.Connection,
    round_amounts: bool,
) -> dict[str, Callable[..., Any]]:
    investments = InvestmentStore(conn)
    bonuses = BonusStore(conn, round_amounts=round_amounts)
    settings = SettingsStore(conn)

    return {
        # Investments
        "investments.list": investments.list_all,
        "investments.create": lambda **p: {"id": investments.create(Investment(**p))},
        "investments.update": lambda **p: investments.update(Investment(**p)),
        "investments.delete": lambda id: investments.delete(id),  # noqa: A006
        # Bonuses
        "bonuses.list": bonuses.list_all,
        "bonuses.create": lambda **p: {"id": bonuses.create(Bonus(**p))},
        "bonuses.update": lambda **p: bonuses.update(Bonus(**p)),
        "bonuses.delete": lambda id: bonuses.delete(id),  # noqa: A006
        # Settings
        "settings.get": settings.get,
        "settings.update": lambda **p: settings.update(Settings(**p)),
    }


def dispatch(
    conn: sqlite3.Connection,
    method: str,
    params: dict[str, Any],
    *,
    round_amounts: bool = True,
) -> Any:
    """Route a method call to the matching store operation.

    Args:
        conn: Initialized database connection.
        method: The method name (e.g., "investments.list").
        params: Keyword arguments for the operation.
        round_amounts: Round bonus amounts to cents.

    Returns:
        The result of the operation.

    Raises:
        ValueError: If the method is not recognized.

    """
    handlers = _build_handlers(conn, round_amounts)
    if method not in handlers:
        msg = f"Unknown method: {method}"
        raise ValueError(msg)
    return handlers[method](**params)


def serve(conn: sqlite3.Connection, *, round_amounts: bool = True) -> None:
    """Run the message loop until stdin is closed."""
    for raw_line in sys.stdin:
        stripped = raw_line.strip()
        if not stripped:
            continue

        request: dict[str, Any] = {}
        try:
            request = json.loads(stripped)
            request_id = request.get("id", "unknown")
            method = request["method"]
            params = request.get("params", {})
            result = dispatch(conn, method, params, round_amounts=round_amounts)
            response: dict[str, Any] = {"id": request_id, "result": result}
        except Exception as exc:  # noqa: BLE001
            request_id = (
                request.get("id", "unknown") if isinstance(request, dict) else "unknown"
            )
            response = {
                "id": request_id,
                "error": {
                    "message": str(exc),
                    "traceback": traceback.format_exc(),
                },
            }
        sys.stdout.write(json.dumps(response, cls=_RecordEncoder) + "\n")
        sys.stdout.flush()


def main(argv: list[str] | None = None) -> None:
    """Open the database, serve requests from stdin, then close it."""
    config = get_config()
    parser = argparse.ArgumentParser(description="SFAS stdin/stdout sidecar")
    parser.add_argument("--db", default=str(config.DB_PATH), help="database file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    # Logs go to stderr; stdout carries the protocol
    log_config.setup(verbose=args.verbose, level=config.LOG_LEVEL)
    with open_database(args.db) as conn:
        serve(conn, round_amounts=config.ROUND_BONUS_AMOUNTS)


if __name__ == "__main__":
    main()
