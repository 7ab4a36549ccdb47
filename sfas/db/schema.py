"""SQLite schema definitions for SFAS.

Contains DDL statements for the app-state tables:
- investments: Savings positions with principal and annual rate
- bonuses: One-off amounts applied in a given calendar month
- settings: Singleton row holding the monthly addition

Column names and types are a storage contract; external tools read
the database file directly.

"""

from __future__ import annotations

# Fixed primary key of the settings singleton row
SETTINGS_ID = 1

# ── Investments ──

CREATE_INVESTMENTS = """
CREATE TABLE IF NOT EXISTS investments (
    id                        INTEGER PRIMARY KEY AUTOINCREMENT,
    name                      TEXT NOT NULL,
    principal                 REAL NOT NULL,
    annual_rate               REAL NOT NULL,
    monthly_addition_enabled  BOOLEAN DEFAULT 1,
    created_at                DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""

# ── Bonuses ──

CREATE_BONUSES = """
CREATE TABLE IF NOT EXISTS bonuses (
    id           INTEGER PRIMARY KEY AUTOINCREMENT,
    name         TEXT NOT NULL,
    amount       REAL NOT NULL,
    month        INTEGER NOT NULL,
    created_at   DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""

# ── Settings ──

CREATE_SETTINGS = """
CREATE TABLE IF NOT EXISTS settings (
    id                INTEGER PRIMARY KEY,
    monthly_addition  REAL DEFAULT 0
);
"""

SEED_SETTINGS = (
    f"INSERT OR IGNORE INTO settings (id, monthly_addition) VALUES ({SETTINGS_ID}, 0)"
)

# All DDL statements in creation order
ALL_TABLES: list[str] = [
    CREATE_INVESTMENTS,
    CREATE_BONUSES,
    CREATE_SETTINGS,
]

# Additive column migrations. Each fails harmlessly once applied.
ADDITIVE_MIGRATIONS: list[str] = [
    "ALTER TABLE investments ADD COLUMN monthly_addition_enabled BOOLEAN DEFAULT 1",
]
