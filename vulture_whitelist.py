"""Vulture whitelist — references that appear unused but are called dynamically.

Vulture scans for unreachable code.  Items listed here are known false
positives: console-script entry points, FastAPI route handlers
registered by decorator, pytest fixtures consumed via dependency
injection, and pydantic settings hooks.

Usage:
    vulture sfas tests vulture_whitelist.py
"""

# ── Entry points (called by console_scripts, not imported) ──
from sfas.api import serve  # noqa: F401
from sfas.main import main  # noqa: F401

# ── Route handlers (registered by @router decorators) ──
from sfas.api import (  # noqa: F401
    create_bonus,
    create_investment,
    delete_bonus,
    delete_investment,
    get_settings,
    health,
    list_bonuses,
    list_investments,
    update_bonus,
    update_investment,
    update_settings,
)

# ── Pytest fixtures (injected by pytest, never called directly) ──
from tests.conftest import db  # noqa: F401
from tests.conftest import db_path  # noqa: F401

# ── Pydantic hooks (invoked during model validation) ──
from sfas.config import AppConfig

AppConfig._port_in_range  # noqa: B018
AppConfig._expand_user  # noqa: B018
AppConfig.model_config  # noqa: B018
