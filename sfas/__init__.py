"""SFAS — savings forecast account store.

Persists investments, monthly bonuses, and the settings singleton in
SQLite, and serves them over HTTP (:mod:`sfas.api`) or a stdin/stdout
sidecar (:mod:`sfas.main`).
"""

__version__ = "0.1.0"
