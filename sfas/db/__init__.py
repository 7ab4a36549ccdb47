"""SFAS database layer.

SQLite holds all app-state: investments, bonuses, and the settings
singleton. One connection is opened at process start, shared by every
store, and closed at shutdown.
"""
