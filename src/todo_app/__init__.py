"""Minimal task tracker: SQLite-backed store, FastAPI JSON API and a console client."""

__version__ = "0.1.0"
