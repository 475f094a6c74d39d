"""Test suite for Volunteer Hub.

- unit/: domain rules and services over in-memory stores (no I/O)
- integration/: SQLAlchemy repositories on SQLite (aiosqlite) and
  cross-service flows
"""
