"""
Database utilities package.

This package contains the storage edge:
- Persistence adapter (SQLite and PostgreSQL backends)
- Serialization of list-valued fields and flags
- Idempotent schema initialization and column migrations
"""
