"""
Database Initialization Module

Handles idempotent database initialization. Safe to run on every startup:

- Fresh deploy: creates every table from the ORM definitions
- Restart with existing data: ``create_all`` skips existing tables
- Database from an older release: the column migrations below add what is
  missing; columns that already exist are skipped silently
"""

from typing import List, Tuple
import logging

from portfolio_api.db.adapter import StorageBackend
from portfolio_api.models import Base

# Get logger without configuring (let uvicorn handle logging configuration)
logger = logging.getLogger(__name__)


# (table, column definition) pairs added after the first schema version
COLUMN_MIGRATIONS: List[Tuple[str, str]] = [
    # Calendar events gained the full event editor
    ("calendar_events", "location TEXT"),
    ("calendar_events", "category TEXT DEFAULT 'Work'"),
    ("calendar_events", "attendees TEXT"),
    ("calendar_events", "reminder INTEGER DEFAULT 15"),
    ("calendar_events", "is_all_day INTEGER DEFAULT 0"),
    ("calendar_events", "recurrence TEXT DEFAULT 'none'"),
    ("calendar_events", "recurrence_end TEXT"),
    ("calendar_events", "show_as TEXT DEFAULT 'busy'"),
    ("calendar_events", "priority TEXT DEFAULT 'normal'"),
    ("calendar_events", "is_online INTEGER DEFAULT 0"),
    ("calendar_events", "meeting_link TEXT"),
    ("calendar_events", "attachments TEXT"),
    ("calendar_events", "modified_date TEXT"),
    # Project description extras
    ("projects", "idea TEXT"),
    ("projects", "notes TEXT"),
    ("projects", "career_goals TEXT"),
    ("projects", "future_work TEXT"),
    ("projects", "deadlines TEXT"),
    ("projects", "progress INTEGER DEFAULT 0"),
    # Staged career goals
    ("career_goals", "total_stages INTEGER DEFAULT 5"),
    ("career_goals", "current_stage INTEGER DEFAULT 0"),
    ("career_goals", "start_date TEXT"),
    ("career_goals", "stage_description TEXT"),
]


def run_column_migrations(storage: StorageBackend) -> int:
    """
    Apply every column migration, ignoring the ones already in place.

    Returns:
        int: Number of columns actually added
    """
    applied = 0
    for table, column_def in COLUMN_MIGRATIONS:
        if storage.execute_schema(f"ALTER TABLE {table} ADD COLUMN {column_def}"):
            logger.info(f"Added column to {table}: {column_def}")
            applied += 1
    return applied


def initialize_database(storage: StorageBackend) -> None:
    """
    Initialize the database.
    Idempotent - safe to run multiple times.

    Args:
        storage: Active storage backend
    """
    # Step 1: Create all base tables (idempotent)
    Base.metadata.create_all(bind=storage.engine)
    logger.info(f"Base database tables ensured on {storage.name}")

    # Step 2: Bring older databases up to date
    applied = run_column_migrations(storage)
    if applied:
        logger.info(f"Applied {applied} column migration(s)")
    else:
        logger.debug("Schema already up to date")
