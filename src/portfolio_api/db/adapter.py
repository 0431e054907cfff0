"""
Persistence adapter.

Every repository talks to storage through one small contract:

- ``execute``    insert/update/delete, returns the generated id and rowcount
- ``fetch_one``  a single row as a dict, or None when nothing matches
- ``fetch_many`` an ordered list of row dicts, possibly empty

Statements are written once with positional ``?`` placeholders. Each backend
owns the syntax differences of its engine: bind parameter rendering, how the
generated primary key is retrieved, auto-increment DDL, and how the driver
reports uniqueness violations and already-applied schema changes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

from sqlalchemy import text
from sqlalchemy.engine import CursorResult, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from portfolio_api.core.exceptions import DatabaseException, DuplicateException

logger = logging.getLogger(__name__)

PLACEHOLDER = "?"


@dataclass(frozen=True)
class ExecuteResult:
    """Outcome of a write statement."""

    last_id: Optional[int]
    rowcount: int


class StorageBackend(ABC):
    """
    Engine-agnostic storage contract backed by an SQLAlchemy engine.

    Subclasses implement the dialect hooks; callers only ever use
    ``execute``, ``fetch_one``, ``fetch_many`` and ``execute_schema``.
    """

    name = "abstract"

    def __init__(self, engine: Engine):
        self.engine = engine

    # ------------------------------------------------------------------
    # Dialect hooks
    # ------------------------------------------------------------------

    def translate(self, statement: str, args: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
        """
        Rewrite positional placeholders into named bind parameters.

        Args:
            statement: SQL with ``?`` placeholders
            args: Values in placeholder order

        Returns:
            Tuple of (SQL with ``:p0``-style binds, bind parameter dict)

        Raises:
            ValueError: If the number of args does not match the placeholders
        """
        parts = statement.split(PLACEHOLDER)
        if len(parts) - 1 != len(args):
            raise ValueError(
                f"Statement expects {len(parts) - 1} argument(s), got {len(args)}"
            )

        sql = parts[0]
        params: Dict[str, Any] = {}
        for index, (value, tail) in enumerate(zip(args, parts[1:])):
            name = f"p{index}"
            params[name] = value
            sql += f":{name}{tail}"
        return sql, params

    def translate_schema(self, statement: str) -> str:
        return statement

    def prepare_insert(self, sql: str) -> str:
        return sql

    @abstractmethod
    def inserted_id(self, result: CursorResult) -> Optional[int]:
        """Return the primary key generated by an INSERT."""

    @abstractmethod
    def is_unique_violation(self, error: SQLAlchemyError) -> bool:
        """True when the driver rejected a write on a unique constraint."""

    @abstractmethod
    def is_duplicate_schema(self, error: SQLAlchemyError) -> bool:
        """True when a schema statement failed only because it was already applied."""

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def execute(self, statement: str, args: Sequence[Any] = ()) -> ExecuteResult:
        """
        Run an INSERT, UPDATE or DELETE in its own transaction.

        Raises:
            DuplicateException: On a uniqueness violation
            DatabaseException: On any other storage failure
        """
        sql, params = self.translate(statement, args)
        is_insert = statement.lstrip().upper().startswith("INSERT")
        if is_insert:
            sql = self.prepare_insert(sql)

        try:
            with self.engine.begin() as conn:
                result = conn.execute(text(sql), params)
                rowcount = result.rowcount
                last_id = self.inserted_id(result) if is_insert else None
        except IntegrityError as e:
            if self.is_unique_violation(e):
                raise DuplicateException(
                    "Record", "unique key", None, message="Record already exists."
                ) from e
            logger.error(f"Integrity error on {self.name}: {e.orig}")
            raise DatabaseException("Storage operation failed.", {"error": str(e.orig)}) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error on {self.name}: {e}")
            raise DatabaseException("Storage operation failed.", {"error": str(e)}) from e

        return ExecuteResult(last_id=last_id, rowcount=rowcount if rowcount >= 0 else 0)

    def fetch_one(self, statement: str, args: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        """Return the first matching row, or None."""
        sql, params = self.translate(statement, args)
        try:
            with self.engine.connect() as conn:
                row = conn.execute(text(sql), params).mappings().first()
        except SQLAlchemyError as e:
            logger.error(f"Database error on {self.name}: {e}")
            raise DatabaseException("Storage operation failed.", {"error": str(e)}) from e
        return dict(row) if row is not None else None

    def fetch_many(self, statement: str, args: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Return all matching rows in statement order."""
        sql, params = self.translate(statement, args)
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(text(sql), params).mappings().all()
        except SQLAlchemyError as e:
            logger.error(f"Database error on {self.name}: {e}")
            raise DatabaseException("Storage operation failed.", {"error": str(e)}) from e
        return [dict(row) for row in rows]

    def execute_schema(self, statement: str) -> bool:
        """
        Apply an idempotent schema statement.

        Returns:
            bool: True if applied, False if it was already in place
        """
        sql = self.translate_schema(statement)
        try:
            with self.engine.begin() as conn:
                conn.execute(text(sql))
        except SQLAlchemyError as e:
            if self.is_duplicate_schema(e):
                logger.debug(f"Schema statement already applied: {statement}")
                return False
            logger.error(f"Schema statement failed on {self.name}: {e}")
            raise DatabaseException("Schema update failed.", {"error": str(e)}) from e
        return True

    def health(self) -> Dict[str, Any]:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
            return {"status": "healthy", "backend": self.name, "pool": self.engine.pool.status()}
        except SQLAlchemyError as e:
            return {"status": "unhealthy", "backend": self.name, "error": str(e)}

    def dispose(self) -> None:
        self.engine.dispose()


class SQLiteBackend(StorageBackend):
    """File-based engine used for development and tests."""

    name = "sqlite"

    def inserted_id(self, result: CursorResult) -> Optional[int]:
        return result.lastrowid

    def is_unique_violation(self, error: SQLAlchemyError) -> bool:
        return isinstance(error, IntegrityError) and "UNIQUE constraint failed" in str(error.orig)

    def is_duplicate_schema(self, error: SQLAlchemyError) -> bool:
        message = str(getattr(error, "orig", error)).lower()
        return "duplicate column" in message or "already exists" in message


class PostgresBackend(StorageBackend):
    """Client-server engine used in production."""

    name = "postgresql"

    UNIQUE_VIOLATION = "23505"
    DUPLICATE_COLUMN = "42701"
    DUPLICATE_TABLE = "42P07"

    @staticmethod
    def _sqlstate(error: SQLAlchemyError) -> Optional[str]:
        orig = getattr(error, "orig", None)
        return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)

    def translate_schema(self, statement: str) -> str:
        statement = statement.replace("INTEGER PRIMARY KEY AUTOINCREMENT", "SERIAL PRIMARY KEY")
        return statement.replace("AUTOINCREMENT", "")

    def prepare_insert(self, sql: str) -> str:
        if "RETURNING" in sql.upper():
            return sql
        return sql.rstrip().rstrip(";") + " RETURNING id"

    def inserted_id(self, result: CursorResult) -> Optional[int]:
        row = result.first()
        return row[0] if row is not None else None

    def is_unique_violation(self, error: SQLAlchemyError) -> bool:
        return self._sqlstate(error) == self.UNIQUE_VIOLATION

    def is_duplicate_schema(self, error: SQLAlchemyError) -> bool:
        if self._sqlstate(error) in (self.DUPLICATE_COLUMN, self.DUPLICATE_TABLE):
            return True
        return "already exists" in str(getattr(error, "orig", error)).lower()
