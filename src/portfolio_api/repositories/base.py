"""
Base repository with generic CRUD operations.

This module provides a generic BaseRepository class that implements the
create / list-by-owner / update-by-id / delete-by-id contract shared by every
resource. Subclasses only describe their table: which columns are written,
which are required, which defaults apply, and how lists are ordered.
All domain-specific repositories should extend this base class.
"""

from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, Type, TypeVar, Union
import logging

from portfolio_api.core.exceptions import DatabaseException, ValidationException
from portfolio_api.db.adapter import StorageBackend
from portfolio_api.models.base import Base

logger = logging.getLogger(__name__)


# Generic type bound to SQLAlchemy Base
ModelType = TypeVar("ModelType", bound=Base)

Default = Union[Any, Callable[[], Any]]


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository with CRUD operations.

    Type Parameters:
        ModelType: The SQLAlchemy model whose table this repository manages

    Class attributes describe the resource:
        label / plural: Names used in error messages ("idea" / "ideas")
        owner_column: Column used by ``list_by_owner``
        order_by: ORDER BY clause for ``list_by_owner``
        insert_columns: Columns written by ``create``
        update_columns: Columns replaced by ``update_by_id``
        required: Columns that must be non-empty on create
        defaults: Column -> value (or zero-arg callable) applied on create
            when the supplied value is missing or falsy
        update_defaults: Same as ``defaults`` but applied on update

    Example:
        class IdeaRepository(BaseRepository[Idea]):
            label, plural = "idea", "ideas"
            insert_columns = ("user_email", "title", "content", "category", "created_date")
            update_columns = ("title", "content", "category")
            defaults = {"category": "general", "created_date": utc_now_iso}

            def __init__(self, storage: StorageBackend):
                super().__init__(Idea, storage)
    """

    label = "record"
    plural = "records"
    owner_column = "user_email"
    order_by = "id ASC"
    insert_columns: Sequence[str] = ()
    update_columns: Sequence[str] = ()
    required: Sequence[str] = ()
    required_message: Optional[str] = None
    defaults: Dict[str, Default] = {}
    update_defaults: Dict[str, Default] = {}

    def __init__(self, model: Type[ModelType], storage: StorageBackend):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class
            storage: Active storage backend
        """
        self.model = model
        self.storage = storage
        self.table = model.__tablename__

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Coerce values into their stored form (flags, serialized lists)."""
        return values

    def to_record(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Shape a stored row for callers."""
        return row

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _apply_defaults(values: Dict[str, Any], defaults: Dict[str, Default]) -> Dict[str, Any]:
        for column, default in defaults.items():
            if not values.get(column):
                values[column] = default() if callable(default) else default
        return values

    def _validate(self, values: Dict[str, Any]) -> None:
        missing = [column for column in self.required if not values.get(column)]
        if missing:
            message = self.required_message or f"{', '.join(missing)} required for {self.label}."
            raise ValidationException(message, {"missing": missing})

    def _insert(self, columns: Sequence[str], values: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it with its generated id."""
        record = {column: values.get(column) for column in columns}
        placeholders = ", ".join("?" for _ in columns)
        statement = f"INSERT INTO {self.table} ({', '.join(columns)}) VALUES ({placeholders})"
        try:
            result = self.storage.execute(statement, [record[column] for column in columns])
        except DatabaseException as e:
            raise DatabaseException(f"Error creating {self.label}.", e.details) from e

        logger.info(f"Created {self.label} #{result.last_id}")
        return {"id": result.last_id, **record}

    def _update(self, id: int, columns: Sequence[str], values: Dict[str, Any]) -> int:
        """Replace ``columns`` of one row; missing values are written as NULL."""
        assignments = ", ".join(f"{column} = ?" for column in columns)
        statement = f"UPDATE {self.table} SET {assignments} WHERE id = ?"
        args = [values.get(column) for column in columns] + [id]
        try:
            result = self.storage.execute(statement, args)
        except DatabaseException as e:
            raise DatabaseException(f"Error updating {self.label}.", e.details) from e

        logger.debug(f"Updated {self.label} #{id}: {result.rowcount} row(s)")
        return result.rowcount

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new record.

        Args:
            values: Supplied fields; absent ones receive their defaults

        Returns:
            The effective record including the generated ``id``

        Raises:
            ValidationException: If a required field is missing
        """
        values = dict(values)
        self._validate(values)
        values = self.prepare(self._apply_defaults(values, self.defaults))
        return self._insert(self.insert_columns, values)

    def get(self, id: int) -> Optional[Dict[str, Any]]:
        """
        Get a single record by ID.

        Returns:
            Record or None if not found
        """
        try:
            row = self.storage.fetch_one(f"SELECT * FROM {self.table} WHERE id = ?", [id])
        except DatabaseException as e:
            raise DatabaseException(f"Error fetching {self.label}.", e.details) from e
        return self.to_record(row) if row is not None else None

    def list_by_owner(self, owner: Any) -> List[Dict[str, Any]]:
        """
        Get every record owned by ``owner``, in the resource's order.

        Returns:
            List of records (empty when nothing matches)
        """
        statement = (
            f"SELECT * FROM {self.table} WHERE {self.owner_column} = ? ORDER BY {self.order_by}"
        )
        try:
            rows = self.storage.fetch_many(statement, [owner])
        except DatabaseException as e:
            raise DatabaseException(f"Error fetching {self.plural}.", e.details) from e
        return [self.to_record(row) for row in rows]

    def update_by_id(self, id: int, values: Dict[str, Any]) -> int:
        """
        Replace the mutable fields of a record.

        Callers must send the full record: unset fields are written as NULL.

        Returns:
            Number of rows affected (0 if the id does not exist)
        """
        values = self.prepare(self._apply_defaults(dict(values), self.update_defaults))
        return self._update(id, self.update_columns, values)

    def delete_by_id(self, id: int) -> int:
        """
        Delete a record by ID.

        Returns:
            Number of rows affected (0 if the id does not exist)
        """
        try:
            result = self.storage.execute(f"DELETE FROM {self.table} WHERE id = ?", [id])
        except DatabaseException as e:
            raise DatabaseException(f"Error deleting {self.label}.", e.details) from e

        if result.rowcount:
            logger.info(f"Deleted {self.label} #{id}")
        return result.rowcount
