"""
Project Repository

Data access layer for projects, their description sheet, colleagues and meetings.
"""

from typing import Any, Dict

from portfolio_api.core.exceptions import DatabaseException
from portfolio_api.db.adapter import StorageBackend
from portfolio_api.db.serialization import dump_list
from portfolio_api.models.project import DESCRIPTION_COLUMNS, Colleague, Meeting, Project
from portfolio_api.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for projects."""

    label = "project"
    plural = "projects"
    owner_column = "owner_email"
    order_by = "id ASC"
    insert_columns = ("name", "owner_email", "colleagues", "progress")
    update_columns = ("name", "colleagues", "progress")
    required = ("name", "owner_email")
    required_message = "Project name and owner email are required."
    defaults = {"colleagues": "[]", "progress": 0}
    update_defaults = {"progress": 0}

    def __init__(self, storage: StorageBackend):
        super().__init__(Project, storage)

    def prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        if values.get("colleagues") is not None:
            values["colleagues"] = dump_list(values["colleagues"])
        return values

    def get_description(self, id: int) -> Dict[str, Any]:
        """Full project row, or an empty dict when the project does not exist."""
        try:
            return self.get(id) or {}
        except DatabaseException as e:
            raise DatabaseException("Error fetching description.", e.details) from e

    def update_description(self, id: int, values: Dict[str, Any]) -> int:
        """Replace every description sheet column of a project."""
        try:
            return self._update(id, DESCRIPTION_COLUMNS, values)
        except DatabaseException as e:
            raise DatabaseException("Error updating description.", e.details) from e


class ColleagueRepository(BaseRepository[Colleague]):
    """Repository for colleagues, listed per project."""

    label = "colleague"
    plural = "colleagues"
    owner_column = "project_id"
    insert_columns = ("project_id", "name", "email")
    required = ("project_id",)

    def __init__(self, storage: StorageBackend):
        super().__init__(Colleague, storage)


class MeetingRepository(BaseRepository[Meeting]):
    """Repository for meetings, listed per colleague email."""

    label = "meeting"
    plural = "meetings"
    owner_column = "colleague_email"
    order_by = "date ASC, id ASC"
    insert_columns = ("colleague_email", "date", "description")
    required = ("colleague_email",)

    def __init__(self, storage: StorageBackend):
        super().__init__(Meeting, storage)
