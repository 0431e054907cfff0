"""
Workspace Repositories

Data access layer for ideas, notes, career goals, future work and deadlines.
Each is a plain instance of the base contract; only the field tables differ.
"""

from portfolio_api.db.adapter import StorageBackend
from portfolio_api.db.serialization import utc_now_iso
from portfolio_api.models.enums import DeadlineStatus, GoalType, IdeaCategory, Priority
from portfolio_api.models.workspace import CareerGoal, Deadline, FutureWork, Idea, Note
from portfolio_api.repositories.base import BaseRepository

NEWEST_FIRST = "created_date DESC, id DESC"


class IdeaRepository(BaseRepository[Idea]):
    label, plural = "idea", "ideas"
    order_by = NEWEST_FIRST
    insert_columns = ("user_email", "title", "content", "category", "created_date")
    update_columns = ("title", "content", "category")
    required = ("user_email",)
    defaults = {"category": IdeaCategory.GENERAL.value, "created_date": utc_now_iso}

    def __init__(self, storage: StorageBackend):
        super().__init__(Idea, storage)


class NoteRepository(BaseRepository[Note]):
    label, plural = "note", "notes"
    order_by = NEWEST_FIRST
    insert_columns = ("user_email", "title", "content", "created_date")
    update_columns = ("title", "content")
    required = ("user_email",)
    defaults = {"created_date": utc_now_iso}

    def __init__(self, storage: StorageBackend):
        super().__init__(Note, storage)


class CareerGoalRepository(BaseRepository[CareerGoal]):
    """Staged goals. Progress and stage counters are stored as given."""

    label, plural = "career goal", "career goals"
    order_by = NEWEST_FIRST
    insert_columns = (
        "user_email", "title", "description", "progress", "goal_type", "target_date",
        "total_stages", "current_stage", "start_date", "stage_description", "created_date",
    )
    update_columns = (
        "title", "description", "progress", "goal_type", "target_date",
        "total_stages", "current_stage", "start_date", "stage_description",
    )
    required = ("user_email",)
    defaults = {
        "progress": 0,
        "goal_type": GoalType.GENERAL.value,
        "total_stages": 5,
        "current_stage": 0,
        "created_date": utc_now_iso,
    }

    def __init__(self, storage: StorageBackend):
        super().__init__(CareerGoal, storage)


class FutureWorkRepository(BaseRepository[FutureWork]):
    label, plural = "future work", "future work"
    order_by = NEWEST_FIRST
    insert_columns = ("user_email", "title", "description", "priority", "timeline", "created_date")
    update_columns = ("title", "description", "priority", "timeline")
    required = ("user_email",)
    defaults = {"priority": Priority.MEDIUM.value, "created_date": utc_now_iso}

    def __init__(self, storage: StorageBackend):
        super().__init__(FutureWork, storage)


class DeadlineRepository(BaseRepository[Deadline]):
    """Deadlines list soonest first."""

    label, plural = "deadline", "deadlines"
    order_by = "due_date ASC, id ASC"
    insert_columns = (
        "user_email", "title", "description", "due_date", "priority", "status", "created_date",
    )
    update_columns = ("title", "description", "due_date", "priority", "status")
    required = ("user_email",)
    defaults = {
        "priority": Priority.MEDIUM.value,
        "status": DeadlineStatus.PENDING.value,
        "created_date": utc_now_iso,
    }

    def __init__(self, storage: StorageBackend):
        super().__init__(Deadline, storage)
