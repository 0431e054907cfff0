"""
Repositories package.

This package contains all data access layer repositories following the Repository Pattern.
Each repository extends BaseRepository and talks to storage only through the
persistence adapter.

Usage:
    from portfolio_api.repositories import IdeaRepository
    from portfolio_api.core.dependencies import get_storage

    # In a FastAPI route with dependency injection:
    def list_ideas(email: str, storage: StorageBackend = Depends(get_storage)):
        return IdeaRepository(storage).list_by_owner(email)
"""

from portfolio_api.repositories.base import BaseRepository
from portfolio_api.repositories.user_repository import UserRepository
from portfolio_api.repositories.project_repository import (
    ProjectRepository,
    ColleagueRepository,
    MeetingRepository,
)
from portfolio_api.repositories.workspace_repository import (
    IdeaRepository,
    NoteRepository,
    CareerGoalRepository,
    FutureWorkRepository,
    DeadlineRepository,
)
from portfolio_api.repositories.calendar_repository import CalendarEventRepository
from portfolio_api.repositories.profile_repository import ProfileRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ProjectRepository",
    "ColleagueRepository",
    "MeetingRepository",
    "IdeaRepository",
    "NoteRepository",
    "CareerGoalRepository",
    "FutureWorkRepository",
    "DeadlineRepository",
    "CalendarEventRepository",
    "ProfileRepository",
]
