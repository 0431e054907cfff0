"""
Dependency injection for FastAPI routes.

The storage backend is created once per process by the application lifespan
and stored on ``app.state``. Routes never reach for module globals: they ask
for the backend (or a repository built on it) through these dependencies,
which tests can override.
"""

from fastapi import Depends, Request

from portfolio_api.core.config import Settings
from portfolio_api.db.adapter import StorageBackend
from portfolio_api.repositories import (
    CalendarEventRepository,
    CareerGoalRepository,
    ColleagueRepository,
    DeadlineRepository,
    FutureWorkRepository,
    IdeaRepository,
    MeetingRepository,
    NoteRepository,
    ProfileRepository,
    ProjectRepository,
    UserRepository,
)
import logging

logger = logging.getLogger('CORE_DEPENDENCIES')


# ============================================================================
# Configuration Dependencies
# ============================================================================

def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


# ============================================================================
# Storage Dependencies
# ============================================================================

def get_storage(request: Request) -> StorageBackend:
    """
    Get the process-wide storage backend.

    Example:
        @router.get("/items/{email}")
        def get_items(email: str, storage: StorageBackend = Depends(get_storage)):
            return storage.fetch_many("SELECT * FROM items WHERE owner = ?", [email])
    """
    return request.app.state.storage


# ============================================================================
# Repository Dependencies
# ============================================================================

def get_user_repository(storage: StorageBackend = Depends(get_storage)) -> UserRepository:
    return UserRepository(storage)


def get_project_repository(storage: StorageBackend = Depends(get_storage)) -> ProjectRepository:
    return ProjectRepository(storage)


def get_colleague_repository(storage: StorageBackend = Depends(get_storage)) -> ColleagueRepository:
    return ColleagueRepository(storage)


def get_meeting_repository(storage: StorageBackend = Depends(get_storage)) -> MeetingRepository:
    return MeetingRepository(storage)


def get_idea_repository(storage: StorageBackend = Depends(get_storage)) -> IdeaRepository:
    return IdeaRepository(storage)


def get_note_repository(storage: StorageBackend = Depends(get_storage)) -> NoteRepository:
    return NoteRepository(storage)


def get_career_goal_repository(storage: StorageBackend = Depends(get_storage)) -> CareerGoalRepository:
    return CareerGoalRepository(storage)


def get_future_work_repository(storage: StorageBackend = Depends(get_storage)) -> FutureWorkRepository:
    return FutureWorkRepository(storage)


def get_deadline_repository(storage: StorageBackend = Depends(get_storage)) -> DeadlineRepository:
    return DeadlineRepository(storage)


def get_calendar_repository(storage: StorageBackend = Depends(get_storage)) -> CalendarEventRepository:
    return CalendarEventRepository(storage)


def get_profile_repository(storage: StorageBackend = Depends(get_storage)) -> ProfileRepository:
    """
    Get ProfileRepository instance.

    Example:
        @router.get("/profile/{email}")
        def get_profile(
            email: str,
            repo: ProfileRepository = Depends(get_profile_repository)
        ):
            return repo.get_by_email(email)
    """
    return ProfileRepository(storage)
