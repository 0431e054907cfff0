"""
Projects API

Projects, the project description sheet, colleagues and meetings.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from portfolio_api.core.dependencies import (
    get_colleague_repository,
    get_meeting_repository,
    get_project_repository,
)
from portfolio_api.repositories.project_repository import (
    ColleagueRepository,
    MeetingRepository,
    ProjectRepository,
)
from portfolio_api.schemas.common import DeletedResponse, UpdatedResponse
from portfolio_api.schemas.project import (
    ColleagueCreate,
    MeetingCreate,
    ProjectCreate,
    ProjectDescriptionUpdate,
    ProjectUpdate,
)


projects_api_router = APIRouter(prefix="/projects", tags=["Projects"])
colleagues_api_router = APIRouter(prefix="/colleagues", tags=["Projects"])
meetings_api_router = APIRouter(prefix="/meetings", tags=["Meetings"])


# ============================================================================
# Projects
# ============================================================================

@projects_api_router.post("")
def create_project(request: ProjectCreate, repo: ProjectRepository = Depends(get_project_repository)):
    """Returns ``{id, name, owner_email, colleagues, progress}`` with defaults applied."""
    return repo.create(request.model_dump())


@projects_api_router.get("/{email}", response_model=List[Dict[str, Any]])
def list_projects(email: str, repo: ProjectRepository = Depends(get_project_repository)):
    return repo.list_by_owner(email)


@projects_api_router.put("/{project_id}", response_model=UpdatedResponse)
def update_project(
    project_id: int,
    request: ProjectUpdate,
    repo: ProjectRepository = Depends(get_project_repository)
):
    return {"updated": repo.update_by_id(project_id, request.model_dump())}


@projects_api_router.delete("/{project_id}", response_model=DeletedResponse)
def delete_project(project_id: int, repo: ProjectRepository = Depends(get_project_repository)):
    return {"deleted": repo.delete_by_id(project_id)}


# ============================================================================
# Description sheet
# ============================================================================

@projects_api_router.get("/{project_id}/description")
def get_description(project_id: int, repo: ProjectRepository = Depends(get_project_repository)):
    """The full project row, or ``{}`` for an unknown project."""
    return repo.get_description(project_id)


@projects_api_router.put("/{project_id}/description", response_model=UpdatedResponse)
def update_description(
    project_id: int,
    request: ProjectDescriptionUpdate,
    repo: ProjectRepository = Depends(get_project_repository)
):
    return {"updated": repo.update_description(project_id, request.to_columns())}


# ============================================================================
# Colleagues
# ============================================================================

@projects_api_router.post("/{project_id}/colleagues")
def add_colleague(
    project_id: int,
    request: ColleagueCreate,
    repo: ColleagueRepository = Depends(get_colleague_repository)
):
    return repo.create(dict(request.model_dump(), project_id=project_id))


@projects_api_router.get("/{project_id}/colleagues", response_model=List[Dict[str, Any]])
def list_colleagues(project_id: int, repo: ColleagueRepository = Depends(get_colleague_repository)):
    return repo.list_by_owner(project_id)


@colleagues_api_router.delete("/{colleague_id}", response_model=DeletedResponse)
def delete_colleague(colleague_id: int, repo: ColleagueRepository = Depends(get_colleague_repository)):
    return {"deleted": repo.delete_by_id(colleague_id)}


# ============================================================================
# Meetings
# ============================================================================

@meetings_api_router.post("")
def create_meeting(request: MeetingCreate, repo: MeetingRepository = Depends(get_meeting_repository)):
    return repo.create(request.model_dump())


@meetings_api_router.get("/{email}", response_model=List[Dict[str, Any]])
def list_meetings(email: str, repo: MeetingRepository = Depends(get_meeting_repository)):
    """Meetings with one colleague, earliest first."""
    return repo.list_by_owner(email)


@meetings_api_router.delete("/{meeting_id}", response_model=DeletedResponse)
def delete_meeting(meeting_id: int, repo: MeetingRepository = Depends(get_meeting_repository)):
    return {"deleted": repo.delete_by_id(meeting_id)}
