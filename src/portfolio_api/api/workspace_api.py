"""
Workspace API

Ideas, notes, career goals, future work and deadlines. Every family follows
the same shape:

    GET    /<resource>/{email}   list owned records
    POST   /<resource>           create, returns the effective record
    PUT    /<resource>/{id}      replace mutable fields, returns {updated}
    DELETE /<resource>/{id}      returns {deleted}
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from portfolio_api.core.dependencies import (
    get_career_goal_repository,
    get_deadline_repository,
    get_future_work_repository,
    get_idea_repository,
    get_note_repository,
)
from portfolio_api.repositories.workspace_repository import (
    CareerGoalRepository,
    DeadlineRepository,
    FutureWorkRepository,
    IdeaRepository,
    NoteRepository,
)
from portfolio_api.schemas.common import DeletedResponse, UpdatedResponse
from portfolio_api.schemas.workspace import (
    CareerGoalCreate,
    CareerGoalUpdate,
    DeadlineCreate,
    DeadlineUpdate,
    FutureWorkCreate,
    FutureWorkUpdate,
    IdeaCreate,
    IdeaUpdate,
    NoteCreate,
    NoteUpdate,
)

Records = List[Dict[str, Any]]

ideas_api_router = APIRouter(prefix="/ideas", tags=["Ideas"])
notes_api_router = APIRouter(prefix="/notes", tags=["Notes"])
career_api_router = APIRouter(tags=["Career Goals"])
future_work_api_router = APIRouter(tags=["Future Work"])
deadlines_api_router = APIRouter(prefix="/deadlines", tags=["Deadlines"])


# ============================================================================
# Ideas
# ============================================================================

@ideas_api_router.get("/{email}", response_model=Records)
def list_ideas(email: str, repo: IdeaRepository = Depends(get_idea_repository)):
    return repo.list_by_owner(email)


@ideas_api_router.post("")
def create_idea(request: IdeaCreate, repo: IdeaRepository = Depends(get_idea_repository)):
    return repo.create(request.model_dump())


@ideas_api_router.put("/{idea_id}", response_model=UpdatedResponse)
def update_idea(idea_id: int, request: IdeaUpdate, repo: IdeaRepository = Depends(get_idea_repository)):
    return {"updated": repo.update_by_id(idea_id, request.model_dump())}


@ideas_api_router.delete("/{idea_id}", response_model=DeletedResponse)
def delete_idea(idea_id: int, repo: IdeaRepository = Depends(get_idea_repository)):
    return {"deleted": repo.delete_by_id(idea_id)}


# ============================================================================
# Notes
# ============================================================================

@notes_api_router.get("/{email}", response_model=Records)
def list_notes(email: str, repo: NoteRepository = Depends(get_note_repository)):
    return repo.list_by_owner(email)


@notes_api_router.post("")
def create_note(request: NoteCreate, repo: NoteRepository = Depends(get_note_repository)):
    return repo.create(request.model_dump())


@notes_api_router.put("/{note_id}", response_model=UpdatedResponse)
def update_note(note_id: int, request: NoteUpdate, repo: NoteRepository = Depends(get_note_repository)):
    return {"updated": repo.update_by_id(note_id, request.model_dump())}


@notes_api_router.delete("/{note_id}", response_model=DeletedResponse)
def delete_note(note_id: int, repo: NoteRepository = Depends(get_note_repository)):
    return {"deleted": repo.delete_by_id(note_id)}


# ============================================================================
# Career goals (``/career/{email}`` is an older alias of the list route)
# ============================================================================

@career_api_router.get("/career_goals/{email}", response_model=Records)
@career_api_router.get("/career/{email}", response_model=Records, include_in_schema=False)
def list_career_goals(email: str, repo: CareerGoalRepository = Depends(get_career_goal_repository)):
    return repo.list_by_owner(email)


@career_api_router.post("/career_goals")
def create_career_goal(
    request: CareerGoalCreate,
    repo: CareerGoalRepository = Depends(get_career_goal_repository)
):
    return repo.create(request.model_dump())


@career_api_router.put("/career_goals/{goal_id}", response_model=UpdatedResponse)
def update_career_goal(
    goal_id: int,
    request: CareerGoalUpdate,
    repo: CareerGoalRepository = Depends(get_career_goal_repository)
):
    return {"updated": repo.update_by_id(goal_id, request.model_dump())}


@career_api_router.delete("/career_goals/{goal_id}", response_model=DeletedResponse)
def delete_career_goal(goal_id: int, repo: CareerGoalRepository = Depends(get_career_goal_repository)):
    return {"deleted": repo.delete_by_id(goal_id)}


# ============================================================================
# Future work (``/future/{email}`` is an older alias of the list route)
# ============================================================================

@future_work_api_router.get("/future_work/{email}", response_model=Records)
@future_work_api_router.get("/future/{email}", response_model=Records, include_in_schema=False)
def list_future_work(email: str, repo: FutureWorkRepository = Depends(get_future_work_repository)):
    return repo.list_by_owner(email)


@future_work_api_router.post("/future_work")
def create_future_work(
    request: FutureWorkCreate,
    repo: FutureWorkRepository = Depends(get_future_work_repository)
):
    return repo.create(request.model_dump())


@future_work_api_router.put("/future_work/{item_id}", response_model=UpdatedResponse)
def update_future_work(
    item_id: int,
    request: FutureWorkUpdate,
    repo: FutureWorkRepository = Depends(get_future_work_repository)
):
    return {"updated": repo.update_by_id(item_id, request.model_dump())}


@future_work_api_router.delete("/future_work/{item_id}", response_model=DeletedResponse)
def delete_future_work(item_id: int, repo: FutureWorkRepository = Depends(get_future_work_repository)):
    return {"deleted": repo.delete_by_id(item_id)}


# ============================================================================
# Deadlines
# ============================================================================

@deadlines_api_router.get("/{email}", response_model=Records)
def list_deadlines(email: str, repo: DeadlineRepository = Depends(get_deadline_repository)):
    """Deadlines of one owner, soonest first."""
    return repo.list_by_owner(email)


@deadlines_api_router.post("")
def create_deadline(request: DeadlineCreate, repo: DeadlineRepository = Depends(get_deadline_repository)):
    return repo.create(request.model_dump())


@deadlines_api_router.put("/{deadline_id}", response_model=UpdatedResponse)
def update_deadline(
    deadline_id: int,
    request: DeadlineUpdate,
    repo: DeadlineRepository = Depends(get_deadline_repository)
):
    return {"updated": repo.update_by_id(deadline_id, request.model_dump())}


@deadlines_api_router.delete("/{deadline_id}", response_model=DeletedResponse)
def delete_deadline(deadline_id: int, repo: DeadlineRepository = Depends(get_deadline_repository)):
    return {"deleted": repo.delete_by_id(deadline_id)}
