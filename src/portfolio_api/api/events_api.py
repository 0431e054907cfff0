"""
Calendar Events API

``/events`` is the event editor surface (camelCase bodies, every column).
``/calendar_events`` is the older snake_case surface over the same table,
kept for clients that still use it. Both return flags as JSON booleans.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from portfolio_api.core.dependencies import get_calendar_repository
from portfolio_api.repositories.calendar_repository import CalendarEventRepository
from portfolio_api.schemas.calendar import EventRequest, LegacyEventRequest
from portfolio_api.schemas.common import DeletedResponse, UpdatedResponse


events_api_router = APIRouter(prefix="/events", tags=["Calendar"])
calendar_events_api_router = APIRouter(prefix="/calendar_events", tags=["Calendar"])


# ============================================================================
# Event editor surface
# ============================================================================

@events_api_router.get("/{email}", response_model=List[Dict[str, Any]])
def list_events(email: str, repo: CalendarEventRepository = Depends(get_calendar_repository)):
    """Events ordered by date then start time."""
    return repo.list_events(email)


@events_api_router.post("")
def create_event(request: EventRequest, repo: CalendarEventRepository = Depends(get_calendar_repository)):
    return repo.to_event(repo.create(request.to_columns()))


@events_api_router.put("/{event_id}", response_model=UpdatedResponse)
def update_event(
    event_id: int,
    request: EventRequest,
    repo: CalendarEventRepository = Depends(get_calendar_repository)
):
    return {"updated": repo.update_by_id(event_id, request.to_columns())}


@events_api_router.delete("/{event_id}", response_model=DeletedResponse)
def delete_event(event_id: int, repo: CalendarEventRepository = Depends(get_calendar_repository)):
    return {"deleted": repo.delete_by_id(event_id)}


# ============================================================================
# Legacy snake_case surface
# ============================================================================

@calendar_events_api_router.get("/{email}", response_model=List[Dict[str, Any]])
def list_calendar_events(email: str, repo: CalendarEventRepository = Depends(get_calendar_repository)):
    return repo.list_by_owner(email)


@calendar_events_api_router.post("")
def create_calendar_event(
    request: LegacyEventRequest,
    repo: CalendarEventRepository = Depends(get_calendar_repository)
):
    return repo.create_legacy(request.model_dump())


@calendar_events_api_router.put("/{event_id}", response_model=UpdatedResponse)
def update_calendar_event(
    event_id: int,
    request: LegacyEventRequest,
    repo: CalendarEventRepository = Depends(get_calendar_repository)
):
    return {"updated": repo.update_legacy(event_id, request.model_dump())}


@calendar_events_api_router.delete("/{event_id}", response_model=DeletedResponse)
def delete_calendar_event(event_id: int, repo: CalendarEventRepository = Depends(get_calendar_repository)):
    return {"deleted": repo.delete_by_id(event_id)}
