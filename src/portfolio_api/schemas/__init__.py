"""
Pydantic schemas package.

Request and response models for every router. Request models keep their
fields optional: required fields and defaults are enforced by the
repositories so each resource answers with its own error message.
"""

# Common schemas
from portfolio_api.schemas.common import (
    ErrorResponse,
    UpdatedResponse,
    DeletedResponse,
    HealthCheckResponse,
)

# Identity schemas
from portfolio_api.schemas.auth import (
    CredentialsRequest,
    AuthFailureResponse,
    RegisterResponse,
    LoginResponse,
)

# Project schemas
from portfolio_api.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectDescriptionUpdate,
    ColleagueCreate,
    MeetingCreate,
)

# Workspace schemas
from portfolio_api.schemas.workspace import (
    IdeaCreate,
    IdeaUpdate,
    NoteCreate,
    NoteUpdate,
    CareerGoalCreate,
    CareerGoalUpdate,
    FutureWorkCreate,
    FutureWorkUpdate,
    DeadlineCreate,
    DeadlineUpdate,
)

# Calendar and profile schemas
from portfolio_api.schemas.calendar import EventRequest, LegacyEventRequest
from portfolio_api.schemas.profile import ProfileRequest

# Export all schemas
__all__ = [
    # Common
    "ErrorResponse",
    "UpdatedResponse",
    "DeletedResponse",
    "HealthCheckResponse",

    # Identity
    "CredentialsRequest",
    "AuthFailureResponse",
    "RegisterResponse",
    "LoginResponse",

    # Projects
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectDescriptionUpdate",
    "ColleagueCreate",
    "MeetingCreate",

    # Workspace
    "IdeaCreate",
    "IdeaUpdate",
    "NoteCreate",
    "NoteUpdate",
    "CareerGoalCreate",
    "CareerGoalUpdate",
    "FutureWorkCreate",
    "FutureWorkUpdate",
    "DeadlineCreate",
    "DeadlineUpdate",

    # Calendar / profile
    "EventRequest",
    "LegacyEventRequest",
    "ProfileRequest",
]
