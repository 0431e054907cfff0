"""
API routers package for the FastAPI application.

This package contains all API endpoint routers organized by domain:
- auth_api: Registration and login
- projects_api: Projects, description sheet, colleagues and meetings
- workspace_api: Ideas, notes, career goals, future work and deadlines
- events_api: Calendar events (editor and legacy surfaces)
- profile_api: Researcher profile upsert
- resume_api: HTML resume generation
- health_api: Health check endpoints
"""

from .auth_api import auth_api_router
from .projects_api import projects_api_router, colleagues_api_router, meetings_api_router
from .workspace_api import (
    ideas_api_router,
    notes_api_router,
    career_api_router,
    future_work_api_router,
    deadlines_api_router,
)
from .events_api import events_api_router, calendar_events_api_router
from .profile_api import profile_api_router
from .resume_api import resume_api_router
from .health_api import health_api_router

__all__ = [
    "auth_api_router",
    "projects_api_router",
    "colleagues_api_router",
    "meetings_api_router",
    "ideas_api_router",
    "notes_api_router",
    "career_api_router",
    "future_work_api_router",
    "deadlines_api_router",
    "events_api_router",
    "calendar_events_api_router",
    "profile_api_router",
    "resume_api_router",
    "health_api_router",
]
