"""
ORM Models package.

This package contains the SQLAlchemy table definitions organized by domain.
All models are imported here so that ``Base.metadata`` knows every table
before ``create_all`` runs.

Usage:
    from portfolio_api.models import Base, Idea, CalendarEvent
"""

from portfolio_api.models.base import Base, IdMixin, CreatedMixin, TimestampMixin, OwnedMixin
from portfolio_api.models.user import User
from portfolio_api.models.project import Project, Colleague, Meeting
from portfolio_api.models.workspace import Idea, Note, CareerGoal, FutureWork, Deadline
from portfolio_api.models.calendar import CalendarEvent
from portfolio_api.models.profile import Profile

__all__ = [
    # Base classes
    "Base",
    "IdMixin",
    "CreatedMixin",
    "TimestampMixin",
    "OwnedMixin",

    # Models
    "User",
    "Project",
    "Colleague",
    "Meeting",
    "Idea",
    "Note",
    "CareerGoal",
    "FutureWork",
    "Deadline",
    "CalendarEvent",
    "Profile",
]
