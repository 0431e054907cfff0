"""
Workspace Pydantic Schemas

Ideas, notes, career goals, future work and deadlines. Every field is
optional; required fields and defaults are enforced by the repositories.
"""

from pydantic import BaseModel
from typing import Optional


# ============================================================================
# Ideas
# ============================================================================

class IdeaUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None


class IdeaCreate(IdeaUpdate):
    user_email: Optional[str] = None
    created_date: Optional[str] = None


# ============================================================================
# Notes
# ============================================================================

class NoteUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class NoteCreate(NoteUpdate):
    user_email: Optional[str] = None
    created_date: Optional[str] = None


# ============================================================================
# Career goals
# ============================================================================

class CareerGoalUpdate(BaseModel):
    """A staged goal. ``current_stage`` counts completed stages out of ``total_stages``."""

    title: Optional[str] = None
    description: Optional[str] = None
    progress: Optional[int] = None
    goal_type: Optional[str] = None
    target_date: Optional[str] = None
    total_stages: Optional[int] = None
    current_stage: Optional[int] = None
    start_date: Optional[str] = None
    stage_description: Optional[str] = None


class CareerGoalCreate(CareerGoalUpdate):
    user_email: Optional[str] = None
    created_date: Optional[str] = None


# ============================================================================
# Future work
# ============================================================================

class FutureWorkUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    timeline: Optional[str] = None


class FutureWorkCreate(FutureWorkUpdate):
    user_email: Optional[str] = None
    created_date: Optional[str] = None


# ============================================================================
# Deadlines
# ============================================================================

class DeadlineUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None


class DeadlineCreate(DeadlineUpdate):
    user_email: Optional[str] = None
    created_date: Optional[str] = None
