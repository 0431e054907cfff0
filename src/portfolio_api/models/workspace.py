"""
Workspace ORM models: ideas, notes, career goals, future work and deadlines.

All five are flat rows owned by ``user_email`` and stamped with ``created_date``.
"""

from sqlalchemy import Column, Integer, Text

from portfolio_api.models.base import Base, CreatedMixin, IdMixin, OwnedMixin
from portfolio_api.models.enums import DeadlineStatus, GoalType, IdeaCategory, Priority


class Idea(IdMixin, OwnedMixin, CreatedMixin, Base):
    __tablename__ = "ideas"

    title = Column(Text)
    content = Column(Text)
    category = Column(Text, default=IdeaCategory.GENERAL.value, server_default=IdeaCategory.GENERAL.value)


class Note(IdMixin, OwnedMixin, CreatedMixin, Base):
    __tablename__ = "notes"

    title = Column(Text)
    content = Column(Text)


class CareerGoal(IdMixin, OwnedMixin, CreatedMixin, Base):
    """
    Staged career goal.

    ``progress`` and ``current_stage`` are caller-supplied integers; no bound is enforced.
    """

    __tablename__ = "career_goals"

    title = Column(Text)
    description = Column(Text)
    progress = Column(Integer, default=0, server_default="0")
    goal_type = Column(Text, default=GoalType.GENERAL.value, server_default=GoalType.GENERAL.value)
    target_date = Column(Text)
    total_stages = Column(Integer, default=5, server_default="5")
    current_stage = Column(Integer, default=0, server_default="0")
    start_date = Column(Text)
    stage_description = Column(Text)


class FutureWork(IdMixin, OwnedMixin, CreatedMixin, Base):
    __tablename__ = "future_work"

    title = Column(Text)
    description = Column(Text)
    priority = Column(Text, default=Priority.MEDIUM.value, server_default=Priority.MEDIUM.value)
    timeline = Column(Text)


class Deadline(IdMixin, OwnedMixin, CreatedMixin, Base):
    __tablename__ = "deadlines"

    title = Column(Text)
    description = Column(Text)
    due_date = Column(Text, index=True)
    priority = Column(Text, default=Priority.MEDIUM.value, server_default=Priority.MEDIUM.value)
    status = Column(Text, default=DeadlineStatus.PENDING.value, server_default=DeadlineStatus.PENDING.value)
