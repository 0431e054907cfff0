"""
Enumeration types used across ORM models.

These name the well-known values of the free-text category, priority and
status columns, and their defaults. Stored values are not restricted to them.
"""

import enum


class IdeaCategory(str, enum.Enum):
    GENERAL = "general"


class GoalType(str, enum.Enum):
    GENERAL = "general"


class Priority(str, enum.Enum):
    """
    Priority of future work items and deadlines.

    Attributes:
        LOW: Can slip
        MEDIUM: Default priority
        HIGH: Needs attention first
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DeadlineStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class EventCategory(str, enum.Enum):
    WORK = "Work"
    PERSONAL = "Personal"


class Recurrence(str, enum.Enum):
    """
    Recurrence kind of a calendar event.

    Stored as-is; occurrences are never expanded server side.
    """
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ShowAs(str, enum.Enum):
    BUSY = "busy"
    FREE = "free"
    TENTATIVE = "tentative"
    OUT_OF_OFFICE = "out_of_office"


class EventPriority(str, enum.Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
