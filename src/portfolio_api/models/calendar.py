"""
Calendar ORM model.

Recurrence, reminders and multi-day spans are stored as plain fields; nothing
expands or checks them. Boolean flags are 0/1 integers.
"""

from sqlalchemy import Column, Integer, Text

from portfolio_api.models.base import Base, IdMixin, OwnedMixin, TimestampMixin
from portfolio_api.models.enums import EventCategory, EventPriority, Recurrence, ShowAs


class CalendarEvent(IdMixin, OwnedMixin, TimestampMixin, Base):
    """Calendar event owned by ``user_email``."""

    __tablename__ = "calendar_events"

    title = Column(Text)
    description = Column(Text)
    event_date = Column(Text, index=True)
    start_time = Column(Text)
    end_time = Column(Text)
    location = Column(Text)
    category = Column(Text, default=EventCategory.WORK.value, server_default=EventCategory.WORK.value)
    attendees = Column(Text)
    reminder = Column(Integer, default=15, server_default="15")
    is_all_day = Column(Integer, default=0, server_default="0")
    recurrence = Column(Text, default=Recurrence.NONE.value, server_default=Recurrence.NONE.value)
    recurrence_end = Column(Text)
    show_as = Column(Text, default=ShowAs.BUSY.value, server_default=ShowAs.BUSY.value)
    priority = Column(Text, default=EventPriority.NORMAL.value, server_default=EventPriority.NORMAL.value)
    is_online = Column(Integer, default=0, server_default="0")
    meeting_link = Column(Text)
    attachments = Column(Text)
    repeat_weekly = Column(Integer, default=0, server_default="0")


# Flags stored as 0/1 and exposed as booleans
FLAG_COLUMNS = ("is_all_day", "is_online", "repeat_weekly")
