"""
Calendar Event Pydantic Schemas
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional, Union

# Attendees and attachments are opaque to the server
Opaque = Optional[Union[str, List[Any], Dict[str, Any]]]


class EventRequest(BaseModel):
    """
    Event editor body (camelCase).

    Field names are the storage columns, aliases are the wire names, so
    ``to_columns()`` can be handed straight to the repository.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_email: Optional[str] = Field(None, alias="userEmail")
    title: Optional[str] = None
    description: Optional[str] = None
    event_date: Optional[str] = Field(None, alias="date")
    start_time: Optional[str] = Field(None, alias="start")
    end_time: Optional[str] = Field(None, alias="end")
    location: Optional[str] = None
    category: Optional[str] = None
    attendees: Opaque = None
    reminder: Optional[int] = None
    is_all_day: Optional[bool] = Field(False, alias="isAllDay")
    recurrence: Optional[str] = None
    recurrence_end: Optional[str] = Field(None, alias="recurrenceEnd")
    show_as: Optional[str] = Field(None, alias="showAs")
    priority: Optional[str] = None
    is_online: Optional[bool] = Field(False, alias="isOnline")
    meeting_link: Optional[str] = Field(None, alias="meetingLink")
    attachments: Opaque = None
    repeat_weekly: Optional[bool] = Field(False, alias="repeatWeekly")

    def to_columns(self) -> Dict[str, Any]:
        return self.model_dump()


class LegacyEventRequest(BaseModel):
    """Older snake_case body limited to the first-version event columns."""

    user_email: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    event_date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    repeat_weekly: Optional[bool] = False
    created_date: Optional[str] = None
