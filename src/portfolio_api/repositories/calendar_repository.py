"""
Calendar Repository

Data access layer for calendar events.

Two views share the ``calendar_events`` table: the event editor view, which
reads and writes every column and answers in camelCase, and the older
snake_case view limited to the first-version columns. Both stamp
``modified_date`` on every write and both return flags as booleans.
"""

from typing import Any, Dict, List

from portfolio_api.db.adapter import StorageBackend
from portfolio_api.db.serialization import dump_text, from_flag, to_flag, utc_now_iso
from portfolio_api.models.calendar import FLAG_COLUMNS, CalendarEvent
from portfolio_api.models.enums import EventCategory, EventPriority, Recurrence, ShowAs
from portfolio_api.repositories.base import BaseRepository


# Column -> camelCase key of the event editor view
EVENT_FIELDS = {
    "id": "id",
    "title": "title",
    "description": "description",
    "event_date": "date",
    "start_time": "start",
    "end_time": "end",
    "location": "location",
    "category": "category",
    "attendees": "attendees",
    "reminder": "reminder",
    "is_all_day": "isAllDay",
    "recurrence": "recurrence",
    "recurrence_end": "recurrenceEnd",
    "show_as": "showAs",
    "priority": "priority",
    "is_online": "isOnline",
    "meeting_link": "meetingLink",
    "attachments": "attachments",
    "repeat_weekly": "repeatWeekly",
    "created_date": "createdDate",
    "modified_date": "modifiedDate",
}

EDITABLE_COLUMNS = (
    "title", "description", "event_date", "start_time", "end_time", "location",
    "category", "attendees", "reminder", "is_all_day", "recurrence", "recurrence_end",
    "show_as", "priority", "is_online", "meeting_link", "attachments", "repeat_weekly",
)

LEGACY_COLUMNS = ("title", "description", "event_date", "start_time", "end_time", "repeat_weekly")


class CalendarEventRepository(BaseRepository[CalendarEvent]):
    """Repository for calendar events."""

    label = "event"
    plural = "events"
    order_by = "event_date ASC, start_time ASC, id ASC"
    insert_columns = ("user_email",) + EDITABLE_COLUMNS + ("created_date", "modified_date")
    update_columns = EDITABLE_COLUMNS + ("modified_date",)
    required = ("user_email",)
    defaults = {
        "category": EventCategory.WORK.value,
        "reminder": 15,
        "recurrence": Recurrence.NONE.value,
        "show_as": ShowAs.BUSY.value,
        "priority": EventPriority.NORMAL.value,
    }

    def __init__(self, storage: StorageBackend):
        super().__init__(CalendarEvent, storage)

    def prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        for column in FLAG_COLUMNS:
            values[column] = to_flag(values.get(column))
        for column in ("attendees", "attachments"):
            values[column] = dump_text(values.get(column))
        return values

    def to_record(self, row: Dict[str, Any]) -> Dict[str, Any]:
        record = dict(row)
        for column in FLAG_COLUMNS:
            if column in record:
                record[column] = from_flag(record[column])
        return record

    @staticmethod
    def to_event(record: Dict[str, Any]) -> Dict[str, Any]:
        """Project a record into the camelCase event editor view."""
        event = {key: record.get(column) for column, key in EVENT_FIELDS.items()}
        for column in FLAG_COLUMNS:
            event[EVENT_FIELDS[column]] = from_flag(record.get(column))
        return event

    # ------------------------------------------------------------------
    # Event editor view
    # ------------------------------------------------------------------

    def create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        now = utc_now_iso()
        values = dict(values, created_date=now, modified_date=now)
        return self.to_record(super().create(values))

    def update_by_id(self, id: int, values: Dict[str, Any]) -> int:
        return super().update_by_id(id, dict(values, modified_date=utc_now_iso()))

    def list_events(self, owner: str) -> List[Dict[str, Any]]:
        return [self.to_event(record) for record in self.list_by_owner(owner)]

    # ------------------------------------------------------------------
    # Legacy snake_case view
    # ------------------------------------------------------------------

    def create_legacy(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values = dict(values)
        self._validate(values)
        values["created_date"] = values.get("created_date") or utc_now_iso()
        values["modified_date"] = utc_now_iso()
        values["repeat_weekly"] = to_flag(values.get("repeat_weekly"))
        columns = ("user_email",) + LEGACY_COLUMNS + ("created_date", "modified_date")
        return self.to_record(self._insert(columns, values))

    def update_legacy(self, id: int, values: Dict[str, Any]) -> int:
        values = dict(values, modified_date=utc_now_iso())
        values["repeat_weekly"] = to_flag(values.get("repeat_weekly"))
        return self._update(id, LEGACY_COLUMNS + ("modified_date",), values)
