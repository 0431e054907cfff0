"""Tests for portfolio_api.repositories: the resource handler contract."""

import pytest

from portfolio_api.core.exceptions import DuplicateException, ValidationException
from portfolio_api.repositories import (
    CalendarEventRepository,
    CareerGoalRepository,
    ColleagueRepository,
    DeadlineRepository,
    FutureWorkRepository,
    IdeaRepository,
    MeetingRepository,
    NoteRepository,
    ProfileRepository,
    ProjectRepository,
    UserRepository,
)


class TestProjectRepository:
    def test_create_applies_defaults(self, storage):
        record = ProjectRepository(storage).create({"name": "Brochure", "owner_email": "a@x.com"})
        assert record == {
            "id": 1,
            "name": "Brochure",
            "owner_email": "a@x.com",
            "colleagues": "[]",
            "progress": 0,
        }

    def test_create_serializes_colleague_list(self, storage):
        repo = ProjectRepository(storage)
        record = repo.create({"name": "P", "owner_email": "a@x.com", "colleagues": ["b@x.com"]})
        assert record["colleagues"] == '["b@x.com"]'
        assert repo.get(record["id"])["colleagues"] == '["b@x.com"]'

    def test_create_requires_name_and_owner(self, storage):
        with pytest.raises(ValidationException) as exc_info:
            ProjectRepository(storage).create({"name": "Nameless owner"})
        assert exc_info.value.message == "Project name and owner email are required."

    def test_list_by_owner_filters(self, storage):
        repo = ProjectRepository(storage)
        repo.create({"name": "Mine", "owner_email": "a@x.com"})
        repo.create({"name": "Theirs", "owner_email": "b@x.com"})
        assert [p["name"] for p in repo.list_by_owner("a@x.com")] == ["Mine"]

    def test_update_missing_progress_becomes_zero(self, storage):
        repo = ProjectRepository(storage)
        project = repo.create({"name": "P", "owner_email": "a@x.com", "progress": 40})
        assert repo.update_by_id(project["id"], {"name": "Renamed"}) == 1
        stored = repo.get(project["id"])
        assert stored["name"] == "Renamed"
        assert stored["progress"] == 0

    def test_update_and_delete_unknown_id_return_zero(self, storage):
        repo = ProjectRepository(storage)
        assert repo.update_by_id(999, {"name": "x"}) == 0
        assert repo.delete_by_id(999) == 0

    def test_description_round_trip(self, storage):
        repo = ProjectRepository(storage)
        project = repo.create({"name": "P", "owner_email": "a@x.com"})
        assert repo.update_description(project["id"], {"project_title": "Field guide", "objectives": "Inform"}) == 1
        description = repo.get_description(project["id"])
        assert description["project_title"] == "Field guide"
        assert description["objectives"] == "Inform"
        assert description["client_name"] is None

    def test_description_of_unknown_project_is_empty(self, storage):
        assert ProjectRepository(storage).get_description(42) == {}


class TestColleaguesAndMeetings:
    def test_colleagues_listed_per_project(self, storage):
        repo = ColleagueRepository(storage)
        repo.create({"project_id": 1, "name": "Ada", "email": "ada@x.com"})
        repo.create({"project_id": 2, "name": "Bob", "email": "bob@x.com"})
        assert [c["name"] for c in repo.list_by_owner(1)] == ["Ada"]

    def test_meetings_ordered_by_date(self, storage):
        repo = MeetingRepository(storage)
        repo.create({"colleague_email": "ada@x.com", "date": "2025-03-01", "description": "Later"})
        repo.create({"colleague_email": "ada@x.com", "date": "2025-01-01", "description": "Sooner"})
        assert [m["description"] for m in repo.list_by_owner("ada@x.com")] == ["Sooner", "Later"]


class TestWorkspaceRepositories:
    def test_idea_defaults(self, storage):
        repo = IdeaRepository(storage)
        record = repo.create({"user_email": "a@x.com", "title": "Spark"})
        assert record["category"] == "general"
        assert record["created_date"]
        assert repo.list_by_owner("a@x.com")[0]["category"] == "general"

    def test_explicit_created_date_is_kept(self, storage):
        record = NoteRepository(storage).create(
            {"user_email": "a@x.com", "title": "N", "created_date": "2024-01-01T00:00:00.000Z"}
        )
        assert record["created_date"] == "2024-01-01T00:00:00.000Z"

    def test_newest_first(self, storage):
        repo = NoteRepository(storage)
        repo.create({"user_email": "a@x.com", "title": "old", "created_date": "2024-01-01T00:00:00.000Z"})
        repo.create({"user_email": "a@x.com", "title": "new", "created_date": "2025-01-01T00:00:00.000Z"})
        assert [n["title"] for n in repo.list_by_owner("a@x.com")] == ["new", "old"]

    def test_owner_is_required(self, storage):
        with pytest.raises(ValidationException):
            IdeaRepository(storage).create({"title": "Orphan"})

    def test_career_goal_defaults(self, storage):
        record = CareerGoalRepository(storage).create({"user_email": "a@x.com", "title": "Tenure"})
        assert record["progress"] == 0
        assert record["goal_type"] == "general"
        assert record["total_stages"] == 5
        assert record["current_stage"] == 0

    def test_future_work_default_priority(self, storage):
        record = FutureWorkRepository(storage).create({"user_email": "a@x.com", "title": "Sequel"})
        assert record["priority"] == "medium"

    def test_deadlines_soonest_first(self, storage):
        repo = DeadlineRepository(storage)
        repo.create({"user_email": "a@x.com", "title": "Later", "due_date": "2025-06-01"})
        repo.create({"user_email": "a@x.com", "title": "Submit", "due_date": "2025-01-01"})
        deadlines = repo.list_by_owner("a@x.com")
        assert [d["title"] for d in deadlines] == ["Submit", "Later"]
        assert deadlines[0]["priority"] == "medium"
        assert deadlines[0]["status"] == "pending"

    def test_update_replaces_all_mutable_fields(self, storage):
        repo = IdeaRepository(storage)
        idea = repo.create({"user_email": "a@x.com", "title": "T", "content": "C", "category": "lab"})
        repo.update_by_id(idea["id"], {"title": "T2"})
        stored = repo.get(idea["id"])
        assert stored["title"] == "T2"
        assert stored["content"] is None
        assert stored["category"] is None


class TestCalendarEventRepository:
    def test_flags_round_trip_as_booleans(self, storage):
        repo = CalendarEventRepository(storage)
        created = repo.create({"user_email": "a@x.com", "title": "Offsite", "is_all_day": True})
        assert created["is_all_day"] is True
        assert created["is_online"] is False

        event = repo.list_events("a@x.com")[0]
        assert event["isAllDay"] is True
        assert event["isOnline"] is False
        assert event["repeatWeekly"] is False

    def test_event_defaults(self, storage):
        repo = CalendarEventRepository(storage)
        created = repo.create({"user_email": "a@x.com", "title": "Sync"})
        assert created["category"] == "Work"
        assert created["reminder"] == 15
        assert created["recurrence"] == "none"
        assert created["show_as"] == "busy"
        assert created["priority"] == "normal"
        assert created["created_date"] == created["modified_date"]

    def test_events_ordered_by_date_then_start(self, storage):
        repo = CalendarEventRepository(storage)
        repo.create({"user_email": "a@x.com", "title": "C", "event_date": "2025-01-02", "start_time": "09:00"})
        repo.create({"user_email": "a@x.com", "title": "B", "event_date": "2025-01-01", "start_time": "14:00"})
        repo.create({"user_email": "a@x.com", "title": "A", "event_date": "2025-01-01", "start_time": "08:00"})
        assert [e["title"] for e in repo.list_events("a@x.com")] == ["A", "B", "C"]

    def test_legacy_create_and_update(self, storage):
        repo = CalendarEventRepository(storage)
        created = repo.create_legacy(
            {"user_email": "a@x.com", "title": "Old", "event_date": "2025-01-01", "repeat_weekly": True}
        )
        assert created["repeat_weekly"] is True
        assert repo.update_legacy(created["id"], {"title": "Older", "repeat_weekly": False}) == 1
        stored = repo.get(created["id"])
        assert stored["title"] == "Older"
        assert stored["repeat_weekly"] is False
        assert stored["modified_date"]


class TestProfileRepository:
    def test_save_creates_then_updates(self, storage):
        repo = ProfileRepository(storage)
        assert repo.save({"user_email": "a@x.com", "full_name": "Ada"})[0] == "created"
        assert repo.save({"user_email": "a@x.com", "full_name": "Ada L."}) == ("updated", 1)
        assert repo.get_by_email("a@x.com")["full_name"] == "Ada L."

    def test_list_fields_are_deserialized(self, storage):
        repo = ProfileRepository(storage)
        repo.save({"user_email": "a@x.com", "degrees": [{"degree": "PhD"}]})
        record = repo.get_by_email("a@x.com")
        assert record["degrees"] == [{"degree": "PhD"}]
        assert record["grants"] == []

    def test_malformed_stored_list_reads_as_empty(self, storage):
        repo = ProfileRepository(storage)
        repo.save({"user_email": "a@x.com"})
        storage.execute("UPDATE profiles SET awards = ? WHERE user_email = ?", ["{broken", "a@x.com"])
        assert repo.get_by_email("a@x.com")["awards"] == []

    def test_email_required(self, storage):
        with pytest.raises(ValidationException) as exc_info:
            ProfileRepository(storage).save({"full_name": "Nobody"})
        assert exc_info.value.message == "User email is required."

    def test_delete_by_email(self, storage):
        repo = ProfileRepository(storage)
        repo.save({"user_email": "a@x.com"})
        assert repo.delete_by_email("a@x.com") == 1
        assert repo.get_by_email("a@x.com") is None


class TestUserRepository:
    def test_duplicate_email(self, storage):
        repo = UserRepository(storage)
        repo.create_user("a@x.com", "hash")
        with pytest.raises(DuplicateException) as exc_info:
            repo.create_user("a@x.com", "other")
        assert exc_info.value.message == "User already exists."
