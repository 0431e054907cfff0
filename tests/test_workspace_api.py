"""Tests for the ideas, notes, career goals, future work and deadline endpoints."""

import pytest

from portfolio_api.core.dependencies import get_storage
from portfolio_api.core.exceptions import DatabaseException


class TestIdeas:
    def test_create_without_category_defaults_to_general(self, client):
        created = client.post("/ideas", json={"user_email": "a@x.com", "title": "Spark"}).json()
        assert created["category"] == "general"
        assert created["created_date"]

        ideas = client.get("/ideas/a@x.com").json()
        assert ideas[0]["title"] == "Spark"
        assert ideas[0]["category"] == "general"

    def test_update_and_delete(self, client):
        idea_id = client.post("/ideas", json={"user_email": "a@x.com", "title": "T"}).json()["id"]
        assert client.put(f"/ideas/{idea_id}", json={"title": "T2", "category": "lab"}).json() == {"updated": 1}
        assert client.get("/ideas/a@x.com").json()[0]["category"] == "lab"
        assert client.delete(f"/ideas/{idea_id}").json() == {"deleted": 1}
        assert client.delete(f"/ideas/{idea_id}").json() == {"deleted": 0}


class TestNotes:
    def test_newest_first(self, client):
        client.post("/notes", json={"user_email": "a@x.com", "title": "old", "created_date": "2024-01-01T00:00:00.000Z"})
        client.post("/notes", json={"user_email": "a@x.com", "title": "new", "created_date": "2025-01-01T00:00:00.000Z"})
        assert [n["title"] for n in client.get("/notes/a@x.com").json()] == ["new", "old"]


class TestCareerGoals:
    @pytest.mark.parametrize("list_path", ["/career_goals/a@x.com", "/career/a@x.com"])
    def test_list_and_alias(self, client, list_path):
        client.post("/career_goals", json={"user_email": "a@x.com", "title": "Tenure"})
        goals = client.get(list_path).json()
        assert goals[0]["title"] == "Tenure"
        assert goals[0]["total_stages"] == 5
        assert goals[0]["current_stage"] == 0

    def test_stage_update(self, client):
        goal_id = client.post("/career_goals", json={"user_email": "a@x.com", "title": "Tenure"}).json()["id"]
        response = client.put(
            f"/career_goals/{goal_id}",
            json={"title": "Tenure", "progress": 40, "total_stages": 5, "current_stage": 2},
        )
        assert response.json() == {"updated": 1}
        goal = client.get("/career_goals/a@x.com").json()[0]
        assert goal["current_stage"] == 2
        assert goal["progress"] == 40


class TestFutureWork:
    @pytest.mark.parametrize("list_path", ["/future_work/a@x.com", "/future/a@x.com"])
    def test_list_and_alias(self, client, list_path):
        client.post("/future_work", json={"user_email": "a@x.com", "title": "Sequel"})
        items = client.get(list_path).json()
        assert items[0]["priority"] == "medium"

    def test_aliases_hidden_from_schema(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        assert "/future_work/{email}" in paths
        assert "/future/{email}" not in paths
        assert "/career/{email}" not in paths
        assert "/signup" not in paths


class TestDeadlines:
    def test_ordered_by_due_date(self, client):
        client.post("/deadlines", json={"user_email": "a@x.com", "title": "Later", "due_date": "2025-03-01"})
        client.post("/deadlines", json={"user_email": "a@x.com", "title": "Submit", "due_date": "2025-01-01"})
        client.post("/deadlines", json={"user_email": "b@x.com", "title": "Other", "due_date": "2024-01-01"})

        deadlines = client.get("/deadlines/a@x.com").json()
        assert [d["title"] for d in deadlines] == ["Submit", "Later"]
        assert deadlines[0]["status"] == "pending"

    def test_missing_owner_is_rejected(self, client):
        response = client.post("/deadlines", json={"title": "Nobody's"})
        assert response.status_code == 400
        assert "user_email" in response.json()["error"]


class BrokenStorage:
    """Storage double whose every call fails like a lost database."""

    def _fail(self, *args, **kwargs):
        raise DatabaseException("Storage operation failed.", {"error": "disk I/O error"})

    execute = fetch_one = fetch_many = _fail


class TestStorageFailures:
    def test_failures_are_generic_500s(self, app, client):
        app.dependency_overrides[get_storage] = lambda: BrokenStorage()
        try:
            listed = client.get("/ideas/a@x.com")
            created = client.post("/notes", json={"user_email": "a@x.com"})
        finally:
            app.dependency_overrides.clear()

        assert listed.status_code == 500
        assert listed.json() == {"error": "Error fetching ideas."}
        assert created.status_code == 500
        assert created.json() == {"error": "Error creating note."}
        assert "disk" not in created.text
