"""Tests for the profile endpoints."""

import itertools

import pytest

from portfolio_api.repositories import profile_repository


PROFILE = {
    "userEmail": "a@x.com",
    "fullName": "Ada Lovelace",
    "designation": "Professor",
    "department": "Mathematics",
    "institution": "University of London",
    "officialEmail": "ada@uni.example",
    "degrees": [{"degree": "PhD", "specialization": "Analysis", "institution": "Cambridge", "year": "1840"}],
    "employment": [{"position": "Lecturer", "organization": "UCL", "duration": "1842-1850"}],
    "researchKeywords": "engines, algorithms",
    "researchDescription": "Analytical engines.",
    "courses": [],
    "grants": [],
    "awards": [{"title": "Medal", "year": "1850"}],
    "skills": "Mathematics",
}


@pytest.fixture
def ticking_clock(monkeypatch):
    """Make every timestamp the profile repository takes strictly later than the last."""
    ticks = (f"2025-01-01T00:00:{second:02d}.000Z" for second in itertools.count())
    monkeypatch.setattr(profile_repository, "utc_now_iso", lambda: next(ticks))


class TestProfile:
    def test_missing_profile_is_null(self, client):
        response = client.get("/profile/nobody@x.com")
        assert response.status_code == 200
        assert response.json() is None

    def test_create_then_read_camel_case(self, client):
        response = client.post("/profile", json=PROFILE)
        assert response.json()["message"] == "Profile created successfully"
        assert isinstance(response.json()["id"], int)

        profile = client.get("/profile/a@x.com").json()
        assert profile["fullName"] == "Ada Lovelace"
        assert profile["degrees"] == PROFILE["degrees"]
        assert profile["grants"] == []
        assert profile["researchKeywords"] == "engines, algorithms"

    def test_email_required(self, client):
        response = client.post("/profile", json={"fullName": "Nobody"})
        assert response.status_code == 400
        assert response.json() == {"error": "User email is required."}

    def test_second_save_is_an_update(self, client, app, ticking_clock):
        client.post("/profile", json=PROFILE)
        first = app.state.storage.fetch_one("SELECT * FROM profiles WHERE user_email = ?", ["a@x.com"])

        response = client.post("/profile", json=PROFILE)
        assert response.json() == {"message": "Profile updated successfully", "updated": 1}

        rows = app.state.storage.fetch_many("SELECT * FROM profiles WHERE user_email = ?", ["a@x.com"])
        assert len(rows) == 1
        assert rows[0]["created_date"] == first["created_date"]
        assert rows[0]["modified_date"] > first["modified_date"]

    def test_update_replaces_every_field(self, client):
        client.post("/profile", json=PROFILE)
        client.post("/profile", json={"userEmail": "a@x.com", "fullName": "A. Lovelace"})
        profile = client.get("/profile/a@x.com").json()
        assert profile["fullName"] == "A. Lovelace"
        assert profile["designation"] is None
        assert profile["degrees"] == []

    def test_delete(self, client):
        client.post("/profile", json=PROFILE)
        assert client.delete("/profile/a@x.com").json() == {
            "deleted": 1,
            "message": "Profile deleted successfully",
        }
        assert client.get("/profile/a@x.com").json() is None
