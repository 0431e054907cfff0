"""Tests for the project, description, colleague and meeting endpoints."""


class TestProjects:
    def test_create_and_list(self, client):
        response = client.post("/projects", json={"name": "Brochure", "owner_email": "a@x.com"})
        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "name": "Brochure",
            "owner_email": "a@x.com",
            "colleagues": "[]",
            "progress": 0,
        }

        projects = client.get("/projects/a@x.com").json()
        assert len(projects) == 1
        assert projects[0]["name"] == "Brochure"
        assert projects[0]["progress"] == 0

    def test_create_requires_name_and_owner(self, client):
        response = client.post("/projects", json={"name": "Brochure"})
        assert response.status_code == 400
        assert response.json() == {"error": "Project name and owner email are required."}

    def test_wrong_type_is_a_400(self, client):
        response = client.post("/projects", json={"name": "P", "owner_email": "a@x.com", "progress": "lots"})
        assert response.status_code == 400
        assert "progress" in response.json()["error"]

    def test_update_and_delete(self, client):
        project_id = client.post("/projects", json={"name": "P", "owner_email": "a@x.com"}).json()["id"]
        response = client.put(f"/projects/{project_id}", json={"name": "P2", "progress": 60})
        assert response.json() == {"updated": 1}
        assert client.get("/projects/a@x.com").json()[0]["progress"] == 60

        assert client.delete(f"/projects/{project_id}").json() == {"deleted": 1}
        assert client.get("/projects/a@x.com").json() == []

    def test_unknown_id_mutations_are_zero(self, client):
        assert client.put("/projects/404", json={"name": "x"}).json() == {"updated": 0}
        assert client.delete("/projects/404").json() == {"deleted": 0}


class TestDescription:
    def test_camel_case_sheet_is_stored_snake_case(self, client):
        project_id = client.post("/projects", json={"name": "P", "owner_email": "a@x.com"}).json()["id"]
        response = client.put(
            f"/projects/{project_id}/description",
            json={"projectTitle": "Field guide", "colleagueAddress1": "1 Main St", "callAction": "Sign up"},
        )
        assert response.json() == {"updated": 1}

        description = client.get(f"/projects/{project_id}/description").json()
        assert description["project_title"] == "Field guide"
        assert description["colleague_address1"] == "1 Main St"
        assert description["call_action"] == "Sign up"
        assert description["name"] == "P"

    def test_unknown_project_is_empty_object(self, client):
        assert client.get("/projects/77/description").json() == {}


class TestColleaguesAndMeetings:
    def test_colleague_lifecycle(self, client):
        project_id = client.post("/projects", json={"name": "P", "owner_email": "a@x.com"}).json()["id"]
        colleague = client.post(
            f"/projects/{project_id}/colleagues", json={"name": "Ada", "email": "ada@x.com"}
        ).json()
        assert colleague["project_id"] == project_id

        assert [c["email"] for c in client.get(f"/projects/{project_id}/colleagues").json()] == ["ada@x.com"]
        assert client.delete(f"/colleagues/{colleague['id']}").json() == {"deleted": 1}
        assert client.get(f"/projects/{project_id}/colleagues").json() == []

    def test_meetings_listed_by_date(self, client):
        client.post("/meetings", json={"colleague_email": "ada@x.com", "date": "2025-02-01", "description": "B"})
        created = client.post(
            "/meetings", json={"colleague_email": "ada@x.com", "date": "2025-01-01", "description": "A"}
        ).json()
        assert created["description"] == "A"

        meetings = client.get("/meetings/ada@x.com").json()
        assert [m["description"] for m in meetings] == ["A", "B"]
        assert client.delete(f"/meetings/{created['id']}").json() == {"deleted": 1}
