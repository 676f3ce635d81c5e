import pytest
from fastapi.testclient import TestClient

from connect_app.data.content import MISSING_FIELDS_MESSAGE
from connect_app.main import app
from connect_app.services.activity import activity_service


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(activity_service.generator, "delay", 0)
    with TestClient(app) as c:
        c.post("/api/form/reset")
        yield c
        c.post("/api/form/reset")


def fill(client, **overrides):
    fields = {"yearLevel": "Year 8", "subjectArea": "Mathematics", "unitTopic": "Fractions"}
    fields.update(overrides)
    return client.patch("/api/form", json=fields)


def test_health_and_root(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/").json()["endpoints"]["generate"] == "/api/form/generate"


def test_catalog(client):
    data = client.get("/api/catalog").json()
    assert data["activity_types"][0] == {"type": "Odd One Out", "icon": "🧩"}
    assert "Physical Education" in data["subject_areas"]


def test_patch_updates_fields(client):
    response = client.patch("/api/form", json={"yearLevel": "Year 5"})
    assert response.status_code == 200
    state = response.json()
    assert state["form"] == {"yearLevel": "Year 5", "subjectArea": "", "unitTopic": ""}
    assert state["isLoading"] is False


def test_patch_rejects_unknown_fields(client):
    assert client.patch("/api/form", json={"colour": "blue"}).status_code == 422


def test_generate_with_missing_fields(client):
    client.patch("/api/form", json={"yearLevel": "Year 8"})

    response = client.post("/api/form/generate")
    assert response.status_code == 400
    assert response.json() == {
        "detail": MISSING_FIELDS_MESSAGE,
        "missingFields": ["subjectArea", "unitTopic"],
    }

    state = client.get("/api/form").json()
    assert state["activity"] is None
    assert state["error"] == MISSING_FIELDS_MESSAGE
    assert f"! {MISSING_FIELDS_MESSAGE}" in client.get("/api/form/screen").text


def test_generate_then_wait(client):
    fill(client)

    response = client.post("/api/form/generate", params={"activity_type": "Odd One Out"})
    assert response.status_code == 202
    assert response.json()["isLoading"] is True

    state = client.get("/api/form", params={"wait": "true"}).json()
    activity = state["activity"]
    assert state["isLoading"] is False
    assert activity["type"] == "Odd One Out"
    assert activity["icon"] == "🧩"
    assert len(activity["questions"]) == 4
    assert activity["questions"][3] == "How do these items relate to our current unit on Fractions?"


def test_print_and_screen(client):
    assert client.get("/api/form/print").status_code == 404
    assert "[Generate Connect Activity]" in client.get("/api/form/screen").text

    fill(client, subjectArea="History", unitTopic="Ancient Rome")
    client.post("/api/form/generate", params={"activity_type": "Mystery Visual"})
    client.get("/api/form", params={"wait": "true"})

    printed = client.get("/api/form/print")
    assert printed.status_code == 200
    assert printed.text.startswith("🔍 Mystery Visual - Which of these doesn't belong?")
    assert "1. What do you observe in this visual?" in printed.text
    assert "3. What questions does this visual raise for you?" in printed.text

    screen = client.get("/api/form/screen").text
    assert "[Create New]  [Print]" in screen


def test_reset_clears_everything(client):
    fill(client)
    client.post("/api/form/generate")
    client.get("/api/form", params={"wait": "true"})

    state = client.post("/api/form/reset").json()
    assert state["activity"] is None
    assert state["form"] == {"yearLevel": "", "subjectArea": "", "unitTopic": ""}
    assert state["error"] == ""


def test_stateless_activity_endpoint(client):
    response = client.post(
        "/api/activities",
        params={"activity_type": "Weird Fact or Lie"},
        json={"yearLevel": "Year 10", "subjectArea": "Science", "unitTopic": "Atoms"},
    )
    assert response.status_code == 200
    activity = response.json()
    assert activity["prompt"].startswith("Examine these scientific elements related to Atoms.")
    assert activity["questions"][0] == "What's your initial reaction to this weird fact or lie?"

    # the page state is untouched
    assert client.get("/api/form").json()["activity"] is None


def test_stateless_activity_endpoint_missing_fields(client):
    response = client.post("/api/activities", json={"yearLevel": "Year 10"})
    assert response.status_code == 400
    assert response.json()["missingFields"] == ["subjectArea", "unitTopic"]
