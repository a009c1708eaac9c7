"""Tests for ideas, angle brainstorming and angle expansion."""

import pytest
from fastapi.testclient import TestClient

BASE = "/api/v1/ideas"


@pytest.fixture
def idea(client: TestClient) -> dict:
    result = client.post(f"{BASE}/", json={"title": "Four-day week", "description": "  Same pay, less time  "}).json()
    assert result["success"] is True
    return result["data"]


def test_create_and_get_idea(client: TestClient, idea: dict) -> None:
    assert idea["description"] == "Same pay, less time"
    assert idea["presentations"] == []
    assert client.get(f"{BASE}/{idea['id']}").json()["title"] == "Four-day week"
    assert client.get(f"{BASE}/missing").status_code == 404


def test_update_idea(client: TestClient, idea: dict) -> None:
    result = client.put(f"{BASE}/{idea['id']}", json={"title": "Four-day work week"}).json()
    assert result["data"]["title"] == "Four-day work week"
    assert result["data"]["description"] == ""
    assert client.put(f"{BASE}/missing", json={"title": "x"}).json()["success"] is False


def test_angles_cover_every_framework(client: TestClient, idea: dict) -> None:
    angles = client.post(f"{BASE}/{idea['id']}/angles").json()

    assert [angle["framework"] for angle in angles] == ["CUB", "PASE", "HEAR", "WWH"]
    assert all(angle["frameworkId"] is None for angle in angles)


def test_angles_link_to_seeded_framework_templates(client: TestClient, idea: dict) -> None:
    client.post("/api/v1/seed")
    frameworks = {framework["name"]: framework["id"] for framework in client.get("/api/v1/frameworks/").json()}

    angles = client.post(f"{BASE}/{idea['id']}/angles").json()

    assert [angle["frameworkId"] for angle in angles] == [frameworks[angle["frameworkName"]] for angle in angles]
    assert angles[3]["frameworkName"] == "What-Why-How Framework"


def test_angles_for_missing_idea_is_404(client: TestClient) -> None:
    assert client.post(f"{BASE}/missing/angles").status_code == 404


def test_expand_angle_creates_linked_presentation(client: TestClient, idea: dict) -> None:
    client.post("/api/v1/seed")
    angle = client.post(f"{BASE}/{idea['id']}/angles").json()[1]

    result = client.post(f"{BASE}/{idea['id']}/expand", json={"angle": angle, "title": "Less is more"}).json()

    assert result["success"] is True
    presentation = result["data"]
    assert presentation["title"] == "Less is more"
    assert presentation["idea_id"] == idea["id"]
    assert presentation["selected_angle"] == "PASE"
    assert presentation["framework_id"] == angle["frameworkId"]
    assert presentation["prompt"] == "Four-day week\n\nSame pay, less time"
    assert presentation["slides"][0]["title"] == "Less is more"
    assert [slide["order"] for slide in presentation["slides"]] == list(range(1, len(presentation["slides"]) + 1))

    linked = client.get(f"{BASE}/{idea['id']}").json()["presentations"]
    assert [summary["id"] for summary in linked] == [presentation["id"]]


def test_expand_resolves_framework_by_name(client: TestClient, idea: dict) -> None:
    client.post("/api/v1/seed")
    angle = {"framework": "HEAR", "title": "Hear it", "keyPoints": ["Focus"], "frameworkName": "HEAR Framework"}

    presentation = client.post(f"{BASE}/{idea['id']}/expand", json={"angle": angle}).json()["data"]

    frameworks = {framework["name"]: framework["id"] for framework in client.get("/api/v1/frameworks/").json()}
    assert presentation["framework_id"] == frameworks["HEAR Framework"]
    assert presentation["title"] == "Hear it"


def test_expand_for_missing_idea_fails(client: TestClient) -> None:
    angle = {"framework": "WWH", "title": "Anything"}
    result = client.post(f"{BASE}/missing/expand", json={"angle": angle}).json()
    assert result == {"success": False, "error": "Idea missing not found", "message": None, "data": None}


def test_deleting_idea_keeps_its_presentations(client: TestClient, idea: dict) -> None:
    angle = client.post(f"{BASE}/{idea['id']}/angles").json()[0]
    presentation = client.post(f"{BASE}/{idea['id']}/expand", json={"angle": angle}).json()["data"]

    assert client.delete(f"{BASE}/{idea['id']}").json()["success"] is True

    refreshed = client.get(f"/api/v1/presentations/{presentation['id']}").json()
    assert refreshed["idea_id"] is None
    assert client.get(f"{BASE}/{idea['id']}").status_code == 404
