"""Tests for voice profile CRUD."""

from fastapi.testclient import TestClient

BASE = "/api/v1/voice-profiles"


def _create(client: TestClient, name: str, is_default: bool = False, **fields) -> dict:
    result = client.post(f"{BASE}/", json={"name": name, "is_default": is_default, **fields}).json()
    assert result["success"] is True, result
    return result["data"]


def test_create_cleans_list_fields(client: TestClient) -> None:
    profile = _create(client, "  Friendly  ", tone=["warm", "  ", " casual "])

    assert profile["name"] == "Friendly"
    assert profile["tone"] == ["warm", "casual"]
    assert profile["restrictions"] == []


def test_list_puts_default_first_then_by_name(client: TestClient) -> None:
    _create(client, "Zeta")
    _create(client, "Alpha")
    _create(client, "Middle", is_default=True)

    names = [profile["name"] for profile in client.get(f"{BASE}/").json()]

    assert names == ["Middle", "Alpha", "Zeta"]


def test_single_default_across_create_and_update(client: TestClient) -> None:
    first = _create(client, "First", is_default=True)
    second = _create(client, "Second", is_default=True)
    assert client.get(f"{BASE}/{first['id']}").json()["is_default"] is False

    result = client.put(f"{BASE}/{first['id']}", json={"name": "First", "is_default": True}).json()

    assert result["data"]["is_default"] is True
    assert client.get(f"{BASE}/{second['id']}").json()["is_default"] is False


def test_update_missing_profile_fails(client: TestClient) -> None:
    result = client.put(f"{BASE}/missing", json={"name": "Ghost"}).json()
    assert result["success"] is False
    assert "missing" in result["error"]


def test_delete_profile(client: TestClient) -> None:
    profile = _create(client, "Temporary")

    assert client.delete(f"{BASE}/{profile['id']}").json()["success"] is True
    assert client.get(f"{BASE}/{profile['id']}").status_code == 404
    assert client.delete(f"{BASE}/{profile['id']}").json()["error"] == f"Voice profile {profile['id']} not found"


def test_profile_guides_generation_prompt(client: TestClient, fake_driver) -> None:
    profile = _create(client, "Teacher", audience=["high school students"], tone=["encouraging"])

    client.post(
        "/api/v1/presentations/", json={"title": "Photosynthesis", "prompt": "Plants", "voice_profile_id": profile["id"]}
    )

    assert "Target Audience: high school students" in fake_driver.prompts[0]
    assert "Tone: encouraging" in fake_driver.prompts[0]
