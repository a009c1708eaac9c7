"""Tests for presentation lifecycle endpoints."""

import json

from fastapi.testclient import TestClient

from conftest import bind_test_dependencies
from shared.utils import config

BASE = "/api/v1/presentations"


def _create(client: TestClient, **overrides) -> dict:
    payload = {"title": "Solar Power", "prompt": "Explain rooftop solar for homeowners"}
    payload.update(overrides)
    response = client.post(f"{BASE}/", json=payload)
    assert response.status_code == 200
    result = response.json()
    assert result["success"] is True, result
    return result["data"]


def test_health(client: TestClient) -> None:
    assert client.get(f"{BASE}/health").json() == {"status": "ok", "service": "presentations"}


def test_create_without_model_uses_four_slide_skeleton(client: TestClient) -> None:
    presentation = _create(client)

    assert presentation["primary_color"] == "#3b82f6"
    assert presentation["secondary_color"] == "#1e40af"
    assert presentation["font_family"] == "Inter"
    slides = presentation["slides"]
    assert [slide["slide_type"] for slide in slides] == ["TITLE", "INTRO", "CONTENT", "CONCLUSION"]
    assert [slide["title"] for slide in slides] == ["Solar Power", "Overview", "Main Content", "Conclusion"]
    assert [slide["order"] for slide in slides] == [1, 2, 3, 4]


def test_create_persists_speaker_notes_and_placeholder_images(client: TestClient) -> None:
    slides = _create(client)["slides"]

    assert all(slide["narration"] for slide in slides)
    assert slides[0]["narration"].startswith('Welcome everyone to this presentation on "Solar Power"')
    main_content = slides[2]
    assert main_content["layout"] == "TEXT_IMAGE_RIGHT"
    assert main_content["image_url"] == config.get("placeholder_image_url")
    assert slides[1]["image_url"] is None


def test_create_with_model_output(client: TestClient, fake_driver) -> None:
    fake_driver.responses.append(
        "```json\n"
        + json.dumps(
            [
                {"title": "Solar 101", "content": "# Solar 101", "slideType": "TITLE", "layout": "TITLE_COVER"},
                {"title": "Costs", "content": "- panels", "slideType": "CONTENT", "narration": "Talk costs"},
                {"title": "Next steps", "content": "- call an installer", "slideType": "WRAPUP"},
            ]
        )
        + "\n```"
    )

    slides = _create(client)["slides"]

    assert [slide["title"] for slide in slides] == ["Solar 101", "Costs", "Next steps"]
    assert slides[1]["narration"] == "Talk costs"
    assert slides[1]["layout"] == "TEXT_IMAGE_RIGHT"
    assert slides[2]["slide_type"] == "NEXT_STEPS"


def test_create_requires_title_and_prompt(client: TestClient) -> None:
    response = client.post(f"{BASE}/", json={"title": "   ", "prompt": "something"})
    assert response.json() == {
        "success": False,
        "error": "Title and prompt are required",
        "message": None,
        "data": None,
    }
    assert client.post(f"{BASE}/", json={"title": "Only title"}).status_code == 422


def test_create_treats_none_references_as_unset(client: TestClient) -> None:
    presentation = _create(client, voice_profile_id="none", framework_id="none")
    assert presentation["voice_profile_id"] is None
    assert presentation["framework_id"] is None


def test_create_with_unknown_voice_profile_fails(client: TestClient) -> None:
    result = client.post(f"{BASE}/", json={"title": "T", "prompt": "P", "voice_profile_id": "missing"}).json()
    assert result["success"] is False
    assert "missing" in result["error"]


def test_create_from_outline(client: TestClient) -> None:
    outline = client.post(f"{BASE}/outline", json={"title": "Solar Power", "prompt": "Rooftop solar"}).json()
    assert [item["title"] for item in outline] == ["Solar Power", "Overview", "Main Content", "Conclusion"]

    presentation = _create(client, outline=outline[:2])
    assert [slide["title"] for slide in presentation["slides"]] == ["Solar Power", "Overview"]


def test_list_presentations_includes_slide_counts(client: TestClient) -> None:
    created = _create(client)

    summaries = client.get(f"{BASE}/").json()

    assert len(summaries) == 1
    assert summaries[0]["id"] == created["id"]
    assert summaries[0]["slide_count"] == 4


def test_get_missing_presentation_is_404(client: TestClient) -> None:
    assert client.get(f"{BASE}/missing").status_code == 404


def test_update_only_changes_non_empty_fields(client: TestClient) -> None:
    presentation = _create(client)

    result = client.put(
        f"{BASE}/{presentation['id']}", json={"title": "Renamed", "description": "", "font_family": "Georgia"}
    ).json()

    assert result["success"] is True
    assert result["data"]["title"] == "Renamed"
    assert result["data"]["description"] is None
    assert result["data"]["font_family"] == "Georgia"
    assert client.get(f"{BASE}/{presentation['id']}").json()["title"] == "Renamed"


def test_apply_theme_preset_updates_presentation_and_slides(client: TestClient) -> None:
    presentation = _create(client)

    result = client.post(f"{BASE}/{presentation['id']}/theme-preset", json={"name": "corporate"}).json()

    assert result["success"] is True
    updated = result["data"]
    assert (updated["primary_color"], updated["secondary_color"], updated["font_family"]) == (
        "#374151",
        "#6B7280",
        "Times",
    )
    assert {slide["background_color"] for slide in updated["slides"]} == {"#F9FAFB"}
    assert {slide["heading_color"] for slide in updated["slides"]} == {"#1F2937"}


def test_apply_unknown_preset_fails(client: TestClient) -> None:
    presentation = _create(client)
    result = client.post(f"{BASE}/{presentation['id']}/theme-preset", json={"name": "neon"}).json()
    assert result["success"] is False


def test_delete_presentation_removes_slides(client: TestClient) -> None:
    presentation = _create(client)
    slide_id = presentation["slides"][0]["id"]

    assert client.delete(f"{BASE}/{presentation['id']}").json()["success"] is True

    assert client.get(f"{BASE}/{presentation['id']}").status_code == 404
    assert client.get(f"/api/v1/slides/{slide_id}").status_code == 404
    assert client.delete(f"{BASE}/{presentation['id']}").json()["success"] is False


def test_playback_orders_slides_with_progress_and_colors(client: TestClient) -> None:
    presentation = _create(client)

    deck = client.get(f"{BASE}/{presentation['id']}/playback").json()

    assert deck["total_slides"] == 4
    assert [slide["position"] for slide in deck["slides"]] == [1, 2, 3, 4]
    assert [slide["progress"] for slide in deck["slides"]] == [25.0, 50.0, 75.0, 100.0]
    cover = deck["slides"][0]
    assert cover["layout"] == "TITLE_COVER"
    assert cover["colors"]["background_color"].startswith("linear-gradient(")
    assert deck["slides"][1]["colors"]["background_color"] == "#FFFFFF"


def test_slide_edits_signal_presentation_detail_path(client: TestClient, invalidations: list[str]) -> None:
    presentation = _create(client)
    slide = presentation["slides"][1]
    client.get(f"{BASE}/{presentation['id']}")

    client.put(f"/api/v1/slides/{slide['id']}", json={"title": "Fresh title", "content": "new"})

    assert invalidations[-1] == f"/presentations/{presentation['id']}"
    refreshed = client.get(f"{BASE}/{presentation['id']}").json()
    assert refreshed["slides"][1]["title"] == "Fresh title"


def test_detail_reflects_edits_made_through_the_slides_service(session_factory, generation_service) -> None:
    from services.presentations.app import app as presentations_app
    from services.slides.app import app as slides_app

    for service_app in (presentations_app, slides_app):
        bind_test_dependencies(service_app, session_factory, generation_service)
    try:
        presentations = TestClient(presentations_app)
        slides = TestClient(slides_app)
        created = presentations.post("/", json={"title": "Deck", "prompt": "Home batteries"}).json()["data"]
        assert [slide["title"] for slide in presentations.get(f"/{created['id']}").json()["slides"]] == [
            "Deck",
            "Overview",
            "Main Content",
            "Conclusion",
        ]

        assert slides.delete(f"/{created['slides'][1]['id']}").json()["success"] is True

        detail = presentations.get(f"/{created['id']}").json()
        assert [slide["title"] for slide in detail["slides"]] == ["Deck", "Main Content", "Conclusion"]
    finally:
        presentations_app.dependency_overrides.clear()
        slides_app.dependency_overrides.clear()
