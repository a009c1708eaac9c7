"""Tests for the slide editor endpoints."""

import asyncio
import json

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import update

from models.database import Slide as SlideDB
from services.generation.fallback import REGENERATION_MARKER
from shared.utils import config

BASE = "/api/v1/slides"


@pytest.fixture
def presentation(client: TestClient) -> dict:
    result = client.post("/api/v1/presentations/", json={"title": "Battery Storage", "prompt": "Home batteries"})
    return result.json()["data"]


def _titles(client: TestClient, presentation_id: str) -> list[str]:
    return [slide["title"] for slide in client.get(f"{BASE}/presentation/{presentation_id}").json()]


def test_health(client: TestClient) -> None:
    assert client.get(f"{BASE}/health").json()["service"] == "slides"


def test_list_slides_in_order(client: TestClient, presentation: dict) -> None:
    slides = client.get(f"{BASE}/presentation/{presentation['id']}").json()
    assert [slide["order"] for slide in slides] == [1, 2, 3, 4]
    assert client.get(f"{BASE}/presentation/missing").status_code == 404


def test_create_slide_appends_with_theme_colors(client: TestClient, presentation: dict) -> None:
    result = client.post(
        f"{BASE}/", json={"presentation_id": presentation["id"], "title": "Extra", "slide_type": "CONTENT"}
    ).json()

    assert result["success"] is True
    slide = result["data"]
    assert slide["order"] == 5
    assert slide["layout"] == "TEXT_IMAGE_RIGHT"
    assert (slide["background_color"], slide["text_color"], slide["heading_color"]) == (
        "#FFFFFF",
        "#374151",
        "#111827",
    )


def test_create_slide_at_position_shifts_the_rest(client: TestClient, presentation: dict) -> None:
    client.post(f"{BASE}/", json={"presentation_id": presentation["id"], "title": "Agenda", "position": 2})
    assert _titles(client, presentation["id"]) == ["Battery Storage", "Agenda", "Overview", "Main Content", "Conclusion"]


def test_create_slide_for_missing_presentation_fails(client: TestClient) -> None:
    result = client.post(f"{BASE}/", json={"presentation_id": "missing", "title": "Orphan"}).json()
    assert result["success"] is False
    assert "missing" in result["error"]


def test_update_slide_writes_all_fields(client: TestClient, presentation: dict) -> None:
    slide = presentation["slides"][1]

    result = client.put(
        f"{BASE}/{slide['id']}",
        json={
            "title": "Why batteries",
            "content": "- resilience",
            "narration": "",
            "layout": "QUOTE_LARGE",
            "text_align": "CENTER",
            "show_title": False,
            "background_color": "#000000",
        },
    ).json()

    assert result["success"] is True
    updated = client.get(f"{BASE}/{slide['id']}").json()
    assert updated["title"] == "Why batteries"
    assert updated["narration"] is None
    assert updated["layout"] == "QUOTE_LARGE"
    assert updated["text_align"] == "CENTER"
    assert updated["show_title"] is False
    assert updated["background_color"] == "#000000"
    assert updated["slide_type"] == "INTRO"


def test_update_slide_rejects_malformed_annotations(client: TestClient, presentation: dict) -> None:
    slide = presentation["slides"][0]
    result = client.put(f"{BASE}/{slide['id']}", json={"title": "T", "annotations": "{not json"}).json()
    assert result["success"] is False


def test_update_missing_slide_fails(client: TestClient) -> None:
    result = client.put(f"{BASE}/missing", json={"title": "T"}).json()
    assert result["success"] is False


def test_delete_and_duplicate(client: TestClient, presentation: dict) -> None:
    slides = presentation["slides"]

    duplicate = client.post(f"{BASE}/{slides[2]['id']}/duplicate").json()
    assert duplicate["success"] is True
    assert duplicate["data"]["order"] == 4

    assert client.delete(f"{BASE}/{slides[1]['id']}").json()["success"] is True
    assert _titles(client, presentation["id"]) == ["Battery Storage", "Main Content", "Main Content", "Conclusion"]
    assert client.delete(f"{BASE}/{slides[1]['id']}").json()["success"] is False


def test_reorder_slides(client: TestClient, presentation: dict) -> None:
    first, _, _, last = presentation["slides"]

    result = client.post(
        f"{BASE}/reorder",
        json={
            "presentation_id": presentation["id"],
            "slides": [{"id": first["id"], "order": 4}, {"id": last["id"], "order": 1}],
        },
    ).json()

    assert result["success"] is True
    assert _titles(client, presentation["id"]) == ["Conclusion", "Overview", "Main Content", "Battery Storage"]


def test_failed_reorder_leaves_orders_untouched(client: TestClient, presentation: dict) -> None:
    first, second = presentation["slides"][:2]

    result = client.post(
        f"{BASE}/reorder",
        json={
            "presentation_id": presentation["id"],
            "slides": [{"id": first["id"], "order": 2}, {"id": second["id"], "order": 2}],
        },
    ).json()

    assert result["success"] is False
    assert _titles(client, presentation["id"]) == ["Battery Storage", "Overview", "Main Content", "Conclusion"]


def test_reorder_rejects_positions_below_one(client: TestClient, presentation: dict) -> None:
    first = presentation["slides"][0]

    response = client.post(
        f"{BASE}/reorder",
        json={"presentation_id": presentation["id"], "slides": [{"id": first["id"], "order": 0}]},
    )

    assert response.status_code == 422
    assert _titles(client, presentation["id"]) == ["Battery Storage", "Overview", "Main Content", "Conclusion"]


def test_regenerate_slide_stored_below_first_position(client: TestClient, session_factory, presentation: dict) -> None:
    slide_id = presentation["slides"][0]["id"]

    async def _store_order_zero() -> None:
        async with session_factory() as session:
            await session.execute(update(SlideDB).where(SlideDB.id == slide_id).values(order=0))
            await session.commit()

    asyncio.run(_store_order_zero())

    response = client.post(f"{BASE}/{slide_id}/regenerate")

    assert response.status_code == 200
    result = response.json()
    assert result["success"] is True
    assert result["data"]["regenerated"]["order"] == 1


def test_apply_theme_to_all_slides_only_touches_given_fields(client: TestClient, presentation: dict) -> None:
    result = client.put(
        f"{BASE}/presentation/{presentation['id']}/theme", json={"background_color": "#101010"}
    ).json()

    assert result == {"success": True, "error": None, "message": None, "data": {"updated": 4}}
    slides = client.get(f"{BASE}/presentation/{presentation['id']}").json()
    assert {slide["background_color"] for slide in slides} == {"#101010"}
    assert {slide["text_color"] for slide in slides} == {None}


def test_apply_theme_without_fields_fails(client: TestClient, presentation: dict) -> None:
    result = client.put(f"{BASE}/presentation/{presentation['id']}/theme", json={}).json()
    assert result["success"] is False


def test_set_and_remove_image(client: TestClient, presentation: dict) -> None:
    slide_id = presentation["slides"][1]["id"]

    added = client.put(f"{BASE}/{slide_id}/image", json={"image_url": "https://example.com/a.png"}).json()
    assert added["data"]["image_url"] == "https://example.com/a.png"

    removed = client.put(f"{BASE}/{slide_id}/image", json={"image_url": ""}).json()
    assert removed["data"]["image_url"] is None


def test_save_and_clear_annotations(client: TestClient, presentation: dict) -> None:
    slide_id = presentation["slides"][0]["id"]
    document = {
        "shapes": [
            {
                "type": "arrow",
                "x": 10,
                "y": 10,
                "x2": 50,
                "y2": 60,
                "style": {"stroke": "#ff0000", "strokeWidth": 2},
            }
        ],
        "texts": [
            {"text": "Look here", "x": 12, "y": 8, "style": {"fontSize": 16, "color": "#000", "fontFamily": "Inter"}}
        ],
    }

    saved = client.put(f"{BASE}/{slide_id}/annotations", json=document).json()

    assert saved["success"] is True
    stored = json.loads(saved["data"]["annotations"])
    assert stored["version"] == "1.0"
    assert stored["shapes"][0]["type"] == "arrow"
    assert stored["shapes"][0]["id"].startswith("ann")
    assert stored["texts"][0]["style"]["fontSize"] == 16

    cleared = client.delete(f"{BASE}/{slide_id}/annotations").json()
    assert cleared["data"]["annotations"] is None


def test_empty_annotation_document_clears_field(client: TestClient, presentation: dict) -> None:
    slide_id = presentation["slides"][0]["id"]
    saved = client.put(f"{BASE}/{slide_id}/annotations", json={"shapes": [], "texts": []}).json()
    assert saved["data"]["annotations"] is None


def test_regenerate_without_model_marks_original(client: TestClient, presentation: dict) -> None:
    slide = presentation["slides"][2]

    result = client.post(f"{BASE}/{slide['id']}/regenerate").json()

    assert result["success"] is True
    assert result["data"]["original"]["content"] == slide["content"]
    regenerated = result["data"]["regenerated"]
    assert regenerated["content"].endswith(REGENERATION_MARKER)
    assert regenerated["order"] == 3
    # Nothing is persisted until the editor applies the result
    assert client.get(f"{BASE}/{slide['id']}").json()["content"] == slide["content"]


def test_regenerate_includes_additional_context(client: TestClient, presentation: dict) -> None:
    slide = presentation["slides"][1]
    result = client.post(f"{BASE}/{slide['id']}/regenerate", json={"additional_context": "add costs"}).json()
    assert result["data"]["regenerated"]["content"].endswith("_(Enhanced version: add costs)_")


def test_regenerate_uses_model_reply_and_keeps_order(client: TestClient, fake_driver, presentation: dict) -> None:
    slide = presentation["slides"][1]
    fake_driver.responses.append(json.dumps({"title": "Sharper overview", "content": "- crisp", "order": 9}))

    regenerated = client.post(f"{BASE}/{slide['id']}/regenerate").json()["data"]["regenerated"]

    assert regenerated["title"] == "Sharper overview"
    assert regenerated["order"] == 2
    assert "Home batteries" in fake_driver.prompts[-1]


def test_ai_generated_slide_is_inserted_after_requested_order(client: TestClient, presentation: dict) -> None:
    result = client.post(
        f"{BASE}/generate",
        json={
            "presentation_id": presentation["id"],
            "prompt": "explain battery warranty terms in detail",
            "slide_type": "CONTENT",
            "insert_after_order": 1,
        },
    ).json()

    assert result["success"] is True
    slide = result["data"]
    assert slide["order"] == 2
    assert slide["title"] == "Explain battery warranty terms"
    assert slide["image_url"] == config.get("placeholder_image_url")
    assert slide["narration"]
    assert slide["background_color"] == "#FFFFFF"
    assert _titles(client, presentation["id"])[:3] == [
        "Battery Storage",
        "Explain battery warranty terms",
        "Overview",
    ]
