"""Tests for the annotation overlay payload."""

import json

import pytest

from shared.annotations import (
    ANNOTATION_FORMAT_VERSION,
    AnnotationDocument,
    load_annotations,
    parse_annotations,
    serialize_annotations,
)
from shared.enums import ShapeType

RECTANGLE = {
    "id": "ann_1_a",
    "type": "rectangle",
    "x": 5,
    "y": 5,
    "width": 20,
    "height": 10,
    "style": {"stroke": "#000", "strokeWidth": 1.5, "opacity": 0.5},
    "createdAt": 1,
    "updatedAt": 2,
}


def test_load_fills_missing_collections_and_version() -> None:
    document = load_annotations('{"shapes": []}')
    assert document.is_empty
    assert document.texts == []
    assert document.version == ANNOTATION_FORMAT_VERSION


def test_load_parses_camel_case_fields() -> None:
    document = load_annotations(json.dumps({"shapes": [RECTANGLE]}))

    shape = document.shapes[0]
    assert shape.type is ShapeType.RECTANGLE
    assert shape.style.stroke_width == 1.5
    assert shape.created_at == 1


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        json.dumps({"shapes": [{**RECTANGLE, "x": 150}]}),
        json.dumps({"shapes": [{**RECTANGLE, "type": "star"}]}),
        json.dumps({"shapes": [{**RECTANGLE, "style": {"stroke": "#000", "strokeWidth": 1, "opacity": 2}}]}),
    ],
)
def test_load_rejects_malformed_payloads(raw: str) -> None:
    with pytest.raises(ValueError):
        load_annotations(raw)


def test_parse_is_lenient() -> None:
    assert parse_annotations(None).is_empty
    assert parse_annotations("{broken").is_empty


def test_corrupt_payload_is_logged_on_annotations_logger(caplog) -> None:
    with caplog.at_level("WARNING", logger="annotations"):
        parse_annotations("{broken")

    assert [record.name for record in caplog.records] == ["annotations"]
    assert "Failed to parse annotation data" in caplog.text


def test_serialize_uses_wire_names_and_drops_nulls() -> None:
    document = AnnotationDocument.model_validate({"shapes": [RECTANGLE]})

    stored = json.loads(serialize_annotations(document))

    shape = stored["shapes"][0]
    assert shape["style"]["strokeWidth"] == 1.5
    assert "x2" not in shape
    assert "fill" not in shape["style"]
    assert load_annotations(serialize_annotations(document)) == document


def test_generated_ids_are_unique() -> None:
    texts = [
        {"text": "a", "x": 1, "y": 1, "style": {"fontSize": 12, "color": "#000", "fontFamily": "Inter"}},
        {"text": "b", "x": 2, "y": 2, "style": {"fontSize": 12, "color": "#000", "fontFamily": "Inter"}},
    ]
    document = AnnotationDocument.model_validate({"texts": texts})
    assert document.texts[0].id != document.texts[1].id
