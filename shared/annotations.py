"""Annotation overlay payload stored as an opaque JSON string on each slide.

Positions and sizes are percentages of the slide dimensions so overlays
survive any rendering size. Keys are camelCase on the wire.
"""

import json
import time
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shared.enums import ShapeType
from shared.utils import generate_short_id, setup_logging

logger = setup_logging("annotations")

ANNOTATION_FORMAT_VERSION = "1.0"


def _now_ms() -> int:
    return int(time.time() * 1000)


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ShapeStyle(_CamelModel):
    stroke: str
    stroke_width: float = Field(alias="strokeWidth")
    fill: str | None = None
    opacity: float = Field(default=1.0, ge=0, le=1)
    stroke_dasharray: str | None = Field(default=None, alias="strokeDasharray")


class TextStyle(_CamelModel):
    font_size: float = Field(alias="fontSize")
    color: str
    font_family: str = Field(alias="fontFamily")
    font_weight: Literal["normal", "bold"] | None = Field(default=None, alias="fontWeight")
    text_align: Literal["left", "center", "right"] | None = Field(default=None, alias="textAlign")


class AnnotationShape(_CamelModel):
    id: str = Field(default_factory=lambda: generate_annotation_id())
    type: ShapeType
    x: float = Field(ge=0, le=100)
    y: float = Field(ge=0, le=100)
    width: float = 0
    height: float = 0
    x2: float | None = Field(default=None, ge=0, le=100)
    y2: float | None = Field(default=None, ge=0, le=100)
    path: str | None = None
    style: ShapeStyle
    created_at: int = Field(default_factory=_now_ms, alias="createdAt")
    updated_at: int = Field(default_factory=_now_ms, alias="updatedAt")


class AnnotationText(_CamelModel):
    id: str = Field(default_factory=lambda: generate_annotation_id())
    text: str
    x: float = Field(ge=0, le=100)
    y: float = Field(ge=0, le=100)
    style: TextStyle
    created_at: int = Field(default_factory=_now_ms, alias="createdAt")
    updated_at: int = Field(default_factory=_now_ms, alias="updatedAt")


class AnnotationDocument(_CamelModel):
    """Shapes and texts in insertion order."""

    shapes: list[AnnotationShape] = Field(default_factory=list)
    texts: list[AnnotationText] = Field(default_factory=list)
    version: str = ANNOTATION_FORMAT_VERSION

    @property
    def is_empty(self) -> bool:
        return not self.shapes and not self.texts


def generate_annotation_id() -> str:
    return generate_short_id("ann")


def empty_annotations() -> AnnotationDocument:
    return AnnotationDocument()


def parse_annotations(raw: str | None) -> AnnotationDocument:
    """Parse a stored payload; missing or corrupt payloads read as an empty document."""
    if not raw:
        return empty_annotations()
    try:
        return load_annotations(raw)
    except ValueError as exc:
        logger.warning("Failed to parse annotation data: %s", exc)
        return empty_annotations()


def load_annotations(raw: str) -> AnnotationDocument:
    """
    Strictly parse an annotation payload.

    Raises:
        ValueError: If the payload is not JSON or does not match the format
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Annotation payload is not valid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ValueError("Annotation payload must be a JSON object")

    data.setdefault("shapes", [])
    data.setdefault("texts", [])
    data["version"] = data.get("version") or ANNOTATION_FORMAT_VERSION
    try:
        return AnnotationDocument.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid annotation payload: {exc.error_count()} error(s)") from exc


def serialize_annotations(document: AnnotationDocument) -> str:
    return json.dumps(document.model_dump(mode="json", by_alias=True, exclude_none=True))
