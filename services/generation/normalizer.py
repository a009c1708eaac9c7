"""Turn loosely-typed model output into valid generated slides.

Model responses are trusted for content only. Missing or unknown enum values
are coerced rather than rejected:

* missing or non-positive ``order``: 1-based array position
* missing or unknown ``slideType``: inferred from position and title keywords
* missing or unknown ``layout``: the slide type's default layout

Normalizing an already-normalized list returns an equal list.
"""

from collections.abc import Sequence
from typing import Any

from shared.enums import SlideType, coerce_layout, coerce_slide_type
from shared.models import GeneratedSlide, OutlineItem


def infer_slide_type(title: str, index: int, total: int) -> SlideType:
    """Guess the narrative role of the slide at ``index`` (0-based) in a deck of ``total``."""
    lowered = (title or "").lower()
    if index == 0:
        return SlideType.TITLE
    if "intro" in lowered and index < 3:
        return SlideType.INTRO
    if index >= total - 2 and ("conclusion" in lowered or "summary" in lowered):
        return SlideType.CONCLUSION
    if index == total - 1 or "next" in lowered or "action" in lowered:
        return SlideType.NEXT_STEPS
    return SlideType.CONTENT


def _field(raw: dict[str, Any], *names: str) -> Any:
    for name in names:
        if name in raw and raw[name] is not None:
            return raw[name]
    return None


def _coerce_order(value: Any, fallback: int) -> int:
    try:
        order = int(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    return order if order >= 1 else fallback


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return "\n".join(f"- {item}" for item in value)
    return str(value).strip()


def normalize_slide(raw: dict[str, Any], index: int, total: int) -> GeneratedSlide:
    title = _text(_field(raw, "title")) or f"Slide {index + 1}"
    slide_type = coerce_slide_type(_field(raw, "slideType", "slide_type", "type"))
    if slide_type is None:
        slide_type = infer_slide_type(title, index, total)
    narration = _text(_field(raw, "narration", "speakerNotes", "speaker_notes", "notes")) or None

    return GeneratedSlide(
        title=title,
        content=_text(_field(raw, "content", "body")),
        slide_type=slide_type,
        layout=coerce_layout(_field(raw, "layout"), slide_type),
        order=_coerce_order(_field(raw, "order"), index + 1),
        narration=narration,
    )


def normalize_slides(raw_slides: Sequence[dict[str, Any] | GeneratedSlide]) -> list[GeneratedSlide]:
    total = len(raw_slides)
    normalized = []
    for index, raw in enumerate(raw_slides):
        if isinstance(raw, GeneratedSlide):
            raw = raw.model_dump(by_alias=True)
        normalized.append(normalize_slide(raw, index, total))
    return normalized


def normalize_outline(raw_items: Sequence[dict[str, Any]]) -> list[OutlineItem]:
    total = len(raw_items)
    items = []
    for index, raw in enumerate(raw_items):
        title = _text(_field(raw, "title")) or f"Slide {index + 1}"
        slide_type = coerce_slide_type(_field(raw, "slideType", "slide_type")) or infer_slide_type(
            title, index, total
        )
        items.append(
            OutlineItem(
                title=title,
                main_topic=_text(_field(raw, "mainTopic", "main_topic", "topic")),
                slide_type=slide_type,
                order=_coerce_order(_field(raw, "order"), index + 1),
            )
        )
    return items
