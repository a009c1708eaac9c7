"""Tests for coercing model output into valid slides."""

from services.generation.normalizer import infer_slide_type, normalize_outline, normalize_slides
from shared.enums import SlideLayout, SlideType


def test_missing_fields_are_filled_from_position() -> None:
    slides = normalize_slides([{"title": "Deck"}, {"title": "Introduction"}, {"content": ["one", "two"]}, {}])

    assert [slide.order for slide in slides] == [1, 2, 3, 4]
    assert [slide.slide_type for slide in slides] == [
        SlideType.TITLE,
        SlideType.INTRO,
        SlideType.CONTENT,
        SlideType.NEXT_STEPS,
    ]
    assert slides[0].layout is SlideLayout.TITLE_ONLY
    assert slides[2].title == "Slide 3"
    assert slides[2].content == "- one\n- two"


def test_unknown_enum_values_are_coerced() -> None:
    slides = normalize_slides(
        [
            {"title": "Deck", "slideType": "title", "layout": "SPINNING_CUBE", "order": 0},
            {"title": "Body", "slide_type": "content", "layout": "two_column", "order": "2"},
        ]
    )

    assert slides[0].slide_type is SlideType.TITLE
    assert slides[0].layout is SlideLayout.TITLE_ONLY
    assert slides[0].order == 1
    assert slides[1].layout is SlideLayout.TWO_COLUMN
    assert slides[1].order == 2


def test_narration_aliases() -> None:
    slides = normalize_slides([{"title": "A", "speakerNotes": "Say hi"}, {"title": "B", "narration": "  "}])
    assert slides[0].narration == "Say hi"
    assert slides[1].narration is None


def test_normalizing_twice_is_stable() -> None:
    once = normalize_slides(
        [
            {"title": "Deck"},
            {"title": "Why", "slideType": "INTRO", "narration": "n"},
            {"title": "Summary", "layout": "QUOTE_LARGE"},
        ]
    )
    assert normalize_slides(once) == once


def test_infer_slide_type_keywords() -> None:
    assert infer_slide_type("Anything", 0, 5) is SlideType.TITLE
    assert infer_slide_type("Introduction", 1, 5) is SlideType.INTRO
    assert infer_slide_type("Summary", 3, 5) is SlideType.CONCLUSION
    assert infer_slide_type("Action items", 2, 5) is SlideType.NEXT_STEPS
    assert infer_slide_type("Details", 2, 5) is SlideType.CONTENT


def test_normalize_outline() -> None:
    items = normalize_outline([{"title": "Deck", "mainTopic": "Opening"}, {"title": "Costs", "topic": "Money"}])
    assert items[0].slide_type is SlideType.TITLE
    assert items[1].main_topic == "Money"
    assert items[1].order == 2


def test_non_finite_order_uses_position() -> None:
    slides = normalize_slides([{"title": "Deck", "order": float("inf")}, {"title": "Body", "order": float("-inf")}])
    assert [slide.order for slide in slides] == [1, 2]
    assert normalize_outline([{"title": "Deck", "order": float("inf")}])[0].order == 1
