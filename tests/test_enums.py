"""Tests for enum coercion of loosely-typed values."""

from shared.enums import (
    IMAGE_LAYOUTS,
    LAYOUT_CATALOG,
    SlideLayout,
    SlideType,
    TextAlign,
    coerce_layout,
    coerce_slide_type,
    coerce_text_align,
    default_layout_for,
)


def test_coerce_slide_type_accepts_case_and_separators() -> None:
    assert coerce_slide_type("content") is SlideType.CONTENT
    assert coerce_slide_type(" next-steps ") is SlideType.NEXT_STEPS
    assert coerce_slide_type(SlideType.TITLE) is SlideType.TITLE


def test_coerce_slide_type_rejects_unknown_values() -> None:
    assert coerce_slide_type("APPENDIX") is None
    assert coerce_slide_type("") is None
    assert coerce_slide_type(3) is None


def test_unknown_layout_uses_type_default() -> None:
    assert coerce_layout("HOLOGRAM", SlideType.CONTENT) is SlideLayout.TEXT_IMAGE_RIGHT
    assert coerce_layout(None, SlideType.TITLE) is SlideLayout.TITLE_ONLY
    assert coerce_layout(None) is SlideLayout.TEXT_ONLY
    assert coerce_layout("quote_large", SlideType.CONTENT) is SlideLayout.QUOTE_LARGE


def test_default_layout_for_unknown_type() -> None:
    assert default_layout_for("APPENDIX") is SlideLayout.TEXT_ONLY


def test_text_align_defaults_to_left() -> None:
    assert coerce_text_align("center") is TextAlign.CENTER
    assert coerce_text_align("diagonal") is TextAlign.LEFT


def test_layout_catalog_covers_every_layout() -> None:
    assert [entry["id"] for entry in LAYOUT_CATALOG] == [layout.value for layout in SlideLayout]
    assert len(IMAGE_LAYOUTS) == 8
