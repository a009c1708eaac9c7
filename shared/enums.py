"""
Enums and constants used across the application.
"""

from enum import Enum
from typing import Any


class SlideType(str, Enum):
    """Narrative role of a slide within a deck."""

    TITLE = "TITLE"
    INTRO = "INTRO"
    CONTENT = "CONTENT"
    CONCLUSION = "CONCLUSION"
    NEXT_STEPS = "NEXT_STEPS"


class SlideLayout(str, Enum):
    """Named slide layouts understood by the editor and viewer."""

    TEXT_ONLY = "TEXT_ONLY"
    TITLE_COVER = "TITLE_COVER"
    TITLE_ONLY = "TITLE_ONLY"
    TEXT_IMAGE_LEFT = "TEXT_IMAGE_LEFT"
    TEXT_IMAGE_RIGHT = "TEXT_IMAGE_RIGHT"
    IMAGE_FULL = "IMAGE_FULL"
    BULLETS_IMAGE = "BULLETS_IMAGE"
    TWO_COLUMN = "TWO_COLUMN"
    IMAGE_BACKGROUND = "IMAGE_BACKGROUND"
    TIMELINE = "TIMELINE"
    QUOTE_LARGE = "QUOTE_LARGE"
    STATISTICS_GRID = "STATISTICS_GRID"
    IMAGE_OVERLAY = "IMAGE_OVERLAY"
    SPLIT_CONTENT = "SPLIT_CONTENT"
    COMPARISON = "COMPARISON"


class TextAlign(str, Enum):
    LEFT = "LEFT"
    CENTER = "CENTER"
    RIGHT = "RIGHT"
    JUSTIFY = "JUSTIFY"


class RhetoricalFramework(str, Enum):
    """Fixed framings used when brainstorming angles for an idea."""

    CUB = "CUB"
    PASE = "PASE"
    HEAR = "HEAR"
    WWH = "WWH"


class ShapeType(str, Enum):
    """Vector shapes supported by the annotation overlay."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    LINE = "line"
    ARROW = "arrow"
    PATH = "path"


DEFAULT_SLIDE_LAYOUTS: dict[SlideType, SlideLayout] = {
    SlideType.TITLE: SlideLayout.TITLE_ONLY,
    SlideType.INTRO: SlideLayout.TEXT_ONLY,
    SlideType.CONTENT: SlideLayout.TEXT_IMAGE_RIGHT,
    SlideType.CONCLUSION: SlideLayout.TEXT_ONLY,
    SlideType.NEXT_STEPS: SlideLayout.BULLETS_IMAGE,
}

# Layouts that render an image slot and receive a placeholder on creation
IMAGE_LAYOUTS = frozenset(
    {
        SlideLayout.TEXT_IMAGE_LEFT,
        SlideLayout.TEXT_IMAGE_RIGHT,
        SlideLayout.IMAGE_FULL,
        SlideLayout.BULLETS_IMAGE,
        SlideLayout.IMAGE_BACKGROUND,
        SlideLayout.IMAGE_OVERLAY,
        SlideLayout.SPLIT_CONTENT,
        SlideLayout.COMPARISON,
    }
)

LAYOUT_CATALOG: tuple[dict[str, str], ...] = (
    {"id": "TEXT_ONLY", "name": "Text Only", "description": "Simple text-based slide"},
    {"id": "TITLE_COVER", "name": "Title Cover", "description": "Large title slide with subtitle"},
    {"id": "TITLE_ONLY", "name": "Title Only", "description": "Clean title slide without subtitle"},
    {"id": "TEXT_IMAGE_LEFT", "name": "Text + Image Left", "description": "Image on left, text on right"},
    {"id": "TEXT_IMAGE_RIGHT", "name": "Text + Image Right", "description": "Text on left, image on right"},
    {"id": "IMAGE_FULL", "name": "Full Image", "description": "Image covers entire slide"},
    {"id": "BULLETS_IMAGE", "name": "Bullets + Image", "description": "Bullet points with supporting image"},
    {"id": "TWO_COLUMN", "name": "Two Columns", "description": "Side-by-side content layout"},
    {"id": "IMAGE_BACKGROUND", "name": "Image Background", "description": "Text over background image"},
    {"id": "TIMELINE", "name": "Timeline", "description": "Sequential timeline layout"},
    {"id": "QUOTE_LARGE", "name": "Large Quote", "description": "Prominent quote or testimonial"},
    {"id": "STATISTICS_GRID", "name": "Statistics Grid", "description": "Grid layout for stats and numbers"},
    {"id": "IMAGE_OVERLAY", "name": "Image Overlay", "description": "Text overlaid on image with effects"},
    {"id": "SPLIT_CONTENT", "name": "Split Content", "description": "Asymmetrical content split"},
    {"id": "COMPARISON", "name": "Comparison", "description": "Side-by-side comparison layout"},
)


def _normalize_token(value: Any) -> str | None:
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, str):
        return None
    token = value.strip().upper().replace("-", "_").replace(" ", "_")
    return token or None


def coerce_slide_type(value: Any) -> SlideType | None:
    """Map a raw slide type to the enum, or None when it is not one of the five roles."""
    token = _normalize_token(value)
    if token is None:
        return None
    try:
        return SlideType(token)
    except ValueError:
        return None


def default_layout_for(slide_type: SlideType | str | None) -> SlideLayout:
    resolved = coerce_slide_type(slide_type)
    if resolved is None:
        return SlideLayout.TEXT_ONLY
    return DEFAULT_SLIDE_LAYOUTS.get(resolved, SlideLayout.TEXT_ONLY)


def coerce_layout(value: Any, slide_type: SlideType | str | None = None) -> SlideLayout:
    """Map a raw layout to the enum; unknown or missing layouts use the slide type's default."""
    token = _normalize_token(value)
    if token is not None:
        try:
            return SlideLayout(token)
        except ValueError:
            pass
    return default_layout_for(slide_type)


def coerce_text_align(value: Any) -> TextAlign:
    token = _normalize_token(value)
    if token is not None:
        try:
            return TextAlign(token)
        except ValueError:
            pass
    return TextAlign.LEFT
