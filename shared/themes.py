"""
Theme presets and colour helpers.

All seven presets live in :data:`THEME_PRESETS`. The resolver, the preset
picker endpoint, the "apply preset" operation and the playback colour
logic read from this one table.
"""

import re
from types import MappingProxyType

from pydantic import BaseModel

from shared.enums import SlideLayout

DEFAULT_THEME = "light"
DEFAULT_FONT_FAMILY = "Inter"
DEFAULT_PRIMARY_COLOR = "#3b82f6"
DEFAULT_SECONDARY_COLOR = "#1e40af"

MIN_CONTRAST_RATIO = 4.5

_HEX_PATTERN = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)


class ThemeColors(BaseModel):
    """Colours applied to a slide."""

    model_config = {"frozen": True}

    background_color: str
    text_color: str
    heading_color: str


class ThemePreset(BaseModel):
    """A named palette the presentation settings panel can apply."""

    model_config = {"frozen": True}

    name: str
    description: str
    primary_color: str
    secondary_color: str
    font_family: str
    colors: ThemeColors


def _preset(
    name: str,
    description: str,
    primary: str,
    secondary: str,
    background: str,
    text: str,
    heading: str,
    font_family: str = DEFAULT_FONT_FAMILY,
) -> ThemePreset:
    return ThemePreset(
        name=name,
        description=description,
        primary_color=primary,
        secondary_color=secondary,
        font_family=font_family,
        colors=ThemeColors(background_color=background, text_color=text, heading_color=heading),
    )


THEME_PRESETS: MappingProxyType[str, ThemePreset] = MappingProxyType(
    {
        "light": _preset("light", "Clean and professional", "#3B82F6", "#1E40AF", "#FFFFFF", "#374151", "#111827"),
        "dark": _preset("dark", "Modern and sleek", "#60A5FA", "#93C5FD", "#1F2937", "#D1D5DB", "#F9FAFB"),
        "midnight": _preset("midnight", "Deep black elegance", "#A855F7", "#C084FC", "#0F0F23", "#C7D2FE", "#E0E7FF"),
        "forest": _preset("forest", "Natural and calming", "#10B981", "#34D399", "#064E3B", "#A7F3D0", "#D1FAE5"),
        "sunset": _preset("sunset", "Warm and inviting", "#F59E0B", "#EF4444", "#FEF3C7", "#92400E", "#78350F"),
        "ocean": _preset("ocean", "Cool and refreshing", "#0EA5E9", "#0284C7", "#F0F9FF", "#0C4A6E", "#0B4B66"),
        "corporate": _preset(
            "corporate", "Professional business", "#374151", "#6B7280", "#F9FAFB", "#4B5563", "#1F2937", "Times"
        ),
    }
)

_PRESETS_BY_PAIR: MappingProxyType[tuple[str, str], ThemePreset] = MappingProxyType(
    {(p.primary_color.upper(), p.secondary_color.upper()): p for p in THEME_PRESETS.values()}
)


def match_theme_preset(primary_color: str | None, secondary_color: str | None) -> ThemePreset:
    """Return the preset whose colour pair matches exactly, else the light preset."""
    key = ((primary_color or "").strip().upper(), (secondary_color or "").strip().upper())
    return _PRESETS_BY_PAIR.get(key, THEME_PRESETS[DEFAULT_THEME])


def resolve_theme_defaults(primary_color: str | None, secondary_color: str | None) -> ThemeColors:
    """Colours a brand-new slide inherits from its presentation's palette."""
    return match_theme_preset(primary_color, secondary_color).colors


def get_theme_preset(name: str) -> ThemePreset | None:
    return THEME_PRESETS.get(name.strip().lower())


def hex_to_rgb(value: str) -> tuple[int, int, int] | None:
    match = _HEX_PATTERN.match(value.strip()) if value else None
    if not match:
        return None
    return tuple(int(part, 16) for part in match.groups())  # type: ignore[return-value]


def relative_luminance(value: str) -> float | None:
    """WCAG relative luminance of a ``#rrggbb`` colour."""
    rgb = hex_to_rgb(value)
    if rgb is None:
        return None

    def channel(component: int) -> float:
        c = component / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (channel(component) for component in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: str, second: str) -> float:
    """Contrast ratio between two colours; unparseable colours count as 1."""
    lum_first = relative_luminance(first)
    lum_second = relative_luminance(second)
    if lum_first is None or lum_second is None:
        return 1.0
    brightest, darkest = max(lum_first, lum_second), min(lum_first, lum_second)
    return (brightest + 0.05) / (darkest + 0.05)


def ensure_contrast(background_color: str, text_color: str, min_contrast: float = MIN_CONTRAST_RATIO) -> str:
    """Keep ``text_color`` if readable on the background, else switch to black or white."""
    if contrast_ratio(background_color, text_color) >= min_contrast:
        return text_color
    luminance = relative_luminance(background_color)
    if luminance is None:
        return text_color
    return "#000000" if luminance > 0.5 else "#FFFFFF"


def effective_slide_colors(
    layout: SlideLayout | str,
    primary_color: str,
    secondary_color: str,
    background_color: str | None = None,
    text_color: str | None = None,
    heading_color: str | None = None,
) -> ThemeColors:
    """
    Colours the viewer paints for a slide.

    Slide-level overrides win. Otherwise cover slides get a gradient of the
    presentation colours, background-image slides stay transparent, and every
    other layout uses the presentation's preset. Text colours are corrected for
    contrast against solid backgrounds (the primary colour stands in for a
    gradient).
    """
    layout_value = layout.value if isinstance(layout, SlideLayout) else str(layout)
    preset = resolve_theme_defaults(primary_color, secondary_color)
    on_image = layout_value in (SlideLayout.TITLE_COVER.value, SlideLayout.IMAGE_BACKGROUND.value)

    if background_color:
        background = background_color
    elif layout_value == SlideLayout.TITLE_COVER.value:
        background = f"linear-gradient(135deg, {primary_color}, {secondary_color})"
    elif layout_value == SlideLayout.IMAGE_BACKGROUND.value:
        background = "transparent"
    else:
        background = preset.background_color

    text = text_color or ("#FFFFFF" if on_image else preset.text_color)
    heading = heading_color or ("#FFFFFF" if on_image else preset.heading_color)

    solid = primary_color if background.startswith("linear-gradient") else background
    if solid != "transparent":
        text = ensure_contrast(solid, text)
        heading = ensure_contrast(solid, heading)

    return ThemeColors(background_color=background, text_color=text, heading_color=heading)
