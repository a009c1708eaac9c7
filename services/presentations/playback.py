"""Playback payload for the presentation viewer."""

from shared.enums import coerce_layout, coerce_slide_type, coerce_text_align
from shared.models import PlaybackDeck, PlaybackSlide, Presentation
from shared.themes import effective_slide_colors


def build_playback(presentation: Presentation) -> PlaybackDeck:
    """
    Slides in order with their 1-based position, progress percentage and the
    colours the viewer should paint.
    """
    slides = sorted(presentation.slides, key=lambda slide: slide.order)
    total = len(slides)

    playback_slides = []
    for position, slide in enumerate(slides, start=1):
        slide_type = coerce_slide_type(slide.slide_type)
        layout = coerce_layout(slide.layout, slide_type)
        playback_slides.append(
            PlaybackSlide(
                id=slide.id,
                position=position,
                order=slide.order,
                title=slide.title,
                content=slide.content,
                narration=slide.narration,
                slide_type=slide_type or slide.slide_type,
                layout=layout,
                image_url=slide.image_url,
                annotations=slide.annotations,
                text_align=coerce_text_align(slide.text_align),
                show_title=slide.show_title,
                show_content=slide.show_content,
                colors=effective_slide_colors(
                    layout,
                    presentation.primary_color,
                    presentation.secondary_color,
                    slide.background_color,
                    slide.text_color,
                    slide.heading_color,
                ),
                progress=round(position / total * 100, 2),
            )
        )

    return PlaybackDeck(
        presentation_id=presentation.id,
        title=presentation.title,
        font_family=presentation.font_family,
        total_slides=total,
        slides=playback_slides,
    )
