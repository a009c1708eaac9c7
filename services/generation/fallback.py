"""Static content used whenever the model is unavailable or returns garbage."""

from shared.enums import SlideLayout, SlideType, default_layout_for
from shared.models import GeneratedSlide, OutlineItem, SlideSnapshot, StructureSlide
from shared.utils import title_from_request

REGENERATION_MARKER = "_(Enhanced version)_"

_SPEAKER_NOTES = {
    SlideType.INTRO: (
        "This slide introduces the main topic. Take your time to explain the key concepts "
        "and make sure the audience understands the context."
    ),
    SlideType.CONTENT: (
        "This is a key content slide. Walk through each point clearly and provide examples where relevant. "
        "Engage with the audience and check for understanding."
    ),
    SlideType.CONCLUSION: (
        "We're now reaching the conclusion. Summarize the main points and reinforce the key takeaways "
        "from this presentation."
    ),
    SlideType.NEXT_STEPS: (
        "Conclude with clear next steps. Make sure the audience knows what actions to take and provide "
        "any necessary resources or contact information."
    ),
}


def default_speaker_notes(slide_type: SlideType, title: str) -> str:
    """Notes persisted for a slide when the model supplied none."""
    if slide_type == SlideType.TITLE:
        return (
            f'Welcome everyone to this presentation on "{title}". '
            "This opening slide sets the stage for what we'll be covering today."
        )
    notes = _SPEAKER_NOTES.get(slide_type)
    if notes:
        return notes
    return f'Speaker notes for "{title}": Review the content on this slide and expand on the key points.'


def fallback_slides(topic: str, title: str) -> list[GeneratedSlide]:
    """The four-slide skeleton: Title, Overview, Main Content, Conclusion."""
    topic = topic.strip() or title
    return [
        GeneratedSlide(
            title=title,
            content=f"# {title}",
            slide_type=SlideType.TITLE,
            layout=SlideLayout.TITLE_COVER,
            order=1,
        ),
        GeneratedSlide(
            title="Overview",
            content=(
                "## Overview\n\n"
                f"- What this presentation covers: {topic}\n"
                "- Why it matters now\n"
                "- What you will be able to do afterwards"
            ),
            slide_type=SlideType.INTRO,
            layout=SlideLayout.TEXT_ONLY,
            order=2,
        ),
        GeneratedSlide(
            title="Main Content",
            content=(
                "## Main Content\n\n"
                f"### Key Points\n- Core concepts behind {topic}\n- Practical applications and examples\n"
                "- Benefits and expected outcomes\n- Implementation considerations"
            ),
            slide_type=SlideType.CONTENT,
            layout=default_layout_for(SlideType.CONTENT),
            order=3,
        ),
        GeneratedSlide(
            title="Conclusion",
            content=(
                "## Key Takeaways\n\n"
                "- We explored the fundamental concepts and their applications\n"
                "- We discussed practical strategies for implementation\n"
                "- Questions and discussion"
            ),
            slide_type=SlideType.CONCLUSION,
            layout=SlideLayout.TEXT_ONLY,
            order=4,
        ),
    ]


def fallback_outline(topic: str, title: str) -> list[OutlineItem]:
    return [
        OutlineItem(
            title=slide.title,
            main_topic=slide.content.splitlines()[-1].lstrip("-# ").strip() or slide.title,
            slide_type=slide.slide_type,
            order=slide.order,
        )
        for slide in fallback_slides(topic, title)
    ]


def slides_from_outline_fallback(outline: list[OutlineItem], title: str) -> list[GeneratedSlide]:
    slides = []
    for position, item in enumerate(sorted(outline, key=lambda entry: entry.order), start=1):
        if item.slide_type == SlideType.TITLE:
            content = f"# {title}"
        else:
            content = f"## {item.title}\n\n{item.main_topic}".rstrip()
        slides.append(
            GeneratedSlide(
                title=item.title,
                content=content,
                slide_type=item.slide_type,
                layout=default_layout_for(item.slide_type),
                order=position,
                narration=default_speaker_notes(item.slide_type, item.title),
            )
        )
    return slides


def fallback_regeneration(original: SlideSnapshot, layout: SlideLayout, additional_context: str | None) -> GeneratedSlide:
    """Keep the original slide and mark it as enhanced instead of discarding it."""
    marker = REGENERATION_MARKER
    if additional_context and additional_context.strip():
        marker = f"_(Enhanced version: {additional_context.strip()})_"
    return GeneratedSlide(
        title=original.title,
        content=f"{original.content.rstrip()}\n\n{marker}",
        slide_type=original.slide_type,
        layout=layout,
        order=max(original.order, 1),
    )


def custom_slide_from_request(prompt: str, slide_type: SlideType) -> GeneratedSlide:
    """Slide synthesized straight from an editor's 'AI add slide' request."""
    title = title_from_request(prompt)
    content = (
        f"## {title}\n\n"
        f"### Overview\n{prompt.strip()}\n\n"
        "### Key Points\n"
        "- Main concept and its importance\n"
        "- Practical applications and use cases\n"
        "- Benefits and expected outcomes\n"
        "- Implementation considerations"
    )
    return GeneratedSlide(
        title=title,
        content=content,
        slide_type=slide_type,
        layout=default_layout_for(slide_type),
        order=1,
    )


def slides_from_structure(structure: list[StructureSlide], deck_title: str) -> list[GeneratedSlide]:
    """Render an angle expansion plan directly as slides."""
    slides = []
    for position, planned in enumerate(structure, start=1):
        if planned.slide_type == SlideType.TITLE:
            content = f"# {deck_title}"
        elif planned.key_point:
            content = f"## {planned.title}\n\n**{planned.key_point}**\n\n{planned.purpose}"
        else:
            content = f"## {planned.title}\n\n{planned.purpose}"
        slides.append(
            GeneratedSlide(
                title=planned.title,
                content=content,
                slide_type=planned.slide_type,
                layout=planned.layout,
                order=position,
                narration=default_speaker_notes(planned.slide_type, planned.title),
            )
        )
    return slides
