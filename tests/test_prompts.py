"""Tests for prompt templates and context builders."""

import pytest

from services.generation.prompts import (
    ALL_TEMPLATES,
    DEFAULT_VOICE_CONTEXT,
    SLIDE_GENERATION,
    SLIDE_REGENERATION,
    PromptRenderError,
    PromptTemplate,
    build_framework_context,
    build_voice_context,
)
from shared.enums import SlideLayout, SlideType
from shared.models import Framework, FrameworkSlideData, VoiceProfile


def test_template_rejects_undeclared_placeholder() -> None:
    with pytest.raises(PromptRenderError, match="undeclared=\\['name'\\]"):
        PromptTemplate("broken", "Hello {name}", set())


def test_template_rejects_unused_declaration() -> None:
    with pytest.raises(PromptRenderError, match="unused=\\['extra'\\]"):
        PromptTemplate("broken", "Hello {name}", {"name", "extra"})


def test_render_requires_exact_context() -> None:
    template = PromptTemplate("greeting", 'Hi {name}, data: {"key": 1}', {"name"})

    assert template.render({"name": "Ada"}) == 'Hi Ada, data: {"key": 1}'
    with pytest.raises(PromptRenderError, match="missing"):
        template.render({})
    with pytest.raises(PromptRenderError, match="unknown"):
        template.render({"name": "Ada", "tone": "warm"})


def test_every_template_renders_with_its_declared_placeholders() -> None:
    for template in ALL_TEMPLATES:
        rendered = template.render({name: f"<{name}>" for name in template.placeholders})
        for name in template.placeholders:
            assert f"<{name}>" in rendered


def test_regeneration_prompt_keeps_order_in_json_example() -> None:
    rendered = SLIDE_REGENERATION.render({name: "x" for name in SLIDE_REGENERATION.placeholders} | {"order": 3})
    assert '"order": 3' in rendered


def test_voice_context_lists_non_empty_fields() -> None:
    profile = VoiceProfile(id="v1", name="Friendly", tone=["warm", "casual"], audience=["students"])

    context = build_voice_context(profile)

    assert context.startswith("VOICE & STYLE CONTEXT:")
    assert "Tone: warm, casual" in context
    assert "Target Audience: students" in context
    assert "Restrictions" not in context
    assert build_voice_context(None) == DEFAULT_VOICE_CONTEXT


def test_framework_context_lists_slides_in_order() -> None:
    framework = Framework(
        id="f1",
        name="Two step",
        slides=[
            FrameworkSlideData(title="Second", instructions="Then this", order=2),
            FrameworkSlideData(
                title="First", instructions="Start here", slide_type=SlideType.TITLE, layout=SlideLayout.TITLE_COVER, order=1
            ),
        ],
    )

    context = build_framework_context(framework)

    assert "You must create exactly 2 slides" in context
    assert context.index("Slide 1: First") < context.index("Slide 2: Second")
    assert "Layout: TITLE_COVER" in context
    assert "Instructions: Then this" in context
    assert build_framework_context(None) == ""
    assert build_framework_context(Framework(id="f2", name="Empty")) == ""


def test_slide_generation_prompt_embeds_framework_block() -> None:
    framework = Framework(id="f1", name="One", slides=[FrameworkSlideData(title="Only", order=1)])
    prompt = SLIDE_GENERATION.render(
        {
            "topic": "Heat pumps",
            "title": "Heat",
            "voice_context": build_voice_context(None),
            "framework_context": build_framework_context(framework),
        }
    )
    assert "TOPIC: Heat pumps" in prompt
    assert "FRAMEWORK REQUIREMENTS:" in prompt
