"""
Prompt templates for slide generation.

Every template declares the placeholders it uses. The declaration is checked
against the template text when the module is imported, and rendering fails
loudly when the context is missing a placeholder or carries an unknown one.
JSON examples inside templates use quoted keys, so only bare ``{name}``
tokens count as placeholders.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from shared.models import Angle, Framework, FrameworkSlideData, StructureSlide, VoiceProfile

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


class PromptRenderError(Exception):
    """Raised when a template and its context disagree on placeholders."""


class PromptTemplate:
    """A named template with an explicit placeholder set."""

    def __init__(self, name: str, text: str, placeholders: Iterable[str]):
        self.name = name
        self.text = text
        self.placeholders = frozenset(placeholders)

        found = frozenset(PLACEHOLDER_PATTERN.findall(text))
        if found != self.placeholders:
            undeclared = sorted(found - self.placeholders)
            unused = sorted(self.placeholders - found)
            raise PromptRenderError(
                f"Template '{name}' placeholder mismatch: undeclared={undeclared}, unused={unused}"
            )

    def render(self, context: Mapping[str, Any]) -> str:
        """Substitute every placeholder; the context must match the declared set exactly."""
        provided = frozenset(context)
        missing = self.placeholders - provided
        unknown = provided - self.placeholders
        if missing or unknown:
            raise PromptRenderError(
                f"Template '{self.name}' cannot render: missing={sorted(missing)}, unknown={sorted(unknown)}"
            )
        return PLACEHOLDER_PATTERN.sub(lambda match: str(context[match.group(1)]), self.text)

    def __repr__(self) -> str:
        return f"<PromptTemplate(name={self.name}, placeholders={sorted(self.placeholders)})>"


SYSTEM_PROMPT = """You are a professional presentation creator. Your role is to generate compelling, well-structured presentation content that engages audiences and achieves the presenter's objectives.

Key principles:
- Create content that is clear, engaging, and actionable
- Maintain consistent tone and style throughout
- Structure information logically and persuasively
- Use appropriate formatting for presentation slides
- Ensure content is relevant to the intended audience
- Follow any specific framework requirements exactly"""

DEFAULT_VOICE_CONTEXT = "Use a professional, clear, and engaging tone suitable for business presentations."

_SLIDE_TYPES = "TITLE|INTRO|CONTENT|CONCLUSION|NEXT_STEPS"
_LAYOUTS = (
    "TEXT_ONLY|TITLE_COVER|TITLE_ONLY|TEXT_IMAGE_LEFT|TEXT_IMAGE_RIGHT|IMAGE_FULL|BULLETS_IMAGE|"
    "TWO_COLUMN|IMAGE_BACKGROUND|TIMELINE|QUOTE_LARGE|STATISTICS_GRID|IMAGE_OVERLAY|SPLIT_CONTENT|COMPARISON"
)

SLIDE_GENERATION = PromptTemplate(
    "slide_generation",
    """Generate presentation slides based on the following requirements:

TOPIC: {topic}
PRESENTATION TITLE: {title}

{voice_context}

{framework_context}

OUTPUT FORMAT:
Return a JSON array of slide objects with this exact structure:
[
  {
    "title": "slide title",
    "content": "slide content in markdown format with proper headings and bullet points",
    "slideType": "%s",
    "layout": "%s",
    "order": 1
  }
]

CONTENT REQUIREMENTS:
- Use markdown formatting (##, ###, -, etc.)
- Create engaging, actionable content
- Ensure each slide serves a clear purpose
- Make content appropriate for the target audience
- Include specific examples and actionable insights where relevant
- Keep content concise but comprehensive
- Use bullet points effectively for key information

TITLE SLIDE REQUIREMENTS:
- ONLY include the presentation title, nothing else
- No subtitles, definitions, or additional content
- Simple format: just "# Title"
- Keep it clean and focused

IMPORTANT: Return ONLY the JSON array, no additional text or explanations."""
    % (_SLIDE_TYPES, _LAYOUTS),
    {"topic", "title", "voice_context", "framework_context"},
)

SLIDE_REGENERATION = PromptTemplate(
    "slide_regeneration",
    """Regenerate and enhance the following slide:

ORIGINAL SLIDE:
Title: {original_title}
Content: {original_content}
Type: {slide_type}
Layout: {layout}

ENHANCEMENT CONTEXT:
Topic: {topic}
Additional Context: {additional_context}

{voice_context}

REQUIREMENTS:
- Significantly improve the content while maintaining the slide's purpose
- Keep the same slideType and layout unless improvement requires a change
- Make content more engaging, specific, and actionable
- Add relevant examples or insights where appropriate
- Ensure content flows well and serves the presentation's overall narrative

OUTPUT FORMAT:
Return a JSON object with this exact structure:
{
  "title": "enhanced slide title",
  "content": "enhanced slide content in markdown format",
  "slideType": "same or improved slide type",
  "layout": "same or improved layout",
  "order": {order}
}

IMPORTANT: Return ONLY the JSON object, no additional text or explanations.""",
    {"original_title", "original_content", "slide_type", "layout", "topic", "additional_context", "voice_context", "order"},
)

OUTLINE = PromptTemplate(
    "outline",
    """Generate a simple presentation outline to verify topic understanding:

TOPIC: {topic}
PRESENTATION TITLE: {title}

{voice_context}

{framework_context}

Create a simple outline showing slide titles and main topic to confirm understanding before generating full slides.

OUTPUT FORMAT:
Return a JSON array with this structure:
[
  {
    "title": "slide title",
    "mainTopic": "what this slide covers in one sentence",
    "slideType": "%s",
    "order": 1
  }
]

REQUIREMENTS:
- Keep it simple - just slide titles and one-sentence topics
- Focus on ensuring topic understanding is correct
- Create 4-7 slides typically
- Make sure the main subject/acronyms are interpreted correctly

IMPORTANT: Return ONLY the JSON array, no additional text or explanations."""
    % _SLIDE_TYPES,
    {"topic", "title", "voice_context", "framework_context"},
)

_NARRATION_REQUIREMENTS = """SPEAKER NOTES REQUIREMENTS:
- Write detailed, word-for-word narration that explains each slide
- Notes should flow naturally and be comprehensive enough to read directly
- Explain each point on the slide in detail with context and examples
- Match the voice profile tone and style
- Include transitions between points and slides
- Make notes conversational and engaging for the audience"""

SLIDES_FROM_OUTLINE = PromptTemplate(
    "slides_from_outline",
    """Generate detailed presentation slides based on the approved outline:

OUTLINE: {outline}

PRESENTATION TITLE: {title}

{voice_context}

Generate full slide content with detailed speaker notes based on the approved outline structure.

OUTPUT FORMAT:
Return a JSON array of slide objects with this exact structure:
[
  {
    "title": "slide title",
    "content": "detailed slide content in markdown format with proper headings and bullet points",
    "narration": "word-for-word speaker notes the presenter will say while showing this slide",
    "slideType": "%s",
    "layout": "%s",
    "order": 1
  }
]

CONTENT REQUIREMENTS:
- Use markdown formatting (##, ###, -, etc.)
- Follow the approved structure and key points exactly
- Make content appropriate for the target audience
- Keep content concise but comprehensive

%s

TITLE SLIDE REQUIREMENTS:
- Content should ONLY include the presentation title
- Speaker notes should welcome the audience and introduce the topic

IMPORTANT: Return ONLY the JSON array, no additional text or explanations."""
    % (_SLIDE_TYPES, _LAYOUTS, _NARRATION_REQUIREMENTS),
    {"outline", "title", "voice_context"},
)

ANGLES = PromptTemplate(
    "angles",
    """Brainstorm presentation angles for the following idea:

IDEA: {idea_title}
DETAILS: {idea_description}

Produce exactly one angle for each of these rhetorical frameworks, in this order:
{framework_guide}

OUTPUT FORMAT:
Return a JSON array with this structure:
[
  {
    "framework": "CUB|PASE|HEAR|WWH",
    "title": "a compelling presentation title for this angle",
    "description": "two sentences describing the framing and who it is for",
    "keyPoints": ["first major point", "second major point", "third major point"]
  }
]

REQUIREMENTS:
- Each angle must feel distinct from the others
- Key points are the major talking points of the talk, in delivery order
- Provide three to five key points per angle

IMPORTANT: Return ONLY the JSON array, no additional text or explanations.""",
    {"idea_title", "idea_description", "framework_guide"},
)

ANGLE_EXPANSION = PromptTemplate(
    "angle_expansion",
    """Write a complete presentation from the chosen angle:

IDEA: {idea_title}
DETAILS: {idea_description}

ANGLE: {angle_title}
FRAMEWORK: {framework_label}
FRAMING: {angle_description}

{voice_context}

SLIDE STRUCTURE:
You must create exactly {slide_count} slides in this order:

{structure}

OUTPUT FORMAT:
Return a JSON array of slide objects with this exact structure:
[
  {
    "title": "slide title",
    "content": "slide content in markdown format",
    "narration": "word-for-word speaker notes for this slide",
    "slideType": "%s",
    "layout": "%s",
    "order": 1
  }
]

%s

IMPORTANT: Return ONLY the JSON array, no additional text or explanations."""
    % (_SLIDE_TYPES, _LAYOUTS, _NARRATION_REQUIREMENTS),
    {
        "idea_title",
        "idea_description",
        "angle_title",
        "framework_label",
        "angle_description",
        "voice_context",
        "slide_count",
        "structure",
    },
)

ALL_TEMPLATES = (SLIDE_GENERATION, SLIDE_REGENERATION, OUTLINE, SLIDES_FROM_OUTLINE, ANGLES, ANGLE_EXPANSION)

_VOICE_LINES = (
    ("tone", "Tone"),
    ("audience", "Target Audience"),
    ("objective", "Presentation Objectives"),
    ("brand_voice", "Brand Voice"),
    ("content_style", "Content Style"),
    ("restrictions", "Restrictions"),
    ("other", "Additional Instructions"),
)


def build_voice_context(voice_profile: VoiceProfile | None) -> str:
    """Render a voice profile as a prompt block, or the generic default sentence."""
    if voice_profile is None:
        return DEFAULT_VOICE_CONTEXT

    lines = ["VOICE & STYLE CONTEXT:"]
    for field, label in _VOICE_LINES:
        values = getattr(voice_profile, field) or []
        if values:
            lines.append(f"{label}: {', '.join(values)}")
    return "\n".join(lines) + "\n"


def build_framework_context(framework: Framework | None) -> str:
    """List every framework slide verbatim; empty when generating free-form."""
    if framework is None or not framework.slides:
        return ""

    slides: list[FrameworkSlideData] = sorted(framework.slides, key=lambda slide: slide.order)
    parts = [
        "FRAMEWORK REQUIREMENTS:",
        f"You must create exactly {len(slides)} slides following this specific structure:",
        "",
    ]
    for index, slide in enumerate(slides, start=1):
        parts.extend(
            [
                f"Slide {index}: {slide.title}",
                f"Type: {slide.slide_type.value}",
                f"Layout: {slide.layout.value}",
                f"Instructions: {slide.instructions}",
                "",
            ]
        )
    parts.append(
        "CRITICAL: Follow the slide order and instructions exactly. "
        "Each slide must serve its specific purpose as outlined above."
    )
    return "\n".join(parts)


def build_structure_context(structure: list[StructureSlide]) -> str:
    lines = []
    for index, planned in enumerate(structure, start=1):
        line = f"Slide {index}: {planned.title} [{planned.slide_type.value} / {planned.layout.value}] - {planned.purpose}"
        if planned.key_point:
            line += f" (Key point: {planned.key_point})"
        lines.append(line)
    return "\n".join(lines)


def describe_angle(angle: Angle) -> str:
    points = "; ".join(angle.key_points)
    return f"{angle.description} Key points: {points}" if points else angle.description
