"""Rhetorical frameworks used to brainstorm and expand idea angles."""

from pydantic import BaseModel

from shared.enums import RhetoricalFramework, SlideLayout, SlideType
from shared.models import Angle, StructureSlide


class FrameworkBeat(BaseModel):
    title: str
    purpose: str


class RhetoricalFrameworkDefinition(BaseModel):
    code: RhetoricalFramework
    label: str
    template_name: str
    summary: str
    beats: tuple[FrameworkBeat, ...]


RHETORICAL_FRAMEWORKS: dict[RhetoricalFramework, RhetoricalFrameworkDefinition] = {
    RhetoricalFramework.CUB: RhetoricalFrameworkDefinition(
        code=RhetoricalFramework.CUB,
        label="Contrarian, Useful, Bridge",
        template_name="CUB Framework",
        summary="Challenge a common belief, offer something useful, bridge to action.",
        beats=(
            FrameworkBeat(title="Contrarian", purpose="Challenge the conventional wisdom around this point."),
            FrameworkBeat(title="Useful", purpose="Give the audience a practical, usable insight."),
            FrameworkBeat(title="Bridge", purpose="Connect the insight to the audience's own situation."),
        ),
    ),
    RhetoricalFramework.PASE: RhetoricalFrameworkDefinition(
        code=RhetoricalFramework.PASE,
        label="Problem, Agitate, Solve, Expand",
        template_name="PASE Framework",
        summary="Name the problem, make it felt, solve it, then widen the horizon.",
        beats=(
            FrameworkBeat(title="Problem", purpose="State the problem plainly and make it relatable."),
            FrameworkBeat(title="Agitate", purpose="Show the cost of leaving the problem unsolved."),
            FrameworkBeat(title="Solve", purpose="Present the solution and how it works."),
            FrameworkBeat(title="Expand", purpose="Show what becomes possible once it is solved."),
        ),
    ),
    RhetoricalFramework.HEAR: RhetoricalFrameworkDefinition(
        code=RhetoricalFramework.HEAR,
        label="Hook, Empathy, Authority, Roadmap",
        template_name="HEAR Framework",
        summary="Grab attention, show understanding, earn trust, lay out the path.",
        beats=(
            FrameworkBeat(title="Hook", purpose="Open with a surprising fact, story or question."),
            FrameworkBeat(title="Empathy", purpose="Show you understand the audience's struggle."),
            FrameworkBeat(title="Authority", purpose="Back the point with evidence or experience."),
            FrameworkBeat(title="Roadmap", purpose="Lay out concrete steps forward."),
        ),
    ),
    RhetoricalFramework.WWH: RhetoricalFrameworkDefinition(
        code=RhetoricalFramework.WWH,
        label="What, Why, How",
        template_name="What-Why-How Framework",
        summary="Define it, explain why it matters, show how to do it.",
        beats=(
            FrameworkBeat(title="What", purpose="Define the point clearly, with scope and characteristics."),
            FrameworkBeat(title="Why", purpose="Explain why it matters and what it solves."),
            FrameworkBeat(title="How", purpose="Give actionable steps for putting it into practice."),
        ),
    ),
}

FRAMEWORK_ORDER: tuple[RhetoricalFramework, ...] = tuple(RhetoricalFramework)

CORE_IDEA_POINT = "Core Idea"


def framework_guide() -> str:
    return "\n".join(f"- {item.code.value} ({item.label}): {item.summary}" for item in RHETORICAL_FRAMEWORKS.values())


def static_angles(idea_title: str, idea_description: str) -> list[Angle]:
    """One angle per framework built without the model."""
    subject = idea_title.strip() or "This Idea"
    detail = idea_description.strip()
    titles = {
        RhetoricalFramework.CUB: f"What Everyone Gets Wrong About {subject}",
        RhetoricalFramework.PASE: f"The Hidden Cost of Ignoring {subject}",
        RhetoricalFramework.HEAR: f"{subject}: A Practical Roadmap",
        RhetoricalFramework.WWH: f"{subject}: What, Why and How",
    }
    angles = []
    for code in FRAMEWORK_ORDER:
        definition = RHETORICAL_FRAMEWORKS[code]
        description = definition.summary if not detail else f"{definition.summary} Applied to: {detail}"
        angles.append(
            Angle(
                framework=code,
                title=titles[code],
                description=description,
                key_points=[beat.title for beat in definition.beats],
                framework_name=definition.template_name,
            )
        )
    return angles


def complete_angle_set(candidates: list[Angle], idea_title: str, idea_description: str) -> list[Angle]:
    """Exactly one angle per framework, in fixed order; gaps filled from the static set."""
    by_framework: dict[RhetoricalFramework, Angle] = {}
    for angle in candidates:
        by_framework.setdefault(angle.framework, angle)

    fallback = {angle.framework: angle for angle in static_angles(idea_title, idea_description)}
    result = []
    for code in FRAMEWORK_ORDER:
        angle = by_framework.get(code) or fallback[code]
        result.append(angle.model_copy(update={"framework_name": RHETORICAL_FRAMEWORKS[code].template_name}))
    return result


def build_expansion_structure(angle: Angle, deck_title: str) -> list[StructureSlide]:
    """
    Plan the slides of an expanded angle.

    Title, two intro beats and a hook open the deck. The framework's beats are
    repeated for every key point with a transition slide between points, and a
    fixed three-slide close ends it.
    """
    definition = RHETORICAL_FRAMEWORKS[angle.framework]
    key_points = [point.strip() for point in angle.key_points if point and point.strip()] or [CORE_IDEA_POINT]

    structure = [
        StructureSlide(
            title=deck_title,
            slide_type=SlideType.TITLE,
            layout=SlideLayout.TITLE_COVER,
            purpose="Presentation title only.",
        ),
        StructureSlide(
            title="Why This Matters",
            slide_type=SlideType.INTRO,
            layout=SlideLayout.TEXT_ONLY,
            purpose="Set the stakes and explain why the audience should care.",
        ),
        StructureSlide(
            title="What We'll Cover",
            slide_type=SlideType.INTRO,
            layout=SlideLayout.BULLETS_IMAGE,
            purpose="Preview the key points: " + "; ".join(key_points),
        ),
        StructureSlide(
            title="The Hook",
            slide_type=SlideType.CONTENT,
            layout=SlideLayout.QUOTE_LARGE,
            purpose="A memorable quote, statistic or story that captures the angle.",
        ),
    ]

    for index, point in enumerate(key_points):
        if index > 0:
            structure.append(
                StructureSlide(
                    title=f"Next: {point}",
                    slide_type=SlideType.CONTENT,
                    layout=SlideLayout.TITLE_ONLY,
                    purpose="Transition from the previous point to the next one.",
                    key_point=point,
                )
            )
        for beat in definition.beats:
            structure.append(
                StructureSlide(
                    title=f"{point}: {beat.title}",
                    slide_type=SlideType.CONTENT,
                    layout=SlideLayout.TEXT_IMAGE_RIGHT,
                    purpose=beat.purpose,
                    key_point=point,
                )
            )

    structure.extend(
        [
            StructureSlide(
                title="Key Takeaways",
                slide_type=SlideType.CONCLUSION,
                layout=SlideLayout.TEXT_ONLY,
                purpose="Summarize every key point in one line each.",
            ),
            StructureSlide(
                title="Call to Action",
                slide_type=SlideType.NEXT_STEPS,
                layout=SlideLayout.BULLETS_IMAGE,
                purpose="Tell the audience exactly what to do next.",
            ),
            StructureSlide(
                title="Questions & Thank You",
                slide_type=SlideType.NEXT_STEPS,
                layout=SlideLayout.TITLE_ONLY,
                purpose="Thank the audience and open the floor for questions.",
            ),
        ]
    )
    return structure
