"""Framework templates installed by the seed operation."""

from services.generation.angles import RHETORICAL_FRAMEWORKS
from shared.enums import RhetoricalFramework, SlideLayout, SlideType
from shared.models import FrameworkRequest, FrameworkSlideData


def _slide(order: int, title: str, instructions: str, slide_type: SlideType) -> FrameworkSlideData:
    return FrameworkSlideData(
        title=title, instructions=instructions, slide_type=slide_type, layout=SlideLayout.TEXT_ONLY, order=order
    )


def _rhetorical_template(code: RhetoricalFramework) -> FrameworkRequest:
    """Template matching an idea angle: title, one slide per beat, next steps."""
    definition = RHETORICAL_FRAMEWORKS[code]
    slides = [
        _slide(1, "Title Slide", "Create a title slide that frames the angle of the presentation.", SlideType.TITLE)
    ]
    for beat in definition.beats:
        slides.append(_slide(len(slides) + 1, beat.title, beat.purpose, SlideType.CONTENT))
    slides.append(
        _slide(
            len(slides) + 1,
            "Next Steps",
            "Close with a clear call to action that follows from the argument.",
            SlideType.NEXT_STEPS,
        )
    )
    return FrameworkRequest(
        name=definition.template_name, description=f"{definition.label}. {definition.summary}", slides=slides
    )


FRAMEWORK_TEMPLATES: tuple[FrameworkRequest, ...] = (
    FrameworkRequest(
        name="What-Why-How Framework",
        description=(
            "Perfect for explaining concepts, processes, or solutions. Structures content around what "
            "something is, why it matters, and how to implement it."
        ),
        is_default=True,
        slides=[
            _slide(
                1,
                "Title Slide",
                "Create an engaging title slide that introduces the topic and sets the context for the presentation.",
                SlideType.TITLE,
            ),
            _slide(
                2,
                "What - Define the Topic",
                "Clearly explain what the topic is about. Provide definitions, scope, and key characteristics.",
                SlideType.CONTENT,
            ),
            _slide(
                3,
                "Why - Importance & Benefits",
                "Explain why this topic matters. Include benefits, problems it solves, and value proposition.",
                SlideType.CONTENT,
            ),
            _slide(
                4,
                "How - Implementation Steps",
                "Provide actionable steps or methodology for implementation. Include practical guidance.",
                SlideType.CONTENT,
            ),
            _slide(
                5,
                "Next Steps",
                "Summarize key takeaways and provide clear next steps or call-to-action for the audience.",
                SlideType.NEXT_STEPS,
            ),
        ],
    ),
    FrameworkRequest(
        name="Problem-Solution Framework",
        description=(
            "Ideal for pitches, proposals, and product presentations. Establishes a problem and presents "
            "your solution."
        ),
        slides=[
            _slide(
                1,
                "Title & Introduction",
                "Create an engaging title slide that hints at the problem or solution you'll be addressing.",
                SlideType.TITLE,
            ),
            _slide(
                2,
                "Problem Statement",
                "Clearly articulate the problem. Make it relatable and show why it needs to be solved urgently.",
                SlideType.CONTENT,
            ),
            _slide(
                3,
                "Current State Analysis",
                "Analyze the current situation, existing approaches, and why they fall short.",
                SlideType.CONTENT,
            ),
            _slide(
                4,
                "Our Solution",
                "Present your solution clearly. Explain how it addresses the problem uniquely and effectively.",
                SlideType.CONTENT,
            ),
            _slide(
                5,
                "Implementation Plan",
                "Outline how the solution will be implemented, including timeline, resources, and key milestones.",
                SlideType.CONTENT,
            ),
            _slide(
                6,
                "Expected Results",
                "Present anticipated outcomes, benefits, and success metrics. Include ROI if applicable.",
                SlideType.CONCLUSION,
            ),
        ],
    ),
    FrameworkRequest(
        name="Listicle Framework",
        description=(
            "Great for educational content, tips, best practices, or feature highlights. Structures "
            "content as numbered points or categories."
        ),
        slides=[
            _slide(
                1,
                "Introduction",
                "Create an engaging title slide that introduces the list topic and sets expectations for what "
                "the audience will learn.",
                SlideType.TITLE,
            ),
            _slide(
                2,
                "Overview",
                "Provide context and brief overview of why these items are important or relevant.",
                SlideType.INTRO,
            ),
            _slide(
                3,
                "Item 1",
                "Present the first item in your list. Provide clear explanation and practical examples.",
                SlideType.CONTENT,
            ),
            _slide(
                4,
                "Item 2",
                "Present the second item in your list. Maintain consistency in depth and style with item 1.",
                SlideType.CONTENT,
            ),
            _slide(
                5,
                "Item 3",
                "Present the third item in your list. Continue the pattern established in previous items.",
                SlideType.CONTENT,
            ),
            _slide(
                6,
                "Summary & Key Takeaways",
                "Summarize the main points and highlight the most important takeaways from the list.",
                SlideType.CONCLUSION,
            ),
        ],
    ),
    FrameworkRequest(
        name="Webinar Framework",
        description=(
            "Structured for educational webinars and training sessions. Includes engagement points and "
            "actionable content."
        ),
        slides=[
            _slide(
                1,
                "Welcome & Agenda",
                "Create a welcoming title slide that introduces the webinar topic and outlines the agenda.",
                SlideType.TITLE,
            ),
            _slide(
                2,
                "About the Speaker",
                "Brief introduction of the presenter, their expertise, and credibility on the topic.",
                SlideType.INTRO,
            ),
            _slide(
                3,
                "Learning Objectives",
                "Clearly state what attendees will learn and be able to do after the webinar.",
                SlideType.CONTENT,
            ),
            _slide(
                4,
                "Main Content Block 1",
                "Present the first major topic or learning module with detailed explanations and examples.",
                SlideType.CONTENT,
            ),
            _slide(
                5,
                "Interactive Element",
                "Include a poll, Q&A prompt, or interactive exercise to engage the audience.",
                SlideType.CONTENT,
            ),
            _slide(
                6,
                "Main Content Block 2",
                "Present the second major topic, building on the first content block.",
                SlideType.CONTENT,
            ),
            _slide(
                7,
                "Practical Application",
                "Show real-world examples, case studies, or hands-on demonstrations.",
                SlideType.CONTENT,
            ),
            _slide(
                8,
                "Q&A Session",
                "Dedicate time for questions and answers. Address common concerns or clarifications.",
                SlideType.CONTENT,
            ),
            _slide(
                9,
                "Resources & Next Steps",
                "Provide additional resources, contact information, and clear next steps for continued learning.",
                SlideType.NEXT_STEPS,
            ),
        ],
    ),
    FrameworkRequest(
        name="Storytelling Framework",
        description=(
            "Perfect for engaging presentations that need to connect emotionally. Uses narrative structure "
            "to deliver key messages."
        ),
        slides=[
            _slide(
                1,
                "Setting the Scene",
                "Create an engaging opening that introduces the story context and main character or situation.",
                SlideType.TITLE,
            ),
            _slide(
                2,
                "The Challenge",
                "Introduce the conflict, problem, or challenge that drives the story forward.",
                SlideType.CONTENT,
            ),
            _slide(
                3,
                "The Journey",
                "Describe the efforts, attempts, and journey toward solving the challenge. Include obstacles "
                "and learning.",
                SlideType.CONTENT,
            ),
            _slide(
                4,
                "The Resolution",
                "Present how the challenge was overcome and what solution or approach led to success.",
                SlideType.CONTENT,
            ),
            _slide(
                5,
                "The Lesson",
                "Extract the key lesson, principle, or message that the audience should take away from the story.",
                SlideType.CONCLUSION,
            ),
            _slide(
                6,
                "Application to You",
                "Help the audience connect the story to their own situation and provide actionable takeaways.",
                SlideType.NEXT_STEPS,
            ),
        ],
    ),
    _rhetorical_template(RhetoricalFramework.CUB),
    _rhetorical_template(RhetoricalFramework.PASE),
    _rhetorical_template(RhetoricalFramework.HEAR),
)


def template_summaries() -> list[dict]:
    return [
        {"name": template.name, "description": template.description, "slideCount": len(template.slides)}
        for template in FRAMEWORK_TEMPLATES
    ]
