from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from shared.enums import RhetoricalFramework, SlideLayout, SlideType, TextAlign
from shared.themes import ThemeColors


# Generation value objects
class GeneratedSlide(BaseModel):
    """A slide produced by the generation pipeline, before it is persisted."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    content: str = ""
    slide_type: SlideType = Field(alias="slideType")
    layout: SlideLayout
    order: int = Field(ge=1)
    narration: str | None = None


class OutlineItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    main_topic: str = Field(default="", alias="mainTopic")
    slide_type: SlideType = Field(default=SlideType.CONTENT, alias="slideType")
    order: int = Field(ge=1)


class Angle(BaseModel):
    """One framing of an idea under a rhetorical framework."""

    model_config = ConfigDict(populate_by_name=True)

    framework: RhetoricalFramework
    title: str
    description: str = ""
    key_points: list[str] = Field(default_factory=list, alias="keyPoints")
    framework_name: str | None = Field(default=None, alias="frameworkName")
    framework_id: str | None = Field(default=None, alias="frameworkId")


class StructureSlide(BaseModel):
    """One planned slide of an angle expansion."""

    title: str
    slide_type: SlideType
    layout: SlideLayout
    purpose: str
    key_point: str | None = None


class SlideSnapshot(BaseModel):
    id: str
    title: str
    content: str
    slide_type: SlideType
    order: int


class SlideRegeneration(BaseModel):
    original: SlideSnapshot
    regenerated: GeneratedSlide


# Frameworks
class FrameworkSlideData(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    instructions: str = ""
    slide_type: SlideType = SlideType.CONTENT
    layout: SlideLayout = SlideLayout.TEXT_ONLY
    order: int = Field(default=1, ge=1)


class FrameworkRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    is_default: bool = False
    slides: list[FrameworkSlideData] = Field(default_factory=list)


class Framework(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    is_default: bool = False
    slides: list[FrameworkSlideData] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


# Voice profiles
class VoiceProfileRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    is_default: bool = False
    tone: list[str] = Field(default_factory=list)
    audience: list[str] = Field(default_factory=list)
    objective: list[str] = Field(default_factory=list)
    brand_voice: list[str] = Field(default_factory=list)
    content_style: list[str] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)
    other: list[str] = Field(default_factory=list)


class VoiceProfile(VoiceProfileRequest):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


# Slides
class Slide(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    presentation_id: str
    title: str
    content: str
    narration: str | None = None
    annotations: str | None = None
    slide_type: SlideType
    layout: SlideLayout
    order: int
    image_url: str | None = None
    background_color: str | None = None
    text_color: str | None = None
    heading_color: str | None = None
    text_align: TextAlign = TextAlign.LEFT
    show_title: bool = True
    show_content: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SlideCreateRequest(BaseModel):
    presentation_id: str
    title: str = "New Slide"
    content: str = ""
    slide_type: SlideType = SlideType.CONTENT
    layout: SlideLayout | None = None
    narration: str | None = None
    position: int | None = Field(default=None, ge=1, description="1-based order; appends when omitted")


class SlideUpdateRequest(BaseModel):
    """Full desired state of a slide; every field is written."""

    title: str
    content: str = ""
    narration: str | None = None
    layout: SlideLayout = SlideLayout.TEXT_ONLY
    slide_type: SlideType | None = None
    image_url: str | None = None
    background_color: str | None = None
    text_color: str | None = None
    heading_color: str | None = None
    text_align: TextAlign = TextAlign.LEFT
    show_title: bool = True
    show_content: bool = True
    annotations: str | None = None


class SlideOrderItem(BaseModel):
    id: str
    order: int = Field(ge=1)


class ReorderRequest(BaseModel):
    presentation_id: str
    slides: list[SlideOrderItem]


class ThemeUpdateRequest(BaseModel):
    background_color: str | None = None
    text_color: str | None = None
    heading_color: str | None = None


class SlideImageRequest(BaseModel):
    image_url: str | None = None


class RegenerateRequest(BaseModel):
    additional_context: str | None = None


class SlideGenerateRequest(BaseModel):
    presentation_id: str
    prompt: str = Field(..., min_length=1)
    slide_type: SlideType = SlideType.CONTENT
    insert_after_order: int = Field(default=0, ge=0)


# Presentations
class PresentationSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str | None = None
    slide_count: int = 0
    idea_id: str | None = None
    selected_angle: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Presentation(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str | None = None
    prompt: str
    primary_color: str
    secondary_color: str
    font_family: str
    voice_profile_id: str | None = None
    framework_id: str | None = None
    idea_id: str | None = None
    selected_angle: str | None = None
    slides: list[Slide] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PresentationCreateRequest(BaseModel):
    title: str = Field(..., min_length=1)
    prompt: str = Field(..., min_length=1)
    description: str | None = None
    voice_profile_id: str | None = None
    framework_id: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None
    font_family: str | None = None
    outline: list[OutlineItem] | None = Field(
        default=None, description="Approved outline; slides are generated from it when present"
    )


class PresentationUpdateRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None
    font_family: str | None = None


class OutlineRequest(BaseModel):
    title: str = Field(..., min_length=1)
    prompt: str = Field(..., min_length=1)
    voice_profile_id: str | None = None
    framework_id: str | None = None


class ApplyPresetRequest(BaseModel):
    name: str


# Ideas
class IdeaRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: str = ""


class Idea(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str = ""
    presentations: list[PresentationSummary] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ExpandAngleRequest(BaseModel):
    angle: Angle
    title: str | None = None
    voice_profile_id: str | None = None


# Viewer
class PlaybackSlide(BaseModel):
    id: str
    position: int
    order: int
    title: str
    content: str
    narration: str | None = None
    slide_type: SlideType
    layout: SlideLayout
    image_url: str | None = None
    annotations: str | None = None
    text_align: TextAlign
    show_title: bool
    show_content: bool
    colors: ThemeColors
    progress: float


class PlaybackDeck(BaseModel):
    presentation_id: str
    title: str
    font_family: str
    total_slides: int
    slides: list[PlaybackSlide]
