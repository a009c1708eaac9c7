"""Presentation lifecycle: generation, settings, presets and deletion."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.database import Idea as IdeaDB
from models.database import Presentation as PresentationDB
from models.database import Slide as SlideDB
from services.frameworks.manager import FrameworkManager, FrameworkNotFoundError
from services.generation.service import ContentGenerationService
from services.slides.service import PresentationNotFoundError, generated_slide_values
from services.voice_profiles.manager import VoiceProfileManager, VoiceProfileNotFoundError
from shared.cache import invalidate_presentation
from shared.models import (
    Angle,
    Framework,
    GeneratedSlide,
    OutlineItem,
    OutlineRequest,
    Presentation,
    PresentationCreateRequest,
    PresentationSummary,
    PresentationUpdateRequest,
    VoiceProfile,
)
from shared.response_models import ActionResult
from shared.themes import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    get_theme_preset,
)
from shared.utils import blank_to_none, setup_logging

logger = setup_logging("presentation-service")

UNSET_REFERENCE = "none"


def _reference(value: str | None) -> str | None:
    """Form selects send ``"none"`` for an empty choice."""
    value = blank_to_none(value)
    if value is None or value.lower() == UNSET_REFERENCE:
        return None
    return value


def _ordered(slides: list[GeneratedSlide]) -> list[GeneratedSlide]:
    """Sort by the model's order (stable for ties) and renumber 1..n."""
    ranked = sorted(enumerate(slides), key=lambda item: (item[1].order, item[0]))
    return [slide.model_copy(update={"order": order}) for order, (_, slide) in enumerate(ranked, start=1)]


class PresentationService:
    def __init__(self, session: AsyncSession, generator: ContentGenerationService | None = None):
        self.session = session
        self.generator = generator

    async def _get_db_presentation(self, presentation_id: str, with_slides: bool = False) -> PresentationDB:
        statement = select(PresentationDB).where(PresentationDB.id == presentation_id)
        if with_slides:
            statement = statement.options(selectinload(PresentationDB.slides))
        result = await self.session.execute(statement.execution_options(populate_existing=True))
        presentation = result.scalar_one_or_none()
        if not presentation:
            raise PresentationNotFoundError(f"Presentation {presentation_id} not found")
        return presentation

    async def _resolve_references(
        self, voice_profile_id: str | None, framework_id: str | None
    ) -> tuple[VoiceProfile | None, Framework | None]:
        voice_profile = None
        framework = None
        if voice_profile_id:
            voice_profile = await VoiceProfileManager(self.session).get_profile(voice_profile_id)
        if framework_id:
            framework = await FrameworkManager(self.session).get_framework(framework_id)
        return voice_profile, framework

    async def list_presentations(self) -> list[PresentationSummary]:
        """Newest first, with slide counts."""
        slide_count = (
            select(func.count(SlideDB.id))
            .where(SlideDB.presentation_id == PresentationDB.id)
            .correlate(PresentationDB)
            .scalar_subquery()
        )
        result = await self.session.execute(
            select(PresentationDB, slide_count.label("slide_count")).order_by(PresentationDB.created_at.desc())
        )
        summaries = []
        for presentation, count in result.all():
            summary = PresentationSummary.model_validate(presentation)
            summaries.append(summary.model_copy(update={"slide_count": count}))
        return summaries

    async def get_presentation(self, presentation_id: str) -> Presentation:
        """Presentation with its slides in order, read fresh from the database."""
        return Presentation.model_validate(await self._get_db_presentation(presentation_id, with_slides=True))

    async def _persist(self, values: dict, slides: list[GeneratedSlide]) -> PresentationDB:
        presentation = PresentationDB(
            slides=[SlideDB(order=slide.order, **generated_slide_values(slide)) for slide in _ordered(slides)],
            **values,
        )
        self.session.add(presentation)
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        logger.info("Created presentation %s with %d slides", presentation.id, len(slides))
        return presentation

    async def create_presentation(self, request: PresentationCreateRequest) -> ActionResult:
        """
        Generate and persist a presentation.

        Slides come from the approved outline when one is supplied, else from
        the prompt (guided by the framework when one is chosen).
        """
        title = request.title.strip()
        prompt = request.prompt.strip()
        if not title or not prompt:
            return ActionResult.fail("Title and prompt are required")

        voice_profile_id = _reference(request.voice_profile_id)
        framework_id = _reference(request.framework_id)
        try:
            voice_profile, framework = await self._resolve_references(voice_profile_id, framework_id)
        except (VoiceProfileNotFoundError, FrameworkNotFoundError) as e:
            return ActionResult.fail(str(e))

        if request.outline:
            slides = await self.generator.generate_slides_from_outline(request.outline, title, voice_profile)
        else:
            slides = await self.generator.generate_slides(prompt, title, voice_profile, framework)

        values = {
            "title": title,
            "description": blank_to_none(request.description),
            "prompt": prompt,
            "voice_profile_id": voice_profile_id,
            "framework_id": framework_id,
            "primary_color": blank_to_none(request.primary_color) or DEFAULT_PRIMARY_COLOR,
            "secondary_color": blank_to_none(request.secondary_color) or DEFAULT_SECONDARY_COLOR,
            "font_family": blank_to_none(request.font_family) or DEFAULT_FONT_FAMILY,
        }
        try:
            presentation = await self._persist(values, slides)
        except SQLAlchemyError as e:
            logger.error(f"Error creating presentation: {e}")
            return ActionResult.fail("Failed to create presentation")
        return ActionResult.ok(await self.get_presentation(presentation.id))

    async def generate_outline(self, request: OutlineRequest) -> list[OutlineItem]:
        """Outline to confirm before slides are generated."""
        voice_profile, framework = await self._resolve_references(
            _reference(request.voice_profile_id), _reference(request.framework_id)
        )
        return await self.generator.generate_outline(request.prompt, request.title, voice_profile, framework)

    async def create_from_angle(
        self,
        idea_id: str,
        angle: Angle,
        title: str | None = None,
        voice_profile_id: str | None = None,
    ) -> ActionResult:
        """Expand an idea angle into a full presentation linked back to the idea."""
        result = await self.session.execute(select(IdeaDB).where(IdeaDB.id == idea_id))
        idea = result.scalar_one_or_none()
        if not idea:
            return ActionResult.fail(f"Idea {idea_id} not found")

        voice_profile_id = _reference(voice_profile_id)
        framework_id = _reference(angle.framework_id)
        try:
            voice_profile, _ = await self._resolve_references(voice_profile_id, None)
        except VoiceProfileNotFoundError as e:
            return ActionResult.fail(str(e))
        if framework_id is None and angle.framework_name:
            framework = await FrameworkManager(self.session).find_by_name(angle.framework_name)
            framework_id = framework.id if framework else None

        deck_title = blank_to_none(title) or angle.title
        slides = await self.generator.expand_angle(idea.title, idea.description, angle, deck_title, voice_profile)
        values = {
            "title": deck_title,
            "description": angle.description or None,
            "prompt": f"{idea.title}\n\n{idea.description}".strip(),
            "voice_profile_id": voice_profile_id,
            "framework_id": framework_id,
            "idea_id": idea.id,
            "selected_angle": angle.framework.value,
            "primary_color": DEFAULT_PRIMARY_COLOR,
            "secondary_color": DEFAULT_SECONDARY_COLOR,
            "font_family": DEFAULT_FONT_FAMILY,
        }
        try:
            presentation = await self._persist(values, slides)
        except SQLAlchemyError as e:
            logger.error(f"Error expanding angle for idea {idea_id}: {e}")
            return ActionResult.fail("Failed to create presentation")
        return ActionResult.ok(await self.get_presentation(presentation.id))

    async def update_presentation(self, presentation_id: str, request: PresentationUpdateRequest) -> ActionResult:
        """Apply the non-empty settings fields; empty values leave the stored ones alone."""
        updates = {key: value for key, value in request.model_dump().items() if blank_to_none(value) is not None}
        try:
            presentation = await self._get_db_presentation(presentation_id)
            for key, value in updates.items():
                setattr(presentation, key, value)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error updating presentation {presentation_id}: {e}")
            return ActionResult.fail("Failed to update presentation")
        except PresentationNotFoundError as e:
            return ActionResult.fail(str(e))

        invalidate_presentation(presentation_id)
        return ActionResult.ok(await self.get_presentation(presentation_id))

    async def apply_theme_preset(self, presentation_id: str, name: str) -> ActionResult:
        """Set the preset's palette and font on the presentation and its colours on every slide."""
        preset = get_theme_preset(name)
        if preset is None:
            return ActionResult.fail(f"Unknown theme preset '{name}'")

        try:
            presentation = await self._get_db_presentation(presentation_id, with_slides=True)
            presentation.primary_color = preset.primary_color
            presentation.secondary_color = preset.secondary_color
            presentation.font_family = preset.font_family
            for slide in presentation.slides:
                slide.background_color = preset.colors.background_color
                slide.text_color = preset.colors.text_color
                slide.heading_color = preset.colors.heading_color
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error applying preset {name} to presentation {presentation_id}: {e}")
            return ActionResult.fail("Failed to apply theme preset")
        except PresentationNotFoundError as e:
            return ActionResult.fail(str(e))

        logger.info("Applied preset %s to presentation %s", preset.name, presentation_id)
        invalidate_presentation(presentation_id)
        return ActionResult.ok(await self.get_presentation(presentation_id))

    async def delete_presentation(self, presentation_id: str) -> ActionResult:
        """Delete a presentation together with all of its slides."""
        try:
            presentation = await self._get_db_presentation(presentation_id)
            await self.session.delete(presentation)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting presentation {presentation_id}: {e}")
            return ActionResult.fail("Failed to delete presentation")
        except PresentationNotFoundError as e:
            return ActionResult.fail(str(e))

        logger.info("Deleted presentation %s", presentation_id)
        invalidate_presentation(presentation_id)
        return ActionResult.ok()
