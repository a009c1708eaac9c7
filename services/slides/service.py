"""Editor-facing slide operations.

Every mutation returns an :class:`ActionResult`; persistence errors and
missing entities are logged and reported as ``success=False`` instead of
raised. Successful mutations signal that the owning presentation's detail
path is stale.
"""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.database import Presentation as PresentationDB
from models.database import Slide as SlideDB
from services.generation.fallback import default_speaker_notes
from services.generation.service import ContentGenerationService
from services.slides.order_manager import SlideNotFoundError, SlideOrderManager
from services.voice_profiles.manager import VoiceProfileManager, VoiceProfileNotFoundError
from shared.annotations import AnnotationDocument, load_annotations, serialize_annotations
from shared.cache import invalidate_presentation
from shared.enums import IMAGE_LAYOUTS, SlideType, coerce_layout, coerce_slide_type, default_layout_for
from shared.models import (
    GeneratedSlide,
    ReorderRequest,
    Slide,
    SlideCreateRequest,
    SlideGenerateRequest,
    SlideRegeneration,
    SlideSnapshot,
    SlideUpdateRequest,
    ThemeUpdateRequest,
)
from shared.response_models import ActionResult
from shared.themes import resolve_theme_defaults
from shared.utils import blank_to_none, config, setup_logging

logger = setup_logging("slide-service")


class PresentationNotFoundError(Exception):
    """Raised when a requested presentation cannot be found."""


def generated_slide_values(generated: GeneratedSlide) -> dict:
    """Column values for persisting a generated slide, without its order.

    Slides without narration get the per-type speaker notes and image layouts
    get the placeholder image so the editor never shows an empty frame.
    """
    return {
        "title": generated.title,
        "content": generated.content,
        "narration": generated.narration or default_speaker_notes(generated.slide_type, generated.title),
        "slide_type": generated.slide_type.value,
        "layout": generated.layout.value,
        "image_url": config.get("placeholder_image_url") if generated.layout in IMAGE_LAYOUTS else None,
    }


class SlideService:
    def __init__(self, session: AsyncSession, generator: ContentGenerationService | None = None):
        self.session = session
        self.generator = generator
        self.order_manager = SlideOrderManager(session)

    async def _get_presentation(self, presentation_id: str) -> PresentationDB:
        result = await self.session.execute(select(PresentationDB).where(PresentationDB.id == presentation_id))
        presentation = result.scalar_one_or_none()
        if not presentation:
            raise PresentationNotFoundError(f"Presentation {presentation_id} not found")
        return presentation

    async def get_slide(self, slide_id: str) -> Slide:
        return Slide.model_validate(await self.order_manager.get_slide(slide_id))

    async def list_slides(self, presentation_id: str) -> list[Slide]:
        await self._get_presentation(presentation_id)
        return [Slide.model_validate(slide) for slide in await self.order_manager.list_slides(presentation_id)]

    async def create_slide(self, request: SlideCreateRequest) -> ActionResult:
        """Add a slide at a position, inheriting colours from the presentation palette."""
        try:
            presentation = await self._get_presentation(request.presentation_id)
            theme = resolve_theme_defaults(presentation.primary_color, presentation.secondary_color)
            values = {
                "title": request.title,
                "content": request.content,
                "narration": blank_to_none(request.narration),
                "slide_type": request.slide_type.value,
                "layout": (request.layout or default_layout_for(request.slide_type)).value,
                "background_color": theme.background_color,
                "text_color": theme.text_color,
                "heading_color": theme.heading_color,
            }
            if request.position is None:
                slide = await self.order_manager.append(presentation.id, values)
            else:
                slide = await self.order_manager.insert_at(presentation.id, request.position, values)
        except (PresentationNotFoundError, SQLAlchemyError) as e:
            logger.error(f"Error creating slide: {e}")
            return ActionResult.fail(str(e))

        invalidate_presentation(request.presentation_id)
        return ActionResult.ok(Slide.model_validate(slide))

    async def update_slide(self, slide_id: str, request: SlideUpdateRequest) -> ActionResult:
        """Write the full desired field set; the last writer wins."""
        annotations = blank_to_none(request.annotations)
        try:
            if annotations is not None:
                load_annotations(annotations)
            slide = await self.order_manager.get_slide(slide_id)
            slide.title = request.title
            slide.content = request.content
            slide.narration = blank_to_none(request.narration)
            slide.layout = request.layout.value
            if request.slide_type is not None:
                slide.slide_type = request.slide_type.value
            slide.image_url = blank_to_none(request.image_url)
            slide.background_color = blank_to_none(request.background_color)
            slide.text_color = blank_to_none(request.text_color)
            slide.heading_color = blank_to_none(request.heading_color)
            slide.text_align = request.text_align.value
            slide.show_title = request.show_title
            slide.show_content = request.show_content
            slide.annotations = annotations
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error updating slide {slide_id}: {e}")
            return ActionResult.fail(str(e))
        except (SlideNotFoundError, ValueError) as e:
            logger.error(f"Error updating slide {slide_id}: {e}")
            return ActionResult.fail(str(e))

        invalidate_presentation(slide.presentation_id)
        return ActionResult.ok(Slide.model_validate(slide))

    async def delete_slide(self, slide_id: str) -> ActionResult:
        try:
            slide = await self.order_manager.delete(slide_id)
        except (SlideNotFoundError, SQLAlchemyError) as e:
            logger.error(f"Error deleting slide {slide_id}: {e}")
            return ActionResult.fail(str(e))

        invalidate_presentation(slide.presentation_id)
        return ActionResult.ok()

    async def duplicate_slide(self, slide_id: str) -> ActionResult:
        try:
            copy = await self.order_manager.duplicate(slide_id)
        except (SlideNotFoundError, SQLAlchemyError) as e:
            logger.error(f"Error duplicating slide {slide_id}: {e}")
            return ActionResult.fail(str(e))

        invalidate_presentation(copy.presentation_id)
        return ActionResult.ok(Slide.model_validate(copy))

    async def reorder_slides(self, request: ReorderRequest) -> ActionResult:
        orders = [(item.id, item.order) for item in request.slides]
        try:
            await self.order_manager.reorder(request.presentation_id, orders)
        except (SlideNotFoundError, SQLAlchemyError) as e:
            logger.error(f"Error reordering slides: {e}")
            return ActionResult.fail(str(e))

        invalidate_presentation(request.presentation_id)
        return ActionResult.ok()

    async def apply_theme_to_all_slides(self, presentation_id: str, theme: ThemeUpdateRequest) -> ActionResult:
        """Set the provided colour fields on every slide in one statement; other fields are untouched."""
        values = {field: blank_to_none(getattr(theme, field)) for field in theme.model_fields_set}
        if not values:
            return ActionResult.fail("No theme colours provided")

        try:
            await self._get_presentation(presentation_id)
            result = await self.session.execute(
                update(SlideDB)
                .where(SlideDB.presentation_id == presentation_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error applying theme to slides of {presentation_id}: {e}")
            return ActionResult.fail(str(e))
        except PresentationNotFoundError as e:
            return ActionResult.fail(str(e))

        logger.info("Applied theme to %d slides of presentation %s", result.rowcount, presentation_id)
        invalidate_presentation(presentation_id)
        return ActionResult.ok({"updated": result.rowcount})

    async def set_slide_image(self, slide_id: str, image_url: str | None) -> ActionResult:
        """Attach an image, or remove it when ``image_url`` is empty."""
        try:
            slide = await self.order_manager.get_slide(slide_id)
            slide.image_url = blank_to_none(image_url)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error setting image on slide {slide_id}: {e}")
            return ActionResult.fail(str(e))
        except SlideNotFoundError as e:
            return ActionResult.fail(str(e))

        invalidate_presentation(slide.presentation_id)
        return ActionResult.ok(Slide.model_validate(slide))

    async def update_annotations(self, slide_id: str, document: AnnotationDocument | None) -> ActionResult:
        """Store the overlay payload; an empty or missing document clears it."""
        try:
            slide = await self.order_manager.get_slide(slide_id)
            slide.annotations = None if document is None or document.is_empty else serialize_annotations(document)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error saving annotations on slide {slide_id}: {e}")
            return ActionResult.fail(str(e))
        except SlideNotFoundError as e:
            return ActionResult.fail(str(e))

        invalidate_presentation(slide.presentation_id)
        return ActionResult.ok(Slide.model_validate(slide))

    async def regenerate_slide(self, slide_id: str, additional_context: str | None = None) -> ActionResult:
        """Enhanced version of a slide for side-by-side comparison; nothing is persisted."""
        try:
            slide = await self.order_manager.get_slide(slide_id)
            presentation = await self._get_presentation(slide.presentation_id)
            voice_profile = await self._voice_profile(presentation.voice_profile_id)
        except (SlideNotFoundError, PresentationNotFoundError, SQLAlchemyError) as e:
            logger.error(f"Error regenerating slide {slide_id}: {e}")
            return ActionResult.fail(str(e))

        original = SlideSnapshot(
            id=slide.id,
            title=slide.title,
            content=slide.content,
            slide_type=coerce_slide_type(slide.slide_type) or SlideType.CONTENT,
            order=slide.order,
        )
        regenerated = await self._generator().regenerate_slide(
            original,
            coerce_layout(slide.layout, original.slide_type),
            presentation.prompt,
            additional_context,
            voice_profile,
        )
        return ActionResult.ok(SlideRegeneration(original=original, regenerated=regenerated))

    async def generate_slide(self, request: SlideGenerateRequest) -> ActionResult:
        """Generate one slide from a free-text request and insert it after ``insert_after_order``."""
        try:
            presentation = await self._get_presentation(request.presentation_id)
            voice_profile = await self._voice_profile(presentation.voice_profile_id)
        except (PresentationNotFoundError, SQLAlchemyError) as e:
            logger.error(f"Error generating slide: {e}")
            return ActionResult.fail(str(e))

        generated = await self._generator().generate_single_slide(
            presentation.prompt, request.prompt, request.slide_type, presentation.title, voice_profile
        )
        theme = resolve_theme_defaults(presentation.primary_color, presentation.secondary_color)
        values = generated_slide_values(generated)
        values.update(theme.model_dump())
        try:
            slide = await self.order_manager.insert_at(presentation.id, request.insert_after_order + 1, values)
        except SQLAlchemyError as e:
            return ActionResult.fail(str(e))

        invalidate_presentation(presentation.id)
        return ActionResult.ok(Slide.model_validate(slide))

    def _generator(self) -> ContentGenerationService:
        if self.generator is None:
            raise RuntimeError("SlideService was created without a generation service")
        return self.generator

    async def _voice_profile(self, voice_profile_id: str | None):
        if not voice_profile_id:
            return None
        try:
            return await VoiceProfileManager(self.session).get_profile(voice_profile_id)
        except VoiceProfileNotFoundError:
            return None
