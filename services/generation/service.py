"""Content generation pipeline: prompt templating, model call, parsing, normalization."""

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from services.generation.angles import (
    RHETORICAL_FRAMEWORKS,
    build_expansion_structure,
    complete_angle_set,
    framework_guide,
    static_angles,
)
from services.generation.config.config_loader import GenerationConfig
from services.generation.drivers import AzureOpenAIGenerationDriver, GenerationDriver, OpenAIGenerationDriver
from services.generation.fallback import (
    custom_slide_from_request,
    fallback_outline,
    fallback_regeneration,
    fallback_slides,
    slides_from_outline_fallback,
    slides_from_structure,
)
from services.generation.normalizer import normalize_outline, normalize_slide, normalize_slides
from services.generation.parser import GenerationError, parse_json_array, parse_json_object
from services.generation.prompts import (
    ANGLE_EXPANSION,
    ANGLES,
    OUTLINE,
    SLIDE_GENERATION,
    SLIDE_REGENERATION,
    SLIDES_FROM_OUTLINE,
    SYSTEM_PROMPT,
    build_framework_context,
    build_structure_context,
    build_voice_context,
)
from shared.enums import RhetoricalFramework, SlideLayout, SlideType, coerce_slide_type
from shared.models import Angle, Framework, GeneratedSlide, OutlineItem, SlideSnapshot, VoiceProfile
from shared.utils import config as service_config
from shared.utils import setup_logging, validate_text_length

MAX_TOPIC_LENGTH = 8000

T = TypeVar("T")


class ContentGenerationService:
    """
    Generates slide content through a chat-completion driver.

    Every public operation always returns usable content: when the driver is
    missing, the call fails, or the reply cannot be parsed, the operation
    logs the failure and returns its static fallback instead. There is no
    retry.
    """

    def __init__(
        self,
        logger: logging.Logger,
        driver: GenerationDriver | None = None,
        generation_config: GenerationConfig | None = None,
    ):
        self.logger = logger
        self.generation_config = generation_config or GenerationConfig()
        if not self.generation_config.validate_config():
            raise ValueError("Invalid generation configuration")

        if driver is not None:
            self.driver: GenerationDriver | None = driver
        else:
            self._init_driver()

    def _init_driver(self) -> None:
        """Initialize the AI driver; missing credentials leave the service on fallback content."""
        provider = self.generation_config.get_ai_model_config("primary").get("provider", "openai")
        if service_config.get("use_azure_openai"):
            provider = "azure_openai"
        self.logger.info(f"Initializing generation driver: {provider}")
        try:
            if provider == "azure_openai":
                self.driver = AzureOpenAIGenerationDriver()
            else:
                self.driver = OpenAIGenerationDriver()
        except ValueError as e:
            self.logger.warning(f"Failed to initialize generation driver: {e}")
            self.driver = None

    async def _call_ai_model(self, operation: str, prompt: str) -> str:
        if not self.driver:
            raise GenerationError("No AI driver configured")

        step_config = self.generation_config.get_operation_config(operation)
        step_config["system_prompt"] = SYSTEM_PROMPT
        self.logger.info(f"Calling model {step_config.get('model')} for {operation}")
        return await self.driver.complete(prompt, step_config)

    async def _request_array(
        self, operation: str, prompt: str, convert: Callable[[list[dict[str, Any]]], T]
    ) -> T | None:
        """Model reply parsed as a list of objects and converted, or None when any step went wrong."""
        try:
            return convert(parse_json_array(await self._call_ai_model(operation, prompt)))
        except Exception as e:
            self.logger.warning(f"{operation} failed, using fallback content: {e!s}")
            return None

    async def _request_object(
        self, operation: str, prompt: str, convert: Callable[[dict[str, Any]], T]
    ) -> T | None:
        try:
            return convert(parse_json_object(await self._call_ai_model(operation, prompt)))
        except Exception as e:
            self.logger.warning(f"{operation} failed, using fallback content: {e!s}")
            return None

    async def generate_slides(
        self,
        topic: str,
        title: str,
        voice_profile: VoiceProfile | None = None,
        framework: Framework | None = None,
    ) -> list[GeneratedSlide]:
        """Generate a full deck; falls back to the four-slide skeleton."""
        topic = validate_text_length(topic, MAX_TOPIC_LENGTH)
        slides = await self._generate_raw_slides(topic, title, voice_profile, framework)
        if slides is None:
            return fallback_slides(topic, title)
        return slides

    async def _generate_raw_slides(
        self,
        topic: str,
        title: str,
        voice_profile: VoiceProfile | None,
        framework: Framework | None,
    ) -> list[GeneratedSlide] | None:
        prompt = SLIDE_GENERATION.render(
            {
                "topic": topic,
                "title": title,
                "voice_context": build_voice_context(voice_profile),
                "framework_context": build_framework_context(framework),
            }
        )
        slides = await self._request_array("generate_slides", prompt, normalize_slides)
        if slides is None:
            return None
        if framework is not None and framework.slides and len(slides) != len(framework.slides):
            self.logger.warning(
                "Framework %s expects %d slides, model returned %d",
                framework.name,
                len(framework.slides),
                len(slides),
            )
        return slides

    async def regenerate_slide(
        self,
        original: SlideSnapshot,
        layout: SlideLayout,
        topic: str,
        additional_context: str | None = None,
        voice_profile: VoiceProfile | None = None,
    ) -> GeneratedSlide:
        """One enhanced version of ``original`` that keeps its order."""
        # Stored orders below 1 regenerate as the first position
        order = max(original.order, 1)
        prompt = SLIDE_REGENERATION.render(
            {
                "original_title": original.title,
                "original_content": original.content,
                "slide_type": original.slide_type.value,
                "layout": layout.value,
                "topic": validate_text_length(topic, MAX_TOPIC_LENGTH),
                "additional_context": additional_context or "None provided",
                "voice_context": build_voice_context(voice_profile),
                "order": order,
            }
        )

        def convert(raw: dict[str, Any]) -> GeneratedSlide:
            # Unknown values keep the original slide's type and layout
            if coerce_slide_type(raw.get("slideType") or raw.get("slide_type")) is None:
                raw["slideType"] = original.slide_type.value
            if not raw.get("layout"):
                raw["layout"] = layout.value
            regenerated = normalize_slide(raw, index=order - 1, total=order)
            return regenerated.model_copy(update={"order": order})

        regenerated = await self._request_object("regenerate_slide", prompt, convert)
        if regenerated is None:
            return fallback_regeneration(original, layout, additional_context)
        return regenerated

    async def generate_outline(
        self,
        topic: str,
        title: str,
        voice_profile: VoiceProfile | None = None,
        framework: Framework | None = None,
    ) -> list[OutlineItem]:
        """Slide titles and one-line topics to confirm before generating full slides."""
        prompt = OUTLINE.render(
            {
                "topic": validate_text_length(topic, MAX_TOPIC_LENGTH),
                "title": title,
                "voice_context": build_voice_context(voice_profile),
                "framework_context": build_framework_context(framework),
            }
        )
        outline = await self._request_array("generate_outline", prompt, normalize_outline)
        if outline is None:
            return fallback_outline(topic, title)
        return outline

    async def generate_slides_from_outline(
        self,
        outline: list[OutlineItem],
        title: str,
        voice_profile: VoiceProfile | None = None,
    ) -> list[GeneratedSlide]:
        """Full slides with narration following an approved outline."""
        outline_json = json.dumps([item.model_dump(mode="json", by_alias=True) for item in outline], indent=2)
        prompt = SLIDES_FROM_OUTLINE.render(
            {"outline": outline_json, "title": title, "voice_context": build_voice_context(voice_profile)}
        )
        slides = await self._request_array("slides_from_outline", prompt, normalize_slides)
        if slides is None:
            return slides_from_outline_fallback(outline, title)
        return slides

    async def generate_angles(self, idea_title: str, idea_description: str) -> list[Angle]:
        """Exactly one angle per rhetorical framework, in CUB, PASE, HEAR, WWH order."""
        prompt = ANGLES.render(
            {
                "idea_title": idea_title,
                "idea_description": idea_description or "No further details provided.",
                "framework_guide": framework_guide(),
            }
        )
        candidates = await self._request_array(
            "generate_angles", prompt, lambda raw: self._parse_angles(raw, idea_title)
        )
        if candidates is None:
            return static_angles(idea_title, idea_description)
        return complete_angle_set(candidates, idea_title, idea_description)

    def _parse_angles(self, raw: list[dict[str, Any]], idea_title: str) -> list[Angle]:
        candidates = []
        for item in raw:
            code = str(item.get("framework", "")).strip().upper()
            if code not in RhetoricalFramework.__members__:
                continue
            try:
                candidates.append(
                    Angle(
                        framework=RhetoricalFramework(code),
                        title=str(item.get("title") or "").strip() or idea_title,
                        description=str(item.get("description") or ""),
                        key_points=[str(point) for point in item.get("keyPoints") or item.get("key_points") or []],
                    )
                )
            except ValidationError as e:
                self.logger.warning(f"Skipping malformed angle for {code}: {e.error_count()} error(s)")
        return candidates

    async def expand_angle(
        self,
        idea_title: str,
        idea_description: str,
        angle: Angle,
        deck_title: str | None = None,
        voice_profile: VoiceProfile | None = None,
    ) -> list[GeneratedSlide]:
        """Full slide set with narration for a chosen angle."""
        deck_title = deck_title or angle.title
        structure = build_expansion_structure(angle, deck_title)
        prompt = ANGLE_EXPANSION.render(
            {
                "idea_title": idea_title,
                "idea_description": idea_description or "No further details provided.",
                "angle_title": angle.title,
                "framework_label": f"{angle.framework.value} ({RHETORICAL_FRAMEWORKS[angle.framework].label})",
                "angle_description": angle.description,
                "voice_context": build_voice_context(voice_profile),
                "slide_count": len(structure),
                "structure": build_structure_context(structure),
            }
        )
        slides = await self._request_array("expand_angle", prompt, normalize_slides)
        if slides is None:
            return slides_from_structure(structure, deck_title)
        return slides

    async def generate_single_slide(
        self,
        presentation_prompt: str,
        request: str,
        slide_type: SlideType,
        title: str,
        voice_profile: VoiceProfile | None = None,
    ) -> GeneratedSlide:
        """
        Slide for the editor's "AI add slide" action.

        Generates with the presentation prompt plus the specific request and
        keeps the first slide of the requested type. When none matches, or the
        model is unavailable, a slide is synthesized from the request itself.
        """
        topic = f"{presentation_prompt}\n\nSpecific request: {request}"
        slides = await self._generate_raw_slides(topic, title, voice_profile, None)
        for slide in slides or []:
            if slide.slide_type == slide_type:
                return slide
        return custom_slide_from_request(request, slide_type)


_default_service: ContentGenerationService | None = None


def get_generation_service() -> ContentGenerationService:
    """FastAPI dependency returning the process-wide generation service."""
    global _default_service
    if _default_service is None:
        _default_service = ContentGenerationService(setup_logging("generation-service"))
    return _default_service
