"""FastAPI application for presentations and their playback."""

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_async_db
from services.frameworks.manager import FrameworkNotFoundError
from services.generation.service import ContentGenerationService, get_generation_service
from services.presentations.playback import build_playback
from services.presentations.service import PresentationService
from services.slides.service import PresentationNotFoundError
from services.voice_profiles.manager import VoiceProfileNotFoundError
from shared.models import (
    ApplyPresetRequest,
    OutlineItem,
    OutlineRequest,
    PlaybackDeck,
    Presentation,
    PresentationCreateRequest,
    PresentationSummary,
    PresentationUpdateRequest,
)
from shared.response_models import ActionResult
from shared.utils import config, setup_logging

logger = setup_logging("presentation-api")

app = FastAPI(
    title="Presentation Service",
    description="Generate, configure and present slide decks",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("allowed_origins", ["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def get_presentation_service(
    session: AsyncSession = Depends(get_async_db),
    generator: ContentGenerationService = Depends(get_generation_service),
) -> PresentationService:
    return PresentationService(session=session, generator=generator)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "presentations"}


@app.get("/", response_model=list[PresentationSummary])
async def list_presentations(service: PresentationService = Depends(get_presentation_service)):
    return await service.list_presentations()


@app.post("/", response_model=ActionResult)
async def create_presentation(
    request: PresentationCreateRequest,
    service: PresentationService = Depends(get_presentation_service),
):
    """Generate a presentation from a prompt or an approved outline."""
    return await service.create_presentation(request)


@app.post("/outline", response_model=list[OutlineItem])
async def generate_outline(request: OutlineRequest, service: PresentationService = Depends(get_presentation_service)):
    """Outline to review before creating the presentation."""
    try:
        return await service.generate_outline(request)
    except (VoiceProfileNotFoundError, FrameworkNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.get("/{presentation_id}", response_model=Presentation)
async def get_presentation(presentation_id: str, service: PresentationService = Depends(get_presentation_service)):
    try:
        return await service.get_presentation(presentation_id)
    except PresentationNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.get("/{presentation_id}/playback", response_model=PlaybackDeck)
async def get_playback(presentation_id: str, service: PresentationService = Depends(get_presentation_service)):
    """Ordered slides with positions, progress and effective colours for the viewer."""
    try:
        presentation = await service.get_presentation(presentation_id)
    except PresentationNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return build_playback(presentation)


@app.put("/{presentation_id}", response_model=ActionResult)
async def update_presentation(
    presentation_id: str,
    request: PresentationUpdateRequest,
    service: PresentationService = Depends(get_presentation_service),
):
    return await service.update_presentation(presentation_id, request)


@app.post("/{presentation_id}/theme-preset", response_model=ActionResult)
async def apply_theme_preset(
    presentation_id: str,
    request: ApplyPresetRequest,
    service: PresentationService = Depends(get_presentation_service),
):
    return await service.apply_theme_preset(presentation_id, request.name)


@app.delete("/{presentation_id}", response_model=ActionResult)
async def delete_presentation(presentation_id: str, service: PresentationService = Depends(get_presentation_service)):
    return await service.delete_presentation(presentation_id)
