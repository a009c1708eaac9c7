"""FastAPI application for the slide editor."""

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_async_db
from services.generation.service import ContentGenerationService, get_generation_service
from services.slides.order_manager import SlideNotFoundError
from services.slides.service import PresentationNotFoundError, SlideService
from shared.annotations import AnnotationDocument
from shared.models import (
    RegenerateRequest,
    ReorderRequest,
    Slide,
    SlideCreateRequest,
    SlideGenerateRequest,
    SlideImageRequest,
    SlideUpdateRequest,
    ThemeUpdateRequest,
)
from shared.response_models import ActionResult
from shared.utils import config, setup_logging

logger = setup_logging("slide-editor-service")

app = FastAPI(
    title="Slide Editor Service",
    description="Insert, edit, reorder and regenerate the slides of a presentation",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("allowed_origins", ["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def get_slide_service(
    session: AsyncSession = Depends(get_async_db),
    generator: ContentGenerationService = Depends(get_generation_service),
) -> SlideService:
    return SlideService(session=session, generator=generator)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "slides"}


@app.post("/", response_model=ActionResult)
async def create_slide(request: SlideCreateRequest, service: SlideService = Depends(get_slide_service)):
    """Add a slide at ``position`` (or at the end)."""
    return await service.create_slide(request)


@app.post("/generate", response_model=ActionResult)
async def generate_slide(request: SlideGenerateRequest, service: SlideService = Depends(get_slide_service)):
    """Generate one slide from a free-text request and insert it after ``insert_after_order``."""
    return await service.generate_slide(request)


@app.post("/reorder", response_model=ActionResult)
async def reorder_slides(request: ReorderRequest, service: SlideService = Depends(get_slide_service)):
    return await service.reorder_slides(request)


@app.put("/presentation/{presentation_id}/theme", response_model=ActionResult)
async def apply_theme_to_all_slides(
    presentation_id: str,
    request: ThemeUpdateRequest,
    service: SlideService = Depends(get_slide_service),
):
    """Set the given colours on every slide of a presentation."""
    return await service.apply_theme_to_all_slides(presentation_id, request)


@app.get("/presentation/{presentation_id}", response_model=list[Slide])
async def list_slides(presentation_id: str, service: SlideService = Depends(get_slide_service)):
    try:
        return await service.list_slides(presentation_id)
    except PresentationNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.get("/{slide_id}", response_model=Slide)
async def get_slide(slide_id: str, service: SlideService = Depends(get_slide_service)):
    try:
        return await service.get_slide(slide_id)
    except SlideNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.put("/{slide_id}", response_model=ActionResult)
async def update_slide(slide_id: str, request: SlideUpdateRequest, service: SlideService = Depends(get_slide_service)):
    return await service.update_slide(slide_id, request)


@app.delete("/{slide_id}", response_model=ActionResult)
async def delete_slide(slide_id: str, service: SlideService = Depends(get_slide_service)):
    return await service.delete_slide(slide_id)


@app.post("/{slide_id}/duplicate", response_model=ActionResult)
async def duplicate_slide(slide_id: str, service: SlideService = Depends(get_slide_service)):
    return await service.duplicate_slide(slide_id)


@app.put("/{slide_id}/image", response_model=ActionResult)
async def set_slide_image(slide_id: str, request: SlideImageRequest, service: SlideService = Depends(get_slide_service)):
    """Attach an image URL; an empty URL removes the image."""
    return await service.set_slide_image(slide_id, request.image_url)


@app.put("/{slide_id}/annotations", response_model=ActionResult)
async def update_annotations(
    slide_id: str,
    document: AnnotationDocument,
    service: SlideService = Depends(get_slide_service),
):
    return await service.update_annotations(slide_id, document)


@app.delete("/{slide_id}/annotations", response_model=ActionResult)
async def clear_annotations(slide_id: str, service: SlideService = Depends(get_slide_service)):
    return await service.update_annotations(slide_id, None)


@app.post("/{slide_id}/regenerate", response_model=ActionResult)
async def regenerate_slide(
    slide_id: str,
    request: RegenerateRequest | None = None,
    service: SlideService = Depends(get_slide_service),
):
    """Original and regenerated versions side by side; apply the chosen one with ``PUT /{slide_id}``."""
    additional_context = request.additional_context if request else None
    return await service.regenerate_slide(slide_id, additional_context)
