"""FastAPI application for ideas and their presentation angles."""

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_async_db
from services.generation.service import ContentGenerationService, get_generation_service
from services.ideas.manager import IdeaManager, IdeaNotFoundError
from services.presentations.service import PresentationService
from shared.models import Angle, ExpandAngleRequest, Idea, IdeaRequest
from shared.response_models import ActionResult
from shared.utils import config, setup_logging

logger = setup_logging("idea-service")

app = FastAPI(
    title="Idea Service",
    description="Capture ideas, brainstorm framework angles and expand them into presentations",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("allowed_origins", ["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def get_idea_manager(
    session: AsyncSession = Depends(get_async_db),
    generator: ContentGenerationService = Depends(get_generation_service),
) -> IdeaManager:
    return IdeaManager(session=session, generator=generator)


async def get_presentation_service(
    session: AsyncSession = Depends(get_async_db),
    generator: ContentGenerationService = Depends(get_generation_service),
) -> PresentationService:
    return PresentationService(session=session, generator=generator)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "ideas"}


@app.get("/", response_model=list[Idea])
async def list_ideas(manager: IdeaManager = Depends(get_idea_manager)) -> list[Idea]:
    return await manager.list_ideas()


@app.post("/", response_model=ActionResult)
async def create_idea(request: IdeaRequest, manager: IdeaManager = Depends(get_idea_manager)) -> ActionResult:
    try:
        return ActionResult.ok(await manager.create_idea(request))
    except SQLAlchemyError as exc:
        logger.error(f"Error creating idea: {exc}")
        return ActionResult.fail("Failed to create idea")


@app.get("/{idea_id}", response_model=Idea)
async def get_idea(idea_id: str, manager: IdeaManager = Depends(get_idea_manager)) -> Idea:
    try:
        return await manager.get_idea(idea_id)
    except IdeaNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.put("/{idea_id}", response_model=ActionResult)
async def update_idea(
    idea_id: str,
    request: IdeaRequest,
    manager: IdeaManager = Depends(get_idea_manager),
) -> ActionResult:
    try:
        return ActionResult.ok(await manager.update_idea(idea_id, request))
    except IdeaNotFoundError as exc:
        return ActionResult.fail(str(exc))
    except SQLAlchemyError as exc:
        logger.error(f"Error updating idea {idea_id}: {exc}")
        return ActionResult.fail("Failed to update idea")


@app.delete("/{idea_id}", response_model=ActionResult)
async def delete_idea(idea_id: str, manager: IdeaManager = Depends(get_idea_manager)) -> ActionResult:
    try:
        await manager.delete_idea(idea_id)
    except IdeaNotFoundError as exc:
        return ActionResult.fail(str(exc))
    except SQLAlchemyError as exc:
        logger.error(f"Error deleting idea {idea_id}: {exc}")
        return ActionResult.fail("Failed to delete idea")
    return ActionResult.ok()


@app.post("/{idea_id}/angles", response_model=list[Angle])
async def generate_angles(idea_id: str, manager: IdeaManager = Depends(get_idea_manager)) -> list[Angle]:
    """One candidate angle per rhetorical framework."""
    try:
        return await manager.generate_angles(idea_id)
    except IdeaNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.post("/{idea_id}/expand", response_model=ActionResult)
async def expand_angle(
    idea_id: str,
    request: ExpandAngleRequest,
    service: PresentationService = Depends(get_presentation_service),
) -> ActionResult:
    """Create a presentation from the chosen angle."""
    return await service.create_from_angle(idea_id, request.angle, request.title, request.voice_profile_id)
