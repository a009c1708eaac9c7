"""FastAPI application for managing deck frameworks."""

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_async_db
from services.frameworks.manager import FrameworkManager, FrameworkNotFoundError
from services.frameworks.templates import template_summaries
from shared.models import Framework, FrameworkRequest
from shared.response_models import ActionResult
from shared.utils import config, setup_logging

logger = setup_logging("framework-service")

app = FastAPI(
    title="Framework Service",
    description="Reusable slide structures that guide deck generation",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("allowed_origins", ["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def get_framework_manager(session: AsyncSession = Depends(get_async_db)) -> FrameworkManager:
    return FrameworkManager(session=session)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "frameworks"}


@app.get("/", response_model=list[Framework])
async def list_frameworks(manager: FrameworkManager = Depends(get_framework_manager)) -> list[Framework]:
    return await manager.list_frameworks()


@app.get("/templates")
async def list_templates() -> list[dict]:
    """Built-in templates available to the seed operation."""
    return template_summaries()


@app.post("/", response_model=ActionResult)
async def create_framework(
    request: FrameworkRequest,
    manager: FrameworkManager = Depends(get_framework_manager),
) -> ActionResult:
    try:
        return ActionResult.ok(await manager.create_framework(request))
    except SQLAlchemyError as exc:
        logger.error(f"Error creating framework: {exc}")
        return ActionResult.fail("Failed to create framework")


@app.get("/{framework_id}", response_model=Framework)
async def get_framework(
    framework_id: str,
    manager: FrameworkManager = Depends(get_framework_manager),
) -> Framework:
    try:
        return await manager.get_framework(framework_id)
    except FrameworkNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.put("/{framework_id}", response_model=ActionResult)
async def update_framework(
    framework_id: str,
    request: FrameworkRequest,
    manager: FrameworkManager = Depends(get_framework_manager),
) -> ActionResult:
    try:
        return ActionResult.ok(await manager.update_framework(framework_id, request))
    except FrameworkNotFoundError as exc:
        return ActionResult.fail(str(exc))
    except SQLAlchemyError as exc:
        logger.error(f"Error updating framework {framework_id}: {exc}")
        return ActionResult.fail("Failed to update framework")


@app.delete("/{framework_id}", response_model=ActionResult)
async def delete_framework(
    framework_id: str,
    manager: FrameworkManager = Depends(get_framework_manager),
) -> ActionResult:
    try:
        await manager.delete_framework(framework_id)
    except FrameworkNotFoundError as exc:
        return ActionResult.fail(str(exc))
    except SQLAlchemyError as exc:
        logger.error(f"Error deleting framework {framework_id}: {exc}")
        return ActionResult.fail("Failed to delete framework")
    return ActionResult.ok()


@app.post("/{framework_id}/duplicate", response_model=ActionResult)
async def duplicate_framework(
    framework_id: str,
    manager: FrameworkManager = Depends(get_framework_manager),
) -> ActionResult:
    try:
        return ActionResult.ok(await manager.duplicate_framework(framework_id))
    except FrameworkNotFoundError:
        return ActionResult.fail("Framework not found")
    except SQLAlchemyError as exc:
        logger.error(f"Error duplicating framework {framework_id}: {exc}")
        return ActionResult.fail("Failed to duplicate framework")
