"""
SlideSmith Backend - Unified Application Entry Point
Mounts all service apps under a single FastAPI application
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_async_db, init_database
from services.frameworks import app as frameworks_app
from services.ideas import app as ideas_app
from services.presentations import app as presentations_app
from services.seed import seed_default_data
from services.slides import app as slides_app
from services.voice_profiles import app as voice_profiles_app
from shared.enums import LAYOUT_CATALOG
from shared.response_models import ActionResult
from shared.themes import THEME_PRESETS, ThemePreset
from shared.utils import config, setup_logging

logger = setup_logging("slidesmith-backend")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    await init_database()
    logger.info("Database initialized")
    yield


app = FastAPI(
    title="SlideSmith Backend API",
    description="""
    Unified API for AI-assisted slide deck generation, editing and playback.

    All endpoints are documented below. Service routes are organized by tag.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Health",
            "description": "Service health and status endpoints",
        },
        {
            "name": "Presentations",
            "description": "Presentation generation, settings and playback - mounted at /api/v1/presentations",
        },
        {
            "name": "Slides",
            "description": "Slide editor operations - mounted at /api/v1/slides",
        },
        {
            "name": "Frameworks",
            "description": "Deck structure templates - mounted at /api/v1/frameworks",
        },
        {
            "name": "Voice Profiles",
            "description": "Writing voice presets - mounted at /api/v1/voice-profiles",
        },
        {
            "name": "Ideas",
            "description": "Ideas, angles and angle expansion - mounted at /api/v1/ideas",
        },
        {
            "name": "Catalog",
            "description": "Theme presets, layouts and default data",
        },
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("allowed_origins", ["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes to exclude (internal FastAPI docs routes)
EXCLUDED_PATHS = {"/openapi.json", "/docs", "/docs/oauth2-redirect", "/redoc"}

# (sub-app, mount prefix, tag, route name prefix)
SERVICE_APPS = (
    (presentations_app, "/api/v1/presentations", "Presentations", "presentations"),
    (slides_app, "/api/v1/slides", "Slides", "slides"),
    (frameworks_app, "/api/v1/frameworks", "Frameworks", "frameworks"),
    (voice_profiles_app, "/api/v1/voice-profiles", "Voice Profiles", "voice_profiles"),
    (ideas_app, "/api/v1/ideas", "Ideas", "ideas"),
)

for service_app, prefix, tag, name_prefix in SERVICE_APPS:
    for route in service_app.routes:
        if hasattr(route, "path") and hasattr(route, "endpoint"):
            # Skip internal documentation routes
            if route.path in EXCLUDED_PATHS:
                continue
            route_kwargs = {
                "path": f"{prefix}{route.path}",
                "endpoint": route.endpoint,
                "methods": route.methods,
                "tags": [tag],
            }
            if hasattr(route, "name"):
                route_kwargs["name"] = f"{name_prefix}_{route.name}"
            if hasattr(route, "response_model"):
                route_kwargs["response_model"] = route.response_model
            app.add_api_route(**route_kwargs)


@app.get("/", tags=["Health"])
async def root():
    """Service map"""
    return {
        "service": "SlideSmith Backend API",
        "version": "1.0.0",
        "services": {
            name: {"base_url": prefix, "health": f"{prefix}/health"}
            for _, prefix, _, name in SERVICE_APPS
        },
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json",
        },
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for all services"""
    services = {"api_gateway": "operational"}
    services.update({name: "operational" for _, _, _, name in SERVICE_APPS})
    return {"status": "healthy", "services": services}


@app.get("/api/v1/themes", response_model=list[ThemePreset], tags=["Catalog"])
async def list_theme_presets() -> list[ThemePreset]:
    return list(THEME_PRESETS.values())


@app.get("/api/v1/layouts", tags=["Catalog"])
async def list_layouts() -> list[dict]:
    return list(LAYOUT_CATALOG)


@app.post("/api/v1/seed", response_model=ActionResult, tags=["Catalog"])
async def seed(session: AsyncSession = Depends(get_async_db)) -> ActionResult:
    """Install default voice profiles and framework templates if none exist."""
    return await seed_default_data(session)


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting SlideSmith Backend on http://0.0.0.0:8000")
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=config.get("debug", False), log_level="info")
