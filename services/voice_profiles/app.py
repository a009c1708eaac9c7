"""FastAPI application for managing voice profiles."""

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_async_db
from services.voice_profiles.manager import VoiceProfileManager, VoiceProfileNotFoundError
from shared.models import VoiceProfile, VoiceProfileRequest
from shared.response_models import ActionResult
from shared.utils import config, setup_logging

logger = setup_logging("voice-profile-service")

app = FastAPI(
    title="Voice Profile Service",
    description="Manage the writing voices used when generating slide content",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("allowed_origins", ["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def get_voice_profile_manager(session: AsyncSession = Depends(get_async_db)) -> VoiceProfileManager:
    """Get voice profile manager with async session."""
    return VoiceProfileManager(session=session)


@app.get("/health")
async def health_check():
    """Health endpoint for voice profile service."""
    return {"status": "ok", "service": "voice-profiles"}


@app.get("/", response_model=list[VoiceProfile])
async def list_voice_profiles(
    profile_manager: VoiceProfileManager = Depends(get_voice_profile_manager),
) -> list[VoiceProfile]:
    """List voice profiles, default first."""
    return await profile_manager.list_profiles()


@app.post("/", response_model=ActionResult)
async def create_voice_profile(
    request: VoiceProfileRequest,
    profile_manager: VoiceProfileManager = Depends(get_voice_profile_manager),
) -> ActionResult:
    """Create a new voice profile."""
    try:
        return ActionResult.ok(await profile_manager.create_profile(request))
    except SQLAlchemyError as exc:
        logger.error(f"Error creating voice profile: {exc}")
        return ActionResult.fail("Failed to create voice profile")


@app.get("/{profile_id}", response_model=VoiceProfile)
async def get_voice_profile(
    profile_id: str,
    profile_manager: VoiceProfileManager = Depends(get_voice_profile_manager),
) -> VoiceProfile:
    """Fetch a specific voice profile."""
    try:
        return await profile_manager.get_profile(profile_id)
    except VoiceProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.put("/{profile_id}", response_model=ActionResult)
async def update_voice_profile(
    profile_id: str,
    request: VoiceProfileRequest,
    profile_manager: VoiceProfileManager = Depends(get_voice_profile_manager),
) -> ActionResult:
    """Replace an existing voice profile."""
    try:
        return ActionResult.ok(await profile_manager.update_profile(profile_id, request))
    except VoiceProfileNotFoundError as exc:
        return ActionResult.fail(str(exc))
    except SQLAlchemyError as exc:
        logger.error(f"Error updating voice profile {profile_id}: {exc}")
        return ActionResult.fail("Failed to update voice profile")


@app.delete("/{profile_id}", response_model=ActionResult)
async def delete_voice_profile(
    profile_id: str,
    profile_manager: VoiceProfileManager = Depends(get_voice_profile_manager),
) -> ActionResult:
    """Delete a voice profile."""
    try:
        deleted = await profile_manager.delete_profile(profile_id)
    except SQLAlchemyError as exc:
        logger.error(f"Error deleting voice profile {profile_id}: {exc}")
        return ActionResult.fail("Failed to delete voice profile")
    if not deleted:
        return ActionResult.fail(f"Voice profile {profile_id} not found")
    return ActionResult.ok()
