"""Voice profile manager for creating and selecting the writing voice of generated decks."""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models.database import Presentation as PresentationDB
from models.database import VoiceProfile as VoiceProfileDB
from services.voice_profiles.defaults import DEFAULT_VOICE_PROFILES
from shared.cache import invalidate_presentation
from shared.models import VoiceProfile, VoiceProfileRequest
from shared.utils import setup_logging

logger = setup_logging("voice-profile-manager")


class VoiceProfileNotFoundError(Exception):
    """Raised when a requested voice profile cannot be found."""


def _clean_list(values: list[str]) -> list[str]:
    return [value.strip() for value in values if value and value.strip()]


class VoiceProfileManager:
    """Manage creation, retrieval and default selection of voice profiles."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_db_profile(self, profile_id: str) -> VoiceProfileDB:
        result = await self.session.execute(select(VoiceProfileDB).where(VoiceProfileDB.id == profile_id))
        db_profile = result.scalar_one_or_none()
        if not db_profile:
            raise VoiceProfileNotFoundError(f"Voice profile {profile_id} not found")
        return db_profile

    async def _clear_default(self, keep_id: str | None = None) -> None:
        statement = update(VoiceProfileDB).where(VoiceProfileDB.is_default.is_(True))
        if keep_id is not None:
            statement = statement.where(VoiceProfileDB.id != keep_id)
        await self.session.execute(statement.values(is_default=False).execution_options(synchronize_session=False))

    async def create_profile(self, profile_data: VoiceProfileRequest) -> VoiceProfile:
        """Create a voice profile; a new default unsets any previous default."""
        if profile_data.is_default:
            await self._clear_default()

        db_profile = VoiceProfileDB(name=profile_data.name.strip(), is_default=profile_data.is_default)
        for field in VoiceProfileDB.LIST_FIELDS:
            setattr(db_profile, field, _clean_list(getattr(profile_data, field)))

        self.session.add(db_profile)
        await self.session.commit()

        logger.info("Created voice profile %s (%s)", db_profile.name, db_profile.id)
        return VoiceProfile.model_validate(db_profile)

    async def get_profile(self, profile_id: str) -> VoiceProfile:
        return VoiceProfile.model_validate(await self._get_db_profile(profile_id))

    async def get_default_profile(self) -> VoiceProfile | None:
        result = await self.session.execute(select(VoiceProfileDB).where(VoiceProfileDB.is_default.is_(True)))
        db_profile = result.scalars().first()
        return VoiceProfile.model_validate(db_profile) if db_profile else None

    async def list_profiles(self) -> list[VoiceProfile]:
        """Default profile first, then by name."""
        result = await self.session.execute(
            select(VoiceProfileDB).order_by(VoiceProfileDB.is_default.desc(), VoiceProfileDB.name.asc())
        )
        return [VoiceProfile.model_validate(db_profile) for db_profile in result.scalars().all()]

    async def update_profile(self, profile_id: str, profile_data: VoiceProfileRequest) -> VoiceProfile:
        """Replace every field of a profile."""
        db_profile = await self._get_db_profile(profile_id)
        if profile_data.is_default:
            await self._clear_default(keep_id=profile_id)

        db_profile.name = profile_data.name.strip()
        db_profile.is_default = profile_data.is_default
        for field in VoiceProfileDB.LIST_FIELDS:
            setattr(db_profile, field, _clean_list(getattr(profile_data, field)))
        await self.session.commit()

        logger.info("Updated voice profile %s", profile_id)
        return VoiceProfile.model_validate(db_profile)

    async def delete_profile(self, profile_id: str) -> bool:
        """Delete a voice profile; presentations that used it keep their content."""
        result = await self.session.execute(select(VoiceProfileDB).where(VoiceProfileDB.id == profile_id))
        db_profile = result.scalar_one_or_none()
        if not db_profile:
            return False

        result = await self.session.execute(
            select(PresentationDB.id).where(PresentationDB.voice_profile_id == profile_id)
        )
        presentation_ids = result.scalars().all()
        await self.session.delete(db_profile)
        await self.session.commit()

        for presentation_id in presentation_ids:
            invalidate_presentation(presentation_id)
        logger.info("Deleted voice profile %s", profile_id)
        return True

    async def seed_defaults(self) -> int:
        """Install the default profiles when none exist; returns how many were created."""
        existing = await self.session.scalar(select(func.count()).select_from(VoiceProfileDB))
        if existing:
            logger.info("Voice profiles already exist, skipping creation")
            return 0

        for profile_data in DEFAULT_VOICE_PROFILES:
            db_profile = VoiceProfileDB(name=profile_data.name, is_default=profile_data.is_default)
            for field in VoiceProfileDB.LIST_FIELDS:
                setattr(db_profile, field, list(getattr(profile_data, field)))
            self.session.add(db_profile)
        await self.session.commit()

        logger.info("Created %d default voice profiles", len(DEFAULT_VOICE_PROFILES))
        return len(DEFAULT_VOICE_PROFILES)
