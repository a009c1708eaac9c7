"""Install default voice profiles and framework templates."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from services.frameworks.manager import FrameworkManager
from services.voice_profiles.manager import VoiceProfileManager
from shared.response_models import ActionResult
from shared.utils import setup_logging

logger = setup_logging("seed")


async def seed_default_data(session: AsyncSession) -> ActionResult:
    """
    Seed both tables independently; a table that already holds rows is
    skipped, so running this twice creates nothing the second time.
    """
    messages = []
    details = {}
    success = True

    try:
        created = await VoiceProfileManager(session).seed_defaults()
        details["voice_profiles"] = created
        messages.append(
            f"Created {created} default voice profiles" if created else "Voice profiles already exist, skipping creation"
        )
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Error creating default voice profiles: {e}")
        messages.append("Failed to create voice profiles")
        success = False

    try:
        created = await FrameworkManager(session).seed_templates()
        details["frameworks"] = created
        messages.append(
            f"Created {created} framework templates" if created else "Templates already exist, skipping creation"
        )
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Error creating framework templates: {e}")
        messages.append("Failed to create framework templates")
        success = False

    message = "; ".join(messages)
    if not success:
        return ActionResult(success=False, error=message, data=details)
    return ActionResult.ok(details, message=message)
