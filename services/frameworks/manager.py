"""Framework manager: CRUD for deck templates and their ordered slide instructions."""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.database import Framework as FrameworkDB
from models.database import FrameworkSlide as FrameworkSlideDB
from models.database import Presentation as PresentationDB
from services.frameworks.templates import FRAMEWORK_TEMPLATES
from shared.cache import invalidate_presentation
from shared.models import Framework, FrameworkRequest, FrameworkSlideData
from shared.utils import setup_logging

logger = setup_logging("framework-manager")


class FrameworkNotFoundError(Exception):
    """Raised when a requested framework cannot be found."""


def _build_slides(slides: list[FrameworkSlideData]) -> list[FrameworkSlideDB]:
    """Slide rows in submitted order; orders are reassigned 1..n."""
    return [
        FrameworkSlideDB(
            title=slide.title,
            instructions=slide.instructions,
            slide_type=slide.slide_type.value,
            layout=slide.layout.value,
            order=index,
        )
        for index, slide in enumerate(slides, start=1)
    ]


class FrameworkManager:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_db_framework(self, framework_id: str) -> FrameworkDB:
        result = await self.session.execute(
            select(FrameworkDB)
            .where(FrameworkDB.id == framework_id)
            .options(selectinload(FrameworkDB.slides))
            .execution_options(populate_existing=True)
        )
        db_framework = result.scalar_one_or_none()
        if not db_framework:
            raise FrameworkNotFoundError(f"Framework {framework_id} not found")
        return db_framework

    async def _clear_default(self, keep_id: str | None = None) -> None:
        statement = update(FrameworkDB).where(FrameworkDB.is_default.is_(True))
        if keep_id is not None:
            statement = statement.where(FrameworkDB.id != keep_id)
        await self.session.execute(statement.values(is_default=False).execution_options(synchronize_session=False))

    async def get_framework(self, framework_id: str) -> Framework:
        return Framework.model_validate(await self._get_db_framework(framework_id))

    async def find_by_name(self, name: str) -> Framework | None:
        result = await self.session.execute(
            select(FrameworkDB).where(FrameworkDB.name == name).options(selectinload(FrameworkDB.slides))
        )
        db_framework = result.scalars().first()
        return Framework.model_validate(db_framework) if db_framework else None

    async def list_frameworks(self) -> list[Framework]:
        """Newest first, each with its slides in order."""
        result = await self.session.execute(
            select(FrameworkDB).options(selectinload(FrameworkDB.slides)).order_by(FrameworkDB.created_at.desc())
        )
        return [Framework.model_validate(db_framework) for db_framework in result.scalars().all()]

    async def create_framework(self, request: FrameworkRequest) -> Framework:
        """Create a framework; a new default unsets any previous default."""
        if request.is_default:
            await self._clear_default()

        db_framework = FrameworkDB(
            name=request.name.strip(),
            description=request.description,
            is_default=request.is_default,
            slides=_build_slides(request.slides),
        )
        self.session.add(db_framework)
        await self.session.commit()

        logger.info("Created framework %s with %d slides", db_framework.id, len(request.slides))
        return await self.get_framework(db_framework.id)

    async def update_framework(self, framework_id: str, request: FrameworkRequest) -> Framework:
        """Replace name, description, default flag and the whole slide list."""
        db_framework = await self._get_db_framework(framework_id)
        if request.is_default:
            await self._clear_default(keep_id=framework_id)

        db_framework.name = request.name.strip()
        db_framework.description = request.description
        db_framework.is_default = request.is_default
        db_framework.slides = _build_slides(request.slides)
        await self.session.commit()

        logger.info("Updated framework %s", framework_id)
        return await self.get_framework(framework_id)

    async def delete_framework(self, framework_id: str) -> None:
        """Delete a framework; presentations generated from it keep their slides."""
        db_framework = await self._get_db_framework(framework_id)
        result = await self.session.execute(select(PresentationDB.id).where(PresentationDB.framework_id == framework_id))
        presentation_ids = result.scalars().all()
        await self.session.delete(db_framework)
        await self.session.commit()

        for presentation_id in presentation_ids:
            invalidate_presentation(presentation_id)
        logger.info("Deleted framework %s", framework_id)

    async def duplicate_framework(self, framework_id: str) -> Framework:
        """Copy a framework as "<name> (Copy)"; duplicates are never default."""
        source = await self.get_framework(framework_id)
        copy = FrameworkDB(
            name=f"{source.name} (Copy)",
            description=source.description,
            is_default=False,
            slides=_build_slides(source.slides),
        )
        self.session.add(copy)
        await self.session.commit()

        logger.info("Duplicated framework %s as %s", framework_id, copy.id)
        return await self.get_framework(copy.id)

    async def seed_templates(self) -> int:
        """Install the built-in templates when no framework exists; returns how many were created."""
        existing = await self.session.scalar(select(func.count()).select_from(FrameworkDB))
        if existing:
            logger.info("Framework templates already exist, skipping creation")
            return 0

        for template in FRAMEWORK_TEMPLATES:
            self.session.add(
                FrameworkDB(
                    name=template.name,
                    description=template.description,
                    is_default=template.is_default,
                    slides=_build_slides(template.slides),
                )
            )
        await self.session.commit()

        logger.info("Created %d framework templates", len(FRAMEWORK_TEMPLATES))
        return len(FRAMEWORK_TEMPLATES)
