"""Idea manager: brainstorm seeds and the angles they can be presented from."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.database import Framework as FrameworkDB
from models.database import Idea as IdeaDB
from services.generation.service import ContentGenerationService
from shared.cache import invalidate_presentation
from shared.models import Angle, Idea, IdeaRequest
from shared.utils import setup_logging

logger = setup_logging("idea-manager")


class IdeaNotFoundError(Exception):
    """Raised when a requested idea cannot be found."""


class IdeaManager:
    def __init__(self, session: AsyncSession, generator: ContentGenerationService | None = None):
        self.session = session
        self.generator = generator

    async def _get_db_idea(self, idea_id: str) -> IdeaDB:
        result = await self.session.execute(
            select(IdeaDB)
            .where(IdeaDB.id == idea_id)
            .options(selectinload(IdeaDB.presentations))
            .execution_options(populate_existing=True)
        )
        db_idea = result.scalar_one_or_none()
        if not db_idea:
            raise IdeaNotFoundError(f"Idea {idea_id} not found")
        return db_idea

    async def get_idea(self, idea_id: str) -> Idea:
        return Idea.model_validate(await self._get_db_idea(idea_id))

    async def list_ideas(self) -> list[Idea]:
        """Newest first, each with the presentations it spawned."""
        result = await self.session.execute(
            select(IdeaDB).options(selectinload(IdeaDB.presentations)).order_by(IdeaDB.created_at.desc())
        )
        return [Idea.model_validate(db_idea) for db_idea in result.scalars().all()]

    async def create_idea(self, request: IdeaRequest) -> Idea:
        db_idea = IdeaDB(title=request.title.strip(), description=request.description.strip())
        self.session.add(db_idea)
        await self.session.commit()
        logger.info("Created idea %s", db_idea.id)
        return await self.get_idea(db_idea.id)

    async def update_idea(self, idea_id: str, request: IdeaRequest) -> Idea:
        db_idea = await self._get_db_idea(idea_id)
        db_idea.title = request.title.strip()
        db_idea.description = request.description.strip()
        await self.session.commit()
        logger.info("Updated idea %s", idea_id)
        return await self.get_idea(idea_id)

    async def delete_idea(self, idea_id: str) -> None:
        """Delete an idea; presentations created from it are kept and unlinked."""
        db_idea = await self._get_db_idea(idea_id)
        presentation_ids = [presentation.id for presentation in db_idea.presentations]
        for presentation in db_idea.presentations:
            presentation.idea_id = None
        await self.session.delete(db_idea)
        await self.session.commit()

        for presentation_id in presentation_ids:
            invalidate_presentation(presentation_id)
        logger.info("Deleted idea %s", idea_id)

    async def generate_angles(self, idea_id: str) -> list[Angle]:
        """One angle per rhetorical framework, each linked to its stored framework template when present."""
        idea = await self.get_idea(idea_id)
        angles = await self.generator.generate_angles(idea.title, idea.description)

        names = [angle.framework_name for angle in angles if angle.framework_name]
        result = await self.session.execute(select(FrameworkDB.name, FrameworkDB.id).where(FrameworkDB.name.in_(names)))
        ids_by_name: dict[str, str] = {}
        for name, framework_id in result.all():
            ids_by_name.setdefault(name, framework_id)

        return [angle.model_copy(update={"framework_id": ids_by_name.get(angle.framework_name)}) for angle in angles]
