"""Order bookkeeping for the slides of a presentation.

``order`` is 1-based and unique per presentation (a database constraint).
Inserts shift later slides one row at a time from the highest order down so
no intermediate state ever holds two slides on the same order. Deletes leave
gaps: order is used as a sort key, and the shift only touches slides at or
above the insert position, so it stays correct whether or not the existing
orders are dense.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.database import Slide
from shared.utils import setup_logging

logger = setup_logging("slide-order-manager")


class SlideNotFoundError(Exception):
    """Raised when a requested slide cannot be found."""


class SlideOrderManager:
    """Insert, duplicate, delete and reorder slides inside single transactions."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_slide(self, slide_id: str) -> Slide:
        result = await self.session.execute(
            select(Slide).where(Slide.id == slide_id).execution_options(populate_existing=True)
        )
        slide = result.scalar_one_or_none()
        if not slide:
            raise SlideNotFoundError(f"Slide {slide_id} not found")
        return slide

    async def list_slides(self, presentation_id: str) -> list[Slide]:
        result = await self.session.execute(
            select(Slide)
            .where(Slide.presentation_id == presentation_id)
            .order_by(Slide.order)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def next_order(self, presentation_id: str) -> int:
        """Order that appends a slide after the current last one."""
        result = await self.session.execute(
            select(func.max(Slide.order)).where(Slide.presentation_id == presentation_id)
        )
        return (result.scalar_one_or_none() or 0) + 1

    async def _shift_from(self, presentation_id: str, position: int) -> int:
        result = await self.session.execute(
            select(Slide.id, Slide.order)
            .where(Slide.presentation_id == presentation_id, Slide.order >= position)
            .order_by(Slide.order.desc())
        )
        rows = result.all()
        for slide_id, current in rows:
            await self.session.execute(
                update(Slide)
                .where(Slide.id == slide_id)
                .values(order=current + 1)
                .execution_options(synchronize_session=False)
            )
        return len(rows)

    async def insert_at(self, presentation_id: str, position: int, values: dict[str, Any]) -> Slide:
        """
        Insert a slide so it ends up holding ``position``.

        Every slide with ``order >= position`` moves up by one first; the shift
        and the insert commit together or not at all.

        Raises:
            ValueError: If position is below 1
            SQLAlchemyError: If the transaction fails (it is rolled back)
        """
        if position < 1:
            raise ValueError("Slide position must be 1 or greater")

        try:
            shifted = await self._shift_from(presentation_id, position)
            slide = Slide(presentation_id=presentation_id, order=position, **values)
            self.session.add(slide)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Failed to insert slide at %d in presentation %s", position, presentation_id)
            raise

        logger.info(
            "Inserted slide %s at %d in presentation %s (%d shifted)", slide.id, position, presentation_id, shifted
        )
        return slide

    async def append(self, presentation_id: str, values: dict[str, Any]) -> Slide:
        return await self.insert_at(presentation_id, await self.next_order(presentation_id), values)

    async def duplicate(self, slide_id: str) -> Slide:
        """Copy every field except id and order into a new slide right after the source."""
        source = await self.get_slide(slide_id)
        return await self.insert_at(source.presentation_id, source.order + 1, source.copyable_values())

    async def delete(self, slide_id: str) -> Slide:
        """Remove a slide; remaining slides keep their orders."""
        slide = await self.get_slide(slide_id)
        try:
            await self.session.delete(slide)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Failed to delete slide %s", slide_id)
            raise
        logger.info("Deleted slide %s (order %d) from presentation %s", slide_id, slide.order, slide.presentation_id)
        return slide

    async def reorder(self, presentation_id: str, orders: list[tuple[str, int]]) -> None:
        """
        Apply caller-supplied orders in one transaction.

        The supplied set is not checked for being a permutation. Listed slides
        are first parked on negative orders so swapping two slides never trips
        the uniqueness constraint halfway through.
        """
        if not orders:
            return
        try:
            for index, (slide_id, _) in enumerate(orders, start=1):
                await self._write_order(presentation_id, slide_id, -index)
            for slide_id, order in orders:
                await self._write_order(presentation_id, slide_id, order)
            await self.session.commit()
        except (SQLAlchemyError, SlideNotFoundError):
            await self.session.rollback()
            logger.exception("Failed to reorder slides of presentation %s", presentation_id)
            raise
        logger.info("Reordered %d slides in presentation %s", len(orders), presentation_id)

    async def _write_order(self, presentation_id: str, slide_id: str, order: int) -> None:
        result = await self.session.execute(
            update(Slide)
            .where(Slide.id == slide_id, Slide.presentation_id == presentation_id)
            .values(order=order)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise SlideNotFoundError(f"Slide {slide_id} not found in presentation {presentation_id}")
