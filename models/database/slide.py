"""
Slide model - individual slides of a presentation
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from database import Base
from models.database.common import new_id, utcnow


class Slide(Base):
    """Slide content, layout and per-slide styling overrides"""

    __tablename__ = "slides"
    __table_args__ = (UniqueConstraint("presentation_id", "order", name="uq_slides_presentation_order"),)

    id = Column(String(36), primary_key=True, default=new_id)
    presentation_id = Column(
        String(36), ForeignKey("presentations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False, default="")
    narration = Column(Text, nullable=True)
    annotations = Column(Text, nullable=True)  # serialized overlay JSON
    slide_type = Column(String(20), nullable=False, default="CONTENT")
    layout = Column(String(32), nullable=False, default="TEXT_ONLY")
    order = Column(Integer, nullable=False)  # 1-based; gaps allowed after deletes
    image_url = Column(String(2048), nullable=True)
    background_color = Column(String(64), nullable=True)
    text_color = Column(String(64), nullable=True)
    heading_color = Column(String(64), nullable=True)
    text_align = Column(String(10), nullable=False, default="LEFT")
    show_title = Column(Boolean, nullable=False, default=True)
    show_content = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    presentation = relationship("Presentation", back_populates="slides")

    # Copied by duplicate(); id, order and timestamps are never copied
    COPYABLE_FIELDS = (
        "title",
        "content",
        "narration",
        "annotations",
        "slide_type",
        "layout",
        "image_url",
        "background_color",
        "text_color",
        "heading_color",
        "text_align",
        "show_title",
        "show_content",
    )

    def copyable_values(self) -> dict:
        return {field: getattr(self, field) for field in self.COPYABLE_FIELDS}

    def __repr__(self) -> str:
        return f"<Slide(id={self.id}, presentation_id={self.presentation_id}, order={self.order})>"
