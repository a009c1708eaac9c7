"""
Presentation model - generated slide decks
"""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from database import Base
from models.database.common import new_id, utcnow


class Presentation(Base):
    """A slide deck and its presentation-wide styling"""

    __tablename__ = "presentations"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    prompt = Column(Text, nullable=False)
    primary_color = Column(String(32), nullable=False, default="#3b82f6")
    secondary_color = Column(String(32), nullable=False, default="#1e40af")
    font_family = Column(String(100), nullable=False, default="Inter")
    # Generation-time references only; deleting a profile or framework leaves decks intact
    voice_profile_id = Column(String(36), ForeignKey("voice_profiles.id", ondelete="SET NULL"), nullable=True)
    framework_id = Column(String(36), ForeignKey("frameworks.id", ondelete="SET NULL"), nullable=True)
    idea_id = Column(String(36), ForeignKey("ideas.id", ondelete="SET NULL"), nullable=True, index=True)
    selected_angle = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    slides = relationship(
        "Slide",
        back_populates="presentation",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Slide.order",
    )
    idea = relationship("Idea", back_populates="presentations")

    def __repr__(self) -> str:
        return f"<Presentation(id={self.id}, title={self.title})>"
