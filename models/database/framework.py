"""
Framework models - reusable deck structures fed to the generation pipeline
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from database import Base
from models.database.common import new_id, utcnow


class Framework(Base):
    """Named template describing the slides a generated deck should contain"""

    __tablename__ = "frameworks"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    slides = relationship(
        "FrameworkSlide",
        back_populates="framework",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="FrameworkSlide.order",
    )

    def __repr__(self) -> str:
        return f"<Framework(id={self.id}, name={self.name})>"


class FrameworkSlide(Base):
    """Instructions for one slide of a framework; never rendered directly"""

    __tablename__ = "framework_slides"

    id = Column(String(36), primary_key=True, default=new_id)
    framework_id = Column(String(36), ForeignKey("frameworks.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    instructions = Column(Text, nullable=False, default="")
    slide_type = Column(String(20), nullable=False, default="CONTENT")
    layout = Column(String(32), nullable=False, default="TEXT_ONLY")
    order = Column(Integer, nullable=False)

    framework = relationship("Framework", back_populates="slides")
