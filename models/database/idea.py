"""
Idea model - brainstorm seeds that spawn presentations through angles
"""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import relationship

from database import Base
from models.database.common import new_id, utcnow


class Idea(Base):
    __tablename__ = "ideas"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    presentations = relationship("Presentation", back_populates="idea", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Idea(id={self.id}, title={self.title})>"
