"""
Voice profile model - tone and audience guidance injected into prompts
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, String

from database import Base
from models.database.common import new_id, utcnow


class VoiceProfile(Base):
    """Writing voice used when generating slide content"""

    __tablename__ = "voice_profiles"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    is_default = Column(Boolean, nullable=False, default=False)
    tone = Column(JSON, nullable=False, default=list)
    audience = Column(JSON, nullable=False, default=list)
    objective = Column(JSON, nullable=False, default=list)
    brand_voice = Column(JSON, nullable=False, default=list)
    content_style = Column(JSON, nullable=False, default=list)
    restrictions = Column(JSON, nullable=False, default=list)
    other = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    LIST_FIELDS = ("tone", "audience", "objective", "brand_voice", "content_style", "restrictions", "other")

    def __repr__(self) -> str:
        return f"<VoiceProfile(id={self.id}, name={self.name}, is_default={self.is_default})>"
