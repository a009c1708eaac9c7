"""
Database models package - SQLAlchemy ORM models
"""

from .framework import Framework, FrameworkSlide
from .idea import Idea
from .presentation import Presentation
from .slide import Slide
from .voice_profile import VoiceProfile

__all__ = [
    "Framework",
    "FrameworkSlide",
    "Idea",
    "Presentation",
    "Slide",
    "VoiceProfile",
]
