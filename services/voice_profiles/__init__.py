"""Voice profile service package."""

from .app import app  # noqa: F401
from .manager import VoiceProfileManager  # noqa: F401

__all__ = ["app", "VoiceProfileManager"]
