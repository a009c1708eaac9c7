"""Idea service package."""

from .app import app  # noqa: F401
from .manager import IdeaManager  # noqa: F401

__all__ = ["app", "IdeaManager"]
