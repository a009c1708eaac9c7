"""Presentation service package."""

from .app import app  # noqa: F401
from .service import PresentationService  # noqa: F401

__all__ = ["app", "PresentationService"]
