"""Slide editor service package."""

from .app import app  # noqa: F401
from .service import SlideService  # noqa: F401

__all__ = ["app", "SlideService"]
