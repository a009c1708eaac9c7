"""Framework service package."""

from .app import app  # noqa: F401
from .manager import FrameworkManager  # noqa: F401

__all__ = ["app", "FrameworkManager"]
