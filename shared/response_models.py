"""
Common API response models.
"""

from typing import Any

from pydantic import BaseModel, Field


class ActionResult(BaseModel):
    """
    Outcome of a mutating operation.

    Failures never escape as exceptions: persistence errors and missing
    entities become ``success=False`` with a human readable ``error``.
    """

    success: bool = Field(..., description="Whether the mutation was applied")
    error: str | None = Field(None, description="Reason the mutation was not applied")
    message: str | None = Field(None, description="Informational message")
    data: Any | None = Field(None, description="Updated entity or operation payload")

    @classmethod
    def ok(cls, data: Any | None = None, message: str | None = None) -> "ActionResult":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str) -> "ActionResult":
        return cls(success=False, error=error)
