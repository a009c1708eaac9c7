from abc import ABC, abstractmethod
from typing import Any


class GenerationDriver(ABC):
    """Abstract base class for chat-completion drivers."""

    @abstractmethod
    async def complete(self, prompt: str, step_config: dict[str, Any]) -> str:
        """Send ``prompt`` with the step's system prompt and parameters; return the raw reply."""
        pass
