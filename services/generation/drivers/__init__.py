"""Chat-completion driver implementations."""

from .azure_driver import AzureOpenAIGenerationDriver
from .base import GenerationDriver
from .openai_driver import OpenAIGenerationDriver

__all__ = [
    "GenerationDriver",
    "OpenAIGenerationDriver",
    "AzureOpenAIGenerationDriver",
]
