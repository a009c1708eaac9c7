"""OpenAI driver for slide generation using AsyncOpenAI."""

from __future__ import annotations

from typing import Any

from shared.azure_openai_client import create_openai_client

from .base import GenerationDriver


class OpenAIGenerationDriver(GenerationDriver):
    """Direct OpenAI implementation using AsyncOpenAI client."""

    def __init__(self):
        self.client = create_openai_client()

    async def complete(self, prompt: str, step_config: dict[str, Any]) -> str:
        response = await self.client.chat.completions.create(
            model=step_config.get("model", "gpt-4o-mini"),
            messages=[
                {"role": "system", "content": step_config.get("system_prompt", "")},
                {"role": "user", "content": prompt},
            ],
            temperature=step_config.get("temperature", 0.7),
            max_tokens=step_config.get("max_tokens", 4000),
        )

        content = response.choices[0].message.content
        if content is not None:
            return content.strip()
        return ""
