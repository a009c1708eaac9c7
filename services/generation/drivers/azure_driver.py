"""Azure OpenAI driver for slide generation using the v1 API pattern."""

from __future__ import annotations

from typing import Any

from shared.azure_openai_client import create_azure_openai_client, get_azure_deployment_name

from .base import GenerationDriver


class AzureOpenAIGenerationDriver(GenerationDriver):
    """Azure OpenAI implementation; the configured model names a deployment."""

    def __init__(self):
        self.client = create_azure_openai_client()

    async def complete(self, prompt: str, step_config: dict[str, Any]) -> str:
        response = await self.client.chat.completions.create(
            model=get_azure_deployment_name(step_config.get("deployment")),
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
