"""Factories for the chat-completion clients used by generation drivers.

Both factories raise ``ValueError`` when credentials are missing so callers can
treat an unconfigured provider as "no driver" and fall back to static content.
"""

from __future__ import annotations

import os

from openai import AsyncOpenAI

from shared.utils import config


def create_azure_openai_client(
    api_key: str | None = None,
    azure_endpoint: str | None = None,
) -> AsyncOpenAI:
    """
    Create an Azure OpenAI client using the v1 API pattern.

    Args:
        api_key: Azure OpenAI API key (auto-detected if None)
        azure_endpoint: Azure OpenAI endpoint URL (auto-detected if None)

    Returns:
        Configured AsyncOpenAI client pointed at the Azure endpoint

    Raises:
        ValueError: If credentials are not configured
    """
    api_key = api_key or config.get("azure_openai_key") or os.getenv("AZURE_OPENAI_KEY")
    azure_endpoint = (
        azure_endpoint or config.get("azure_openai_endpoint") or os.getenv("AZURE_OPENAI_ENDPOINT")
    )

    if not api_key or not azure_endpoint:
        raise ValueError(
            "Azure OpenAI credentials not configured. "
            "Set AZURE_OPENAI_KEY and AZURE_OPENAI_ENDPOINT environment variables."
        )

    return AsyncOpenAI(api_key=api_key, base_url=f"{azure_endpoint.rstrip('/')}/openai/v1/")


def create_openai_client(api_key: str | None = None) -> AsyncOpenAI:
    """
    Create a direct OpenAI client.

    Raises:
        ValueError: If API key is not configured
    """
    api_key = api_key or config.get("openai_api_key") or os.getenv("OPENAI_API_KEY")

    if not api_key:
        raise ValueError("OpenAI API key not configured. Set OPENAI_API_KEY environment variable.")

    return AsyncOpenAI(api_key=api_key)


def get_azure_deployment_name(deployment: str | None = None) -> str:
    """Azure deployment to call; an explicit name overrides configuration."""
    return (
        deployment
        or config.get("azure_openai_deployment")
        or os.getenv("AZURE_OPENAI_DEPLOYMENT")
        or "gpt-4o-mini"
    )
