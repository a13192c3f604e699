"""Text-generation providers and model-id routing."""

from __future__ import annotations

import os

from filelens_core.providers.base import BaseProvider


def get_provider(model: str) -> BaseProvider:
    """Pick a provider for ``model`` and build it with the key from the environment.

    ``claude-*`` ids go to Anthropic, everything else to OpenAI. Raises
    ValueError when the API key is missing and ImportError when the SDK is.
    """
    if model.startswith("claude"):
        from filelens_core.providers.anthropic import AnthropicProvider

        api_key = os.environ.get("ANTHROPIC_API_KEY")
        if not api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable is not set.")
        return AnthropicProvider(api_key=api_key)

    from filelens_core.providers.openai import OpenAIProvider

    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        raise ValueError("OPENAI_API_KEY environment variable is not set.")
    return OpenAIProvider(api_key=api_key)
