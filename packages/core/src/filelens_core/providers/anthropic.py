from __future__ import annotations

from filelens_core.providers.base import BaseProvider


class AnthropicProvider(BaseProvider):
    TEMPERATURE = 0.3

    def __init__(self, api_key: str):
        try:
            from anthropic import Anthropic
        except ImportError:
            raise ImportError(
                "The 'anthropic' package is required for claude-* models. "
                "Install it with: pip install 'filelens[anthropic]'"
            )
        self.client = Anthropic(api_key=api_key)

    def _call_api(self, model: str, prompt: str, max_tokens: int) -> str:
        # Imported inside the method because the anthropic package is optional;
        # __init__ already validated it is installed before we reach here.
        from anthropic.types import TextBlock

        response = self.client.messages.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.TEMPERATURE,
            max_tokens=max_tokens,
        )
        return "".join(block.text for block in response.content if isinstance(block, TextBlock))
