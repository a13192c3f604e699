from __future__ import annotations

try:
    from openai import OpenAI as _OpenAI
except ImportError:
    _OpenAI = None  # type: ignore[assignment,misc]

from filelens_core.providers.base import BaseProvider


class OpenAIProvider(BaseProvider):
    # Low temperature keeps repeated reviews of the same file close to each other.
    TEMPERATURE = 0.2

    def __init__(self, api_key: str):
        if _OpenAI is None:
            raise ImportError(
                "The 'openai' package is required for this provider. Install it with: pip install openai"
            )
        self.client = _OpenAI(api_key=api_key)

    def _call_api(self, model: str, prompt: str, max_tokens: int) -> str:
        response = self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.TEMPERATURE,
            max_tokens=max_tokens,
        )
        return response.choices[0].message.content
