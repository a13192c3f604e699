"""Base provider implementing the Template Method pattern.

All providers share the same contract with the review pipeline:
    generate(model, prompt, max_tokens)
        → _call_api()   ← only this differs per provider
        → strip the response text

Subclasses implement two things only:
  - __init__: validate and store the SDK client
  - _call_api: make one raw API call and return the text response

There is no retry here. A failed call raises, and
safe_analyze_code turns the exception into an AIError value; callers that
want retries compose them with either.retry.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    # ------------------------------------------------------------------ #
    # Public interface                                                     #
    # ------------------------------------------------------------------ #

    def generate(self, model: str, prompt: str, max_tokens: int) -> str:
        """Send one prompt and return the generated text.

        Raises whatever the underlying SDK raises.
        """
        logger.debug(
            "%s: requesting %s (max_tokens=%d, prompt=%d chars)",
            self.__class__.__name__,
            model,
            max_tokens,
            len(prompt),
        )
        text = self._call_api(model, prompt, max_tokens)
        return (text or "").strip()

    # ------------------------------------------------------------------ #
    # Abstract: implement in each provider                               #
    # ------------------------------------------------------------------ #

    @abstractmethod
    def _call_api(self, model: str, prompt: str, max_tokens: int) -> str:
        """Make a single API call and return the raw text response."""
