"""The single point of contact with the text-generation service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from filelens_core.either import Either, Left, Right
from filelens_core.errors import AppError, create_ai_error
from filelens_core.prompts import create_analysis_prompt
from filelens_core.providers import get_provider

if TYPE_CHECKING:
    from filelens_core.config import ReviewerConfig
    from filelens_core.models import AnalysisInput
    from filelens_core.providers.base import BaseProvider

logger = logging.getLogger(__name__)


def safe_analyze_code(
    config: ReviewerConfig,
    analysis_input: AnalysisInput,
    provider: Optional[BaseProvider] = None,
) -> Either[AppError, str]:
    """Ask the model to review ``analysis_input`` and return its text.

    Never raises. Provider construction problems (missing SDK, missing API
    key) and call failures all come back as ``Left(AIError)``.
    """
    try:
        prompt = create_analysis_prompt(
            analysis_input.code,
            analysis_input.filename,
            config.focus,
            analysis_input.language,
        )
        if provider is None:
            provider = get_provider(config.model)
        return Right(provider.generate(model=config.model, prompt=prompt, max_tokens=config.max_tokens))
    except Exception as e:
        logger.warning("AI analysis of %s with %s failed: %s", analysis_input.filename, config.model, e)
        return Left(create_ai_error(f"AI analysis failed: {e}"))
