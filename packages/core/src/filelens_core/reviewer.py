"""Single-file review pipeline.

    validate → exists → read → detect language → AI analysis → result

Each step returns an Either and the first Left ends the run. At this
boundary the tagged error is flattened to its message: a ReviewResponse
only tells the caller whether the review succeeded plus human-readable text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import click

from filelens_core.ai_safe import safe_analyze_code
from filelens_core.config import DEFAULT_PRESET, ReviewerConfig, create_reviewer_config
from filelens_core.either import Left
from filelens_core.models import AnalysisInput, ReviewResponse
from filelens_core.providers.base import BaseProvider
from filelens_core.results import create_error_result, create_review_result, format_review_output
from filelens_core.utils.fs_safe import safe_file_exists, safe_read_file
from filelens_core.utils.language import SupportedLanguage, get_language_from_filename
from filelens_core.utils.validation import validate_filename

logger = logging.getLogger(__name__)


def review_file(
    config: ReviewerConfig,
    filename: str,
    provider: Optional[BaseProvider] = None,
) -> ReviewResponse:
    validated = validate_filename(filename)
    if isinstance(validated, Left):
        return create_error_result(filename, validated.error.message)

    exists = safe_file_exists(filename)
    if isinstance(exists, Left):
        return create_error_result(filename, exists.error.message)
    if not exists.value:
        return create_error_result(filename, f"File not found: {filename}")

    content = safe_read_file(filename)
    if isinstance(content, Left):
        return create_error_result(filename, content.error.message)

    language = get_language_from_filename(filename)
    logger.debug("Reviewing %s as %s with %s", filename, language, config.model)

    analysis = safe_analyze_code(
        config,
        AnalysisInput(code=content.value, filename=filename, language=language),
        provider=provider,
    )
    if isinstance(analysis, Left):
        return create_error_result(filename, analysis.error.message)

    return create_review_result(filename, language, analysis.value)


def format_review_result(result: ReviewResponse) -> str:
    return format_review_output(result)


def display_review_result(result: ReviewResponse) -> ReviewResponse:
    """Print the formatted result and return it unchanged."""
    click.echo(format_review_result(result))
    return result


@dataclass(frozen=True)
class CodeReviewer:
    """A reviewer bound to one resolved config, for library callers."""

    config: ReviewerConfig
    provider: Optional[BaseProvider] = None

    def review_file(self, filename: str) -> ReviewResponse:
        return review_file(self.config, filename, provider=self.provider)

    def detect_language(self, filename: str) -> SupportedLanguage:
        return get_language_from_filename(filename)


def create_code_reviewer(
    preset: str = DEFAULT_PRESET,
    *,
    model: Optional[str] = None,
    max_tokens: Optional[int] = None,
    focus: Optional[str] = None,
    provider: Optional[BaseProvider] = None,
) -> CodeReviewer:
    config = create_reviewer_config(preset, model=model, max_tokens=max_tokens, focus=focus)
    return CodeReviewer(config=config, provider=provider)
