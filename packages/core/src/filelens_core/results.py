"""Builders and the console renderer for review responses."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

from filelens_core.models import ReviewError, ReviewResponse, ReviewResult
from filelens_core.utils.language import SupportedLanguage

SEPARATOR = "=" * 60


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def create_review_result(filename: str, language: SupportedLanguage, analysis: str) -> ReviewResult:
    return ReviewResult(filename=filename, language=language, analysis=analysis, timestamp=_timestamp())


def create_error_result(filename: str, error: Union[str, BaseException, object]) -> ReviewError:
    """Build a failed response from a message string or anything carrying ``.message``.

    Exceptions without a ``message`` attribute fall back to ``str(error)``.
    """
    if isinstance(error, str):
        message = error
    else:
        message = error.message if hasattr(error, "message") else str(error)
    return ReviewError(filename=filename, error=message, timestamp=_timestamp())


def format_review_output(result: ReviewResponse) -> str:
    if not result.success:
        return f"❌ Error reviewing {result.filename}:\n{result.error}"

    return (
        f"✅ Review complete: {result.filename}\n"
        f"📌 Code Review Results for {result.filename}\n"
        f"Language: {result.language}\n"
        f"Reviewed: {result.timestamp}\n"
        f"\n"
        f"{SEPARATOR}\n"
        f"{result.analysis}\n"
        f"{SEPARATOR}"
    )
