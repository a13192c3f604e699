"""Review data models.

``ReviewResult`` and ``ReviewError`` are the two halves of ``ReviewResponse``;
consumers branch on ``success``, never on which fields happen to be present.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from filelens_core.utils.language import SupportedLanguage


@dataclass(frozen=True)
class AnalysisInput:
    """What the AI step needs to know about one file."""

    code: str
    filename: str
    language: SupportedLanguage


@dataclass(frozen=True)
class ReviewResult:
    filename: str
    language: SupportedLanguage
    analysis: str
    timestamp: str  # ISO-8601 UTC timestamp
    success: Literal[True] = True


@dataclass(frozen=True)
class ReviewError:
    filename: str
    error: str
    timestamp: str  # ISO-8601 UTC timestamp
    success: Literal[False] = False


ReviewResponse = Union[ReviewResult, ReviewError]


@dataclass
class BatchReviewResult:
    """Aggregate shape for a multi-file run.

    Nothing builds this yet: there is no batch executor. It is kept so a
    future one has an agreed result type.
    """

    successful: list[ReviewResult] = field(default_factory=list)
    failed: list[ReviewError] = field(default_factory=list)
    total: int = 0
    success_rate: float = 0.0
