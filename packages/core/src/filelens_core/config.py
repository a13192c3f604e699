from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


@dataclass(frozen=True)
class ReviewerConfig:
    model: str
    max_tokens: int
    focus: str


# Part of the external contract: model ids, budgets and focus strings are
# exactly what users select with -preset.
PRESETS: dict[str, ReviewerConfig] = {
    "quick": ReviewerConfig(model="gpt-4o-mini", max_tokens=1000, focus="bugs and obvious issues"),
    "thorough": ReviewerConfig(
        model="gpt-4o", max_tokens=3000, focus="comprehensive analysis including architecture"
    ),
    "security": ReviewerConfig(
        model="gpt-4o", max_tokens=2000, focus="security vulnerabilities and input validation"
    ),
    "performance": ReviewerConfig(model="gpt-4o", max_tokens=2000, focus="performance and scalability"),
}

DEFAULT_PRESET = "quick"

DEFAULT_CONFIG: dict = {
    "preset": DEFAULT_PRESET,
    "model": None,  # None = use the preset's model
    "max_tokens": None,
    "focus": None,
}


def get_config(preset: Optional[str] = DEFAULT_PRESET) -> ReviewerConfig:
    """Return the preset row for ``preset``; unknown or missing names get ``quick``."""
    return PRESETS.get(preset or DEFAULT_PRESET, PRESETS[DEFAULT_PRESET])


def create_reviewer_config(
    preset: Optional[str] = DEFAULT_PRESET,
    *,
    model: Optional[str] = None,
    max_tokens: Optional[int] = None,
    focus: Optional[str] = None,
) -> ReviewerConfig:
    """Resolve a preset and apply per-field overrides.

    ``model`` and ``focus`` replace the preset value when non-empty.
    ``max_tokens`` replaces it only when it is a positive integer: ``0`` is
    treated as unset and falls back to the preset budget.
    """
    base = get_config(preset)
    if isinstance(max_tokens, bool) or not (isinstance(max_tokens, int) and max_tokens > 0):
        max_tokens = base.max_tokens
    return ReviewerConfig(
        model=model or base.model,
        max_tokens=max_tokens,
        focus=focus or base.focus,
    )


def load_config(config_path: str = ".filelens.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .filelens.yml in the current directory
      3. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    return config
