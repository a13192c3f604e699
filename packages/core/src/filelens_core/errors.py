"""Tagged error values for the review pipeline.

Errors are plain data, not exceptions: every fallible step returns one of
these inside a ``Left`` so the pipeline can short-circuit without raising.
The kind set is closed: FileError, ValidationError, AIError and NetworkError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import click

ErrorKind = Literal["FileError", "ValidationError", "AIError", "NetworkError"]

_PREFIXES: dict[str, str] = {
    "FileError": "File Error",
    "ValidationError": "Validation Error",
    "AIError": "AI Analysis Error",
    "NetworkError": "Network Error",
}


@dataclass(frozen=True)
class AppError:
    """A single failure produced by one pipeline step."""

    kind: ErrorKind
    message: str


def create_file_error(message: str) -> AppError:
    return AppError(kind="FileError", message=message)


def create_validation_error(message: str) -> AppError:
    return AppError(kind="ValidationError", message=message)


def create_ai_error(message: str) -> AppError:
    return AppError(kind="AIError", message=message)


def create_network_error(message: str) -> AppError:
    return AppError(kind="NetworkError", message=message)


def format_error(error: AppError) -> str:
    """Render an error for humans, e.g. ``❌ File Error: not found``."""
    prefix = _PREFIXES.get(error.kind, "Unknown Error")
    return f"❌ {prefix}: {error.message}"


def log_error(error: AppError) -> AppError:
    """Write the error to stderr and hand it back unchanged."""
    click.echo(f"Error: {error.kind} - {error.message}", err=True)
    return error


def log_success(message: str) -> str:
    click.echo(f"✅ {message}")
    return message
