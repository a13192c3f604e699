from __future__ import annotations

from typing import Any

from filelens_core.either import Either, Left, Right
from filelens_core.errors import AppError, create_validation_error


def validate_filename(filename: Any) -> Either[AppError, str]:
    """Accept any non-blank string; the value is returned untouched."""
    if not filename:
        return Left(create_validation_error("No filename provided"))
    if not isinstance(filename, str):
        return Left(create_validation_error("Filename must be a string"))
    if not filename.strip():
        return Left(create_validation_error("Filename cannot be empty"))
    return Right(filename)


def is_valid_input(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0
