"""File system calls wrapped so faults come back as FileError values."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, TypeVar

from filelens_core.either import Either, Left, Right
from filelens_core.errors import AppError, create_file_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _with_fs(operation: Callable[[], T], context: str) -> Either[AppError, T]:
    try:
        return Right(operation())
    except Exception as e:
        logger.debug("%s: %s", context, e)
        return Left(create_file_error(f"{context}: {e}"))


def safe_file_exists(filename: str) -> Either[AppError, bool]:
    # Path.exists() reports a missing path as False; only real I/O faults
    # (e.g. permission denied on a parent directory) raise.
    return _with_fs(lambda: Path(filename).exists(), "Failed to check file existence")


def safe_read_file(filename: str) -> Either[AppError, str]:
    return _with_fs(lambda: Path(filename).read_text(encoding="utf-8"), f"Failed to read {filename}")
