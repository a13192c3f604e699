"""A minimal Either type and the combinators the review pipeline uses.

Every fallible operation returns ``Left(error)`` or ``Right(value)`` instead
of raising. Combinators are curried so they can be built once and applied
to many results:

    recover = recover_with("n/a")
    recover(Left(err))   # -> Right("n/a")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from filelens_core.errors import AppError, create_file_error, create_validation_error

T = TypeVar("T")
R = TypeVar("R")
E = TypeVar("E")


@dataclass(frozen=True)
class Left(Generic[E]):
    error: E


@dataclass(frozen=True)
class Right(Generic[T]):
    value: T


Either = Union[Left[E], Right[T]]


def is_left(result: Either) -> bool:
    return isinstance(result, Left)


def is_right(result: Either) -> bool:
    return isinstance(result, Right)


def handle_error(handler: Callable[[AppError], T]) -> Callable[[Either[AppError, T]], T]:
    """Collapse a result to a plain value, using ``handler`` on the error branch."""

    def _apply(result: Either[AppError, T]) -> T:
        if isinstance(result, Left):
            return handler(result.error)
        return result.value

    return _apply


def map_error(mapper: Callable[[AppError], AppError]) -> Callable[[Either[AppError, T]], Either[AppError, T]]:
    def _apply(result: Either[AppError, T]) -> Either[AppError, T]:
        if isinstance(result, Left):
            return Left(mapper(result.error))
        return result

    return _apply


def safe_operation(operation: Callable[[T], R]) -> Callable[[T], Either[AppError, R]]:
    """Wrap a function that may raise so it returns an Either instead.

    Every caught exception is tagged as FileError, whatever its real origin.
    Callers that need a precise kind should wrap the result with ``map_error``.
    """

    def _apply(value: T) -> Either[AppError, R]:
        try:
            return Right(operation(value))
        except Exception as e:
            return Left(create_file_error(f"Operation failed: {e}"))

    return _apply


def recover_with(fallback: T) -> Callable[[Either[AppError, T]], Either[AppError, T]]:
    def _apply(result: Either[AppError, T]) -> Either[AppError, T]:
        if isinstance(result, Left):
            return Right(fallback)
        return result

    return _apply


def retry(
    max_attempts: int,
) -> Callable[[Callable[[T], Either[AppError, T]]], Callable[[T], Either[AppError, T]]]:
    """Re-run an operation until it succeeds or ``max_attempts`` is used up.

    Attempts run back to back with no delay. When every attempt fails the
    Left from the final attempt is returned.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    def _decorate(operation: Callable[[T], Either[AppError, T]]) -> Callable[[T], Either[AppError, T]]:
        def _apply(value: T) -> Either[AppError, T]:
            for _ in range(max_attempts - 1):
                result = operation(value)
                if isinstance(result, Right):
                    return result
            return operation(value)

        return _apply

    return _decorate


def to_option(result: Either[AppError, T]) -> Optional[T]:
    """Drop the error branch: the payload on success, ``None`` otherwise."""
    if isinstance(result, Right):
        return result.value
    return None


def from_option(value: Optional[T], error_message: str) -> Either[AppError, T]:
    if value is None:
        return Left(create_validation_error(error_message))
    return Right(value)


def safe_compose(
    *operations: Callable[[T], Either[AppError, T]],
) -> Callable[[T], Either[AppError, T]]:
    """Thread a value through ``operations``, stopping at the first Left."""

    def _apply(value: T) -> Either[AppError, T]:
        current: Either[AppError, T] = Right(value)
        for operation in operations:
            current = operation(current.value)
            if isinstance(current, Left):
                return current
        return current

    return _apply
