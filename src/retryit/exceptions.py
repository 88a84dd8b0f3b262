r"""Exceptions raised by the retry engine.

This module defines the error hierarchy of the library. Individual
attempt failures are never surfaced directly to the caller: they are
reported through the failure callback and, once the attempt budget is
exhausted, wrapped into a ``RetryExhaustedError``.
"""

from __future__ import annotations

__all__ = ["RetryCancelledError", "RetryError", "RetryExhaustedError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class RetryError(Exception):
    """Base class for all errors raised by the retry engine."""


class RetryExhaustedError(RetryError):
    """Aggregate failure raised when the attempt budget is exhausted.

    The error wraps the ordered sequence of failures whose kind matched
    a registered exception filter. Failures of unregistered kinds count
    against the budget but are not part of ``exceptions``, so the
    sequence may be empty.

    Args:
        exceptions: The matched failures, in the order they occurred.
        attempts: The number of attempts that were made.
        last_exception: The failure of the final attempt, if any.
        message: Optional custom error message.

    Attributes:
        exceptions: Tuple of the matched failures.
        attempts: The number of attempts that were made.
        last_exception: The failure of the final attempt.

    Example:
        ```pycon
        >>> from retryit.exceptions import RetryExhaustedError
        >>> error = RetryExhaustedError([ValueError("boom")], attempts=3)
        >>> error.attempts
        3
        >>> str(error)
        'operation failed after 3 attempts (1 caught exception)'

        ```
    """

    def __init__(
        self,
        exceptions: Iterable[BaseException] = (),
        *,
        attempts: int = 0,
        last_exception: BaseException | None = None,
        message: str | None = None,
    ) -> None:
        self.exceptions: tuple[BaseException, ...] = tuple(exceptions)
        self.attempts = attempts
        self.last_exception = last_exception
        if message is None:
            count = len(self.exceptions)
            plural = "" if count == 1 else "s"
            message = (
                f"operation failed after {attempts} attempts ({count} caught exception{plural})"
            )
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(attempts={self.attempts}, "
            f"exceptions={list(self.exceptions)!r})"
        )


class RetryCancelledError(RetryError):
    """Raised when an execution is cancelled through its cancel event.

    Args:
        attempts: The number of attempts made before cancellation.
    """

    def __init__(self, attempts: int = 0) -> None:
        self.attempts = attempts
        super().__init__(f"retry cancelled after {attempts} attempts")
