r"""Configuration dataclasses for retry behavior.

This module provides configuration objects for retry logic and
callbacks.
"""

from __future__ import annotations

__all__ = ["CallbackConfig", "ExceptionPredicate", "RetryConfig", "default_exception_filters"]

from collections.abc import Callable
from dataclasses import dataclass, field

from retryit.config import DEFAULT_INTERVAL, DEFAULT_MAX_ATTEMPTS
from retryit.core.validation import (
    validate_callback,
    validate_exception_kind,
    validate_interval,
    validate_max_attempts,
)

ExceptionPredicate = Callable[[BaseException], bool]


def default_exception_filters() -> dict[type[BaseException], ExceptionPredicate | None]:
    """Return the filters every policy starts with.

    Returns:
        A new mapping with the universal exception kind and the
        aggregate-of-exceptions kind, both without predicate.

    Example:
        ```pycon
        >>> from retryit.retry.config import default_exception_filters
        >>> default_exception_filters()
        {<class 'Exception'>: None, <class 'ExceptionGroup'>: None}

        ```
    """
    return {Exception: None, ExceptionGroup: None}


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    Attributes:
        max_attempts: Total number of attempts, including the first one.
        interval: Fixed delay in seconds between two attempts.
        exception_filters: Mapping from exception kind to an optional
            predicate. Failures matching an entry are collected into the
            aggregate failure.
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    interval: float = DEFAULT_INTERVAL
    exception_filters: dict[type[BaseException], ExceptionPredicate | None] = field(
        default_factory=default_exception_filters
    )

    def __post_init__(self) -> None:
        validate_max_attempts(self.max_attempts)
        validate_interval(self.interval)
        for kind, predicate in self.exception_filters.items():
            validate_exception_kind(kind)
            validate_callback("predicate", predicate)

    def copy(self) -> RetryConfig:
        """Return a copy that does not share the filter mapping.

        Returns:
            A new ``RetryConfig`` with the same values.
        """
        return RetryConfig(
            max_attempts=self.max_attempts,
            interval=self.interval,
            exception_filters=dict(self.exception_filters),
        )


@dataclass
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_failure: Optional callback invoked with the attempt number
            (1-indexed) and the exception after every failed attempt.
    """

    on_failure: Callable[[int, Exception], None] | None = None

    def __post_init__(self) -> None:
        validate_callback("on_failure", self.on_failure)

    def copy(self) -> CallbackConfig:
        """Return a validated copy of the callback configuration.

        Returns:
            A new ``CallbackConfig`` with the same callbacks.
        """
        return CallbackConfig(on_failure=self.on_failure)
