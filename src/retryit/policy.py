r"""Fluent retry policy.

This module provides the RetryPolicy class which is both the builder of
a retry configuration and the entry point to run an operation under
that configuration.

Example:
    ```pycon
    >>> from retryit import RetryPolicy
    >>> attempts = []
    >>> def flaky():
    ...     attempts.append(1)
    ...     if len(attempts) < 3:
    ...         raise ConnectionError("transient")
    ...     return "ok"
    ...
    >>> policy = (
    ...     RetryPolicy.default()
    ...     .with_max_attempts(5)
    ...     .with_interval(0)
    ...     .with_caught_exception(ConnectionError)
    ...     .on_failure(lambda attempt, exc: print(f"attempt {attempt} failed: {exc}"))
    ... )
    >>> policy.execute(flaky)
    attempt 1 failed: transient
    attempt 2 failed: transient
    'ok'

    ```
"""

from __future__ import annotations

__all__ = ["RetryPolicy"]

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Any, TypeVar

from retryit.core.validation import (
    validate_callback,
    validate_exception_kind,
    validate_interval,
    validate_max_attempts,
)
from retryit.retry.config import CallbackConfig, RetryConfig
from retryit.retry.executor import RetryExecutor
from retryit.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    import asyncio
    import threading
    from collections.abc import Callable

    from retryit.retry.config import ExceptionPredicate

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryPolicy:
    """Retry policy builder and executor.

    Builder methods mutate the policy and return the same instance, so
    calls can be chained. The attempt counter is not stored on the
    policy: every call to ``execute`` or ``execute_async`` tracks its
    own attempts, so a configured policy can be run many times, and from
    concurrent tasks or threads. Changing the configuration while an
    execution is in flight does not affect that execution.

    Every exception raised by the operation triggers a retry until the
    attempt budget is spent. The registered exception kinds only select
    which failures end up in the ``RetryExhaustedError`` raised on
    exhaustion.

    Args:
        config: Optional retry configuration. Defaults to 3 attempts,
            2 seconds between attempts and the default exception filters.
        callbacks: Optional callback configuration.
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        callbacks: CallbackConfig | None = None,
    ) -> None:
        self._config = config.copy() if config is not None else RetryConfig()
        self._callbacks = callbacks.copy() if callbacks is not None else CallbackConfig()

    @classmethod
    def default(cls) -> RetryPolicy:
        """Create a new policy with the default configuration.

        Returns:
            A fresh ``RetryPolicy``.
        """
        return cls()

    def __repr__(self) -> str:
        kinds = ", ".join(kind.__name__ for kind in self._config.exception_filters)
        return (
            f"{self.__class__.__qualname__}(max_attempts={self._config.max_attempts}, "
            f"interval={self._config.interval}, caught=[{kinds}])"
        )

    @property
    def config(self) -> RetryConfig:
        """A copy of the current retry configuration."""
        return self._config.copy()

    @property
    def callbacks(self) -> CallbackConfig:
        """A copy of the current callback configuration."""
        return self._callbacks.copy()

    def with_max_attempts(self, max_attempts: int) -> RetryPolicy:
        """Set the total number of attempts.

        Args:
            max_attempts: Number of attempts, including the first one.
                Must be >= 1.

        Returns:
            The policy itself.

        Raises:
            TypeError: If max_attempts is not an integer.
            ValueError: If max_attempts is lower than 1.
        """
        validate_max_attempts(max_attempts)
        self._config.max_attempts = max_attempts
        return self

    def with_interval(self, interval: float | timedelta) -> RetryPolicy:
        """Set the fixed delay between two attempts.

        Args:
            interval: Delay in seconds, or a ``timedelta``. Must be >= 0.

        Returns:
            The policy itself.

        Raises:
            TypeError: If interval is neither a number nor a ``timedelta``.
            ValueError: If interval is negative.
        """
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        validate_interval(interval)
        self._config.interval = float(interval)
        return self

    def with_caught_exception(
        self,
        kind: type[BaseException],
        predicate: ExceptionPredicate | None = None,
    ) -> RetryPolicy:
        """Register an exception kind collected into the aggregate error.

        Registering a kind that is already present replaces its
        predicate.

        Args:
            kind: The exception class. Matching is on the exact class.
            predicate: Optional predicate narrowing which instances of
                ``kind`` are collected.

        Returns:
            The policy itself.

        Raises:
            TypeError: If kind is not an exception class or predicate is
                not callable.
        """
        validate_exception_kind(kind)
        validate_callback("predicate", predicate)
        self._config.exception_filters[kind] = predicate
        return self

    def on_failure(self, callback: Callable[[int, Exception], None] | None) -> RetryPolicy:
        """Set the callback invoked after every failed attempt.

        The callback receives the attempt number (1-indexed) and the
        exception. It replaces any previously set callback.

        Args:
            callback: The callback, or ``None`` to remove it.

        Returns:
            The policy itself.
        """
        validate_callback("on_failure", callback)
        self._callbacks.on_failure = callback
        return self

    def with_result_condition(self, predicate: Callable[[Any], bool] | None = None) -> RetryPolicy:  # noqa: ARG002
        """Accept a result condition without using it.

        Result-based retries are not supported. The method exists so
        that callers written against the full builder keep working.

        Args:
            predicate: Ignored.

        Returns:
            The policy itself.
        """
        logger.debug("with_result_condition() has no effect: result conditions are not supported")
        return self

    def execute(
        self,
        func: Callable[[], T],
        *,
        cancel_event: threading.Event | None = None,
    ) -> T:
        """Call a blocking operation until it succeeds.

        Args:
            func: The zero-argument operation to run.
            cancel_event: Optional event that aborts the execution when
                set.

        Returns:
            The value returned by the operation (``None`` for operations
            without a result).

        Raises:
            RetryExhaustedError: If every attempt failed.
            RetryCancelledError: If ``cancel_event`` was set.
        """
        executor = RetryExecutor(self._config.copy(), self._callbacks.copy())
        return executor.execute(func, cancel_event=cancel_event)

    async def execute_async(
        self,
        func: Callable[[], Any],
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> Any:
        """Run an operation until it succeeds without blocking the event loop.

        Args:
            func: The zero-argument operation to run. Coroutine functions
                are awaited, plain callables run in a worker thread.
            cancel_event: Optional event that aborts the execution when
                set.

        Returns:
            The value produced by the operation (``None`` for operations
            without a result).

        Raises:
            RetryExhaustedError: If every attempt failed.
            RetryCancelledError: If ``cancel_event`` was set.
        """
        executor = AsyncRetryExecutor(self._config.copy(), self._callbacks.copy())
        return await executor.execute(func, cancel_event=cancel_event)
