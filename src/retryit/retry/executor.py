r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a blocking
operation with automatic retry logic on the caller's thread.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import time
from typing import TYPE_CHECKING, TypeVar

from retryit.retry.decider import ExceptionFilter
from retryit.retry.executor_core import AttemptTracker, create_cancelled_error
from retryit.retry.manager import CallbackManager

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from retryit.retry.config import CallbackConfig, RetryConfig

T = TypeVar("T")


class RetryExecutor:
    """Executes a blocking operation with automatic retry logic.

    The operation is called directly on the caller's thread and the
    delay between attempts blocks that thread.

    Attributes:
        config: Retry configuration.
        decider: Filter selecting which failures are collected.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> from retryit.retry import CallbackConfig, RetryConfig, RetryExecutor
        >>> executor = RetryExecutor(RetryConfig(interval=0.0), CallbackConfig())
        >>> executor.execute(lambda: 42)
        42

        ```
    """

    def __init__(self, retry_config: RetryConfig, callback_config: CallbackConfig) -> None:
        self.config = retry_config
        self.decider: ExceptionFilter = ExceptionFilter(retry_config.exception_filters)
        self.callbacks: CallbackManager = CallbackManager(callback_config)

    def execute(
        self,
        func: Callable[[], T],
        cancel_event: threading.Event | None = None,
    ) -> T:
        """Call ``func`` until it returns or the attempt budget is spent.

        Args:
            func: The zero-argument operation to run.
            cancel_event: Optional event. When set, the execution stops
                before the next attempt or during the wait.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            RetryExhaustedError: If every attempt failed.
            RetryCancelledError: If ``cancel_event`` was set.
        """
        tracker = AttemptTracker(self.config, self.callbacks, self.decider)
        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise create_cancelled_error(tracker.attempt)
            try:
                result = func()
            except Exception as exc:
                tracker.record_failure(exc)
            else:
                tracker.record_success()
                return result

            if cancel_event is None:
                time.sleep(self.config.interval)
            elif cancel_event.wait(self.config.interval):
                raise create_cancelled_error(tracker.attempt)
