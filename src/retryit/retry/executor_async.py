r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs an
operation with automatic retry logic without blocking the event loop.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import inspect
from typing import TYPE_CHECKING, Any

from retryit.retry.decider import ExceptionFilter
from retryit.retry.executor_core import AttemptTracker, create_cancelled_error
from retryit.retry.manager import CallbackManager

if TYPE_CHECKING:
    from collections.abc import Callable

    from retryit.retry.config import CallbackConfig, RetryConfig


class AsyncRetryExecutor:
    """Executes an operation with automatic retry logic inside an event loop.

    Coroutine functions are awaited directly. Plain callables are
    dispatched to a worker thread with ``asyncio.to_thread`` so a
    blocking operation never holds the event loop. If a plain callable
    returns an awaitable, that awaitable is awaited as well.

    Note:
        The delay between attempts uses ``asyncio.sleep()``, allowing
        other tasks to run during the wait. Cancelling the task running
        ``execute`` cancels the wait or the in-flight attempt.

    Attributes:
        config: Retry configuration.
        decider: Filter selecting which failures are collected.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retryit.retry import AsyncRetryExecutor, CallbackConfig, RetryConfig
        >>> async def fetch():
        ...     return "payload"
        ...
        >>> executor = AsyncRetryExecutor(RetryConfig(interval=0.0), CallbackConfig())
        >>> asyncio.run(executor.execute(fetch))
        'payload'

        ```
    """

    def __init__(self, retry_config: RetryConfig, callback_config: CallbackConfig) -> None:
        self.config = retry_config
        self.decider: ExceptionFilter = ExceptionFilter(retry_config.exception_filters)
        self.callbacks: CallbackManager = CallbackManager(callback_config)

    async def execute(
        self,
        func: Callable[[], Any],
        cancel_event: asyncio.Event | None = None,
    ) -> Any:
        """Run ``func`` until it returns or the attempt budget is spent.

        Args:
            func: The zero-argument operation to run. It may be a
                coroutine function or a plain callable.
            cancel_event: Optional event. When set, the execution stops
                before the next attempt or during the wait.

        Returns:
            The value produced by the first successful attempt.

        Raises:
            RetryExhaustedError: If every attempt failed.
            RetryCancelledError: If ``cancel_event`` was set.
        """
        tracker = AttemptTracker(self.config, self.callbacks, self.decider)
        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise create_cancelled_error(tracker.attempt)
            try:
                result = await self._invoke(func)
            except Exception as exc:
                tracker.record_failure(exc)
            else:
                tracker.record_success()
                return result

            if cancel_event is None:
                await asyncio.sleep(self.config.interval)
            else:
                await self._wait(cancel_event, tracker.attempt)

    async def _invoke(self, func: Callable[[], Any]) -> Any:
        if inspect.iscoroutinefunction(func):
            return await func()
        result = await asyncio.to_thread(func)
        if inspect.isawaitable(result):
            return await result
        return result

    async def _wait(self, cancel_event: asyncio.Event, attempt: int) -> None:
        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=self.config.interval)
        except TimeoutError:
            return
        raise create_cancelled_error(attempt)
