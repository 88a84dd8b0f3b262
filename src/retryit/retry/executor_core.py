r"""Shared core logic for retry executors.

This module provides the per-call bookkeeping used by both the
synchronous and asynchronous retry executors: attempt counting, failure
callback invocation, failure collection and budget exhaustion.
"""

from __future__ import annotations

__all__ = ["AttemptTracker", "create_cancelled_error"]

import logging
from typing import TYPE_CHECKING

from retryit.exceptions import RetryCancelledError, RetryExhaustedError

if TYPE_CHECKING:
    from retryit.retry.config import RetryConfig
    from retryit.retry.decider import ExceptionFilter
    from retryit.retry.manager import CallbackManager

logger: logging.Logger = logging.getLogger(__name__)


class AttemptTracker:
    """Tracks the attempts of a single execution call.

    Each execution owns its own tracker, so a policy can be executed
    several times, and concurrently, without sharing any counter.

    Args:
        config: The retry configuration of the execution.
        callbacks: Manager used to report failed attempts.
        decider: Filter selecting which failures are collected.

    Attributes:
        attempt: Number of failed attempts so far.
        failures: Collected failures, in the order they occurred.

    Example:
        ```pycon
        >>> from retryit.retry.config import CallbackConfig, RetryConfig
        >>> from retryit.retry.decider import ExceptionFilter
        >>> from retryit.retry.executor_core import AttemptTracker
        >>> from retryit.retry.manager import CallbackManager
        >>> config = RetryConfig(max_attempts=2, interval=0.0)
        >>> tracker = AttemptTracker(
        ...     config, CallbackManager(CallbackConfig()), ExceptionFilter(config.exception_filters)
        ... )
        >>> tracker.record_failure(Exception("boom"))
        >>> tracker.remaining
        1

        ```
    """

    def __init__(
        self,
        config: RetryConfig,
        callbacks: CallbackManager,
        decider: ExceptionFilter,
    ) -> None:
        self.config = config
        self.callbacks = callbacks
        self.decider = decider
        self.attempt = 0
        self.failures: list[Exception] = []

    @property
    def remaining(self) -> int:
        """The number of attempts left in the budget."""
        return self.config.max_attempts - self.attempt

    def record_failure(self, error: Exception) -> None:
        """Record a failed attempt.

        The failure callback is always invoked, then the failure is
        collected if it matches a registered filter. Once the budget is
        consumed, the aggregate error is raised.

        Args:
            error: The exception raised by the attempt.

        Raises:
            RetryExhaustedError: If no attempt is left. The last failure
                is chained as the cause.
        """
        self.attempt += 1
        logger.debug(
            f"Attempt {self.attempt}/{self.config.max_attempts} failed with "
            f"{type(error).__name__}: {error}"
        )
        self.callbacks.on_failure(self.attempt, error)
        if self.decider.matches(error):
            self.failures.append(error)
        if self.remaining <= 0:
            logger.debug(
                f"Giving up after {self.attempt} attempts "
                f"({len(self.failures)} caught exceptions)"
            )
            raise RetryExhaustedError(
                self.failures, attempts=self.attempt, last_exception=error
            ) from error
        logger.debug(f"Waiting {self.config.interval:.2f}s before attempt {self.attempt + 1}")

    def record_success(self) -> None:
        """Record the successful attempt."""
        if self.attempt > 0:
            logger.debug(f"Operation succeeded on attempt {self.attempt + 1}")


def create_cancelled_error(attempt: int) -> RetryCancelledError:
    """Log the cancellation and create the matching error.

    Args:
        attempt: Number of attempts made before cancellation.

    Returns:
        The error to raise.
    """
    logger.debug(f"Retry cancelled after {attempt} attempts")
    return RetryCancelledError(attempt)
