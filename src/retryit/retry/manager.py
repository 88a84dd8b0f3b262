r"""Callback manager for retry lifecycle events."""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from retryit.retry.config import CallbackConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attributes:
        callbacks: Configuration containing the callback functions.
    """

    def __init__(self, callbacks: CallbackConfig) -> None:
        self.callbacks = callbacks

    def on_failure(self, attempt: int, error: Exception) -> None:
        """Invoke the on_failure callback if one is set.

        Args:
            attempt: The number of the failed attempt (1-indexed).
            error: The exception raised by the attempt.
        """
        if self.callbacks.on_failure is not None:
            self.callbacks.on_failure(attempt, error)
