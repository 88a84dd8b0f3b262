r"""Parameter validation utilities for retry policies.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used by the retry
executors.
"""

from __future__ import annotations

__all__ = [
    "validate_callback",
    "validate_exception_kind",
    "validate_interval",
    "validate_max_attempts",
]

import math
import threading
from typing import Any


def validate_max_attempts(max_attempts: int) -> None:
    """Validate the attempt budget.

    Args:
        max_attempts: Total number of attempts, including the first one.
            Must be an integer >= 1.

    Raises:
        TypeError: If max_attempts is not an integer.
        ValueError: If max_attempts is lower than 1.

    Example:
        ```pycon
        >>> from retryit.core.validation import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts(0)
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 1, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an int, got {type(max_attempts).__name__}"
        raise TypeError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)


def validate_interval(interval: float) -> None:
    """Validate the delay between two attempts.

    Args:
        interval: Delay in seconds. Must be a finite number >= 0 and
            not larger than ``threading.TIMEOUT_MAX``.

    Raises:
        TypeError: If interval is not a number.
        ValueError: If interval is negative, not finite, or too large.

    Example:
        ```pycon
        >>> from retryit.core.validation import validate_interval
        >>> validate_interval(2.0)
        >>> validate_interval(0)
        >>> validate_interval(-1.0)
        Traceback (most recent call last):
        ...
        ValueError: interval must be >= 0, got -1.0

        ```
    """
    if isinstance(interval, bool) or not isinstance(interval, (int, float)):
        msg = f"interval must be a number of seconds, got {type(interval).__name__}"
        raise TypeError(msg)
    if not math.isfinite(interval):
        msg = f"interval must be a finite number of seconds, got {interval}"
        raise ValueError(msg)
    if interval < 0:
        msg = f"interval must be >= 0, got {interval}"
        raise ValueError(msg)
    if interval > threading.TIMEOUT_MAX:
        msg = f"interval must be <= {threading.TIMEOUT_MAX}, got {interval}"
        raise ValueError(msg)


def validate_exception_kind(kind: Any) -> None:
    """Validate an exception kind used as filter key.

    Args:
        kind: The exception class to register.

    Raises:
        TypeError: If kind is not a ``BaseException`` subclass.
    """
    if not (isinstance(kind, type) and issubclass(kind, BaseException)):
        msg = f"exception kind must be a BaseException subclass, got {kind!r}"
        raise TypeError(msg)


def validate_callback(name: str, callback: Any) -> None:
    """Validate an optional callback.

    Args:
        name: The parameter name, used in the error message.
        callback: The callback to validate. ``None`` is accepted.

    Raises:
        TypeError: If callback is neither ``None`` nor callable.
    """
    if callback is not None and not callable(callback):
        msg = f"{name} must be callable or None, got {type(callback).__name__}"
        raise TypeError(msg)
