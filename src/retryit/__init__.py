r"""retryit - Fluent retry policies for blocking and async operations.

This package wraps a caller-supplied operation and runs it again when it
fails, according to a configurable policy: maximum number of attempts,
fixed delay between attempts, the exception kinds collected into the
final error, and a callback invoked after every failed attempt.

Example:
    ```pycon
    >>> from retryit import RetryPolicy, RetryExhaustedError
    >>> policy = RetryPolicy.default().with_max_attempts(2).with_interval(0)
    >>> policy.execute(lambda: "done")
    'done'
    >>> try:
    ...     policy.execute(lambda: 1 / 0)
    ... except RetryExhaustedError as exc:
    ...     print(exc.attempts, exc.exceptions)
    ...
    2 ()

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INTERVAL",
    "DEFAULT_MAX_ATTEMPTS",
    "RetryCancelledError",
    "RetryError",
    "RetryExhaustedError",
    "RetryPolicy",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from retryit.config import DEFAULT_INTERVAL, DEFAULT_MAX_ATTEMPTS
from retryit.exceptions import RetryCancelledError, RetryError, RetryExhaustedError
from retryit.policy import RetryPolicy

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
