r"""Retry package implementing class-based composition pattern.

Public API:
    - RetryConfig: Configuration for retry behavior
    - CallbackConfig: Configuration for callbacks
    - ExceptionFilter: Logic for collecting failures into the aggregate error
    - CallbackManager: Manager for callback invocations
    - AttemptTracker: Per-call attempt bookkeeping
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptTracker",
    "CallbackConfig",
    "CallbackManager",
    "ExceptionFilter",
    "RetryConfig",
    "RetryExecutor",
]

from retryit.retry.config import CallbackConfig, RetryConfig
from retryit.retry.decider import ExceptionFilter
from retryit.retry.executor import RetryExecutor
from retryit.retry.executor_async import AsyncRetryExecutor
from retryit.retry.executor_core import AttemptTracker
from retryit.retry.manager import CallbackManager
