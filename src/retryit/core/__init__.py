r"""Core utilities shared by the retry policy and executors."""

from __future__ import annotations

__all__ = [
    "validate_callback",
    "validate_exception_kind",
    "validate_interval",
    "validate_max_attempts",
]

from retryit.core.validation import (
    validate_callback,
    validate_exception_kind,
    validate_interval,
    validate_max_attempts,
)
