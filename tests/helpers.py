r"""Shared exception kinds and operations for retry tests."""

from __future__ import annotations

__all__ = ["AError", "BError", "CountingOperation"]

from typing import Any


class AError(Exception):
    r"""Exception kind registered in most tests."""


class BError(Exception):
    r"""Exception kind left unregistered in most tests."""


class CountingOperation:
    r"""Operation raising the given outcomes in order, then returning
    ``value``.

    Args:
        outcomes: Exceptions to raise, one per call.
        value: The value returned once the outcomes are consumed.
    """

    def __init__(self, outcomes: list[Exception], value: Any = None) -> None:
        self.outcomes = list(outcomes)
        self.value = value
        self.calls = 0

    def __call__(self) -> Any:
        self.calls += 1
        if self.outcomes:
            raise self.outcomes.pop(0)
        return self.value
