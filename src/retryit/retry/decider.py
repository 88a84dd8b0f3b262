r"""Exception filter logic for collecting attempt failures.

This module provides the ExceptionFilter class that decides whether a
failure belongs to the aggregate error raised once the attempt budget
is exhausted.
"""

from __future__ import annotations

__all__ = ["ExceptionFilter"]

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from retryit.retry.config import ExceptionPredicate

logger: logging.Logger = logging.getLogger(__name__)


class ExceptionFilter:
    """Decides whether a failure is collected into the aggregate error.

    A failure matches when its exact type is a registered kind and the
    kind's predicate is absent or accepts the failure. Subclasses of a
    registered kind do not match unless registered themselves.

    Matching never decides whether an attempt is retried: every failure
    counts against the attempt budget.

    Args:
        filters: Mapping from exception kind to an optional predicate.

    Example:
        ```pycon
        >>> from retryit.retry.decider import ExceptionFilter
        >>> decider = ExceptionFilter({ValueError: lambda exc: "retry" in str(exc)})
        >>> decider.matches(ValueError("please retry"))
        True
        >>> decider.matches(ValueError("fatal"))
        False
        >>> decider.matches(KeyError("missing"))
        False

        ```
    """

    def __init__(self, filters: Mapping[type[BaseException], ExceptionPredicate | None]) -> None:
        self.filters = dict(filters)

    def matches(self, exception: BaseException) -> bool:
        """Determine if a failure matches a registered filter.

        Args:
            exception: The failure to evaluate.

        Returns:
            ``True`` if the failure should be collected, otherwise ``False``.
        """
        kind = type(exception)
        if kind not in self.filters:
            logger.debug(f"{kind.__name__} is not a registered exception kind")
            return False
        predicate = self.filters[kind]
        if predicate is None:
            return True
        return bool(predicate(exception))
