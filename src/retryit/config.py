r"""Default values for retry policies."""

from __future__ import annotations

__all__ = ["DEFAULT_INTERVAL", "DEFAULT_MAX_ATTEMPTS"]

# Total number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Fixed delay in seconds between a failed attempt and the next one
DEFAULT_INTERVAL = 2.0
