from __future__ import annotations

import math
import threading

import pytest

from retryit.core import (
    validate_callback,
    validate_exception_kind,
    validate_interval,
    validate_max_attempts,
)

###########################################
#     Tests for validate_max_attempts     #
###########################################


@pytest.mark.parametrize("max_attempts", [1, 3, 10, 1000])
def test_validate_max_attempts_accepts_valid_values(max_attempts: int) -> None:
    """Test that validate_max_attempts accepts positive integers."""
    validate_max_attempts(max_attempts)


@pytest.mark.parametrize("max_attempts", [0, -1, -10])
def test_validate_max_attempts_rejects_non_positive(max_attempts: int) -> None:
    """Test that validate_max_attempts rejects values lower than 1."""
    with pytest.raises(ValueError, match=rf"max_attempts must be >= 1, got {max_attempts}"):
        validate_max_attempts(max_attempts)


@pytest.mark.parametrize("max_attempts", [1.5, "3", None, True])
def test_validate_max_attempts_rejects_non_int(max_attempts: object) -> None:
    """Test that validate_max_attempts rejects non-integer values."""
    with pytest.raises(TypeError, match=r"max_attempts must be an int"):
        validate_max_attempts(max_attempts)


#######################################
#     Tests for validate_interval     #
#######################################


@pytest.mark.parametrize("interval", [0, 0.0, 0.5, 2, 30.0])
def test_validate_interval_accepts_valid_values(interval: float) -> None:
    """Test that validate_interval accepts non-negative numbers."""
    validate_interval(interval)


def test_validate_interval_rejects_negative() -> None:
    """Test that validate_interval rejects negative values."""
    with pytest.raises(ValueError, match=r"interval must be >= 0, got -0.5"):
        validate_interval(-0.5)


@pytest.mark.parametrize("interval", [math.nan, math.inf, -math.inf])
def test_validate_interval_rejects_non_finite(interval: float) -> None:
    """Test that validate_interval rejects nan and infinite values."""
    with pytest.raises(ValueError, match=r"interval must be a finite number of seconds"):
        validate_interval(interval)


def test_validate_interval_rejects_too_large() -> None:
    """Test that validate_interval rejects values no sleep can wait for."""
    with pytest.raises(ValueError, match=r"interval must be <= "):
        validate_interval(threading.TIMEOUT_MAX * 2)


def test_validate_interval_accepts_timeout_max() -> None:
    """Test that validate_interval accepts the largest supported wait."""
    validate_interval(threading.TIMEOUT_MAX)


@pytest.mark.parametrize("interval", ["2", None, False])
def test_validate_interval_rejects_non_number(interval: object) -> None:
    """Test that validate_interval rejects non-numeric values."""
    with pytest.raises(TypeError, match=r"interval must be a number of seconds"):
        validate_interval(interval)


#############################################
#     Tests for validate_exception_kind     #
#############################################


@pytest.mark.parametrize("kind", [Exception, ValueError, ExceptionGroup, KeyboardInterrupt])
def test_validate_exception_kind_accepts_exception_classes(kind: type) -> None:
    """Test that validate_exception_kind accepts exception classes."""
    validate_exception_kind(kind)


@pytest.mark.parametrize("kind", [ValueError("x"), int, "ValueError", None])
def test_validate_exception_kind_rejects_other_values(kind: object) -> None:
    """Test that validate_exception_kind rejects non exception classes."""
    with pytest.raises(TypeError, match=r"exception kind must be a BaseException subclass"):
        validate_exception_kind(kind)


#######################################
#     Tests for validate_callback     #
#######################################


def test_validate_callback_accepts_none_and_callables() -> None:
    """Test that validate_callback accepts None and callables."""
    validate_callback("on_failure", None)
    validate_callback("on_failure", print)
    validate_callback("on_failure", lambda attempt, exc: None)


def test_validate_callback_rejects_non_callable() -> None:
    """Test that validate_callback rejects non-callable values."""
    with pytest.raises(TypeError, match=r"on_failure must be callable or None, got int"):
        validate_callback("on_failure", 42)
