r"""Unit tests for the asynchronous execution of a retry policy."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, Mock, call

import pytest

from retryit import RetryCancelledError, RetryExhaustedError, RetryPolicy
from tests.helpers import AError, BError, CountingOperation


@pytest.mark.asyncio
async def test_execute_async_coroutine_with_result(mock_asleep: AsyncMock) -> None:
    """Test the result-producing suspending shape."""
    func = AsyncMock(side_effect=[AError("a"), {"key": "value"}])

    assert await RetryPolicy.default().execute_async(func) == {"key": "value"}
    mock_asleep.assert_awaited_once_with(2.0)


@pytest.mark.asyncio
async def test_execute_async_coroutine_without_result(mock_asleep: AsyncMock) -> None:
    """Test the no-result suspending shape."""
    calls = []

    async def work() -> None:
        calls.append(1)

    assert await RetryPolicy.default().execute_async(work) is None
    assert calls == [1]


@pytest.mark.asyncio
async def test_execute_async_blocking_callable(mock_asleep: AsyncMock) -> None:
    """Test that a blocking callable is retried from a worker thread."""
    func = CountingOperation([BError("b")], value=3)

    assert await RetryPolicy.default().execute_async(func) == 3
    assert func.calls == 2


@pytest.mark.asyncio
async def test_execute_async_registered_failures_scenario(
    mock_asleep: AsyncMock, mock_callback: Mock
) -> None:
    """Test three registered failures with a budget of three."""
    errors = [AError("1"), AError("2"), AError("3")]
    func = AsyncMock(side_effect=errors)
    policy = RetryPolicy.default().with_caught_exception(AError).on_failure(mock_callback)

    with pytest.raises(RetryExhaustedError) as exc_info:
        await policy.execute_async(func)

    assert func.await_count == 3
    assert exc_info.value.exceptions == tuple(errors)
    assert mock_callback.call_args_list == [call(1, errors[0]), call(2, errors[1]), call(3, errors[2])]


@pytest.mark.asyncio
async def test_execute_async_unregistered_failures_then_success(
    mock_asleep: AsyncMock, mock_callback: Mock
) -> None:
    """Test two unregistered failures followed by a success."""
    errors = [BError("1"), BError("2")]
    func = AsyncMock(side_effect=[*errors, "value"])
    policy = RetryPolicy.default().on_failure(mock_callback)

    assert await policy.execute_async(func) == "value"
    assert func.await_count == 3
    assert mock_callback.call_args_list == [call(1, errors[0]), call(2, errors[1])]


@pytest.mark.asyncio
async def test_execute_async_concurrent_tasks(mock_asleep: AsyncMock) -> None:
    """Test that concurrent tasks sharing a policy keep separate budgets."""
    policy = RetryPolicy.default().with_max_attempts(3)
    ok = AsyncMock(side_effect=[AError("a"), AError("b"), "ok"])
    failing = AsyncMock(side_effect=AError("boom"))

    results = await asyncio.gather(
        policy.execute_async(ok), policy.execute_async(failing), return_exceptions=True
    )

    assert results[0] == "ok"
    assert isinstance(results[1], RetryExhaustedError)
    assert ok.await_count == 3
    assert failing.await_count == 3


@pytest.mark.asyncio
async def test_execute_async_cancel_event() -> None:
    """Test that a set cancel event prevents any attempt."""
    event = asyncio.Event()
    event.set()
    func = AsyncMock()

    with pytest.raises(RetryCancelledError):
        await RetryPolicy.default().execute_async(func, cancel_event=event)
    func.assert_not_called()
