"""Tests for the wait_for_title command."""

import time
from unittest.mock import AsyncMock

import pytest

from browser_commands import Completed, Globals, Rejected, WaitForTitle
from conftest import ScriptedTitles


@pytest.mark.asyncio
async def test_true_on_first_read_passes_immediately(make_host, assertions, clock):
    host = make_host(titles=["Dashboard"])

    result = await host.run("wait_for_title", lambda title: title == "Dashboard")

    assert isinstance(result, Completed)
    assert result.passed is True
    assert result.elapsed_ms == 0
    assert result.message == "wait_for_title: Expression was true after 0 ms."
    assert host.title_provider.calls == 1
    assert clock.sleeps == []

    [record] = assertions.records
    assert record.passed is True
    assert record.actual == "expression false"
    assert record.expected == "expression true"
    assert record.abort_on_failure is True
    assert record.command == "wait_for_title"


@pytest.mark.asyncio
async def test_retries_every_100ms_until_match(make_host, clock):
    host = make_host(titles=["Loading", "Loading", "Ready"])

    result = await host.run("wait_for_title", lambda title: title == "Ready", 2000)

    assert result.passed is True
    assert result.elapsed_ms == 200
    assert host.title_provider.calls == 3
    assert clock.sleeps == [0.1, 0.1]


@pytest.mark.asyncio
async def test_never_true_times_out_with_failed_assertion(make_host, assertions):
    host = make_host(titles=["Loading"])

    result = await host.run("wait_for_title", lambda title: False, 1000)

    assert isinstance(result, Completed)
    assert result.passed is False
    assert 1000 <= result.elapsed_ms <= 1000 + WaitForTitle.retry_interval_ms
    assert result.message == "wait_for_title: title. Expression wasn't true in 1000 ms."
    # polls at 0, 100, ..., 1000
    assert host.title_provider.calls == 11

    [record] = assertions.failed
    assert record.message == result.message


@pytest.mark.asyncio
async def test_timeout_measured_from_original_start(make_host, clock):
    host = make_host(titles=["Loading"])
    host.title_provider.fetch_ms = 250

    result = await host.run("wait_for_title", lambda title: False, 1000)

    # each poll costs 250 ms of fetch plus 100 ms of sleep: 250, 600, 950, 1300
    assert result.passed is False
    assert result.elapsed_ms == 1300
    assert host.title_provider.calls == 4


@pytest.mark.asyncio
async def test_custom_message_takes_precedence(make_host, assertions):
    host = make_host(titles=["Home"])

    passed = await host.run("wait_for_title", lambda title: True, 500, "home page shown")
    failed = await host.run("wait_for_title", lambda title: False, 500, "never shown")

    assert passed.message == "home page shown"
    assert failed.message == "never shown"
    assert [record.message for record in assertions.records] == ["home page shown", "never shown"]


@pytest.mark.asyncio
async def test_non_string_message_is_rejected_without_polling(make_host, assertions):
    host = make_host(titles=["Home"])
    checker = AsyncMock(return_value=True)

    result = await host.run("wait_for_title", checker, 1000, 42)

    assert isinstance(result, Rejected)
    assert result.reason == "defaultMessage is not a string"
    assert host.title_provider.calls == 0
    checker.assert_not_called()
    assert len(assertions) == 0


@pytest.mark.asyncio
async def test_falsy_non_string_message_falls_back_to_generated(make_host):
    host = make_host(titles=["Home"])

    result = await host.run("wait_for_title", lambda title: True, 1000, 0)

    assert isinstance(result, Completed)
    assert result.message.startswith("wait_for_title: Expression was true after")


@pytest.mark.asyncio
async def test_timeout_falls_back_to_globals(make_host):
    host = make_host(titles=["Loading"], globals_=Globals(wait_for_condition_timeout=300))

    result = await host.run("wait_for_title", lambda title: False)

    assert result.elapsed_ms == 300
    assert result.metadata["timeout_ms"] == 300
    assert host.title_provider.calls == 4


@pytest.mark.asyncio
async def test_timeout_defaults_to_5000(make_host):
    host = make_host(titles=["Loading"])

    result = await host.run("wait_for_title", lambda title: False)

    assert result.elapsed_ms == 5000
    assert result.message == "wait_for_title: title. Expression wasn't true in 5000 ms."


@pytest.mark.asyncio
async def test_boolean_timeout_is_not_a_number(make_host):
    host = make_host(titles=["Loading"], globals_=Globals(wait_for_condition_timeout=200))

    result = await host.run("wait_for_title", lambda title: False, True)

    assert result.metadata["timeout_ms"] == 200


@pytest.mark.asyncio
async def test_async_checker_is_awaited(make_host):
    host = make_host(titles=["Loading", "Done"])

    async def checker(title):
        return title == "Done"

    result = await host.run("wait_for_title", checker, 1000)

    assert result.passed is True
    assert host.title_provider.calls == 2


@pytest.mark.asyncio
async def test_checker_error_rejects_without_assertion(make_host, assertions):
    host = make_host(titles=["Home"])

    def checker(title):
        raise ValueError("bad checker")

    result = await host.run("wait_for_title", checker, 1000)

    assert isinstance(result, Rejected)
    assert "bad checker" in result.reason
    assert len(assertions) == 0


@pytest.mark.asyncio
async def test_consecutive_waits_are_independent(make_host, assertions, clock):
    host = make_host(titles=["Loading"])

    first = host.create("wait_for_title")
    first_result = await first.command(lambda title: False, 300)
    second = host.create("wait_for_title")
    second_result = await second.command(lambda title: True, 300)

    assert first is not second
    assert second.start_time_ms == first.start_time_ms + 300
    assert first_result.passed is False
    assert second_result.passed is True
    assert second_result.elapsed_ms == 0
    assert [record.passed for record in assertions.records] == [False, True]


@pytest.mark.asyncio
async def test_real_clock_stays_within_one_retry_of_timeout(logger, assertions):
    command = WaitForTitle(
        AsyncMock(),
        ScriptedTitles(["Loading"]),
        assertions,
        Globals(),
        logger,
    )

    started = time.monotonic()
    result = await command.command(lambda title: False, 250)
    waited_ms = (time.monotonic() - started) * 1000

    assert result.passed is False
    assert result.elapsed_ms >= 250
    assert waited_ms >= 250
    assert waited_ms < 250 + WaitForTitle.retry_interval_ms + 250
