"""Shared fixtures: scripted collaborators and a fake clock."""

from typing import Any, Iterable, List, Optional, Tuple

import pytest

from browser_commands import AssertionLog, CommandHost, Globals, WaitForTitle
from browser_commands.core.interfaces import BrowserExecutor, TitleProvider
from browser_commands.utils.logger import get_logger


class FakeClock:
    """Millisecond clock that only moves when something sleeps or fetches."""

    def __init__(self, start_ms: float = 1000.0):
        self.now = start_ms
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds * 1000


class ScriptedTitles(TitleProvider):
    """Returns the given titles in order, repeating the last one."""

    def __init__(self, titles: Iterable[str], clock: Optional[FakeClock] = None, fetch_ms: float = 0):
        self.titles = list(titles)
        self.clock = clock
        self.fetch_ms = fetch_ms
        self.calls = 0

    async def get_title(self) -> str:
        self.calls += 1
        if self.clock is not None:
            self.clock.now += self.fetch_ms
        return self.titles[min(self.calls, len(self.titles)) - 1]


class RecordingExecutor(BrowserExecutor):
    """Records every script it is asked to run."""

    def __init__(self, result: Any = None, error: Optional[Exception] = None):
        self.result = {"clicked": True, "matched": 1, "jquery": True} if result is None else result
        self.error = error
        self.calls: List[Tuple[str, Any]] = []

    async def execute(self, script: str, arg: Any = None) -> Any:
        self.calls.append((script, arg))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def logger():
    return get_logger(0)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def assertions(logger):
    return AssertionLog(logger)


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def make_host(logger, assertions, clock):
    """Build a CommandHost whose wait command runs on the fake clock."""

    def _make(
        titles: Iterable[str] = ("Untitled",),
        executor: Optional[BrowserExecutor] = None,
        globals_: Optional[Globals] = None,
    ) -> CommandHost:
        host = CommandHost(
            executor or RecordingExecutor(),
            ScriptedTitles(titles, clock),
            assertions=assertions,
            globals_=globals_,
            logger=logger,
        )
        host.register("wait_for_title", WaitForTitle, clock=clock, sleep=clock.sleep)
        return host

    return _make
