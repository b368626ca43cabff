"""Wait until the page title satisfies a checker."""

import asyncio
import inspect
import time
from typing import Any, Awaitable, Callable, Optional, Tuple, Union

from ..types import CommandResult, Completed, Rejected
from .base import BaseCommand

Checker = Callable[[str], Union[bool, Awaitable[bool]]]


def _now_ms() -> float:
    return time.monotonic() * 1000


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class WaitForTitle(BaseCommand):
    """
    Waits until the page title matches the provided checker.

    The checker is retried every 100 ms until it returns true or the timeout
    runs out, which records a failed assertion.

    Examples:
        browser.wait_for_title(lambda title: title == "something")
        browser.wait_for_title(lambda title: "Dashboard" in title, 2000, "dashboard loaded")
    """

    name = "wait_for_title"
    retry_interval_ms = 100
    default_timeout_ms = 5000

    def __init__(
        self,
        *args: Any,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self._clock = clock or _now_ms
        self._sleep = sleep or asyncio.sleep
        self.start_time_ms: Optional[float] = None

    def _resolve_timeout(self, timeout_ms: Any) -> float:
        if _is_number(timeout_ms):
            return timeout_ms
        if _is_number(self.globals.wait_for_condition_timeout):
            return self.globals.wait_for_condition_timeout
        return self.default_timeout_ms

    async def command(
        self,
        checker: Checker,
        timeout_ms: Optional[float] = None,
        default_message: Optional[str] = None,
    ) -> CommandResult:
        """
        Poll the title until ``checker`` accepts it or ``timeout_ms`` elapses.

        Args:
            checker: Returns true when the title is the one being waited for
            timeout_ms: Timeout in ms, defaults to the globals, then 5000
            default_message: Message recorded instead of the generated one

        Returns:
            Completed with the assertion outcome, or Rejected if the
            arguments were invalid or the check raised
        """
        self.start_time_ms = self._clock()
        timeout = self._resolve_timeout(timeout_ms)

        if default_message and not isinstance(default_message, str):
            reason = "defaultMessage is not a string"
            self._log_error(reason, message_type=type(default_message).__name__)
            return Rejected(command=self.name, reason=reason)

        try:
            passed, loaded_time_ms = await self._check(checker, timeout)
        except Exception as e:
            self._log_error(f"Title check raised: {e}", error=str(e))
            return Rejected(command=self.name, reason=f"title check raised: {e}")

        elapsed_ms = loaded_time_ms - self.start_time_ms
        if default_message:
            message = default_message
        elif passed:
            message = f"{self.name}: Expression was true after {elapsed_ms:.0f} ms."
        else:
            message = f"{self.name}: title. Expression wasn't true in {timeout:.0f} ms."

        self.assertions.assertion(
            passed, "expression false", "expression true", message, True, command=self.name
        )
        self._log_debug("Wait finished", passed=passed, elapsed_ms=elapsed_ms, timeout_ms=timeout)

        return Completed(
            command=self.name,
            passed=passed,
            message=message,
            elapsed_ms=elapsed_ms,
            metadata={"timeout_ms": timeout},
        )

    async def _check(self, checker: Checker, max_time_ms: float) -> Tuple[bool, float]:
        while True:
            title = await self.title_provider.get_title()
            now = self._clock()

            result = checker(title)
            if inspect.isawaitable(result):
                result = await result

            if result:
                return True, now
            if now - self.start_time_ms >= max_time_ms:
                return False, now

            self._log_debug("Title not matched yet, retrying", title=title)
            await self._sleep(self.retry_interval_ms / 1000)
