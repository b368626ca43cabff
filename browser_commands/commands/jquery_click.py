"""Click an element resolved with a jQuery or CSS selector."""

import inspect
from typing import Any, Callable, Optional

from ..dom.scripts import RESOLVE_AND_CLICK_SCRIPT
from ..dom.selectors import normalize_selector
from ..types import CommandResult, Completed, Rejected, ResolveOptions
from .base import BaseCommand


class JqueryClick(BaseCommand):
    """
    Clicks an element using jQuery selectors.

    Examples:
        browser.jquery_click(".classname:first > input:checked")
        browser.jquery_click("div:has(.classname):contains('something'):last")
        browser.jquery_click([section, section.elements["submit"]])

    A selector that matches nothing is not a failure: the click is skipped
    and the command still completes with ``passed=True``.
    """

    name = "jquery_click"

    async def command(
        self,
        selector: Any,
        callback: Optional[Callable[[bool], Any]] = None,
        options: Optional[ResolveOptions] = None,
    ) -> CommandResult:
        """
        Click the first element matching ``selector``.

        Args:
            selector: A string, a Selector, or a [section, target] pair
            callback: Called with ``True`` once the page round trip is over
            options: Resolver options, defaults to a single jQuery match

        Returns:
            Completed, where ``metadata["clicked"]`` tells whether anything
            matched, or Rejected if the page script failed

        Raises:
            InvalidSelectorError: If the selector has an unsupported shape
        """
        resolved = normalize_selector(selector)
        options = options or ResolveOptions()

        self._log_debug(
            "Resolving selector",
            selector=resolved.describe(),
            kind=resolved.kind,
            use_jquery=options.use_jquery,
        )

        try:
            outcome = await self.executor.execute(
                RESOLVE_AND_CLICK_SCRIPT,
                {"selector": resolved.to_script_arg(), "options": options.model_dump()},
            )
        except Exception as e:
            self._log_error(
                f"Click script failed: {e}",
                selector=resolved.describe(),
                error=str(e),
            )
            await self._notify(callback)
            return Rejected(command=self.name, reason=f"click script failed: {e}")

        metadata = dict(outcome) if isinstance(outcome, dict) else {"clicked": bool(outcome)}
        if metadata.get("clicked"):
            message = f"jquery_click: clicked {resolved.describe()}"
            self._log_info("Element clicked", selector=resolved.describe())
        else:
            message = f"jquery_click: no element matched {resolved.describe()}"
            self._log_debug("No element matched, click skipped", selector=resolved.describe())

        await self._notify(callback)
        return Completed(command=self.name, passed=True, message=message, metadata=metadata)

    async def _notify(self, callback: Optional[Callable[[bool], Any]]) -> None:
        # fires with True after every page round trip, failed or not
        if callback is None:
            return
        returned = callback(True)
        if inspect.isawaitable(returned):
            await returned
