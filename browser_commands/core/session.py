"""Playwright-backed browser session that hosts the commands."""

import uuid
from typing import Any, List, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright
from pydantic import ValidationError

from ..types import Globals, SessionParams
from ..utils.logger import CommandLogger, configure_logging, get_logger
from .assertions import AssertionLog
from .errors import BrowserNotAvailableError, ConfigurationError, SessionNotInitializedError
from .host import CommandHost
from .interfaces import BrowserExecutor, TitleProvider


class PlaywrightExecutor(BrowserExecutor):
    """Evaluates scripts through ``Page.evaluate``."""

    def __init__(self, page: Page):
        self._page = page

    async def execute(self, script: str, arg: Any = None) -> Any:
        return await self._page.evaluate(script, arg)


class PlaywrightTitleProvider(TitleProvider):
    """Reads the title through ``Page.title``."""

    def __init__(self, page: Page):
        self._page = page

    async def get_title(self) -> str:
        return await self._page.title()


class BrowserSession:
    """
    Launches a browser and exposes a ``CommandHost`` bound to its page.

    Examples:
        async with BrowserSession(headless=True) as session:
            await session.page.goto("https://example.com")
            await session.host.run("wait_for_title", lambda title: "Example" in title)
    """

    def __init__(
        self,
        browser: str = "chromium",
        headless: bool = True,
        verbose: int = 0,
        browser_args: Optional[List[str]] = None,
        globals_: Optional[Globals] = None,
        **kwargs: Any,
    ):
        """
        Initialize the session configuration. Nothing is launched until ``init()``.

        Args:
            browser: Browser type ("chromium", "firefox", "webkit")
            headless: Run browser in headless mode
            verbose: Logging verbosity (0-3)
            browser_args: Additional browser arguments
            globals_: Host-wide settings handed to every command
            **kwargs: Extra SessionParams fields (viewport size)
        """
        try:
            self.config = SessionParams(
                browser=browser,  # type: ignore
                headless=headless,
                verbose=verbose,
                browser_args=browser_args or [],
                **kwargs,
            )
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

        self.globals = globals_ if globals_ is not None else Globals()
        configure_logging(verbose)
        self.logger: CommandLogger = get_logger(verbose, component="session")
        self.session_id = str(uuid.uuid4())

        self.initialized = False
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self._host: Optional[CommandHost] = None

    async def init(self) -> 'BrowserSession':
        """
        Launch the browser and open a page.

        Raises:
            BrowserNotAvailableError: If the browser fails to start
        """
        if self.initialized:
            self.logger.warn("session:init", "Already initialized")
            return self

        try:
            self.playwright = await async_playwright().start()
            browser_type = getattr(self.playwright, self.config.browser)
            self.browser = await browser_type.launch(
                headless=self.config.headless,
                args=list(self.config.browser_args),
            )
            self.context = await self.browser.new_context(
                viewport={"width": self.config.viewport_width, "height": self.config.viewport_height},
            )
            self._page = await self.context.new_page()
        except Exception as e:
            self.logger.error("session:init", f"Initialization failed: {e}", error=str(e))
            try:
                await self.close()
            except Exception as close_error:
                self.logger.warn(
                    "session:init",
                    "Cleanup after failed launch also failed",
                    error=str(close_error),
                )
            raise BrowserNotAvailableError(str(e)) from e

        self._host = CommandHost(
            PlaywrightExecutor(self._page),
            PlaywrightTitleProvider(self._page),
            assertions=AssertionLog(self.logger),
            globals_=self.globals,
            logger=self.logger,
        )
        self.initialized = True

        self.logger.info(
            "session:init",
            "Session started",
            browser=self.config.browser,
            headless=self.config.headless,
            session_id=self.session_id,
        )
        return self

    @property
    def page(self) -> Page:
        if not self.initialized or self._page is None:
            raise SessionNotInitializedError()
        return self._page

    @property
    def host(self) -> CommandHost:
        if not self.initialized or self._host is None:
            raise SessionNotInitializedError()
        return self._host

    async def close(self) -> None:
        """
        Release the context, browser and Playwright driver.

        Every step runs even if an earlier one raises; a failure still
        propagates once all of them have been attempted.
        """
        context, browser, playwright = self.context, self.browser, self.playwright
        self.context = None
        self.browser = None
        self.playwright = None
        self._page = None
        self._host = None
        self.initialized = False

        try:
            if context:
                await context.close()
        finally:
            try:
                if browser:
                    await browser.close()
            finally:
                if playwright:
                    await playwright.stop()

        self.logger.info("session:close", "Session closed", session_id=self.session_id)

    async def __aenter__(self) -> 'BrowserSession':
        return await self.init()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
