"""
Browser commands - custom commands for Playwright-driven browser tests.

Ships a command host with two commands: ``jquery_click``, which clicks an
element found by a jQuery or CSS selector (optionally scoped to a section),
and ``wait_for_title``, which polls the page title until a checker accepts it.
"""

__version__ = "0.1.0"

from .core import (
    AssertionLog,
    BrowserCommandsError,
    BrowserNotAvailableError,
    BrowserSession,
    CommandHost,
    ConfigurationError,
    InvalidSelectorError,
    SessionNotInitializedError,
    load_globals,
)

from .commands import BaseCommand, JqueryClick, WaitForTitle

from .dom import ScopedSelector, Selector, SimpleSelector, normalize_selector

from .types import (
    AssertionRecord,
    CommandResult,
    Completed,
    Globals,
    Rejected,
    ResolveOptions,
)

__all__ = [
    # Version
    "__version__",
    # Main classes
    "BrowserSession",
    "CommandHost",
    "AssertionLog",
    "load_globals",
    # Commands
    "BaseCommand",
    "JqueryClick",
    "WaitForTitle",
    # Selectors
    "ScopedSelector",
    "Selector",
    "SimpleSelector",
    "normalize_selector",
    # Common types
    "AssertionRecord",
    "CommandResult",
    "Completed",
    "Globals",
    "Rejected",
    "ResolveOptions",
    # Common errors
    "BrowserCommandsError",
    "BrowserNotAvailableError",
    "ConfigurationError",
    "InvalidSelectorError",
    "SessionNotInitializedError",
]
