"""Core browser command components."""

from .errors import (
    BrowserCommandsError,
    BrowserNotAvailableError,
    ConfigurationError,
    InvalidSelectorError,
    SessionNotInitializedError,
)
from .interfaces import AssertionRecorder, BrowserExecutor, TitleProvider
from .assertions import AssertionLog
from .config import load_globals
from .host import CommandHost
from .session import BrowserSession, PlaywrightExecutor, PlaywrightTitleProvider

__all__ = [
    # Main classes
    "AssertionLog",
    "BrowserSession",
    "CommandHost",
    "PlaywrightExecutor",
    "PlaywrightTitleProvider",
    "load_globals",
    # Interfaces
    "AssertionRecorder",
    "BrowserExecutor",
    "TitleProvider",
    # Errors
    "BrowserCommandsError",
    "BrowserNotAvailableError",
    "ConfigurationError",
    "InvalidSelectorError",
    "SessionNotInitializedError",
]
