"""Custom exception hierarchy for browser commands."""

from typing import Any, Dict, Optional


class BrowserCommandsError(Exception):
    """Base exception for all browser command errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SessionNotInitializedError(BrowserCommandsError):
    """Raised when a session is used before ``init()``."""

    def __init__(self):
        super().__init__(
            "BrowserSession not initialized. Call init() before using other methods.",
            {"error_code": "NOT_INITIALIZED"}
        )


class BrowserNotAvailableError(BrowserCommandsError):
    """Raised when the browser cannot be launched."""

    def __init__(self, reason: str):
        super().__init__(
            f"Browser not available: {reason}",
            {"reason": reason, "error_code": "BROWSER_NOT_AVAILABLE"}
        )


class InvalidSelectorError(BrowserCommandsError):
    """Raised when a selector argument has an unsupported shape."""

    def __init__(self, selector: Any, reason: str):
        super().__init__(
            f"Invalid selector {selector!r}: {reason}",
            {"selector": repr(selector), "reason": reason, "error_code": "INVALID_SELECTOR"}
        )


class ConfigurationError(BrowserCommandsError):
    """Raised when configuration is invalid."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid configuration: {reason}",
            {"reason": reason, "error_code": "CONFIGURATION_ERROR"}
        )
