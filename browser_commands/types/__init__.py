"""Type definitions for browser commands."""

from .models import (
    AssertionRecord,
    CommandResult,
    Completed,
    Globals,
    Rejected,
    ResolveOptions,
    SessionParams,
)

__all__ = [
    "AssertionRecord",
    "CommandResult",
    "Completed",
    "Globals",
    "Rejected",
    "ResolveOptions",
    "SessionParams",
]
