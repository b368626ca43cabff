"""Core type definitions for browser commands."""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated


class Globals(BaseModel):
    """Host-wide settings shared by every command invocation."""
    wait_for_condition_timeout: Optional[int] = None  # ms, used when a wait gets no explicit timeout
    abort_on_assertion_failure: bool = True

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "Globals":
        """Build globals from the process environment and an optional .env file."""
        from ..core.config import load_globals

        return load_globals(env_file)


class SessionParams(BaseModel):
    """Parameters for BrowserSession."""
    browser: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
    verbose: int = 0
    browser_args: List[str] = Field(default_factory=list)
    viewport_width: int = 1280
    viewport_height: int = 720


class ResolveOptions(BaseModel):
    """How the in-page resolver looks elements up."""
    model_config = ConfigDict(frozen=True)

    use_jquery: bool = True  # falls back to querySelectorAll when the page has no jQuery
    return_all: bool = False  # raw DOM path only; jQuery always yields every match


class Completed(BaseModel):
    """A command that ran to a terminal outcome."""
    status: Literal["completed"] = "completed"
    command: str
    passed: bool
    message: str
    elapsed_ms: Optional[float] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class Rejected(BaseModel):
    """A command that refused to run or could not finish."""
    status: Literal["rejected"] = "rejected"
    command: str
    reason: str


CommandResult = Annotated[Union[Completed, Rejected], Field(discriminator="status")]


class AssertionRecord(BaseModel):
    """A pass/fail outcome recorded for the running test."""
    passed: bool
    actual: str
    expected: str
    message: str
    abort_on_failure: bool = False
    command: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)
