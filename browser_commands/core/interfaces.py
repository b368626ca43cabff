"""Collaborators a command needs from the host."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..types import AssertionRecord


class BrowserExecutor(ABC):
    """Runs a script inside the page and returns its serializable result."""

    @abstractmethod
    async def execute(self, script: str, arg: Any = None) -> Any:
        """
        Evaluate ``script`` in the page.

        Args:
            script: JavaScript function source taking one argument
            arg: Serializable argument passed to the function

        Returns:
            The function's return value
        """


class TitleProvider(ABC):
    """Reads the current page title."""

    @abstractmethod
    async def get_title(self) -> str:
        pass


class AssertionRecorder(ABC):
    """Receives pass/fail outcomes for the running test."""

    @property
    @abstractmethod
    def records(self) -> List[AssertionRecord]:
        """Every recorded assertion, oldest first."""

    def __len__(self) -> int:
        return len(self.records)

    def since(self, index: int) -> List[AssertionRecord]:
        """Records added after the recorder held ``index`` entries."""
        return self.records[index:]

    @abstractmethod
    def assertion(
        self,
        passed: bool,
        actual: str,
        expected: str,
        message: str,
        abort_on_failure: bool = False,
        command: Optional[str] = None,
    ) -> AssertionRecord:
        pass
