"""Base class for all custom commands."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..core.interfaces import AssertionRecorder, BrowserExecutor, TitleProvider
from ..types import CommandResult, Globals
from ..utils.logger import CommandLogger


class BaseCommand(ABC):
    """
    Abstract base class for commands registered with a ``CommandHost``.

    A command instance serves exactly one invocation; the host builds a new
    one every time the command runs.
    """

    name: str = ""

    def __init__(
        self,
        executor: BrowserExecutor,
        title_provider: TitleProvider,
        assertions: AssertionRecorder,
        globals_: Globals,
        logger: CommandLogger,
    ):
        """
        Initialize base command.

        Args:
            executor: Runs scripts inside the page
            title_provider: Reads the page title
            assertions: Records pass/fail outcomes
            globals_: Host-wide settings
            logger: Logger instance
        """
        self.executor = executor
        self.title_provider = title_provider
        self.assertions = assertions
        self.globals = globals_
        self.logger = logger

    @abstractmethod
    async def command(self, *args: Any, **kwargs: Any) -> CommandResult:
        """
        Run the command.

        Returns:
            Completed or Rejected
        """
        pass

    def _log_debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message with command context."""
        self.logger.debug(f"command:{self.__class__.__name__}", message, **kwargs)

    def _log_info(self, message: str, **kwargs: Any) -> None:
        """Log info message with command context."""
        self.logger.info(f"command:{self.__class__.__name__}", message, **kwargs)

    def _log_warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message with command context."""
        self.logger.warn(f"command:{self.__class__.__name__}", message, **kwargs)

    def _log_error(self, message: str, **kwargs: Any) -> None:
        """Log error message with command context."""
        self.logger.error(f"command:{self.__class__.__name__}", message, **kwargs)


def command_name(command_cls: type, fallback: Optional[str] = None) -> str:
    """Name a command class is registered under when none is given."""
    return fallback or command_cls.name or command_cls.__name__
