"""structlog setup and the category logger commands log through."""

import logging
import os
import sys
from typing import Any, Dict, List

import structlog

LOGGER_NAME = "browser_commands"

# verbosity -> lowest level that gets through
_VERBOSITY: Dict[int, int] = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}

_configured = False


def _level_for(verbose: int) -> int:
    return _VERBOSITY[max(0, min(verbose, 3))]


def configure_logging(verbose: int = 0) -> None:
    """
    Set up structlog and the stdlib handler once, then apply ``verbose``.

    Later calls only change the root level, so the most recent session's
    verbosity is the one in effect.

    Args:
        verbose: Verbosity level (0-3)
    """
    global _configured

    if not _configured:
        processors: List[Any] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]
        if sys.stderr.isatty() and os.getenv("NO_COLOR") is None:
            processors.append(structlog.dev.ConsoleRenderer())
        else:
            processors.append(structlog.processors.JSONRenderer())

        structlog.configure(
            processors=processors,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", stream=sys.stderr)
        _configured = True

    logging.getLogger().setLevel(_level_for(verbose))


class CommandLogger:
    """Bound structlog logger that tags every line with a category."""

    def __init__(self, logger: Any, verbose: int = 0):
        self.logger = logger
        self.verbose = verbose

    def _emit(self, level: int, category: str, message: str, fields: Dict[str, Any]) -> None:
        if level < _level_for(self.verbose):
            return
        method = logging.getLevelName(level).lower()
        getattr(self.logger, method)(message, category=category, **fields)

    def error(self, category: str, message: str, **kwargs: Any) -> None:
        self._emit(logging.ERROR, category, message, kwargs)

    def warn(self, category: str, message: str, **kwargs: Any) -> None:
        self._emit(logging.WARNING, category, message, kwargs)

    def info(self, category: str, message: str, **kwargs: Any) -> None:
        self._emit(logging.INFO, category, message, kwargs)

    def debug(self, category: str, message: str, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, category, message, kwargs)

    def child(self, **bindings: Any) -> 'CommandLogger':
        """Create a child logger with additional context."""
        return CommandLogger(self.logger.bind(**bindings), self.verbose)


def get_logger(verbose: int = 0, **bindings: Any) -> CommandLogger:
    """
    Return a ``CommandLogger`` for the package.

    Configures logging with ``verbose`` only if nothing has configured it
    yet; an existing configuration is left alone.
    """
    if not _configured:
        configure_logging(verbose)
    return CommandLogger(structlog.get_logger(LOGGER_NAME).bind(**bindings), verbose)
