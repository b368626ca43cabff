"""Command host: named command registry with a fluent, ordered queue."""

import functools
from typing import Any, Dict, List, Optional, Tuple, Type

from ..commands import DEFAULT_COMMANDS, BaseCommand
from ..commands.base import command_name
from ..types import CommandResult, Globals
from ..utils.logger import CommandLogger, get_logger
from .assertions import AssertionLog
from .errors import ConfigurationError
from .interfaces import AssertionRecorder, BrowserExecutor, TitleProvider


class CommandHost:
    """
    Loads custom commands and runs them against one page.

    Registered commands are exposed as attributes. Calling one queues the
    invocation and returns the host, so calls chain; ``perform()`` then runs
    the queue in order.

    Examples:
        results = await (
            host.jquery_click("#open-menu")
                .wait_for_title(lambda title: title.startswith("Menu"))
                .perform()
        )

        result = await host.run("jquery_click", "button.save")
    """

    def __init__(
        self,
        executor: BrowserExecutor,
        title_provider: TitleProvider,
        assertions: Optional[AssertionRecorder] = None,
        globals_: Optional[Globals] = None,
        logger: Optional[CommandLogger] = None,
        register_defaults: bool = True,
    ):
        self._commands: Dict[str, Tuple[Type[BaseCommand], Dict[str, Any]]] = {}
        self._queue: List[Tuple[str, Tuple[Any, ...], Dict[str, Any]]] = []

        self.logger = (logger or get_logger()).child(component="host")
        self.executor = executor
        self.title_provider = title_provider
        self.assertions = assertions if assertions is not None else AssertionLog(self.logger)
        self.globals = globals_ if globals_ is not None else Globals()

        if register_defaults:
            for command_cls in DEFAULT_COMMANDS:
                self.register(command_cls.name, command_cls)

    def register(
        self,
        name: Optional[str],
        command_cls: Type[BaseCommand],
        **options: Any,
    ) -> 'CommandHost':
        """
        Register a command under ``name``.

        Args:
            name: Attribute the command is exposed as; defaults to ``command_cls.name``
            command_cls: BaseCommand subclass
            **options: Extra keyword arguments for the command's constructor

        Returns:
            The host, for chaining

        Raises:
            ConfigurationError: If ``command_cls`` is not a BaseCommand subclass
        """
        if not (isinstance(command_cls, type) and issubclass(command_cls, BaseCommand)):
            raise ConfigurationError(f"{command_cls!r} is not a BaseCommand subclass")

        name = command_name(command_cls, name)
        if not name.isidentifier() or name.startswith("_"):
            raise ConfigurationError(f"command name {name!r} is not a public identifier")
        if hasattr(type(self), name):
            raise ConfigurationError(f"command name {name!r} shadows a CommandHost attribute")

        if name in self._commands:
            self.logger.warn("host:register", "Replacing registered command", command=name)
        self._commands[name] = (command_cls, options)
        self.logger.debug("host:register", "Command registered", command=name)
        return self

    @property
    def commands(self) -> List[str]:
        return sorted(self._commands)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def __getattr__(self, name: str) -> Any:
        commands = self.__dict__.get("_commands", {})
        if name in commands:
            return functools.partial(self._enqueue, name)
        raise AttributeError(f"{type(self).__name__!r} has no command or attribute {name!r}")

    def _enqueue(self, name: str, *args: Any, **kwargs: Any) -> 'CommandHost':
        self._queue.append((name, args, kwargs))
        return self

    def create(self, name: str) -> BaseCommand:
        """Build a fresh instance of the command registered as ``name``."""
        try:
            command_cls, options = self._commands[name]
        except KeyError:
            raise ConfigurationError(f"no command registered as {name!r}") from None

        return command_cls(
            self.executor,
            self.title_provider,
            self.assertions,
            self.globals,
            self.logger.child(command=name),
            **options,
        )

    async def run(self, name: str, *args: Any, **kwargs: Any) -> CommandResult:
        """Run one command immediately and return its result."""
        command = self.create(name)
        self.logger.debug("host:run", "Running command", command=name)
        result = await command.command(*args, **kwargs)
        self.logger.debug("host:run", "Command finished", command=name, status=result.status)
        return result

    async def perform(self) -> List[CommandResult]:
        """
        Run every queued command in order, one at a time.

        A failed assertion that asks to abort drops the rest of the queue
        when ``Globals.abort_on_assertion_failure`` is set.

        Returns:
            Results of the commands that ran
        """
        queue, self._queue = self._queue, []
        results: List[CommandResult] = []

        for index, (name, args, kwargs) in enumerate(queue):
            recorded_before = len(self.assertions)
            results.append(await self.run(name, *args, **kwargs))

            if not self.globals.abort_on_assertion_failure:
                continue

            aborting = [
                record for record in self.assertions.since(recorded_before)
                if not record.passed and record.abort_on_failure
            ]
            if aborting:
                skipped = [queued[0] for queued in queue[index + 1:]]
                self.logger.warn(
                    "host:perform",
                    "Assertion failed, aborting remaining commands",
                    command=name,
                    assertion_message=aborting[0].message,
                    skipped=skipped,
                )
                break

        return results
