"""Run lifecycle and the framework's single error boundary.

A run walks through a fixed sequence of states::

    Init -> ParseCommandLine -> OpenLogFile -> ApplySpecialSwitches
         -> help wanted?  PrintHelp
                   else   PrintLogo -> validate_arguments
                                    -> validate_switch (per switch)
                                    -> run
         -> CleanUp

Architecture notes
------------------
* :meth:`Runner.run` is the **only** place that catches exceptions.
  :class:`~slashapp.exceptions.SlashAppError` is rendered as a clean
  message (exit 254), ``KeyboardInterrupt`` as an abort notice (exit
  130), and any other ``Exception`` with its full traceback (exit 255).
* :class:`~slashapp.exceptions.ConfigurationError` raised during Init
  is never caught: it is a deployment defect, not a runtime condition.
* CleanUp runs on every path, including the error paths.
* At most one runner is active per process.  :meth:`Runner.create` is
  the only constructor and refuses a second concurrent instance.  The
  slot is freed by CleanUp at the end of :meth:`Runner.run`, or by
  :meth:`Runner.close` (also on leaving a ``with`` block) for a runner
  that never runs.
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Sequence
from typing import NoReturn

from slashapp.cli import exit_codes
from slashapp.cli.output import OutputSink
from slashapp.core import dispatch
from slashapp.core import messages as keys
from slashapp.core.messages import DEFAULT_MESSAGES, MessageCatalog
from slashapp.core.models import Color, Parameter, ParsedCommandLine, ShowLevel
from slashapp.core.parser import SWITCH_MARKER, CommandLineParser
from slashapp.core.protocols import Application, MessageProvider, StyledOutput
from slashapp.exceptions import (
    ConfigurationError,
    DuplicateInstanceError,
    LogFileError,
    SlashAppError,
)
from slashapp.infra.logfile import LogFile
from slashapp.infra.rich_output import RichStyledOutput

logger = logging.getLogger(__name__)

_active: Runner | None = None
_CREATE_TOKEN = object()


def current() -> RunContext | None:
    """Return the context of the active run, or ``None``."""
    return _active.context if _active is not None else None


# ---------------------------------------------------------------------------
# Run state handed to application hooks
# ---------------------------------------------------------------------------

class RunContext:
    """State of one run, passed to every application hook.

    Besides the parsed command line it exposes output
    (:meth:`write_line`, :meth:`echo`), message lookup, and the
    validation helpers bound to the run's message catalog.
    """

    def __init__(self, messages: MessageCatalog, sink: OutputSink) -> None:
        self._messages: MessageCatalog | None = messages
        self.sink = sink
        self.command_line = ParsedCommandLine()
        self.help_wanted: bool = False
        self.show_logo: bool = True
        self.logo_shown: bool = False
        self.log_file_path: str | None = None
        self._return_value: int = exit_codes.SUCCESS

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def show_level(self) -> ShowLevel:
        return self.sink.show_level

    @show_level.setter
    def show_level(self, level: ShowLevel) -> None:
        self.sink.show_level = level

    @property
    def return_value(self) -> int:
        """Process exit code of the run (``0..255``)."""
        return self._return_value

    @return_value.setter
    def return_value(self, value: int) -> None:
        if not 0 <= value <= 255:
            raise ValueError(f"return value must be within 0..255, got {value}")
        self._return_value = value

    @property
    def messages(self) -> MessageCatalog:
        if self._messages is None:
            raise RuntimeError("message providers are not bound outside a run")
        return self._messages

    def release_messages(self) -> None:
        self._messages = None

    # ------------------------------------------------------------------
    # Command line access
    # ------------------------------------------------------------------

    def get_arguments(self) -> tuple[str, ...]:
        """Return the positional arguments (empty when none were given)."""
        arguments = self.command_line.arguments
        return tuple(arguments.values) if arguments is not None else ()

    def get_switch(self, name: str) -> tuple[str, ...]:
        """Return the values of the first occurrence of switch *name*.

        ``"/d a b"`` yields ``("a", "b")`` for ``"/d"``.  Unknown
        switches yield an empty tuple.
        """
        for parameter in self.command_line.switches:
            if parameter.name == name:
                return tuple(parameter.values)
        return ()

    def has_switch(self, name: str, ignore_case: bool = True) -> bool:
        """Return whether switch *name* was given (for boolean switches)."""
        if ignore_case:
            wanted = name.casefold()
            return any((p.name or "").casefold() == wanted for p in self.command_line.switches)
        return any(p.name == name for p in self.command_line.switches)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def write_line(
        self,
        level: ShowLevel,
        text: str | None,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> None:
        self.sink.write_line(level, text, foreground, background)

    def echo(self, text: str | None) -> None:
        """Write *text* at ``NORMAL`` level."""
        self.sink.write_line(ShowLevel.NORMAL, text)

    def message(self, key: str, *args: object) -> str:
        """Look up message *key*, formatted with *args* when given."""
        if args:
            return self.messages.format(key, *args)
        return self.messages.get(key)

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    def ensure_count(
        self,
        values: Sequence[str] | None,
        minimum: int,
        maximum: int | None,
        label: str | None = None,
    ) -> None:
        dispatch.ensure_count(values, minimum, maximum, label, messages=self.messages)

    def unknown_switch(self, name: str) -> NoReturn:
        dispatch.unknown_switch(name, messages=self.messages)

    def invalid_arguments(self, message: str) -> NoReturn:
        dispatch.invalid_arguments(message, messages=self.messages)


# ---------------------------------------------------------------------------
# Lifecycle controller
# ---------------------------------------------------------------------------

class Runner:
    """Drive one application through one run.  Create with :meth:`create`."""

    def __init__(
        self,
        application: Application,
        context: RunContext,
        parser: CommandLineParser,
        *,
        _token: object = None,
    ) -> None:
        if _token is not _CREATE_TOKEN:
            raise TypeError("use Runner.create() to construct a runner")
        self.application = application
        self.context = context
        self.parser = parser
        self._primary: MessageProvider | None = context.messages.primary
        self._fallback: MessageProvider = context.messages.fallback
        self._application_switches: list[Parameter] = []
        self._started = False

    @classmethod
    def create(
        cls,
        application: Application,
        *,
        messages: MessageProvider | None = None,
        fallback: MessageProvider = DEFAULT_MESSAGES,
        output: StyledOutput | None = None,
        show_level: ShowLevel = ShowLevel.NORMAL,
        switch_marker: str = SWITCH_MARKER,
    ) -> Runner:
        """Return the process's runner for *application*.

        Raises
        ------
        DuplicateInstanceError
            When another runner is still active in this process.
        """
        global _active
        if _active is not None:
            raise DuplicateInstanceError("another runner is already active in this process")
        catalog = MessageCatalog(messages, fallback)
        sink = OutputSink(output if output is not None else RichStyledOutput(), show_level)
        runner = cls(
            application,
            RunContext(catalog, sink),
            CommandLineParser(catalog, switch_marker=switch_marker),
            _token=_CREATE_TOKEN,
        )
        _active = runner
        return runner

    def close(self) -> None:
        """Give up the process slot without running.

        A closed runner cannot :meth:`run`.  Calling ``close`` again, or
        after a run, does nothing.
        """
        global _active
        self._started = True
        if _active is self:
            _active = None

    def __enter__(self) -> Runner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the application and return the process exit code.

        Parameters
        ----------
        argv:
            Explicit argument list.  When ``None`` (default),
            ``sys.argv[1:]`` is used.
        """
        if self._started:
            raise DuplicateInstanceError("a runner can only run once")
        self._started = True
        tokens = list(sys.argv[1:] if argv is None else argv)
        context = self.context

        try:
            self.init()
        except ConfigurationError:
            self.clean_up()
            raise

        try:
            self._parse_command_line(tokens)
            self._open_log_file()
            self.apply_special_switches()
            if context.help_wanted:
                self.print_help_text()
                context.return_value = exit_codes.HELP_REQUESTED
            else:
                self.print_logo_text()
                logger.debug("state: validate arguments")
                self.application.validate_arguments(context, context.get_arguments())
                self.apply_switches()
                logger.debug("state: process")
                self.application.run(context)
        except SlashAppError as exc:
            self.print_logo_text()
            self.print_exception_hierarchy(_cause_of(exc))
            if exc.message:
                context.write_line(ShowLevel.ERROR, exc.message)
            context.write_line(ShowLevel.WARNING, exc.hint)
            context.write_line(ShowLevel.WARNING, context.message(keys.ERROR))
            context.return_value = exit_codes.HANDLED_ERROR
        except KeyboardInterrupt:
            self.print_logo_text()
            context.write_line(ShowLevel.WARNING, context.message(keys.EX_ABORTED))
            context.return_value = exit_codes.KEYBOARD_INTERRUPT
        except Exception as exc:  # noqa: BLE001
            self.print_logo_text()
            details = "".join(traceback.format_exception(exc)).rstrip()
            context.write_line(ShowLevel.ERROR, f"Exception: {details}")
            context.return_value = exit_codes.UNHANDLED_ERROR
        finally:
            self.clean_up()

        logger.debug("run finished with exit code %d", context.return_value)
        return context.return_value

    # ------------------------------------------------------------------
    # Lifecycle steps
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Bind the message providers and check the required keys resolve."""
        logger.debug("state: init")
        self.context.messages.primary = self._primary
        self.context.messages.fallback = self._fallback
        self.context.messages.verify()

    def _parse_command_line(self, tokens: list[str]) -> None:
        logger.debug("state: parse command line")
        self.context.command_line = self.parser.parse(tokens)
        self.context.log_file_path = self.context.command_line.log_file

    def _open_log_file(self) -> None:
        path = self.context.log_file_path
        if not path:
            return
        try:
            self.context.sink.log_file = LogFile.open(path)
        except (OSError, ValueError) as exc:
            raise LogFileError(
                self.context.message(keys.EX_LOGFILE_COULD_NOT_BE_OPENED, path),
                path=path,
            ) from exc

    def apply_special_switches(self) -> None:
        """Apply the framework switches; keep the rest for :meth:`apply_switches`."""
        logger.debug("state: apply special switches")
        special, self._application_switches = dispatch.partition(
            self.context.command_line.switches
        )
        dispatch.apply_special_switches(self.context, special)

    def apply_switches(self) -> None:
        logger.debug("state: apply switches")
        dispatch.apply_application_switches(
            self.application, self.context, self._application_switches
        )

    def clean_up(self) -> None:
        """Release message providers, close the log file, free the singleton."""
        global _active
        logger.debug("state: clean up")
        context = self.context
        try:
            context.release_messages()
            log_file, context.sink.log_file = context.sink.log_file, None
            if log_file is not None:
                log_file.close()
        finally:
            if _active is self:
                _active = None

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def print_logo_text(self) -> None:
        """Print the logo, at most once per run and only unless ``/nologo``."""
        context = self.context
        if context.logo_shown:
            return
        context.logo_shown = True
        if context.show_logo:
            context.write_line(ShowLevel.IMPORTANT, context.message(keys.LOGO))

    def print_syntax_text(self) -> None:
        self.context.echo(self.context.message(keys.SYNTAX))
        self.context.echo(self.context.message(keys.SYSTEM_PARAMETERS))

    def print_help_text(self) -> None:
        self.print_logo_text()
        self.print_syntax_text()
        self.context.echo(self.context.message(keys.HELP))

    def print_exception_hierarchy(self, exc: BaseException | None) -> None:
        """Print *exc* and its causes, innermost first, at ``ERROR`` level."""
        chain: list[BaseException] = []
        while exc is not None:
            chain.append(exc)
            exc = _cause_of(exc)
        for item in reversed(chain):
            self.context.write_line(ShowLevel.ERROR, f"Exception: {_qualified_name(item)}")
            self.context.write_line(ShowLevel.ERROR, f"  Message: {item}")


# ---------------------------------------------------------------------------
# Convenience entry points
# ---------------------------------------------------------------------------

def run(application: Application, argv: Sequence[str] | None = None, **options: object) -> int:
    """Create a runner for *application*, run it once, return the exit code.

    *options* are forwarded to :meth:`Runner.create`.
    """
    return Runner.create(application, **options).run(argv)  # type: ignore[arg-type]


def cli(application: Application, **options: object) -> NoReturn:
    """Console-script entry point: run with ``sys.argv`` and exit."""
    sys.exit(run(application, None, **options))


# ---------------------------------------------------------------------------
# Utility
# ---------------------------------------------------------------------------

def _cause_of(exc: BaseException) -> BaseException | None:
    """Return the exception *exc* was raised from (explicitly or implicitly)."""
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def _qualified_name(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
