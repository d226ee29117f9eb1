"""slashapp: a base layer for ``/switch`` style command-line applications.

Parses the argument vector into positional arguments and switches,
handles help/verbosity/logo switches, dispatches the rest to the
application, prints leveled colored output, and maps every outcome to
a process exit code.
"""

import logging

from slashapp.cli.runner import RunContext, Runner, cli, current, run
from slashapp.core.messages import DEFAULT_MESSAGES, MappingMessageProvider
from slashapp.core.models import Color, ShowLevel
from slashapp.core.protocols import Application, MessageProvider
from slashapp.exceptions import ConfigurationError, ErrorKind, SlashAppError
from slashapp.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "DEFAULT_MESSAGES",
    "Application",
    "Color",
    "ConfigurationError",
    "ErrorKind",
    "MappingMessageProvider",
    "MessageProvider",
    "RunContext",
    "Runner",
    "ShowLevel",
    "SlashAppError",
    "__version__",
    "cli",
    "current",
    "run",
]
