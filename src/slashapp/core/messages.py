"""Message keys, the default catalog, and lookup with fallback.

Applications supply their own :class:`~slashapp.core.protocols.MessageProvider`
(at minimum a ``Logo``, ``Syntax`` and ``Help`` text).  Every key the
application does not define is served from :data:`DEFAULT_MESSAGES`.
Texts use :meth:`str.format` positional placeholders (``{0}``, ``{1}``).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from slashapp.core.protocols import MessageProvider
from slashapp.exceptions import MissingMessageError


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------

LOGO: Final = "Logo"
SYNTAX: Final = "Syntax"
SYSTEM_PARAMETERS: Final = "SystemParameters"
HELP: Final = "Help"
ERROR: Final = "Error"

EX_COULD_NOT_READ_PARAMETER_FILE: Final = "Ex.CouldNotReadParameterFile"
EX_PARAMETER_FILE_CYCLE: Final = "Ex.ParameterFileCycle"
EX_INVALID_ARGUMENTS_NULL: Final = "Ex.InvalidArgumentsNull"
EX_INVALID_ARGUMENTS_MIN: Final = "Ex.InvalidArgumentsMin"
EX_INVALID_ARGUMENTS_MAX: Final = "Ex.InvalidArgumentsMax"
EX_UNKNOWN_SWITCH: Final = "Ex.UnknownSwitch"
EX_INVALID_ARGUMENTS: Final = "Ex.InvalidArguments"
EX_LOGFILE_COULD_NOT_BE_OPENED: Final = "Ex.LogfileCouldNotBeOpened"
EX_ABORTED: Final = "Ex.Aborted"
HINT_UNKNOWN_SWITCH: Final = "Hint.UnknownSwitch"

REQUIRED_KEYS: Final = (LOGO,)
"""Keys that must resolve before a run may start."""


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------

class MappingMessageProvider:
    """A :class:`MessageProvider` backed by a read-only mapping."""

    def __init__(self, messages: Mapping[str, str]) -> None:
        self._messages = MappingProxyType(dict(messages))

    def get(self, key: str) -> str | None:
        return self._messages.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._messages)} messages)"


DEFAULT_MESSAGES: Final = MappingMessageProvider(
    {
        LOGO: "slashapp console application",
        SYNTAX: "Syntax: <application> [arguments] [/switch [values]]...",
        SYSTEM_PARAMETERS: "\n".join(
            (
                "System switches:",
                "  /? /h /help    show this help",
                "  /v /verbose    verbose output",
                "  /q /quiet      show warnings and errors only",
                "  /nologo        suppress the logo",
                "  @<file>        read further arguments from <file>",
                "  !<file>        append all output to <file>",
            )
        ),
        HELP: "No further help available.",
        ERROR: "Processing stopped because of the error above.",
        EX_COULD_NOT_READ_PARAMETER_FILE: "Could not read parameter file '{0}'.",
        EX_PARAMETER_FILE_CYCLE: "Parameter file '{0}' includes itself.",
        EX_INVALID_ARGUMENTS_NULL: "No {0} given.",
        EX_INVALID_ARGUMENTS_MIN: "Too few {0}: at least {1} expected.",
        EX_INVALID_ARGUMENTS_MAX: "Too many {0}: at most {1} allowed.",
        EX_UNKNOWN_SWITCH: "Unknown switch '{0}'.",
        EX_INVALID_ARGUMENTS: "Invalid arguments: {0}",
        EX_LOGFILE_COULD_NOT_BE_OPENED: "Log file '{0}' could not be opened.",
        EX_ABORTED: "Aborted by user.",
        HINT_UNKNOWN_SWITCH: "Run with /? to list the supported switches.",
    }
)
"""Fallback catalog used for every key the application does not define."""


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

class MessageCatalog:
    """Primary provider with fallback.

    A key missing from the primary provider is looked up in the
    fallback; a key missing from both raises
    :class:`~slashapp.exceptions.MissingMessageError`.
    """

    def __init__(
        self,
        primary: MessageProvider | None = None,
        fallback: MessageProvider = DEFAULT_MESSAGES,
    ) -> None:
        self.primary = primary
        self.fallback = fallback

    def get(self, key: str) -> str:
        if self.primary is not None:
            text = self.primary.get(key)
            if text is not None:
                return text
        text = self.fallback.get(key)
        if text is None:
            raise MissingMessageError(key)
        return text

    def format(self, key: str, *args: object) -> str:
        """Look up *key* and substitute positional *args*."""
        return self.get(key).format(*args)

    def verify(self, keys: tuple[str, ...] = REQUIRED_KEYS) -> None:
        """Raise :class:`MissingMessageError` if any of *keys* cannot resolve."""
        for key in keys:
            self.get(key)
