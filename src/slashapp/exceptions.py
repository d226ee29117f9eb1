"""Custom exception hierarchy for slashapp.

Two families live here.  :class:`SlashAppError` covers every *handled*
condition: bad user input that the runner reports with a clean message
and exit code 254.  :class:`ConfigurationError` covers deployment
defects (missing message resources, a second runner in one process);
those are never caught by the runner's error boundary.

Hierarchy
---------
SlashAppError
├── InvalidArgumentCountError
├── UnknownSwitchError
├── InvalidArgumentsError
├── ParameterFileError
└── LogFileError

ConfigurationError
├── MissingMessageError
└── DuplicateInstanceError
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Machine-readable classification of a handled error."""

    INVALID_ARGUMENT_COUNT = "invalid-argument-count"
    UNKNOWN_SWITCH = "unknown-switch"
    INVALID_ARGUMENTS = "invalid-arguments"
    PARAMETER_FILE_UNREADABLE = "parameter-file-unreadable"
    LOG_FILE_UNOPENABLE = "log-file-unopenable"


class SlashAppError(Exception):
    """Base exception for all handled slashapp errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the runner's error boundary can render a clean
    message without leaking a traceback.  Underlying causes are chained
    with ``raise ... from`` and printed innermost first.
    """

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENTS

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

    @property
    def message(self) -> str:
        return str(self)


# --- Argument validation ----------------------------------------------------

class InvalidArgumentCountError(SlashAppError):
    """Raised when a switch or the argument group has too few or too many values."""

    kind = ErrorKind.INVALID_ARGUMENT_COUNT


class UnknownSwitchError(SlashAppError):
    """Raised when the application does not recognize a switch."""

    kind = ErrorKind.UNKNOWN_SWITCH

    def __init__(self, message: str, *, switch: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.switch: str = switch


class InvalidArgumentsError(SlashAppError):
    """Raised when the application rejects its positional arguments."""

    kind = ErrorKind.INVALID_ARGUMENTS


# --- Files ------------------------------------------------------------------

class ParameterFileError(SlashAppError):
    """Raised when an ``@file`` directive cannot be expanded."""

    kind = ErrorKind.PARAMETER_FILE_UNREADABLE

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path: str = path


class LogFileError(SlashAppError):
    """Raised when the ``!file`` log target cannot be opened."""

    kind = ErrorKind.LOG_FILE_UNOPENABLE

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path: str = path


# --- Deployment defects -----------------------------------------------------

class ConfigurationError(Exception):
    """Raised for defects in how an application is assembled.

    These are not runtime conditions and are deliberately outside the
    :class:`SlashAppError` family, so the runner lets them propagate.
    """


class MissingMessageError(ConfigurationError):
    """Raised when a message key resolves in neither provider."""

    def __init__(self, key: str) -> None:
        super().__init__(f"message resource missing: {key!r}")
        self.key: str = key


class DuplicateInstanceError(ConfigurationError):
    """Raised when a second runner is created (or a runner is re-run)."""
