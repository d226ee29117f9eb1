"""Exit-code constants used by the runner.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
Applications may return any other value in ``1..252`` through
:attr:`~slashapp.cli.runner.RunContext.return_value`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: the run completed without error."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

HELP_REQUESTED: int = 253
"""A help switch was given; help was printed and nothing was processed."""

HANDLED_ERROR: int = 254
"""A known SlashAppError was caught.  User-facing message was displayed."""

UNHANDLED_ERROR: int = 255
"""An unhandled exception escaped the application hooks."""
