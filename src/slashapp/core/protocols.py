"""Protocols (interfaces) consumed by the runner and the output sink.

These define the contracts that applications and adapters must
satisfy.  Nothing here inherits from anything: any object with the
right methods satisfies a protocol structurally.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from slashapp.core.models import Color, Stream

if TYPE_CHECKING:
    from slashapp.cli.runner import RunContext


class MessageProvider(Protocol):
    """Key to text lookup (logo, syntax, help, error messages)."""

    def get(self, key: str) -> str | None:
        """Return the text for *key*, or ``None`` when it is unknown.

        Providers must not raise for unknown keys; the fallback chain
        decides whether a miss is fatal.
        """
        ...  # pragma: no cover


class StyledOutput(Protocol):
    """Contract for the platform text-styling mechanism.

    Only :class:`~slashapp.cli.output.OutputSink` talks to this
    interface.
    """

    def get_colors(self, stream: Stream) -> tuple[Color, Color]:
        """Return the current ``(foreground, background)`` of *stream*."""
        ...  # pragma: no cover

    def set_colors(self, stream: Stream, foreground: Color, background: Color) -> None:
        """Set the colors used for subsequent writes to *stream*."""
        ...  # pragma: no cover

    def write(self, stream: Stream, text: str) -> None:
        """Write *text* plus a line break to *stream* in its current colors."""
        ...  # pragma: no cover


class Application(Protocol):
    """The three hooks a concrete command-line application implements.

    Every hook receives the :class:`~slashapp.cli.runner.RunContext`
    of the current run, which exposes the parsed command line, the
    output functions and the validation helpers.
    """

    def validate_arguments(self, context: RunContext, values: Sequence[str]) -> None:
        """Check the positional arguments (the values before the first switch).

        Raise a :class:`~slashapp.exceptions.SlashAppError` to reject them.
        """
        ...  # pragma: no cover

    def validate_switch(
        self,
        context: RunContext,
        name: str,
        values: Sequence[str],
    ) -> None:
        """Accept or reject one switch occurrence.

        Called exactly once per non-framework switch, in command-line
        order.  Unknown names should be rejected with
        :meth:`~slashapp.cli.runner.RunContext.unknown_switch`.
        """
        ...  # pragma: no cover

    def run(self, context: RunContext) -> None:
        """Do the actual work.  Only called when validation succeeded."""
        ...  # pragma: no cover
