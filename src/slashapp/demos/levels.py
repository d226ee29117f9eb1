"""Output-level demo: prints one line per show level.

Try ``slashapp-levels``, ``slashapp-levels /v`` and
``slashapp-levels /q`` to see the filter at work.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NoReturn

from slashapp.cli import runner
from slashapp.cli.runner import RunContext
from slashapp.core.messages import MappingMessageProvider
from slashapp.core.models import ShowLevel

MESSAGES = MappingMessageProvider(
    {
        "Logo": "slashapp levels demo: show level filtering and colors",
        "Syntax": "Syntax: slashapp-levels [system switches]",
        "Help": "Prints one line per show level.  Takes no arguments and no switches.",
    }
)


class LevelsApp:
    """Accepts nothing and writes a line at every level."""

    def validate_arguments(self, context: RunContext, values: Sequence[str]) -> None:
        if values:
            context.invalid_arguments("no arguments supported")

    def validate_switch(self, context: RunContext, name: str, values: Sequence[str]) -> None:
        context.unknown_switch(name)

    def run(self, context: RunContext) -> None:
        context.write_line(ShowLevel.IMPORTANT, f"Current show level is {context.show_level.label}")
        for level in ShowLevel:
            context.write_line(level, f"{level.label} output")


def main(argv: Sequence[str] | None = None) -> int:
    return runner.run(LevelsApp(), argv, messages=MESSAGES)


def cli() -> NoReturn:
    runner.cli(LevelsApp(), messages=MESSAGES)
