"""Copy-like demo: validates an xcopy-style command line.

Nothing is copied; the demo only reports what it was asked to do.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NoReturn

from slashapp.cli import runner
from slashapp.cli.runner import RunContext
from slashapp.core.messages import MappingMessageProvider

MESSAGES = MappingMessageProvider(
    {
        "Logo": "slashapp xcopy demo: copies nothing, explains everything",
        "Syntax": "Syntax: slashapp-xcopy <source> [<destination>] [/A | /M] [/EXCLUDE <file>...]",
        "Help": "\n".join(
            (
                "  <source>       files to copy",
                "  <destination>  target location (optional)",
                "  /A             copy only files with the archive bit set, keep the bit",
                "  /M             copy only files with the archive bit set, clear the bit",
                "  /EXCLUDE       one or more files listing names to skip",
            )
        ),
    }
)


class XCopyApp:
    """One or two positional arguments; ``/A``, ``/M`` and ``/EXCLUDE`` switches."""

    def validate_arguments(self, context: RunContext, values: Sequence[str]) -> None:
        # source is mandatory, destination optional
        context.ensure_count(values, 1, 2)

    def validate_switch(self, context: RunContext, name: str, values: Sequence[str]) -> None:
        switch = name.upper()
        if switch in ("/A", "/M"):
            context.ensure_count(values, 0, 0, name)
        elif switch == "/EXCLUDE":
            context.ensure_count(values, 1, None, name)
        else:
            context.unknown_switch(name)

    def run(self, context: RunContext) -> None:
        arguments = context.get_arguments()
        context.echo(f"about to copy the following files: {arguments[0]}")
        if len(arguments) > 1:
            context.echo(f"target is: {arguments[1]}")
        if context.has_switch("/a"):
            context.echo("only if archive bit is set, leaves the bit as is.")
        if context.has_switch("/m"):
            context.echo("only if archive bit is set, clears the bit afterwards.")
        for parameter in context.command_line.switches:
            if (parameter.name or "").upper() == "/EXCLUDE":
                context.echo(f"excluding names listed in: {', '.join(parameter.values)}")
        context.echo("Note: no harm is done.")


def main(argv: Sequence[str] | None = None) -> int:
    return runner.run(XCopyApp(), argv, messages=MESSAGES)


def cli() -> NoReturn:
    runner.cli(XCopyApp(), messages=MESSAGES)
