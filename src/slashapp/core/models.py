"""Domain models for slashapp.

The enums are immutable value types shared by every layer.  The two
dataclasses are the only mutable state the parser produces; they live
for a single :meth:`~slashapp.cli.runner.Runner.run` call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


# ---------------------------------------------------------------------------
# Output classification
# ---------------------------------------------------------------------------

class ShowLevel(IntEnum):
    """Severity of an output line.  Ordered from least to most severe."""

    VERBOSE = 0
    NORMAL = 1
    IMPORTANT = 2
    WARNING = 3
    ERROR = 4

    @property
    def label(self) -> str:
        """Display name used for log-file tags (e.g. ``"Warning"``)."""
        return self.name.capitalize()


class Color(Enum):
    """The sixteen-color console palette plus the terminal default.

    Values are the rich color names used to render each entry.
    """

    DEFAULT = "default"
    BLACK = "black"
    NAVY = "blue"
    BLUE = "bright_blue"
    GREEN = "green"
    LIME = "bright_green"
    MAROON = "red"
    RED = "bright_red"
    TEAL = "cyan"
    CYAN = "bright_cyan"
    OLIVE = "yellow"
    YELLOW = "bright_yellow"
    PURPLE = "magenta"
    MAGENTA = "bright_magenta"
    GRAY = "white"
    WHITE = "bright_white"


class Stream(Enum):
    """Destination stream of an output line."""

    OUTPUT = "stdout"
    ERROR = "stderr"


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Parameter:
    """A single parsed unit: the argument group or one switch occurrence.

    ``name`` includes the switch marker (``"/x"``).  It is ``None`` for
    the argument group, i.e. the bare values preceding the first switch.
    """

    name: str | None = None
    values: list[str] = field(default_factory=list)
    applied: bool = False

    @property
    def is_argument_group(self) -> bool:
        return not self.name

    def mark_applied(self) -> None:
        """Flag the parameter as consumed by a handler."""
        if self.applied:
            raise RuntimeError(f"parameter {self.name!r} applied twice")
        self.applied = True


@dataclass(slots=True)
class ParsedCommandLine:
    """Everything a single parse pass produced."""

    arguments: Parameter | None = None
    """The argument group, or ``None`` when no bare values were given."""

    switches: list[Parameter] = field(default_factory=list)
    """Switch occurrences in command-line order.  Duplicates are kept."""

    log_file: str | None = None
    """Path captured from the last ``!path`` directive."""
