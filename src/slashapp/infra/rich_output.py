"""Rich-based implementation of :class:`~slashapp.core.protocols.StyledOutput`.

One :class:`rich.console.Console` per stream.  The "current colors" of
a stream are plain state kept here and turned into a
:class:`rich.style.Style` on every write, which mirrors how a console
text attribute applies to everything written after it is set.

Text is wrapped in :class:`rich.text.Text` so that square brackets in
user data are printed verbatim instead of being parsed as markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.style import Style
from rich.text import Text

from slashapp.core.models import Color, Stream


class RichStyledOutput:
    """Render colored lines to stdout and stderr through rich.

    Parameters
    ----------
    stdout, stderr:
        Consoles to write to.  Default to consoles bound to
        ``sys.stdout`` and ``sys.stderr``.  Passing explicit consoles
        (e.g. with ``file=io.StringIO()``) enables capture in tests.
    """

    def __init__(
        self,
        stdout: Console | None = None,
        stderr: Console | None = None,
    ) -> None:
        self._consoles: dict[Stream, Console] = {
            Stream.OUTPUT: stdout if stdout is not None else _default_console(stderr=False),
            Stream.ERROR: stderr if stderr is not None else _default_console(stderr=True),
        }
        self._colors: dict[Stream, tuple[Color, Color]] = {
            stream: (Color.DEFAULT, Color.DEFAULT) for stream in Stream
        }

    def console(self, stream: Stream) -> Console:
        return self._consoles[stream]

    def get_colors(self, stream: Stream) -> tuple[Color, Color]:
        return self._colors[stream]

    def set_colors(self, stream: Stream, foreground: Color, background: Color) -> None:
        self._colors[stream] = (foreground, background)

    def write(self, stream: Stream, text: str) -> None:
        foreground, background = self._colors[stream]
        style = Style(color=foreground.value, bgcolor=background.value)
        self._consoles[stream].print(Text(text, style=style), soft_wrap=True)


def _default_console(*, stderr: bool) -> Console:
    return Console(stderr=stderr, highlight=False, emoji=False)
