"""Leveled, colored line output with optional log-file mirroring.

All user-visible text of a run goes through :class:`OutputSink`.  A
line is displayed only when its level is at or above the sink's
:attr:`~OutputSink.show_level`; ``ERROR`` lines go to stderr, all
others to stdout.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from slashapp.core.models import Color, ShowLevel, Stream
from slashapp.core.protocols import StyledOutput
from slashapp.infra.logfile import LogFile

LEVEL_COLORS: Final = MappingProxyType(
    {
        ShowLevel.VERBOSE: Color.GRAY,
        ShowLevel.NORMAL: Color.WHITE,
        ShowLevel.IMPORTANT: Color.YELLOW,
        ShowLevel.WARNING: Color.OLIVE,
        ShowLevel.ERROR: Color.RED,
    }
)
"""Foreground applied when a line is written without explicit colors."""


def stream_for(level: ShowLevel) -> Stream:
    return Stream.ERROR if level >= ShowLevel.ERROR else Stream.OUTPUT


class OutputSink:
    """Filter, color, route and log output lines.

    Parameters
    ----------
    styled:
        Backend that actually renders (rich, or a recorder in tests).
    show_level:
        Minimum level displayed.
    """

    def __init__(self, styled: StyledOutput, show_level: ShowLevel = ShowLevel.NORMAL) -> None:
        self.styled = styled
        self.show_level = show_level
        self.log_file: LogFile | None = None

    def is_shown(self, level: ShowLevel) -> bool:
        return level >= self.show_level

    def write_line(
        self,
        level: ShowLevel,
        text: str | None,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> None:
        """Write *text* at *level*.

        Without explicit colors the level's color from
        :data:`LEVEL_COLORS` is used on the current background.  An
        explicit color replaces the current one for this line only.
        The previous colors are restored afterwards.
        """
        if text is None or not self.is_shown(level):
            return

        stream = stream_for(level)
        old_foreground, old_background = self.styled.get_colors(stream)
        if foreground is None and background is None:
            foreground = LEVEL_COLORS[level]
        self.styled.set_colors(
            stream,
            foreground if foreground is not None else old_foreground,
            background if background is not None else old_background,
        )
        try:
            self.styled.write(stream, text)
        finally:
            self.styled.set_colors(stream, old_foreground, old_background)

        if self.log_file is not None:
            self.log_file.write(level, text)
