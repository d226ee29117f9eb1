"""Recording implementation of :class:`~slashapp.core.protocols.StyledOutput`.

Used wherever a real terminal is unwanted (tests, embedding).  Every
color change and every written line is kept in order so callers can
assert on the exact level-to-color mapping and stream routing.
"""

from __future__ import annotations

from dataclasses import dataclass

from slashapp.core.models import Color, Stream


@dataclass(frozen=True, slots=True)
class RecordedLine:
    """One line as it would have appeared on a terminal."""

    stream: Stream
    text: str
    foreground: Color
    background: Color


@dataclass(frozen=True, slots=True)
class ColorChange:
    """One ``set_colors`` call."""

    stream: Stream
    foreground: Color
    background: Color


class RecordingStyledOutput:
    """A :class:`StyledOutput` spy.  Nothing is printed."""

    def __init__(
        self,
        foreground: Color = Color.DEFAULT,
        background: Color = Color.DEFAULT,
    ) -> None:
        self._colors: dict[Stream, tuple[Color, Color]] = {
            stream: (foreground, background) for stream in Stream
        }
        self.lines: list[RecordedLine] = []
        self.color_changes: list[ColorChange] = []

    def get_colors(self, stream: Stream) -> tuple[Color, Color]:
        return self._colors[stream]

    def set_colors(self, stream: Stream, foreground: Color, background: Color) -> None:
        self._colors[stream] = (foreground, background)
        self.color_changes.append(ColorChange(stream, foreground, background))

    def write(self, stream: Stream, text: str) -> None:
        foreground, background = self._colors[stream]
        self.lines.append(RecordedLine(stream, text, foreground, background))

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------

    def texts(self, stream: Stream | None = None) -> list[str]:
        """Return the written texts, optionally restricted to *stream*."""
        return [line.text for line in self.lines if stream is None or line.stream is stream]

    @property
    def output(self) -> str:
        """Everything written, joined with newlines."""
        return "\n".join(self.texts())
