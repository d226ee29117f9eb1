"""Infrastructure layer: terminals and files.

Rules
-----
* No imports from ``cli``.
* Adapters implement the protocols in :mod:`slashapp.core.protocols`;
  they never decide *what* to print, only *how*.
"""

from slashapp.infra.logfile import LogFile
from slashapp.infra.recording_output import ColorChange, RecordedLine, RecordingStyledOutput
from slashapp.infra.rich_output import RichStyledOutput

__all__: list[str] = [
    "ColorChange",
    "LogFile",
    "RecordedLine",
    "RecordingStyledOutput",
    "RichStyledOutput",
]
