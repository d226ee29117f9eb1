"""Infrastructure: the ``!file`` run log.

The log is opened in append mode so consecutive runs accumulate in one
file.  Each run is framed by a start and an end marker carrying a local
timestamp; every displayed output line is written between them with
its level tag and without any color.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TextIO

from slashapp.core.models import ShowLevel

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class LogFile:
    """An open run log.  Create instances with :meth:`open`."""

    def __init__(self, path: str, handle: TextIO) -> None:
        self.path = path
        self._handle: TextIO | None = handle

    @classmethod
    def open(cls, path: str) -> LogFile:
        """Open *path* for appending and write the start marker.

        Raises
        ------
        OSError
            When the file cannot be opened or written.
        ValueError
            When *path* is not a valid file name (an embedded NUL).
        """
        handle = open(path, "a", encoding="utf-8")
        try:
            handle.write(f"### LOG START : {_timestamp()} ###\n")
        except OSError:
            handle.close()
            raise
        logger.debug("log file %s opened", path)
        return cls(path, handle)

    @property
    def closed(self) -> bool:
        return self._handle is None

    def write(self, level: ShowLevel, text: str) -> None:
        """Append one tagged line (a no-op once closed)."""
        if self._handle is None:
            return
        self._handle.write(f"[{level.label}] {text}\n")

    def close(self) -> None:
        """Write the end marker and close the file (idempotent)."""
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        try:
            handle.write(f"### LOG END : {_timestamp()} ###\n")
        finally:
            handle.close()
        logger.debug("log file %s closed", self.path)
