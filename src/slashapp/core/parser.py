"""Command-line tokenizer: argument group, switches, and directives.

The parser is a single left-to-right pass holding one piece of state,
the *current* :class:`~slashapp.core.models.Parameter`.  Directives are
resolved in-stream:

* ``@path`` splices the lines of *path* into the token stream at that
  point (recursively).  Each line is split on whitespace with quotes
  grouping words, so a line ``/x a`` contributes the two tokens ``/x``
  and ``a``.  Backslashes are kept as typed.
* ``!path`` records *path* as the log file for the run.

Every other token either starts a new switch (when it begins with the
switch marker) or is appended to the current parameter's values.
"""

from __future__ import annotations

import logging
import os
import shlex
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from slashapp.core import messages as keys
from slashapp.core.messages import MessageCatalog
from slashapp.core.models import Parameter, ParsedCommandLine
from slashapp.exceptions import ParameterFileError

logger = logging.getLogger(__name__)

SWITCH_MARKER = "/"
PARAMETER_FILE_PREFIX = "@"
LOG_FILE_PREFIX = "!"


def read_parameter_file(path: str) -> list[str]:
    """Return the lines of the parameter file at *path*."""
    return Path(path).read_text(encoding="utf-8").splitlines()


def split_line(line: str) -> list[str]:
    """Split one parameter-file line into tokens.

    Quotes group words (``"my file.txt"``); backslashes are literal so
    Windows paths survive.  A line with an unbalanced quote, such as
    ``/title it's``, is split on whitespace only.
    """
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    lexer.escape = ""
    try:
        return list(lexer)
    except ValueError:
        return line.split()


class CommandLineParser:
    """Turn a flat argument vector into a :class:`ParsedCommandLine`.

    Parameters
    ----------
    messages:
        Catalog used to word :class:`ParameterFileError` messages.
    switch_marker:
        Prefix that marks a token as a switch name.
    read_lines:
        Callable returning the lines of a parameter file.  Any
        ``OSError`` or ``ValueError`` (including ``UnicodeDecodeError``)
        it raises is reported as an unreadable parameter file.
    """

    def __init__(
        self,
        messages: MessageCatalog | None = None,
        *,
        switch_marker: str = SWITCH_MARKER,
        read_lines: Callable[[str], list[str]] = read_parameter_file,
    ) -> None:
        if not switch_marker:
            raise ValueError("switch marker must not be empty")
        self.messages = messages if messages is not None else MessageCatalog()
        self.switch_marker = switch_marker
        self.read_lines = read_lines

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, tokens: Iterable[str]) -> ParsedCommandLine:
        """Parse *tokens* in a single pass."""
        result = ParsedCommandLine()
        current = Parameter()

        for token in self._expand(tokens, included=()):
            if token.startswith(LOG_FILE_PREFIX):
                result.log_file = token[len(LOG_FILE_PREFIX):]
                logger.debug("log file directive: %s", result.log_file)
            elif token.startswith(self.switch_marker):
                self._flush(current, result)
                current = Parameter(name=token)
            else:
                current.values.append(token)
        self._flush(current, result)

        logger.debug(
            "parsed %d argument(s) and %d switch(es)",
            len(result.arguments.values) if result.arguments else 0,
            len(result.switches),
        )
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _expand(self, tokens: Iterable[str], included: tuple[str, ...]) -> Iterator[str]:
        """Yield stripped, non-empty tokens with ``@file`` directives spliced in."""
        for raw in tokens:
            token = raw.strip()
            if not token:
                continue
            if not token.startswith(PARAMETER_FILE_PREFIX):
                yield token
                continue
            path = token[len(PARAMETER_FILE_PREFIX):]
            lines = self._load(path, included)
            try:
                yield from self._expand(lines, (*included, _identity(path)))
            except ParameterFileError as exc:
                # a nested file failed; report it as part of this one
                raise self._unreadable(path) from exc

    def _load(self, path: str, included: tuple[str, ...]) -> list[str]:
        if _identity(path) in included:
            raise ParameterFileError(
                self.messages.format(keys.EX_PARAMETER_FILE_CYCLE, path),
                path=path,
            )
        logger.debug("expanding parameter file %s", path)
        try:
            lines = self.read_lines(path)
        except (OSError, ValueError) as exc:
            raise self._unreadable(path) from exc
        tokens: list[str] = []
        for line in lines:
            tokens.extend(split_line(line))
        return tokens

    def _unreadable(self, path: str) -> ParameterFileError:
        return ParameterFileError(
            self.messages.format(keys.EX_COULD_NOT_READ_PARAMETER_FILE, path),
            path=path,
        )

    @staticmethod
    def _flush(current: Parameter, result: ParsedCommandLine) -> None:
        """Move the finished *current* parameter into *result*."""
        if not current.is_argument_group:
            result.switches.append(current)
            return
        if not current.values:
            return
        if result.arguments is not None:
            raise RuntimeError("argument group already assigned")
        result.arguments = current


def _identity(path: str) -> str:
    """Normalized key used to detect parameter files including themselves."""
    return os.path.normcase(os.path.abspath(path))
