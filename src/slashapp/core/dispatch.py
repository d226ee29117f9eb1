"""Switch dispatch: framework switches first, then the application's.

The parsed switches are partitioned once into *special* switches (the
fixed framework vocabulary, matched case-sensitively) and *application*
switches.  Each partition is processed exactly once, in command-line
order, and every processed :class:`~slashapp.core.models.Parameter` is
marked applied.

The helpers :func:`ensure_count`, :func:`unknown_switch` and
:func:`invalid_arguments` are meant for the application hooks; they
are also exposed on :class:`~slashapp.cli.runner.RunContext`, which
binds them to the run's message catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, NoReturn, Protocol

from slashapp.core import messages as keys
from slashapp.core.messages import MessageCatalog
from slashapp.core.models import Parameter, ShowLevel
from slashapp.core.protocols import Application
from slashapp.exceptions import (
    InvalidArgumentCountError,
    InvalidArgumentsError,
    UnknownSwitchError,
)

if TYPE_CHECKING:
    from slashapp.cli.runner import RunContext

logger = logging.getLogger(__name__)

HELP: Final = "help"
VERBOSE: Final = "verbose"
QUIET: Final = "quiet"
NOLOGO: Final = "nologo"

SPECIAL_SWITCHES: Final = MappingProxyType(
    {
        "/?": HELP,
        "/h": HELP,
        "/help": HELP,
        "/v": VERBOSE,
        "/verbose": VERBOSE,
        "/q": QUIET,
        "/quiet": QUIET,
        "/nologo": NOLOGO,
    }
)
"""Framework switch names (exact, case-sensitive) mapped to their action."""


class SpecialSwitchState(Protocol):
    """The slice of run state that special switches may change."""

    help_wanted: bool
    show_logo: bool
    show_level: ShowLevel


# ---------------------------------------------------------------------------
# Partitioning
# ---------------------------------------------------------------------------

def partition(
    switches: Sequence[Parameter],
) -> tuple[list[Parameter], list[Parameter]]:
    """Split *switches* into ``(special, application)``, preserving order."""
    special: list[Parameter] = []
    application: list[Parameter] = []
    for parameter in switches:
        if parameter.name in SPECIAL_SWITCHES:
            special.append(parameter)
        else:
            application.append(parameter)
    return special, application


# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------

def apply_special_switches(
    state: SpecialSwitchState,
    switches: Sequence[Parameter],
) -> None:
    """Apply framework switches to *state*.

    Names outside :data:`SPECIAL_SWITCHES` are left untouched so they
    fall through to the application pass.
    """
    for parameter in switches:
        if parameter.applied:
            continue
        action = SPECIAL_SWITCHES.get(parameter.name or "")
        if action is None:
            continue
        if action == HELP:
            state.help_wanted = True
        elif action == VERBOSE:
            state.show_level = ShowLevel.VERBOSE
        elif action == QUIET:
            state.show_level = ShowLevel.WARNING
        elif action == NOLOGO:
            state.show_logo = False
        parameter.mark_applied()
        logger.debug("applied special switch %s", parameter.name)


def apply_application_switches(
    application: Application,
    context: RunContext,
    switches: Sequence[Parameter],
) -> None:
    """Hand every not-yet-applied switch to ``application.validate_switch``."""
    for parameter in switches:
        if parameter.applied:
            continue
        name = parameter.name or ""
        application.validate_switch(context, name, tuple(parameter.values))
        parameter.mark_applied()
        logger.debug("applied application switch %s", name)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def ensure_count(
    values: Sequence[str] | None,
    minimum: int,
    maximum: int | None,
    label: str | None = None,
    *,
    messages: MessageCatalog | None = None,
) -> None:
    """Check that *values* holds between *minimum* and *maximum* entries.

    ``maximum=None`` means no upper bound.  The error message names
    *label* (``"arguments"`` when unset) and the violated bound.

    Raises
    ------
    InvalidArgumentCountError
        When *values* is ``None``, too short, or too long.
    """
    catalog = messages if messages is not None else MessageCatalog()
    name = label if label is not None else "arguments"
    if values is None:
        raise InvalidArgumentCountError(catalog.format(keys.EX_INVALID_ARGUMENTS_NULL, name))
    if len(values) < minimum:
        raise InvalidArgumentCountError(
            catalog.format(keys.EX_INVALID_ARGUMENTS_MIN, name, minimum)
        )
    if maximum is not None and len(values) > maximum:
        raise InvalidArgumentCountError(
            catalog.format(keys.EX_INVALID_ARGUMENTS_MAX, name, maximum)
        )


def unknown_switch(name: str, *, messages: MessageCatalog | None = None) -> NoReturn:
    """Reject switch *name*.  Always raises :class:`UnknownSwitchError`."""
    catalog = messages if messages is not None else MessageCatalog()
    raise UnknownSwitchError(
        catalog.format(keys.EX_UNKNOWN_SWITCH, name),
        switch=name,
        hint=catalog.get(keys.HINT_UNKNOWN_SWITCH),
    )


def invalid_arguments(message: str, *, messages: MessageCatalog | None = None) -> NoReturn:
    """Reject the positional arguments.  Always raises :class:`InvalidArgumentsError`."""
    catalog = messages if messages is not None else MessageCatalog()
    raise InvalidArgumentsError(catalog.format(keys.EX_INVALID_ARGUMENTS, message))
