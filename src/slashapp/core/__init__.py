"""Core layer: models, contracts, message lookup, parsing and dispatch.

Rules
-----
* No console output; user-visible text goes through ``cli.output``.
* No imports from ``cli`` or ``infra`` at runtime.
* The only file access is reading ``@file`` parameter files.
"""

from slashapp.core.dispatch import (
    SPECIAL_SWITCHES,
    apply_application_switches,
    apply_special_switches,
    ensure_count,
    invalid_arguments,
    partition,
    unknown_switch,
)
from slashapp.core.messages import DEFAULT_MESSAGES, MappingMessageProvider, MessageCatalog
from slashapp.core.models import Color, Parameter, ParsedCommandLine, ShowLevel, Stream
from slashapp.core.parser import CommandLineParser
from slashapp.core.protocols import Application, MessageProvider, StyledOutput

__all__: list[str] = [
    "DEFAULT_MESSAGES",
    "SPECIAL_SWITCHES",
    "Application",
    "Color",
    "CommandLineParser",
    "MappingMessageProvider",
    "MessageCatalog",
    "MessageProvider",
    "Parameter",
    "ParsedCommandLine",
    "ShowLevel",
    "Stream",
    "StyledOutput",
    "apply_application_switches",
    "apply_special_switches",
    "ensure_count",
    "invalid_arguments",
    "partition",
    "unknown_switch",
]
