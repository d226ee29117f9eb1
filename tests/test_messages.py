"""Tests for message lookup with fallback (core/messages.py)."""

from __future__ import annotations

import pytest

from slashapp.core import messages as keys
from slashapp.core.messages import DEFAULT_MESSAGES, MappingMessageProvider, MessageCatalog
from slashapp.exceptions import MissingMessageError


class TestMappingMessageProvider:
    def test_unknown_key_is_none(self) -> None:
        assert MappingMessageProvider({}).get("Logo") is None

    def test_copy_is_isolated_from_source(self) -> None:
        source = {"Logo": "one"}
        provider = MappingMessageProvider(source)
        source["Logo"] = "two"
        assert provider.get("Logo") == "one"


class TestDefaultCatalog:
    @pytest.mark.parametrize(
        "key",
        [
            keys.LOGO,
            keys.SYNTAX,
            keys.SYSTEM_PARAMETERS,
            keys.HELP,
            keys.ERROR,
            keys.EX_COULD_NOT_READ_PARAMETER_FILE,
            keys.EX_PARAMETER_FILE_CYCLE,
            keys.EX_INVALID_ARGUMENTS_NULL,
            keys.EX_INVALID_ARGUMENTS_MIN,
            keys.EX_INVALID_ARGUMENTS_MAX,
            keys.EX_UNKNOWN_SWITCH,
            keys.EX_INVALID_ARGUMENTS,
            keys.EX_LOGFILE_COULD_NOT_BE_OPENED,
            keys.EX_ABORTED,
            keys.HINT_UNKNOWN_SWITCH,
        ],
    )
    def test_key_is_defined(self, key: str) -> None:
        assert key in DEFAULT_MESSAGES

    def test_system_parameters_list_every_framework_switch(self) -> None:
        text = DEFAULT_MESSAGES.get(keys.SYSTEM_PARAMETERS) or ""
        for switch in ("/?", "/help", "/verbose", "/quiet", "/nologo", "@", "!"):
            assert switch in text


class TestMessageCatalog:
    def test_primary_wins(self) -> None:
        catalog = MessageCatalog(MappingMessageProvider({"Logo": "mine"}))
        assert catalog.get("Logo") == "mine"

    def test_missing_primary_key_falls_back(self) -> None:
        catalog = MessageCatalog(MappingMessageProvider({"Logo": "mine"}))
        assert catalog.get(keys.ERROR) == DEFAULT_MESSAGES.get(keys.ERROR)

    def test_no_primary_uses_fallback(self) -> None:
        assert MessageCatalog().get(keys.LOGO) == DEFAULT_MESSAGES.get(keys.LOGO)

    def test_missing_everywhere_is_fatal(self) -> None:
        catalog = MessageCatalog(MappingMessageProvider({}), MappingMessageProvider({}))
        with pytest.raises(MissingMessageError) as exc_info:
            catalog.get("Logo")
        assert exc_info.value.key == "Logo"

    def test_verify_checks_logo(self) -> None:
        MessageCatalog().verify()
        with pytest.raises(MissingMessageError):
            MessageCatalog(None, MappingMessageProvider({})).verify()

    def test_format_substitutes_positional_arguments(self) -> None:
        assert MessageCatalog().format(keys.EX_UNKNOWN_SWITCH, "/x") == "Unknown switch '/x'."
