"""Tests for the command-line tokenizer (core/parser.py).

Coverage:
* Bare values become the argument group, in order.
* Switch tokens split the stream; values attach to the preceding switch.
* Duplicated switches stay distinct.
* ``@file`` splicing (recursive, shell-like line splitting, failures, cycles).
* ``!file`` log directive.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from slashapp.core.models import Parameter
from slashapp.core.parser import CommandLineParser
from slashapp.exceptions import ErrorKind, ParameterFileError


def _switches(tokens: list[str]) -> list[tuple[str | None, list[str]]]:
    result = CommandLineParser().parse(tokens)
    return [(p.name, p.values) for p in result.switches]


# ---------------------------------------------------------------------------
# Arguments and switches
# ---------------------------------------------------------------------------

class TestArgumentsAndSwitches:
    @pytest.mark.parametrize(
        "tokens",
        [
            ["a"],
            ["a", "b", "c"],
            ["a", "", "  ", "b"],
            [" padded ", "x"],
        ],
    )
    def test_switchless_stream_is_the_argument_group(self, tokens: list[str]) -> None:
        result = CommandLineParser().parse(tokens)
        expected = [t.strip() for t in tokens if t.strip()]
        assert result.arguments is not None
        assert result.arguments.name is None
        assert result.arguments.values == expected
        assert result.switches == []

    def test_empty_input_has_no_argument_group(self) -> None:
        result = CommandLineParser().parse([])
        assert result.arguments is None
        assert result.switches == []
        assert result.log_file is None

    def test_switch_values_attach_to_preceding_switch(self) -> None:
        result = CommandLineParser().parse(["/x", "a", "b", "/y", "c"])
        assert result.arguments is None
        assert [(p.name, p.values) for p in result.switches] == [
            ("/x", ["a", "b"]),
            ("/y", ["c"]),
        ]

    def test_arguments_precede_switches(self) -> None:
        result = CommandLineParser().parse(["f1", "f2", "/p", "a", "b", "/c"])
        assert result.arguments == Parameter(None, ["f1", "f2"])
        assert [(p.name, p.values) for p in result.switches] == [
            ("/p", ["a", "b"]),
            ("/c", []),
        ]

    def test_duplicate_switches_are_kept_distinct(self) -> None:
        assert _switches(["/x", "1", "/x", "2", "/x"]) == [
            ("/x", ["1"]),
            ("/x", ["2"]),
            ("/x", []),
        ]

    def test_switch_names_keep_their_case(self) -> None:
        assert _switches(["/Exclude", "a"]) == [("/Exclude", ["a"])]

    def test_parameters_start_unapplied(self) -> None:
        result = CommandLineParser().parse(["a", "/x"])
        assert result.arguments is not None
        assert not result.arguments.applied
        assert not result.switches[0].applied

    def test_custom_switch_marker(self) -> None:
        result = CommandLineParser(switch_marker="-").parse(["a", "-x", "/b"])
        assert result.arguments is not None
        assert result.arguments.values == ["a"]
        assert [(p.name, p.values) for p in result.switches] == [("-x", ["/b"])]

    def test_empty_switch_marker_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            CommandLineParser(switch_marker="")


# ---------------------------------------------------------------------------
# Log-file directive
# ---------------------------------------------------------------------------

class TestLogFileDirective:
    def test_log_file_is_captured_not_stored(self) -> None:
        result = CommandLineParser().parse(["!run.log", "foo"])
        assert result.log_file == "run.log"
        assert result.arguments is not None
        assert result.arguments.values == ["foo"]

    def test_last_log_directive_wins(self) -> None:
        result = CommandLineParser().parse(["!a.log", "/x", "!b.log", "v"])
        assert result.log_file == "b.log"
        assert [(p.name, p.values) for p in result.switches] == [("/x", ["v"])]


# ---------------------------------------------------------------------------
# Parameter files
# ---------------------------------------------------------------------------

class TestParameterFiles:
    def test_file_expansion_matches_direct_tokens(self, write_file) -> None:
        path = write_file("params.txt", "/x a\n")
        assert _switches([f"@{path}"]) == _switches(["/x", "a"])

    def test_lines_are_spliced_in_place(self, write_file) -> None:
        path = write_file("params.txt", "b\n\n/y c\n")
        result = CommandLineParser().parse(["a", f"@{path}", "d", "/z"])
        assert result.arguments is not None
        assert result.arguments.values == ["a", "b"]
        assert [(p.name, p.values) for p in result.switches] == [
            ("/y", ["c", "d"]),
            ("/z", []),
        ]

    def test_quoted_values_keep_spaces(self, write_file) -> None:
        path = write_file("params.txt", '/exclude "my file.txt" other\n')
        assert _switches([f"@{path}"]) == [("/exclude", ["my file.txt", "other"])]

    def test_nested_files_expand_recursively(self, write_file) -> None:
        inner = write_file("inner.txt", "/y c\n")
        outer = write_file("outer.txt", f"/x a\n@{inner}\n")
        assert _switches([f"@{outer}"]) == [("/x", ["a"]), ("/y", ["c"])]

    def test_log_directive_inside_file(self, write_file) -> None:
        path = write_file("params.txt", "!from-file.log\nvalue\n")
        result = CommandLineParser().parse([f"@{path}"])
        assert result.log_file == "from-file.log"
        assert result.arguments is not None
        assert result.arguments.values == ["value"]

    def test_missing_file_raises_with_cause(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "nope.txt")
        with pytest.raises(ParameterFileError) as exc_info:
            CommandLineParser().parse([f"@{missing}"])
        err = exc_info.value
        assert err.path == missing
        assert err.kind is ErrorKind.PARAMETER_FILE_UNREADABLE
        assert missing in str(err)
        assert isinstance(err.__cause__, OSError)

    def test_backslashes_are_kept(self, write_file) -> None:
        path = write_file("params.txt", "/x C:\\data\\in.txt\n")
        assert _switches([f"@{path}"]) == _switches(["/x", "C:\\data\\in.txt"])
        assert _switches([f"@{path}"]) == [("/x", ["C:\\data\\in.txt"])]

    def test_hash_is_an_ordinary_character(self, write_file) -> None:
        path = write_file("params.txt", "/tag #1 a#b\n")
        assert _switches([f"@{path}"]) == [("/tag", ["#1", "a#b"])]

    def test_unbalanced_quote_splits_on_whitespace(self, write_file) -> None:
        path = write_file("params.txt", "/title it's done\n/y\n")
        assert _switches([f"@{path}"]) == [("/title", ["it's", "done"]), ("/y", [])]

    def test_nested_failure_names_outer_file(self, write_file, tmp_path: Path) -> None:
        missing = str(tmp_path / "inner.txt")
        outer = write_file("outer.txt", f"/x\n@{missing}\n")
        with pytest.raises(ParameterFileError) as exc_info:
            CommandLineParser().parse([f"@{outer}"])
        err = exc_info.value
        assert err.path == str(outer)
        assert isinstance(err.__cause__, ParameterFileError)
        assert err.__cause__.path == missing
        assert isinstance(err.__cause__.__cause__, OSError)

    def test_self_including_file_is_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "loop.txt"
        path.write_text(f"a\n@{path}\n", encoding="utf-8")
        with pytest.raises(ParameterFileError) as exc_info:
            CommandLineParser().parse([f"@{path}"])
        assert "includes itself" in str(exc_info.value.__cause__)

    def test_reader_value_error_is_unreadable(self) -> None:
        def _undecodable(path: str) -> list[str]:
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

        with pytest.raises(ParameterFileError) as exc_info:
            CommandLineParser(read_lines=_undecodable).parse(["@virtual"])
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_same_file_may_be_included_twice_side_by_side(self, write_file) -> None:
        path = write_file("params.txt", "/x\n")
        assert _switches([f"@{path}", f"@{path}"]) == [("/x", []), ("/x", [])]

    def test_injected_reader(self) -> None:
        files = {"virtual": ["/x a", "/y"]}
        parser = CommandLineParser(read_lines=lambda path: files[path])
        result = parser.parse(["@virtual"])
        assert [(p.name, p.values) for p in result.switches] == [("/x", ["a"]), ("/y", [])]
