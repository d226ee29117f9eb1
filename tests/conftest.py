"""Shared pytest fixtures and configuration for the slashapp test suite.

Guidelines
----------
* No real terminal: output goes to :class:`RecordingStyledOutput`.
* Files are created under ``tmp_path`` only.
* Every test starts and ends without an active runner.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from slashapp.cli import runner as runner_module
from slashapp.infra.recording_output import RecordingStyledOutput


@pytest.fixture(autouse=True)
def _no_active_runner(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(runner_module, "_active", None)
    yield


@pytest.fixture
def recorder() -> RecordingStyledOutput:
    return RecordingStyledOutput()


@pytest.fixture
def write_file(tmp_path: Path):
    """Return a helper that writes *text* to ``tmp_path / name``."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
