from __future__ import annotations

from pathlib import Path

import pytest

from core.domain.models import CreationOutcome


class RecordingReporter:
    """Collects outcomes instead of printing them."""

    def __init__(self) -> None:
        self.outcomes: list[CreationOutcome] = []

    def report(self, outcome: CreationOutcome) -> None:
        self.outcomes.append(outcome)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from inside an empty temporary directory."""

    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MKD_COLOR", "NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(name, raising=False)
