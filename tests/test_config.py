from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings
from core.domain.color import ColorChoice


def test_color_defaults_to_auto():
    assert ColorChoice.default() is ColorChoice.AUTO
    assert AppSettings().color is ColorChoice.AUTO


@pytest.mark.parametrize("value,expected", [("always", ColorChoice.ALWAYS), ("never", ColorChoice.NEVER)])
def test_color_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv("MKD_COLOR", value)
    assert AppSettings().color is expected


def test_invalid_color_rejected(monkeypatch):
    monkeypatch.setenv("MKD_COLOR", "purple")
    with pytest.raises(ValidationError):
        AppSettings()


def test_console_options():
    assert ColorChoice.AUTO.console_options() == {}
    assert ColorChoice.ALWAYS.console_options() == {"force_terminal": True}
    assert ColorChoice.NEVER.console_options() == {"color_system": None}
