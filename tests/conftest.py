"""Shared pytest fixtures for csv2json tests."""

from __future__ import annotations

import pytest

_CONFIG_ENV_VARS = ("CSV2JSON_SEPARATOR", "CSV2JSON_PRETTY", "CSV2JSON_ENCODING")


@pytest.fixture(autouse=True)
def clear_converter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test against default converter settings."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
