"""Shared fixtures for hilite tests."""

import os

import pytest
from rich.style import Style


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep HILITE_* variables and stray .env files out of every test."""
    for name in list(os.environ):
        if name.upper().startswith("HILITE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def matched_style() -> Style:
    return Style(color="red")


@pytest.fixture
def unmatched_style() -> Style:
    return Style.null()
