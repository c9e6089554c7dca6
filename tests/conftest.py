"""Shared fixtures for the shellext test suite."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings lookup at a file that does not exist.

    Keeps the operator's own ~/.config/shellext/config.yaml out of the tests.
    """
    settings_path = tmp_path / "no-settings.yaml"
    monkeypatch.setenv("SHELLEXT_CONFIG", str(settings_path))
    return settings_path
