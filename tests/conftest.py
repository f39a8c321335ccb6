"""Shared pytest fixtures for dyndomain tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from dyndomain.config.settings import DomainSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config env overrides.

    Keeps a dyndomain.toml further up the real filesystem from leaking
    into tests.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DYNDOMAIN_CONFIG", raising=False)
    for var in ("DYNDOMAIN_QUIET", "DYNDOMAIN_VERBOSE", "DYNDOMAIN_JSON_OUTPUT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> DomainSettings:
    """Default settings with config discovery pinned to an empty temp dir."""
    monkeypatch.delenv("DYNDOMAIN_CONFIG", raising=False)
    return DomainSettings.from_cli(cwd=tmp_path)
