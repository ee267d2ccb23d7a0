"""Shared pytest fixtures for valkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from valkit.config.settings import ValkitSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ValkitSettings:
    """Default settings with no TOML file and no VALKIT_* env vars."""
    monkeypatch.delenv("VALKIT_CONFIG", raising=False)
    return ValkitSettings.from_cli(cwd=tmp_path)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory so no valkit.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes. Tests that write a ``valkit.toml`` can request ``tmp_path``
    directly (pytest deduplicates — it's the same directory).
    """
    monkeypatch.delenv("VALKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
