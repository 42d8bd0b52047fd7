"""Shared pytest fixtures for labeledname tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no labeledname.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_config")``.
    """
    monkeypatch.delenv("LABELEDNAME_CONFIG", raising=False)
    monkeypatch.delenv("LABELEDNAME_RENDER__DOMAIN", raising=False)
    monkeypatch.delenv("LABELEDNAME_RENDER__INCLUDE_TYPE", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """CLI invocations reconfigure logging; put the root handlers back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
