"""Shared pytest fixtures and test helpers for rit tests."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Generator, Sequence
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from rit.launcher import Launcher, LaunchError


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_rit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's RIT_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("RIT_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() and bound launch context after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    rit = logging.getLogger("rit")
    rit_level = rit.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    rit.setLevel(rit_level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def spawned(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    """Capture subprocess argv instead of spawning; the child exits with 0."""
    calls: list[list[str]] = []

    def fake_run(argv: list[str], **_kwargs: Any) -> subprocess.CompletedProcess[bytes]:
        calls.append(argv)
        return subprocess.CompletedProcess(argv, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    return calls


@pytest.fixture
def python_launcher_cmd() -> str:
    """A base command that always exists: the running interpreter."""
    return sys.executable


# ---------------------------------------------------------------------------
# Fake launchers
# ---------------------------------------------------------------------------


class RecordingLauncher(Launcher):
    """Records every call, then succeeds or raises *error*."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, list[str]]] = []

    def launch(self, name: str, args: Sequence[str]) -> None:
        self.calls.append((name, list(args)))
        if self.error is not None:
            raise self.error


class FailingLauncher(RecordingLauncher):
    """Always fails with a LaunchError carrying *tag* as its message."""

    def __init__(self, tag: str = "failed") -> None:
        super().__init__(LaunchError("cmd", tag))
