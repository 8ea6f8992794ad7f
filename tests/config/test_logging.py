"""Tests for rit's log routing and the launch context carried on log lines."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from rit.cli import cli
from rit.config.logging import HANDLER_NAME, configure_logging
from rit.launcher import FallbackLauncher
from tests.conftest import FailingLauncher, RecordingLauncher


def _json_lines(text: str) -> list[dict[str, Any]]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


class TestLevels:
    def test_verbose_shows_launcher_decisions(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("rit.launcher.fallback").isEnabledFor(logging.DEBUG)

    def test_quiet_by_default(self) -> None:
        configure_logging()
        assert not logging.getLogger("rit.launcher.fallback").isEnabledFor(logging.DEBUG)
        assert logging.getLogger("rit.launcher.fallback").isEnabledFor(logging.WARNING)

    def test_other_libraries_stay_quiet_when_verbose(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("pydantic").debug("validation noise")
        assert capfd.readouterr().err == ""


class TestHandler:
    def test_reconfigure_replaces_only_rit_handler(self) -> None:
        other = logging.NullHandler()
        logging.getLogger().addHandler(other)

        configure_logging(log_json=False)
        configure_logging(log_json=True)

        handlers = logging.getLogger().handlers
        assert len([h for h in handlers if h.get_name() == HANDLER_NAME]) == 1
        assert other in handlers


class TestLaunchContext:
    def test_fallback_line_carries_bound_context(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        chain = FallbackLauncher(FailingLauncher("no binary"), RecordingLauncher())

        with structlog.contextvars.bound_contextvars(subcommand="status", base_command="git"):
            chain.launch("status", [])

        (line,) = _json_lines(capfd.readouterr().err)
        assert line["logger"] == "rit.launcher.fallback"
        assert line["level"] == "debug"
        assert "falling back" in line["event"]
        assert line["subcommand"] == "status"
        assert line["base_command"] == "git"

    def test_console_output_shows_context(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        chain = FallbackLauncher(FailingLauncher(), RecordingLauncher())

        with structlog.contextvars.bound_contextvars(subcommand="log", base_command="hg"):
            chain.launch("log", ["-n", "1"])

        err = capfd.readouterr().err
        assert "subcommand=log" in err
        assert "base_command=hg" in err

    def test_cli_binds_subcommand_and_base_command(self, spawned: list[list[str]]) -> None:
        result = CliRunner().invoke(cli, ["-v", "--log-json", "--base-command", "hg", "help"])

        assert result.exit_code == 0
        lines = _json_lines(result.stderr)
        assert any("falling back" in line["event"] for line in lines)
        assert all(line["subcommand"] == "help" for line in lines)
        assert all(line["base_command"] == "hg" for line in lines)

    def test_cli_context_does_not_leak(self, spawned: list[list[str]]) -> None:
        CliRunner().invoke(cli, ["-v", "status"])
        assert structlog.contextvars.get_contextvars() == {}
