"""Launch subcommands as a child process of the base command.

``ProcessLauncher("git").launch("status", ["-s"])`` runs ``git status -s``
with the parent's stdio and blocks until it exits. There is no timeout.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from rit.launcher.base import Launcher
from rit.launcher.errors import BadExitCodeError, NotFoundError

logger = logging.getLogger(__name__)


class ProcessLauncher(Launcher):
    """Run ``<base_command> <name> <args...>`` and map its exit status.

    Args:
        base_command: Binary to invoke, nominally ``git``. Looked up on PATH.
    """

    def __init__(self, base_command: str) -> None:
        self._base_command = base_command

    @property
    def base_command(self) -> str:
        return self._base_command

    def launch(self, name: str, args: Sequence[str]) -> None:
        argv = [self._base_command, name, *args]
        logger.debug("Spawning %s", argv)
        try:
            completed = subprocess.run(argv, check=False)
        except FileNotFoundError as exc:
            raise NotFoundError(name) from exc

        if completed.returncode != 0:
            logger.debug("%s exited with %d", argv, completed.returncode)
            raise BadExitCodeError(name, completed.returncode)

    def __repr__(self) -> str:
        return f"ProcessLauncher({self._base_command!r})"
