"""Placeholder for subcommands implemented natively inside rit."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rit.launcher.base import Launcher

logger = logging.getLogger(__name__)


class StubLauncher(Launcher):
    """Accepts every subcommand without doing any work.

    Stands in for an in-process command table; no native commands exist yet.
    """

    def launch(self, name: str, args: Sequence[str]) -> None:
        logger.debug("No native implementation for %r, treating as success", name)

    def __repr__(self) -> str:
        return "StubLauncher()"
