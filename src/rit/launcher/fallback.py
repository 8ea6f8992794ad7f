"""Try launchers in order until one succeeds.

Only the last launcher's failure is ever reported. Failures of earlier
launchers are logged at DEBUG and otherwise dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rit.launcher.base import Launcher
from rit.launcher.errors import LaunchError

logger = logging.getLogger(__name__)


class FallbackLauncher(Launcher):
    """Ordered, non-empty chain of launchers.

    The constructor takes at least one launcher, so an empty chain cannot
    be built. Use :meth:`from_sequence` when the launchers are already in a
    list.
    """

    def __init__(self, first: Launcher, *rest: Launcher) -> None:
        self._launchers: tuple[Launcher, ...] = (first, *rest)

    @classmethod
    def from_sequence(cls, launchers: Sequence[Launcher]) -> FallbackLauncher:
        """Build a chain from *launchers*. Raises ValueError if it is empty."""
        if not launchers:
            raise ValueError("FallbackLauncher requires at least one launcher")
        return cls(*launchers)

    @property
    def launchers(self) -> tuple[Launcher, ...]:
        return self._launchers

    def launch(self, name: str, args: Sequence[str]) -> None:
        *firsts, last = self._launchers
        for launcher in firsts:
            try:
                launcher.launch(name, args)
            except (LaunchError, OSError) as exc:
                logger.debug("%r failed for %r, falling back: %s", launcher, name, exc)
                continue
            return
        last.launch(name, args)

    def __repr__(self) -> str:
        inner = ", ".join(repr(launcher) for launcher in self._launchers)
        return f"FallbackLauncher({inner})"
