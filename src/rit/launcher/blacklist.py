"""Refuse specific subcommand names before delegating."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from rit.launcher.base import Launcher
from rit.launcher.errors import BlacklistedError

logger = logging.getLogger(__name__)


class BlacklistLauncher(Launcher):
    """Wraps another launcher and rejects blacklisted names.

    Matching is exact and case-sensitive. A rejected name never reaches
    the wrapped launcher.
    """

    def __init__(self, launcher: Launcher, blacklist: Iterable[str]) -> None:
        self._launcher = launcher
        self._blacklist = frozenset(blacklist)

    @property
    def launcher(self) -> Launcher:
        return self._launcher

    @property
    def blacklist(self) -> frozenset[str]:
        return self._blacklist

    def launch(self, name: str, args: Sequence[str]) -> None:
        if name in self._blacklist:
            logger.debug("Refusing blacklisted command %r", name)
            raise BlacklistedError(name)
        self._launcher.launch(name, args)

    def __repr__(self) -> str:
        return f"BlacklistLauncher({self._launcher!r}, {sorted(self._blacklist)!r})"
