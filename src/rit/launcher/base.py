"""The launcher contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class Launcher(ABC):
    """Attempts to run a named subcommand.

    ``launch`` returns None when the subcommand ran and reported success,
    and raises :class:`~rit.launcher.errors.LaunchError` (or ``OSError``
    for opaque spawn failures) otherwise. Side effects belong to the
    concrete launcher.
    """

    @abstractmethod
    def launch(self, name: str, args: Sequence[str]) -> None:
        """Run *name* with *args*, passed through verbatim and in order."""
