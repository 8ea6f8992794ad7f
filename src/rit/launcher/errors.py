"""Launch failure taxonomy.

Every launcher either returns normally or raises one of these.
Spawn failures other than a missing binary surface as plain ``OSError``.
"""

from __future__ import annotations

from typing import ClassVar


class LaunchError(Exception):
    """Base class for a subcommand that could not be launched successfully."""

    description: ClassVar[str] = "The command could not be launched"

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class NotFoundError(LaunchError):
    """The base command binary does not exist on the system."""

    description = "This command was not found on the system"

    def __init__(self, name: str) -> None:
        super().__init__(name, f'The command "{name}" was not found on the system')


class BlacklistedError(LaunchError):
    """The subcommand name is refused by a blacklist."""

    description = "This command is blacklisted from this launcher"

    def __init__(self, name: str) -> None:
        super().__init__(name, f'The command "{name}" is blacklisted from this launcher')


class BadExitCodeError(LaunchError):
    """The command ran but reported failure.

    Attributes:
        returncode: Raw ``subprocess`` return code. Negative on POSIX when
            the child was killed by a signal.
        code: Exit code, or None if the child was terminated by a signal.
        signal: Signal number, or None for a normal exit.
    """

    description = "The command ran, but returned a code indicating failure"

    def __init__(self, name: str, returncode: int) -> None:
        self.returncode = returncode
        self.code: int | None = returncode if returncode >= 0 else None
        self.signal: int | None = -returncode if returncode < 0 else None
        if self.code is not None:
            outcome = f"returned error code {self.code}"
        else:
            outcome = "was terminated by a signal"
        super().__init__(name, f'The command "{name}" {outcome}.')
