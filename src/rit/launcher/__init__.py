"""Launcher layer: how a subcommand gets executed.

Leaves: ProcessLauncher (external binary), StubLauncher (native placeholder).
Decorators: BlacklistLauncher, FallbackLauncher.
"""

from rit.launcher.base import Launcher
from rit.launcher.blacklist import BlacklistLauncher
from rit.launcher.default import get_default_launcher
from rit.launcher.errors import (
    BadExitCodeError,
    BlacklistedError,
    LaunchError,
    NotFoundError,
)
from rit.launcher.fallback import FallbackLauncher
from rit.launcher.process import ProcessLauncher
from rit.launcher.stub import StubLauncher

__all__ = [
    "BadExitCodeError",
    "BlacklistLauncher",
    "BlacklistedError",
    "FallbackLauncher",
    "LaunchError",
    "Launcher",
    "NotFoundError",
    "ProcessLauncher",
    "StubLauncher",
    "get_default_launcher",
]
