"""Default launcher composition."""

from __future__ import annotations

from rit.config.models import LauncherConfig
from rit.launcher.base import Launcher
from rit.launcher.blacklist import BlacklistLauncher
from rit.launcher.fallback import FallbackLauncher
from rit.launcher.process import ProcessLauncher
from rit.launcher.stub import StubLauncher


def get_default_launcher(config: LauncherConfig | None = None) -> Launcher:
    """Build the standard chain: blacklisted process launcher, then native stub.

    ``help`` is blacklisted by default because the base tool's own help is
    part of its top-level launcher and would describe the wrong program.
    """
    config = config or LauncherConfig()
    return FallbackLauncher(
        BlacklistLauncher(ProcessLauncher(config.base_command), config.blacklist),
        StubLauncher(),
    )
