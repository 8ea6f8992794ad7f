"""rit: subcommand launcher for a version-control tool."""

__version__ = "0.1.0"
