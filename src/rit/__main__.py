"""Allow ``python -m rit``."""

from rit.cli import cli

if __name__ == "__main__":
    cli()
