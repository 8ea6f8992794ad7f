"""Root CLI for rit: hand a subcommand to the default launcher chain."""

from __future__ import annotations

import click
import structlog

from rit import __version__
from rit.config.logging import configure_logging
from rit.config.settings import RitSettings
from rit.launcher import LaunchError, get_default_launcher


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.version_option(version=__version__, prog_name="rit")
@click.option("-v", "--verbose", is_flag=True, help="Show launcher decisions on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Read settings from a TOML file.")
@click.option("--base-command", default=None, help="External binary to run subcommands with.")
@click.argument("subcommand", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    base_command: str | None,
    subcommand: str | None,
    args: tuple[str, ...],
) -> None:
    """Run a version-control SUBCOMMAND through the launcher chain.

    Everything from SUBCOMMAND onward is handed to the launcher unchanged.

    \b
    Examples:
      rit status
      rit log --oneline -n 5
      rit -v --base-command hg summary
    """
    if subcommand is None:
        click.echo(ctx.get_help())
        return

    settings = RitSettings.from_cli(
        config_path=config_path,
        base_command=base_command,
        verbose=verbose,
        log_json=log_json,
    )
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    launcher = get_default_launcher(settings.launcher)
    with structlog.contextvars.bound_contextvars(
        subcommand=subcommand,
        base_command=settings.launcher.base_command,
    ):
        try:
            launcher.launch(subcommand, list(args))
        except (LaunchError, OSError) as exc:
            click.echo(f"error: {exc}", err=True)
            raise SystemExit(1) from exc
