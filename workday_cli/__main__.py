"""Entry point for workday-cli."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from workday_cli import __version__
from workday_cli.commands import settings as settings_commands
from workday_cli.commands.status import check_command, status_command
from workday_cli.commands.watch import watch_command
from workday_cli.core.config import ConfigError, default_config_path, load_config
from workday_cli.core.state import CLIState

app = typer.Typer(
    add_completion=False,
    help="Workday progress and earnings tracker",
    invoke_without_command=True,
)


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Route log records through rich on stderr."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=verbose,
            show_path=False,
            rich_tracebacks=verbose,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no rich formatting/tables)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet output"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Initialize global CLI state."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    configure_logging(verbose=verbose, quiet=quiet)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = load_config(cfg_path)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    console = Console(
        quiet=quiet,
        no_color=plain_output,
        log_time=False,
        log_path=False,
    )
    ctx.obj = CLIState(
        json_output=(json_output and not plain_output),
        plain_output=plain_output,
        verbose=verbose,
        quiet=quiet,
        config_path=cfg_path,
        config=cfg,
        console=console,
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


# Top-level commands
app.command("status")(status_command)
app.command("watch")(watch_command)
app.command("check")(check_command)
app.add_typer(settings_commands.app, name="settings")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
