"""Work settings commands."""

from __future__ import annotations

from typing import Any, Dict, Optional

import typer
from rich.table import Table

from workday_cli.commands.common import get_state, print_json_payload
from workday_cli.core.config import save_config
from workday_cli.core.progress import daily_salary
from workday_cli.core.settings import (
    SettingsError,
    WorkSettings,
    settings_from_config,
    settings_to_config,
    update_settings,
)
from workday_cli.core.state import CLIState
from workday_cli.utils.formatting import format_money, round_money

app = typer.Typer(help="Show or change work settings")


def _payload(settings: WorkSettings) -> Dict[str, Any]:
    window = settings.window
    return {
        "work_days_per_month": settings.days,
        "start_time": window.start.strftime("%H:%M"),
        "end_time": window.end.strftime("%H:%M"),
        "monthly_salary": float(round_money(settings.salary)),
        "daily_salary": float(round_money(daily_salary(settings.salary, settings.days))),
    }


def _print_settings(state: CLIState, settings: WorkSettings) -> None:
    payload = _payload(settings)
    currency = state.currency

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        for key, value in payload.items():
            typer.echo(f"{key}\t{value}")
        return

    table = Table(title="Work settings")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("Work days per month", str(payload["work_days_per_month"]))
    table.add_row("Start time", payload["start_time"])
    table.add_row("End time", payload["end_time"])
    table.add_row("Monthly salary", format_money(settings.salary, currency))
    table.add_row("Daily salary", format_money(daily_salary(settings.salary, settings.days), currency))
    state.console.print(table)


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Show the current work settings."""
    state = get_state(ctx)
    _print_settings(state, settings_from_config(state.config))


@app.command("set")
def set_command(
    ctx: typer.Context,
    days: Optional[str] = typer.Option(None, "--days", help="Work days per month (1-31)"),
    start: Optional[str] = typer.Option(None, "--start", help="Start time (HH:MM)"),
    end: Optional[str] = typer.Option(None, "--end", help="End time (HH:MM)"),
    salary: Optional[str] = typer.Option(None, "--salary", help="Monthly salary"),
) -> None:
    """Update work settings and save them to the config file."""
    state = get_state(ctx)
    if all(value is None for value in (days, start, end, salary)):
        raise typer.BadParameter("Pass at least one of --days, --start, --end, --salary")

    try:
        updated = update_settings(
            settings_from_config(state.config),
            days=days,
            start=start,
            end=end,
            salary=salary,
        )
    except SettingsError as exc:
        raise typer.BadParameter(str(exc))

    state.config = settings_to_config(state.config, updated)
    path = save_config(state.config, state.config_path)

    if state.plain_output:
        typer.echo(f"saved\t{path}")
    elif not state.json_output:
        state.console.print(f"Saved settings to {path}")
    _print_settings(state, updated)
