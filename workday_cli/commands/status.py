"""One-shot status and workday check commands."""

from __future__ import annotations

from contextlib import nullcontext
from datetime import date, datetime
from typing import Optional

import typer
from rich.table import Table

from workday_cli.commands.common import (
    build_cache,
    build_oracle,
    get_state,
    print_json_payload,
)
from workday_cli.commands.render import render_state
from workday_cli.core.refresh import RefreshLoop
from workday_cli.core.settings import settings_from_config
from workday_cli.utils.dates import iter_days, parse_date, parse_time, validate_date, validate_time
from workday_cli.utils.formatting import (
    classification_to_payload,
    state_to_payload,
    status_text,
    tooltip_text,
)


def status_command(
    ctx: typer.Context,
    on_date: Optional[str] = typer.Option(None, "--date", help="Date to evaluate (YYYY-MM-DD)", callback=validate_date),
    at: Optional[str] = typer.Option(None, "--at", help="Time of day to evaluate (HH:MM)", callback=validate_time),
) -> None:
    """Show today's progress through the work window."""
    state = get_state(ctx)
    now = datetime.now()
    today = parse_date(on_date) if on_date else now.date()
    current = parse_time(at) if at else now.time()

    settings = settings_from_config(state.config)
    loop = RefreshLoop(cache=build_cache(state), settings_provider=lambda: settings)
    currency = state.currency

    status_ctx = state.console.status("Checking workday...") if not state.plain_output else nullcontext()
    with status_ctx:
        result = loop.tick(today, current, settings)

    if state.json_output:
        print_json_payload(state, state_to_payload(result))
        return

    if state.plain_output:
        typer.echo(status_text(result, currency))
        typer.echo(tooltip_text(result, currency))
        return

    state.console.print(render_state(result, currency))


def check_command(
    ctx: typer.Context,
    day: Optional[str] = typer.Argument(None, help="Date to check (YYYY-MM-DD), defaults to today", callback=validate_date),
    days: int = typer.Option(1, "--days", min=1, max=366, help="Number of consecutive days to check"),
) -> None:
    """Classify one or more dates as working or resting days."""
    state = get_state(ctx)
    start = parse_date(day) if day else date.today()
    oracle = build_oracle(state)

    status_ctx = state.console.status("Querying holiday service...") if not state.plain_output else nullcontext()
    with status_ctx:
        results = [oracle.classify_with_metadata(item) for item in iter_days(start, days)]

    payloads = [classification_to_payload(result) for result in results]

    if state.json_output:
        print_json_payload(state, {"days": payloads})
        return

    if state.plain_output:
        typer.echo("date\tweekday\tday_type\tsource\tlabel\tname")
        for payload in payloads:
            typer.echo(
                "\t".join(
                    [
                        payload["date"],
                        payload["weekday"],
                        payload["day_type"],
                        payload["source"],
                        payload["label"] or "-",
                        payload["name"] or "-",
                    ]
                )
            )
        return

    table = Table(title=f"Workday check ({len(payloads)} days)")
    table.add_column("Date")
    table.add_column("Weekday")
    table.add_column("Day type")
    table.add_column("Source")
    table.add_column("Label")
    table.add_column("Name")
    for payload in payloads:
        style = "green" if payload["day_type"] == "working" else "grey50"
        table.add_row(
            payload["date"],
            payload["weekday"],
            f"[{style}]{payload['day_type']}[/{style}]",
            payload["source"],
            payload["label"] or "-",
            payload["name"] or "-",
        )
    state.console.print(table)
    if any(result.source == "fallback" for result in results):
        state.console.print("Holiday service unavailable for some dates; used the weekday rule.")
