"""Live-updating workday progress view."""

from __future__ import annotations

import queue
from contextlib import nullcontext
from pathlib import Path
from typing import Optional

import typer
from rich.live import Live

from workday_cli.commands.common import (
    build_cache,
    config_settings_provider,
    get_state,
    print_json_payload,
)
from workday_cli.commands.render import render_state
from workday_cli.core.config import resolve_refresh_interval
from workday_cli.core.models import RenderableState
from workday_cli.core.refresh import RefreshLoop
from workday_cli.utils.formatting import state_to_payload, status_text

POLL_SECONDS = 1.0


def _config_mtime(path: Path) -> Optional[float]:
    try:
        return path.stat().st_mtime
    except OSError:
        return None


def watch_command(
    ctx: typer.Context,
    interval: Optional[float] = typer.Option(None, "--interval", help="Seconds between refreshes"),
    count: int = typer.Option(0, "--count", min=0, help="Stop after N refreshes (0 runs until Ctrl-C)"),
) -> None:
    """Keep today's progress on screen, refreshing on a fixed interval."""
    state = get_state(ctx)
    currency = state.currency
    states: "queue.Queue[RenderableState]" = queue.Queue()

    loop = RefreshLoop(
        cache=build_cache(state),
        settings_provider=config_settings_provider(state),
        interval_seconds=resolve_refresh_interval(state.config, explicit=interval),
        on_state=states.put,
    )

    live = None
    if state.rich_output:
        live = Live(console=state.console, auto_refresh=False, transient=False)

    rendered = 0
    last_mtime = _config_mtime(state.config_path)
    loop.start()
    try:
        with live if live is not None else nullcontext():
            while count == 0 or rendered < count:
                try:
                    current = states.get(timeout=POLL_SECONDS)
                except queue.Empty:
                    mtime = _config_mtime(state.config_path)
                    if mtime != last_mtime:
                        last_mtime = mtime
                        loop.request_refresh()
                    continue

                rendered += 1
                if state.json_output:
                    print_json_payload(state, state_to_payload(current))
                elif state.plain_output:
                    typer.echo(f"{current.day.isoformat()}\t{status_text(current, currency)}")
                else:
                    live.update(render_state(current, currency), refresh=True)
    except KeyboardInterrupt:
        pass
    finally:
        loop.stop()
