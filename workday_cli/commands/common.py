"""Shared command helpers."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

import typer

from workday_cli.core.api import HolidayAPI
from workday_cli.core.cache import DailyWorkdayCache
from workday_cli.core.config import ConfigError, load_config, resolve_holiday_api_url
from workday_cli.core.oracle import WorkdayOracle
from workday_cli.core.refresh import SettingsProvider
from workday_cli.core.settings import WorkSettings, settings_from_config
from workday_cli.core.state import CLIState

logger = logging.getLogger(__name__)


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def build_oracle(state: CLIState) -> WorkdayOracle:
    """Create an oracle using the configured holiday API settings."""
    api_cfg = state.config.get("holiday_api", {})
    api = HolidayAPI(
        base_url=resolve_holiday_api_url(state.config),
        connect_timeout_seconds=float(api_cfg.get("connect_timeout_seconds", 5)),
        read_timeout_seconds=float(api_cfg.get("read_timeout_seconds", 5)),
        max_retries=int(api_cfg.get("max_retries", 1)),
    )
    return WorkdayOracle(api=api, diagnostics=logging.getLogger("workday_cli.oracle"))


def build_cache(state: CLIState) -> DailyWorkdayCache:
    max_days = int(state.config.get("cache", {}).get("max_days", 0) or 0)
    return DailyWorkdayCache(build_oracle(state), max_days=max_days)


def config_settings_provider(state: CLIState) -> SettingsProvider:
    """Return a provider that re-reads the ``[work]`` table on every call.

    A broken config file keeps the last good snapshot.
    """
    last_good: Dict[str, WorkSettings] = {"settings": settings_from_config(state.config)}

    def _provider() -> WorkSettings:
        try:
            config = load_config(state.config_path)
        except ConfigError as exc:
            logger.warning("Keeping previous settings: %s", exc)
            return last_good["settings"]
        last_good["settings"] = settings_from_config(config)
        return last_good["settings"]

    return _provider


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
        return
    state.console.print_json(data=payload)
