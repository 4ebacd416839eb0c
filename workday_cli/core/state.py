"""Per-invocation state shared by every command through ``ctx.obj``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from workday_cli.core.constants import DEFAULT_CURRENCY


@dataclass
class CLIState:
    """Output mode, loaded config and the console commands print to."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console

    @property
    def currency(self) -> str:
        display = self.config.get("display")
        if not isinstance(display, dict):
            return DEFAULT_CURRENCY
        return str(display.get("currency") or DEFAULT_CURRENCY)

    @property
    def rich_output(self) -> bool:
        return not (self.json_output or self.plain_output)
