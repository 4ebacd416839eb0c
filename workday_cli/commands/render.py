"""Rich rendering of workday states."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.text import Text

from workday_cli.core.models import RenderableState, WorkingState
from workday_cli.utils.formatting import progress_color, status_text, tooltip_text

BAR_WIDTH = 40


def render_state(state: RenderableState, currency: str) -> RenderableType:
    """Panel with a progress bar, the short label and the detail line."""
    color = progress_color(state)
    completed = state.snapshot.percent if isinstance(state, WorkingState) else 0.0
    bar = ProgressBar(
        total=100.0,
        completed=completed,
        width=BAR_WIDTH,
        complete_style=color,
        finished_style=color,
    )
    body = Group(
        bar,
        Text(status_text(state, currency), style=f"bold {color}"),
        Text(tooltip_text(state, currency), style="dim"),
    )
    return Panel(body, title=f"Workday {state.day.isoformat()}", expand=False)
