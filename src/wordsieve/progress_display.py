"""
Rich-based progress display for long passes (trie builds, analysis).

Renders a live panel on stderr so stdout stays reserved for results.
A disabled display accepts the same calls and draws nothing, letting
callers wrap a loop unconditionally and switch the panel on with -v.
"""

import time
from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


class ProgressDisplay:
    """
    Context manager for displaying live-updating progress metrics.

    Usage:
        with ProgressDisplay("Analyzing", enabled=verbose) as progress:
            for i, word in enumerate(words):
                progress.update(analyzed=i + 1)
    """

    def __init__(
        self,
        title: str = "Progress",
        enabled: bool = True,
        update_interval: int = 1000,
        refresh_per_second: int = 10,
        console: Optional[Console] = None
    ):
        """
        Initialize a ProgressDisplay.

        Args:
            title: Title for the progress panel
            enabled: Draw nothing when False
            update_interval: Redraw every N updates
            refresh_per_second: Live refresh rate
            console: Target console (defaults to stderr)
        """
        self.title = title
        self.enabled = enabled
        self.update_interval = update_interval
        self.refresh_per_second = refresh_per_second
        self.console = console or Console(stderr=True)

        self.metrics: Dict[str, Any] = {}
        self.live: Optional[Live] = None
        self.start_time: float = 0
        self.iteration_count: int = 0
        self._primary_metric: Optional[str] = None

    def __enter__(self):
        self.start_time = time.time()
        self.metrics["Elapsed"] = 0.0
        if self.enabled:
            self.live = Live(
                self._make_panel(),
                console=self.console,
                refresh_per_second=self.refresh_per_second,
                transient=False
            )
            self.live.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.live:
            self._update_rate()
            self.live.update(self._make_panel())
            self.live.__exit__(exc_type, exc_val, exc_tb)
            self.live = None
        return False

    def update(self, **metrics):
        """Record metrics, e.g. update(loaded=1000, kept=900)."""
        self.iteration_count += 1
        self.metrics.update(metrics)

        # First metric drives the rate
        if self._primary_metric is None and metrics:
            self._primary_metric = next(iter(metrics))

        if self.live and self.iteration_count % self.update_interval == 0:
            self._update_rate()
            self.live.update(self._make_panel())

    def _update_rate(self):
        elapsed = time.time() - self.start_time
        self.metrics["Elapsed"] = elapsed
        count = self.metrics.get(self._primary_metric) if self._primary_metric else None
        if elapsed > 0 and isinstance(count, (int, float)):
            self.metrics["Rate"] = count / elapsed

    def _make_panel(self) -> Panel:
        grid = Table.grid(padding=(0, 2))
        grid.add_column(justify="left", no_wrap=True)
        grid.add_column(justify="right", no_wrap=True)

        for key, value in self.metrics.items():
            grid.add_row(
                Text(f"{key}:", style="bold grey50"),
                Text(format_metric(key, value), style="bright_cyan")
            )

        return Panel(grid, title=self.title, box=box.SIMPLE, border_style="bright_black")


def format_metric(key: str, value: Any) -> str:
    """Format a metric value for display."""
    if isinstance(value, float):
        if key == "Elapsed":
            minutes, seconds = divmod(int(value), 60)
            hours, minutes = divmod(minutes, 60)
            if hours:
                return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
            return f"{minutes:02d}:{seconds:02d}"
        if "rate" in key.lower():
            return f"{value:,.1f}/s"
        return f"{value:,.2f}"
    if isinstance(value, int):
        return f"{value:,}"
    return str(value)
