"""Report output for the CLI using Rich."""

from __future__ import annotations

from rich.console import Console

from wavstats.stats import AggregateStats, render_summary, render_warnings

# Verbatim text: no markup, highlighting or wrapping, so file paths and the
# fixed report layout print exactly as rendered.
console = Console(markup=False, highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, markup=False, highlight=False, emoji=False, soft_wrap=True)


def display_report(stats: AggregateStats, failures: list[str]) -> None:
    """Print the summary to stdout, then any warnings to stderr.

    Args:
        stats: Aggregated statistics for the scan
        failures: Failure messages collected during the scan
    """
    for line in render_summary(stats):
        console.print(line)

    for line in render_warnings(failures):
        err_console.print(line)


def display_error(message: str) -> None:
    err_console.print(f"Error: {message}", style="bold red")
