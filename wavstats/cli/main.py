"""CLI entrypoint for wavstats."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from wavstats import __version__
from wavstats.cli.ui import console, display_error, display_report
from wavstats.config import ScanConfig, set_verbose
from wavstats.exceptions import InvalidRootError
from wavstats.scanner import scan_directory, validate_root
from wavstats.stats import aggregate

LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    name="wavstats",
    help="Report duration statistics for every WAV file under a directory",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"wavstats {__version__}")
        raise typer.Exit()


@app.command()
def scan(
    path: Annotated[Path, typer.Argument(help="The root directory to scan for WAV files")],
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-j", min=1, help="Worker threads (default: WAVSTATS_WORKERS or automatic)"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logs")] = False,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit"),
    ] = False,
) -> None:
    """Scan PATH recursively and print WAV duration statistics."""
    set_verbose(verbose)

    try:
        root = validate_root(path)
    except InvalidRootError as exc:
        display_error(str(exc))
        raise typer.Exit(1) from exc

    config = ScanConfig.from_env()
    if workers is not None:
        config.workers = workers

    LOGGER.debug("Scanning %s with workers=%s", root, config.workers)
    results = scan_directory(root, workers=config.workers)
    stats, failures = aggregate(results)
    display_report(stats, failures)


def main() -> NoReturn:
    """Main entrypoint for wavstats CLI."""
    app()
    raise SystemExit(0)


if __name__ == "__main__":
    main()
