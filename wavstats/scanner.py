"""Filter the walked tree down to WAV files and measure each one."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable

from wavstats.exceptions import ExtractionError, RootNotADirectoryError, RootNotFoundError
from wavstats.extractor import extract_duration
from wavstats.types import ScanFailure, ScanResult, ScanSuccess
from wavstats.walker import WalkEntry, walk_tree

LOGGER = logging.getLogger(__name__)

WAV_EXTENSION = ".wav"


def validate_root(path: str | Path) -> Path:
    """Return ``path`` as a Path if it names an existing directory.

    Raises:
        RootNotFoundError: nothing exists at ``path``
        RootNotADirectoryError: ``path`` exists but is not a directory
    """
    root = Path(path)
    if not root.exists():
        raise RootNotFoundError(f"Provided path does not exist: {root}")
    if not root.is_dir():
        raise RootNotADirectoryError(f"Provided path is not a directory: {root}")
    return root


def is_wav_file(path: Path) -> bool:
    """True for regular files with a .wav extension in any letter case."""
    return path.suffix.lower() == WAV_EXTENSION and path.is_file()


def measure_file(path: Path, extractor: Callable[[Path], float] = extract_duration) -> ScanResult:
    """Run the extractor on one file and wrap the outcome.

    Never raises for per-file problems: extraction and OS errors become a
    ScanFailure so one bad file cannot stop the scan.
    """
    try:
        duration = extractor(path)
    except (ExtractionError, OSError) as exc:
        LOGGER.debug("Skipping %s: %s", path, exc)
        return ScanFailure(path=path, reason=str(exc))
    LOGGER.debug("Measured %s: %.3f s", path, duration)
    return ScanSuccess(path=path, duration=duration)


def select_wav_files(entries: Iterable[WalkEntry]) -> tuple[list[Path], list[ScanFailure]]:
    """Split walk output into WAV files to measure and traversal failures.

    Anything that is neither (directories, other extensions) is dropped.
    """
    files: list[Path] = []
    failures: list[ScanFailure] = []
    for entry in entries:
        if entry.error is not None:
            LOGGER.debug("Traversal error: %s", entry.error)
            failures.append(ScanFailure(path=None, reason=str(entry.error)))
        elif entry.path is not None and is_wav_file(entry.path):
            files.append(entry.path)
    return files, failures


def scan_directory(
    root: str | Path,
    *,
    workers: int | None = None,
    extractor: Callable[[Path], float] = extract_duration,
    walker: Callable[[Path], Iterable[WalkEntry]] = walk_tree,
) -> list[ScanResult]:
    """Measure every WAV file below ``root``.

    Returns one result per WAV file plus one failure per traversal error, in
    no particular order.

    Args:
        root: Directory to scan (not validated here, see validate_root)
        workers: Thread pool size; 1 runs in the calling thread, None uses
            the ThreadPoolExecutor default
        extractor: Callable mapping a path to a duration in seconds
        walker: Callable yielding WalkEntry items for a root
    """
    files, failures = select_wav_files(walker(Path(root)))
    LOGGER.info("Found %d WAV files under %s", len(files), root)

    measured: list[ScanResult] = []
    if workers == 1:
        measured = [measure_file(path, extractor) for path in files]
    elif files:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            measured = list(executor.map(lambda p: measure_file(p, extractor), files))

    results: list[ScanResult] = [*failures, *measured]
    LOGGER.info(
        "Scan complete: %d measured, %d failed",
        sum(isinstance(r, ScanSuccess) for r in results),
        sum(isinstance(r, ScanFailure) for r in results),
    )
    return results
