"""Aggregate per-file scan results into summary statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from wavstats.types import ScanFailure, ScanResult, ScanSuccess

NO_FILES_MESSAGE = "No WAV files found in the directory tree."
RULE = "=" * 20


@dataclass(frozen=True, slots=True)
class AggregateStats:
    """Statistics over successfully measured files, in seconds.

    ``average``, ``shortest`` and ``longest`` are None when no file was
    measured; they are undefined over an empty set.
    """

    file_count: int
    total: float
    average: float | None
    shortest: float | None
    longest: float | None
    error_count: int

    @property
    def is_empty(self) -> bool:
        return self.file_count == 0


def aggregate(results: Iterable[ScanResult]) -> tuple[AggregateStats, list[str]]:
    """Reduce scan results to statistics plus the failure messages.

    The reduction does not depend on the order of ``results``.
    """
    durations: list[float] = []
    failures: list[str] = []
    for result in results:
        if isinstance(result, ScanSuccess):
            durations.append(result.duration)
        elif isinstance(result, ScanFailure):
            failures.append(result.message)
        else:
            raise TypeError(f"unexpected scan result: {result!r}")

    if not durations:
        return AggregateStats(0, 0.0, None, None, None, len(failures)), failures

    # fsum is exactly rounded, so permuting the input cannot change the total
    total = math.fsum(durations)
    stats = AggregateStats(
        file_count=len(durations),
        total=total,
        average=total / len(durations),
        shortest=min(durations),
        longest=max(durations),
        error_count=len(failures),
    )
    return stats, failures


def format_duration(seconds: float) -> str:
    """Format a duration as e.g. "1h 2m 3s", dropping zero units.

    Fractions of a second are truncated. A duration under one second is "0s".
    """
    if seconds < 0:
        raise ValueError(f"duration must be non-negative, got {seconds}")

    total_seconds = int(seconds)
    if total_seconds == 0:
        return "0s"

    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs:
        parts.append(f"{secs}s")
    return " ".join(parts)


def render_summary(stats: AggregateStats) -> list[str]:
    """Lines of the statistics report, or the no-files message."""
    if stats.is_empty:
        return [NO_FILES_MESSAGE]

    if stats.average is None or stats.shortest is None or stats.longest is None:
        raise ValueError(f"non-empty stats are missing average, shortest or longest: {stats!r}")
    return [
        "",
        "WAV File Statistics:",
        RULE,
        f"Total files processed: {stats.file_count}",
        f"Total duration: {format_duration(stats.total)}",
        f"Average duration: {format_duration(stats.average)}",
        f"Shortest file: {format_duration(stats.shortest)}",
        f"Longest file: {format_duration(stats.longest)}",
        RULE,
        f"Number of errors/warnings: {stats.error_count}",
    ]


def render_warnings(failures: Iterable[str]) -> list[str]:
    """Lines of the warnings block; empty when there is nothing to report."""
    messages = list(failures)
    if not messages:
        return []
    return ["", "Warnings:", *(f"  - {message}" for message in messages)]
