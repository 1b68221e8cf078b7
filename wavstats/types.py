"""Shared type definitions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ScanSuccess:
    """Duration (in seconds) read from one WAV file."""

    path: Path
    duration: float


@dataclass(frozen=True, slots=True)
class ScanFailure:
    """A file, or a directory entry, that could not be measured.

    ``path`` is None when the failure happened while walking the tree, in
    which case no file path is known.
    """

    path: Path | None
    reason: str

    @property
    def message(self) -> str:
        if self.path is None:
            return f"Failed to read entry: {self.reason}"
        return f"Failed to read WAV file {self.path}: {self.reason}"


ScanResult = ScanSuccess | ScanFailure
